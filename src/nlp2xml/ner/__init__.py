"""Heuristic named-entity recognition - no trained model."""

from nlp2xml.ner.constants import CUTOFF, LENGTH_SCORES, NOMINAL_TAGS
from nlp2xml.ner.dictionary import PartsOfSpeech, load_dictionary, parse_dictionary
from nlp2xml.ner.scorer import EntityScorer, named_entities, score, word_score

__all__ = [
    # Scoring
    "EntityScorer",
    "score",
    "word_score",
    "named_entities",
    "CUTOFF",
    "LENGTH_SCORES",
    "NOMINAL_TAGS",
    # Dictionary
    "PartsOfSpeech",
    "load_dictionary",
    "parse_dictionary",
]
