"""Scoring constants for the heuristic named-entity recognizer.

Without a tagged corpus these are best guesses, not fitted weights.
"""

CUTOFF = 0.15

STRONG = 0.9
WEAK = 0.6

ARTICLES = frozenset({"a", "A", "the", "The"})

# Indexed by word length; longer words use the last entry.
LENGTH_SCORES: tuple[float, ...] = (0.0, 0.05, 0.1, 0.15, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7)

# Part-of-speech legend of the dictionary file:
#   N noun, p plural, h noun phrase, V verb (participle), t transitive verb,
#   i intransitive verb, A adjective, v adverb, C conjunction, P preposition,
#   ! interjection, r pronoun, D definite article, I indefinite article,
#   o nominative
NOMINAL_TAGS = frozenset({"N", "h", "o"})

POS_DELIMITER = b"\xd7"
