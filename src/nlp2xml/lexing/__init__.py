"""Byte-to-token lexing."""

from nlp2xml.lexing.tokenizer import EM_DASH, ELLIPSIS, WORD_BYTES, tokenize

__all__ = [
    "tokenize",
    "ELLIPSIS",
    "EM_DASH",
    "WORD_BYTES",
]
