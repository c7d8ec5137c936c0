"""Byte-level tokenizer.

Groups letters and digits into words, emits every other non-space byte as a
one-character punctuation token, and recognizes three multi-byte runs:

- ``...`` (ellipsis) and ``--`` (em-dash), emitted as single tokens
- ``\\n\\n`` (blank line), collapsed into one newline token

Only ASCII is classified. Any other byte falls through to single-character
punctuation, so callers see it as an unrecognized mark.

A terminal mark followed by a closing quote (``."``, ``?'``) is flipped in
place before it is read, so the sentence terminator lands after the quote
and the parser can close the quote group first.
"""

from __future__ import annotations

import string

WORD_BYTES = frozenset((string.ascii_letters + string.digits).encode("ascii"))

SPACE = ord(" ")
NEWLINE = ord("\n")
PERIOD = ord(".")
HYPHEN = ord("-")
APOSTROPHE = ord("'")
LOWER_S = ord("s")

ELLIPSIS = "..."
EM_DASH = "--"

# Checked in this order at every position.
_FLIP_PAIRS: tuple[tuple[int, int], ...] = tuple(
    (ord(mark), ord(quote)) for quote in "\"'" for mark in ".!?"
)


def _flip_terminal_quotes(buf: bytearray, i: int) -> None:
    for mark, quote in _FLIP_PAIRS:
        if i + 1 < len(buf) and buf[i] == mark and buf[i + 1] == quote:
            buf[i], buf[i + 1] = quote, mark


def _joins_word(buf: bytearray, i: int) -> bool:
    """Possessive ``'s`` and single internal hyphens do not break a word."""
    if i + 1 >= len(buf):
        return False
    if buf[i] == APOSTROPHE and buf[i + 1] == LOWER_S:
        return True
    return buf[i] == HYPHEN and buf[i + 1] in WORD_BYTES


def _is_ellipsis(buf: bytearray, i: int) -> bool:
    return i + 3 < len(buf) and buf[i] == buf[i + 1] == buf[i + 2] == PERIOD


def _is_em_dash(buf: bytearray, i: int) -> bool:
    return i + 2 < len(buf) and buf[i] == buf[i + 1] == HYPHEN


def _is_blank_line(buf: bytearray, i: int) -> bool:
    return i + 1 < len(buf) and buf[i] == buf[i + 1] == NEWLINE


def _text(buf: bytearray, start: int, end: int) -> str:
    return buf[start:end].decode("latin-1")


def tokenize(data: bytes, *, legacy_boundaries: bool = False) -> list[str]:
    """Turn raw bytes into word and punctuation tokens.

    Args:
        data: Raw input, expected to be printable ASCII plus newline/form-feed.
        legacy_boundaries: Reproduce the legacy boundary handling, where a
            word directly before ``...``/``--``/``\\n\\n`` is dropped and the
            byte after the run is always emitted on its own. Off by default.

    Returns:
        Tokens in input order. Spaces are never emitted.
    """
    buf = bytearray(data)
    if legacy_boundaries:
        return _tokenize_legacy(buf)

    tokens: list[str] = []
    start = 0
    i = 0
    while i < len(buf):
        _flip_terminal_quotes(buf, i)
        if buf[i] in WORD_BYTES or _joins_word(buf, i):
            i += 1
            continue
        if start < i:
            tokens.append(_text(buf, start, i))
        if _is_ellipsis(buf, i):
            tokens.append(ELLIPSIS)
            i += 3
        elif _is_em_dash(buf, i):
            tokens.append(EM_DASH)
            i += 2
        elif _is_blank_line(buf, i):
            i += 1
        else:
            if buf[i] != SPACE:
                tokens.append(_text(buf, i, i + 1))
            i += 1
        start = i
    if start < len(buf):
        tokens.append(_text(buf, start, len(buf)))
    return tokens


def _tokenize_legacy(buf: bytearray) -> list[str]:
    tokens: list[str] = []
    start = 0
    i = 0
    while i < len(buf):
        _flip_terminal_quotes(buf, i)
        if buf[i] in WORD_BYTES or _joins_word(buf, i):
            i += 1
            continue
        # All three checks run at the same iteration, each from where the
        # previous one left the cursor.
        if _is_ellipsis(buf, i):
            i += 3
            start = i
            tokens.append(ELLIPSIS)
        if _is_em_dash(buf, i):
            i += 2
            start = i
            tokens.append(EM_DASH)
        if _is_blank_line(buf, i):
            i += 1
            start = i
        if start < i:
            tokens.append(_text(buf, start, i))
        if buf[i] != SPACE:
            tokens.append(_text(buf, i, i + 1))
        i += 1
        start = i
    if start < len(buf):
        tokens.append(_text(buf, start, len(buf)))
    return tokens
