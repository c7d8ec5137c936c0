"""Punctuation names and grouping delimiters (ASCII only)."""

from __future__ import annotations

from nlp2xml.structure.nodes import GroupKind

PUNCTUATION_NAMES: dict[str, str] = {
    # Multi-character tokens
    "...": "Ellipses",
    "--": "EmDash",
    # Control characters
    "\n": "CarriageReturn",
    "\f": "FormFeed",
    # Printable, non-alphanumeric
    "!": "ExclamationMark",
    '"': "DoubleQuotes",
    "#": "Number",
    "$": "Dollar",
    "%": "Percent",
    "&": "Ampersand",
    "'": "SingleQuote",
    "(": "OpenParenthesis",
    ")": "CloseParenthesis",
    "*": "Asterisk",
    "+": "Plus",
    ",": "Comma",
    "-": "Hyphen",
    ".": "Period",
    "/": "Slash",
    ":": "Colon",
    ";": "Semicolon",
    "<": "LessThan",
    "=": "Equals",
    ">": "GreaterThan",
    "?": "QuestionMark",
    "@": "AtSymbol",
    "[": "OpeningBracket",
    "\\": "Backslash",
    "]": "ClosingBracket",
    "^": "Caret",
    "_": "Underscore",
    "`": "GraveAccent",
    "{": "OpeningBrace",
    "|": "VerticalBar",
    "}": "ClosingBrace",
    "~": "Tilde",
}

PARAGRAPH_BREAKS = frozenset({"CarriageReturn", "FormFeed"})
SENTENCE_TERMINATORS = frozenset({"Period", "ExclamationMark", "QuestionMark"})

# Same mark opens and closes.
SYMMETRIC_GROUPS: dict[str, GroupKind] = {
    "DoubleQuotes": GroupKind.DOUBLE_QUOTE,
    "SingleQuote": GroupKind.SINGLE_QUOTE,
}
OPENING_GROUPS: dict[str, GroupKind] = {
    "OpenParenthesis": GroupKind.PAREN,
    "OpeningBracket": GroupKind.BRACKET,
    "OpeningBrace": GroupKind.BRACE,
}
CLOSING_GROUPS: dict[str, GroupKind] = {
    "CloseParenthesis": GroupKind.PAREN,
    "ClosingBracket": GroupKind.BRACKET,
    "ClosingBrace": GroupKind.BRACE,
}


def category_of(token: str) -> str | None:
    """Punctuation name for a token, ``None`` for words and unknown marks."""
    return PUNCTUATION_NAMES.get(token)


def unknown_category(token: str) -> str:
    return f"UNKNOWN:{ord(token[0]):x}"
