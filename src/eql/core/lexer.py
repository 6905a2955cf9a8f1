"""
Lexer/Tokenizer for eql statements.

Converts raw text into a flat stream of classified tokens with line and
column tracking. Segmentation follows Unicode word boundaries (UAX #29) and
columns advance by grapheme clusters, not code points.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from uniseg.wordbreak import words

from .diagnostics import grapheme_length
from .errors import LexError

logger = logging.getLogger(__name__)

PUNCTUATION_CHARS = frozenset(",.!?")

# Code points with the Unicode White_Space property. str.isspace() also accepts
# the U+001C..U+001F separators, which are not whitespace here.
WHITE_SPACE_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_WHITE_SPACE = frozenset(WHITE_SPACE_CHARS)


class TokenKind(StrEnum):
    """Token kinds produced by the lexer."""

    WHITESPACE = "whitespace"
    WORD = "word"
    PUNCTUATION = "punctuation"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TokenValue:
    """
    Classified payload of a token.

    Whitespace carries no text, so every whitespace run compares equal.
    A value with empty text stands for "any token of this kind" when it
    appears in a list of expected tokens.
    """

    kind: TokenKind
    text: str = ""

    @classmethod
    def word(cls, text: str) -> TokenValue:
        return cls(TokenKind.WORD, text)

    @classmethod
    def punctuation(cls, text: str) -> TokenValue:
        return cls(TokenKind.PUNCTUATION, text)

    @classmethod
    def unknown(cls, text: str) -> TokenValue:
        return cls(TokenKind.UNKNOWN, text)

    def __str__(self) -> str:
        if not self.text:
            return f"any {self.kind} token"
        return f'{self.kind} token "{self.text}"'


WHITESPACE = TokenValue(TokenKind.WHITESPACE)


@dataclass(frozen=True)
class Token:
    """
    A single token of the source.

    Attributes:
        value: Classified payload
        line: Full physical line the token sits on, terminator included
        line_number: Line number (1-indexed)
        column_number: Column number (1-indexed, in grapheme clusters)
    """

    value: TokenValue
    line: str
    line_number: int
    column_number: int

    def __repr__(self) -> str:
        return f"Token({self.value.kind}, {self.value.text!r}, {self.line_number}:{self.column_number})"


def _is_whitespace(segment: str) -> bool:
    return all(char in _WHITE_SPACE for char in segment)


def _is_punctuation(segment: str) -> bool:
    return len(segment) == 1 and segment in PUNCTUATION_CHARS


def _is_alphabetic(segment: str) -> bool:
    return all(unicodedata.category(char).startswith("L") for char in segment)


def classify(segment: str) -> TokenValue:
    """Classify one word-boundary segment."""
    if _is_whitespace(segment):
        return WHITESPACE
    if _is_punctuation(segment):
        return TokenValue.punctuation(segment)
    if _is_alphabetic(segment):
        return TokenValue.word(segment)
    return TokenValue.unknown(segment)


def lines_with_terminator(text: str) -> Iterator[str]:
    """Split on ``\\n`` keeping each line's terminator attached to it."""
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start : end + 1]
        start = end + 1


def _segments(source: str) -> Iterator[tuple[str, str, int, int]]:
    """Yield (segment, line, line_number, column_number) for trimmed source."""
    lines = lines_with_terminator(source.strip(WHITE_SPACE_CHARS))
    for line_number, line in enumerate(lines, start=1):
        column_number = 1
        for segment in words(line):
            yield segment, line, line_number, column_number
            column_number += grapheme_length(segment)


def tokenize(source: str) -> list[Token]:
    """
    Tokenize the entire source text.

    Args:
        source: Complete input text

    Returns:
        List of tokens in source order (empty for blank input)

    Raises:
        LexError: On the first segment that is not whitespace, a single
            ``, . ! ?`` mark, or made only of letters
    """
    tokens: list[Token] = []
    for segment, line, line_number, column_number in _segments(source):
        token = Token(classify(segment), line, line_number, column_number)
        if token.value.kind is TokenKind.UNKNOWN:
            raise LexError(token)
        tokens.append(token)

    logger.debug("Tokenized %d tokens from %d characters", len(tokens), len(source))
    return tokens


def last_token_value(source: str) -> TokenValue | None:
    """
    Classify the last non-whitespace segment of ``source`` without failing.

    Used by interactive callers to decide whether accumulated input ends a
    statement yet. Returns None for blank input.
    """
    last: TokenValue | None = None
    for segment, *_ in _segments(source):
        value = classify(segment)
        if value.kind is not TokenKind.WHITESPACE:
            last = value
    return last
