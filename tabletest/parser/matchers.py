# tabletest/parser/matchers.py
"""Primitive character matchers.

Each matcher looks only at the start of the remaining input. On a miss the
Failure carries the untouched input as its rest.
"""

from __future__ import annotations

from .combinators import Parser, at_least, either, sequence, zero_or_more
from .result import ParseResult, success, failure

WHITESPACE_CHARS = " \t\n\r\f"


def character(c: str) -> Parser:
    if len(c) != 1:
        raise ValueError(f"character() expects a single character, got {c!r}")

    def parse(text: str) -> ParseResult:
        if text.startswith(c):
            return success(c, text[1:])
        return failure(text)
    return parse


def characters(chars: str) -> Parser:
    """Any one of `chars`."""
    return either(*(character(c) for c in chars))


def string(s: str) -> Parser:
    return sequence(*(character(c) for c in s))


def character_except(*excluded: str) -> Parser:
    """Any single character not in `excluded`. Fails on empty input."""
    banned = frozenset(excluded)

    def parse(text: str) -> ParseResult:
        if not text or text[0] in banned:
            return failure(text)
        return success(text[0], text[1:])
    return parse


def whitespace() -> Parser:
    return at_least(1, characters(WHITESPACE_CHARS))


def any_whitespace() -> Parser:
    return zero_or_more(whitespace())
