# tabletest/parser/capture.py
"""Capture layer: turn consumed text into stored values.

Wrappers run the inner parser and, on success only, rewrite its captures.
Failures pass through untouched. The collect_* wrappers raise
CollectionError (not a Failure) when the captures break their invariants,
since that means the grammar let something through it should not have.
"""

from __future__ import annotations
from typing import Callable

from .combinators import Parser
from .result import ParseResult, Success, Failure


def _on_success(parser: Parser, fn: Callable[[Success], Success]) -> Parser:
    def parse(text: str) -> ParseResult:
        res = parser(text)
        if isinstance(res, Failure):
            return res
        return fn(res)
    return parse


def capture_unquoted(parser: Parser) -> Parser:
    return _on_success(parser, Success.capture_trimmed)


def capture_quoted(parser: Parser, quote: str) -> Parser:
    return _on_success(parser, lambda s: s.capture(quote))


def collect_to_list(parser: Parser) -> Parser:
    return _on_success(parser, Success.collect_to_list)


def collect_to_set(parser: Parser) -> Parser:
    return _on_success(parser, Success.collect_to_set)


def collect_to_map(parser: Parser) -> Parser:
    return _on_success(parser, Success.collect_to_map)
