# tabletest/parser/combinators.py
"""Parser combinators.

A parser is a plain function `str -> ParseResult`. The combinators here
compose parsers without ever looking past that contract:

- sequence(p1..pn)  : all in order, first failure wins
- either(p1..pn)    : ordered choice, first success wins (not longest match)
- at_least(n, p)    : greedy repetition, no backtracking into the loop
- zero_or_more(p)   : at_least(0, p)
- optional(p)       : never fails
- forward_ref(f)    : resolve f() at parse time, for recursive rules
"""

from __future__ import annotations
from typing import Callable, List

from .result import ParseResult, Success, Failure, success, failure

Parser = Callable[[str], ParseResult]


def sequence(*parsers: Parser) -> Parser:
    def parse(text: str) -> ParseResult:
        result: ParseResult = success("", text)
        for p in parsers:
            # bind p now; result.rest is only read when the thunk runs
            result = result.append(lambda p=p, prev=result: p(prev.rest))
            if result.is_failure:
                break
        return result
    return parse


def either(*parsers: Parser) -> Parser:
    def parse(text: str) -> ParseResult:
        for p in parsers:
            res = p(text)
            if res.is_success:
                return res
        return failure(text)
    return parse


def at_least(n: int, parser: Parser) -> Parser:
    def parse(text: str) -> ParseResult:
        consumed: List[str] = []
        captures: list = []
        cur = text
        count = 0
        while True:
            res = parser(cur)
            if isinstance(res, Failure):
                if count < n:
                    return res
                break
            consumed.append(res.consumed)
            captures.extend(res.captures)
            count += 1
            if res.rest == cur:
                # zero-width match: repeating it would never terminate
                if count < n:
                    return failure(cur)
                break
            cur = res.rest
        return Success("".join(consumed), cur, tuple(captures))
    return parse


def zero_or_more(parser: Parser) -> Parser:
    return at_least(0, parser)


def optional(parser: Parser) -> Parser:
    def parse(text: str) -> ParseResult:
        res = parser(text)
        if res.is_success:
            return res
        return success("", text)
    return parse


def forward_ref(supplier: Callable[[], Parser]) -> Parser:
    def parse(text: str) -> ParseResult:
        return supplier()(text)
    return parse
