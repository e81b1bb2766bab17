# tabletest/grammar/row.py
"""Row grammar: one table line -> captured cell values."""

# Grammar (ordered choice, brackets literal unless quoted):
#   line         := comment / row
#   comment      := ws* "//" [^\n]*
#   row          := cell ("|" cell)*
#   cell         := ws* value ws*
#   value        := map_value / list_value / set_value / single_value
#   map_value    := "[" (empty_map / pair ("," pair)*) "]"
#   empty_map    := ws* ":" ws*
#   pair         := ws* key ws* ":" element_value
#   key          := [^,\[\]:]+
#   list_value   := "[" (element_value ("," element_value)*)? "]"
#   set_value    := "{" (element_value ("," element_value)*)? "}"
#   element_value:= ws* (map_value / list_value / set_value
#                        / single_quoted / double_quoted / [^,\]}]+) ws*
#   single_value := single_quoted / double_quoted / unquoted
#   single_quoted:= "'" [^']* "'"
#   double_quoted:= '"' [^"]* '"'
#   unquoted     := ([^\[{|,] [^|]*)?
#
# map_value must be tried before list_value: both open with "[" and the choice
# commits to the first alternative that succeeds.

from __future__ import annotations

from ..parser.combinators import (
    Parser, sequence, either, at_least, zero_or_more, optional, forward_ref,
)
from ..parser.matchers import character, character_except, string, any_whitespace
from ..parser.capture import (
    capture_unquoted, capture_quoted, collect_to_list, collect_to_set, collect_to_map,
)
from ..parser.result import ParseResult
from ..parser.values import SINGLE_QUOTE, DOUBLE_QUOTE

CELL_SEPARATOR = "|"
COMMENT_START = "//"


def _entries(entry: Parser, separator: Parser) -> Parser:
    return sequence(entry, zero_or_more(sequence(separator, entry)))


# ---- line level ----

def line() -> Parser:
    return either(comment(), row())


def comment() -> Parser:
    return sequence(
        any_whitespace(),
        string(COMMENT_START),
        zero_or_more(character_except("\n")),
    )


def row() -> Parser:
    return _entries(cell(), character(CELL_SEPARATOR))


def cell() -> Parser:
    return sequence(any_whitespace(), value(), any_whitespace())


def value() -> Parser:
    return either(map_value(), list_value(), set_value(), single_value())


# ---- compound values ----

def map_value() -> Parser:
    return sequence(
        character("["),
        collect_to_map(either(_empty_map(), _entries(_pair(), character(",")))),
        character("]"),
    )


def _empty_map() -> Parser:
    return sequence(any_whitespace(), character(":"), any_whitespace())


def _pair() -> Parser:
    return sequence(_map_key(), character(":"), element_value())


def _map_key() -> Parser:
    return sequence(
        any_whitespace(),
        capture_unquoted(at_least(1, character_except(",", "[", "]", ":"))),
        any_whitespace(),
    )


def list_value() -> Parser:
    return sequence(
        character("["),
        collect_to_list(optional(_entries(element_value(), character(",")))),
        character("]"),
    )


def set_value() -> Parser:
    return sequence(
        character("{"),
        collect_to_set(optional(_entries(element_value(), character(",")))),
        character("}"),
    )


def element_value() -> Parser:
    return sequence(
        any_whitespace(),
        either(
            forward_ref(map_value),
            forward_ref(list_value),
            forward_ref(set_value),
            _single_quoted(),
            _double_quoted(),
            capture_unquoted(at_least(1, character_except(",", "]", "}"))),
        ),
        any_whitespace(),
    )


# ---- single values ----

def single_value() -> Parser:
    return either(_single_quoted(), _double_quoted(), _unquoted())


def _quoted(quote: str) -> Parser:
    return sequence(
        character(quote),
        capture_quoted(zero_or_more(character_except(quote)), quote),
        character(quote),
    )


def _single_quoted() -> Parser:
    return _quoted(SINGLE_QUOTE)


def _double_quoted() -> Parser:
    return _quoted(DOUBLE_QUOTE)


def _unquoted() -> Parser:
    return capture_unquoted(
        optional(
            sequence(
                character_except("[", "{", CELL_SEPARATOR, ","),
                zero_or_more(character_except(CELL_SEPARATOR)),
            )
        )
    )


_LINE = line()


def parse_line(text: str) -> ParseResult:
    """Run the line grammar. A comment yields a Success without captures."""
    return _LINE(text)
