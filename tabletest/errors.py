# tabletest/errors.py
"""Errors raised by the table parser.

Ordinary "this alternative does not match" outcomes are `Failure` values and
never surface as exceptions. What does surface:

- `TableParseError` : a non-blank, non-comment line that the row grammar
  cannot consume completely, or a table without any row.
- `CollectionError` : a capture run that cannot be folded into a list, set
  or map (null element, odd number of map captures).
"""

from __future__ import annotations
from typing import Optional


class TableParseError(SyntaxError):
    """Caller-visible parse error.

    `line` is the offending input line and `rest` the part of it the row
    grammar could not consume (both None when not raised for a single row).
    """

    def __init__(self, message: str, *, line: Optional[str] = None, rest: Optional[str] = None):
        super().__init__(message)
        self.line = line
        self.rest = rest

    def __str__(self) -> str:
        return self.msg


class CollectionError(TableParseError):
    """Captures could not be collected into a list, set or map."""
