# tabletest/parser/text.py
"""Blank-text rules shared by trimming, completeness checks and line filtering.

Blank means Unicode space, line and paragraph separators plus the ASCII
control whitespace (tab, newline, vertical tab, form feed, carriage return,
\\x1c-\\x1f). No-break spaces (U+00A0, U+2007, U+202F) are text, not blank.
The grammar's own whitespace class (matchers.WHITESPACE_CHARS) is a subset.
"""

from __future__ import annotations
import regex as re

_BLANK_CLASS = (
    r"[[\p{Zs}\p{Zl}\p{Zp}\t\n\x0b\f\r\x1c-\x1f]"
    r"--[\xa0\u2007\u202f]]"
)
_BLANK_RE = re.compile(_BLANK_CLASS + "*", flags=re.V1)
_EDGES_RE = re.compile(r"\A" + _BLANK_CLASS + "+|" + _BLANK_CLASS + r"+\Z", flags=re.V1)


def is_blank(text: str) -> bool:
    return _BLANK_RE.fullmatch(text) is not None


def trim(text: str) -> str:
    """`text` without leading and trailing blank characters."""
    return _EDGES_RE.sub("", text)
