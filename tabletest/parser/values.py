# tabletest/parser/values.py
"""Value model produced by the capture layer.

A cell (or an element inside a compound cell) is one of:

- None        : blank unquoted text
- ScalarValue : text plus the quote character it was written with
- ListValue   : ordered, duplicates allowed
- SetValue    : insertion ordered, duplicates suppressed
- MapValue    : insertion ordered, unique keys

All values are immutable and hashable, so sets may contain lists, sets and
maps. Equality follows the collection kind: lists compare element-wise in
order, sets and maps compare regardless of order.
"""

from __future__ import annotations
from collections.abc import Mapping, Set as AbstractSet
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'


@dataclass(frozen=True)
class ScalarValue:
    value: str
    quote: Optional[str] = None  # None | "'" | '"'

    @classmethod
    def unquoted(cls, value: str) -> "ScalarValue":
        return cls(value, None)

    @classmethod
    def single_quoted(cls, value: str) -> "ScalarValue":
        return cls(value, SINGLE_QUOTE)

    @classmethod
    def double_quoted(cls, value: str) -> "ScalarValue":
        return cls(value, DOUBLE_QUOTE)

    @property
    def is_quoted(self) -> bool:
        return self.quote is not None

    def with_quotes(self) -> str:
        """Text as authored, quotes included."""
        if not self.is_quoted:
            return self.value
        return f"{self.quote}{self.value}{self.quote}"

    def __str__(self) -> str:
        return self.value


class ListValue(tuple):
    """Ordered list of values."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"ListValue({list(self)!r})"


class SetValue(AbstractSet):
    """Immutable set that iterates in first-insertion order."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()):
        # dict keys give O(1) membership and keep the first-seen order
        self._items: Dict[Any, None] = dict.fromkeys(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"SetValue({list(self._items)!r})"


class MapValue(Mapping):
    """Immutable mapping that iterates in first-insertion order of its keys."""

    __slots__ = ("_entries",)

    def __init__(self, pairs: Iterable[Tuple[Any, Any]] = ()):
        # a repeated key overwrites the value but keeps its first position
        self._entries: Dict[Any, Any] = dict(pairs)

    def __getitem__(self, key: Any) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"MapValue({self._entries!r})"


Value = Union[None, ScalarValue, ListValue, SetValue, MapValue]


def to_text(value: Value, *, with_quotes: bool = True) -> str:
    """Render a value back in table syntax (`[a, b]`, `{a}`, `[k: v]`, `[:]`).

    None renders as the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, ScalarValue):
        return value.with_quotes() if with_quotes else value.value
    if isinstance(value, MapValue):
        if not value:
            return "[:]"
        inner = ", ".join(
            f"{to_text(k, with_quotes=with_quotes)}: {to_text(v, with_quotes=with_quotes)}"
            for k, v in value.items()
        )
        return f"[{inner}]"
    if isinstance(value, SetValue):
        return "{" + ", ".join(to_text(v, with_quotes=with_quotes) for v in value) + "}"
    if isinstance(value, ListValue):
        return "[" + ", ".join(to_text(v, with_quotes=with_quotes) for v in value) + "]"
    raise TypeError(f"not a table value: {value!r}")
