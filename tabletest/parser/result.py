# tabletest/parser/result.py
"""Parse outcome algebra.

Every parser returns exactly one of:

- Success(consumed, rest, captures)
- Failure(rest)

`rest` is always the suffix of the input that was not consumed (for a
Failure: the input the failing parser was given). `captures` is an immutable
tuple, appended to only by building a new Success.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Tuple, Union, Any

from ..errors import CollectionError
from .text import is_blank, trim
from .values import ScalarValue, ListValue, SetValue, MapValue

Captures = Tuple[Any, ...]


@dataclass(frozen=True)
class Success:
    consumed: str
    rest: str
    captures: Captures = ()

    def __post_init__(self) -> None:
        if not isinstance(self.captures, tuple):
            object.__setattr__(self, "captures", tuple(self.captures))

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def is_incomplete(self) -> bool:
        return not is_blank(self.rest)

    def append(self, next_result: Callable[[], "ParseResult"]) -> "ParseResult":
        nxt = next_result()
        if isinstance(nxt, Failure):
            return nxt
        return Success(
            self.consumed + nxt.consumed,
            nxt.rest,
            self.captures + nxt.captures,
        )

    # ---- captures ----
    def capture(self, quote: str) -> "Success":
        """Store the consumed text verbatim with its quote character."""
        return self._with_captures(self.captures + (ScalarValue(self.consumed, quote),))

    def capture_trimmed(self) -> "Success":
        """Store the consumed text trimmed; blank text is stored as None."""
        text = trim(self.consumed)
        return self._with_captures(self.captures + (ScalarValue.unquoted(text) if text else None,))

    def collect_to_list(self) -> "Success":
        self._reject_nulls("list")
        return self._with_captures((ListValue(self.captures),))

    def collect_to_set(self) -> "Success":
        self._reject_nulls("set")
        return self._with_captures((SetValue(self.captures),))

    def collect_to_map(self) -> "Success":
        if len(self.captures) % 2 != 0:
            raise CollectionError(
                f"Must have an even number of captures to collect to map: {list(self.captures)!r}"
            )
        self._reject_nulls("map")
        it = iter(self.captures)
        return self._with_captures((MapValue(zip(it, it)),))

    def _reject_nulls(self, kind: str) -> None:
        if any(c is None for c in self.captures):
            raise CollectionError(f"Cannot collect null values to {kind}: {list(self.captures)!r}")

    def _with_captures(self, captures: Captures) -> "Success":
        return Success(self.consumed, self.rest, captures)


@dataclass(frozen=True)
class Failure:
    rest: str

    @property
    def captures(self) -> Captures:
        return ()

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def is_incomplete(self) -> bool:
        return True

    def append(self, next_result: Callable[[], "ParseResult"]) -> "ParseResult":
        # short-circuit: the next step depends on a rest we never produced
        return self


ParseResult = Union[Success, Failure]


def success(consumed: str, rest: str, captures=()) -> Success:
    return Success(consumed, rest, tuple(captures))


def failure(rest: str) -> Failure:
    return Failure(rest)
