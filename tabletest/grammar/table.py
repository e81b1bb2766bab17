# tabletest/grammar/table.py
"""Table assembly.

`parse_table(text)` splits the input into lines, drops blank and comment
lines, runs the row grammar on the rest and returns a `Table` whose first
row is the header. Every remaining line must be consumed completely; the
first line that is not aborts the whole parse with a TableParseError.
"""

from __future__ import annotations
import regex as re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from ..errors import TableParseError
from ..parser.text import is_blank
from ..parser.values import Value, to_text
from .row import parse_line

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Row:
    """Cell values of one line, optionally paired with the table's headers."""
    values: Tuple[Value, ...]
    headers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "headers", tuple(self.headers))

    @property
    def value_count(self) -> int:
        return len(self.values)

    def value(self, index: int) -> Value:
        return self.values[index]

    def header(self, index: int) -> str:
        if not self.headers or index < 0 or index >= len(self.headers):
            raise IndexError(f"Invalid header index: {index}")
        return self.headers[index]

    def with_headers(self, headers: Sequence[str]) -> "Row":
        return Row(self.values, tuple(headers))

    def skip_first_if(self, test: bool) -> "Row":
        """Drop the first column (e.g. a scenario name) when `test` holds."""
        if not test:
            return self
        return Row(self.values[1:], self.headers[1:])

    def skip_first_unless(self, test: bool) -> "Row":
        return self.skip_first_if(not test)

    def map_indexed(self, fn: Callable[[int, Value], Any]) -> List[Any]:
        return [fn(i, v) for i, v in enumerate(self.values)]

    def as_dict(self) -> Dict[str, Value]:
        """header -> value. Extra values beyond the header count are left out."""
        return dict(zip(self.headers, self.values))


@dataclass(frozen=True)
class Table:
    header: Row
    data: Tuple[Row, ...] = ()

    @classmethod
    def from_rows(cls, rows: Sequence[Row]) -> "Table":
        if not rows:
            raise TableParseError("Table must have at least one row")
        header = rows[0]
        table = cls(header, ())
        names = table.headers()
        return cls(header, tuple(r.with_headers(names) for r in rows[1:]))

    @property
    def row_count(self) -> int:
        return len(self.data)

    @property
    def column_count(self) -> int:
        return self.header.value_count

    def row(self, index: int) -> Row:
        return self.data[index]

    def headers(self, with_quotes: bool = False) -> List[str]:
        return [to_text(v, with_quotes=with_quotes) for v in self.header.values]

    def header_name(self, index: int, with_quotes: bool = False) -> str:
        return self.headers(with_quotes)[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.data)


def split_lines(text: str) -> List[str]:
    return _LINE_BREAK_RE.split(text)


def parse_row(line: str) -> Optional[Row]:
    """Parse one line. Returns None for a comment line."""
    res = parse_line(line)
    if res.is_incomplete:
        raise TableParseError(
            f"Failed to parse `{res.rest}` in row `{line}`",
            line=line, rest=res.rest,
        )
    if not res.captures:
        return None
    return Row(res.captures)


def parse_table(text: str) -> Table:
    rows: List[Row] = []
    for line in split_lines(text):
        if is_blank(line):
            continue
        r = parse_row(line)
        if r is not None:
            rows.append(r)
    return Table.from_rows(rows)
