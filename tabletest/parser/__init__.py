# tabletest/parser/__init__.py
"""Parser-combinator engine.

This package provides:
- the Success/Failure outcome algebra
- primitive character matchers
- combinators (sequence, either, repetition, optional, forward references)
- the capture layer producing scalar, list, set and map values

It knows nothing about tables; tabletest.grammar builds the row grammar on
top of it.
"""

from .values import (
    ScalarValue, ListValue, SetValue, MapValue, Value, to_text,
)
from .result import Success, Failure, ParseResult, success, failure
from .combinators import (
    Parser, sequence, either, at_least, zero_or_more, optional, forward_ref,
)
from .matchers import (
    character, characters, string, character_except, whitespace, any_whitespace,
)
from .capture import (
    capture_unquoted, capture_quoted, collect_to_list, collect_to_set, collect_to_map,
)
