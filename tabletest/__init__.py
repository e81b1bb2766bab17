# tabletest/__init__.py
"""tabletest - parser for pipe-separated, human-authored data tables.

    >>> table = parse_table("a | b\\n1 | [x, y]")
    >>> table.headers()
    ['a', 'b']
"""

from .errors import TableParseError, CollectionError
from .parser.values import ScalarValue, ListValue, SetValue, MapValue, Value, to_text
from .grammar.table import Row, Table, parse_table
from .grammar.loader import load_table_text

__version__ = "0.1.0"
