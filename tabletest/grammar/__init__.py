# tabletest/grammar/__init__.py
"""Table grammar built on tabletest.parser.

- row   : grammar for a single line (cells, compound values, quoting, comments)
- table : line splitting and header/data assembly
"""

from .row import parse_line
from .table import Row, Table, parse_row, parse_table
from .loader import load_table_text
