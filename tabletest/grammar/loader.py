# tabletest/grammar/loader.py
"""Read table files from disk.

Tables are stored as UTF-8 text. Line endings are folded to "\\n" here so the
error messages raised by parse_table quote rows without stray "\\r".
"""

from __future__ import annotations
from pathlib import Path


def load_table_text(path: str) -> str:
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")
