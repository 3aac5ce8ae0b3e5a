"""textcursor - stateful text cursor for hand-written lexers.

Scans a fully resident string character by character and offers
"scan until boundary" primitives: skip whitespace, read words, and
extract text up to a character, a set of characters, a string, or a
set of strings. Holds no grammar knowledge and produces no tokens.

Public API:
    Cursor - The scanner
    SENTINEL - Character reported once input is exhausted
    LineOffsetCache - Fast index -> (line, column) lookups

Exceptions:
    CursorError - Base exception class
    CursorValueError - Bad argument value (also a ValueError)
    CursorTypeError - Bad argument type (also a TypeError)

Submodules:
    textcursor.position - Byte/index conversion and line/column helpers
    textcursor.diagnostics - Error codes and structured diagnostics
"""

from .constants import SENTINEL
from .cursor import Cursor
from .diagnostics import CursorError, CursorTypeError, CursorValueError
from .position import LineOffsetCache

# Version information - populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("textcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "SENTINEL",
    "Cursor",
    "CursorError",
    "CursorTypeError",
    "CursorValueError",
    "LineOffsetCache",
    "__version__",
]
