"""Diagnostic system for cursor errors.

Provides structured error diagnostics with codes, spans, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import CursorError, CursorTypeError, CursorValueError
from .templates import ErrorTemplate

__all__ = [
    "CursorError",
    "CursorTypeError",
    "CursorValueError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "SourceSpan",
]
