"""Cursor exception hierarchy with structured diagnostics.

Every exception can carry a Diagnostic for rich error information.
The concrete classes also derive from the matching builtin so callers
can keep catching ValueError/TypeError.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CursorError(Exception):
    """Base exception for all textcursor errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CursorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class CursorValueError(CursorError, ValueError):
    """Argument has the right type but an unusable value.

    Examples:
    - Multi-character delimiter passed to get_to_char()
    - Negative count passed to next_count()
    - Offset or line number outside the source
    """


class CursorTypeError(CursorError, TypeError):
    """Argument has the wrong type (e.g. bytes instead of str source)."""
