"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Raise sites build a Diagnostic from a template and hand it to the
    exception class.
    """

    # =========================================================================
    # CALLER CONTRACT ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def invalid_source(source: object) -> Diagnostic:
        """Cursor constructed from something other than str.

        Args:
            source: The rejected source object

        Returns:
            Diagnostic for INVALID_SOURCE
        """
        msg = f"Cursor source must be str, got {type(source).__name__}"
        hint = None
        if isinstance(source, (bytes, bytearray)):
            hint = "Decode the bytes first, e.g. data.decode('utf-8')"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SOURCE,
            message=msg,
            hint=hint,
        )

    @staticmethod
    def invalid_char_delimiter(
        delimiter: object, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Character delimiter is not a single character.

        Args:
            delimiter: The rejected delimiter
            span: Cursor location at the failing call (optional)

        Returns:
            Diagnostic for INVALID_DELIMITER
        """
        msg = f"Delimiter must be a single character, got {delimiter!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DELIMITER,
            message=msg,
            span=span,
            hint="Use get_to_str() or get_to_strs() for multi-character delimiters",
        )

    @staticmethod
    def invalid_str_delimiter(
        delimiter: object, span: SourceSpan | None = None
    ) -> Diagnostic:
        """String delimiter is not a str.

        Args:
            delimiter: The rejected delimiter
            span: Cursor location at the failing call (optional)

        Returns:
            Diagnostic for INVALID_DELIMITER
        """
        msg = f"Delimiter must be str, got {type(delimiter).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DELIMITER,
            message=msg,
            span=span,
        )

    @staticmethod
    def invalid_count(count: int, span: SourceSpan | None = None) -> Diagnostic:
        """Negative advance count.

        Args:
            count: The rejected count
            span: Cursor location at the failing call (optional)

        Returns:
            Diagnostic for INVALID_COUNT
        """
        msg = f"Advance count must be >= 0, got {count}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_COUNT,
            message=msg,
            span=span,
            hint="The cursor only moves forward",
        )

    # =========================================================================
    # POSITION ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def position_out_of_range(kind: str, value: int, limit: int) -> Diagnostic:
        """Offset outside the source.

        Args:
            kind: Offset unit ("index" or "byte offset")
            value: The rejected offset
            limit: Largest accepted offset

        Returns:
            Diagnostic for POSITION_OUT_OF_RANGE
        """
        msg = f"{kind.capitalize()} {value} out of range (0..{limit})"
        return Diagnostic(
            code=DiagnosticCode.POSITION_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def not_a_boundary(position: int) -> Diagnostic:
        """Byte offset falls inside a multi-byte character.

        Args:
            position: The rejected byte offset

        Returns:
            Diagnostic for POSITION_OUT_OF_RANGE
        """
        msg = f"Byte offset {position} is not on a character boundary"
        return Diagnostic(
            code=DiagnosticCode.POSITION_OUT_OF_RANGE,
            message=msg,
            hint="Only offsets reported by Cursor.get_position() are valid",
        )

    @staticmethod
    def line_out_of_range(line_number: int, line_count: int) -> Diagnostic:
        """Line number outside the source.

        Args:
            line_number: The rejected 0-based line number
            line_count: Number of lines in the source

        Returns:
            Diagnostic for LINE_OUT_OF_RANGE
        """
        msg = f"Line {line_number} out of range (source has {line_count} lines)"
        return Diagnostic(
            code=DiagnosticCode.LINE_OUT_OF_RANGE,
            message=msg,
        )
