"""Tests for the diagnostics package."""

from __future__ import annotations

import pytest

from textcursor.diagnostics import (
    CursorError,
    CursorTypeError,
    CursorValueError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    SourceSpan,
)

# ============================================================================
# SOURCE SPAN
# ============================================================================


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid_span(self) -> None:
        """Valid spans construct."""
        span = SourceSpan(start=0, end=3, line=1, column=1)

        assert span.end == 3

    @pytest.mark.parametrize(
        ("start", "end", "line", "column", "message"),
        [
            (-1, 0, 1, 1, "start must be >= 0"),
            (5, 4, 1, 1, "must be >= start"),
            (0, 0, 0, 1, "line must be >= 1"),
            (0, 0, 1, 0, "column must be >= 1"),
        ],
    )
    def test_invalid_span(
        self, start: int, end: int, line: int, column: int, message: str
    ) -> None:
        """Invariant violations raise ValueError."""
        with pytest.raises(ValueError, match=message):
            SourceSpan(start=start, end=end, line=line, column=column)


# ============================================================================
# DIAGNOSTIC FORMATTING
# ============================================================================


class TestDiagnostic:
    """Test Diagnostic rendering."""

    def test_str_is_message(self) -> None:
        """str() gives the bare message."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_COUNT, message="bad count")

        assert str(diagnostic) == "bad count"

    def test_format_error_minimal(self) -> None:
        """Only the headline when there is no span or hint."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_SOURCE, message="nope")

        assert diagnostic.format_error() == "error[INVALID_SOURCE]: nope"

    def test_format_error_full(self) -> None:
        """Span and hint render on their own lines."""
        diagnostic = ErrorTemplate.invalid_char_delimiter(
            "ab", SourceSpan(start=3, end=3, line=1, column=4)
        )

        assert diagnostic.format_error() == (
            "error[INVALID_DELIMITER]: Delimiter must be a single character, got 'ab'\n"
            "  --> line 1, column 4\n"
            "  = help: Use get_to_str() or get_to_strs() for multi-character delimiters"
        )

    def test_format_error_escapes_newlines(self) -> None:
        """Control characters in messages stay on one line."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_DELIMITER, message="a\nb\rc")

        assert diagnostic.format_error() == "error[INVALID_DELIMITER]: a\\nb\\rc"


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test ErrorTemplate output."""

    def test_invalid_source_bytes_hint(self) -> None:
        """Bytes sources get a decoding hint."""
        diagnostic = ErrorTemplate.invalid_source(b"x")

        assert diagnostic.code == DiagnosticCode.INVALID_SOURCE
        assert "bytes" in diagnostic.message
        assert diagnostic.hint is not None
        assert "decode" in diagnostic.hint

    def test_invalid_source_other(self) -> None:
        """Other types get no hint."""
        diagnostic = ErrorTemplate.invalid_source(42)

        assert "int" in diagnostic.message
        assert diagnostic.hint is None

    def test_invalid_count(self) -> None:
        """Negative counts are reported with the value."""
        diagnostic = ErrorTemplate.invalid_count(-3)

        assert diagnostic.code == DiagnosticCode.INVALID_COUNT
        assert "-3" in diagnostic.message

    def test_position_out_of_range(self) -> None:
        """Offset unit is capitalised in the message."""
        diagnostic = ErrorTemplate.position_out_of_range("byte offset", 9, 5)

        assert diagnostic.message == "Byte offset 9 out of range (0..5)"

    def test_line_out_of_range(self) -> None:
        """Line count is included."""
        diagnostic = ErrorTemplate.line_out_of_range(7, 2)

        assert diagnostic.code == DiagnosticCode.LINE_OUT_OF_RANGE
        assert "2 lines" in diagnostic.message


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Test the exception hierarchy."""

    def test_plain_message(self) -> None:
        """Exceptions accept a plain string."""
        error = CursorError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """Exceptions keep the diagnostic and use its message."""
        diagnostic = ErrorTemplate.invalid_count(-1)
        error = CursorValueError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.message

    def test_hierarchy(self) -> None:
        """Concrete errors are both CursorError and the builtin."""
        assert issubclass(CursorValueError, CursorError)
        assert issubclass(CursorValueError, ValueError)
        assert issubclass(CursorTypeError, CursorError)
        assert issubclass(CursorTypeError, TypeError)
