"""Position utilities for scanned text.

Converts between the two offset units a Cursor reports (UTF-8 byte offsets
and code point indexes) and maps indexes to line/column positions for
error reporting in lexers built on top of the cursor.

Lines are delimited by LF. CRLF input works because the LF is still
present; CR-only line endings are not recognised.
"""

from bisect import bisect_right

from textcursor.constants import ENCODING
from textcursor.diagnostics import CursorValueError, ErrorTemplate, SourceSpan

__all__ = [
    "LineOffsetCache",
    "byte_length",
    "byte_to_index",
    "column_offset",
    "format_position",
    "get_line_content",
    "index_to_byte",
    "line_offset",
    "make_span",
    "utf8_width",
]


# ============================================================================
# BYTE OFFSETS
# ============================================================================


def utf8_width(char: str) -> int:
    """Number of bytes ``char`` occupies when encoded as UTF-8.

    Lone surrogates count as 3 bytes, matching the ``surrogatepass``
    error handler.

    Example:
        >>> utf8_width("a"), utf8_width("ж"), utf8_width("€"), utf8_width("👋")
        (1, 2, 3, 4)
    """
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def byte_length(source: str) -> int:
    """UTF-8 byte length of ``source``.

    This is the value Cursor.get_position() reports at end of input.

    Example:
        >>> byte_length("абеёжэюя")
        16
    """
    return len(source.encode(ENCODING, "surrogatepass"))


def index_to_byte(source: str, index: int) -> int:
    """Convert a code point index into a UTF-8 byte offset.

    Args:
        source: Source text
        index: Code point index, 0 <= index <= len(source)

    Returns:
        Byte offset of the character at ``index``

    Raises:
        CursorValueError: If index is outside the source

    Example:
        >>> index_to_byte("жук", 2)
        4
    """
    if not 0 <= index <= len(source):
        diagnostic = ErrorTemplate.position_out_of_range("index", index, len(source))
        raise CursorValueError(diagnostic)
    return byte_length(source[:index])


def byte_to_index(source: str, position: int) -> int:
    """Convert a UTF-8 byte offset into a code point index.

    Args:
        source: Source text
        position: Byte offset on a character boundary

    Returns:
        Code point index of the character starting at ``position``

    Raises:
        CursorValueError: If position is outside the source or splits
            a multi-byte character

    Example:
        >>> byte_to_index("жук", 4)
        2
    """
    total = byte_length(source)
    if not 0 <= position <= total:
        diagnostic = ErrorTemplate.position_out_of_range("byte offset", position, total)
        raise CursorValueError(diagnostic)

    offset = 0
    for index, char in enumerate(source):
        if offset == position:
            return index
        if offset > position:
            break
        offset += utf8_width(char)
    else:
        if offset == position:
            return len(source)

    raise CursorValueError(ErrorTemplate.not_a_boundary(position))


# ============================================================================
# LINES AND COLUMNS
# ============================================================================


def _check_index(source: str, index: int) -> int:
    if index < 0:
        diagnostic = ErrorTemplate.position_out_of_range("index", index, len(source))
        raise CursorValueError(diagnostic)
    return min(index, len(source))


def line_offset(source: str, index: int) -> int:
    """Get 0-based line number of a code point index.

    Indexes past the end are clamped to the source length.

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0), line_offset(source, 6), line_offset(source, 12)
        (0, 1, 2)
    """
    index = _check_index(source, index)
    return source.count("\n", 0, index)


def column_offset(source: str, index: int) -> int:
    """Get 0-based column (characters since the last LF) of an index.

    Example:
        >>> source = "hello\\nworld"
        >>> column_offset(source, 2), column_offset(source, 6)
        (2, 0)
    """
    index = _check_index(source, index)
    return index - source.rfind("\n", 0, index) - 1


def format_position(source: str, index: int, zero_based: bool = True) -> str:
    """Format an index as ``"line:col"``.

    Example:
        >>> source = "hello\\nworld\\ntest"
        >>> format_position(source, 6), format_position(source, 6, zero_based=False)
        ('1:0', '2:1')
    """
    line = line_offset(source, index)
    col = column_offset(source, index)

    if not zero_based:
        line += 1
        col += 1

    return f"{line}:{col}"


def get_line_content(source: str, line_number: int, zero_based: bool = True) -> str:
    """Extract the content of a specific line, without its line ending.

    Raises:
        CursorValueError: If line_number is outside the source

    Example:
        >>> get_line_content("hello\\nworld\\ntest", 2, zero_based=False)
        'world'
    """
    if not zero_based:
        line_number -= 1

    lines = source.split("\n")
    if not 0 <= line_number < len(lines):
        raise CursorValueError(ErrorTemplate.line_out_of_range(line_number, len(lines)))

    return lines[line_number].removesuffix("\r")


def make_span(source: str, start: int, end: int | None = None) -> SourceSpan:
    """Build a SourceSpan for the index range ``[start, end)``.

    ``end`` defaults to ``start`` (an empty span marking a point).
    """
    if end is None:
        end = start
    return SourceSpan(
        start=start,
        end=end,
        line=line_offset(source, start) + 1,
        column=column_offset(source, start) + 1,
    )


class LineOffsetCache:
    """Cached line start offsets for repeated position lookups.

    Precomputes line starts in one pass, then answers lookups by binary
    search. Prefer this over line_offset()/column_offset() when reporting
    many positions in the same source.

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.get_line_col(0), cache.get_line_col(4)
        ((1, 1), (2, 1))
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        newline = source.find("\n")
        while newline != -1:
            offsets.append(newline + 1)
            newline = source.find("\n", newline + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing LF opens an empty last line)."""
        return len(self._offsets)

    def get_line_col(self, index: int) -> tuple[int, int]:
        """Get 1-based (line, column) for a code point index.

        Out-of-range indexes are clamped into the source.
        """
        index = max(0, min(index, self._source_len))
        line = bisect_right(self._offsets, index) - 1
        return (line + 1, index - self._offsets[line] + 1)
