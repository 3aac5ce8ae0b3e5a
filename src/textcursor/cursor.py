"""Stateful text cursor for hand-written lexers.

The cursor walks a fully resident ``str`` one character at a time and
offers "scan until boundary" primitives on top of that walk.

Design Philosophy:
    - Source is immutable, scan state is not: every scanning call mutates
      one private _ScanState cell in place, so callers only ever hold a
      plain reference to the cursor
    - EOF is a state (finished()), the current character at EOF is the
      SENTINEL space; check both when a literal space is meaningful
    - Two offset units: position is a UTF-8 byte offset, index is a code
      point index into the Python str. They always move together
    - String delimiter scans never compute offsets before the scan start:
      a missing delimiter consumes to end of input and is reported through
      last_delimiter (None) instead of an out-of-range reposition

Delimiter Asymmetry:
    get_to_char()/get_to_chars() stop AT the delimiter (not consumed).
    get_to_str()/get_to_strs() stop AFTER the delimiter (consumed).
    skip_to_str() stops AT the start of the delimiter.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from textcursor.constants import SENTINEL, WHITESPACE
from textcursor.diagnostics import (
    CursorTypeError,
    CursorValueError,
    ErrorTemplate,
    SourceSpan,
)
from textcursor.position import (
    byte_length,
    column_offset,
    line_offset,
    make_span,
    utf8_width,
)

__all__ = ["Cursor"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ScanState:
    """Mutable scan state owned by exactly one Cursor."""

    position: int = 0
    index: int = 0
    current: str = SENTINEL
    end_of_input: bool = True
    last_delimiter: str | None = None
    last_span: tuple[int, int] = (0, 0)


class Cursor:
    """Forward-only scanner over an immutable source string.

    Example:
        >>> cursor = Cursor("a   word getto[ endlol")
        >>> cursor.get_word()
        'a'
        >>> cursor.get_word()
        'word'
        >>> cursor.next()
        ' '
        >>> cursor.get_to_chars(" [")
        'getto'
        >>> cursor.get_char()
        '['
        >>> cursor.next()
        '['
        >>> cursor.skip()
        >>> cursor.get_to_str("lol")
        'end'
        >>> cursor.finished()
        True

    Thread Safety:
        Not thread-safe. Give each thread its own Cursor; several cursors
        may share the same source string.
    """

    __slots__ = ("_source", "_state")

    def __init__(self, source: str) -> None:
        """Create a cursor at the start of ``source``.

        An empty source starts at end of input with the sentinel as the
        current character.

        Raises:
            CursorTypeError: If source is not a str
        """
        if not isinstance(source, str):
            raise CursorTypeError(ErrorTemplate.invalid_source(source))
        self._source = source
        self._state = _ScanState()
        self._load(0, 0)

    @classmethod
    def from_text(cls, source: str) -> "Cursor":
        """Alternate constructor, same as ``Cursor(source)``."""
        return cls(source)

    def __repr__(self) -> str:
        state = self._state
        return (
            f"Cursor(index={state.index}, position={state.position}, "
            f"current={state.current!r}, finished={state.end_of_input})"
        )

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._state.end_of_input:
            raise StopIteration
        return self.next()

    # ========================================================================
    # STATE ACCESS
    # ========================================================================

    @property
    def source(self) -> str:
        """The text being scanned."""
        return self._source

    @property
    def current(self) -> str:
        """Current character, SENTINEL at end of input."""
        return self._state.current

    @property
    def position(self) -> int:
        """UTF-8 byte offset of the current character."""
        return self._state.position

    @property
    def index(self) -> int:
        """Code point index of the current character (for slicing source)."""
        return self._state.index

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self._state.end_of_input

    @property
    def last_delimiter(self) -> str | None:
        """Delimiter matched by the last string scan, None if none was found.

        Set by skip_to_str(), get_to_str() and get_to_strs(). This is the
        only way to tell "delimiter found at the very end" apart from
        "delimiter missing" once the scan has consumed everything.
        """
        return self._state.last_delimiter

    @property
    def last_span(self) -> tuple[int, int]:
        """Index range ``(start, end)`` of the text last returned by a get_* call.

        ``source[start:end]`` equals the returned string.
        """
        return self._state.last_span

    def get_char(self) -> str:
        """Return the current character (SENTINEL at end of input)."""
        return self._state.current

    def get_position(self) -> int:
        """Return the UTF-8 byte offset of the current character."""
        return self._state.position

    def finished(self) -> bool:
        """Return True if end of input has been reached."""
        return self._state.end_of_input

    def is_space(self) -> bool:
        """Return True if the current character is space, tab, LF or CR.

        Note: also True at end of input, since the sentinel is a space.
        """
        return self._state.current in WHITESPACE

    def peek(self, offset: int = 0) -> str | None:
        """Look at the character ``offset`` code points ahead without moving.

        Returns:
            The character, or None beyond end of input

        Example:
            >>> cursor = Cursor("ab")
            >>> cursor.peek(1), cursor.peek(2)
            ('b', None)
        """
        target = self._state.index + offset
        if not 0 <= target < len(self._source):
            return None
        return self._source[target]

    def line_col(self) -> tuple[int, int]:
        """1-based (line, column) of the current character, for error messages."""
        index = self._state.index
        return (
            line_offset(self._source, index) + 1,
            column_offset(self._source, index) + 1,
        )

    # ========================================================================
    # ADVANCING
    # ========================================================================

    def next(self) -> str:
        """Consume the current character and return it.

        At end of input this does nothing and returns SENTINEL.

        Example:
            >>> cursor = Cursor("жи")
            >>> cursor.next(), cursor.get_position()
            ('ж', 2)
            >>> cursor.next(), cursor.finished()
            ('и', True)
            >>> cursor.next()
            ' '
        """
        state = self._state
        if state.end_of_input:
            return SENTINEL

        consumed = state.current
        state.position += utf8_width(consumed)
        state.index += 1
        if state.index < len(self._source):
            state.current = self._source[state.index]
        else:
            state.current = SENTINEL
            state.end_of_input = True
        return consumed

    def next_count(self, count: int) -> None:
        """Call next() ``count`` times; extra calls past the end are no-ops.

        Raises:
            CursorValueError: If count is negative
        """
        if count < 0:
            raise CursorValueError(ErrorTemplate.invalid_count(count, self._span()))
        for _ in range(count):
            if self._state.end_of_input:
                break
            self.next()

    def skip(self) -> None:
        """Advance past space, tab, LF and CR characters."""
        while not self._state.end_of_input and self.is_space():
            self.next()

    def skip_to_str(self, delimiter: str) -> None:
        """Advance to the start of the next occurrence of ``delimiter``.

        The following next() calls yield the delimiter's own characters.
        Without an occurrence the cursor ends at end of input and
        last_delimiter is None.

        Example:
            >>> cursor = Cursor("odfosdf _)_data")
            >>> cursor.skip_to_str("_)_")
            >>> cursor.next(), cursor.next(), cursor.next()
            ('_', ')', '_')
            >>> cursor.get_to_end()
            'data'
        """
        self._check_str_delimiter(delimiter)
        found = self._source.find(delimiter, self._state.index)
        if found == -1:
            self._not_found((delimiter,))
            self._seek(len(self._source))
            return
        self._state.last_delimiter = delimiter
        self._seek(found)

    # ========================================================================
    # EXTRACTION
    # ========================================================================

    def get_word(self) -> str:
        """Skip whitespace, then consume up to the next whitespace.

        Returns an empty string when only whitespace remains.
        """
        self.skip()
        start = self._state.index
        while not self._state.end_of_input and not self.is_space():
            self.next()
        return self._slice(start, self._state.index)

    def get_to_char(self, delimiter: str) -> str:
        """Consume up to (not including) ``delimiter``.

        The cursor is left on the delimiter. Without one, everything up to
        end of input is consumed.

        Raises:
            CursorValueError: If delimiter is not a single character
        """
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise CursorValueError(
                ErrorTemplate.invalid_char_delimiter(delimiter, self._span())
            )
        start = self._state.index
        while not self._state.end_of_input and self._state.current != delimiter:
            self.next()
        return self._slice(start, self._state.index)

    def get_to_chars(self, delimiters: Iterable[str]) -> str:
        """Consume up to the first character found in ``delimiters``.

        Like get_to_char() but with a set of stop characters. A str works
        as the set: ``get_to_chars(" [")``.

        Raises:
            CursorValueError: If any delimiter is not a single character
        """
        stops = frozenset(delimiters)
        for delimiter in stops:
            if not isinstance(delimiter, str) or len(delimiter) != 1:
                raise CursorValueError(
                    ErrorTemplate.invalid_char_delimiter(delimiter, self._span())
                )
        start = self._state.index
        while not self._state.end_of_input and self._state.current not in stops:
            self.next()
        return self._slice(start, self._state.index)

    def get_to_str(self, delimiter: str) -> str:
        """Consume through ``delimiter`` and return the text before it.

        The cursor ends up just past the delimiter. Without an occurrence,
        the rest of the input is returned and last_delimiter is None.

        Example:
            >>> cursor = Cursor("key = value;; rest")
            >>> cursor.get_to_str(";;")
            'key = value'
            >>> cursor.get_to_end()
            ' rest'
        """
        return self.get_to_strs((delimiter,))

    def get_to_strs(self, delimiters: Sequence[str]) -> str:
        """Consume through the first delimiter to complete a match.

        Candidates are compared by where their occurrence ends, so the one
        the scan finishes first wins; list order only breaks ties.

        Example:
            >>> cursor = Cursor("one-->two")
            >>> cursor.get_to_strs(["->", "--"])
            'one'
            >>> cursor.last_delimiter
            '--'
        """
        start = self._state.index
        best_end = -1
        best: str | None = None
        for delimiter in delimiters:
            self._check_str_delimiter(delimiter)
            found = self._source.find(delimiter, start)
            if found == -1:
                continue
            end = found + len(delimiter)
            if best is None or end < best_end:
                best, best_end = delimiter, end

        if best is None:
            self._not_found(delimiters)
            text = self._slice(start, len(self._source))
            self._seek(len(self._source))
            return text

        self._state.last_delimiter = best
        text = self._slice(start, best_end - len(best))
        self._seek(best_end)
        return text

    def get_to_end(self) -> str:
        """Consume and return everything that is left."""
        start = self._state.index
        text = self._slice(start, len(self._source))
        self._seek(len(self._source))
        return text

    # ========================================================================
    # INTERNALS
    # ========================================================================

    def _load(self, index: int, position: int) -> None:
        """Point the state at ``index``/``position`` and refresh current."""
        state = self._state
        state.index = index
        state.position = position
        if index < len(self._source):
            state.current = self._source[index]
            state.end_of_input = False
        else:
            state.current = SENTINEL
            state.end_of_input = True

    def _seek(self, index: int) -> None:
        """Move forward to ``index`` in one step, keeping position in sync."""
        state = self._state
        if index != state.index:
            logger.debug("Cursor repositioned from index %d to %d", state.index, index)
        width = byte_length(self._source[state.index : index])
        self._load(index, state.position + width)

    def _slice(self, start: int, end: int) -> str:
        self._state.last_span = (start, end)
        return self._source[start:end]

    def _span(self) -> SourceSpan:
        return make_span(self._source, self._state.index)

    def _check_str_delimiter(self, delimiter: object) -> None:
        if not isinstance(delimiter, str):
            raise CursorTypeError(
                ErrorTemplate.invalid_str_delimiter(delimiter, self._span())
            )

    def _not_found(self, delimiters: Iterable[str]) -> None:
        self._state.last_delimiter = None
        logger.debug(
            "No delimiter from %r before end of input (scan started at index %d)",
            list(delimiters),
            self._state.index,
        )
