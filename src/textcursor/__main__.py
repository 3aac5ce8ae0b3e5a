"""Command-line demo: ``python -m textcursor``.

Usage:
    python -m textcursor words [FILE]         # one word per line
    python -m textcursor split DELIM [FILE]   # pieces between DELIM
    python -m textcursor -v split ";;" data.txt

FILE defaults to stdin ("-").

Exit Codes:
    0: Success
    2: Input could not be read
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator

from textcursor import Cursor

logger = logging.getLogger("textcursor")


def iter_words(cursor: Cursor) -> Iterator[str]:
    """Yield whitespace-separated words until input runs out."""
    while True:
        word = cursor.get_word()
        if not word:
            return
        yield word


def iter_pieces(cursor: Cursor, delimiter: str) -> Iterator[str]:
    """Yield the text between occurrences of ``delimiter``."""
    while not cursor.finished():
        yield cursor.get_to_str(delimiter)
        if cursor.last_delimiter is None:
            return


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """Run the demo CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m textcursor",
        description="Scan text with textcursor.Cursor",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    words = commands.add_parser("words", help="Print one word per line")
    words.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")

    split = commands.add_parser("split", help="Print pieces separated by DELIM")
    split.add_argument("delimiter", help="Delimiter string")
    split.add_argument("file", nargs="?", default="-", help="Input file (default: stdin)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 2

    cursor = Cursor(source)
    if args.command == "words":
        pieces = iter_words(cursor)
    else:
        pieces = iter_pieces(cursor, args.delimiter)

    count = 0
    for piece in pieces:
        print(piece)
        count += 1
    logger.debug("Printed %d pieces, stopped at byte %d", count, cursor.get_position())
    return 0


if __name__ == "__main__":
    sys.exit(main())
