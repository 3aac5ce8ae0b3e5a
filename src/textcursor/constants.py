"""Shared constants for textcursor.

Placing constants here avoids circular imports between the cursor and the
position helpers and gives a single source of truth for the scanning rules.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ENCODING",
    "SENTINEL",
    "WHITESPACE",
]

# ============================================================================
# END-OF-INPUT
# ============================================================================
#
# The sentinel is a real character, so it is ambiguous on its own: a cursor
# sitting on a literal space and an exhausted cursor both report " ".
# Callers must pair get_char() with finished() to tell them apart.

SENTINEL: str = " "

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Characters skipped by Cursor.skip() and treated as word breaks by
# Cursor.get_word(). Deliberately narrower than str.isspace().
WHITESPACE: frozenset[str] = frozenset((" ", "\t", "\n", "\r"))

# ============================================================================
# OFFSETS
# ============================================================================

# Cursor.position is reported in bytes of this encoding.
ENCODING: str = "utf-8"
