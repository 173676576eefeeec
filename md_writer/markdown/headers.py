"""Heading builders.

Levels 1 and 2 are setext headings (text underlined with ``=`` or ``-``),
levels 3 to 6 are ATX headings (text prefixed with ``#`` characters).

- https://spec.commonmark.org/0.30/#setext-headings
- https://spec.commonmark.org/0.30/#atx-headings
"""

from md_writer.config.constants import (
    ATX_HEADING_CHAR,
    H1_UNDERLINE_CHAR,
    H2_UNDERLINE_CHAR,
    LF,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
)
from md_writer.exceptions import FragmentTooLargeError, InvalidHeadingLevelError


def _setext(text: str, underline_char: str) -> str:
    """Underline text with one character per code point."""
    char_count = len(text)
    try:
        underline = underline_char * char_count
    except (MemoryError, OverflowError) as e:
        raise FragmentTooLargeError(char_count, cause=e) from e

    return f"{text}{LF}{underline}"


def _atx(text: str, level: int) -> str:
    return f"{ATX_HEADING_CHAR * level} {text}"


def h1(text: str) -> str:
    """Create a level 1 setext heading.

    Args:
        text: Heading text, emitted unchanged

    Returns:
        The text, a line feed, then one ``=`` per character of the text

    Raises:
        FragmentTooLargeError: If the underline cannot be allocated. This is
            a resource exhaustion failure and is not meant to be retried.

    Example:
        >>> h1("Hello!")
        'Hello!\\n======'
    """
    return _setext(text, H1_UNDERLINE_CHAR)


def h2(text: str) -> str:
    """Create a level 2 setext heading.

    Same as :func:`h1` but underlined with ``-``.

    Raises:
        FragmentTooLargeError: If the underline cannot be allocated.
    """
    return _setext(text, H2_UNDERLINE_CHAR)


def h3(text: str) -> str:
    """Create a level 3 ATX heading."""
    return _atx(text, 3)


def h4(text: str) -> str:
    """Create a level 4 ATX heading."""
    return _atx(text, 4)


def h5(text: str) -> str:
    """Create a level 5 ATX heading."""
    return _atx(text, 5)


def h6(text: str) -> str:
    """Create a level 6 ATX heading."""
    return _atx(text, 6)


_BUILDERS = {1: h1, 2: h2, 3: h3, 4: h4, 5: h5, 6: h6}


def heading(text: str, level: int) -> str:
    """Create a heading of the given level.

    Args:
        text: Heading text
        level: Heading level, 1 to 6

    Returns:
        Setext heading for levels 1-2, ATX heading for levels 3-6

    Raises:
        InvalidHeadingLevelError: If level is not an int in 1..6
        FragmentTooLargeError: See :func:`h1`
    """
    # bool is an int subclass; True must not mean level 1
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidHeadingLevelError(level)
    if not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
        raise InvalidHeadingLevelError(level)

    return _BUILDERS[level](text)
