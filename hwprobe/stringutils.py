"""Small string helpers used when parsing kernel and sysfs text files."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_WHITESPACE = " \t\n"


def strip(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def _require_delimiter(delimiter: str) -> None:
    if not delimiter:
        raise ValueError("delimiter must not be empty")


def count_substring(text: str, substring: str) -> int:
    """Count non-overlapping occurrences of ``substring`` in ``text``."""
    _require_delimiter(substring)
    return text.count(substring)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every ``delimiter``, keeping the piece after the last one."""
    _require_delimiter(delimiter)
    return text.split(delimiter)


def split_char(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at a single character, dropping whatever follows the last one.

    Only pieces that are terminated by ``delimiter`` are returned, so text
    without the delimiter yields an empty list.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return text.split(delimiter)[:-1]


def split_get_index(text: str, delimiter: str, index: int) -> str:
    """Return the piece at ``index`` after splitting ``text`` at ``delimiter``.

    Negative indices count from the end; an index out of range gives "".
    """
    pieces = split(text, delimiter)
    if index < 0:
        index += len(pieces)
    if not 0 <= index < len(pieces):
        return ""
    return pieces[index]


def get_value(data: Sequence[T], index: int, default: T) -> T:
    """Return ``data[index]``, or ``default`` when ``index`` is out of range."""
    if 0 <= index < len(data):
        return data[index]
    return default