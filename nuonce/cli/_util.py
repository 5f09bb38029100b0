from __future__ import annotations

from shutil import get_terminal_size
from textwrap import dedent, fill
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

_ARGPARSE_INDENT = 24
_MINIMUM_WIDTH = 16


def _help_width() -> int:
    columns = get_terminal_size(fallback=(80, 32)).columns

    if columns - _ARGPARSE_INDENT >= 32:
        return columns - _ARGPARSE_INDENT

    return columns


def multi_paragraph_wrap(text: str, width: int | None = None) -> str:
    """Return the given help text dedented and wrapped paragraph by paragraph.

    Paragraphs are separated by a blank line. Paragraphs whose lines all begin with
    ">" are kept line by line (less the ">"), the others are refilled.

    >>> print(multi_paragraph_wrap('''\\
    ...     the number of rounds
    ...     to run
    ...
    ...     >TOML example: calls=1000
    ...     ''', width=40))
    the number of rounds to run
    <BLANKLINE>
    TOML example: calls=1000

    Raises:
        SyntaxError: A line of a preserved paragraph is missing its ">".
    """
    _width = max(width if width is not None else _help_width(), _MINIMUM_WIDTH)

    def _preserve(paragraph: str) -> str:
        lines: list[str] = []

        for line in paragraph.splitlines():
            if not line.startswith(">"):
                raise SyntaxError("preserved lines must start with '>'")
            lines.append(line[1:].rstrip())

        return "\n".join(lines)

    paragraphs = [
        _preserve(p) if p.startswith(">") else fill(p, _width)
        for p in dedent(text).strip("\n").split("\n\n")
    ]

    return "\n\n".join(paragraphs)


def get_type_name(value: Any) -> str:
    """Return a Pythonic name for the type of the given value, i.e. `list[str]`."""
    if isinstance(value, (set, list)):
        _types: list[str] = sorted({type(v).__name__ for v in value})
        return f"{type(value).__name__}[{' | '.join(_types)}]"

    return type(value).__name__
