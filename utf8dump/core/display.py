"""Fixed-width listing of decoded code point values."""

from dataclasses import dataclass
from typing import Iterable, List


@dataclass
class ListingFormat:
    """Column width and values per line used by ``render_listing``."""

    width: int = 4
    per_line: int = 10


def format_value(value: int, width: int = 4) -> str:
    """Right-justify ``value`` in ``width`` columns; wider numbers are kept whole."""
    return f"{value:>{width}d}"


def render_listing(values: Iterable[int], fmt: ListingFormat = ListingFormat()) -> str:
    """Return the count header followed by the values, ``per_line`` to a row.

    A row break follows every full row only, so a trailing partial row has
    no newline.
    """
    items = list(values)
    parts: List[str] = [f"There are {len(items)} UTF-8 characters:\n"]
    for position, value in enumerate(items, start=1):
        parts.append(format_value(value, fmt.width))
        if position % fmt.per_line == 0:
            parts.append("\n")
    return "".join(parts)
