from typing import NamedTuple


class Position(NamedTuple):
    """Board coordinate. Row 0 is the top row, col 0 the leftmost column."""

    row: int
    col: int
