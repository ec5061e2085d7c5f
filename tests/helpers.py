from __future__ import annotations

from typing import Any, List, Sequence

from match3.components.board import Board


class ScriptedTileGenerator:
    """Deterministic tile source replaying a fixed sequence.

    With cycle=True the sequence repeats forever; otherwise running past the
    end is a test bug and fails loudly.
    """

    def __init__(self, values: Sequence[Any], *, cycle: bool = False):
        if not values:
            raise ValueError("ScriptedTileGenerator needs at least one value")
        self.values = list(values)
        self.cycle = cycle
        self.calls = 0

    def next(self) -> Any:
        index = self.calls
        if self.cycle:
            index %= len(self.values)
        elif index >= len(self.values):
            raise AssertionError(f"Generator exhausted after {self.calls} calls")
        self.calls += 1
        return self.values[index]


def board_from_rows(rows: Sequence[Sequence[Any]]) -> Board:
    """Build a Board from a list of rows, top row first."""
    height = len(rows)
    width = len(rows[0])
    assert all(len(row) == width for row in rows), "Rows must share one width"
    tiles = [tile for row in rows for tile in row]
    return Board(width=width, height=height, tiles=tiles)


def board_rows(board: Board) -> List[List[Any]]:
    return [board.tiles[r * board.width:(r + 1) * board.width] for r in range(board.height)]
