from __future__ import annotations

from typing import Any, Iterator, List, Tuple

from match3.constants import MIN_MATCH_LENGTH
from match3.components.board import Board
from match3.components.match import Match
from match3.components.position import Position
from match3.systems.board_ops import in_bounds, is_adjacent, piece, swap_tiles


def _scan_line(board: Board, line: List[Position]) -> Iterator[Match]:
    """Yield every run of MIN_MATCH_LENGTH or more equal tiles along line."""
    run: List[Position] = []
    last: Any = None
    for pos in line:
        tval = piece(board, pos)
        if run and tval == last:
            run.append(pos)
            continue
        if len(run) >= MIN_MATCH_LENGTH:
            yield Match(matched=last, positions=tuple(run))
        run = [pos]
        last = tval
    if len(run) >= MIN_MATCH_LENGTH:
        yield Match(matched=last, positions=tuple(run))


def find_matches(board: Board) -> List[Match]:
    """Detect all contiguous horizontal or vertical runs of length >= 3.

    Rows are scanned first (left to right), then columns (top to bottom). A
    tile sitting in both a horizontal and a vertical run is reported in both
    matches; runs are never merged.
    """
    matches: List[Match] = []
    # Horizontal runs
    for r in range(board.height):
        matches.extend(_scan_line(board, [Position(r, c) for c in range(board.width)]))
    # Vertical runs
    for c in range(board.width):
        matches.extend(_scan_line(board, [Position(r, c) for r in range(board.height)]))
    return matches


def _run_length(board: Board, pos: Position, d_row: int, d_col: int) -> int:
    tval = piece(board, pos)
    length = 0
    row, col = pos.row + d_row, pos.col + d_col
    while in_bounds(board, (row, col)) and piece(board, (row, col)) == tval:
        length += 1
        row += d_row
        col += d_col
    return length


def _has_line_match(board: Board, pos: Position) -> bool:
    """Return True if a horizontal or vertical run of length >= 3 passes through pos."""
    h_run = 1 + _run_length(board, pos, 0, -1) + _run_length(board, pos, 0, 1)
    if h_run >= MIN_MATCH_LENGTH:
        return True
    v_run = 1 + _run_length(board, pos, -1, 0) + _run_length(board, pos, 1, 0)
    return v_run >= MIN_MATCH_LENGTH


def predict_swap_creates_match(board: Board, src: Tuple[int, int], dst: Tuple[int, int]) -> bool:
    """Return True if swapping src/dst would create a match through either cell.

    The swap is tried on a copy of the tile list; board itself is untouched.
    Swapping two equal tiles changes nothing, so it never creates a match.
    """
    if piece(board, src) == piece(board, dst):
        return False
    swapped = Board(width=board.width, height=board.height, tiles=list(board.tiles))
    swap_tiles(swapped, src, dst)
    return _has_line_match(swapped, Position(*src)) or _has_line_match(swapped, Position(*dst))


def can_move(board: Board, first: Tuple[int, int], second: Tuple[int, int]) -> bool:
    if not (in_bounds(board, first) and in_bounds(board, second)):
        return False
    if not is_adjacent(first, second):
        return False
    return predict_swap_creates_match(board, first, second)


def find_valid_swaps(board: Board) -> List[Tuple[Position, Position]]:
    """Enumerate adjacent swaps that would produce a match."""
    swaps: List[Tuple[Position, Position]] = []
    for row in range(board.height):
        for col in range(board.width):
            pos = Position(row, col)
            right = Position(row, col + 1)
            if col + 1 < board.width and predict_swap_creates_match(board, pos, right):
                swaps.append((pos, right))
            down = Position(row + 1, col)
            if row + 1 < board.height and predict_swap_creates_match(board, pos, down):
                swaps.append((pos, down))
    return swaps


def has_valid_move(board: Board) -> bool:
    return bool(find_valid_swaps(board))
