from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Set, Tuple

from esper import World

from match3.components.board import Board
from match3.components.position import Position
from match3.utils.tile_generators import TileGenerator


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    tile: Any


def create_board(generator: TileGenerator, width: int, height: int) -> Board:
    """Build a board, pulling width * height tiles from generator in row-major order."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
    tiles = [generator.next() for _ in range(width * height)]
    return Board(width=width, height=height, tiles=tiles)


def board_for_world(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def in_bounds(board: Board, position: Tuple[int, int]) -> bool:
    row, col = position
    return 0 <= row < board.height and 0 <= col < board.width


def is_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    ar, ac = a
    br, bc = b
    return (abs(ar - br) == 1 and ac == bc) or (abs(ac - bc) == 1 and ar == br)


def tile_index(board: Board, position: Tuple[int, int]) -> int:
    row, col = position
    return row * board.width + col


def piece(board: Board, position: Tuple[int, int]) -> Any | None:
    """Return the tile at position, or None when it lies off the board."""
    if not in_bounds(board, position):
        return None
    return board.tiles[tile_index(board, position)]


def set_piece(board: Board, position: Tuple[int, int], tile: Any) -> None:
    board.tiles[tile_index(board, position)] = tile


def positions(board: Board) -> List[Position]:
    return [Position(row, col) for row in range(board.height) for col in range(board.width)]


def swap_tiles(board: Board, a: Tuple[int, int], b: Tuple[int, int]) -> None:
    ia = tile_index(board, a)
    ib = tile_index(board, b)
    board.tiles[ia], board.tiles[ib] = board.tiles[ib], board.tiles[ia]


def compute_gravity_moves(board: Board, cleared: Iterable[Tuple[int, int]]) -> List[GravityMove]:
    """Work out where surviving tiles land once the cleared cells are removed.

    Each column is compacted toward the bottom row independently and keeps the
    relative order of its surviving tiles. Tiles that do not move are skipped.
    """
    cleared_set: Set[Position] = {Position(*pos) for pos in cleared}
    moves: List[GravityMove] = []
    for col in range(board.width):
        target_row = board.height - 1
        for row in range(board.height - 1, -1, -1):
            source = Position(row, col)
            if source in cleared_set:
                continue
            if row != target_row:
                moves.append(GravityMove(source=source, target=Position(target_row, col), tile=piece(board, source)))
            target_row -= 1
    return moves


def apply_gravity_moves(board: Board, moves: List[GravityMove]) -> None:
    for move in moves:
        set_piece(board, move.target, move.tile)


def vacated_positions(board: Board, cleared: Iterable[Tuple[int, int]]) -> List[Position]:
    """Cells left empty after compaction, columns left to right, each column bottom to top."""
    counts = [0] * board.width
    for pos in {Position(*p) for p in cleared}:
        counts[pos.col] += 1
    vacated: List[Position] = []
    for col, count in enumerate(counts):
        for row in range(count - 1, -1, -1):
            vacated.append(Position(row, col))
    return vacated


def refill_vacated_cells(generator: TileGenerator, board: Board, vacated: List[Position]) -> None:
    for position in vacated:
        set_piece(board, position, generator.next())


def clear_tiles_with_gravity(
    generator: TileGenerator, board: Board, cleared: Iterable[Tuple[int, int]]
) -> Tuple[List[GravityMove], List[Position]]:
    """Remove cleared cells, let the column contents fall, refill the gaps.

    Returns the gravity moves applied and the refilled positions in the order
    the generator was asked for them.
    """
    cleared_list = list(cleared)
    if not cleared_list:
        return [], []
    moves = compute_gravity_moves(board, cleared_list)
    apply_gravity_moves(board, moves)
    vacated = vacated_positions(board, cleared_list)
    refill_vacated_cells(generator, board, vacated)
    return moves, vacated
