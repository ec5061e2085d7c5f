from match3.components.position import Position
from match3.systems.board_ops import (
    GravityMove,
    clear_tiles_with_gravity,
    compute_gravity_moves,
    in_bounds,
    is_adjacent,
    piece,
    positions,
    swap_tiles,
    vacated_positions,
)
from tests.helpers import ScriptedTileGenerator, board_from_rows, board_rows


def _board():
    return board_from_rows([
        ['a', 'b', 'c'],
        ['d', 'e', 'f'],
    ])


def test_piece_reads_row_major_cells():
    board = _board()
    assert piece(board, Position(0, 0)) == 'a'
    assert piece(board, (0, 2)) == 'c'
    assert piece(board, Position(1, 1)) == 'e'


def test_piece_out_of_bounds_is_absent():
    board = _board()
    assert piece(board, Position(-1, 0)) is None
    assert piece(board, Position(board.height, 0)) is None
    assert piece(board, Position(0, -1)) is None
    assert piece(board, Position(0, board.width)) is None


def test_positions_enumerates_row_major():
    board = _board()
    assert positions(board) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert all(isinstance(pos, Position) for pos in positions(board))


def test_in_bounds():
    board = _board()
    assert in_bounds(board, (1, 2))
    assert not in_bounds(board, (2, 0))
    assert not in_bounds(board, (0, 3))


def test_is_adjacent():
    assert is_adjacent((0, 0), (0, 1))
    assert is_adjacent((1, 0), (0, 0))
    assert not is_adjacent((0, 0), (1, 1))
    assert not is_adjacent((0, 0), (2, 0))
    assert not is_adjacent((0, 0), (0, 0))


def test_swap_tiles_in_place():
    board = _board()
    swap_tiles(board, (0, 0), (1, 0))
    assert board_rows(board) == [['d', 'b', 'c'], ['a', 'e', 'f']]
    assert len(board.tiles) == 6


def test_gravity_preserves_column_order():
    board = board_from_rows([
        ['a'],
        ['b'],
        ['x'],
        ['c'],
        ['y'],
    ])
    moves = compute_gravity_moves(board, [(2, 0), (4, 0)])
    assert moves == [
        GravityMove(source=Position(3, 0), target=Position(4, 0), tile='c'),
        GravityMove(source=Position(1, 0), target=Position(3, 0), tile='b'),
        GravityMove(source=Position(0, 0), target=Position(2, 0), tile='a'),
    ]


def test_vacated_cells_listed_bottom_up_per_column():
    board = _board()
    vacated = vacated_positions(board, [(0, 2), (1, 0), (0, 0), (1, 0)])
    assert vacated == [(1, 0), (0, 0), (0, 2)]


def test_clear_tiles_with_gravity_refills_top_of_each_column():
    board = board_from_rows([
        ['a', 'b', 'c'],
        ['d', 'e', 'f'],
        ['g', 'h', 'i'],
    ])
    gen = ScriptedTileGenerator(['1', '2', '3'])
    moves, refilled = clear_tiles_with_gravity(gen, board, [(2, 0), (1, 0), (1, 2)])
    assert gen.calls == 3
    assert refilled == [(1, 0), (0, 0), (0, 2)]
    assert board_rows(board) == [
        ['2', 'b', '3'],
        ['1', 'e', 'c'],
        ['a', 'h', 'i'],
    ]
    assert len(moves) == 2


def test_clear_nothing_is_noop():
    board = _board()
    gen = ScriptedTileGenerator(['z'])
    assert clear_tiles_with_gravity(gen, board, []) == ([], [])
    assert gen.calls == 0
    assert board_rows(board) == [['a', 'b', 'c'], ['d', 'e', 'f']]
