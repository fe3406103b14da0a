import pytest

from tictactoe.errors import IllegalCellError, IllegalStateError, NoWinnerError
from tictactoe.model import Cell, Model, Move, Player, Status, has_line

X_WINS_TOP_ROW = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]
DRAW_SEQUENCE = [
    (0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2),
]


def _play_all(moves):
    game = Model()
    for row, col in moves:
        game.play(row, col)
        game.update_status()
    return game


def test_new_game_is_empty_and_x_starts():
    game = Model()
    assert all(cell is Cell.OPEN for row in game.grid for cell in row)
    assert game.status is Status.PLAYING
    assert game.who_is_next() is Player.X
    assert not game.is_over()


def test_turns_alternate():
    game = Model()
    game.play(1, 1)
    game.update_status()
    assert game.cell(1, 1) is Cell.X
    assert game.who_is_next() is Player.O
    game.play(0, 0)
    assert game.cell(0, 0) is Cell.O
    assert game.who_is_next() is Player.X


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_play_out_of_bounds(row, col):
    with pytest.raises(IllegalCellError):
        Model().play(row, col)


@pytest.mark.parametrize("row, col", [(-1, 1), (1, 3)])
def test_cell_out_of_bounds(row, col):
    with pytest.raises(IllegalCellError):
        Model().cell(row, col)


def test_play_taken_cell():
    game = Model()
    game.play(2, 2)
    with pytest.raises(IllegalCellError):
        game.play(2, 2)
    assert game.cell(2, 2) is Cell.X


def test_x_wins():
    game = _play_all(X_WINS_TOP_ROW)
    assert game.status is Status.WIN
    assert game.is_over()
    assert game.winner is Player.X


def test_next_after_game_over_raises():
    game = _play_all(X_WINS_TOP_ROW)
    with pytest.raises(IllegalStateError):
        game.who_is_next()
    with pytest.raises(IllegalStateError):
        game.play(2, 2)


def test_no_winner_while_playing():
    game = Model()
    with pytest.raises(NoWinnerError) as excinfo:
        _ = game.winner
    assert str(excinfo.value) == "There Is No Winner Yet"
    assert game.status is Status.PLAYING


def test_draw():
    game = _play_all(DRAW_SEQUENCE)
    assert game.status is Status.DRAW
    assert game.check_draw()
    assert not game.check_win()
    assert game.is_over()
    with pytest.raises(NoWinnerError):
        _ = game.winner


def test_status_unchanged_without_update():
    game = Model()
    for row, col in X_WINS_TOP_ROW:
        game.play(row, col)
    assert game.check_win()
    assert game.status is Status.PLAYING


def test_undo_restores_state():
    game = _play_all(X_WINS_TOP_ROW)
    game.undo(0, 2)
    assert game.status is Status.PLAYING
    assert game.cell(0, 2) is Cell.OPEN
    assert game.who_is_next() is Player.X


def test_undo_then_replay_round_trip():
    game = _play_all(X_WINS_TOP_ROW[:3])
    before = game.grid
    game.play(2, 2)
    game.update_status()
    game.undo(2, 2)
    assert game.grid == before
    assert game.who_is_next() is Player.O


def test_open_moves():
    game = _play_all([(0, 0), (1, 1)])
    moves = game.open_moves()
    assert Move(0, 0) not in moves
    assert Move(1, 1) not in moves
    assert len(moves) == 7
    assert moves == sorted(moves, key=lambda m: (m.row, m.column))


def test_grid_snapshot_is_independent():
    game = Model()
    snapshot = game.grid
    game.play(0, 0)
    assert snapshot[0][0] is Cell.OPEN
    assert game.grid[0][0] is Cell.X


def test_has_line_detects_diagonal_and_column():
    o, x, e = Cell.O, Cell.X, Cell.OPEN
    diagonal = ((x, o, e), (o, x, e), (e, e, x))
    column = ((o, x, e), (o, x, e), (o, e, x))
    assert has_line(diagonal, x)
    assert not has_line(diagonal, o)
    assert has_line(column, o)
    assert not has_line(column, x)


def test_player_helpers():
    assert Player.X.opponent() is Player.O
    assert Player.O.opponent() is Player.X
    assert Player.X.cell() is Cell.X
    assert Player.O.cell() is Cell.O