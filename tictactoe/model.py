"""Board state and rules of a 3x3 tic-tac-toe game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from tictactoe.errors import IllegalCellError, IllegalStateError, NoWinnerError

SIZE = 3

Grid = tuple[tuple["Cell", ...], ...]


class Cell(Enum):
    """Content of a grid cell; the value is its printed symbol."""

    X = "X"
    O = "O"  # noqa: E741
    OPEN = "-"


class Player(Enum):
    """One of the two sides."""

    X = "X"
    O = "O"  # noqa: E741

    def opponent(self) -> Player:
        """The other side."""
        return Player.O if self is Player.X else Player.X

    def cell(self) -> Cell:
        """The cell mark this side places."""
        return Cell.X if self is Player.X else Cell.O


class Status(Enum):
    """Whether the game is running, drawn or won."""

    PLAYING = "playing"
    DRAW = "draw"
    WIN = "win"


class Difficulty(Enum):
    """Strength of a computer player."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


@dataclass(frozen=True)
class Move:
    """A position on the grid."""

    row: int
    column: int


def _lines() -> list[tuple[tuple[int, int], ...]]:
    rows = [tuple((r, c) for c in range(SIZE)) for r in range(SIZE)]
    cols = [tuple((r, c) for r in range(SIZE)) for c in range(SIZE)]
    diagonals = [
        tuple((i, i) for i in range(SIZE)),
        tuple((i, SIZE - 1 - i) for i in range(SIZE)),
    ]
    return rows + cols + diagonals


_LINES = _lines()


def has_line(grid: Sequence[Sequence[Cell]], cell: Cell) -> bool:
    """Return True if ``cell`` fills a full row, column or diagonal of ``grid``."""
    return any(all(grid[r][c] == cell for r, c in line) for line in _LINES)


def _check_bounds(row: int, column: int) -> None:
    if not (0 <= row < SIZE and 0 <= column < SIZE):
        raise IllegalCellError()


class Model:
    """A tic-tac-toe game: grid, status and whose turn it is. X moves first."""

    def __init__(self) -> None:
        self._grid: list[list[Cell]] = [[Cell.OPEN] * SIZE for _ in range(SIZE)]
        self._status = Status.PLAYING
        self._last_played = Player.O

    def who_is_next(self) -> Player:
        """The side to move; raises IllegalStateError once the game is over."""
        if self.is_over():
            raise IllegalStateError()
        return self._last_played.opponent()

    def play(self, row: int, column: int) -> None:
        """Place the next side's mark. Call update_status afterwards."""
        _check_bounds(row, column)
        if self._grid[row][column] is not Cell.OPEN:
            raise IllegalCellError()
        player = self.who_is_next()
        self._grid[row][column] = player.cell()
        self._last_played = player

    def is_over(self) -> bool:
        """True once the game is won or drawn."""
        return self._status in (Status.WIN, Status.DRAW)

    @property
    def grid(self) -> Grid:
        """An immutable snapshot of the grid."""
        return tuple(tuple(row) for row in self._grid)

    def cell(self, row: int, column: int) -> Cell:
        """The content of the cell at ``row``, ``column``."""
        _check_bounds(row, column)
        return self._grid[row][column]

    def update_status(self) -> None:
        """Mark the game won or drawn if the last move ended it."""
        if self.check_win():
            self._status = Status.WIN
        elif self.check_draw():
            self._status = Status.DRAW

    def check_win(self) -> bool:
        """True if the side that moved last holds a full line."""
        return has_line(self._grid, self._last_played.cell())

    def check_draw(self) -> bool:
        """True if the grid is full and nobody won."""
        if any(cell is Cell.OPEN for row in self._grid for cell in row):
            return False
        return not self.check_win()

    @property
    def status(self) -> Status:
        """The current game status."""
        return self._status

    @property
    def winner(self) -> Player:
        """The winning side; raises NoWinnerError unless the game is won."""
        if self._status is Status.WIN:
            return self._last_played
        raise NoWinnerError()

    def undo(self, row: int, column: int) -> None:
        """Take back the last move, made at ``row``, ``column``."""
        _check_bounds(row, column)
        self._grid[row][column] = Cell.OPEN
        self._last_played = self._last_played.opponent()
        self._status = Status.PLAYING

    def open_moves(self) -> list[Move]:
        """All open positions, row by row."""
        return [
            Move(r, c)
            for r, row in enumerate(self._grid)
            for c, cell in enumerate(row)
            if cell is Cell.OPEN
        ]