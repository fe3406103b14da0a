"""Human and computer players for the tic-tac-toe game."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from itertools import groupby
from operator import attrgetter
from typing import Callable

from tictactoe.errors import IllegalCellError
from tictactoe.model import Difficulty, Model, Move, Player, Status, has_line

_WIN_SCORE = 10


class PlayerType(ABC):
    """Something that can make a move for one side of a game."""

    @abstractmethod
    def play(self, player: Player, game: Model) -> None:
        """Make one move in ``game`` for ``player``."""


class Human(PlayerType):
    """A player whose moves are typed in as a row and a column."""

    def __init__(self, input_fn: Callable[[str], str] | None = None) -> None:
        self._input = input_fn if input_fn is not None else input

    def _read_move(self, player: Player) -> tuple[int, int]:
        prompt = f"Player {player.value}'s turn.\nEnter the row and column: "
        tokens: list[str] = []
        while len(tokens) < 2:
            tokens.extend(self._input(prompt).split())
            prompt = ""
        try:
            return int(tokens[0]), int(tokens[1])
        except ValueError:
            raise ValueError("The row and column must be integers") from None

    def play(self, player: Player, game: Model) -> None:
        row, column = self._read_move(player)
        game.play(row, column)
        game.update_status()


def minimax(
    game: Model,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    player: Player,
) -> float:
    """Score ``game`` from ``player``'s point of view with alpha-beta search."""
    if game.is_over():
        if game.status is Status.WIN:
            return _WIN_SCORE - depth if game.winner is player else depth - _WIN_SCORE
        return 0

    best = -math.inf if maximizing else math.inf
    for _, row_moves in groupby(game.open_moves(), key=attrgetter("row")):
        for move in row_moves:
            game.play(move.row, move.column)
            game.update_status()
            score = minimax(game, depth + 1, not maximizing, alpha, beta, player)
            game.undo(move.row, move.column)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)

            # A cutoff stops scanning the current row only.
            if beta <= alpha:
                break
    return best


class AI(PlayerType):
    """A computer player of a given difficulty."""

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.NORMAL,
        rng: random.Random | None = None,
    ) -> None:
        self.difficulty = difficulty
        self._rng = rng if rng is not None else random.Random()

    def play(self, player: Player, game: Model) -> None:
        if self.difficulty is Difficulty.EASY:
            self.easy_move(game)
        elif self.difficulty is Difficulty.HARD:
            self.best_move(game, game.who_is_next())
        else:
            self.normal_move(game, game.who_is_next())

    def best_move(self, game: Model, ai_player: Player) -> None:
        """Play the move with the highest minimax score; ties go to the first."""
        best_score = -math.inf
        best: Move | None = None
        for move in game.open_moves():
            game.play(move.row, move.column)
            game.update_status()
            score = minimax(game, 0, False, -math.inf, math.inf, ai_player)
            game.undo(move.row, move.column)
            if score > best_score:
                best_score = score
                best = move
        if best is None:
            raise IllegalCellError()
        game.play(best.row, best.column)
        game.update_status()

    def easy_move(self, game: Model) -> None:
        """Play a random open cell, if there is one."""
        moves = game.open_moves()
        if moves:
            move = self._rng.choice(moves)
            game.play(move.row, move.column)
            game.update_status()

    def normal_move(self, game: Model, ai_player: Player) -> None:
        """Win at once if possible, else block the opponent, else play randomly."""
        moves = game.open_moves()
        for move in moves:
            game.play(move.row, move.column)
            game.update_status()
            if game.status is Status.WIN and game.winner is ai_player:
                return
            game.undo(move.row, move.column)

        opponent_cell = ai_player.opponent().cell()
        grid = [list(row) for row in game.grid]
        for move in moves:
            previous = grid[move.row][move.column]
            grid[move.row][move.column] = opponent_cell
            if has_line(grid, opponent_cell):
                game.play(move.row, move.column)
                game.update_status()
                return
            grid[move.row][move.column] = previous

        self.easy_move(game)