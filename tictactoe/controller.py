"""Game loop that alternates two players and reports the result."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from tictactoe.errors import GameError
from tictactoe.model import Cell, Difficulty, Model, Player, Status
from tictactoe.players import AI, Human, PlayerType


def render_grid(grid: Sequence[Sequence[Cell]]) -> str:
    """Render the grid as one line of symbols per row."""
    return "".join("".join(cell.value for cell in row) + "\n" for row in grid)


class Controller:
    """Runs a game between the X player and the O player."""

    def __init__(
        self,
        x: PlayerType | None = None,
        o: PlayerType | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.x_type = x if x is not None else Human()
        self.o_type = o if o is not None else AI(Difficulty.NORMAL)
        self._output = output

    def go(self, game: Model | None = None) -> None:
        """Play ``game`` to the end, printing the grid before every move."""
        game = game if game is not None else Model()
        out = self._output if self._output is not None else sys.stdout

        while not game.is_over():
            out.write(render_grid(game.grid))
            current = game.who_is_next()
            player = self.x_type if current is Player.X else self.o_type
            try:
                player.play(current, game)
            except (GameError, ValueError) as exc:
                print(exc, file=out)

        out.write(render_grid(game.grid))

        if game.status is Status.DRAW:
            print("The game ended by Draw!", file=out)
        elif game.status is Status.WIN:
            print(f"The winner is {game.winner.value}!", file=out)
        else:
            print("Error the game finished before end!", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Play a human as X against a normal computer player as O."""
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Play tic-tac-toe against the computer.",
    )
    parser.parse_args(argv)
    controller = Controller(Human(), AI(Difficulty.NORMAL))
    try:
        controller.go(Model())
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())