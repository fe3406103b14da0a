"""Exceptions raised by the tic-tac-toe game model."""


class GameError(Exception):
    """Base class for every error raised by the game."""

    default_message = "Game error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class IllegalStateError(GameError):
    """Raised when asking for the next player of a finished game."""

    default_message = "The Game Is Already Over"


class IllegalCellError(GameError):
    """Raised when a cell is outside the grid or already taken."""

    default_message = "The Cell Can't Be Played in"


class NoWinnerError(GameError):
    """Raised when asking for the winner of a game nobody has won."""

    default_message = "There Is No Winner Yet"