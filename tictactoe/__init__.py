"""Console tic-tac-toe: game model, human and computer players, and a game loop."""

__version__ = "1.0.0"
__all__ = ["errors", "model", "players", "controller"]