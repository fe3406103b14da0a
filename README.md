# tictactoe

This is tic-tac-toe on a 3×3 grid, played in the terminal. You play X and move first. The computer plays O at normal difficulty.

## Installation

```
pip install .
```

## Playing

```
tictactoe
```

Before each move the game prints the grid. `X` and `O` mark the cells that have been played, and `-` marks an open cell:

```
---
-X-
--O
Player X's turn.
Enter the row and column: 0 2
```

Rows and columns are numbered from 0 to 2. Type the row and then the column, separated by whitespace. If you type only one number, the game waits for the second one.

Some moves are not accepted:

- a cell that is off the board
- a cell that is already taken
- input that is not a number

For any of these, the game prints a message, prints the grid again and asks for your move once more.

When the game ends, it prints the final grid and one of these results:

- `The winner is X!`
- `The winner is O!`
- `The game ended by Draw!`

The command exits with status 0. If input ends (Ctrl-D) or you press Ctrl-C, it exits with status 1.

## What the command does not do

The command accepts no options other than `--help`. It always puts a human as X against a normal-difficulty computer as O. To choose other players or another difficulty, use the library as shown below.

## Using it as a library

```python
from tictactoe.model import Model, Difficulty
from tictactoe.players import AI, Human
from tictactoe.controller import Controller

Controller(Human(), AI(Difficulty.HARD)).go(Model())
```

### Controller

`Controller(x, o, output)` is found in `tictactoe.controller`. Its arguments are:

- `x`: the player for X. It defaults to `Human()`.
- `o`: the player for O. It defaults to `AI(Difficulty.NORMAL)`.
- `output`: a text stream for the grids and messages. It defaults to standard output.

`go(game)` plays a `Model` to the end. It plays a fresh one if you give it none. `render_grid(grid)` returns a grid as text, one line per row.

### Players

Players are found in `tictactoe.players` and derive from `PlayerType`.

`Human(input_fn)` reads its moves through `input_fn`. It defaults to `input`.

`AI(difficulty, rng)` is the computer player. You can pass a `random.Random` as `rng` so that its random choices can be repeated. There are three difficulty levels:

- `Difficulty.EASY` plays a random open cell.
- `Difficulty.NORMAL` takes a move that wins at once if it has one. Failing that, it blocks a cell where the opponent would complete a line. Otherwise it plays at random.
- `Difficulty.HARD` scores every open cell with `minimax` and alpha-beta pruning. It plays the highest-scoring cell, and the first one in row order wins a tie. A pruning cutoff ends the scan of the current grid row only.

### Model

`Model`, in `tictactoe.model`, holds the board and enforces the rules. It has these members:

- `play(row, column)` places the next side's mark. Call `update_status()` after it to detect a win or a draw.
- `who_is_next()` returns the side to move.
- `is_over()` tells whether the game has ended.
- `status` is a `Status`: `PLAYING`, `DRAW` or `WIN`.
- `winner` is the winning `Player`.
- `grid` is a tuple of rows of `Cell`: `X`, `O` or `OPEN`.
- `cell(row, column)` returns the content of one cell.
- `open_moves()` returns the open cells as a list of `Move`.
- `undo(row, column)` takes back the last move.

`has_line(grid, cell)` tells whether a cell value fills a row, a column or a diagonal.

### Errors

Rule violations raise errors from `tictactoe.errors`, and all of them derive from `GameError`:

- `IllegalCellError` is raised for a cell that is off the board or already taken.
- `IllegalStateError` is raised by `who_is_next()`, and so by `play()`, once the game is over.
- `NoWinnerError` is raised when reading `winner` while no one has won.

## Running the tests

Install the test extra and run pytest:

```
pip install .[test]
pytest
```