# blocktris

A small falling-block puzzle game. Pieces drop onto a 10-column by 20-row grid,
by default one step per second. Fill a whole row to clear it and score a point.
The running score is printed to the terminal as `SCORE: <n>` each time a piece
lands.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
blocktris
```

A 250x500 window opens. Each cell is 25 pixels square.

| Key         | Action                                   |
|-------------|------------------------------------------|
| Left        | move the falling piece one column left   |
| Right       | move the falling piece one column right  |
| Down        | move the falling piece one row down      |
| Up          | rotate the falling piece clockwise       |

Close the window to quit.

Options:

- `--interval SECONDS` — time between automatic drops; must be positive
  (default: 1.0).
- `--seed N` — seed the random generator so the pieces come in the same order
  every time.

```
blocktris --interval 0.5 --seed 7
```

There are five piece shapes (`blocktris.blocks.BlockKind`): `I`, a straight
line of four; `T`; `S`; `S2`, a 2x2 square; and `L`. Each new piece is picked
at random and appears at the top of the grid, starting at the fourth column.
A piece rotates about its top-left cell, and a move or rotation that would
leave the grid or overlap a settled cell is ignored.

## What the game does not do

There is no game over: a new piece is always placed at the top of the grid,
even over cells that have already settled. There are no levels, no speed-up,
no preview of the next piece, no pause and no hard drop, and the score is not
saved between games.

## Using the pieces from code

`blocktris.board.Board` holds the grid and its rules. Cells are
`blocktris.board.Cell` values: `EMPTY`, `FALLING` or `PLACED`.

- `Board(grid=None, rng=None)` starts from a fresh 20x10 grid with one piece
  spawned, or takes an existing grid of cell values as it is.
- `Board.tick()` moves the falling piece down one row. When the piece cannot
  go further it settles, full rows are cleared, `Board.points` goes up by the
  number cleared, a new piece is spawned, and `tick()` returns `True`.
- `move_left`, `move_right`, `move_down` and `rotate` act on the falling piece
  and return whether it moved.
- `clear_rows()` removes full rows and returns how many were removed;
  `spawn()` places a new random piece; `screen_coordinates()` gives the pixel
  position of every cell.

`blocktris.blocks.next_block(rng)` returns the shape of a random piece as a
4x4 matrix, and `block_shape(kind)` returns the shape of a given kind. Pass a
seeded `random.Random` to get the same order of pieces every time.

```python
import random

from blocktris.board import Board

board = Board(rng=random.Random(7))
board.move_left()
board.tick()
print(board.points)
```

`blocktris.game` has `handle_key(board, key)` to apply an arrow-key action,
`draw(surface, board)` to paint a board on a pygame surface, and
`run(board, interval)` to open the window and play, returning the final score.

## Running the tests

```
pip install ".[test]"
pytest
```