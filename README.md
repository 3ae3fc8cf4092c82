# blockfall

A small falling-block puzzle game built on pygame.

Pieces drop into a 10-column, 20-row well. Steer and rotate them so they
fill whole rows. Full rows are cleared and everything above drops down.
The game ends when a new piece has no room to appear.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
blockfall
```

The command takes no options other than `--help`. It opens a 500 by 620
window. The well is on the left. On the right are the current score and the
next piece to come.

| Key         | Action                          |
|-------------|---------------------------------|
| Left arrow  | Move the piece one column left  |
| Right arrow | Move the piece one column right |
| Down arrow  | Move the piece down one row     |
| Up arrow    | Rotate the piece                |
| Escape      | Quit                            |

Closing the window also quits. The piece falls one row a second on its own.
After a game is over, any key other than Escape starts a new one.

### Assets

The game looks for `Font/monogram.ttf`, `Sounds/music.mp3`,
`Sounds/rotate.mp3` and `Sounds/clear.mp3` relative to the directory it is
started from. These files are not shipped with the package. If the font is
missing, pygame's default font is used. If the sounds are missing, or no
audio device is available, the game plays without sound.

### Scoring

- 1 point for each press of the down arrow
- 100 points for clearing one row at once
- 300 points for two rows
- 500 points for three rows
- no bonus is given for four rows at once

Each time rows are cleared, the automatic fall gets 0.01 seconds faster.

Pieces are dealt from a bag that holds the seven shapes (I, J, L, O, S, T, Z).
Each shape comes up once before the bag is refilled.

## Using the game logic

The rules in `blockfall.game` are kept apart from the window, so they can be
driven directly:

```python
import random

from blockfall.game import Game, Key, SilentSounds

game = Game(random.Random(1), SilentSounds())
game.handle_input(Key.LEFT)
game.handle_input(Key.UP)
game.move_block_down()
print(game.score, game.game_over)
```

`Game.handle_input` takes a `Key` (`LEFT`, `RIGHT`, `DOWN`, `UP` or `OTHER`),
or `None` when no key was pressed. The `Game` object has these attributes:

- `score`
- `game_over`
- `speed`: the seconds between automatic drops
- `grid`
- `current_block`
- `next_block`

To get sound, pass any object with `play_rotate()` and `play_clear()` methods
as the `sounds` argument.

`blockfall.grid.Grid` holds the well itself. `str(grid)` gives the cell values
row by row, with 0 for an empty cell and the piece's id otherwise.

`blockfall.blocks` defines the seven pieces. `all_blocks()` returns one of
each.