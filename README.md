# brickbreaker

A small brick breaker arcade game built on pygame. You move a paddle along the
bottom of the screen and keep the ball bouncing until every brick is gone. You
start with three lives.

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
brickbreaker
```

By default the game looks for its assets in the current directory. Pass
`--assets DIR` to use another directory:

```
brickbreaker --assets path/to/assets
```

The assets directory holds:

- `map.txt`: the brick layout. It has 3 rows of 15 values, separated by
  whitespace. A `1` is a brick and a `0` is an empty slot. Values after the
  first 45 are ignored.
- `image/`: `background.jpg`, `menu_background.jpg`, `ball.png`,
  `paddle.png`, `win_screen.png`, `lose_screen.png`, `brick1.jpg` and
  `brick2.jpg`. Even rows of bricks use `brick1.jpg`, odd rows `brick2.jpg`.
- `font/SVN-Coder's Crux.otf`: the font used for the on-screen text.
- `music/`: `sound_hit.mp3` and `menu_sound.mp3` (sound effects), and
  `sound_background.mp3`, `win_sound.mp3` and `lose_sound.mp3` (music).

If an image, the font, a sound, a music file or the audio device is missing,
the game logs a warning and carries on without it. Text is not drawn when the
font is missing. If `map.txt` cannot be opened, the field starts empty, so the
game is won as soon as the ball moves. A `map.txt` with too few values or with
values other than `0` and `1` stops the game with a `ValueError`.

Controls:

- Click **PLAY** on the menu to start, or **EXIT** to leave.
- Press any key to launch the ball.
- Hold **Left** or **Right** to move the paddle.
- Press **Escape** or close the window to quit.

The ball bounces off the top and side walls, the paddle and the bricks. When
it reaches the bottom edge you lose a life and it bounces back up. The game
ends when every brick is cleared or the last life is lost. The end screen then
offers **TRY AGAIN**, which restores the bricks, the paddle, the ball and the
lives and waits for a key again, and **EXIT**.

There is no score, no level progression and no saved state.

## Using the game logic

The rules live in `brickbreaker.world` and do not need a display:

```python
from brickbreaker.world import World, parse_map

world = World(parse_map("1 " * 45))
world.move_paddle(-1)
result = world.step()
print(result.outcome, result.hits, world.remaining(), world.lives)
```

- `parse_map(text)` and `load_map(path)` read a brick layout into a 3 by 15
  grid of booleans.
- `World(bricks)` holds the paddle, the ball, the bricks and the lives.
  `World.reset(bricks)` puts them back at the start.
- `World.move_paddle(direction)` shifts the paddle by 3 pixels per unit of
  direction. The paddle is kept on screen at the next step.
- `World.step()` moves the ball by one frame, resolves every collision and
  returns a `StepResult` with the number of bricks hit (`hits`), whether a
  life was lost (`life_lost`) and an `Outcome`: `PLAYING`, `WON` or `LOST`.
- `brick_rect(row, col)` gives the `Rect` a brick takes up on screen.
  `Rect.intersects(other)` and `Rect.contains(x, y)` test overlap and points.

`brickbreaker.game.Game(assets_dir)` is the windowed game. `Game.run()` shows
the menu and plays until the player quits, and `Game` can also be used as a
context manager that closes the window on exit.