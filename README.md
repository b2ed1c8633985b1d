# boxgames

Two small games about boxes, played in a pygame window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Sokoban

```
boxgames-sokoban
```

Walk with the arrow keys or W, A, S, D and push the six red boxes onto
the six cells marked with a green `*` on the right of the level. Movement
is in small pixel steps rather than whole cells; holding a key repeats
the step. Any other letter key moves the player up.

The bottom of the window shows the time played so far, how many goal
cells are covered, and an arrow for the direction last moved. The window
closes by itself once all six goal cells are covered.

## Dodge

```
boxgames-dodge
```

Boxes fall from the top of the window. Move your box left and right with
the arrow keys; it cannot leave the window.

- A box that reaches the ground is worth 5 points.
- Moving the mouse pointer onto a box removes it and is worth 3 points.
- A box that hits you costs 20 points.

The level is the score divided by 100, plus one. The higher the level,
the more often boxes appear and the faster they fall. The score and the
level are shown in the top-left corner. The game runs until the window
is closed.

## Using the game logic

The rules can be used without a window.

- `boxgames.sokoban.SokobanGame` holds the Sokoban state. `press(key)`
  takes a key code or a single character, `move_player(direction)` takes
  a `Direction`, `tick()` pushes any touched box and updates
  `solved_count` and `finished`, and `elapsed()` gives the seconds between
  the start and the latest tick. The clock can be passed in for testing.
  `direction_for_key(key)` gives the `Direction` bound to a key.
- `boxgames.dodge.DodgeGame` holds the dodge game: `score`, `level`,
  `player` and `boxes`. Drive it with `update(keys, mouse)`, where `keys`
  is a `boxgames.keys.KeyManager`; pass a `random.Random` to make box
  placement repeatable.
- `boxgames.keys.KeyManager` turns the set of keys held each frame into
  `KeyState` values: pressed this frame, held, let go this frame, or
  released.
- `boxgames.geometry.Rect` is the rectangle type both games use, with
  `intersects`, `intersection`, `contains` and `moved`; `rect_around`
  builds a square around a centre point.

## What it does not do

Sokoban has a single built-in level: there is no level loading, no undo
and no restart. Neither game keeps scores or times after its window
closes.