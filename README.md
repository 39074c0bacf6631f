# spearshooter

A small top-down arcade shooter. You play a spear-carrying knight who throws
spinning stars at magenta enemies that appear at random across an 800×400
field.

## Installing

```
pip install .
```

This pulls in `pygame`, which handles the window, keyboard and drawing.

## Playing

```
spearshooter
```

The same game starts with `python -m spearshooter.game`. The command takes
no options besides `--help`.

Controls:

| Key         | Action                                               |
|-------------|------------------------------------------------------|
| Arrow keys  | Move the knight; he turns to face the way he moves   |
| Space       | Throw a star in the direction the knight is facing   |
| Escape      | Quit                                                 |

Closing the window also quits. The game runs at 60 frames per second.

How it plays:

- The knight starts near the left edge, facing right, and moves 7 pixels per
  frame. He cannot leave the field, and live enemies block his way.
- At most five stars can be in flight at once. A star flies straight at 7
  pixels per frame and vanishes when it leaves the field or hits an enemy;
  the enemy it hits vanishes too.
- Up to five enemies can be on the field. Each frame, every absent enemy has
  a 1 in 500 chance of appearing at a random spot at least 100 pixels from
  the top and left edges. It tries up to ten spots that do not overlap the
  knight or another enemy, and stays away that frame if none is free.

## What it does not do

There is no score, no lives, and no way to lose: enemies never move or hurt
the knight. The game simply runs until you quit.

## Using the pieces

The game logic runs without a window and can be driven from code:

```python
import random

from spearshooter.game import Game, Key

game = Game(rng=random.Random(1))
game.key_down(Key.RIGHT)
game.tick()          # one frame: move, spawn enemies, advance and collide stars
game.key_up(Key.RIGHT)
game.fire()          # throw the first star not already in flight
```

`Game` holds `player`, `weapons`, `bad_guys`, the set of held `keys` and a
`done` flag; `Game.draw(surface)` clears a pygame surface and draws everything
on it.

- `spearshooter.player` has `Player` (with `move_up`, `move_down`,
  `move_left`, `move_right`) and the `Direction` enum.
- `spearshooter.badguy` has `BadGuy` (with `start`, `rand_x`, `rand_y`) and
  the `overlaps` helper.
- `spearshooter.weapon` has `Weapon` (with `fire`, `update`, `collide`).

Each of `Player`, `BadGuy` and `Weapon` has a `draw(surface)` method, and
`make_player_image`, `make_badguy_image` and `make_weapon_image` return the
64×64 sprites.

## Running the tests

```
pip install .[test]
pytest
```