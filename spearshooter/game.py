"""Game state, input handling and the main loop."""

from __future__ import annotations

import argparse
import random
from enum import Enum, auto

import pygame

from spearshooter.badguy import BadGuy
from spearshooter.player import Player
from spearshooter.weapon import Weapon

WIDTH = 800
HEIGHT = 400
NUM_WEAPONS = 5
NUM_BAD_GUYS = 5
FPS = 60


class Key(Enum):
    """Logical keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    ESCAPE = auto()


_HELD_KEYS = {Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT, Key.SPACE}


class Game:
    """The player, the weapon pool and the enemies, advanced one tick at a time."""

    def __init__(
        self,
        rng: random.Random | None = None,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.player = Player(height)
        self.weapons = [Weapon() for _ in range(NUM_WEAPONS)]
        self.bad_guys = [BadGuy(rng) for _ in range(NUM_BAD_GUYS)]
        self.keys: set[Key] = set()
        self.done = False

    def tick(self) -> None:
        """Advance the world by one frame."""
        if Key.UP in self.keys:
            self.player.move_up(self.bad_guys)
        if Key.DOWN in self.keys:
            self.player.move_down(self.height, self.bad_guys)
        if Key.LEFT in self.keys:
            self.player.move_left(self.bad_guys)
        if Key.RIGHT in self.keys:
            self.player.move_right(self.width, self.bad_guys)

        for weapon in self.weapons:
            weapon.update(self.width, self.height)
        for guy in self.bad_guys:
            guy.start(
                self.width,
                self.height,
                self.bad_guys,
                self.player.x,
                self.player.y,
                self.player.bound_x,
                self.player.bound_y,
            )
        for weapon in self.weapons:
            weapon.collide(self.bad_guys)

    def key_down(self, key: Key) -> None:
        """React to a key being pressed."""
        if key is Key.ESCAPE:
            self.done = True
            return
        self.keys.add(key)
        if key is Key.SPACE:
            self.fire()

    def key_up(self, key: Key) -> None:
        """React to a key being released."""
        if key is Key.ESCAPE:
            self.done = True
            return
        if key in _HELD_KEYS:
            self.keys.discard(key)

    def fire(self) -> None:
        """Throw the first weapon that is not already in flight, if any."""
        for weapon in self.weapons:
            if not weapon.live:
                weapon.fire(self.player)
                return

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface and draw the player, weapons and enemies on it."""
        surface.fill((0, 0, 0))
        self.player.draw(surface)
        for weapon in self.weapons:
            weapon.draw(surface)
        for guy in self.bad_guys:
            guy.draw(surface)


_KEYMAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the game until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(description="Top-down spear-and-star shooter.")
    parser.parse_args(argv)

    pygame.init()
    try:
        display = pygame.display.set_mode((WIDTH, HEIGHT))
        clock = pygame.time.Clock()
        game = Game()
        while not game.done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.done = True
                elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                    game.key_down(_KEYMAP[event.key])
                elif event.type == pygame.KEYUP and event.key in _KEYMAP:
                    game.key_up(_KEYMAP[event.key])
            if game.done:
                break
            game.tick()
            game.draw(display)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())