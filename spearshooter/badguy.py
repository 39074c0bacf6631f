"""Enemies that appear at random free spots on the playfield."""

from __future__ import annotations

import random
from collections.abc import Iterable

import pygame

SPRITE_SIZE = 64
SPAWN_ODDS = 500
MAX_PLACEMENT_ATTEMPTS = 10
MIN_SPAWN_COORD = 100


def make_badguy_image() -> pygame.Surface:
    """Draw the enemy sprite on a black 64x64 surface."""
    image = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    image.fill((0, 0, 0))
    pygame.draw.rect(image, (100, 100, 120), pygame.Rect(25, 10, 14, 44))
    pygame.draw.ellipse(image, (255, 0, 255), pygame.Rect(0, 16, 64, 32))
    pygame.draw.circle(image, (255, 255, 255), (32, 32), 4)
    pygame.draw.circle(image, (120, 255, 255), (16, 32), 4)
    pygame.draw.circle(image, (255, 255, 120), (48, 32), 4)
    return image


def overlaps(x: int, y: int, other_x: int, other_y: int, bound_x: int, bound_y: int) -> bool:
    """Whether point (x, y) lies strictly within bound_x/bound_y of (other_x, other_y)."""
    return (
        other_x - bound_x < x < other_x + bound_x
        and other_y - bound_y < y < other_y + bound_y
    )


class BadGuy:
    """An enemy that spawns occasionally and stays until it is shot."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.image = make_badguy_image()
        self.x = 0
        self.y = 0
        self.live = False
        self.bound_x, self.bound_y = self.image.get_size()
        self._rng = rng if rng is not None else random.Random()

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the enemy onto the surface if it is alive."""
        if self.live:
            surface.blit(self.image, (self.x, self.y))

    def start(
        self,
        width: int,
        height: int,
        bad_guys: Iterable[BadGuy],
        player_x: int,
        player_y: int,
        player_bound_x: int,
        player_bound_y: int,
    ) -> None:
        """With small odds, place a dead enemy where it hits nothing and bring it to life.

        Gives up quietly after a bounded number of placement attempts.
        """
        if self.live or self._rng.randrange(SPAWN_ODDS) != 0:
            return
        others = list(bad_guys)
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            self.rand_x(width)
            self.rand_y(height)
            blocked = any(
                overlaps(self.x, self.y, other.x, other.y, other.bound_x, other.bound_y)
                for other in others
                if other.live
            )
            blocked = blocked or overlaps(
                self.x, self.y, player_x, player_y, player_bound_x, player_bound_y
            )
            if not blocked:
                self.live = True
                return

    def rand_x(self, width: int) -> None:
        """Pick a random x so the sprite fits and stays clear of the left edge."""
        self.x = self._rng.randrange(MIN_SPAWN_COORD, width - self.bound_x)

    def rand_y(self, height: int) -> None:
        """Pick a random y so the sprite fits and stays clear of the top edge."""
        self.y = self._rng.randrange(MIN_SPAWN_COORD, height - self.bound_y)