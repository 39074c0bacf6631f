"""Spinning throwing stars launched by the player."""

from __future__ import annotations

import math
from collections.abc import Iterable

import pygame

from spearshooter.badguy import BadGuy
from spearshooter.player import Direction, Player

SPRITE_SIZE = 64
SPEED = 7
SCALE = 0.5
SPIN_STEP = 0.1


def make_weapon_image() -> pygame.Surface:
    """Draw the throwing-star sprite on a black 64x64 surface."""
    image = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    image.fill((0, 0, 0))
    pygame.draw.rect(image, (0, 255, 255), pygame.Rect(0, 25, 64, 14))
    pygame.draw.rect(image, (0, 255, 255), pygame.Rect(25, 0, 14, 64))
    pygame.draw.circle(image, (100, 100, 100), (32, 32), 8, 5)
    pygame.draw.line(image, (100, 100, 255), (0, 32), (64, 32), 2)
    pygame.draw.line(image, (100, 100, 255), (32, 0), (32, 64), 2)
    pygame.draw.circle(image, (200, 200, 200), (32, 32), 16, 5)
    return image


class Weapon:
    """A projectile that flies straight in the direction it was thrown."""

    def __init__(self) -> None:
        self.image = make_weapon_image()
        self.x = 0
        self.y = 0
        self.speed = SPEED
        self.live = False
        self.angle = 0.0
        self.direction = Direction.UP
        width, height = self.image.get_size()
        self.bound_x = width // 2
        self.bound_y = height // 2

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the half-size, spinning sprite centred on its position if alive."""
        if not self.live:
            return
        sprite = pygame.transform.rotozoom(self.image, -math.degrees(self.angle), SCALE)
        surface.blit(sprite, sprite.get_rect(center=(self.x, self.y)))
        self.angle += SPIN_STEP

    def fire(self, player: Player) -> None:
        """Launch from the side of the player it faces, unless already in flight."""
        if self.live:
            return
        self.direction = Direction(player.direction)
        if self.direction is Direction.UP:
            self.x = player.x + player.bound_x // 2
            self.y = player.y
        elif self.direction is Direction.RIGHT:
            self.x = player.x + player.bound_x
            self.y = player.y + player.bound_y // 2
        elif self.direction is Direction.DOWN:
            self.x = player.x + player.bound_x // 2
            self.y = player.y + player.bound_y
        else:
            self.x = player.x
            self.y = player.y + player.bound_y // 2
        self.live = True

    def update(self, width: int, height: int) -> None:
        """Advance one step; the weapon dies once it leaves the playfield."""
        if not self.live:
            return
        dx, dy = {
            Direction.UP: (0, -self.speed),
            Direction.RIGHT: (self.speed, 0),
            Direction.DOWN: (0, self.speed),
            Direction.LEFT: (-self.speed, 0),
        }[self.direction]
        self.x += dx
        self.y += dy
        if not (0 <= self.x <= width and 0 <= self.y <= height):
            self.live = False

    def collide(self, bad_guys: Iterable[BadGuy]) -> None:
        """Kill every live enemy the weapon touches; the weapon is spent on a hit."""
        if not self.live:
            return
        half_x = self.bound_x // 2
        half_y = self.bound_y // 2
        for guy in bad_guys:
            if not guy.live:
                continue
            if (
                guy.x - half_x < self.x < guy.x + guy.bound_x + half_x
                and guy.y - half_y < self.y < guy.y + guy.bound_y + half_y
            ):
                self.live = False
                guy.live = False