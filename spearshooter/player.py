"""The spear-carrying knight controlled by the player."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

import pygame

from spearshooter.badguy import BadGuy, overlaps

SPRITE_SIZE = 64
START_X = 20
SPEED = 7

_BLACK = (0, 0, 0)
_ARCANE_BLUE = (51, 164, 252)
_STEEL = (113, 121, 126)
_WOOD = (79, 32, 15)
_BLUE = (48, 92, 222)
_GOLD = (255, 215, 0)
_STEEL_DARK = (88, 96, 100)


class Direction(IntEnum):
    """Facing of the player; also the direction thrown weapons travel."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


def _lines(colour, *segments):
    return [("line", colour, segment) for segment in segments]


def _pixels(colour, *points):
    return [("pixel", colour, point) for point in points]


def _rects(colour, *boxes):
    return [("rect", colour, box) for box in boxes]


_SPRITE_OPS = [
    # spear head
    *_lines(_BLACK, (51, 1, 51, 4), (50, 4, 50, 10), (52, 4, 52, 10),
            (49, 10, 49, 13), (53, 10, 53, 13), (49, 14, 52, 14)),
    *_lines(_ARCANE_BLUE, (51, 4, 51, 7), (50, 10, 50, 12), (52, 10, 52, 12)),
    *_lines(_STEEL, (51, 7, 51, 12), (49, 13, 52, 13)),
    # spear haft
    *_lines(_BLACK, (50, 14, 49, 58), (52, 14, 51, 58)),
    *_lines(_WOOD, (51, 14, 50, 58)),
    *_lines(_BLACK, (49, 59, 52, 59), (48, 60, 53, 60)),
    *_lines(_ARCANE_BLUE, (49, 60, 52, 60)),
    *_lines(_BLACK, (49, 61, 52, 61)),
    # shield
    *_lines(_BLACK, (7, 18, 31, 18), (3, 19, 7, 19)),
    *_lines(_BLUE, (7, 19, 11, 19), (14, 19, 18, 19)),
    *_lines(_GOLD, (18, 19, 20, 19)),
    *_lines(_BLUE, (20, 19, 24, 19), (27, 19, 31, 19)),
    *_lines(_BLACK, (31, 19, 35, 19), (1, 20, 3, 20)),
    *_lines(_BLUE, (3, 20, 6, 20)),
    *_lines(_GOLD, (6, 20, 8, 20)),
    *_lines(_BLUE, (8, 20, 12, 20)),
    *_lines(_GOLD, (12, 20, 26, 20)),
    *_lines(_BLUE, (26, 20, 30, 20)),
    *_lines(_GOLD, (30, 20, 32, 20)),
    *_lines(_BLUE, (32, 20, 35, 20)),
    *_lines(_BLACK, (35, 20, 37, 20), (2, 21, 4, 21)),
    *_lines(_BLUE, (4, 21, 7, 21)),
    *_lines(_GOLD, (7, 21, 9, 21)),
    *_lines(_BLUE, (9, 21, 29, 21)),
    *_lines(_GOLD, (29, 21, 31, 21)),
    *_lines(_BLUE, (31, 21, 34, 21)),
    *_lines(_BLACK, (34, 21, 36, 21), (3, 22, 35, 22)),
    *_pixels(_GOLD, (12, 19)),
    *_pixels(_BLUE, (13, 19)),
    *_pixels(_GOLD, (14, 19), (25, 19)),
    *_pixels(_BLUE, (26, 19)),
    *_pixels(_GOLD, (27, 19)),
    # arm
    *_lines(_BLACK, (14, 22, 14, 24), (13, 24, 13, 28), (12, 28, 12, 32),
            (11, 32, 11, 34), (19, 22, 19, 25), (18, 25, 18, 29), (17, 29, 17, 31)),
    *_rects(_STEEL, (14, 22, 18, 25), (13, 24, 17, 29), (12, 28, 16, 32), (11, 32, 14, 34)),
    # torso
    *_rects(_STEEL, (11, 34, 14, 48), (50, 34, 53, 48)),
    *_lines(_GOLD, (15, 33, 15, 49), (50, 34, 50, 49)),
    *_rects(_BLUE, (15, 33, 49, 49), (16, 49, 48, 51)),
    *_lines(_BLUE, (16, 33, 49, 33)),
    *_lines(_BLACK, (16, 32, 48, 32), (14, 33, 16, 33), (12, 34, 14, 34),
            (10, 35, 12, 35), (11, 35, 11, 47)),
    *_pixels(_BLACK, (12, 48)),
    *_lines(_BLACK, (12, 49, 14, 49), (14, 50, 16, 50), (16, 51, 18, 51),
            (18, 52, 46, 52), (46, 51, 48, 51), (48, 50, 50, 50), (50, 49, 52, 49)),
    *_pixels(_BLACK, (53, 48)),
    *_lines(_BLACK, (54, 35, 54, 47)),
    *_pixels(_BLACK, (53, 35)),
    *_lines(_BLACK, (50, 34, 52, 34), (48, 33, 50, 33), (46, 32, 48, 32)),
    # chainmail
    *_pixels(
        _STEEL_DARK,
        (15, 23), (17, 23), (16, 24), (18, 24), (15, 25), (17, 25), (14, 26), (16, 26),
        (15, 27), (17, 27), (14, 28), (16, 28), (13, 29), (15, 29), (17, 29), (14, 30),
        (16, 30), (13, 31), (15, 31), (14, 32), (16, 32), (13, 33), (12, 34), (13, 35),
        (12, 36), (14, 36), (13, 37), (12, 38), (14, 38), (13, 39), (12, 40), (14, 40),
        (13, 41), (12, 42), (14, 42), (13, 43), (12, 44), (14, 44), (13, 45), (12, 46),
        (14, 46), (13, 47), (14, 48), (52, 35), (51, 36), (53, 36), (52, 37), (51, 38),
        (53, 38), (51, 40), (51, 42), (51, 44), (51, 46), (51, 48), (53, 40), (53, 42),
        (53, 44), (53, 46), (52, 39), (52, 41), (52, 43), (52, 45), (52, 47),
    ),
    # helmet
    *_rects(_STEEL, (18, 35, 46, 45), (27, 26, 37, 54), (21, 29, 43, 51), (19, 31, 21, 49),
            (43, 31, 45, 49), (23, 51, 41, 53), (23, 27, 41, 29)),
    *_lines(
        _BLACK,
        (27, 25, 37, 25), (25, 26, 27, 26), (23, 27, 25, 27), (21, 28, 23, 28),
        (21, 53, 23, 53), (23, 54, 25, 54), (25, 55, 27, 55), (27, 56, 37, 56),
        (37, 55, 39, 55), (39, 54, 41, 54), (41, 53, 43, 53), (41, 28, 43, 28),
        (39, 27, 41, 27), (37, 26, 39, 26), (20, 29, 20, 31), (19, 31, 19, 33),
        (18, 33, 18, 35), (17, 35, 17, 45), (18, 45, 18, 47), (19, 47, 19, 49),
        (20, 49, 20, 51), (45, 29, 45, 31), (46, 31, 46, 33), (47, 33, 47, 35),
        (48, 35, 48, 45), (47, 45, 47, 47), (46, 47, 46, 49), (45, 49, 45, 51),
    ),
    *_pixels(_BLACK, (21, 29), (44, 29), (21, 52), (44, 52)),
    *_lines(
        _STEEL_DARK,
        (27, 26, 37, 26), (25, 27, 27, 27), (23, 28, 25, 28), (21, 29, 23, 29),
        (41, 29, 43, 29), (39, 28, 41, 28), (37, 27, 39, 27),
        (21, 52, 23, 52), (23, 53, 25, 53), (25, 54, 27, 54), (27, 55, 37, 55),
        (37, 54, 39, 54), (39, 53, 41, 53), (41, 52, 43, 52),
        (21, 29, 21, 31), (20, 31, 20, 33), (19, 33, 19, 35), (18, 35, 18, 45),
        (19, 45, 19, 47), (20, 47, 20, 49), (21, 49, 21, 51),
        (44, 29, 44, 31), (45, 31, 45, 33), (46, 33, 46, 35), (47, 35, 47, 45),
        (46, 45, 46, 47), (45, 47, 45, 49), (44, 49, 44, 51),
    ),
    *_lines(_BLACK, (27, 30, 37, 30), (27, 51, 37, 51), (22, 35, 22, 45), (43, 35, 43, 45),
            (22, 35, 27, 30), (37, 30, 42, 35), (22, 45, 27, 50), (37, 50, 42, 45)),
    *_lines(_STEEL_DARK, (27, 31, 37, 31), (27, 50, 37, 50), (23, 35, 23, 45),
            (42, 35, 42, 45), (23, 35, 27, 31), (37, 31, 41, 35), (23, 45, 27, 49),
            (37, 49, 41, 45)),
]


def make_player_image() -> pygame.Surface:
    """Draw the knight sprite, facing up, on a black 64x64 surface."""
    image = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    image.fill(_BLACK)
    for kind, colour, coords in _SPRITE_OPS:
        if kind == "line":
            x1, y1, x2, y2 = coords
            pygame.draw.line(image, colour, (x1, y1), (x2, y2), 1)
        elif kind == "pixel":
            image.set_at(coords, colour)
        else:
            x1, y1, x2, y2 = coords
            pygame.draw.rect(image, colour, pygame.Rect(x1, y1, x2 - x1, y2 - y1))
    return image


class Player:
    """The player's knight: moves in four directions and is blocked by enemies."""

    def __init__(self, height: int) -> None:
        self.image = make_player_image()
        self.x = START_X
        self.y = height // 2
        self.speed = SPEED
        self.direction = Direction.RIGHT
        self.bound_x, self.bound_y = self.image.get_size()

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the sprite onto the surface, turned to face the current direction."""
        turns = {
            Direction.UP: 0,
            Direction.RIGHT: -90,
            Direction.DOWN: 180,
            Direction.LEFT: 90,
        }
        angle = turns[self.direction]
        sprite = pygame.transform.rotate(self.image, angle) if angle else self.image
        surface.blit(sprite, (self.x, self.y))

    def _blocking(self, bad_guys: Iterable[BadGuy]):
        for guy in bad_guys:
            if guy.live and overlaps(self.x, self.y, guy.x, guy.y, guy.bound_x, guy.bound_y):
                yield guy

    def move_up(self, bad_guys: Iterable[BadGuy]) -> None:
        """Face and step up, stopping at the top edge and below any enemy."""
        self.direction = Direction.UP
        self.y = max(self.y - self.speed, 0)
        for guy in self._blocking(bad_guys):
            self.y = guy.y + guy.bound_y

    def move_down(self, height: int, bad_guys: Iterable[BadGuy]) -> None:
        """Face and step down, stopping at the bottom edge and above any enemy."""
        self.direction = Direction.DOWN
        self.y = min(self.y + self.speed, height - self.bound_y)
        for guy in self._blocking(bad_guys):
            self.y = guy.y - guy.bound_y

    def move_left(self, bad_guys: Iterable[BadGuy]) -> None:
        """Face and step left, stopping at the left edge and right of any enemy."""
        self.direction = Direction.LEFT
        self.x = max(self.x - self.speed, 0)
        for guy in self._blocking(bad_guys):
            self.x = guy.x + guy.bound_x

    def move_right(self, width: int, bad_guys: Iterable[BadGuy]) -> None:
        """Face and step right, stopping at the right edge and left of any enemy."""
        self.direction = Direction.RIGHT
        self.x = min(self.x + self.speed, width - self.bound_x)
        for guy in self._blocking(bad_guys):
            self.x = guy.x - guy.bound_x