import pygame
import pytest

from spearshooter.badguy import BadGuy
from spearshooter.player import Direction, Player
from spearshooter.weapon import Weapon, make_weapon_image


def _player(direction):
    player = Player(400)
    player.x = 200
    player.y = 150
    player.direction = direction
    return player


def _live_guy(x, y):
    guy = BadGuy()
    guy.x = x
    guy.y = y
    guy.live = True
    return guy


def test_image_size():
    assert make_weapon_image().get_size() == (64, 64)


def test_image_corner_is_black_and_arm_is_cyan():
    image = make_weapon_image()
    assert tuple(image.get_at((0, 0)))[:3] == (0, 0, 0)
    assert tuple(image.get_at((2, 27)))[:3] == (0, 255, 255)


def test_new_weapon_is_dead_with_half_bounds():
    weapon = Weapon()
    assert weapon.live is False
    assert weapon.bound_x == weapon.image.get_width() // 2
    assert weapon.bound_y == weapon.image.get_height() // 2


@pytest.mark.parametrize(
    "direction, dx, dy",
    [
        (Direction.UP, lambda p: p.bound_x // 2, lambda p: 0),
        (Direction.RIGHT, lambda p: p.bound_x, lambda p: p.bound_y // 2),
        (Direction.DOWN, lambda p: p.bound_x // 2, lambda p: p.bound_y),
        (Direction.LEFT, lambda p: 0, lambda p: p.bound_y // 2),
    ],
)
def test_fire_position_depends_on_facing(direction, dx, dy):
    player = _player(direction)
    weapon = Weapon()
    weapon.fire(player)
    assert weapon.live is True
    assert weapon.direction == direction
    assert (weapon.x, weapon.y) == (player.x + dx(player), player.y + dy(player))


def test_fire_while_live_keeps_position():
    weapon = Weapon()
    weapon.fire(_player(Direction.RIGHT))
    before = (weapon.x, weapon.y, weapon.direction)
    weapon.fire(_player(Direction.UP))
    assert (weapon.x, weapon.y, weapon.direction) == before


@pytest.mark.parametrize(
    "direction, sx, sy",
    [
        (Direction.UP, 0, -1),
        (Direction.RIGHT, 1, 0),
        (Direction.DOWN, 0, 1),
        (Direction.LEFT, -1, 0),
    ],
)
def test_update_moves_by_speed(direction, sx, sy):
    weapon = Weapon()
    weapon.fire(_player(direction))
    x, y = weapon.x, weapon.y
    weapon.update(800, 400)
    assert (weapon.x, weapon.y) == (x + sx * weapon.speed, y + sy * weapon.speed)
    assert weapon.live is True


def test_update_dead_weapon_does_not_move():
    weapon = Weapon()
    weapon.update(800, 400)
    assert (weapon.x, weapon.y) == (0, 0)


def test_update_leaving_field_kills():
    weapon = Weapon()
    weapon.fire(_player(Direction.UP))
    weapon.y = 3
    weapon.update(800, 400)
    assert weapon.live is False


def test_collide_kills_enemy_and_weapon():
    weapon = Weapon()
    weapon.live = True
    weapon.x, weapon.y = 300, 200
    guy = _live_guy(290, 190)
    weapon.collide([guy])
    assert weapon.live is False
    assert guy.live is False


def test_collide_kills_every_overlapping_enemy():
    weapon = Weapon()
    weapon.live = True
    weapon.x, weapon.y = 300, 200
    first = _live_guy(290, 190)
    second = _live_guy(295, 195)
    weapon.collide([first, second])
    assert (first.live, second.live) == (False, False)


def test_collide_misses_far_enemy():
    weapon = Weapon()
    weapon.live = True
    weapon.x, weapon.y = 100, 100
    guy = _live_guy(500, 300)
    weapon.collide([guy])
    assert weapon.live is True
    assert guy.live is True


def test_collide_ignores_dead_enemy():
    weapon = Weapon()
    weapon.live = True
    weapon.x, weapon.y = 300, 200
    guy = _live_guy(290, 190)
    guy.live = False
    weapon.collide([guy])
    assert weapon.live is True


def test_draw_spins_live_weapon():
    weapon = Weapon()
    weapon.live = True
    weapon.x, weapon.y = 100, 100
    surface = pygame.Surface((200, 200))
    weapon.draw(surface)
    weapon.draw(surface)
    assert weapon.angle == pytest.approx(0.2)


def test_draw_dead_weapon_leaves_surface_untouched():
    weapon = Weapon()
    surface = pygame.Surface((200, 200))
    surface.fill((255, 255, 255))
    weapon.draw(surface)
    assert weapon.angle == 0
    assert tuple(surface.get_at((32, 32)))[:3] == (255, 255, 255)