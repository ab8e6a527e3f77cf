import pytest

from tomatoarena.collider import ColliderType
from tomatoarena.entity import PlayerFlag
from tomatoarena.player import MAX_HEALTH, SPAWN_X, SPAWN_Y, Player


def test_new_player_defaults():
    player = Player()
    assert player.coord == (SPAWN_X, SPAWN_Y)
    assert player.id == -1
    assert player.health == MAX_HEALTH
    assert player.flags == PlayerFlag.NONE


def test_collider_belongs_to_player():
    player = Player()
    assert player.collider.type is ColliderType.PLAYER
    assert player.collider.target is player
    assert player.collider.entity.coord == player.coord
    assert player.collider.size == (32, 32)


@pytest.mark.parametrize(
    "flag, axis, sign",
    [
        (PlayerFlag.MOVE_DOWN, 1, 1),
        (PlayerFlag.MOVE_UP, 1, -1),
        (PlayerFlag.MOVE_RIGHT, 0, 1),
        (PlayerFlag.MOVE_LEFT, 0, -1),
    ],
)
def test_move_on_flags_moves_along_axis(flag, axis, sign):
    player = Player()
    start = player.coord
    player.flags = flag
    player.move_on_flags(0.5)
    end = player.coord
    assert (end[axis] - start[axis]) * sign > 0
    assert end[1 - axis] == start[1 - axis]


def test_move_without_flags_stays():
    player = Player()
    start = player.coord
    player.move_on_flags(1.0)
    assert player.coord == start


def test_direction_right():
    player = Player()
    player.flags = PlayerFlag.MOVE_RIGHT
    player.move_on_flags(0.5)
    player.update_direction()
    assert player.move_animation.base == 6


def test_direction_left():
    player = Player()
    player.flags = PlayerFlag.MOVE_LEFT
    player.move_on_flags(0.5)
    player.update_direction()
    assert player.move_animation.base == 3


def test_direction_moving_down_uses_base_zero():
    player = Player()
    player.flags = PlayerFlag.MOVE_DOWN
    player.move_on_flags(0.5)
    player.update_direction()
    assert player.move_animation.base == 0


def test_direction_moving_up_uses_base_nine():
    player = Player()
    player.flags = PlayerFlag.MOVE_UP
    player.move_on_flags(0.5)
    player.update_direction()
    assert player.move_animation.base == 9


def test_idle_update_shows_standing_frame():
    player = Player()
    player.update(0.1)
    assert player.draw_frame_id == player.move_animation.base + 1


def test_update_moves_collider_to_player():
    player = Player()
    player.set_coord(40, 70)
    player.update(0.01)
    assert player.collider.entity.coord == (40, 70)


def test_opposing_keys_skip_update():
    player = Player()
    player.set_coord(40, 70)
    player.flags = PlayerFlag.MOVE_HORIZONTAL
    player.update(0.01)
    assert player.collider.entity.coord == (SPAWN_X, SPAWN_Y)


def test_moving_update_advances_animation():
    player = Player()
    player.flags = PlayerFlag.MOVE_RIGHT
    player.move_on_flags(0.5)
    before = player.draw_frame_id
    player.update(1.0)
    assert player.draw_frame_id == before + 1


def test_decrement_and_respawn():
    player = Player()
    player.decrement_health(MAX_HEALTH)
    assert player.health <= 0
    player.respawn(10, 20)
    assert player.health == MAX_HEALTH
    assert player.coord == (10, 20)


def test_decrement_accumulates():
    player = Player()
    player.decrement_health(17)
    player.decrement_health(17)
    assert player.health == MAX_HEALTH - 34


def test_on_collision_leaves_player_unchanged():
    a, b = Player(), Player()
    assert a.collider.execute(b.collider) is True
    assert a.health == MAX_HEALTH and b.health == MAX_HEALTH