import pytest

from tomatoarena.entity import Animation, Entity, Mob


def test_new_entity_is_at_origin():
    entity = Entity()
    assert entity.coord == (0, 0)
    assert entity.prev_coord == (0, 0)


def test_setting_coord_remembers_previous():
    entity = Entity()
    entity.coord = (10, 20)
    entity.coord = (30, 40)
    assert entity.coord == (30, 40)
    assert entity.prev_coord == (10, 20)


def test_move_truncates_towards_zero():
    entity = Entity()
    entity.coord = (5, 5)
    entity.move(1.9, -2.7)
    assert entity.coord == (6, 3)
    assert entity.prev_coord == (5, 5)


def test_move_by_fraction_stays_put():
    entity = Entity()
    entity.coord = (7, 8)
    entity.move(0.4, -0.4)
    assert entity.coord == (7, 8)


def test_mob_coord_and_frame():
    mob = Mob()
    mob.coord = (3, 4)
    assert mob.coord == (3, 4)
    assert mob.entity.coord == (3, 4)
    assert mob.draw_frame_id == 1


def test_animation_does_not_advance_before_speed():
    animation = Animation(0.5, 3)
    animation.update(0.2)
    assert animation.frame == 0
    assert animation.timer == pytest.approx(0.2)


def test_animation_advances_and_wraps():
    animation = Animation(0.1, 3)
    frames = []
    for _ in range(3):
        animation.update(0.2)
        frames.append(animation.frame)
    assert frames == [1, 2, 0]
    assert animation.timer == 0.0


def test_animation_base_offsets_frame():
    animation = Animation(0.1, 3)
    animation.base = 6
    animation.update(0.2)
    assert animation.frame == 6 + 1


def test_animation_set_frame_resets_timer():
    animation = Animation(1.0, 3)
    animation.update(0.5)
    animation.set_frame(2)
    assert animation.timer == 0.0
    assert animation.frame == 2


def test_animation_reset():
    animation = Animation(0.1, 3)
    animation.base = 9
    animation.update(0.2)
    animation.reset()
    assert animation.frame == 0
    assert animation.base == 0
    assert animation.timer == 0.0