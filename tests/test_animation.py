import pytest

from quadlite.animation import AnimatedSprite, Animation
from quadlite.geometry import Rect, Vec2


def make_sprite(playing=True):
    animations = [
        Animation("idle", 0, 4, 10),
        Animation("run", 2, 6, 5),
    ]
    return AnimatedSprite(32, 16, animations, playing)


def test_initial_frame_is_first_tile():
    frame = make_sprite().frame()
    assert frame.source_rect == Rect(0, 0, 32, 16)
    assert frame.dest_size == Vec2(32, 16)


def test_small_step_does_not_advance():
    sprite = make_sprite()
    sprite.update(0.01)
    assert sprite.frame().source_rect.x == 0


def test_accumulated_time_advances_one_frame():
    sprite = make_sprite()
    sprite.update(0.06)
    assert sprite.frame().source_rect.x == 0
    sprite.update(0.06)
    assert sprite.frame().source_rect.x == 32


def test_frame_wraps_around():
    sprite = make_sprite()
    sprite.set_frame(3)
    sprite.update(1.0)
    assert sprite.frame().source_rect.x == 0


def test_not_playing_keeps_frame():
    sprite = make_sprite(playing=False)
    sprite.set_frame(2)
    sprite.update(5.0)
    assert sprite.frame().source_rect.x == 64


def test_set_animation_keeps_frame_in_range():
    sprite = make_sprite()
    sprite.set_animation(1)
    assert sprite.current_animation() == 1
    sprite.set_frame(5)
    sprite.set_animation(0)
    assert sprite.current_animation() == 0
    assert sprite.frame().source_rect.x == 32


def test_row_selects_vertical_position():
    sprite = make_sprite()
    sprite.set_animation(1)
    assert sprite.frame().source_rect.y == 32


def test_invalid_animation_index_raises():
    sprite = make_sprite()
    with pytest.raises(IndexError):
        sprite.set_animation(2)
    with pytest.raises(IndexError):
        sprite.set_animation(-1)
    assert sprite.current_animation() == 0