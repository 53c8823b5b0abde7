import math

import pytest

from guirender.animation_utils import Vec2
from guirender.corner import (
    DEFAULT_CELL_PERCENTAGE,
    STANDARD_CORNERS,
    Corner,
    CursorShape,
    shaped_corners,
)
from guirender.cursor_settings import CursorSettings


def _block_corners():
    return shaped_corners([Corner() for _ in range(4)], CursorShape.BLOCK, DEFAULT_CELL_PERCENTAGE)


def test_new_corner_defaults():
    corner = Corner()
    assert corner.previous_destination == Vec2(-1000.0, -1000.0)
    assert corner.length_multiplier == 1.0
    assert corner.t == 0.0


def test_block_shape_uses_standard_corners():
    corners = _block_corners()
    assert [(c.relative_position.x, c.relative_position.y) for c in corners] == list(
        STANDARD_CORNERS
    )


def test_vertical_shape_width_is_cell_percentage():
    p = 0.25
    corners = shaped_corners([Corner() for _ in range(4)], CursorShape.VERTICAL, p)
    xs = [c.relative_position.x for c in corners]
    ys = [c.relative_position.y for c in corners]
    assert min(xs) == -0.5
    assert max(xs) - min(xs) == pytest.approx(p)
    assert ys == [y for _, y in STANDARD_CORNERS]


def test_horizontal_shape_sits_at_bottom():
    p = 0.25
    corners = shaped_corners([Corner() for _ in range(4)], CursorShape.HORIZONTAL, p)
    ys = [c.relative_position.y for c in corners]
    xs = [c.relative_position.x for c in corners]
    assert max(ys) == 0.5
    assert max(ys) - min(ys) == pytest.approx(p)
    assert xs == [x for x, _ in STANDARD_CORNERS]


def test_shaping_restarts_animation_from_current_position():
    corner = Corner(current_position=Vec2(3.0, 4.0), t=0.7)
    (shaped,) = shaped_corners([corner], CursorShape.BLOCK, DEFAULT_CELL_PERCENTAGE)
    assert shaped.t == 0.0
    assert shaped.start_position == Vec2(3.0, 4.0)
    assert corner.t == 0.7


def test_immediate_movement_jumps_to_destination():
    settings = CursorSettings()
    corner = _block_corners()[0]
    destination = Vec2(100.0, 100.0)
    dims = Vec2(10.0, 20.0)
    assert corner.update(settings, dims, destination, 0.01, True) is True
    assert corner.current_position == destination + Vec2(-5.0, -10.0)
    assert corner.t == 1.0
    assert corner.update(settings, dims, destination, 0.01, True) is False


def test_new_destination_resets_animation():
    settings = CursorSettings()
    corner = _block_corners()[2]
    dims = Vec2(10.0, 20.0)
    corner.update(settings, dims, Vec2(50.0, 50.0), 0.01, True)
    before = corner.current_position
    corner.update(settings, dims, Vec2(200.0, 80.0), 0.01, False)
    assert corner.start_position == before
    assert corner.previous_destination == Vec2(200.0, 80.0)
    assert 0.0 < corner.t <= 1.0


def test_distance_length_adjust_disabled_keeps_multiplier():
    settings = CursorSettings(distance_length_adjust=False)
    corner = _block_corners()[0]
    corner.update(settings, Vec2(10.0, 20.0), Vec2(500.0, 500.0), 0.001, False)
    assert corner.length_multiplier == 1.0


def test_distance_length_adjust_uses_log_of_distance():
    settings = CursorSettings()
    corner = _block_corners()[0]
    destination = Vec2(300.0, 400.0)
    corner.update(settings, Vec2(10.0, 20.0), destination, 0.001, False)
    assert corner.length_multiplier == pytest.approx(math.log10(destination.length()))


def test_animation_converges_monotonically():
    settings = CursorSettings()
    corner = _block_corners()[0]
    dims = Vec2(10.0, 20.0)
    destination = Vec2(100.0, 100.0)
    target = destination + Vec2(-5.0, -10.0)
    last_distance = math.inf
    for _ in range(1000):
        animating = corner.update(settings, dims, destination, 0.01, False)
        if not animating:
            break
        distance = (target - corner.current_position).length()
        assert distance <= last_distance + 1e-9
        last_distance = distance
    assert corner.t == 1.0
    assert corner.current_position.x == pytest.approx(target.x)
    assert corner.current_position.y == pytest.approx(target.y)
    assert corner.update(settings, dims, destination, 0.01, False) is False


def test_zero_distance_finishes_immediately():
    settings = CursorSettings()
    corner = Corner()
    dims = Vec2(10.0, 20.0)
    assert corner.update(settings, dims, Vec2(0.0, 0.0), 0.01, False) is True
    assert corner.t == 1.0
    assert corner.current_position == Vec2(0.0, 0.0)
    assert corner.update(settings, dims, Vec2(0.0, 0.0), 0.01, False) is False