"""Cursor corners that animate independently towards the cursor destination."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from guirender.animation_utils import Vec2, ease_out_expo, ease_point, lerp

F32_EPSILON = 2.0**-23

DEFAULT_CELL_PERCENTAGE = 1.0 / 8.0

STANDARD_CORNERS: tuple[tuple[float, float], ...] = (
    (-0.5, -0.5),
    (0.5, -0.5),
    (0.5, 0.5),
    (-0.5, 0.5),
)


class CursorShape(Enum):
    BLOCK = "block"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf or NaN for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if math.isnan(numerator) or numerator == 0.0:
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _min_ignoring_nan(value: float, limit: float) -> float:
    if math.isnan(value):
        return limit
    return min(value, limit)


def _length_multiplier(distance: float) -> float:
    if distance <= 0.0 or math.isnan(distance):
        return 0.0
    return max(math.log10(distance), 0.0)


@dataclass
class Corner:
    """One corner of the cursor, positioned relative to the cursor centre.

    ``relative_position`` is in cell units, so ``(-0.5, -0.5)`` is the top left
    corner of the cell.
    """

    start_position: Vec2 = field(default_factory=Vec2)
    current_position: Vec2 = field(default_factory=Vec2)
    relative_position: Vec2 = field(default_factory=Vec2)
    previous_destination: Vec2 = field(default_factory=lambda: Vec2(-1000.0, -1000.0))
    length_multiplier: float = 1.0
    t: float = 0.0

    def update(
        self,
        settings: Any,
        cursor_dimensions: Vec2,
        destination: Vec2,
        dt: float,
        immediate_movement: bool,
    ) -> bool:
        """Move the corner towards destination; return whether it is animating.

        ``cursor_dimensions`` holds the cell width in x and height in y.
        """
        if destination != self.previous_destination:
            self.t = 0.0
            self.start_position = self.current_position
            self.previous_destination = destination
            if settings.distance_length_adjust:
                distance = (destination - self.current_position).length()
                self.length_multiplier = _length_multiplier(distance)
            else:
                self.length_multiplier = 1.0

        if abs(self.t - 1.0) < F32_EPSILON:
            return False

        relative_scaled = Vec2(
            self.relative_position.x * cursor_dimensions.x,
            self.relative_position.y * cursor_dimensions.y,
        )
        corner_destination = destination + relative_scaled

        if immediate_movement:
            self.t = 1.0
            self.current_position = corner_destination
            return True

        # Corners in front of the motion move faster than those behind it.
        travel_direction = (destination - self.current_position).normalize()
        corner_direction = self.relative_position.normalize()
        alignment = travel_direction.dot(corner_direction)

        trail = min(max(1.0 - settings.trail_size, 0.0), 1.0)
        corner_dt = dt * lerp(1.0, trail, -alignment)
        step = _divide(corner_dt, settings.animation_length * self.length_multiplier)
        self.t = _min_ignoring_nan(self.t + step, 1.0)

        self.current_position = ease_point(
            ease_out_expo, self.start_position, corner_destination, self.t
        )
        return True


def shaped_corners(
    corners: Iterable[Corner], cursor_shape: CursorShape, cell_percentage: float
) -> list[Corner]:
    """Corners repositioned for a cursor shape, restarting their animation."""
    result = []
    for corner, (x, y) in zip(corners, STANDARD_CORNERS):
        if cursor_shape is CursorShape.BLOCK:
            relative = Vec2(x, y)
        elif cursor_shape is CursorShape.VERTICAL:
            # Move the right side over to the bar width.
            relative = Vec2((x + 0.5) * cell_percentage - 0.5, y)
        else:
            # Same as vertical on the flipped y axis, so the bar sits at the bottom.
            relative = Vec2(x, -((-y + 0.5) * cell_percentage - 0.5))
        result.append(
            dataclasses.replace(
                corner,
                relative_position=relative,
                t=0.0,
                start_position=corner.current_position,
            )
        )
    return result