"""Easing functions, 2D vectors and a critically damped spring animation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

F32_EPSILON = 2.0**-23

EaseFunc = Callable[[float], float]


@dataclass(frozen=True)
class Vec2:
    """An immutable two dimensional vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: object) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; NaN components for a zero vector."""
        length = self.length()
        if length == 0.0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / length, self.y / length)

    def dot(self, other: Vec2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y


def ease_linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return -t * (t - 2.0)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    n = t * 2.0 - 1.0
    return -0.5 * (n * (n - 2.0) - 1.0)


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    n = t - 1.0
    return n * n * n + 1.0


def ease_in_out_cubic(t: float) -> float:
    n = 2.0 * t
    if n < 1.0:
        return 0.5 * n * n * n
    n -= 2.0
    return 0.5 * (n * n * n + 2.0)


def ease_in_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    return 2.0 ** (10.0 * (t - 1.0))


def ease_out_expo(t: float) -> float:
    if abs(t - 1.0) < F32_EPSILON:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * t)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between start and end."""
    return start + (end - start) * t


def ease(ease_func: EaseFunc, start: float, end: float, t: float) -> float:
    """Interpolate between start and end along the given easing curve."""
    return lerp(start, end, ease_func(t))


def ease_point(ease_func: EaseFunc, start: Vec2, end: Vec2, t: float) -> Vec2:
    """Ease both coordinates of a point."""
    return Vec2(
        ease(ease_func, start.x, end.x, t),
        ease(ease_func, start.y, end.y, t),
    )


class CriticallyDampedSpringAnimation:
    """Animates an offset back to zero, like a scroll position settling."""

    def __init__(self) -> None:
        self.position = 0.0
        self._start_position = 0.0
        self._velocity = 0.0
        self._scroll_t = 2.0

    def update(self, dt: float, animation_length: float) -> bool:
        """Advance the animation by dt seconds; return whether it is still running."""
        if self._scroll_t == 2.0 and self.position != 0.0:
            self._start_position = self.position
            self._scroll_t = 0.0

        if self._scroll_t > 1.0 - F32_EPSILON:
            # At the destination: move t out of the 0-1 range to stop.
            self._scroll_t = 2.0
        else:
            step = dt / animation_length if animation_length else math.inf
            self._scroll_t = min(self._scroll_t + step, 1.0)

        if animation_length < 0.05:
            # Short animations use a plain ease to avoid precision problems.
            self.position = ease(ease_out_expo, self._start_position, 0.0, self._scroll_t)
        else:
            zeta = 1.0
            # Reach the destination within 2% tolerance in animation_length.
            omega = 4.0 / (zeta * animation_length)
            k_p = omega * omega
            k_d = -2.0 * zeta * omega
            acc = -k_p * self.position + k_d * self._velocity
            self._velocity += acc * dt
            self.position += self._velocity * dt

        if abs(self.position) < 0.01:
            self.reset()
            return False
        return True

    def reset(self) -> None:
        """Stop the animation at rest."""
        self.position = 0.0
        self._velocity = 0.0
        self._scroll_t = 2.0