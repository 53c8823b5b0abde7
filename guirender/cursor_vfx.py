"""Cursor visual effects: highlight pulses and particle trails."""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from guirender.animation_utils import Vec2, ease, ease_in_quad

logger = logging.getLogger(__name__)

F32_EPSILON = 2.0**-23
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


class HighlightMode(Enum):
    SONIC_BOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"


class TrailMode(Enum):
    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIE_DUST = "pixiedust"


class VfxMode(Enum):
    """The cursor effect in use, named as in the setting value."""

    SONIC_BOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"
    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIE_DUST = "pixiedust"
    DISABLED = ""

    @property
    def highlight(self) -> Optional[HighlightMode]:
        """The highlight kind, when this is a highlight effect."""
        try:
            return HighlightMode(self.value)
        except ValueError:
            return None

    @property
    def trail(self) -> Optional[TrailMode]:
        """The trail kind, when this is a trail effect."""
        try:
            return TrailMode(self.value)
        except ValueError:
            return None


def parse_vfx_mode(value: object, current: VfxMode) -> VfxMode:
    """Parse a setting value; on bad input log an error and keep the current mode."""
    if not isinstance(value, str):
        logger.error("Expected a VfxMode string, but received %r", value)
        return current
    try:
        return VfxMode(value)
    except ValueError:
        logger.error("Expected a VfxMode name, but received %r", value)
        return current


def vfx_mode_value(mode: VfxMode) -> str:
    """The setting value for a mode."""
    return mode.value


def _to_f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class PcgRandom:
    """A small PCG (XSH-RR 64/32) generator with a fixed seed."""

    MULTIPLIER = 6_364_136_223_846_793_005

    def __init__(self) -> None:
        self._state = 0x853C_49E6_748F_EA9B
        self._inc = ((0xDA3E_39CB_94B9_5BDB << 1) | 1) & _MASK64

    def next_u32(self) -> int:
        """The next 32-bit output."""
        old = self._state
        self._state = (old * self.MULTIPLIER + self._inc) & _MASK64
        rot = old >> 59
        xsh = (((old >> 18) ^ old) >> 27) & _MASK32
        return ((xsh >> rot) | (xsh << ((32 - rot) & 31))) & _MASK32

    def next_float(self) -> float:
        """A float in the [0, 1] range, rounded to single precision."""
        return _to_f32(math.ldexp(self.next_u32(), -32))

    def rand_dir(self) -> Vec2:
        """A vector with x and y in [-1, 1]; not normalized."""
        x = self.next_float()
        y = self.next_float()
        return Vec2(x * 2.0 - 1.0, y * 2.0 - 1.0)

    def rand_dir_normalized(self) -> Vec2:
        return self.rand_dir().normalize()


def rotate_vec(v: Vec2, rot: float) -> Vec2:
    """Rotate a vector by rot radians."""
    sin = math.sin(rot)
    cos = math.cos(rot)
    return Vec2(v.x * cos - v.y * sin, v.x * sin + v.y * cos)


@dataclass
class Particle:
    pos: Vec2
    speed: Vec2
    rotation_speed: float
    lifetime: float


class PointHighlight:
    """A growing and fading shape centred on the cursor."""

    def __init__(self, mode: HighlightMode) -> None:
        self.t = 0.0
        self.center_position = Vec2(0.0, 0.0)
        self.mode = mode

    def update(
        self,
        settings: Any,
        destination: Vec2,
        dimensions: Vec2,
        immediate_movement: bool,
        dt: float,
    ) -> bool:
        """Advance the pulse; return whether it is still animating."""
        self.t = min(self.t + dt * 5.0, 1.0)
        return self.t < 1.0

    def restart(self, position: Vec2) -> None:
        self.t = 0.0
        self.center_position = position

    @property
    def finished(self) -> bool:
        return abs(self.t - 1.0) < F32_EPSILON

    def alpha(self, settings: Any) -> int:
        """Opacity of the shape, from vfx_opacity down to zero."""
        return max(0, min(255, int(ease(ease_in_quad, settings.vfx_opacity, 0.0, self.t))))


class ParticleTrail:
    """Particles spawned along the path travelled by the cursor.

    ``dimensions`` passed to ``update`` hold the cursor width in x and height in y.
    """

    def __init__(self, trail_mode: TrailMode) -> None:
        self.particles: list[Particle] = []
        self.previous_cursor_dest = Vec2(0.0, 0.0)
        self.trail_mode = trail_mode
        self.rng = PcgRandom()

    def update(
        self,
        settings: Any,
        destination: Vec2,
        dimensions: Vec2,
        immediate_movement: bool,
        dt: float,
    ) -> bool:
        """Age, move and spawn particles; return whether any are alive."""
        for particle in self.particles:
            particle.lifetime -= dt
        self.particles = [p for p in self.particles if p.lifetime > 0.0]

        for particle in self.particles:
            particle.pos = particle.pos + particle.speed * dt
            particle.speed = rotate_vec(particle.speed, dt * particle.rotation_speed)

        if destination != self.previous_cursor_dest:
            if not immediate_movement:
                self._spawn(settings, destination, dimensions.y)
            self.previous_cursor_dest = destination

        return bool(self.particles)

    def _spawn(self, settings: Any, destination: Vec2, height: float) -> None:
        prev = self.previous_cursor_dest
        travel = destination - prev
        distance = travel.length()
        relative = distance / height if height else math.inf
        amount = relative**1.5 * settings.vfx_particle_density * 0.01
        count = int(amount) if math.isfinite(amount) and amount > 0 else 0

        for i in range(count):
            t = i / count

            if self.trail_mode is TrailMode.RAILGUN:
                phase = t / math.pi * settings.vfx_particle_phase * relative
                speed = Vec2(math.sin(phase), math.cos(phase)) * 2.0 * settings.vfx_particle_speed
            elif self.trail_mode is TrailMode.TORPEDO:
                travel_dir = travel.normalize()
                particle_dir = self.rng.rand_dir_normalized() - travel_dir * 1.5
                speed = particle_dir.normalize() * settings.vfx_particle_speed
            else:
                base_dir = self.rng.rand_dir_normalized()
                direction = Vec2(base_dir.x * 0.5, 0.4 + abs(base_dir.y))
                speed = direction * 3.0 * settings.vfx_particle_speed

            if self.trail_mode is TrailMode.RAILGUN:
                pos = prev + travel * t
            else:
                pos = prev + travel * self.rng.next_float() + Vec2(0.0, height * 0.5)

            if self.trail_mode is TrailMode.RAILGUN:
                rotation_speed = math.pi * settings.vfx_particle_curl
            else:
                rotation_speed = (
                    (self.rng.next_float() - 0.5) * (math.pi / 2) * settings.vfx_particle_curl
                )

            self.particles.append(
                Particle(pos, speed, rotation_speed, t * settings.vfx_particle_lifetime)
            )

    def restart(self, position: Vec2) -> None:
        """Trails do not react to shape changes."""


CursorVfx = Union[PointHighlight, ParticleTrail]


def new_cursor_vfx(mode: VfxMode) -> Optional[CursorVfx]:
    """Create the effect for a mode, or None when effects are disabled."""
    if mode.highlight is not None:
        return PointHighlight(mode.highlight)
    if mode.trail is not None:
        return ParticleTrail(mode.trail)
    return None