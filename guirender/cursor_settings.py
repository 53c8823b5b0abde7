"""Settings that control cursor animation and cursor effects."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from guirender.cursor_vfx import VfxMode, parse_vfx_mode

SETTING_PREFIX = "cursor"


@dataclass
class CursorSettings:
    """Cursor animation and effect settings with their default values."""

    antialiasing: bool = True
    animation_length: float = 0.06
    distance_length_adjust: bool = True
    animate_in_insert_mode: bool = True
    animate_command_line: bool = True
    trail_size: float = 0.7
    unfocused_outline_width: float = 1.0 / 8.0
    smooth_blink: bool = False

    vfx_mode: VfxMode = VfxMode.DISABLED
    vfx_opacity: float = 200.0
    vfx_particle_lifetime: float = 1.2
    vfx_particle_density: float = 7.0
    vfx_particle_speed: float = 10.0
    vfx_particle_phase: float = 1.5
    vfx_particle_curl: float = 1.0

    @classmethod
    def setting_names(cls) -> list[str]:
        """The full setting names, each carrying the ``cursor`` prefix."""
        return [f"{SETTING_PREFIX}_{f.name}" for f in dataclasses.fields(cls)]

    def apply(self, name: str, value: object) -> None:
        """Set one setting from a raw value; the name may carry the prefix."""
        prefix = f"{SETTING_PREFIX}_"
        key = name[len(prefix):] if name.startswith(prefix) else name
        fields = {f.name: f for f in dataclasses.fields(self)}
        if key not in fields:
            raise KeyError(name)

        current = getattr(self, key)
        if key == "vfx_mode":
            setattr(self, key, parse_vfx_mode(value, current))
        elif isinstance(current, bool):
            if not isinstance(value, bool):
                raise TypeError(f"setting {name!r} expects a boolean, got {value!r}")
            setattr(self, key, value)
        else:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"setting {name!r} expects a number, got {value!r}")
            setattr(self, key, float(value))