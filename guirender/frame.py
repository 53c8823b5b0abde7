"""Window frame decoration options."""

from __future__ import annotations

import sys
from enum import Enum


class Frame(str, Enum):
    """Kinds of frame decorations around the window."""

    FULL = "full"
    TRANSPARENT = "transparent"
    BUTTONLESS = "buttonless"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


DEFAULT_FRAME = Frame.FULL


def frame_variants() -> tuple[Frame, ...]:
    """The frame options available on the current platform."""
    if sys.platform == "darwin":
        return (Frame.FULL, Frame.TRANSPARENT, Frame.BUTTONLESS, Frame.NONE)
    return (Frame.FULL, Frame.NONE)


def parse_frame(value: str) -> Frame:
    """Parse a frame name, accepting only the options of the current platform."""
    for variant in frame_variants():
        if variant.value == value:
            return variant
    allowed = ", ".join(v.value for v in frame_variants())
    raise ValueError(f"invalid frame {value!r}, expected one of: {allowed}")