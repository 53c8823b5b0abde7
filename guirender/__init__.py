"""Rendering helpers for an editor GUI: animation, cursor blinking and effects, guifont parsing and crash reports."""

__version__ = "0.1.0"

__all__ = [
    "animation_utils",
    "blink",
    "corner",
    "crash_report",
    "cursor_settings",
    "cursor_vfx",
    "font_options",
    "frame",
]