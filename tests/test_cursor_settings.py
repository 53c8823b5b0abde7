import pytest

from guirender.cursor_settings import CursorSettings
from guirender.cursor_vfx import VfxMode


def test_defaults_match_source_values():
    settings = CursorSettings()
    assert settings.animation_length == 0.06
    assert settings.vfx_opacity == 200.0
    assert settings.vfx_mode is VfxMode.DISABLED
    assert settings.smooth_blink is False


def test_setting_names_carry_prefix():
    names = CursorSettings.setting_names()
    assert "cursor_vfx_mode" in names
    assert "cursor_animation_length" in names
    assert all(name.startswith("cursor_") for name in names)


def test_apply_number_with_and_without_prefix():
    settings = CursorSettings()
    settings.apply("cursor_trail_size", 0.25)
    settings.apply("vfx_particle_speed", 3)
    assert settings.trail_size == 0.25
    assert settings.vfx_particle_speed == 3.0


def test_apply_bool():
    settings = CursorSettings()
    settings.apply("smooth_blink", True)
    assert settings.smooth_blink is True


def test_apply_vfx_mode_string():
    settings = CursorSettings()
    settings.apply("cursor_vfx_mode", "railgun")
    assert settings.vfx_mode is VfxMode.RAILGUN


def test_apply_invalid_vfx_mode_keeps_previous():
    settings = CursorSettings()
    settings.apply("vfx_mode", "ripple")
    settings.apply("vfx_mode", "not-a-mode")
    assert settings.vfx_mode is VfxMode.RIPPLE


def test_apply_unknown_setting_raises():
    with pytest.raises(KeyError):
        CursorSettings().apply("cursor_does_not_exist", 1.0)


def test_apply_wrong_type_raises():
    settings = CursorSettings()
    with pytest.raises(TypeError):
        settings.apply("antialiasing", 1.0)
    with pytest.raises(TypeError):
        settings.apply("animation_length", "fast")
    assert settings.antialiasing is True
    assert settings.animation_length == 0.06