# guirender

Building blocks for the rendering side of an editor GUI. The package uses only the Python standard library.

## Modules

- **`guirender.animation_utils`**: easing functions (`ease_linear`, `ease_in_quad`, `ease_out_quad`, `ease_in_out_quad`, `ease_in_cubic`, `ease_out_cubic`, `ease_in_out_cubic`, `ease_in_expo`, `ease_out_expo`), with `lerp`, `ease` and `ease_point`. It also has an immutable `Vec2` (with `length`, `normalize` and `dot`) and a `CriticallyDampedSpringAnimation` that settles an offset back to zero, as for smooth scrolling.
- **`guirender.frame`**: the window frame decoration options. `Frame` lists them, `frame_variants()` gives those available on the current platform (all four on macOS, `full` and `none` elsewhere), and `parse_frame()` accepts only those, raising `ValueError` otherwise.
- **`guirender.blink`**: the cursor blink state machine. `BlinkStatus.update_status()` advances through `BlinkState.WAITING`, `ON` and `OFF` using the cursor's `blinkwait`, `blinkon` and `blinkoff` (milliseconds) and returns a `ShouldRender` saying when to draw next. `opacity()`, `should_animate()` and `should_render()` cover smooth and plain blinking. Times are seconds on a monotonic clock and may be passed in explicitly.
- **`guirender.font_options`**: `parse_guifont()` turns strings such as `"Fira Code Mono:h15.5:b:i:#h-slight:#e-alias"` into `FontOptions`. `FontOptions.font_list()` and `possible_fonts()` resolve the fonts to try for each `CoarseStyle`, and `FontDescription.as_family_and_font_style()` maps style words such as `SemiBold`, `Italic` or `W100` to a `FontStyle`. There are also `parse_font_name`, `parse_font_feature`, `parse_edging`, `parse_hinting` and `points_to_pixels`.
- **`guirender.cursor_settings`**: `CursorSettings` with the default cursor animation and effect parameters. `setting_names()` lists them with the `cursor_` prefix and `apply()` sets one from a raw value, checking its type.
- **`guirender.cursor_vfx`**: cursor effects. `PointHighlight` covers sonicboom, ripple and wireframe. `ParticleTrail` covers railgun, torpedo and pixiedust and draws its randomness from a deterministic PCG generator (`PcgRandom`). `new_cursor_vfx()` builds the effect for a `VfxMode`; `parse_vfx_mode()` and `vfx_mode_value()` convert to and from setting values.
- **`guirender.corner`**: the animated cursor corners (`Corner`), cursor shapes (`CursorShape`) and `shaped_corners()`, which places the four corners for a block, vertical bar or horizontal bar cursor.
- **`guirender.crash_report`**: wraps exit codes into 0–255 (`exit_code`), builds crash and panic messages (`format_crash_message`, `panic_message`, `panic_log_message`, `stderr_message`), picks the backtraces file (`resolve_backtraces_path`, honouring `GUIRENDER_BACKTRACES`) and appends to it (`write_panic_log`).

## Install

```
pip install .
```

## Example

```python
from guirender.animation_utils import ease, ease_in_out_cubic
from guirender.font_options import parse_guifont, FontHinting

print(ease(ease_in_out_cubic, 1.0, 0.0, 0.25))   # 0.9375

options = parse_guifont("Fira Code Mono:h15.5:b:#h-slight")
assert options.hinting is FontHinting.SLIGHT
print(options.primary_font())   # FontDescription(family='Fira Code Mono', style='Bold')
```

A malformed `guifont` value raises `FontParseError`. For example, `"Mono:#e-aliens"` fails with the message `Invalid edging`.

## What it does not do

The package computes state, positions, timings and messages only. It does not open windows, draw to a canvas, load or shape fonts, or talk to an editor process, and it provides no command to run.

## Tests

```
pip install .[test]
pytest
```