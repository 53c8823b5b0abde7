"""Parsing of the guifont setting and font selection for text styles."""

from __future__ import annotations

import itertools
import logging
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 14.0
FONT_OPTS_SEPARATOR = ":"
FONT_LIST_SEPARATOR = ","
FONT_HINTING_PREFIX = "#h-"
FONT_EDGING_PREFIX = "#e-"
FONT_HEIGHT_PREFIX = "h"
FONT_WIDTH_PREFIX = "w"
FONT_BOLD_OPT = "b"
FONT_ITALIC_OPT = "i"

INVALID_SIZE_ERR = "Invalid size"
INVALID_WIDTH_ERR = "Invalid width"
INVALID_EDGING_ERR = "Invalid edging"
INVALID_HINTING_ERR = "Invalid hinting"

WEIGHT_THIN = 100
WEIGHT_EXTRA_LIGHT = 200
WEIGHT_LIGHT = 300
WEIGHT_NORMAL = 400
WEIGHT_MEDIUM = 500
WEIGHT_SEMI_BOLD = 600
WEIGHT_BOLD = 700
WEIGHT_EXTRA_BOLD = 800
WEIGHT_BLACK = 900
WEIGHT_EXTRA_BLACK = 1000
WIDTH_NORMAL = 5

_WEIGHT_NAMES = {
    "Thin": WEIGHT_THIN,
    "ExtraLight": WEIGHT_EXTRA_LIGHT,
    "Light": WEIGHT_LIGHT,
    "Normal": WEIGHT_NORMAL,
    "Medium": WEIGHT_MEDIUM,
    "SemiBold": WEIGHT_SEMI_BOLD,
    "Bold": WEIGHT_BOLD,
    "ExtraBold": WEIGHT_EXTRA_BOLD,
    "Black": WEIGHT_BLACK,
    "ExtraBlack": WEIGHT_EXTRA_BLACK,
}

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_SIGNED_INT_RE = re.compile(r"[+-]?\d+")
_UNSIGNED_INT_RE = re.compile(r"\+?\d+")


class FontParseError(ValueError):
    """Raised when a font setting cannot be parsed."""


class FontEdging(Enum):
    ANTI_ALIAS = "antialias"
    SUBPIXEL_ANTI_ALIAS = "subpixelantialias"
    ALIAS = "alias"


class FontHinting(Enum):
    FULL = "full"
    NORMAL = "normal"
    SLIGHT = "slight"
    NONE = "none"


class Slant(Enum):
    UPRIGHT = "upright"
    ITALIC = "italic"
    OBLIQUE = "oblique"


@dataclass(frozen=True)
class FontStyle:
    """Weight, width and slant requested from the font manager."""

    weight: int = WEIGHT_NORMAL
    width: int = WIDTH_NORMAL
    slant: Slant = Slant.UPRIGHT


@dataclass(frozen=True)
class FontDescription:
    """A font family with an optional style such as ``"Bold Italic"``."""

    family: str = ""
    style: Optional[str] = None

    def as_family_and_font_style(self) -> tuple[str, FontStyle]:
        """The family name and the font style described by the style words."""
        if self.style is None:
            return self.family, FontStyle()
        weight = WEIGHT_NORMAL
        slant = Slant.UPRIGHT
        for part in self.style.split():
            if part in _WEIGHT_NAMES:
                weight = _WEIGHT_NAMES[part]
            elif part == "Italic":
                slant = Slant.ITALIC
            elif part == "Oblique":
                slant = Slant.OBLIQUE
            elif part.startswith("W"):
                rest = part[1:]
                if _SIGNED_INT_RE.fullmatch(rest):
                    value = int(rest)
                    if -(2**31) <= value < 2**31:
                        weight = value
        return self.family, FontStyle(weight, WIDTH_NORMAL, slant)

    def __str__(self) -> str:
        if self.style is None:
            return self.family
        return f"{self.family} {self.style}"


@dataclass(frozen=True)
class SecondaryFontDescription:
    """Description of an italic or bold font; either part may be left out."""

    family: Optional[str] = None
    style: Optional[str] = None


@dataclass(frozen=True)
class FontFeature:
    """An OpenType feature tag and its value."""

    name: str
    value: int


@dataclass(frozen=True)
class CoarseStyle:
    """Whether text is bold and/or italic."""

    bold: bool = False
    italic: bool = False

    def name(self) -> Optional[str]:
        """The textual name of this style, or None for the regular style."""
        if self.bold and self.italic:
            return "Bold Italic"
        if self.bold:
            return "Bold"
        if self.italic:
            return "Italic"
        return None


def coarse_style_permutations() -> Iterator[CoarseStyle]:
    """All bold/italic combinations, bold italic first and regular last."""
    for bold, italic in itertools.product((True, False), repeat=2):
        yield CoarseStyle(bold=bold, italic=italic)


def points_to_pixels(value: float) -> float:
    """Convert a font size in points to pixels at the standard 96/72 ratio."""
    if sys.platform == "darwin":
        pixels = value
    else:
        pixels_per_inch = 96.0
        points_per_inch = 72.0
        pixels = value * (pixels_per_inch / points_per_inch)
    logger.info("point_to_pixels %s -> %s", value, pixels)
    return pixels


@dataclass(eq=False)
class FontOptions:
    """Fonts, size and rendering options parsed from the guifont setting."""

    normal: list[FontDescription] = field(default_factory=list)
    italic: Optional[list[SecondaryFontDescription]] = None
    bold: Optional[list[SecondaryFontDescription]] = None
    bold_italic: Optional[list[SecondaryFontDescription]] = None
    features: dict[str, list[FontFeature]] = field(default_factory=dict)
    size: float = field(default_factory=lambda: points_to_pixels(DEFAULT_FONT_SIZE))
    width: float = 0.0
    hinting: FontHinting = FontHinting.FULL
    edging: FontEdging = FontEdging.ANTI_ALIAS

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontOptions):
            return NotImplemented
        return (
            self.normal == other.normal
            and self.bold == other.bold
            and self.italic == other.italic
            and self.bold_italic == other.bold_italic
            and self.features == other.features
            and self.edging == other.edging
            and abs(self.size - other.size) < 2.0**-23
            and self.hinting == other.hinting
        )

    def primary_font(self) -> Optional[FontDescription]:
        """The first normal font, if any."""
        return self.normal[0] if self.normal else None

    def font_list(self, style: CoarseStyle) -> list[FontDescription]:
        """Fonts to try for the given style, followed by the normal fonts in that style."""
        if style == CoarseStyle():
            return list(self.normal)

        if style.bold and style.italic:
            fonts = self.bold_italic
        elif style.bold:
            fonts = self.bold
        else:
            fonts = self.italic

        style_name = style.name()
        normal_fallback = [
            FontDescription(family=font.family, style=style_name) for font in self.normal
        ]
        if fonts is None:
            return normal_fallback

        primary = self.primary_font()
        result = []
        for font in fonts:
            if font.family is None and font.style is None:
                continue
            if font.family is None:
                logger.error("Font style %r is missing font family", font.style)
                if primary is None:
                    raise ValueError(
                        f"Font style {font.style!r} is missing font family"
                    )
                result.append(FontDescription(family=primary.family, style=font.style))
            else:
                result.append(
                    FontDescription(
                        family=font.family,
                        style=font.style if font.style is not None else style_name,
                    )
                )
        result.extend(normal_fallback)
        return result

    def possible_fonts(self) -> list[FontDescription]:
        """Every font any style could use."""
        return [
            font
            for style in coarse_style_permutations()
            for font in self.font_list(style)
        ]


def parse_edging(value: str) -> FontEdging:
    """Parse an edging name such as ``antialias``."""
    try:
        return FontEdging(value)
    except ValueError:
        raise FontParseError(INVALID_EDGING_ERR) from None


def parse_hinting(value: str) -> FontHinting:
    """Parse a hinting name such as ``slight``."""
    try:
        return FontHinting(value)
    except ValueError:
        raise FontParseError(INVALID_HINTING_ERR) from None


def parse_font_feature(feature: str) -> FontFeature:
    """Parse ``+name``, ``-name`` or ``name=value`` into a font feature."""
    if feature.startswith("+"):
        return FontFeature(feature[1:].strip(), 1)
    if feature.startswith("-"):
        return FontFeature(feature[1:].strip(), 0)
    if "=" in feature:
        name, value = feature.split("=", 1)
        if _UNSIGNED_INT_RE.fullmatch(value) and int(value) <= 0xFFFF:
            return FontFeature(name, int(value))
    logger.warning("Wrong feature format: %s", feature)
    raise FontParseError(feature)


def parse_font_name(font_name: str) -> str:
    """Turn underscores into spaces; a backslash takes the next character literally."""
    chars = iter(font_name)
    parsed = []
    for ch in chars:
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            parsed.append(escaped)
        elif ch == "_":
            parsed.append(" ")
        else:
            parsed.append(ch)
    return "".join(parsed)


def _parse_pixels(part: str, error: str) -> float:
    number = part[1:]
    if not _FLOAT_RE.fullmatch(number):
        raise FontParseError(error)
    return points_to_pixels(float(number))


def parse_guifont(guifont_setting: str) -> FontOptions:
    """Parse a guifont value like ``Fira Code,Console:h12:b:#h-slight``."""
    options = FontOptions()
    parts = [part for part in guifont_setting.split(FONT_OPTS_SEPARATOR) if part]

    if parts:
        families = [
            parse_font_name(name)
            for name in parts[0].split(FONT_LIST_SEPARATOR)
            if name
        ]
        if families:
            options.normal = [FontDescription(family=family) for family in families]

    styles: list[str] = []
    for part in parts[1:]:
        if part.startswith(FONT_HINTING_PREFIX):
            options.hinting = parse_hinting(part[len(FONT_HINTING_PREFIX):])
        elif part.startswith(FONT_EDGING_PREFIX):
            options.edging = parse_edging(part[len(FONT_EDGING_PREFIX):])
        elif part.startswith(FONT_HEIGHT_PREFIX) and len(part) > 1:
            options.size = _parse_pixels(part, INVALID_SIZE_ERR)
        elif part.startswith(FONT_WIDTH_PREFIX) and len(part) > 1:
            options.width = _parse_pixels(part, INVALID_WIDTH_ERR)
        elif part == FONT_BOLD_OPT:
            styles.append("Bold")
        elif part == FONT_ITALIC_OPT:
            styles.append("Italic")

    style = " ".join(sorted(set(styles))) if styles else None
    options.normal = [
        FontDescription(family=font.family, style=style) for font in options.normal
    ]
    return options