#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, Protocol

from fpdf import FPDF

from .errors import InvalidLayoutError

CORE_FAMILIES: Final = ("Courier", "Helvetica", "Times")
FONT_STYLES: Final = ("", "B", "I", "BI")
DEFAULT_FONT_FAMILY: Final = "Courier"
DEFAULT_FONT_SIZE: Final = 10


def _normalize_family(family: str) -> str:
    value = str(family).strip()
    for candidate in CORE_FAMILIES:
        if value.lower() == candidate.lower():
            return candidate
    raise InvalidLayoutError(f"unsupported font family: {family!r}")


@dataclass(frozen=True)
class Font:
    family: str = DEFAULT_FONT_FAMILY
    style: str = ""

    def __post_init__(self) -> None:
        family = _normalize_family(self.family)
        style = "".join(sorted(str(self.style).upper()))
        if style not in FONT_STYLES:
            raise InvalidLayoutError(f"unsupported font style: {self.style!r}")
        object.__setattr__(self, "family", family)
        object.__setattr__(self, "style", style)


class FontType(Enum):
    DEFAULT = "default"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


_SLOTS: Final[dict[FontType, str]] = {
    FontType.DEFAULT: "default_font",
    FontType.BOLD: "bold_font",
    FontType.ITALIC: "italic_font",
    FontType.BOLD_ITALIC: "bold_italic_font",
}
if set(_SLOTS) != set(FontType):
    raise RuntimeError("every FontType needs a font slot")


@dataclass
class FontSettings:
    """Four font variants and the point size they are rendered at.

    Instances are mutable so callers can tweak them before a printer is
    built; printers always keep their own copy.
    """

    default_font: Font = Font(DEFAULT_FONT_FAMILY, "")
    bold_font: Font = Font(DEFAULT_FONT_FAMILY, "B")
    italic_font: Font = Font(DEFAULT_FONT_FAMILY, "I")
    bold_italic_font: Font = Font(DEFAULT_FONT_FAMILY, "BI")
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def for_family(cls, family: str, size: int = DEFAULT_FONT_SIZE) -> FontSettings:
        return cls(
            default_font=Font(family, ""),
            bold_font=Font(family, "B"),
            italic_font=Font(family, "I"),
            bold_italic_font=Font(family, "BI"),
            font_size=size,
        )

    def validate(self) -> None:
        size = self.font_size
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidLayoutError(f"font_size must be a positive integer, got {size!r}")
        for font_type, attr in _SLOTS.items():
            if not isinstance(getattr(self, attr), Font):
                raise InvalidLayoutError(f"{font_type.value} font must be a Font instance")

    def font_for(self, font_type: FontType) -> Font:
        try:
            attr = _SLOTS[font_type]
        except KeyError:
            raise InvalidLayoutError(f"unknown font type: {font_type!r}") from None
        return getattr(self, attr)

    def set_font(self, font_type: FontType, font: Font) -> None:
        setattr(self, _SLOTS[font_type], font)

    def copy(self) -> FontSettings:
        return replace(self)


class FontMetrics(Protocol):
    def advance_width(self, character: str, font: Font, size: float) -> float: ...


class FpdfFontMetrics:
    """Advance widths taken from the fpdf2 core font tables, in points."""

    def __init__(self) -> None:
        self._pdf = FPDF(unit="pt")
        self._widths: dict[tuple[str, Font, float], float] = {}

    def advance_width(self, character: str, font: Font, size: float) -> float:
        key = (character, font, float(size))
        width = self._widths.get(key)
        if width is None:
            self._pdf.set_font(font.family, style=font.style, size=size)
            width = float(self._pdf.get_string_width(core_font_text(character)))
            self._widths[key] = width
        return width


def text_width(text: str, font: Font, size: float, metrics: FontMetrics) -> float:
    return sum(metrics.advance_width(ch, font, size) for ch in text)


def core_font_text(text: str) -> str:
    # Core fonts only cover latin-1; anything else is drawn as "?".
    return text.encode("latin-1", "replace").decode("latin-1")


__all__ = [
    "CORE_FAMILIES",
    "DEFAULT_FONT_SIZE",
    "Font",
    "FontMetrics",
    "FontSettings",
    "FontType",
    "FpdfFontMetrics",
    "core_font_text",
    "text_width",
]
