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

import math
from dataclasses import dataclass

from ..errors import InvalidLayoutError
from ..fonts import FontSettings
from ..paper import PaperType

# Line height as a multiple of the font size.
LINE_SPACING_FACTOR = 1.2

# Space kept below a cut signal when a thermal page is closed.
CUT_CLEARANCE = 6.0

# Tolerance for coordinate comparisons (page bottom detection)
COORDINATE_EPSILON = 0.01

_FIXED_MARGIN = 36.0
_THERMAL_SIDE_MARGIN = 8.0
_THERMAL_EDGE_MARGIN = 12.0


@dataclass(frozen=True)
class Margins:
    left: float = _FIXED_MARGIN
    right: float = _FIXED_MARGIN
    top: float = _FIXED_MARGIN
    bottom: float = _FIXED_MARGIN

    def __post_init__(self) -> None:
        for name in ("left", "right", "top", "bottom"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidLayoutError(f"margin_{name} must be a number")
            if not math.isfinite(value) or value < 0:
                raise InvalidLayoutError(f"margin_{name} cannot be negative")
            object.__setattr__(self, name, float(value))

    @classmethod
    def default_for(cls, paper_type: PaperType) -> Margins:
        if paper_type.is_thermal:
            return cls(
                left=_THERMAL_SIDE_MARGIN,
                right=_THERMAL_SIDE_MARGIN,
                top=_THERMAL_EDGE_MARGIN,
                bottom=_THERMAL_EDGE_MARGIN,
            )
        return cls()


def printable_width(page_w: float, margin_left: float, margin_right: float) -> float:
    width = page_w - margin_left - margin_right
    if width <= 0:
        raise InvalidLayoutError(
            f"margins leave no printable width ({margin_left} + {margin_right} >= {page_w:.2f})"
        )
    return width


def printable_height(page_h: float, margin_top: float, margin_bottom: float) -> float:
    if math.isinf(page_h):
        return math.inf
    height = page_h - margin_top - margin_bottom
    if height <= 0:
        raise InvalidLayoutError(
            f"margins leave no printable height ({margin_top} + {margin_bottom} >= {page_h:.2f})"
        )
    return height


def line_height_for(font_size: float) -> float:
    return float(font_size) * LINE_SPACING_FACTOR


def lines_per_page(usable_h: float, line_height: float) -> int | None:
    if math.isinf(usable_h):
        return None
    return max(0, int(math.floor((usable_h + COORDINATE_EPSILON) / line_height)))


def thermal_page_height(
    content_bottom: float,
    margins: Margins,
    line_height: float,
    *,
    cut_y: float | None = None,
) -> float:
    """Final height of a growing page, rounded up to a whole point."""
    bottom = max(content_bottom, margins.top + line_height)
    if cut_y is not None:
        bottom = max(bottom, cut_y + CUT_CLEARANCE)
    return float(math.ceil(bottom + margins.bottom))


class PageLayout:
    """Paper, margins and fonts plus the metrics derived from them.

    Every setter re-runs :meth:`recalculate`; a setter that would leave the
    layout invalid raises and keeps the previous values.
    """

    def __init__(
        self,
        paper_type: PaperType = PaperType.A4,
        margins: Margins | None = None,
        font_settings: FontSettings | None = None,
    ) -> None:
        if paper_type is None:
            raise InvalidLayoutError("paper_type cannot be None")
        self._paper_type = paper_type
        self._margins = margins if margins is not None else Margins.default_for(paper_type)
        self._font_settings = font_settings.copy() if font_settings is not None else FontSettings()
        self._printable_width = 0.0
        self._printable_height = 0.0
        self._line_height = 0.0
        self._max_lines_per_page: int | None = None
        self.recalculate()

    @property
    def paper_type(self) -> PaperType:
        return self._paper_type

    @property
    def margins(self) -> Margins:
        return self._margins

    @property
    def font_settings(self) -> FontSettings:
        return self._font_settings

    @property
    def is_thermal(self) -> bool:
        return self._paper_type.is_thermal

    @property
    def page_width(self) -> float:
        return self._paper_type.width

    @property
    def page_height(self) -> float:
        return self._paper_type.height

    @property
    def printable_width(self) -> float:
        return self._printable_width

    @property
    def printable_height(self) -> float:
        return self._printable_height

    @property
    def line_height(self) -> float:
        return self._line_height

    @property
    def max_lines_per_page(self) -> int | None:
        return self._max_lines_per_page

    @property
    def content_top(self) -> float:
        return self._margins.top

    @property
    def content_bottom(self) -> float:
        if self.is_thermal:
            return math.inf
        return self.page_height - self._margins.bottom

    def set_paper_type(self, paper_type: PaperType) -> None:
        if paper_type is None:
            raise InvalidLayoutError("paper_type cannot be None")
        previous = self._paper_type
        self._paper_type = paper_type
        self._recalculate_or_restore(paper_type=previous)

    def set_margins(self, margins: Margins) -> None:
        previous = self._margins
        self._margins = margins
        self._recalculate_or_restore(margins=previous)

    def set_font_settings(self, font_settings: FontSettings) -> None:
        if font_settings is None:
            raise InvalidLayoutError("font_settings cannot be None")
        previous = self._font_settings
        self._font_settings = font_settings.copy()
        self._recalculate_or_restore(font_settings=previous)

    def recalculate(self) -> None:
        self._font_settings.validate()
        margins = self._margins
        width = printable_width(self.page_width, margins.left, margins.right)
        height = printable_height(self.page_height, margins.top, margins.bottom)
        line_height = line_height_for(self._font_settings.font_size)
        max_lines = lines_per_page(height, line_height)
        if max_lines == 0:
            raise InvalidLayoutError(
                f"printable height {height:.2f}pt cannot hold a {line_height:.2f}pt line"
            )
        self._printable_width = width
        self._printable_height = height
        self._line_height = line_height
        self._max_lines_per_page = max_lines

    def copy(self) -> PageLayout:
        return PageLayout(self._paper_type, self._margins, self._font_settings)

    def _recalculate_or_restore(self, **previous: object) -> None:
        try:
            self.recalculate()
        except InvalidLayoutError:
            for name, value in previous.items():
                setattr(self, f"_{name}", value)
            raise

    def __repr__(self) -> str:
        return (
            f"PageLayout(paper_type={self._paper_type.name}, margins={self._margins!r}, "
            f"font_size={self._font_settings.font_size})"
        )


__all__ = [
    "COORDINATE_EPSILON",
    "CUT_CLEARANCE",
    "LINE_SPACING_FACTOR",
    "Margins",
    "PageLayout",
    "line_height_for",
    "lines_per_page",
    "printable_height",
    "printable_width",
    "thermal_page_height",
]
