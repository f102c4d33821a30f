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
from enum import Enum

from .errors import InvalidLayoutError

POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4


def mm_to_pt(mm: float) -> float:
    return float(mm) * POINTS_PER_INCH / MM_PER_INCH


def pt_to_mm(pt: float) -> float:
    return float(pt) * MM_PER_INCH / POINTS_PER_INCH


class PaperType(Enum):
    """Supported paper formats.

    Fixed formats have a constant height. Thermal rolls only fix the width;
    their height is open-ended and grows with the content written to them.
    """

    A4 = ("a4", 210.0, 297.0)
    A5 = ("a5", 148.0, 210.0)
    A6 = ("a6", 105.0, 148.0)
    LETTER = ("letter", 215.9, 279.4)
    LEGAL = ("legal", 215.9, 355.6)
    THERMAL_56MM = ("thermal-56mm", 56.0, None)
    THERMAL_58MM = ("thermal-58mm", 58.0, None)
    THERMAL_80MM = ("thermal-80mm", 80.0, None)

    def __init__(self, label: str, width_mm: float, height_mm: float | None) -> None:
        self.label = label
        self.width_mm = width_mm
        self.height_mm = height_mm

    @property
    def is_thermal(self) -> bool:
        return self.height_mm is None

    @property
    def width(self) -> float:
        return mm_to_pt(self.width_mm)

    @property
    def height(self) -> float:
        if self.height_mm is None:
            return math.inf
        return mm_to_pt(self.height_mm)

    @classmethod
    def from_name(cls, name: str) -> PaperType:
        normalized = str(name).strip().lower().replace("_", "-").replace(" ", "-")
        if not normalized:
            raise InvalidLayoutError("paper type cannot be empty")
        for paper in cls:
            aliases = {paper.label, paper.name.lower().replace("_", "-")}
            if paper.is_thermal:
                aliases.add(paper.label.removeprefix("thermal-"))
            if normalized in aliases:
                return paper
        raise InvalidLayoutError(f"unsupported paper type: {name}")


__all__ = ["PaperType", "mm_to_pt", "pt_to_mm"]
