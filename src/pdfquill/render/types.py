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

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from PIL import Image

from ..fonts import Font


class WriterState(Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class PlacedText:
    """A line of text; ``y`` is the top of the line box, ``baseline`` where glyphs sit."""

    x: float
    y: float
    baseline: float
    text: str
    font: Font
    size: float


@dataclass(frozen=True)
class PlacedImage:
    x: float
    y: float
    width: float
    height: float
    image: Image.Image = field(compare=False)


@dataclass(frozen=True)
class PlacedRule:
    x1: float
    x2: float
    y: float
    dash: float = 0.0
    gap: float = 0.0
    thickness: float = 0.5


Placement = Union[PlacedText, PlacedImage, PlacedRule]


@dataclass
class PageState:
    index: int
    width: float
    height: float
    content_bottom: float
    items: list[Placement] = field(default_factory=list)
    cut_y: float | None = None

    @property
    def texts(self) -> list[PlacedText]:
        return [item for item in self.items if isinstance(item, PlacedText)]

    @property
    def images(self) -> list[PlacedImage]:
        return [item for item in self.items if isinstance(item, PlacedImage)]

    @property
    def rules(self) -> list[PlacedRule]:
        return [item for item in self.items if isinstance(item, PlacedRule)]


__all__ = [
    "PageState",
    "PlacedImage",
    "PlacedRule",
    "PlacedText",
    "Placement",
    "WriterState",
]
