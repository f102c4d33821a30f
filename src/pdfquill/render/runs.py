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

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..fonts import Font, FontSettings, FontType


@dataclass(frozen=True)
class StyledRun:
    """A span of text drawn with one font and size.

    ``font_settings`` is the settings object the run was created with and is
    shared, not copied. ``line_start`` marks continuation pieces produced
    when a run is wrapped; such pieces always begin a new line.
    """

    text: str
    font_settings: FontSettings = field(compare=False)
    font_type: FontType = FontType.DEFAULT
    line_start: bool = False

    @property
    def font(self) -> Font:
        return self.font_settings.font_for(self.font_type)

    @property
    def font_size(self) -> int:
        return self.font_settings.font_size

    def with_text(self, text: str, *, line_start: bool = False) -> StyledRun:
        return StyledRun(text, self.font_settings, self.font_type, line_start=line_start)


@dataclass(frozen=True)
class SplitParts:
    head: str | None
    tail: str | None


class StyledRunBuilder:
    """Ordered runs that make up one logical, mixed-style block."""

    def __init__(self, runs: list[StyledRun] | None = None) -> None:
        self._runs: list[StyledRun] = list(runs or [])

    def add_run(self, run: StyledRun) -> StyledRunBuilder:
        self._runs.append(run)
        return self

    def add_text(
        self,
        text: str,
        font_settings: FontSettings,
        font_type: FontType = FontType.DEFAULT,
    ) -> StyledRunBuilder:
        return self.add_run(StyledRun(text, font_settings, font_type))

    @property
    def runs(self) -> tuple[StyledRun, ...]:
        return tuple(self._runs)

    def __iter__(self) -> Iterator[StyledRun]:
        return iter(tuple(self._runs))

    def __len__(self) -> int:
        return len(self._runs)

    def __bool__(self) -> bool:
        return bool(self._runs)


__all__ = ["SplitParts", "StyledRun", "StyledRunBuilder"]
