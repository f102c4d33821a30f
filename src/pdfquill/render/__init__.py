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

"""Page geometry, line breaking, placement and PDF encoding."""

from .geometry import LINE_SPACING_FACTOR, Margins, PageLayout
from .pdf_render import FpdfEncoder
from .runs import SplitParts, StyledRun, StyledRunBuilder
from .text import expand_runs, find_wrap_index, split_run, wrap_text_to_lines
from .types import PageState, PlacedImage, PlacedRule, PlacedText, WriterState
from .writer import DocumentEncoder, PageWriter

__all__ = [
    "DocumentEncoder",
    "FpdfEncoder",
    "LINE_SPACING_FACTOR",
    "Margins",
    "PageLayout",
    "PageState",
    "PageWriter",
    "PlacedImage",
    "PlacedRule",
    "PlacedText",
    "SplitParts",
    "StyledRun",
    "StyledRunBuilder",
    "WriterState",
    "expand_runs",
    "find_wrap_index",
    "split_run",
    "wrap_text_to_lines",
]
