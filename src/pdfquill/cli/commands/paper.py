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

import typer
from rich.table import Table

from ...paper import PaperType
from ...render.geometry import Margins
from ..ui import console


def register(app: typer.Typer) -> None:
    app.command("paper-types", help="List the supported paper types.")(paper_types)


def paper_types() -> None:
    table = Table(title="Paper types", header_style="title")
    table.add_column("Name", style="accent")
    table.add_column("Width (mm)", justify="right")
    table.add_column("Height (mm)", justify="right")
    table.add_column("Default margins (pt)", justify="right")
    for paper in PaperType:
        margins = Margins.default_for(paper)
        height = "grows" if paper.is_thermal else f"{paper.height_mm:g}"
        table.add_row(
            paper.label,
            f"{paper.width_mm:g}",
            height,
            f"{margins.left:g} / {margins.right:g} / {margins.top:g} / {margins.bottom:g}",
        )
    console.print(table)
