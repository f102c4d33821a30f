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

import sys
from pathlib import Path

import typer

from ...config import load_printer_config
from ...fonts import FontSettings
from ...printer import Printer
from ..core.common import _ctx_value, _run_cli
from ..script import apply_script, parse_script
from ..ui import console

_RENDER_HELP = (
    "Lay out a receipt script and write the PDF.\n\n"
    "Examples:\n"
    "  pdfquill render receipt.txt -o receipt.pdf --paper thermal-80mm\n"
    "  cat ticket.txt | pdfquill render - -o ticket.pdf --font-size 9\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Receipt script to render ('-' reads stdin)."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to <source>.pdf, or a temp file for stdin).",
        rich_help_panel="Outputs",
    ),
    paper: str | None = typer.Option(
        None,
        "--paper",
        help="Paper type (a4, a5, a6, letter, legal, thermal-56mm, thermal-58mm, thermal-80mm).",
        rich_help_panel="Layout",
    ),
    font_size: int | None = typer.Option(
        None,
        "--font-size",
        min=1,
        help="Override the configured font size in points.",
        rich_help_panel="Layout",
    ),
    preserve_spaces: bool = typer.Option(
        False,
        "--preserve-spaces",
        help="Keep leading and trailing spaces when wrapping plain lines.",
        rich_help_panel="Layout",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file (overrides the global option).",
        rich_help_panel="Config",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))
    config_value = config or _ctx_value(ctx, "config")

    def _run() -> None:
        config = load_printer_config(config_value, paper=paper)
        if font_size is not None:
            config = config.with_font_customizer(_font_size_setter(font_size))
        if preserve_spaces:
            config = config.with_preserve_spaces(True)

        if source == "-":
            lines = sys.stdin.read().splitlines()
            base_dir = Path.cwd()
        else:
            source_path = Path(source).expanduser()
            lines = source_path.read_text(encoding="utf-8").splitlines()
            base_dir = source_path.parent

        printer = Printer(config)
        apply_script(printer, parse_script(lines), base_dir=base_dir)

        if output is not None:
            written = printer.write_pdf(output)
        elif source == "-":
            written = printer.pdf_file()
        else:
            written = printer.write_pdf(Path(source).with_suffix(".pdf"))
        if not quiet_value:
            console.print(str(written))

    _run_cli(_run, debug=debug_value)


def _font_size_setter(size: int):
    def _apply(settings: FontSettings) -> None:
        settings.font_size = size

    return _apply
