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

"""A small line-oriented format for describing receipts.

Each input line is one instruction::

    # Bold heading            bold line
    _ italic note             italic line
    #_ both                   bold italic line
    Total: **12.00 EUR**      mixed runs, ``**`` toggles bold
    (empty line)              skip one line
    ---8<---                  cut signal
    [qr] https://example.org  barcode; any BarcodeType name works
    [image] logo.png          image, path relative to the script
    \\# literal               a leading backslash disables the markers
    anything else             wrapped plain text
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..barcodes import BarcodeType
from ..fonts import FontType
from ..printer import Printer
from ..render.runs import StyledRunBuilder

CUT_MARKER = "---8<---"
BOLD_TOGGLE = "**"

CommandKind = Literal["line", "styled", "skip", "cut", "barcode", "image"]

_PREFIXES: tuple[tuple[str, FontType], ...] = (
    ("#_ ", FontType.BOLD_ITALIC),
    ("# ", FontType.BOLD),
    ("_ ", FontType.ITALIC),
)


@dataclass(frozen=True)
class ScriptCommand:
    kind: CommandKind
    text: str = ""
    font_type: FontType = FontType.DEFAULT
    barcode_type: BarcodeType | None = None
    segments: tuple[tuple[str, FontType], ...] = ()


def parse_script(lines: Iterable[str]) -> list[ScriptCommand]:
    commands: list[ScriptCommand] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            commands.append(ScriptCommand("skip"))
            continue
        if line.startswith("\\"):
            commands.append(ScriptCommand("line", line[1:]))
            continue
        if line.strip() == CUT_MARKER:
            commands.append(ScriptCommand("cut"))
            continue
        if line.startswith("["):
            commands.append(_parse_bracket(line, lineno))
            continue
        commands.append(_parse_text(line))
    return commands


def apply_script(
    printer: Printer,
    commands: Sequence[ScriptCommand],
    *,
    base_dir: Path | None = None,
) -> Printer:
    settings = printer.layout.font_settings
    for command in commands:
        if command.kind == "skip":
            printer.skip_line()
        elif command.kind == "cut":
            printer.cut_signal()
        elif command.kind == "barcode" and command.barcode_type is not None:
            printer.print_barcode(command.text, command.barcode_type)
        elif command.kind == "image":
            path = Path(command.text).expanduser()
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            with path.open("rb") as handle:
                printer.print_image(handle.read())
        elif command.kind == "styled":
            builder = StyledRunBuilder()
            for text, font_type in command.segments:
                builder.add_text(text, settings, font_type)
            printer.print_styled(builder)
        else:
            printer.print_line(command.text, command.font_type)
    return printer


def _parse_bracket(line: str, lineno: int) -> ScriptCommand:
    tag, sep, rest = line[1:].partition("]")
    if not sep:
        raise ValueError(f"line {lineno}: unterminated [tag]")
    name = tag.strip().lower()
    payload = rest.strip()
    if not payload:
        raise ValueError(f"line {lineno}: [{name}] needs a value")
    if name == "image":
        return ScriptCommand("image", payload)
    try:
        barcode_type = BarcodeType.from_name(name)
    except ValueError as exc:
        raise ValueError(f"line {lineno}: {exc}") from exc
    return ScriptCommand("barcode", payload, barcode_type=barcode_type)


def _parse_text(line: str) -> ScriptCommand:
    for prefix, font_type in _PREFIXES:
        if line.startswith(prefix):
            return ScriptCommand("line", line[len(prefix) :], font_type=font_type)
    if BOLD_TOGGLE not in line:
        return ScriptCommand("line", line)
    segments: list[tuple[str, FontType]] = []
    for index, part in enumerate(line.split(BOLD_TOGGLE)):
        if part:
            segments.append((part, FontType.BOLD if index % 2 else FontType.DEFAULT))
    return ScriptCommand("styled", segments=tuple(segments))


__all__ = ["CUT_MARKER", "ScriptCommand", "apply_script", "parse_script"]
