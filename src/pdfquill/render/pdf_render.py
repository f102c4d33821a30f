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

import secrets
from collections.abc import Sequence
from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.enums import AccessPermission

from ..errors import GenerationError
from ..fonts import core_font_text
from .types import PageState, PlacedImage, PlacedRule, PlacedText

if TYPE_CHECKING:
    from ..config.settings import PermissionSettings

_PRODUCER = "pdfquill"


class FpdfEncoder:
    """Turns placed pages into PDF bytes with fpdf2.

    Coordinates are taken as-is: points, top-left origin, text anchored at
    its baseline.
    """

    def __init__(self, *, title: str | None = None, author: str | None = None) -> None:
        self._title = title
        self._author = author

    def encode(
        self,
        pages: Sequence[PageState],
        *,
        permissions: PermissionSettings | None = None,
    ) -> bytes:
        if not pages:
            raise GenerationError("cannot encode a document without pages")

        first = pages[0]
        pdf = FPDF(unit="pt", format=(first.width, first.height))
        pdf.set_auto_page_break(False)
        pdf.set_margins(0, 0, 0)
        pdf.set_creator(_PRODUCER)
        if self._title:
            pdf.set_title(self._title)
        if self._author:
            pdf.set_author(self._author)
        if permissions is not None and permissions.is_restricted:
            pdf.set_encryption(
                owner_password=secrets.token_hex(16),
                permissions=access_permissions(permissions),
            )

        for page in pages:
            pdf.add_page(format=(page.width, page.height))
            for item in page.items:
                if isinstance(item, PlacedText):
                    _draw_text(pdf, item)
                elif isinstance(item, PlacedImage):
                    pdf.image(item.image, x=item.x, y=item.y, w=item.width, h=item.height)
                elif isinstance(item, PlacedRule):
                    _draw_rule(pdf, item)
        return bytes(pdf.output())


def access_permissions(permissions: PermissionSettings) -> AccessPermission:
    flags = AccessPermission.COPY_FOR_ACCESSIBILITY | AccessPermission.FILL_FORMS
    if permissions.can_print:
        flags |= AccessPermission.PRINT_LOW_RES | AccessPermission.PRINT_HIGH_RES
    if permissions.can_modify:
        flags |= AccessPermission.MODIFY | AccessPermission.ANNOTATION | AccessPermission.ASSEMBLE
    if permissions.can_extract_content:
        flags |= AccessPermission.COPY
    return flags


def _draw_text(pdf: FPDF, item: PlacedText) -> None:
    if not item.text:
        return
    pdf.set_font(item.font.family, style=item.font.style, size=item.size)
    pdf.text(item.x, item.baseline, core_font_text(item.text))


def _draw_rule(pdf: FPDF, item: PlacedRule) -> None:
    pdf.set_draw_color(0, 0, 0)
    pdf.set_line_width(item.thickness)
    if item.dash > 0:
        pdf.set_dash_pattern(dash=item.dash, gap=item.gap)
    pdf.line(item.x1, item.y, item.x2, item.y)
    if item.dash > 0:
        pdf.set_dash_pattern()


__all__ = ["FpdfEncoder", "access_permissions"]
