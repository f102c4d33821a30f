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

import logging
from collections import deque
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from PIL import Image

from ..errors import (
    ClosedWriterError,
    GenerationError,
    ImagePlacementError,
    PdfQuillError,
    StaleWriterError,
)
from ..fonts import FontMetrics, FontType, FpdfFontMetrics, text_width
from .geometry import COORDINATE_EPSILON, PageLayout, line_height_for, thermal_page_height
from .runs import StyledRun, StyledRunBuilder
from .text import expand_runs, find_wrap_index, split_run
from .types import PageState, PlacedImage, PlacedRule, PlacedText, WriterState

if TYPE_CHECKING:
    from ..config.settings import PermissionSettings

logger = logging.getLogger(__name__)

CUT_DASH = 4.0
CUT_GAP = 3.0


class DocumentEncoder(Protocol):
    def encode(
        self,
        pages: Sequence[PageState],
        *,
        permissions: PermissionSettings | None = None,
    ) -> bytes: ...


class PageWriter:
    """Places content on pages and owns the document's open/closed lifecycle.

    The writer starts ``OPEN``. The first call to :meth:`save_and_get_bytes`
    closes it, runs the encoder once and caches the result; every later call
    returns the cached bytes. Writing after that raises
    :class:`ClosedWriterError`.

    On fixed paper content that would cross the bottom margin moves to a new
    page. On thermal paper there is a single page whose height follows the
    content and is fixed when the writer closes.
    """

    def __init__(
        self,
        layout: PageLayout,
        *,
        metrics: FontMetrics | None = None,
        encoder: DocumentEncoder | None = None,
        permissions: PermissionSettings | None = None,
    ) -> None:
        if encoder is None:
            from .pdf_render import FpdfEncoder

            encoder = FpdfEncoder()
        self._layout = layout
        self._metrics = metrics if metrics is not None else FpdfFontMetrics()
        self._encoder = encoder
        self._permissions = permissions
        self._state = WriterState.OPEN
        self._cache: bytes | None = None
        self._pages: list[PageState] = []
        self._x = layout.margins.left
        self._y = layout.content_top
        self._start_page()

    @property
    def layout(self) -> PageLayout:
        return self._layout

    @property
    def state(self) -> WriterState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._state is WriterState.CLOSED

    @property
    def pages(self) -> tuple[PageState, ...]:
        return tuple(self._pages)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def current_page(self) -> PageState:
        return self._pages[-1]

    @property
    def cursor(self) -> tuple[float, float]:
        return (self._x, self._y)

    def write_line(self, text: str, font_type: FontType = FontType.DEFAULT) -> None:
        self._ensure_open()
        settings = self._layout.font_settings
        size = settings.font_size
        line_height = self._layout.line_height
        self._make_room(line_height)
        self.current_page.items.append(
            PlacedText(
                x=self._x,
                y=self._y,
                baseline=self._y + size,
                text=text,
                font=settings.font_for(font_type),
                size=size,
            )
        )
        self._advance(line_height)

    def skip_lines(self, count: int) -> None:
        self._ensure_open()
        line_height = self._layout.line_height
        for _ in range(max(0, count)):
            self._make_room(line_height)
            self._advance(line_height)

    def write_image(self, image: Image.Image, width: float, height: float) -> None:
        self._ensure_open()
        if width <= 0 or height <= 0:
            raise ImagePlacementError(f"image size must be positive, got {width}x{height}")
        max_width = self._layout.printable_width
        if width > max_width + COORDINATE_EPSILON:
            scale = max_width / width
            logger.warning(
                "image width %.2fpt exceeds printable width %.2fpt; scaling by %.3f",
                width,
                max_width,
                scale,
            )
            width, height = max_width, height * scale
        self._make_room(height)
        self.current_page.items.append(
            PlacedImage(x=self._x, y=self._y, width=width, height=height, image=image)
        )
        self._advance(height)

    def write_from_styled_runs(self, builder: StyledRunBuilder | None) -> None:
        self._ensure_open()
        if not builder:
            return
        for line in self._compose_lines(builder.runs):
            size = max(run.font_size for _offset, run in line)
            line_height = max(self._layout.line_height, line_height_for(size))
            self._make_room(line_height)
            for offset, run in line:
                self.current_page.items.append(
                    PlacedText(
                        x=self._x + offset,
                        y=self._y,
                        baseline=self._y + size,
                        text=run.text,
                        font=run.font,
                        size=run.font_size,
                    )
                )
            self._advance(line_height)

    def write_cut_signal(self) -> None:
        self._ensure_open()
        left = self._layout.margins.left
        page = self.current_page
        page.items.append(
            PlacedRule(
                x1=left,
                x2=left + self._layout.printable_width,
                y=self._y,
                dash=CUT_DASH,
                gap=CUT_GAP,
            )
        )
        page.cut_y = self._y

    def save_and_get_bytes(self) -> bytes:
        if self._state is WriterState.CLOSED:
            if self._cache is None:
                raise StaleWriterError("document output is not available after closure")
            return self._cache

        self._state = WriterState.CLOSED
        self._finalize_pages()
        try:
            data = self._encoder.encode(self._pages, permissions=self._permissions)
        except PdfQuillError:
            raise
        except Exception as exc:
            raise GenerationError("failed to encode document") from exc
        self._cache = bytes(data)
        logger.debug("encoded %d page(s) into %d bytes", len(self._pages), len(self._cache))
        return self._cache

    def _compose_lines(
        self, runs: Sequence[StyledRun]
    ) -> list[list[tuple[float, StyledRun]]]:
        max_width = self._layout.printable_width
        pending = deque(expand_runs(runs, max_width, metrics=self._metrics))
        lines: list[list[tuple[float, StyledRun]]] = []
        current: list[tuple[float, StyledRun]] = []
        offset = 0.0

        while pending:
            run = pending.popleft()
            if run.line_start and current:
                lines.append(current)
                current, offset = [], 0.0

            width = text_width(run.text, run.font, run.font_size, self._metrics)
            if offset + width <= max_width + COORDINATE_EPSILON:
                current.append((offset, run))
                offset += width
                continue

            available = max_width - offset
            fits = find_wrap_index(
                run.text, run.font, run.font_size, available, metrics=self._metrics
            )
            if fits == 0 and current:
                lines.append(current)
                current, offset = [], 0.0
                pending.appendleft(run.with_text(run.text.lstrip()))
                continue

            parts = split_run(run, available, metrics=self._metrics)
            if parts.head:
                current.append((offset, run.with_text(parts.head)))
                offset += text_width(parts.head, run.font, run.font_size, self._metrics)
            if not parts.tail:
                continue
            if current:
                lines.append(current)
            current, offset = [], 0.0
            pending.appendleft(run.with_text(parts.tail))

        if current:
            lines.append(current)
        return lines

    def _ensure_open(self) -> None:
        if self._state is WriterState.CLOSED:
            raise ClosedWriterError("cannot write to a document that has been finalized")

    def _start_page(self) -> None:
        layout = self._layout
        page = PageState(
            index=len(self._pages),
            width=layout.page_width,
            height=layout.page_height,
            content_bottom=layout.content_top,
        )
        self._pages.append(page)
        self._x = layout.margins.left
        self._y = layout.content_top
        if page.index:
            logger.debug("page break: starting page %d", page.index + 1)

    def _make_room(self, height: float) -> None:
        layout = self._layout
        if layout.is_thermal:
            return
        at_top = self._y <= layout.content_top + COORDINATE_EPSILON
        if self._y + height > layout.content_bottom + COORDINATE_EPSILON and not at_top:
            self._start_page()

    def _advance(self, height: float) -> None:
        self._y += height
        page = self.current_page
        page.content_bottom = max(page.content_bottom, self._y)

    def _finalize_pages(self) -> None:
        layout = self._layout
        if not layout.is_thermal:
            return
        for page in self._pages:
            page.height = thermal_page_height(
                page.content_bottom,
                layout.margins,
                layout.line_height,
                cut_y=page.cut_y,
            )
            logger.debug("thermal page %d closed at %.2fpt", page.index + 1, page.height)


__all__ = ["DocumentEncoder", "PageWriter"]
