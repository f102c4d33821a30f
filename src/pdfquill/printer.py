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

import atexit
import base64
import contextlib
import io
import logging
import os
import secrets
import tempfile
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image, UnidentifiedImageError

from .barcodes import BarcodeRasterizer, BarcodeType, Rasterizer
from .config import PermissionSettings, PrinterConfig
from .errors import ClosedWriterError, ExportError, ImageGenerationError
from .fonts import FontMetrics, FontSettings, FontType, FpdfFontMetrics
from .paper import mm_to_pt
from .render.geometry import PageLayout
from .render.runs import StyledRunBuilder
from .render.text import wrap_text_to_lines
from .render.writer import DocumentEncoder, PageWriter

logger = logging.getLogger(__name__)

QR_SIZE = mm_to_pt(48.0)
LINEAR_BARCODE_WIDTH = mm_to_pt(80.0)
LINEAR_BARCODE_HEIGHT = mm_to_pt(12.0)
TEMP_FILE_PREFIX = "pdfquill-"

ImageSource = Union[Image.Image, bytes, bytearray, BinaryIO]


class Printer:
    """Fluent front end for building one print-ready PDF.

    Every ``print_*`` call returns the printer so calls can be chained. The
    first request for output finalizes the document; from then on the same
    bytes are returned and further printing raises
    :class:`~pdfquill.errors.ClosedWriterError`.
    """

    def __init__(
        self,
        config: PrinterConfig | None = None,
        *,
        metrics: FontMetrics | None = None,
        encoder: DocumentEncoder | None = None,
        rasterizer: Rasterizer | None = None,
    ) -> None:
        self._config = config if config is not None else PrinterConfig()
        self._permissions = self._config.resolve_permissions()
        self._layout = self._config.build_layout()
        self._metrics = metrics if metrics is not None else FpdfFontMetrics()
        self._rasterizer = rasterizer if rasterizer is not None else BarcodeRasterizer()
        self._writer = PageWriter(
            self._layout,
            metrics=self._metrics,
            encoder=encoder,
            permissions=self._permissions,
        )
        self._output_file: Path | None = None

    @property
    def config(self) -> PrinterConfig:
        return self._config

    @property
    def layout(self) -> PageLayout:
        return self._layout

    @property
    def writer(self) -> PageWriter:
        return self._writer

    @property
    def permissions(self) -> PermissionSettings:
        return self._permissions

    @property
    def is_closed(self) -> bool:
        return self._writer.is_closed

    @property
    def output_file(self) -> Path | None:
        return self._output_file

    def update_font_settings(self, font_settings: FontSettings) -> None:
        if self._writer.is_closed:
            raise ClosedWriterError("cannot change fonts after the document was finalized")
        self._layout.set_font_settings(font_settings)

    def print_line(self, text: str, font_type: FontType = FontType.DEFAULT) -> Printer:
        """Wrap ``text`` to the printable width and write the resulting lines.

        Embedded newlines start new paragraphs; an empty paragraph prints an
        empty line.
        """
        settings = self._layout.font_settings
        font = settings.font_for(font_type)
        for paragraph in text.splitlines() or [""]:
            lines = wrap_text_to_lines(
                paragraph,
                font,
                settings.font_size,
                self._layout.printable_width,
                metrics=self._metrics,
                preserve_spaces=self._config.preserve_spaces,
            )
            for line in lines:
                self._writer.write_line(line, font_type)
        return self

    def skip_line(self) -> Printer:
        return self.skip_lines(1)

    def skip_lines(self, count: int) -> Printer:
        self._writer.skip_lines(count)
        return self

    # TODO: confirm with product whether preserve_spaces should apply to styled
    # runs too; they currently always collapse whitespace at line breaks.
    def print_styled(self, builder: StyledRunBuilder | None) -> Printer:
        if builder is None:
            return self
        self._writer.write_from_styled_runs(builder)
        return self

    def print_image(
        self,
        image: ImageSource,
        width: float | None = None,
        height: float | None = None,
    ) -> Printer:
        """Place an image at the cursor; size defaults to its pixel size in points."""
        picture = _load_image(image)
        self._writer.write_image(
            picture,
            float(picture.width if width is None else width),
            float(picture.height if height is None else height),
        )
        return self

    def print_barcode(
        self,
        code: str,
        barcode_type: BarcodeType,
        height: int = 0,
        width: int = 0,
    ) -> Printer:
        """Rasterize ``code`` and place it; ``height``/``width`` are pixels, 0 for default."""
        image = self._rasterizer.rasterize(code, barcode_type, height, width)
        if barcode_type.is_2d:
            self._writer.write_image(image, QR_SIZE, QR_SIZE)
        else:
            self._writer.write_image(image, LINEAR_BARCODE_WIDTH, LINEAR_BARCODE_HEIGHT)
        return self

    def cut_signal(self) -> Printer:
        self._writer.write_cut_signal()
        return self

    def pdf_bytes(self) -> bytes:
        return bytes(self._writer.save_and_get_bytes())

    def base64_pdf(self) -> str:
        return base64.b64encode(self._writer.save_and_get_bytes()).decode("ascii")

    def pdf_file(self) -> Path:
        """Return a file holding the PDF, creating a temporary one if needed.

        Temporary files are removed when the interpreter exits.
        """
        if self._writer.is_closed and self._output_file is not None:
            if self._output_file.is_file():
                return self._output_file

        try:
            fd, name = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, suffix=".pdf")
            os.close(fd)
        except OSError as exc:
            raise ExportError("failed to create temporary PDF file") from exc
        path = Path(name)
        atexit.register(_remove_file, path)
        return self.write_pdf(path)

    def write_pdf(self, destination: str | os.PathLike[str]) -> Path:
        """Write the PDF to ``destination``, creating parent directories.

        The file is written next to the destination and moved into place, so
        a failed write never leaves a truncated PDF behind and is never
        reported as the current output file.
        """
        if destination is None:
            raise ExportError("destination cannot be None")
        path = Path(destination)
        if path.is_dir():
            raise ExportError(f"destination must be a file path, not a directory: {path}")

        data = self._writer.save_and_get_bytes()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            _write_atomically(path, data)
        except OSError as exc:
            raise ExportError(f"failed to write PDF to {path}") from exc
        self._output_file = path
        logger.debug("wrote %d bytes to %s", len(data), path)
        return path

    def close(self) -> None:
        self._writer.save_and_get_bytes()

    def __enter__(self) -> Printer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()


def _load_image(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, (bytes, bytearray)):
        stream: BinaryIO = io.BytesIO(bytes(source))
    elif hasattr(source, "read"):
        stream = source
    else:
        raise TypeError(f"unsupported image source: {type(source).__name__}")
    try:
        image = Image.open(stream)
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageGenerationError("failed to decode image data") from exc
    return image


def _write_atomically(path: Path, data: bytes) -> None:
    tmp_path = path.with_name(f".{path.name}.{secrets.token_hex(4)}.tmp")
    try:
        with open(tmp_path, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def _remove_file(path: Path) -> None:
    with contextlib.suppress(OSError):
        path.unlink(missing_ok=True)


__all__ = ["Printer"]
