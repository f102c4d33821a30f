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

"""Layout and pagination for receipts, tickets and labels rendered to PDF."""

from .barcodes import BarcodeRasterizer, BarcodeType
from .config import PermissionSettings, PrinterConfig, load_printer_config
from .errors import (
    ClosedWriterError,
    ExportError,
    GenerationError,
    ImageGenerationError,
    ImagePlacementError,
    InvalidLayoutError,
    PdfQuillError,
    StaleWriterError,
)
from .fonts import Font, FontSettings, FontType, FpdfFontMetrics
from .paper import PaperType, mm_to_pt
from .printer import Printer
from .render import Margins, PageLayout, PageWriter, StyledRun, StyledRunBuilder

__all__ = [
    "BarcodeRasterizer",
    "BarcodeType",
    "ClosedWriterError",
    "ExportError",
    "Font",
    "FontSettings",
    "FontType",
    "FpdfFontMetrics",
    "GenerationError",
    "ImageGenerationError",
    "ImagePlacementError",
    "InvalidLayoutError",
    "Margins",
    "PageLayout",
    "PageWriter",
    "PaperType",
    "PdfQuillError",
    "PermissionSettings",
    "Printer",
    "PrinterConfig",
    "StaleWriterError",
    "StyledRun",
    "StyledRunBuilder",
    "load_printer_config",
    "mm_to_pt",
]
