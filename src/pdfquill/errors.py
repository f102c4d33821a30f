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


class PdfQuillError(Exception):
    """Base class for every error raised by pdfquill."""


class InvalidLayoutError(PdfQuillError, ValueError):
    """Raised when paper, margins or font settings leave no printable area."""


class GenerationError(PdfQuillError, RuntimeError):
    """Raised when the document encoder fails."""


class ImageGenerationError(GenerationError):
    """Raised when an image or barcode cannot be decoded or rasterized."""


class ImagePlacementError(PdfQuillError, ValueError):
    """Raised when an image is placed with a non-positive size."""


class ExportError(PdfQuillError, OSError):
    """Raised when finalized bytes cannot be written to a destination."""


class WriterStateError(PdfQuillError, RuntimeError):
    """Base class for misuse of a writer's open/closed lifecycle."""


class ClosedWriterError(WriterStateError):
    """Raised when content is written after the document was finalized."""


class StaleWriterError(WriterStateError):
    """Raised when a closed writer has no cached output to return."""


__all__ = [
    "ClosedWriterError",
    "ExportError",
    "GenerationError",
    "ImageGenerationError",
    "ImagePlacementError",
    "InvalidLayoutError",
    "PdfQuillError",
    "StaleWriterError",
    "WriterStateError",
]
