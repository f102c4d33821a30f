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

import io
from enum import Enum
from typing import Any, Protocol

import barcode
import segno
from barcode.writer import ImageWriter
from PIL import Image

from ..errors import ImageGenerationError

DEFAULT_PIXEL_SIZE = 350


class BarcodeType(Enum):
    QRCODE = "qrcode"
    CODE128 = "code128"
    CODE39 = "code39"
    EAN8 = "ean8"
    EAN13 = "ean13"
    UPCA = "upca"

    @property
    def is_2d(self) -> bool:
        return self is BarcodeType.QRCODE

    @classmethod
    def from_name(cls, name: str) -> BarcodeType:
        normalized = str(name).strip().lower().replace("-", "").replace("_", "")
        if normalized == "qr":
            return cls.QRCODE
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"unsupported barcode type: {name}")


class Rasterizer(Protocol):
    def rasterize(
        self, payload: str, symbology: BarcodeType, height: int, width: int
    ) -> Image.Image: ...


class BarcodeRasterizer:
    """Renders barcodes to black-on-white bitmaps of an exact pixel size."""

    def __init__(self, *, qr_error: str = "L", quiet_zone: float = 0.0) -> None:
        self._qr_error = qr_error
        self._quiet_zone = quiet_zone

    def rasterize(
        self, payload: str, symbology: BarcodeType, height: int = 0, width: int = 0
    ) -> Image.Image:
        height = height or DEFAULT_PIXEL_SIZE
        width = width or DEFAULT_PIXEL_SIZE
        if height < 0 or width < 0:
            raise ImageGenerationError(f"barcode size must be positive, got {width}x{height}")
        try:
            if symbology is BarcodeType.QRCODE:
                image = self._render_qr(payload)
            else:
                image = self._render_linear(payload, symbology)
            image = image.convert("RGB")
            return image.resize((width, height), resample=Image.Resampling.NEAREST)
        except Exception as exc:
            raise ImageGenerationError(
                f"failed to create {symbology.value} image for {payload!r}"
            ) from exc

    def _render_qr(self, payload: str) -> Image.Image:
        qr = make_qr(payload, error=self._qr_error)
        buf = io.BytesIO()
        qr.save(buf, kind="png", scale=1, border=0)
        buf.seek(0)
        with Image.open(buf) as image:
            return image.convert("RGB")

    def _render_linear(self, payload: str, symbology: BarcodeType) -> Image.Image:
        cls = barcode.get_barcode_class(symbology.value)
        writer_options = {
            "write_text": False,
            "quiet_zone": self._quiet_zone,
            "module_height": 10.0,
            "module_width": 0.2,
        }
        return cls(payload, writer=ImageWriter()).render(writer_options=writer_options)


def make_qr(data: bytes | str, *, error: str = "L", boost_error: bool = False) -> Any:
    return segno.make(data, error=error, micro=False, boost_error=boost_error)


__all__ = ["BarcodeRasterizer", "BarcodeType", "DEFAULT_PIXEL_SIZE", "Rasterizer", "make_qr"]
