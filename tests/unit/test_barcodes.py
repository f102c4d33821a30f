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

import unittest

from pdfquill.barcodes import DEFAULT_PIXEL_SIZE, BarcodeRasterizer, BarcodeType, make_qr
from pdfquill.errors import GenerationError, ImageGenerationError


class TestBarcodeType(unittest.TestCase):
    def test_from_name(self) -> None:
        self.assertIs(BarcodeType.from_name("qr"), BarcodeType.QRCODE)
        self.assertIs(BarcodeType.from_name("QRCode"), BarcodeType.QRCODE)
        self.assertIs(BarcodeType.from_name("code-128"), BarcodeType.CODE128)
        self.assertIs(BarcodeType.from_name("EAN_13"), BarcodeType.EAN13)
        with self.assertRaises(ValueError):
            BarcodeType.from_name("pdf417")

    def test_only_qr_is_two_dimensional(self) -> None:
        self.assertEqual([t for t in BarcodeType if t.is_2d], [BarcodeType.QRCODE])


class TestBarcodeRasterizer(unittest.TestCase):
    def setUp(self) -> None:
        self.rasterizer = BarcodeRasterizer()

    def test_qr_defaults_to_square_bitmap(self) -> None:
        image = self.rasterizer.rasterize("https://example.org", BarcodeType.QRCODE)
        self.assertEqual(image.size, (DEFAULT_PIXEL_SIZE, DEFAULT_PIXEL_SIZE))
        self.assertEqual(image.mode, "RGB")
        colors = {color for _count, color in image.getcolors(maxcolors=16)}
        self.assertEqual(colors, {(0, 0, 0), (255, 255, 255)})

    def test_linear_codes_honor_requested_size(self) -> None:
        cases = (
            (BarcodeType.CODE128, "ORDER-1234"),
            (BarcodeType.CODE39, "ABC123"),
            (BarcodeType.EAN8, "9638507"),
            (BarcodeType.EAN13, "590123412345"),
            (BarcodeType.UPCA, "03600029145"),
        )
        for symbology, payload in cases:
            with self.subTest(symbology=symbology):
                image = self.rasterizer.rasterize(payload, symbology, height=60, width=300)
                self.assertEqual(image.size, (300, 60))

    def test_invalid_payload_raises_generation_error(self) -> None:
        with self.assertRaises(ImageGenerationError) as ctx:
            self.rasterizer.rasterize("not digits", BarcodeType.EAN13)
        self.assertIsInstance(ctx.exception, GenerationError)
        self.assertIsNotNone(ctx.exception.__cause__)

    def test_negative_size_is_rejected(self) -> None:
        with self.assertRaises(ImageGenerationError):
            self.rasterizer.rasterize("x", BarcodeType.QRCODE, height=-1)

    def test_make_qr_uses_requested_error_level(self) -> None:
        self.assertEqual(make_qr("payload", error="H").error, "H")


if __name__ == "__main__":
    unittest.main()
