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

import math
import unittest

from pdfquill.errors import InvalidLayoutError
from pdfquill.fonts import FontSettings
from pdfquill.paper import PaperType, mm_to_pt
from pdfquill.render.geometry import (
    Margins,
    PageLayout,
    line_height_for,
    lines_per_page,
    printable_height,
    printable_width,
    thermal_page_height,
)


class TestMargins(unittest.TestCase):
    def test_negative_margin_is_rejected(self) -> None:
        with self.assertRaisesRegex(InvalidLayoutError, "margin_top cannot be negative"):
            Margins(top=-1)

    def test_non_numeric_margin_is_rejected(self) -> None:
        with self.assertRaises(InvalidLayoutError):
            Margins(left="10")  # type: ignore[arg-type]

    def test_defaults_depend_on_paper(self) -> None:
        self.assertEqual(Margins.default_for(PaperType.A4), Margins(36, 36, 36, 36))
        self.assertEqual(Margins.default_for(PaperType.THERMAL_58MM), Margins(8, 8, 12, 12))


class TestGeometryHelpers(unittest.TestCase):
    def test_printable_width(self) -> None:
        self.assertAlmostEqual(printable_width(100.0, 10.0, 15.0), 75.0)
        with self.assertRaises(InvalidLayoutError):
            printable_width(100.0, 50.0, 50.0)

    def test_printable_height_is_unbounded_on_thermal_paper(self) -> None:
        self.assertTrue(math.isinf(printable_height(math.inf, 12.0, 12.0)))
        with self.assertRaises(InvalidLayoutError):
            printable_height(20.0, 12.0, 12.0)

    def test_line_height(self) -> None:
        self.assertAlmostEqual(line_height_for(10), 12.0)

    def test_lines_per_page_tolerates_rounding(self) -> None:
        self.assertEqual(lines_per_page(36.0, 12.0), 3)
        self.assertEqual(lines_per_page(35.995, 12.0), 3)
        self.assertEqual(lines_per_page(35.9, 12.0), 2)
        self.assertIsNone(lines_per_page(math.inf, 12.0))

    def test_thermal_page_height_covers_content_and_margins(self) -> None:
        margins = Margins(8, 8, 12, 12)
        self.assertEqual(thermal_page_height(100.4, margins, 12.0), 113.0)

    def test_thermal_page_height_has_minimum_one_line(self) -> None:
        margins = Margins(8, 8, 12, 12)
        self.assertEqual(thermal_page_height(12.0, margins, 12.0), 36.0)

    def test_thermal_page_height_leaves_room_below_cut(self) -> None:
        margins = Margins(8, 8, 12, 12)
        self.assertEqual(thermal_page_height(36.0, margins, 12.0, cut_y=36.0), 54.0)


class TestPageLayout(unittest.TestCase):
    def test_a4_metrics(self) -> None:
        layout = PageLayout(PaperType.A4)
        self.assertAlmostEqual(layout.printable_width, mm_to_pt(210) - 72)
        self.assertAlmostEqual(layout.printable_height, mm_to_pt(297) - 72)
        self.assertAlmostEqual(layout.line_height, 12.0)
        self.assertEqual(layout.max_lines_per_page, 64)
        self.assertFalse(layout.is_thermal)

    def test_thermal_layout_has_no_line_limit(self) -> None:
        layout = PageLayout(PaperType.THERMAL_80MM)
        self.assertTrue(layout.is_thermal)
        self.assertIsNone(layout.max_lines_per_page)
        self.assertTrue(math.isinf(layout.content_bottom))
        self.assertAlmostEqual(layout.printable_width, mm_to_pt(80) - 16)

    def test_none_paper_is_rejected(self) -> None:
        with self.assertRaises(InvalidLayoutError):
            PageLayout(None)  # type: ignore[arg-type]

    def test_margins_wider_than_page_are_rejected(self) -> None:
        with self.assertRaises(InvalidLayoutError):
            PageLayout(PaperType.THERMAL_56MM, Margins(left=100, right=100))

    def test_page_too_short_for_one_line_is_rejected(self) -> None:
        with self.assertRaises(InvalidLayoutError):
            PageLayout(PaperType.A6, Margins(top=200, bottom=210))

    def test_font_settings_are_copied(self) -> None:
        settings = FontSettings()
        layout = PageLayout(PaperType.A4, font_settings=settings)
        settings.font_size = 20
        self.assertEqual(layout.font_settings.font_size, 10)

    def test_set_font_settings_recalculates(self) -> None:
        layout = PageLayout(PaperType.A4)
        layout.set_font_settings(FontSettings(font_size=20))
        self.assertAlmostEqual(layout.line_height, 24.0)
        self.assertEqual(layout.max_lines_per_page, 32)

    def test_failed_setter_keeps_previous_values(self) -> None:
        layout = PageLayout(PaperType.A6)
        before = layout.margins
        with self.assertRaises(InvalidLayoutError):
            layout.set_margins(Margins(left=200, right=200))
        self.assertEqual(layout.margins, before)
        self.assertAlmostEqual(layout.printable_width, mm_to_pt(105) - 72)

    def test_set_paper_type_switches_to_growing_page(self) -> None:
        layout = PageLayout(PaperType.A5, Margins(10, 10, 10, 10))
        layout.set_paper_type(PaperType.THERMAL_80MM)
        self.assertTrue(layout.is_thermal)
        self.assertIsNone(layout.max_lines_per_page)

    def test_copy_is_independent(self) -> None:
        layout = PageLayout(PaperType.A4)
        clone = layout.copy()
        clone.set_font_settings(FontSettings(font_size=8))
        self.assertEqual(layout.font_settings.font_size, 10)
        self.assertIsNot(clone.font_settings, layout.font_settings)


if __name__ == "__main__":
    unittest.main()
