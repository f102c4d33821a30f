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
from pdfquill.paper import PaperType, mm_to_pt, pt_to_mm


class TestPaperType(unittest.TestCase):
    def test_unit_conversion(self) -> None:
        self.assertAlmostEqual(mm_to_pt(25.4), 72.0)
        self.assertAlmostEqual(pt_to_mm(72.0), 25.4)

    def test_fixed_paper_has_height(self) -> None:
        self.assertFalse(PaperType.A4.is_thermal)
        self.assertAlmostEqual(PaperType.A4.width, 595.2756, places=3)
        self.assertAlmostEqual(PaperType.A4.height, 841.8898, places=3)

    def test_thermal_paper_grows(self) -> None:
        for paper in (PaperType.THERMAL_56MM, PaperType.THERMAL_58MM, PaperType.THERMAL_80MM):
            with self.subTest(paper=paper):
                self.assertTrue(paper.is_thermal)
                self.assertTrue(math.isinf(paper.height))
                self.assertAlmostEqual(paper.width, mm_to_pt(paper.width_mm))

    def test_from_name_accepts_aliases(self) -> None:
        self.assertIs(PaperType.from_name("A4"), PaperType.A4)
        self.assertIs(PaperType.from_name("letter"), PaperType.LETTER)
        self.assertIs(PaperType.from_name("thermal-80mm"), PaperType.THERMAL_80MM)
        self.assertIs(PaperType.from_name("THERMAL_58MM"), PaperType.THERMAL_58MM)
        self.assertIs(PaperType.from_name("56mm"), PaperType.THERMAL_56MM)

    def test_from_name_rejects_unknown(self) -> None:
        for name in ("", "a3", "thermal"):
            with self.subTest(name=name):
                with self.assertRaises(InvalidLayoutError):
                    PaperType.from_name(name)


if __name__ == "__main__":
    unittest.main()
