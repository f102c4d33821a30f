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

import os
import subprocess
import sys
import unittest

from pdfquill.errors import InvalidLayoutError
from pdfquill.fonts import (
    Font,
    FontSettings,
    FontType,
    FpdfFontMetrics,
    core_font_text,
    text_width,
)
from test_support import MonoMetrics


class TestFont(unittest.TestCase):
    def test_family_and_style_are_normalized(self) -> None:
        font = Font("helvetica", "ib")
        self.assertEqual(font, Font("Helvetica", "BI"))

    def test_unknown_family_is_rejected(self) -> None:
        with self.assertRaises(InvalidLayoutError):
            Font("Comic Sans")

    def test_unknown_style_is_rejected(self) -> None:
        with self.assertRaises(InvalidLayoutError):
            Font("Courier", "U")


class TestFontSettings(unittest.TestCase):
    def test_every_font_type_has_a_slot(self) -> None:
        settings = FontSettings.for_family("Times", 12)
        self.assertEqual(settings.font_for(FontType.DEFAULT), Font("Times", ""))
        self.assertEqual(settings.font_for(FontType.BOLD), Font("Times", "B"))
        self.assertEqual(settings.font_for(FontType.ITALIC), Font("Times", "I"))
        self.assertEqual(settings.font_for(FontType.BOLD_ITALIC), Font("Times", "BI"))
        self.assertEqual(settings.font_size, 12)

    def test_set_font_replaces_one_slot(self) -> None:
        settings = FontSettings()
        settings.set_font(FontType.BOLD, Font("Helvetica", "B"))
        self.assertEqual(settings.bold_font, Font("Helvetica", "B"))
        self.assertEqual(settings.default_font, Font("Courier", ""))

    def test_invalid_size_is_rejected(self) -> None:
        for size in (0, -3, True, 1.5):
            with self.subTest(size=size):
                with self.assertRaises(InvalidLayoutError):
                    FontSettings(font_size=size)  # type: ignore[arg-type]

    def test_copy_is_independent(self) -> None:
        settings = FontSettings()
        clone = settings.copy()
        clone.font_size = 14
        clone.set_font(FontType.ITALIC, Font("Times", "I"))
        self.assertEqual(settings.font_size, 10)
        self.assertEqual(settings.italic_font, Font("Courier", "I"))


class TestModuleImport(unittest.TestCase):
    def test_module_imports_in_fresh_interpreter(self) -> None:
        code = (
            "from pdfquill.fonts import FontSettings; "
            "s = FontSettings(); print(s.default_font.family, s.bold_italic_font.style)"
        )
        env = dict(os.environ, PYTHONPATH=os.pathsep.join(p for p in sys.path if p))
        result = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, env=env, check=False
        )
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout.split(), ["Courier", "BI"])


class TestMetrics(unittest.TestCase):
    def test_text_width_sums_advances(self) -> None:
        self.assertEqual(text_width("abcd", Font(), 10, MonoMetrics(2.5)), 10.0)

    def test_courier_is_monospaced(self) -> None:
        metrics = FpdfFontMetrics()
        font = Font("Courier")
        self.assertAlmostEqual(metrics.advance_width("i", font, 10), 6.0)
        self.assertAlmostEqual(metrics.advance_width("W", font, 10), 6.0)
        self.assertAlmostEqual(metrics.advance_width("W", font, 20), 12.0)

    def test_helvetica_widths_differ(self) -> None:
        metrics = FpdfFontMetrics()
        font = Font("Helvetica")
        self.assertLess(metrics.advance_width("i", font, 10), metrics.advance_width("W", font, 10))

    def test_non_latin1_text_is_replaced(self) -> None:
        self.assertEqual(core_font_text("café €5"), "café ?5")


if __name__ == "__main__":
    unittest.main()
