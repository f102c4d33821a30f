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

from pdfquill.fonts import Font, FontSettings, FontType
from pdfquill.render.runs import SplitParts, StyledRun
from pdfquill.render.text import expand_runs, find_wrap_index, split_run, wrap_text_to_lines
from test_support import MonoMetrics

EPS = 0.01
FONT = Font()


def _wrap(text: str, width: float, **kwargs: object) -> list[str]:
    return wrap_text_to_lines(text, FONT, 10, width, metrics=MonoMetrics(), **kwargs)


class TestWrapTextToLines(unittest.TestCase):
    def test_breaks_after_last_fitting_word(self) -> None:
        self.assertEqual(_wrap("Hello world test", len("Hello world") + EPS), ["Hello world", "test"])

    def test_text_that_fits_is_returned_unchanged(self) -> None:
        self.assertEqual(_wrap("  short  ", 40), ["  short  "])

    def test_empty_text_gives_one_empty_line(self) -> None:
        self.assertEqual(_wrap("", 10), [""])

    def test_backs_off_to_whitespace_inside_word(self) -> None:
        self.assertEqual(_wrap("aaa bbbbb", 6 + EPS), ["aaa", "bbbbb"])

    def test_long_word_is_cut_at_last_fitting_character(self) -> None:
        self.assertEqual(_wrap("abcdefgh", 3 + EPS), ["abc", "def", "gh"])

    def test_narrower_than_one_character_consumes_one_per_line(self) -> None:
        self.assertEqual(_wrap("abc", 0.5), ["a", "b", "c"])
        self.assertEqual(_wrap("abc", 0), ["a", "b", "c"])

    def test_every_line_fits_and_text_is_preserved(self) -> None:
        text = "the quick brown fox jumps over the lazy dog " * 4
        lines = _wrap(text, 12 + EPS)
        for line in lines:
            self.assertLessEqual(len(line), 12)
            self.assertTrue(line)
        self.assertEqual(" ".join(lines).split(), text.split())

    def test_collapses_whitespace_at_breaks_by_default(self) -> None:
        self.assertEqual(_wrap("  ab  cd", 4 + EPS), ["ab", "cd"])

    def test_preserve_spaces_keeps_leading_and_trailing_space(self) -> None:
        self.assertEqual(_wrap("  ab  cd", 4 + EPS, preserve_spaces=True), ["  ab", "cd"])

    def test_whitespace_only_text_wider_than_line(self) -> None:
        self.assertEqual(_wrap("      ", 2), [""])


class TestFindWrapIndex(unittest.TestCase):
    def _index(self, text: str, width: float) -> int:
        return find_wrap_index(text, FONT, 10, width, metrics=MonoMetrics())

    def test_everything_fits(self) -> None:
        self.assertEqual(self._index("abc", 3), 3)

    def test_nothing_fits(self) -> None:
        self.assertEqual(self._index("abc", 0.5), 0)
        self.assertEqual(self._index("abc", 0), 0)
        self.assertEqual(self._index("", 10), 0)

    def test_stops_at_word_boundary(self) -> None:
        self.assertEqual(self._index("Chunk   tail", 5 + EPS), 5)

    def test_mid_word_stop_moves_back_after_whitespace(self) -> None:
        self.assertEqual(self._index("bb cccccccc", 6 + EPS), 3)

    def test_mid_word_stop_without_whitespace_is_kept(self) -> None:
        self.assertEqual(self._index("bbbbbbbbbb", 6 + EPS), 6)

    def test_stop_on_whitespace_is_not_moved(self) -> None:
        self.assertEqual(self._index("ab cd ef", 3 + EPS), 3)


class TestSplitRun(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = FontSettings()

    def _split(self, text: str, width: float) -> SplitParts:
        run = StyledRun(text, self.settings, FontType.BOLD)
        return split_run(run, width, metrics=MonoMetrics())

    def test_head_and_tail_are_trimmed(self) -> None:
        self.assertEqual(self._split("Chunk   tail", 5 + EPS), SplitParts("Chunk", "tail"))

    def test_run_that_fits_has_no_tail(self) -> None:
        self.assertEqual(self._split("fits", 10), SplitParts("fits", None))

    def test_forces_single_character_when_nothing_fits(self) -> None:
        self.assertEqual(self._split("abc", 0.5), SplitParts("a", "bc"))

    def test_whitespace_tail_becomes_none(self) -> None:
        self.assertEqual(self._split("abc   ", 3 + EPS), SplitParts("abc", None))

    def test_whitespace_head_becomes_none(self) -> None:
        self.assertEqual(self._split(" abc", 0.5), SplitParts(None, "abc"))

    def test_blank_run_keeps_an_empty_tail(self) -> None:
        parts = self._split("      ", 2.5)
        self.assertEqual(parts, SplitParts(None, ""))
        self.assertFalse(parts.head is None and parts.tail is None)


class TestExpandRuns(unittest.TestCase):
    def test_short_runs_pass_through(self) -> None:
        settings = FontSettings()
        runs = [StyledRun("Total: ", settings), StyledRun("9.99", settings, FontType.BOLD)]
        self.assertEqual(expand_runs(runs, 40, metrics=MonoMetrics()), runs)

    def test_long_run_becomes_one_run_per_line(self) -> None:
        settings = FontSettings()
        run = StyledRun("Hello world test", settings, FontType.ITALIC)
        expanded = expand_runs([run], 11 + EPS, metrics=MonoMetrics())
        self.assertEqual([piece.text for piece in expanded], ["Hello world", "test"])
        self.assertEqual([piece.line_start for piece in expanded], [False, True])
        for piece in expanded:
            self.assertIs(piece.font_settings, settings)
            self.assertIs(piece.font_type, FontType.ITALIC)


if __name__ == "__main__":
    unittest.main()
