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

"""Line breaking.

Two break finders live here on purpose and must not be merged:

* :func:`wrap_text_to_lines` binary-searches a prefix-sum table and backs
  off to the last whitespace inside the line. It is used for whole
  paragraphs.
* :func:`find_wrap_index` scans greedily from the left and only backs off
  when the stopping point falls inside a word. It is used by
  :func:`split_run` when a run has to straddle the right edge.

Their break positions differ on some inputs and callers depend on each.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

from ..fonts import Font, FontMetrics
from .runs import SplitParts, StyledRun


def wrap_text_to_lines(
    text: str,
    font: Font,
    size: float,
    max_width: float,
    *,
    metrics: FontMetrics,
    preserve_spaces: bool = False,
) -> list[str]:
    """Break ``text`` into lines no wider than ``max_width``.

    Always returns at least one line. A word wider than the line is cut at
    the last character that fits, and at least one character is consumed
    per line, so ``max_width <= 0`` degrades to one character per line.
    """
    if not text:
        return [""]

    widths = [metrics.advance_width(ch, font, size) for ch in text]
    if max_width > 0 and sum(widths) <= max_width:
        return [text]

    prefix = list(accumulate(widths, initial=0.0))
    n = len(text)
    lines: list[str] = []
    start = 0

    while start < n:
        if not preserve_spaces:
            start = _skip_whitespace(text, start)
        if start >= n:
            break

        lo, hi, best = start + 1, n, start + 1
        while lo <= hi:
            mid = (lo + hi) // 2
            if prefix[mid] - prefix[start] <= max_width:
                best = mid
                lo = mid + 1
            else:
                hi = mid - 1

        end = best
        break_idx = end
        if end < n and not text[end - 1].isspace() and not text[end].isspace():
            space = _last_whitespace(text, start + 1, end - 1)
            if space >= 0:
                break_idx = space + 1

        line = text[start:break_idx]
        lines.append(line if preserve_spaces else line.rstrip())

        start = _skip_whitespace(text, break_idx)

    return lines or [""]


def find_wrap_index(
    text: str,
    font: Font,
    size: float,
    available_width: float,
    *,
    metrics: FontMetrics,
) -> int:
    """Return how many leading characters of ``text`` fit ``available_width``.

    Returns 0 when nothing fits and ``len(text)`` when everything does. A
    stopping point inside a word moves back to just after the last
    whitespace before it, when there is one.
    """
    if not text or available_width <= 0:
        return 0

    widths = [metrics.advance_width(ch, font, size) for ch in text]
    if sum(widths) <= available_width:
        return len(text)

    total = 0.0
    last_fitting = 0
    for index, width in enumerate(widths):
        if total + width > available_width:
            break
        total += width
        last_fitting = index + 1

    if last_fitting == 0:
        return 0

    if not text[last_fitting - 1].isspace() and not text[last_fitting].isspace():
        space = _last_whitespace(text, 0, last_fitting - 1)
        if space >= 0:
            return space + 1
    return last_fitting


def split_run(run: StyledRun, available_width: float, *, metrics: FontMetrics) -> SplitParts:
    """Split ``run`` into the head that fits ``available_width`` and the rest."""
    content = run.text
    break_idx = find_wrap_index(
        content, run.font, run.font_size, available_width, metrics=metrics
    )
    if break_idx <= 0:
        break_idx = min(1, len(content))

    if break_idx >= len(content):
        return SplitParts(content, None)

    head = content[:break_idx].rstrip()
    rest = content[break_idx:].lstrip()
    if not head:
        # Never report both parts absent; a blank tail is kept as "".
        return SplitParts(None, rest)
    return SplitParts(head, rest or None)


def expand_runs(
    runs: Iterable[StyledRun],
    max_width: float,
    *,
    metrics: FontMetrics,
) -> list[StyledRun]:
    """Wrap every run on its own against the full ``max_width``.

    Runs that fit on one line are returned as they are. Longer runs become
    one run per wrapped line, keeping their font settings; every piece after
    the first is flagged to start a new line.
    """
    expanded: list[StyledRun] = []
    for run in runs:
        lines = wrap_text_to_lines(run.text, run.font, run.font_size, max_width, metrics=metrics)
        if len(lines) <= 1:
            expanded.append(run)
            continue
        expanded.append(run.with_text(lines[0], line_start=run.line_start))
        expanded.extend(run.with_text(line, line_start=True) for line in lines[1:])
    return expanded


def _skip_whitespace(text: str, index: int) -> int:
    n = len(text)
    while index < n and text[index].isspace():
        index += 1
    return index


def _last_whitespace(text: str, lo: int, hi: int) -> int:
    for index in range(min(hi, len(text) - 1), lo - 1, -1):
        if text[index].isspace():
            return index
    return -1


__all__ = [
    "expand_runs",
    "find_wrap_index",
    "split_run",
    "wrap_text_to_lines",
]
