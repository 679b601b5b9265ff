"""
Tests for the run summary.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from layout_engine import Canvas
from reporter import build_summary, display_summary, reduced_aspect_ratio
from size_allocator import SizedWord
from word_frequency import FrequencyTable


@pytest.mark.unit
class TestReporter:
    def test_reduced_aspect_ratio(self):
        assert reduced_aspect_ratio(3840, 2160) == (16, 9)
        assert reduced_aspect_ratio(1024, 768) == (4, 3)
        assert reduced_aspect_ratio(500, 500) == (1, 1)
        assert reduced_aspect_ratio(1001, 7) == (143, 1)

    def test_build_summary(self):
        table = FrequencyTable([("river", 6), ("sea", 3), ("tree", 1)])
        sized = [SizedWord("river", 6, 720, 100.0, 40.0)]
        summary = build_summary(table, Canvas(800, 400), 120.0, sized, [])

        assert summary.unique_words == 3
        assert summary.max_frequency == 6
        assert summary.average_frequency == pytest.approx(10 / 3)
        assert summary.font_scale == 120.0
        assert (summary.width, summary.height) == (800, 400)
        assert summary.aspect_ratio == (2, 1)
        assert summary.sized_words == 1
        assert summary.placed_words == 0

    def test_summary_does_not_touch_inputs(self):
        table = FrequencyTable([("river", 6)])
        sized = [SizedWord("river", 6, 720, 100.0, 40.0)]
        build_summary(table, Canvas(800, 400), 120.0, sized, [])
        assert table.entries == (("river", 6),)
        assert sized == [SizedWord("river", 6, 720, 100.0, 40.0)]

    def test_empty_run_summary(self):
        summary = build_summary(FrequencyTable([]), Canvas(1920, 1080), 0.0)
        assert summary.unique_words == 0
        assert summary.max_frequency == 0
        assert summary.aspect_ratio == (16, 9)

    def test_as_dict_formats_aspect_ratio(self):
        summary = build_summary(FrequencyTable([("river", 2)]), Canvas(1920, 1080), 1.0)
        data = summary.as_dict()
        assert data["aspect_ratio"] == "16:9"
        assert data["unique_words"] == 1

    def test_display_summary(self, capsys):
        summary = build_summary(FrequencyTable([("river", 2)]), Canvas(1920, 1080), 1.5)
        display_summary(summary)
        output = capsys.readouterr().out
        assert "Word Cloud Summary" in output
        assert "16:9" in output
        assert "1920x1080" in output
