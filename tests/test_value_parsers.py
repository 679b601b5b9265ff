"""
Tests for size, color and format parsing.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from value_parsers import parse_color, parse_image_format, parse_image_size


@pytest.mark.unit
class TestParseImageSize:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1920x1080", (1920, 1080)),
            ("800 X 600", (800, 600)),
            ("640,480", (640, 480)),
            ("512", (512, 512)),
            ("1080p", (1920, 1080)),
            ("4K", (3840, 2160)),
        ],
    )
    def test_valid_sizes(self, text, expected):
        result = parse_image_size(text)
        assert result.ok
        assert result.value == expected
        assert result.error is None

    @pytest.mark.parametrize("text", ["", "wide", "0x100", "100x", "-5x5"])
    def test_invalid_sizes(self, text):
        result = parse_image_size(text)
        assert not result.ok
        assert result.value is None
        assert result.error


@pytest.mark.unit
class TestParseColor:
    def test_named_color(self):
        result = parse_color("SkyBlue")
        assert result.ok
        assert result.value.name == "SkyBlue"

    def test_hex_color(self):
        result = parse_color("#336699")
        assert result.ok
        assert result.value.rgb255 == (51, 102, 153)

    @pytest.mark.parametrize("text", ["", "   ", "not-a-color", "#12"])
    def test_invalid_colors(self, text):
        result = parse_color(text)
        assert not result.ok
        assert result.error


@pytest.mark.unit
class TestParseImageFormat:
    def test_format_from_extension(self):
        assert parse_image_format("cloud.JPG").value == "jpeg"
        assert parse_image_format("cloud.png").value == "png"

    def test_missing_extension_defaults_to_png(self):
        assert parse_image_format("cloud").value == "png"

    def test_explicit_format_wins(self):
        assert parse_image_format("cloud.png", "bmp").value == "bmp"
        assert parse_image_format("cloud", ".tiff").value == "tiff"

    def test_unsupported_formats(self):
        assert not parse_image_format("cloud.svg").ok
        assert not parse_image_format("cloud.png", "svg").ok
