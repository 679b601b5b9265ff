"""
Parsers for user-supplied sizes, colors and image formats.
Each parser returns a ParseResult instead of raising.
"""

import os
import re
from typing import Any, NamedTuple, Optional, Tuple

import matplotlib.colors as mcolors

from color_selector import NamedColor
from config import RENDER_CONFIG

# Named canvas sizes
SIZE_PRESETS = {
    "720p": (1280, 720),
    "1080p": (1920, 1080),
    "1440p": (2560, 1440),
    "4k": (3840, 2160),
    "8k": (7680, 4320),
}

_SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*[x,X×]\s*(\d+)\s*$")
_SQUARE_PATTERN = re.compile(r"^\s*(\d+)\s*$")


class ParseResult(NamedTuple):
    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "ParseResult":
        return cls(True, value, None)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(False, None, error)


def parse_image_size(text: str) -> ParseResult:
    """Parse 'WIDTHxHEIGHT', 'WIDTH,HEIGHT', a single side, or a preset like '1080p'."""
    if not text:
        return ParseResult.failure("Image size is empty")

    preset = SIZE_PRESETS.get(text.strip().lower())
    if preset:
        return ParseResult.success(preset)

    match = _SIZE_PATTERN.match(text)
    if match:
        size: Tuple[int, int] = (int(match.group(1)), int(match.group(2)))
    else:
        match = _SQUARE_PATTERN.match(text)
        if not match:
            return ParseResult.failure(
                f"Invalid image size '{text}': use WIDTHxHEIGHT or one of "
                f"{', '.join(SIZE_PRESETS)}"
            )
        side = int(match.group(1))
        size = (side, side)

    if size[0] <= 0 or size[1] <= 0:
        return ParseResult.failure(f"Image size must be positive, got '{text}'")
    return ParseResult.success(size)


def parse_color(text: str) -> ParseResult:
    """Parse a matplotlib color name or hex string into a NamedColor."""
    if not text or not text.strip():
        return ParseResult.failure("Color is empty")
    name = text.strip()
    if not mcolors.is_color_like(name):
        return ParseResult.failure(f"Unknown color '{name}'")
    return ParseResult.success(NamedColor.from_spec(name))


def parse_image_format(
    output_path: str, explicit_format: Optional[str] = None
) -> ParseResult:
    """Pick the Pillow format from an explicit name or the output file's extension."""
    formats = RENDER_CONFIG["formats"]

    if explicit_format:
        key = explicit_format.strip().lower()
        key = key if key.startswith(".") else f".{key}"
        if key not in formats:
            return ParseResult.failure(
                f"Unsupported image format '{explicit_format}'"
            )
        return ParseResult.success(formats[key])

    ext = os.path.splitext(output_path)[1].lower()
    if not ext:
        return ParseResult.success(RENDER_CONFIG["default_format"])
    if ext not in formats:
        return ParseResult.failure(f"Unsupported image extension '{ext}'")
    return ParseResult.success(formats[ext])
