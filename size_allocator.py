"""
Font sizing for the word cloud builder.
Turns ranked word counts into pixel font sizes and measured text extents.
"""

import os
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from PIL import ImageFont

from config import LAYOUT_CONFIG, OUTPUT_CONFIG, RENDER_CONFIG
from word_frequency import FrequencyTable


class MeasurementError(RuntimeError):
    """Raised when a word cannot be measured; aborts the whole run."""


class FontDescriptor(NamedTuple):
    family: str = RENDER_CONFIG["font_family"]
    style: str = RENDER_CONFIG["font_style"]


class SizedWord(NamedTuple):
    word: str
    count: int
    font_size: int
    width: float
    height: float


# (word, font, pixel size) -> (width, height)
Measurer = Callable[[str, FontDescriptor, int], Tuple[float, float]]


class PillowTextMeasurer:
    """Measures text with Pillow fonts, with a fallback chain and a font cache."""

    STYLE_SUFFIXES = {
        "regular": [""],
        "bold": ["-Bold", "bd"],
        "italic": ["-Italic", "-Oblique", "i"],
        "bold italic": ["-BoldItalic", "-BoldOblique", "bi"],
    }

    def __init__(self, fallback_fonts: Optional[List[str]] = None):
        self.fallback_fonts = (
            fallback_fonts
            if fallback_fonts is not None
            else RENDER_CONFIG["fallback_fonts"]
        )
        self._font_cache: Dict[Tuple[str, str, int], ImageFont.FreeTypeFont] = {}

    def __call__(
        self, word: str, font: FontDescriptor, pixel_size: int
    ) -> Tuple[float, float]:
        return self.measure(word, font, pixel_size)

    def measure(
        self, word: str, font: FontDescriptor, pixel_size: int
    ) -> Tuple[float, float]:
        """Return the (width, height) of ``word`` drawn at ``pixel_size``."""
        loaded = self.get_font(font, pixel_size)
        ascent, descent = loaded.getmetrics()
        return float(loaded.getlength(word)), float(ascent + descent)

    def get_font(self, font: FontDescriptor, pixel_size: int):
        """Get a font of the specified size with caching."""
        key = (font.family, font.style, pixel_size)
        if key in self._font_cache:
            return self._font_cache[key]

        loaded = None
        for candidate in self._candidate_files(font):
            try:
                loaded = ImageFont.truetype(candidate, pixel_size)
                break
            except OSError:
                continue

        if loaded is None:
            try:
                loaded = ImageFont.load_default(size=pixel_size)
            except (OSError, ImportError) as e:
                raise MeasurementError(
                    f"No usable font for '{font.family}' at {pixel_size}px: {e}"
                ) from e

        self._font_cache[key] = loaded
        return loaded

    def _candidate_files(self, font: FontDescriptor) -> List[str]:
        """Font files to try, styled variants first."""
        stem, ext = os.path.splitext(font.family)
        ext = ext or ".ttf"
        suffixes = self.STYLE_SUFFIXES.get(font.style.lower(), [""])

        candidates = [f"{stem}{suffix}{ext}" for suffix in suffixes]
        candidates.append(font.family)
        candidates.extend(self.fallback_fonts)

        # Keep order, drop repeats
        return list(dict.fromkeys(candidates))


class SizeAllocator:
    """Derives the global font scale and sizes each retained word."""

    def __init__(
        self,
        width: int,
        height: int,
        measurer: Optional[Measurer] = None,
        font: Optional[FontDescriptor] = None,
        min_font_size: Optional[int] = None,
    ):
        """
        Initialize the size allocator.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            measurer: Callable returning (width, height) for a word at a size
            font: Font used for measurement
            min_font_size: Words sized below this are dropped
        """
        self.width = width
        self.height = height
        self.measurer = measurer or PillowTextMeasurer()
        self.font = font or FontDescriptor()
        self.min_font_size = (
            min_font_size
            if min_font_size is not None
            else LAYOUT_CONFIG["min_font_size"]
        )

    def font_scale(self, table: FrequencyTable) -> float:
        """Pixels of font size per occurrence; 0.0 when there is nothing to size."""
        denominator = table.average_count * table.unique_words
        if denominator == 0:
            return 0.0
        return (self.width + self.height) / denominator

    def allocate(self, table: FrequencyTable) -> List[SizedWord]:
        """
        Size and measure every retained word in rank order.

        Args:
            table: Ranked frequency table

        Returns:
            List of SizedWord, largest first; undersized words are omitted

        Raises:
            MeasurementError: If the measurer fails for any word
        """
        scale = self.font_scale(table)
        if scale == 0.0:
            return []

        sized_words = []
        dropped = 0
        for word, count in table.entries:
            pixel_size = round(count * scale)
            if pixel_size < self.min_font_size:
                dropped += 1
                continue

            try:
                width, height = self.measurer(word, self.font, pixel_size)
            except MeasurementError:
                raise
            except Exception as e:
                raise MeasurementError(
                    f"Could not measure '{word}' at {pixel_size}px: {e}"
                ) from e

            sized_words.append(
                SizedWord(word, count, pixel_size, float(width), float(height))
            )

        if dropped and OUTPUT_CONFIG["verbose"]:
            print(
                f"Dropped {dropped} words smaller than {self.min_font_size}px"
            )

        return sized_words
