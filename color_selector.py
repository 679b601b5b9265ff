"""
Color selection for the word cloud builder.
Builds a filtered, shuffled palette biased toward bright, saturated colors.
"""

import random
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

import matplotlib.colors as mcolors
import numpy as np

from config import COLOR_CONFIG

# Rec. 601 luma weights
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

ColorSpec = Union[str, "NamedColor"]


class EmptyPaletteError(ValueError):
    """Raised when every candidate color has been filtered out."""


class NamedColor(NamedTuple):
    name: str
    rgb: Tuple[float, float, float]

    @property
    def hex(self) -> str:
        return mcolors.to_hex(self.rgb)

    @property
    def rgb255(self) -> Tuple[int, int, int]:
        return tuple(int(round(channel * 255)) for channel in self.rgb)

    @classmethod
    def from_spec(cls, value: ColorSpec) -> "NamedColor":
        """Build a NamedColor from a matplotlib color name or hex string."""
        if isinstance(value, NamedColor):
            return value
        return cls(value, tuple(float(c) for c in mcolors.to_rgb(value)))


def default_colors() -> List[NamedColor]:
    """Every named CSS4 color known to matplotlib."""
    return [NamedColor.from_spec(name) for name in mcolors.CSS4_COLORS]


def brightness(colors: Sequence[NamedColor]) -> np.ndarray:
    """Perceptual brightness (0-1) of each color."""
    if not colors:
        return np.zeros(0)
    rgb = np.array([color.rgb for color in colors], dtype=float)
    return rgb @ LUMA_WEIGHTS


def saturation(colors: Sequence[NamedColor]) -> np.ndarray:
    """HSV saturation (0-1) of each color."""
    if not colors:
        return np.zeros(0)
    rgb = np.array([color.rgb for color in colors], dtype=float)
    return mcolors.rgb_to_hsv(rgb)[:, 1]


def to_monochrome(color: NamedColor) -> NamedColor:
    """Collapse a color to the grey of the same brightness, keeping its name."""
    value = float(brightness([color])[0])
    return NamedColor(color.name, (value, value, value))


class Palette:
    """Ordered colors consumed cyclically."""

    def __init__(self, colors: Iterable[NamedColor]):
        self.colors: Tuple[NamedColor, ...] = tuple(colors)
        if not self.colors:
            raise EmptyPaletteError("Palette needs at least one color")
        self._cursor = 0

    def next(self) -> NamedColor:
        """Return the color under the cursor and advance it, wrapping around."""
        color = self.colors[self._cursor]
        self._cursor = (self._cursor + 1) % len(self.colors)
        return color

    def __iter__(self) -> Iterator[NamedColor]:
        """Iterate over the colors once, without moving the cursor."""
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def reset(self) -> None:
        self._cursor = 0


class ColorSelector:
    """Filters and orders candidate colors into a Palette."""

    def __init__(
        self,
        colors: Optional[Iterable[ColorSpec]] = None,
        background: Optional[ColorSpec] = None,
        monochrome: bool = False,
        max_colors: Optional[int] = None,
        min_saturation: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the color selector.

        Args:
            colors: Candidate colors (names, hex strings or NamedColor);
                every CSS4 color if None
            background: Background color; candidates matching its name are dropped
            monochrome: Collapse every candidate to grey
            max_colors: Maximum number of candidates kept after shuffling
            min_saturation: Override for the saturation threshold
            rng: Random source for shuffling and ordering
        """
        if colors is None:
            colors = COLOR_CONFIG["colors"]
        self.colors = (
            [NamedColor.from_spec(c) for c in colors]
            if colors is not None
            else default_colors()
        )
        background = background if background is not None else COLOR_CONFIG["background"]
        self.background = NamedColor.from_spec(background)
        self.monochrome = monochrome
        self.max_colors = (
            max_colors if max_colors is not None else COLOR_CONFIG["max_colors"]
        )
        if self.max_colors < 1:
            raise ValueError(f"max_colors must be at least 1, got {self.max_colors}")

        if min_saturation is None:
            min_saturation = (
                COLOR_CONFIG["monochrome_min_saturation"]
                if monochrome
                else COLOR_CONFIG["min_saturation"]
            )
        self.min_saturation = min_saturation
        self.rng = rng or random.Random()

    def matches_background(self, color: NamedColor) -> bool:
        """True when the color's name contains the background's name."""
        return self.background.name.lower() in color.name.lower()

    def filter_colors(self, colors: List[NamedColor]) -> List[NamedColor]:
        """Drop background-named and washed-out colors."""
        saturations = saturation(colors)
        return [
            color
            for color, sat in zip(colors, saturations)
            if not self.matches_background(color) and sat >= self.min_saturation
        ]

    def order_colors(self, colors: List[NamedColor]) -> List[NamedColor]:
        """Sort by brightness plus saturation-weighted random jitter, descending."""
        values = brightness(colors)
        saturations = saturation(colors)
        floor = COLOR_CONFIG["saturation_floor"]

        weights = []
        for value, sat in zip(values, saturations):
            jitter = self.rng.uniform(-value, value)
            weights.append(value + jitter / max(1.0 - sat, floor))

        order = sorted(range(len(colors)), key=lambda i: weights[i], reverse=True)
        return [colors[i] for i in order]

    def build_palette(self) -> Palette:
        """
        Build the palette for a run.

        Returns:
            Palette of the surviving colors

        Raises:
            EmptyPaletteError: If no candidate survives filtering
        """
        candidates = list(self.colors)
        if self.monochrome:
            candidates = [to_monochrome(color) for color in candidates]

        self.rng.shuffle(candidates)
        candidates = candidates[: self.max_colors]

        survivors = self.filter_colors(candidates)
        if not survivors:
            raise EmptyPaletteError(
                f"No usable colors left after removing background "
                f"'{self.background.name}' and colors below saturation "
                f"{self.min_saturation}"
            )

        return Palette(self.order_colors(survivors))
