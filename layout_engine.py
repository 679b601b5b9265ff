"""
Spiral Layout Engine for the word cloud builder.
Places sized words on the canvas by sweeping rings of growing radius around
the center and keeping the first candidate that neither leaves the canvas nor
overlaps an already placed word.
"""

import math
import random
from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from color_selector import NamedColor, Palette
from config import LAYOUT_CONFIG, OUTPUT_CONFIG
from size_allocator import SizedWord

HORIZONTAL = "horizontal"
VERTICAL = "vertical"

# (start, end) angles in degrees, picked by scan count mod 8
SWEEP_PHASES = [
    (0, 360),
    (-90, 270),
    (-180, 180),
    (-270, 90),
    (360, 0),
    (270, -90),
    (180, -180),
    (90, -270),
]

# Jitter added to secondary words on non-square canvases, in pixels
SUBPIXEL_JITTER = 0.5


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def intersects(self, other: "Rect") -> bool:
        """Exact AABB test; rectangles that only share an edge do not intersect."""
        return (
            other.x < self.x + self.width
            and self.x < other.x + other.width
            and other.y < self.y + self.height
            and self.y < other.y + other.height
        )


class Canvas(NamedTuple):
    width: int
    height: int

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    @property
    def max_radius(self) -> float:
        return max(self.width, self.height) / 2

    def contains(self, rect: Rect) -> bool:
        return (
            rect.x >= 0
            and rect.y >= 0
            and rect.x + rect.width <= self.width
            and rect.y + rect.height <= self.height
        )


class PlacementRecord(NamedTuple):
    word: str
    rect: Rect
    orientation: str
    color: NamedColor
    font_size: int
    count: int

    @property
    def is_vertical(self) -> bool:
        return self.orientation == VERTICAL


class SpiralLayoutEngine:
    """Greedy ring-sweep placement with exact rectangle collision checks."""

    def __init__(
        self,
        canvas: Canvas,
        palette: Palette,
        rng: Optional[random.Random] = None,
        distance_step: Optional[float] = None,
        radial_granularity: Optional[float] = None,
        allow_rotation: Optional[bool] = None,
        rotation_probability: Optional[float] = None,
        scan_carry_divisor: Optional[int] = None,
    ):
        """
        Initialize the layout engine.

        Args:
            canvas: Canvas geometry, fixed for the run
            palette: Colors handed out to placed words
            rng: Random source for orientation and jitter
            distance_step: Radius growth per failed ring, in tenths of a word width
            radial_granularity: Candidate density per ring
            allow_rotation: Whether words may be drawn vertically
            rotation_probability: Chance that a word is drawn vertically
            scan_carry_divisor: Divides the previous word's final scan count to give
                the next word's starting radius; 0 starts every word at the center
        """
        self.canvas = canvas
        self.palette = palette
        self.rng = rng or random.Random()
        self.distance_step = (
            distance_step
            if distance_step is not None
            else LAYOUT_CONFIG["distance_step"]
        )
        self.radial_granularity = (
            radial_granularity
            if radial_granularity is not None
            else LAYOUT_CONFIG["radial_granularity"]
        )
        self.allow_rotation = (
            allow_rotation
            if allow_rotation is not None
            else LAYOUT_CONFIG["allow_rotation"]
        )
        self.rotation_probability = (
            rotation_probability
            if rotation_probability is not None
            else LAYOUT_CONFIG["rotation_probability"]
        )
        self.scan_carry_divisor = (
            scan_carry_divisor
            if scan_carry_divisor is not None
            else LAYOUT_CONFIG["scan_carry_divisor"]
        )

        if self.distance_step <= 0:
            raise ValueError(f"distance_step must be positive, got {self.distance_step}")
        if self.radial_granularity <= 0:
            raise ValueError(
                f"radial_granularity must be positive, got {self.radial_granularity}"
            )

        self.placements: List[PlacementRecord] = []
        self.skipped: List[str] = []
        self._boxes = np.empty((0, 4), dtype=float)
        self._scan_count = 0

    def reset(self) -> None:
        """Forget every committed placement."""
        self.placements = []
        self.skipped = []
        self._boxes = np.empty((0, 4), dtype=float)
        self._scan_count = 0

    def angle_step(self, radial_distance: float) -> float:
        """Degrees between candidates; shrinks as the ring grows."""
        return 360 / ((radial_distance + 1) * self.radial_granularity / 10)

    def sweep_angles(self, radial_distance: float, scan_count: int) -> np.ndarray:
        """Candidate angles for one ring, in sweep order."""
        start, end = SWEEP_PHASES[scan_count % len(SWEEP_PHASES)]
        step = self.angle_step(radial_distance)
        if end < start:
            step = -step
        # Tolerance keeps float noise from repeating the start angle at the end
        count = max(1, math.ceil((end - start) / step - 1e-9))
        return start + step * np.arange(count)

    def place_all(self, sized_words: Iterable[SizedWord]) -> List[PlacementRecord]:
        """
        Place every word, largest first.

        Args:
            sized_words: Words in descending size-rank order

        Returns:
            PlacementRecords in placement order; words that found no slot are omitted
        """
        self.reset()
        for rank, sized in enumerate(sized_words):
            self.place_word(sized, is_top=(rank == 0))

        if self.skipped and OUTPUT_CONFIG["verbose"]:
            print(
                f"Could not place {len(self.skipped)} words: {', '.join(self.skipped)}"
            )
        return list(self.placements)

    def place_word(
        self, sized: SizedWord, is_top: bool = False
    ) -> Optional[PlacementRecord]:
        """
        Search outward from the center for a free slot and commit it.

        Args:
            sized: The word to place
            is_top: Whether this is the highest-frequency word (never jittered)

        Returns:
            The committed PlacementRecord, or None if the search radius ran out
        """
        vertical = (
            self.allow_rotation and self.rng.random() < self.rotation_probability
        )
        if vertical:
            width, height = sized.height, sized.width
        else:
            width, height = sized.width, sized.height

        center_x, center_y = self.canvas.center
        aspect_ratio = self.canvas.aspect_ratio
        jitter = not is_top and not self.canvas.is_square
        growth = max(width * self.distance_step / 10, 1.0)

        scan_count = 0
        radial_distance = self._carried_radius()

        while radial_distance <= self.canvas.max_radius:
            radians = np.radians(self.sweep_angles(radial_distance, scan_count))
            xs = radial_distance * np.cos(radians) * aspect_ratio + center_x
            ys = radial_distance * np.sin(radians) + center_y
            if jitter:
                xs = xs + self._jitter(len(xs))
                ys = ys + self._jitter(len(ys))

            lefts = xs - width / 2
            tops = ys - height / 2
            index = self._first_free(lefts, tops, width, height)
            if index is not None:
                self._scan_count = scan_count
                rect = Rect(float(lefts[index]), float(tops[index]), width, height)
                return self._commit(sized, rect, VERTICAL if vertical else HORIZONTAL)

            radial_distance += growth
            scan_count += 1

        self._scan_count = scan_count
        self.skipped.append(sized.word)
        return None

    def _carried_radius(self) -> float:
        """Starting radius: the previous word's final scan count, damped."""
        if not self.scan_carry_divisor:
            return 0.0
        return self._scan_count / self.scan_carry_divisor

    def _jitter(self, count: int) -> np.ndarray:
        return np.array(
            [self.rng.uniform(-SUBPIXEL_JITTER, SUBPIXEL_JITTER) for _ in range(count)]
        )

    def _first_free(
        self, lefts: np.ndarray, tops: np.ndarray, width: float, height: float
    ) -> Optional[int]:
        """Index of the first candidate inside the canvas and clear of placed words."""
        rights = lefts + width
        bottoms = tops + height
        valid = (
            (lefts >= 0)
            & (tops >= 0)
            & (rights <= self.canvas.width)
            & (bottoms <= self.canvas.height)
        )
        if not valid.any():
            return None

        if len(self._boxes):
            bx, by, bw, bh = self._boxes.T
            overlaps = (
                (bx[None, :] < rights[:, None])
                & (lefts[:, None] < (bx + bw)[None, :])
                & (by[None, :] < bottoms[:, None])
                & (tops[:, None] < (by + bh)[None, :])
            )
            valid &= ~overlaps.any(axis=1)

        hits = np.flatnonzero(valid)
        return int(hits[0]) if len(hits) else None

    def _commit(self, sized: SizedWord, rect: Rect, orientation: str) -> PlacementRecord:
        record = PlacementRecord(
            sized.word,
            rect,
            orientation,
            self.palette.next(),
            sized.font_size,
            sized.count,
        )
        self.placements.append(record)
        self._boxes = np.vstack([self._boxes, [rect.x, rect.y, rect.width, rect.height]])
        return record
