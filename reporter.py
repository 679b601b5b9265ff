"""
Run summary for the word cloud builder.
"""

import math
from typing import Any, Dict, NamedTuple, Sequence, Tuple

from layout_engine import Canvas, PlacementRecord
from size_allocator import SizedWord
from word_frequency import FrequencyTable


class CloudSummary(NamedTuple):
    unique_words: int
    max_frequency: int
    average_frequency: float
    font_scale: float
    width: int
    height: int
    aspect_ratio: Tuple[int, int]
    sized_words: int
    placed_words: int

    def as_dict(self) -> Dict[str, Any]:
        data = self._asdict()
        data["aspect_ratio"] = f"{self.aspect_ratio[0]}:{self.aspect_ratio[1]}"
        return data


def reduced_aspect_ratio(width: int, height: int) -> Tuple[int, int]:
    """Width and height divided by their greatest common divisor."""
    divisor = math.gcd(width, height)
    if divisor == 0:
        return width, height
    return width // divisor, height // divisor


def build_summary(
    table: FrequencyTable,
    canvas: Canvas,
    font_scale: float,
    sized_words: Sequence[SizedWord] = (),
    placements: Sequence[PlacementRecord] = (),
) -> CloudSummary:
    """Collect the statistics of a finished run without touching any of its inputs."""
    return CloudSummary(
        unique_words=table.unique_words,
        max_frequency=table.max_count,
        average_frequency=table.average_count,
        font_scale=font_scale,
        width=canvas.width,
        height=canvas.height,
        aspect_ratio=reduced_aspect_ratio(canvas.width, canvas.height),
        sized_words=len(sized_words),
        placed_words=len(placements),
    )


def display_summary(summary: CloudSummary) -> None:
    """Print the summary as a table."""
    width, height = summary.aspect_ratio
    rows = [
        ("Unique words", f"{summary.unique_words}"),
        ("Highest frequency", f"{summary.max_frequency}"),
        ("Average frequency", f"{summary.average_frequency:.2f}"),
        ("Font scale", f"{summary.font_scale:.4f}"),
        ("Image size", f"{summary.width}x{summary.height}"),
        ("Aspect ratio", f"{width}:{height}"),
        ("Words sized", f"{summary.sized_words}"),
        ("Words placed", f"{summary.placed_words}"),
    ]
    print("\nWord Cloud Summary:")
    print("-" * 36)
    for label, value in rows:
        print(f"{label:18s}: {value:>15s}")
    print("-" * 36)
