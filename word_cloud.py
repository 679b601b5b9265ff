"""
Word Cloud builder.
Counts words, sizes them by frequency, and packs them onto a canvas with a spiral search.
"""

import random
from typing import Iterable, List, NamedTuple, Optional, Union

from color_selector import ColorSelector, ColorSpec, NamedColor, Palette
from config import LAYOUT_CONFIG, OUTPUT_CONFIG
from layout_engine import Canvas, PlacementRecord, SpiralLayoutEngine
from cloud_renderer import CloudRenderer
from reporter import CloudSummary, build_summary
from size_allocator import (
    FontDescriptor,
    Measurer,
    PillowTextMeasurer,
    SizeAllocator,
    SizedWord,
)
from text_extractor import TextExtractorFactory
from word_frequency import FrequencyTable, WordTokenizer, count_words


class CloudLayout(NamedTuple):
    table: FrequencyTable
    sized_words: List[SizedWord]
    placements: List[PlacementRecord]
    summary: CloudSummary


class WordCloud:
    """Creates word cloud layouts and images from text."""

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        font: Optional[FontDescriptor] = None,
        background: Optional[ColorSpec] = None,
        colors: Optional[Iterable[ColorSpec]] = None,
        max_colors: Optional[int] = None,
        monochrome: bool = False,
        allow_rotation: Optional[bool] = None,
        distance_step: Optional[float] = None,
        radial_granularity: Optional[float] = None,
        max_unique_words: Optional[int] = None,
        min_font_size: Optional[int] = None,
        stop_words: Optional[Iterable[str]] = None,
        exclude_words: Optional[Iterable[str]] = None,
        include_words: Optional[Iterable[str]] = None,
        seed: Optional[int] = None,
        measurer: Optional[Measurer] = None,
    ):
        """
        Initialize the word cloud builder.

        Args:
            width: Canvas width in pixels (4K width if None)
            height: Canvas height in pixels (4K height if None)
            font: Font family and style for measuring and drawing
            background: Background color; also removed from the palette
            colors: Candidate word colors (every CSS4 color if None)
            max_colors: Maximum number of palette colors
            monochrome: Draw words in greys only
            allow_rotation: Whether some words are drawn vertically
            distance_step: Radius growth per failed ring
            radial_granularity: Candidate density per ring
            max_unique_words: Number of words kept after ranking
            min_font_size: Words sized below this are dropped
            stop_words: Replaces the default stop words
            exclude_words: Extra words never to draw
            include_words: Stop words to draw after all
            seed: Seed for every random choice in the run
            measurer: Text measurer (Pillow fonts if None)
        """
        self.width = width or LAYOUT_CONFIG["default_width"]
        self.height = height or LAYOUT_CONFIG["default_height"]
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )

        self.canvas = Canvas(self.width, self.height)
        self.font = font or FontDescriptor()
        self.rng = random.Random(seed)
        self.font_loader = PillowTextMeasurer()
        self.measurer = measurer or self.font_loader

        self.tokenizer = WordTokenizer(
            stop_words=stop_words,
            exclude_words=exclude_words,
            include_words=include_words,
        )
        self.max_unique_words = (
            max_unique_words
            if max_unique_words is not None
            else LAYOUT_CONFIG["max_unique_words"]
        )
        self.color_selector = ColorSelector(
            colors=colors,
            background=background,
            monochrome=monochrome,
            max_colors=max_colors,
            rng=self.rng,
        )
        self.allocator = SizeAllocator(
            self.width,
            self.height,
            measurer=self.measurer,
            font=self.font,
            min_font_size=min_font_size,
        )
        self.layout_options = {
            "distance_step": distance_step,
            "radial_granularity": radial_granularity,
            "allow_rotation": allow_rotation,
        }
        self.renderer = CloudRenderer(self.font, self.font_loader)

    @property
    def background(self) -> NamedColor:
        return self.color_selector.background

    def analyze_text(
        self,
        text_source: Union[str, Iterable[str]],
        input_type: Optional[str] = None,
        **extractor_kwargs,
    ) -> FrequencyTable:
        """
        Count words from a file, a text string, or an iterable of text chunks.

        Args:
            text_source: Path to file, text string, or iterable of strings
            input_type: Type of input (auto-detected if None)
            **extractor_kwargs: Additional arguments for text extraction

        Returns:
            Ranked and truncated FrequencyTable
        """
        chunks = TextExtractorFactory.extract_chunks(
            text_source, input_type, **extractor_kwargs
        )
        table = count_words(chunks, self.tokenizer, self.max_unique_words)

        if OUTPUT_CONFIG["verbose"]:
            print(
                f"Counted {table.total_count} occurrences of {table.unique_words} retained words."
            )
        return table

    def build_layout(self, table: FrequencyTable) -> CloudLayout:
        """
        Size and place the words of a frequency table.

        Args:
            table: Ranked frequency table

        Returns:
            CloudLayout with the sized words, placements and summary

        Raises:
            EmptyPaletteError: If every candidate color is filtered out
            MeasurementError: If a word cannot be measured
        """
        # The palette comes first so a bad color setup fails before any measuring
        palette = self.color_selector.build_palette()

        font_scale = self.allocator.font_scale(table)
        sized_words = self.allocator.allocate(table)
        if OUTPUT_CONFIG["verbose"]:
            print(f"Sized {len(sized_words)} words (font scale {font_scale:.4f})")

        placements = self._place(sized_words, palette)
        if OUTPUT_CONFIG["verbose"]:
            print(f"Placed {len(placements)} of {len(sized_words)} words")

        summary = build_summary(table, self.canvas, font_scale, sized_words, placements)
        return CloudLayout(table, sized_words, placements, summary)

    def _place(
        self, sized_words: List[SizedWord], palette: Palette
    ) -> List[PlacementRecord]:
        engine = SpiralLayoutEngine(
            self.canvas, palette, rng=self.rng, **self.layout_options
        )
        return engine.place_all(sized_words)

    def create_word_cloud(
        self,
        text_source: Union[str, Iterable[str]],
        output_path: str,
        image_format: Optional[str] = None,
        input_type: Optional[str] = None,
        **extractor_kwargs,
    ) -> CloudLayout:
        """
        Build a word cloud from text and save it as an image.

        Args:
            text_source: Path to file, text string, or iterable of strings
            output_path: Path to save the image
            image_format: Pillow format name (png if None)
            input_type: Type of input (auto-detected if None)
            **extractor_kwargs: Additional arguments for text extraction

        Returns:
            CloudLayout describing what was drawn
        """
        table = self.analyze_text(text_source, input_type, **extractor_kwargs)
        layout = self.build_layout(table)
        self.renderer.render(
            layout.placements, self.canvas, self.background, output_path, image_format
        )
        return layout
