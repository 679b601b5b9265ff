"""
Main entry point for the Word Cloud builder.
Provides the command-line interface.
"""

import argparse
import json
import sys
import time
from typing import List, Optional

from color_selector import EmptyPaletteError
from config import COLOR_CONFIG, LAYOUT_CONFIG, OUTPUT_CONFIG, RENDER_CONFIG
from reporter import display_summary
from size_allocator import FontDescriptor, MeasurementError
from value_parsers import parse_color, parse_image_format, parse_image_size
from word_cloud import WordCloud


def _bounded_int(low: int, high: int):
    """argparse type for an integer in [low, high]."""

    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f"'{text}' is not an integer") from e
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(
                f"{value} is outside the range {low}-{high}"
            )
        return value

    return convert


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"'{text}' is not a number") from e
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{value} must be positive")
    return value


def _from_parser(parser_func):
    """Wrap a value parser as an argparse type."""

    def convert(text: str):
        result = parser_func(text)
        if not result.ok:
            raise argparse.ArgumentTypeError(result.error)
        return result.value

    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Word Cloud - Draw the most frequent words of a text as a packed cloud",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Word cloud of a text file at 1080p
  python main.py --input book.txt --output cloud.png --image-size 1080p

  # Word cloud of specific pages of a PDF
  python main.py --input paper.pdf --pdf-pages 1 10 --output paper.png

  # Grey words on a white background, no vertical words
  python main.py --input text.txt --output grey.png --background white --monochrome --disable-rotation

  # Reproducible layout with a restricted palette
  python main.py --input text.txt --output cloud.jpg --colors red orange gold --seed 42

  # Print the run summary as JSON
  python main.py --input text.txt --output cloud.png --json --quiet
""",
    )

    # Input options
    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument(
        "--input", "-i", type=str, required=True, help="Input file path or text string"
    )
    input_group.add_argument(
        "--input-type",
        "-t",
        type=str,
        choices=["pdf", "txt", "docx", "string"],
        help="Input type (auto-detected if not specified)",
    )
    input_group.add_argument(
        "--pdf-pages",
        nargs=2,
        type=int,
        metavar=("START", "END"),
        help="Page range for PDF extraction",
    )

    # Word options
    word_group = parser.add_argument_group("Word Options")
    low, high = LAYOUT_CONFIG["max_unique_words_range"]
    word_group.add_argument(
        "--max-unique-words",
        type=_bounded_int(low, high),
        default=LAYOUT_CONFIG["max_unique_words"],
        help=f"Number of distinct words to draw ({low}-{high})",
    )
    word_group.add_argument(
        "--exclude-words", nargs="+", type=str, help="Extra words never to draw"
    )
    word_group.add_argument(
        "--include-words",
        nargs="+",
        type=str,
        help="Stop words to draw after all",
    )

    # Layout options
    layout_group = parser.add_argument_group("Layout Options")
    layout_group.add_argument(
        "--image-size",
        type=_from_parser(parse_image_size),
        help="Canvas size as WIDTHxHEIGHT or a preset (720p, 1080p, 1440p, 4k, 8k); default 4k",
    )
    layout_group.add_argument(
        "--distance-step",
        type=_positive_float,
        default=LAYOUT_CONFIG["distance_step"],
        help="Radius growth per failed ring, in tenths of a word width",
    )
    layout_group.add_argument(
        "--radial-granularity",
        type=_positive_float,
        default=LAYOUT_CONFIG["radial_granularity"],
        help="Candidate density per ring",
    )
    layout_group.add_argument(
        "--disable-rotation",
        action="store_true",
        help="Draw every word horizontally",
    )
    layout_group.add_argument(
        "--seed", type=int, help="Random seed for a reproducible layout"
    )

    # Color and font options
    style_group = parser.add_argument_group("Color and Font Options")
    style_group.add_argument(
        "--background",
        type=_from_parser(parse_color),
        default=COLOR_CONFIG["background"],
        help="Background color name or hex code",
    )
    style_group.add_argument(
        "--colors",
        nargs="+",
        type=_from_parser(parse_color),
        help="Candidate word colors (all named colors if not specified)",
    )
    style_group.add_argument(
        "--max-colors",
        type=_bounded_int(1, 1000),
        default=COLOR_CONFIG["max_colors"],
        help="Maximum number of colors in the palette",
    )
    style_group.add_argument(
        "--monochrome", action="store_true", help="Draw words in greys only"
    )
    style_group.add_argument(
        "--font",
        type=str,
        default=RENDER_CONFIG["font_family"],
        help="TrueType font file name or path",
    )
    style_group.add_argument(
        "--font-style",
        type=str,
        choices=["regular", "bold", "italic", "bold italic"],
        default=RENDER_CONFIG["font_style"],
        help="Font style",
    )

    # Output options
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--output", "-o", type=str, required=True, help="Image file to write"
    )
    output_group.add_argument(
        "--format",
        type=str,
        help="Image format (detected from the output extension if not specified)",
    )
    output_group.add_argument(
        "--quiet", "-q", action="store_true", help="Minimal output"
    )
    output_group.add_argument(
        "--json", action="store_true", help="Print the run summary as JSON"
    )

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)

    format_result = parse_image_format(args.output, args.format)
    if not format_result.ok:
        parser.error(format_result.error)
    args.format = format_result.value
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    # Set quiet mode
    if args.quiet:
        OUTPUT_CONFIG["verbose"] = False
        OUTPUT_CONFIG["timing_info"] = False

    width, height = args.image_size or (None, None)
    extract_kwargs = {}
    if args.pdf_pages:
        extract_kwargs["page_range"] = tuple(args.pdf_pages)

    start_time = time.time()

    try:
        cloud = WordCloud(
            width=width,
            height=height,
            font=FontDescriptor(args.font, args.font_style),
            background=args.background,
            colors=args.colors,
            max_colors=args.max_colors,
            monochrome=args.monochrome,
            allow_rotation=not args.disable_rotation,
            distance_step=args.distance_step,
            radial_granularity=args.radial_granularity,
            max_unique_words=args.max_unique_words,
            exclude_words=args.exclude_words,
            include_words=args.include_words,
            seed=args.seed,
        )
        layout = cloud.create_word_cloud(
            args.input,
            args.output,
            image_format=args.format,
            input_type=args.input_type,
            **extract_kwargs,
        )
    except EmptyPaletteError as e:
        print(f"Error: {e}")
        print("TIP: Pass --colors with saturated colors that differ from --background")
        return 1
    except MeasurementError as e:
        print(f"Error: {e}")
        print("TIP: Check that the --font file exists and is a TrueType font")
        return 1
    except (OSError, ValueError) as e:
        print(f"Error creating word cloud: {e}")
        return 1

    if OUTPUT_CONFIG["verbose"]:
        display_summary(layout.summary)

    if OUTPUT_CONFIG["timing_info"]:
        elapsed = round(time.time() - start_time, 2)
        print(f"\nCompleted word cloud in {elapsed} seconds")

    if args.json:
        print(json.dumps(layout.summary.as_dict(), indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
