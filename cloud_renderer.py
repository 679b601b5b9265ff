"""
Rendering for the word cloud builder.
Draws committed placements onto a Pillow image and saves it.
"""

import math
from typing import Iterable, Optional

from PIL import Image, ImageDraw

from color_selector import NamedColor
from config import OUTPUT_CONFIG, RENDER_CONFIG
from layout_engine import Canvas, PlacementRecord
from size_allocator import FontDescriptor, PillowTextMeasurer


class CloudRenderer:
    """Handles the actual drawing and saving of word clouds."""

    def __init__(
        self,
        font: Optional[FontDescriptor] = None,
        font_loader: Optional[PillowTextMeasurer] = None,
    ):
        self.font = font or FontDescriptor()
        self.font_loader = font_loader or PillowTextMeasurer()

    def create_image(
        self,
        placements: Iterable[PlacementRecord],
        canvas: Canvas,
        background: NamedColor,
    ) -> Image.Image:
        """Draw every placement on a fresh image; the caller owns the result."""
        image = Image.new("RGB", (canvas.width, canvas.height), background.rgb255)
        try:
            draw = ImageDraw.Draw(image)
            for record in placements:
                if record.is_vertical:
                    self._draw_vertical(image, record)
                else:
                    self._draw_horizontal(draw, record)
        except Exception:
            image.close()
            raise
        return image

    def render(
        self,
        placements: Iterable[PlacementRecord],
        canvas: Canvas,
        background: NamedColor,
        output_path: str,
        image_format: Optional[str] = None,
    ) -> None:
        """
        Create and save the word cloud image.

        Args:
            placements: Committed placements, in placement order
            canvas: Canvas geometry
            background: Background fill color
            output_path: Where to write the image
            image_format: Pillow format name (png if None)
        """
        image_format = image_format or RENDER_CONFIG["default_format"]
        with self.create_image(placements, canvas, background) as image:
            save_kwargs = {"optimize": True} if image_format in {"png", "jpeg"} else {}
            image.save(output_path, image_format.upper(), **save_kwargs)

        if OUTPUT_CONFIG["verbose"]:
            print(f"Word cloud saved to: {output_path}")

    def _draw_horizontal(self, draw: ImageDraw.ImageDraw, record: PlacementRecord) -> None:
        font = self.font_loader.get_font(self.font, record.font_size)
        draw.text(
            (record.rect.x, record.rect.y),
            record.word,
            fill=record.color.rgb255,
            font=font,
        )

    def _draw_vertical(self, image: Image.Image, record: PlacementRecord) -> None:
        """Draw the word on a transparent stamp, rotate it, and paste it in place."""
        # Whole pixels inside the committed rect, so stamps never reach a neighbor
        left = math.floor(record.rect.x)
        top = math.floor(record.rect.y)
        box_width = math.floor(record.rect.right) - left
        box_height = math.floor(record.rect.bottom) - top
        if box_width < 1 or box_height < 1:
            return

        font = self.font_loader.get_font(self.font, record.font_size)
        # The rect is already swapped, so the unrotated stamp is height x width
        with Image.new("RGBA", (box_height, box_width), (0, 0, 0, 0)) as stamp:
            ImageDraw.Draw(stamp).text(
                (0, 0), record.word, fill=record.color.rgb255 + (255,), font=font
            )
            with stamp.rotate(90, expand=True) as rotated:
                with rotated.crop((0, 0, box_width, box_height)) as clipped:
                    image.paste(clipped, (left, top), clipped)
