"""An in-memory drawing surface for graphs, with lines, rectangles and text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Union

from PIL import Image, ImageDraw, ImageFont

from abrprint.config import IMG_H, IMG_W, Color

Font = Union[ImageFont.ImageFont, ImageFont.FreeTypeFont]
Point = tuple[int, int]


class CanvasError(Exception):
    """Raised when something cannot be drawn or a font cannot be loaded."""


@dataclass
class Rect:
    """An axis-aligned rectangle: top-left corner, width and height."""

    x: int
    y: int
    w: int
    h: int


def load_font(directory: str, name: str, size: int = 24) -> Font:
    """Load the TrueType font `directory + name + ".ttf"` at the given size."""
    path = f"{directory}{name}.ttf"
    try:
        return ImageFont.truetype(path, size)
    except OSError as exc:
        raise CanvasError(f"Couldn't open font file {path}") from exc


class Canvas:
    """An RGBA image that graph elements are drawn onto."""

    def __init__(self, width: int = IMG_W, height: int = IMG_H) -> None:
        if width <= 0 or height <= 0:
            raise CanvasError(f"Invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self.image)

    def fill(self, color: Color) -> None:
        """Fill the whole canvas with one colour."""
        self._draw.rectangle((0, 0, self.width - 1, self.height - 1), fill=color.rgba)

    def draw_line(self, p0: Point, p1: Point, color: Color) -> None:
        """Draw a one-pixel line between two points, both included."""
        self._draw.line((tuple(p0), tuple(p1)), fill=color.rgba, width=1)

    def draw_polygon(self, points: Iterable[Point], color: Color) -> None:
        """Draw lines joining consecutive points; the outline is not closed."""
        pts = list(points)
        for start, end in zip(pts, pts[1:]):
            self.draw_line(start, end, color)

    def fill_rect(self, rect: Rect, color: Color) -> None:
        """Fill a rectangle; one with no width or height draws nothing."""
        if rect.w <= 0 or rect.h <= 0:
            return
        self._draw.rectangle(
            (rect.x, rect.y, rect.x + rect.w - 1, rect.y + rect.h - 1),
            fill=color.rgba,
        )

    def print_text(
        self,
        text: str,
        x: int,
        y: int,
        size: int,
        angle: float,
        color: Color,
        font: Font,
    ) -> Rect:
        """Draw text scaled to `size` pixels high at (x, y), turned clockwise by
        `angle` degrees about its top-left corner.

        Returns the unrotated destination rectangle of the text.
        """
        if size <= 0:
            raise CanvasError(f"Invalid text size {size}")
        measure = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
        left, top, right, bottom = measure.textbbox((0, 0), text, font=font)
        src_w, src_h = right, bottom
        if not text or src_w <= 0 or src_h <= 0:
            raise CanvasError("Text has zero width")

        rendered = Image.new("RGBA", (src_w, src_h), (0, 0, 0, 0))
        ImageDraw.Draw(rendered).text((0, 0), text, font=font, fill=color.rgb + (255,))

        ratio = size / src_h
        dest = Rect(x, y, int(ratio * src_w), size)
        if dest.w <= 0:
            return dest
        scaled = rendered.resize((dest.w, dest.h), Image.Resampling.BICUBIC)

        offset_x, offset_y = dest.x, dest.y
        if angle % 360:
            theta = math.radians(angle)
            cos_t, sin_t = math.cos(theta), math.sin(theta)
            corners = [(0, 0), (dest.w, 0), (0, dest.h), (dest.w, dest.h)]
            xs = [cx * cos_t - cy * sin_t for cx, cy in corners]
            ys = [cx * sin_t + cy * cos_t for cx, cy in corners]
            scaled = scaled.rotate(-angle, resample=Image.Resampling.BICUBIC, expand=True)
            offset_x += math.floor(min(xs))
            offset_y += math.floor(min(ys))

        self.image.paste(scaled, (offset_x, offset_y), scaled)
        return dest