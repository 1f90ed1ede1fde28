"""
Material You Palette Viewer - Grid Layout
Pure geometry for the swatch grid: a label strip on the left, a header
strip on top, and 13x5 equally sized tiles filling the rest.
All coordinates are y-down, origin at the top-left of the drawing area.
"""

from dataclasses import dataclass

import numpy as np

from config import LayoutConfig
from palette import BLACK, COLUMNS, ROWS, WHITE, Color


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass(frozen=True)
class PaletteGrid:
    """Computed positions for one drawing area size"""
    width: float
    height: float
    cell_width: float
    cell_height: float
    tiles: tuple[tuple[Rect, ...], ...]                   # [row][column], already inset
    shade_label_anchors: tuple[tuple[float, float], ...]  # right-aligned, one per row
    family_label_anchors: tuple[tuple[float, float], ...]  # centered, one per column


def compute_grid(width: float, height: float, layout: LayoutConfig,
                 rows: int = ROWS, columns: int = COLUMNS) -> PaletteGrid:
    """Lay out the tile grid inside a width x height area"""
    left = layout.label_strip_width
    top = layout.header_height

    cell_width = max(0.0, (width - left) / columns)
    cell_height = max(0.0, (height - top) / rows)

    xs = left + np.arange(columns) * cell_width
    ys = top + np.arange(rows) * cell_height

    margin = layout.tile_margin
    tile_width = max(0.0, cell_width - 2 * margin)
    tile_height = max(0.0, cell_height - 2 * margin)

    tiles = tuple(
        tuple(Rect(float(x) + margin, float(y) + margin, tile_width, tile_height) for x in xs)
        for y in ys
    )

    label_x = float(left - layout.label_gap)
    shade_anchors = tuple((label_x, float(y + cell_height / 2)) for y in ys)
    family_anchors = tuple((float(x + cell_width / 2), top / 2) for x in xs)

    return PaletteGrid(
        width=width,
        height=height,
        cell_width=float(cell_width),
        cell_height=float(cell_height),
        tiles=tiles,
        shade_label_anchors=shade_anchors,
        family_label_anchors=family_anchors,
    )


def border_color(is_light: bool, alpha: float = 0.1) -> Color:
    """Faint tile border: black on light themes, white on dark"""
    return (BLACK if is_light else WHITE).with_alpha(alpha)
