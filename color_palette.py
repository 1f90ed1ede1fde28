"""Quick color palette viewer for the Material You system palette"""
from typing import Optional

import matplotlib.patches as patches

from config import LayoutConfig
from palette import FAMILY_LABELS, SHADE_LABELS, ResolvedPalette
from palette_layout import PaletteGrid, Rect, border_color
from theme import Theme


def draw_palette(ax, palette: Optional[ResolvedPalette], grid: PaletteGrid,
                 theme: Theme, layout: LayoutConfig):
    """
    Draw labels and tiles onto axes set up in y-down pixel coordinates.
    Nothing is drawn until a palette is available.
    """
    if palette is None:
        return

    text_color = theme.on_background.to_rgba()

    # Family labels in the header strip
    for label, (x, y) in zip(FAMILY_LABELS, grid.family_label_anchors):
        ax.text(x, y, label, ha='center', va='center',
                fontsize=layout.font_size, color=text_color)

    # Shade labels in the leading strip
    for label, (x, y) in zip(SHADE_LABELS, grid.shade_label_anchors):
        ax.text(x, y, label, ha='right', va='center',
                fontsize=layout.font_size, color=text_color)

    edge = border_color(theme.is_light, layout.border_alpha).to_rgba()

    for color_row, tile_row in zip(palette, grid.tiles):
        for color, tile in zip(color_row, tile_row):
            ax.add_patch(patches.FancyBboxPatch(
                (tile.x, tile.y), tile.width, tile.height,
                boxstyle=patches.BoxStyle("Round", pad=0, rounding_size=corner_radius(tile, layout)),
                facecolor=color.to_rgba(), edgecolor=edge,
                linewidth=layout.border_width,
            ))


def corner_radius(tile: Rect, layout: LayoutConfig) -> float:
    """Configured radius, shrunk so it never exceeds half the tile"""
    return max(0.0, min(layout.tile_corner_radius, tile.width / 2, tile.height / 2))


def setup_axes(ax, width: float, height: float):
    """Full-bleed axes in y-down pixel coordinates"""
    ax.clear()
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.axis('off')


def hex_table(palette: ResolvedPalette) -> list[str]:
    """One line per shade with the hex code of each family"""
    lines = ["       " + "  ".join(f"{label:7}" for label in FAMILY_LABELS)]
    for label, row in zip(SHADE_LABELS, palette):
        lines.append(f"  {label:>4} " + "  ".join(color.hex for color in row))
    return lines


def main():
    import matplotlib.pyplot as plt

    from color_provider import provider_from_config
    from config import load_config
    from palette import PaletteResolver
    from palette_layout import compute_grid
    from theme import theme_for_mode

    config = load_config()
    palette = PaletteResolver(provider_from_config(config.source)).palette
    theme = theme_for_mode(config.theme.mode, system_is_light=True)

    width, height = config.window.width, config.window.height
    fig = plt.figure(figsize=(width / 100, height / 100), dpi=100)
    fig.patch.set_facecolor(theme.background.to_rgba())
    fig.suptitle(config.window.title, fontsize=12, fontweight='bold',
                 color=theme.on_background.to_rgba())

    pad = config.layout.content_padding
    top = config.layout.top_bar_height
    ax = fig.add_axes([pad / width, pad / height,
                       (width - 2 * pad) / width, (height - top - 2 * pad) / height])
    area_w, area_h = width - 2 * pad, height - top - 2 * pad
    setup_axes(ax, area_w, area_h)
    draw_palette(ax, palette, compute_grid(area_w, area_h, config.layout),
                 theme, config.layout)

    plt.show()

    print("\nColor codes for easy copying:")
    for line in hex_table(palette):
        print(line)


if __name__ == "__main__":
    main()
