"""Tests for drawing the palette onto matplotlib axes."""

import pytest
from matplotlib.figure import Figure
from matplotlib.patches import FancyBboxPatch

from color_palette import corner_radius, draw_palette, hex_table, setup_axes
from config import LayoutConfig
from palette import FALLBACK_COLOR, FAMILY_LABELS, PALETTE_TEMPLATE, SHADE_LABELS, ColorSlot, Family, resolve
from palette_layout import compute_grid
from theme import DARK_THEME, LIGHT_THEME

pytestmark = pytest.mark.unit


@pytest.fixture
def axes():
    fig = Figure(figsize=(3.6, 6.4))
    ax = fig.add_axes([0, 0, 1, 1])
    setup_axes(ax, 328, 520)
    return ax


@pytest.fixture
def grid():
    return compute_grid(328, 520, LayoutConfig())


def test_nothing_drawn_without_palette(axes, grid):
    draw_palette(axes, None, grid, LIGHT_THEME, LayoutConfig())
    assert len(axes.patches) == 0
    assert len(axes.texts) == 0


def test_draws_tiles_and_labels(axes, grid, provider):
    palette = resolve(PALETTE_TEMPLATE, provider)
    draw_palette(axes, palette, grid, LIGHT_THEME, LayoutConfig())

    tiles = [p for p in axes.patches if isinstance(p, FancyBboxPatch)]
    assert len(tiles) == 65
    labels = [t.get_text() for t in axes.texts]
    assert labels == list(FAMILY_LABELS) + list(SHADE_LABELS)


def test_tiles_use_palette_colors_in_order(axes, grid, make_provider, expected_color):
    failing = ColorSlot(Family.ACCENT3, 0)
    palette = resolve(PALETTE_TEMPLATE, make_provider(failing=[failing]))
    draw_palette(axes, palette, grid, LIGHT_THEME, LayoutConfig())

    tiles = list(axes.patches)
    assert tuple(tiles[4].get_facecolor()) == pytest.approx(FALLBACK_COLOR.to_rgba())
    row7_500 = tiles[7 * 5:8 * 5]
    for tile, slot in zip(row7_500, PALETTE_TEMPLATE[7]):
        assert tuple(tile.get_facecolor()) == pytest.approx(expected_color(slot).to_rgba())


def test_tile_border_follows_theme(axes, grid, provider):
    palette = resolve(PALETTE_TEMPLATE, provider)
    draw_palette(axes, palette, grid, DARK_THEME, LayoutConfig())
    r, g, b, a = axes.patches[0].get_edgecolor()
    assert (r, g, b) == (1.0, 1.0, 1.0)
    assert a == pytest.approx(0.1, abs=0.01)


def test_corner_radius_never_exceeds_half_tile(provider):
    # Small window: 4px tile margins leave tiles only ~4px tall
    grid = compute_grid(200, 180, LayoutConfig())
    tile = grid.tiles[0][0]
    assert tile.height / 2 < LayoutConfig().tile_corner_radius
    assert corner_radius(tile, LayoutConfig()) == pytest.approx(tile.height / 2)

    fig = Figure()
    ax = fig.add_axes([0, 0, 1, 1])
    setup_axes(ax, 200, 180)
    draw_palette(ax, resolve(PALETTE_TEMPLATE, provider), grid, LIGHT_THEME, LayoutConfig())
    for patch in ax.patches:
        assert patch.get_boxstyle().rounding_size <= tile.height / 2 + 1e-9


def test_corner_radius_uses_config_for_large_tiles(grid):
    assert corner_radius(grid.tiles[0][0], LayoutConfig()) == LayoutConfig().tile_corner_radius


def test_axes_are_y_down_pixels(axes):
    assert axes.get_xlim() == (0, 328)
    assert axes.get_ylim() == (520, 0)


def test_hex_table(provider, expected_color):
    palette = resolve(PALETTE_TEMPLATE, provider)
    lines = hex_table(palette)

    assert len(lines) == 14
    assert lines[0].split() == list(FAMILY_LABELS)
    row500 = lines[8].split()
    assert row500[0] == "500"
    assert row500[1:] == [expected_color(slot).hex for slot in PALETTE_TEMPLATE[7]]
