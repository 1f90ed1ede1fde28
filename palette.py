"""
Material You Palette Viewer - Palette Model
Fixed slot template for the dynamic color palette and the resolver that
turns it into concrete colors, substituting black for unavailable slots.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Optional


class Family(Enum):
    """Color families, in column order"""
    NEUTRAL1 = ("neutral1", "N1")
    NEUTRAL2 = ("neutral2", "N2")
    ACCENT1 = ("accent1", "A1")
    ACCENT2 = ("accent2", "A2")
    ACCENT3 = ("accent3", "A3")

    def __init__(self, key: str, label: str):
        self.key = key
        self.label = label


# Shade levels, lightest to darkest (row order)
SHADES = (0, 10, 50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 1000)

FAMILIES = tuple(Family)

# Axis labels
SHADE_LABELS = tuple(str(shade) for shade in SHADES)
FAMILY_LABELS = tuple(family.label for family in FAMILIES)

ROWS = len(SHADES)
COLUMNS = len(FAMILIES)


@dataclass(frozen=True)
class ColorSlot:
    """One (family, shade) cell of the palette"""
    family: Family
    shade: int

    @property
    def resource_name(self) -> str:
        return f"system_{self.family.key}_{self.shade}"


@dataclass(frozen=True)
class Color:
    """Opaque-or-not color stored as a 32-bit ARGB integer"""
    argb: int

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Parse '#RRGGBB' or '#AARRGGBB' (alpha first, as in Android resources).
        Raises ValueError for anything else.
        """
        digits = value.strip()
        if digits.startswith('#'):
            digits = digits[1:]
        if len(digits) == 6:
            digits = 'FF' + digits
        if len(digits) != 8 or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Invalid color: {value!r}")
        return cls(int(digits, 16))

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> "Color":
        """Build from 0..1 float channels"""
        channels = [max(0, min(255, round(c * 255))) for c in (alpha, r, g, b)]
        a, r8, g8, b8 = channels
        return cls((a << 24) | (r8 << 16) | (g8 << 8) | b8)

    @property
    def alpha(self) -> int:
        return (self.argb >> 24) & 0xFF

    @property
    def hex(self) -> str:
        return f"#{self.argb & 0xFFFFFF:06x}"

    def to_rgba(self) -> tuple[float, float, float, float]:
        """Float channels for matplotlib"""
        return (
            ((self.argb >> 16) & 0xFF) / 255,
            ((self.argb >> 8) & 0xFF) / 255,
            (self.argb & 0xFF) / 255,
            self.alpha / 255,
        )

    def with_alpha(self, alpha: float) -> "Color":
        a = max(0, min(255, round(alpha * 255)))
        return Color((a << 24) | (self.argb & 0xFFFFFF))


BLACK = Color(0xFF000000)
WHITE = Color(0xFFFFFFFF)

# Substituted for any slot the provider cannot resolve
FALLBACK_COLOR = BLACK


# Rows are shades, columns are families
PALETTE_TEMPLATE: tuple[tuple[ColorSlot, ...], ...] = tuple(
    tuple(ColorSlot(family, shade) for family in FAMILIES)
    for shade in SHADES
)


@dataclass(frozen=True)
class ResolvedPalette:
    """Concrete colors in the same 13x5 shape as the template"""
    rows: tuple[tuple[Color, ...], ...]

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.rows), len(self.rows[0]) if self.rows else 0

    def cell(self, row: int, column: int) -> Color:
        return self.rows[row][column]

    def __iter__(self) -> Iterator[tuple[Color, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


class Resolution(NamedTuple):
    """Outcome of one slot lookup: the color to show and whether it came from the provider"""
    color: Color
    resolved: bool


def lookup(provider, slot: ColorSlot) -> Resolution:
    """Ask the provider for one slot. Any failure yields the fallback color."""
    try:
        return Resolution(provider.get_color(slot), True)
    except Exception:
        return Resolution(FALLBACK_COLOR, False)


def resolve(template, provider) -> ResolvedPalette:
    """
    Resolve every slot of the template through the provider.

    Each cell is looked up independently; a failed lookup becomes the
    fallback color and never affects other cells or escapes this call.
    """
    return ResolvedPalette(tuple(
        tuple(lookup(provider, slot).color for slot in row)
        for row in template
    ))


class PaletteResolver:
    """
    Resolves the palette template once and keeps the result.
    Colors are not expected to change while the app runs, so there is
    no re-resolution.
    """

    def __init__(self, provider, template=PALETTE_TEMPLATE):
        self.provider = provider
        self.template = template
        self._palette: Optional[ResolvedPalette] = None

    @property
    def resolved(self) -> bool:
        return self._palette is not None

    @property
    def palette(self) -> ResolvedPalette:
        if self._palette is None:
            self._palette = resolve(self.template, self.provider)
            print(f"[Palette] Resolved {ROWS}x{COLUMNS} palette from {type(self.provider).__name__}")
        return self._palette
