"""
Material You Palette Viewer - Color Providers
The platform boundary: maps a ColorSlot to a concrete color or fails.
"""

import colorsys
import json
from pathlib import Path
from typing import Mapping, Protocol

import numpy as np
from matplotlib.colors import to_rgb

from config import SourceConfig
from palette import Color, ColorSlot, Family, SHADES


# Platform version that introduced the system_* dynamic palette resources
SYSTEM_PALETTE_MIN_SDK = 31

# Material tone (lightness 0-100) for each shade level
SHADE_TONES = (100, 99, 95, 90, 80, 70, 60, 50, 40, 30, 20, 10, 0)

# Per-family (hue rotation in turns, saturation scale) relative to the seed.
# Loosely follows the tonal-spot scheme: muted neutrals, hue-rotated accent3.
FAMILY_TONE_PARAMS = {
    Family.NEUTRAL1: (0.0, 0.08),
    Family.NEUTRAL2: (0.0, 0.16),
    Family.ACCENT1: (0.0, 1.0),
    Family.ACCENT2: (0.0, 0.45),
    Family.ACCENT3: (60 / 360, 0.65),
}


class ColorLookupError(Exception):
    """A slot has no color on this platform"""


class ColorProvider(Protocol):
    def get_color(self, slot: ColorSlot) -> Color:
        """Return the slot's color or raise if it is unavailable"""
        ...


class ResourceTableProvider:
    """
    Colors from a table of system_* resources, e.g. dumped from a device.
    Values may be Color objects or '#AARRGGBB' / '#RRGGBB' strings;
    malformed strings only fail when that slot is looked up.
    """

    def __init__(self, colors: Mapping[str, Color | str], sdk_int: int = SYSTEM_PALETTE_MIN_SDK):
        self.colors = dict(colors)
        self.sdk_int = sdk_int

    @classmethod
    def from_file(cls, path: str | Path) -> "ResourceTableProvider":
        """
        Load a resource dump:
            {"sdk_int": 31, "colors": {"system_accent1_500": "#FF6750A4", ...}}
        """
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            colors = data.get('colors', {})
            sdk_int = int(data.get('sdk_int', SYSTEM_PALETTE_MIN_SDK))
        except (OSError, ValueError, AttributeError, TypeError) as e:
            raise ColorLookupError(f"Could not read resource table {path}: {e}") from e
        if not isinstance(colors, dict):
            raise ColorLookupError(f"'colors' in {path} must be an object")
        return cls(colors, sdk_int)

    def get_color(self, slot: ColorSlot) -> Color:
        if self.sdk_int < SYSTEM_PALETTE_MIN_SDK:
            raise ColorLookupError(
                f"{slot.resource_name} requires SDK {SYSTEM_PALETTE_MIN_SDK}, platform is {self.sdk_int}")
        try:
            value = self.colors[slot.resource_name]
        except KeyError:
            raise ColorLookupError(f"{slot.resource_name} not defined") from None
        if isinstance(value, Color):
            return value
        return Color.from_hex(value)


class SeedColorProvider:
    """
    Synthesizes a tonal palette from one seed color.
    Hue and saturation come from the seed, lightness from the shade's tone.
    """

    def __init__(self, seed: str = "#6750A4"):
        self.seed = seed
        r, g, b = to_rgb(seed)
        self.hue, _, self.saturation = colorsys.rgb_to_hls(r, g, b)
        # Keep accents visibly colored even for greyish seeds
        self.saturation = max(self.saturation, 0.5)
        self._lightness = dict(zip(SHADES, np.asarray(SHADE_TONES, dtype=float) / 100.0))

    def get_color(self, slot: ColorSlot) -> Color:
        hue_shift, sat_scale = FAMILY_TONE_PARAMS[slot.family]
        hue = (self.hue + hue_shift) % 1.0
        saturation = float(np.clip(self.saturation * sat_scale, 0.0, 1.0))
        r, g, b = colorsys.hls_to_rgb(hue, self._lightness[slot.shade], saturation)
        return Color.from_rgb(r, g, b)


def provider_from_config(source: SourceConfig) -> ColorProvider:
    """Resource table if one is configured and readable, otherwise the seed palette"""
    if source.resource_file:
        try:
            provider = ResourceTableProvider.from_file(source.resource_file)
            print(f"[Palette] Using resource table {source.resource_file} (SDK {provider.sdk_int})")
            return provider
        except ColorLookupError as e:
            print(f"[Palette] {e}, falling back to seed {source.seed_color}")
    else:
        print(f"[Palette] Using seed color {source.seed_color}")
    try:
        return SeedColorProvider(source.seed_color)
    except ValueError as e:
        default_seed = SourceConfig().seed_color
        print(f"[Palette] Invalid seed color: {e}, using {default_seed}")
        return SeedColorProvider(default_seed)
