# Material You Palette Viewer Configuration
# All default values and constants

import json
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path


class ThemeMode(IntEnum):
    """Which light/dark branch to render with"""
    SYSTEM = 1      # Follow the platform color scheme
    LIGHT = 2
    DARK = 3


@dataclass
class SourceConfig:
    """Where palette colors come from"""
    # JSON dump of system_* color resources. None = synthesize from seed_color
    resource_file: str | None = None
    seed_color: str = "#6750A4"


@dataclass
class ThemeConfig:
    """Ambient theme selection"""
    mode: ThemeMode = ThemeMode.SYSTEM


@dataclass
class LayoutConfig:
    """Grid geometry (logical pixels)"""
    content_padding: int = 16
    label_strip_width: int = 41    # Leading strip for shade labels
    label_gap: int = 4             # Space between shade labels and tiles
    header_height: int = 24        # Leading strip for family labels
    tile_margin: int = 4           # Inset on every side of a tile
    tile_corner_radius: float = 4.0
    border_width: float = 1.0
    border_alpha: float = 0.1
    top_bar_height: int = 56
    font_size: float = 10.0


@dataclass
class WindowConfig:
    """Main window settings"""
    title: str = "Material You Color Palette"
    width: int = 360
    height: int = 640


@dataclass
class Config:
    """Master configuration"""
    source: SourceConfig = field(default_factory=SourceConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    window: WindowConfig = field(default_factory=WindowConfig)


# Default config instance
DEFAULT_CONFIG = Config()

# Config location (read only, nothing is written back)
CONFIG_DIR = Path.home() / '.materialyouviewer'
CONFIG_FILE = CONFIG_DIR / 'config.json'


def load_config(path: Path = CONFIG_FILE) -> Config:
    """Load config from JSON file, returns default if not found"""
    try:
        if path.exists():
            with open(path, 'r') as f:
                data = json.load(f)

            config = Config()

            if 'source' in data:
                for key, value in data['source'].items():
                    if hasattr(config.source, key):
                        setattr(config.source, key, value)

            if 'theme' in data:
                for key, value in data['theme'].items():
                    if hasattr(config.theme, key):
                        setattr(config.theme, key, value)
                # Ensure mode is always a ThemeMode enum
                mode = config.theme.mode
                if not isinstance(mode, ThemeMode):
                    try:
                        # Accept either the enum value or its name ("dark")
                        config.theme.mode = ThemeMode[mode.upper()] if isinstance(mode, str) else ThemeMode(mode)
                    except (KeyError, ValueError) as e:
                        print(f"[Config] Warning: Could not convert theme.mode to ThemeMode enum: {e}")
                        config.theme.mode = ThemeMode.SYSTEM

            if 'layout' in data:
                for key, value in data['layout'].items():
                    if hasattr(config.layout, key):
                        setattr(config.layout, key, value)

            if 'window' in data:
                for key, value in data['window'].items():
                    if hasattr(config.window, key):
                        setattr(config.window, key, value)

            print(f"[Config] Loaded from {path}")
            return config
        else:
            print(f"[Config] No saved config found, using defaults")
            return Config()
    except Exception as e:
        print(f"[Config] Failed to load: {e}, using defaults")
        return Config()
