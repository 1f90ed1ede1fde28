"""Tests for theme selection and chrome mirroring."""

import pytest

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor

from config import ThemeMode
from palette import Color
from theme import DARK_THEME, LIGHT_THEME, SystemChromeMirror, system_prefers_light, theme_for_mode

pytestmark = pytest.mark.unit


class RecordingController:
    def __init__(self):
        self.calls = []

    def set_status_bar_color(self, color):
        self.calls.append(("status", color))

    def set_navigation_bar_color(self, color):
        self.calls.append(("navigation", color))


@pytest.mark.parametrize("mode,system_is_light,expected", [
    (ThemeMode.LIGHT, False, LIGHT_THEME),
    (ThemeMode.DARK, True, DARK_THEME),
    (ThemeMode.SYSTEM, True, LIGHT_THEME),
    (ThemeMode.SYSTEM, False, DARK_THEME),
])
def test_theme_for_mode(mode, system_is_light, expected):
    assert theme_for_mode(mode, system_is_light) is expected


def test_theme_text_contrasts_with_surfaces():
    assert LIGHT_THEME.is_light and not DARK_THEME.is_light
    assert LIGHT_THEME.on_background != LIGHT_THEME.background
    assert DARK_THEME.on_surface != DARK_THEME.surface


def test_mirror_applies_surface_and_background():
    controller = RecordingController()
    mirror = SystemChromeMirror(controller)

    assert mirror.mirror(DARK_THEME.surface, DARK_THEME.background)
    assert controller.calls == [("status", DARK_THEME.surface),
                                ("navigation", DARK_THEME.background)]


def test_mirror_skips_unchanged_colors():
    controller = RecordingController()
    mirror = SystemChromeMirror(controller)

    mirror.mirror(LIGHT_THEME.surface, LIGHT_THEME.background)
    assert not mirror.mirror(LIGHT_THEME.surface, LIGHT_THEME.background)
    assert len(controller.calls) == 2


def test_mirror_reapplies_on_change():
    controller = RecordingController()
    mirror = SystemChromeMirror(controller)

    mirror.mirror(LIGHT_THEME.surface, LIGHT_THEME.background)
    assert mirror.mirror(LIGHT_THEME.surface, Color(0xFFEEEEEE))
    assert controller.calls[-1] == ("navigation", Color(0xFFEEEEEE))
    assert len(controller.calls) == 4


# ============================================================================
# Platform light/dark flag
# ============================================================================

class FakeStyleHints:
    def __init__(self, scheme):
        self.scheme = scheme

    def colorScheme(self):
        return self.scheme


class FakePalette:
    def __init__(self, window_color):
        self.window_color = QColor(window_color)

    def color(self, role):
        return self.window_color


class FakeApp:
    """Just enough of QGuiApplication for system_prefers_light"""

    def __init__(self, scheme, window_color="#ffffff"):
        self.hints = FakeStyleHints(scheme)
        self.window_palette = FakePalette(window_color)

    def styleHints(self):
        return self.hints

    def palette(self):
        return self.window_palette


@pytest.mark.parametrize("scheme,window_color,expected", [
    (Qt.ColorScheme.Dark, "#ffffff", False),
    (Qt.ColorScheme.Light, "#000000", True),
    (Qt.ColorScheme.Unknown, "#f0f0f0", True),
    (Qt.ColorScheme.Unknown, "#202020", False),
])
def test_system_prefers_light(scheme, window_color, expected):
    assert system_prefers_light(FakeApp(scheme, window_color)) is expected
