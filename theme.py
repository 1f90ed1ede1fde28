"""
Material You Palette Viewer - Theme
Light/dark theme colors and mirroring of the window chrome colors.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication, QPalette

from config import ThemeMode
from palette import BLACK, WHITE, Color


@dataclass(frozen=True)
class Theme:
    is_light: bool
    surface: Color        # Top bar
    background: Color     # Page
    on_surface: Color
    on_background: Color


# Default Material light/dark colors
LIGHT_THEME = Theme(
    is_light=True,
    surface=WHITE,
    background=WHITE,
    on_surface=BLACK,
    on_background=BLACK,
)

DARK_THEME = Theme(
    is_light=False,
    surface=Color(0xFF121212),
    background=Color(0xFF121212),
    on_surface=WHITE,
    on_background=WHITE,
)


def theme_for_mode(mode: ThemeMode, system_is_light: bool) -> Theme:
    if mode == ThemeMode.LIGHT:
        return LIGHT_THEME
    if mode == ThemeMode.DARK:
        return DARK_THEME
    return LIGHT_THEME if system_is_light else DARK_THEME


def system_prefers_light(app: Optional[QGuiApplication] = None) -> bool:
    """Platform light/dark flag from Qt's color scheme hint"""
    app = app or QGuiApplication.instance()
    if app is None:
        return True
    scheme = app.styleHints().colorScheme()
    if scheme == Qt.ColorScheme.Dark:
        return False
    if scheme == Qt.ColorScheme.Light:
        return True
    # Unknown: judge by the window background
    return app.palette().color(QPalette.ColorRole.Window).lightness() >= 128


class SystemUiController(Protocol):
    def set_status_bar_color(self, color: Color) -> None: ...

    def set_navigation_bar_color(self, color: Color) -> None: ...


class SystemChromeMirror:
    """
    Mirrors the top bar and page background colors onto the system chrome.
    Only pushes colors when they differ from what was last applied.
    """

    def __init__(self, controller: SystemUiController):
        self.controller = controller
        self._applied: Optional[tuple[Color, Color]] = None

    def mirror(self, surface: Color, background: Color) -> bool:
        """Returns True if the controller was updated"""
        if self._applied == (surface, background):
            return False
        self.controller.set_status_bar_color(surface)
        self.controller.set_navigation_bar_color(background)
        self._applied = (surface, background)
        return True


class QtSystemUiController:
    """
    Applies chrome colors to the window's own top bar and page background.
    The window rebuilds its stylesheet from `top_bar_color` / `page_color`.
    """

    def __init__(self, window):
        self.window = window

    def set_status_bar_color(self, color: Color) -> None:
        self.window.top_bar_color = color
        self.window.setStyleSheet(self.window._get_stylesheet())

    def set_navigation_bar_color(self, color: Color) -> None:
        self.window.page_color = color
        self.window.setStyleSheet(self.window._get_stylesheet())
