"""
Material You Palette Viewer - Main Application
Qt window showing the Material You system palette as a labeled swatch grid.
"""

import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt, pyqtSignal, QObject
from PyQt6.QtGui import QFont

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from color_palette import draw_palette, setup_axes
from color_provider import ColorProvider, provider_from_config
from config import Config, load_config
from palette import PaletteResolver, ResolvedPalette
from palette_layout import compute_grid
from theme import (
    Theme, SystemChromeMirror, QtSystemUiController,
    system_prefers_light, theme_for_mode,
)


class PaletteModel(QObject):
    """Resolves the palette once and publishes it"""
    palette_changed = pyqtSignal(object)

    def __init__(self, provider: ColorProvider, parent=None):
        super().__init__(parent)
        self.resolver = PaletteResolver(provider)

    def load(self):
        """Resolve on first call and emit; later calls do nothing"""
        if self.resolver.resolved:
            return
        self.palette_changed.emit(self.resolver.palette)


class PaletteCanvas(FigureCanvas):
    """Swatch grid with shade and family labels, tiles sized to fill the widget"""

    def __init__(self, config: Config, theme: Theme, parent=None):
        self.config = config
        self.theme = theme
        self.palette: Optional[ResolvedPalette] = None

        self.fig = Figure(facecolor=theme.background.to_rgba())
        self.ax = self.fig.add_axes([0, 0, 1, 1])

        super().__init__(self.fig)
        self.setParent(parent)

        self.mpl_connect('resize_event', self._on_resize)
        self.redraw()

    def set_palette(self, palette: ResolvedPalette):
        self.palette = palette
        self.redraw()

    def _on_resize(self, event):
        self.redraw()

    def redraw(self):
        """Recompute the grid for the current size and repaint"""
        width, height = max(self.width(), 1), max(self.height(), 1)
        setup_axes(self.ax, width, height)
        grid = compute_grid(width, height, self.config.layout)
        draw_palette(self.ax, self.palette, grid, self.theme, self.config.layout)
        self.draw_idle()


class PaletteWindow(QMainWindow):
    """Main application window"""

    def __init__(self, config: Optional[Config] = None, provider: Optional[ColorProvider] = None):
        super().__init__()

        self.config = config if config is not None else load_config()
        self.theme = theme_for_mode(self.config.theme.mode, system_prefers_light())

        self.setWindowTitle(self.config.window.title)
        self.resize(self.config.window.width, self.config.window.height)

        # Mirrored chrome colors, start out as the theme's
        self.top_bar_color = self.theme.surface
        self.page_color = self.theme.background
        self.setStyleSheet(self._get_stylesheet())

        self.chrome = SystemChromeMirror(QtSystemUiController(self))

        self._setup_ui()

        # Resolve once, canvas stays empty until the palette is published
        if provider is None:
            provider = provider_from_config(self.config.source)
        self.model = PaletteModel(provider, self)
        self.model.palette_changed.connect(self.canvas.set_palette)
        self.model.load()

    def _get_stylesheet(self) -> str:
        """Surface-colored top bar on the page background"""
        return f"""
            QMainWindow, QWidget#page {{
                background-color: {self.page_color.hex};
            }}

            QLabel#topBar {{
                background-color: {self.top_bar_color.hex};
                color: {self.theme.on_surface.hex};
                padding-left: 16px;
            }}
        """

    def _setup_ui(self):
        """Build the user interface"""
        central = QWidget()
        central.setObjectName("page")
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Top bar
        self.top_bar = QLabel(self.config.window.title)
        self.top_bar.setObjectName("topBar")
        self.top_bar.setFixedHeight(self.config.layout.top_bar_height)
        self.top_bar.setAlignment(Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft)
        font = QFont()
        font.setPointSize(14)
        font.setWeight(QFont.Weight.Medium)
        self.top_bar.setFont(font)
        main_layout.addWidget(self.top_bar)

        # Palette grid
        self.content = QWidget()
        self.content.setObjectName("page")
        content_layout = QVBoxLayout(self.content)
        pad = self.config.layout.content_padding
        content_layout.setContentsMargins(pad, pad, pad, pad)
        self.canvas = PaletteCanvas(self.config, self.theme, self.content)
        content_layout.addWidget(self.canvas)
        main_layout.addWidget(self.content, stretch=1)

    def showEvent(self, event):
        """Match the system chrome to the top bar and page colors"""
        self.chrome.mirror(self.theme.surface, self.theme.background)
        super().showEvent(event)


def main():
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    window = PaletteWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
