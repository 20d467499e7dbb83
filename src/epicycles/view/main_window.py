"""
Main Application Window
=======================
The primary GUI container: view-mode tab bar on top, the active animation view
in the middle and the control panel below.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It turns control panel and tab bar changes into a fresh view.
   A view is never updated in place; it is unmounted, deleted and replaced,
   so every parameter change restarts time at zero with new buffers.
"""
import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QTabBar, QVBoxLayout, QWidget

from epicycles.application import VISIBLE_APP_NAME
from epicycles.model.parameters import SeriesParameters, ViewMode
from epicycles.view.control_panel import ControlPanel
from epicycles.view.views import AnimationView, create_view

logger = logging.getLogger(__name__)

# Tab order must match VIEW_MODES order
VIEW_MODES = [ViewMode.EPICYCLES, ViewMode.DECOMPOSITION, ViewMode.GENERALIZATION]
VIEW_LABELS = {
    ViewMode.EPICYCLES: "Vista de Epiciclos",
    ViewMode.DECOMPOSITION: "Vista de Decomposição",
    ViewMode.GENERALIZATION: "Generalização (t²)",
}


class MainWindow(QMainWindow):
    def __init__(
        self,
        params: SeriesParameters | None = None,
        mode: ViewMode = ViewMode.EPICYCLES
    ) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 850)

        self.view: AnimationView | None = None

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(8)

        # --- 1. TOP TAB BAR ---
        self.tab_bar = QTabBar()
        self.tab_bar.setDrawBase(True)
        self.tab_bar.setShape(QTabBar.Shape.RoundedNorth)
        self.tab_bar.setExpanding(True)
        for view_mode in VIEW_MODES:
            self.tab_bar.addTab(VIEW_LABELS[view_mode])
        self.tab_bar.setStyleSheet("""
                    QTabBar::tab { height: 35px; min-width: 100px; }
                    QTabBar::tab:selected { font-weight: bold; }
                """)
        main_layout.addWidget(self.tab_bar)

        # --- 2. VIEW HOST ---
        self.view_host = QWidget()
        self.view_layout = QVBoxLayout(self.view_host)
        self.view_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self.view_host, 1)

        # --- 3. CONTROLS ---
        self.controls = ControlPanel(params)
        main_layout.addWidget(self.controls)

        # --- SIGNAL CONNECTIONS ---
        self.tab_bar.setCurrentIndex(VIEW_MODES.index(ViewMode(mode)))
        self.tab_bar.currentChanged.connect(self.on_mode_changed)
        self.controls.parameters_changed.connect(self.on_parameters_changed)

        # Initial view
        self.controls.set_mode(self.current_mode())
        self.rebuild_view()

    # --- HELPER METHODS ---
    def current_mode(self) -> ViewMode:
        return VIEW_MODES[self.tab_bar.currentIndex()]

    def rebuild_view(self) -> None:
        """Tear down the active view and mount a fresh one for the current inputs."""
        self._teardown_view()

        self.view = create_view(self.current_mode(), self.controls.parameters(), self.view_host)
        self.view_layout.addWidget(self.view)
        self.view.mount()

    def on_mode_changed(self, index: int) -> None:
        """Slot called when the user switches view mode."""
        mode = VIEW_MODES[index]
        logger.info(f"View mode switched to {mode.value}")
        self.controls.set_mode(mode)
        self.rebuild_view()

    def on_parameters_changed(self, params: SeriesParameters) -> None:
        """Slot called when order, speed or family changes."""
        self.rebuild_view()

    def _teardown_view(self) -> None:
        if self.view is None:
            return
        self.view.unmount()
        self.view_layout.removeWidget(self.view)
        self.view.deleteLater()
        self.view = None

    def closeEvent(self, event: QCloseEvent, /) -> None:
        """Stop the animation before the window goes away."""
        self._teardown_view()
        event.accept()
