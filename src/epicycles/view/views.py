"""
Animation Views
===============
The three view modes. Each view owns one engine and one scheduler and paints
every frame into its canvas(es).

Lifetime:
    A view is created for one set of parameters. `mount()` starts ticking,
    `unmount()` stops ticking and releases the resize subscription. Changing
    any parameter or the view mode replaces the whole view, so the time
    cursor, terms and buffers always start fresh.
"""
from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget

from epicycles.config import EPICYCLE_CANVAS_HEIGHT, RESULT_AREA_HEIGHT, ROW_HEIGHT
from epicycles.controller.engines import (
    AnimationEngine, DecompositionEngine, DecompositionFrame, EpicycleEngine, EpicycleFrame, GeneralizationEngine,
)
from epicycles.controller.scheduler import FrameScheduler
from epicycles.model.parameters import SeriesParameters, ViewMode
from epicycles.view.scene import build_components_scene, build_epicycle_scene, build_result_scene
from epicycles.view.widgets.canvas import AnimationCanvas

logger = logging.getLogger(__name__)


class AnimationView(QWidget):
    """Base class: engine + scheduler + surface."""
    MODE: ViewMode

    def __init__(self, params: SeriesParameters, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.params = params.clamped()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.canvas = self._build_canvases(layout)
        self.engine = self._create_engine()
        self.scheduler = FrameScheduler(self.engine, parent=self)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def mount(self) -> None:
        """Start the animation on this view."""
        logger.info(
            f"Mounting {self.MODE.value} view (order={self.params.order}, "
            f"family={self.params.family.value}, speed={self.params.speed:.1f})"
        )
        # pick up the real size if the layout already ran
        self.engine.resize(self.canvas.viewport())
        self.scheduler.start(self, self.canvas.viewport_changed)

    def unmount(self) -> None:
        """Stop the animation; no further ticks or buffer updates."""
        self.scheduler.stop()

    def present(self, frame: Any) -> None:
        raise NotImplementedError("`present` must be implemented in subclass.")

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _build_canvases(self, layout: QVBoxLayout) -> AnimationCanvas:
        """Create the canvas(es) and return the one whose size drives the engine."""
        raise NotImplementedError("`_build_canvases` must be implemented in subclass.")

    def _create_engine(self) -> AnimationEngine:
        raise NotImplementedError("`_create_engine` must be implemented in subclass.")

    def closeEvent(self, event: QCloseEvent) -> None:
        self.unmount()
        super().closeEvent(event)


class EpicycleView(AnimationView):
    MODE = ViewMode.EPICYCLES

    def _build_canvases(self, layout: QVBoxLayout) -> AnimationCanvas:
        canvas = AnimationCanvas(fixed_height=EPICYCLE_CANVAS_HEIGHT, parent=self)
        canvas.setAccessibleName("Canvas de animação da série de Fourier")
        layout.addWidget(canvas)
        return canvas

    def _create_engine(self) -> AnimationEngine:
        return EpicycleEngine(
            self.params.family, self.params.order, self.params.speed, self.canvas.viewport()
        )

    def present(self, frame: EpicycleFrame) -> None:
        self.canvas.set_scene(build_epicycle_scene(frame))


class GeneralizationView(EpicycleView):
    """Epicycles of t² on [-π, π]; the family parameter is ignored."""
    MODE = ViewMode.GENERALIZATION

    def _create_engine(self) -> AnimationEngine:
        return GeneralizationEngine(self.params.order, self.params.speed, self.canvas.viewport())


class DecompositionView(AnimationView):
    """
    Scrollable stack of harmonic rows above a fixed result panel.

    The component canvas is as tall as all rows together; the scroll area
    shows as many as fit above the result panel.
    """
    MODE = ViewMode.DECOMPOSITION

    def _build_canvases(self, layout: QVBoxLayout) -> AnimationCanvas:
        self.scroll = QScrollArea(self)
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll.setFixedHeight(EPICYCLE_CANVAS_HEIGHT - RESULT_AREA_HEIGHT)

        components = AnimationCanvas(fixed_height=self.params.order * ROW_HEIGHT, parent=self.scroll)
        components.setAccessibleName("Animação das ondas componentes da série de Fourier")
        self.scroll.setWidget(components)
        layout.addWidget(self.scroll)

        self.result_canvas = AnimationCanvas(fixed_height=RESULT_AREA_HEIGHT, parent=self)
        self.result_canvas.setAccessibleName("Animação da onda resultante somada final")
        layout.addWidget(self.result_canvas)
        return components

    def _create_engine(self) -> AnimationEngine:
        return DecompositionEngine(
            self.params.family, self.params.order, self.params.speed, self.canvas.viewport()
        )

    def present(self, frame: DecompositionFrame) -> None:
        self.canvas.set_scene(build_components_scene(frame))
        self.result_canvas.set_scene(build_result_scene(frame, self.result_canvas.viewport().width))


VIEW_CLASSES: dict[ViewMode, type[AnimationView]] = {
    ViewMode.EPICYCLES: EpicycleView,
    ViewMode.DECOMPOSITION: DecompositionView,
    ViewMode.GENERALIZATION: GeneralizationView,
}


def create_view(mode: ViewMode | str, params: SeriesParameters, parent: QWidget | None = None) -> AnimationView:
    cls = VIEW_CLASSES.get(ViewMode(mode))
    if not cls:
        raise KeyError(f"No view registered for mode '{mode}'")
    return cls(params, parent)
