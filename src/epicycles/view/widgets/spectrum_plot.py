"""Bar chart of the coefficient magnitudes of the current term list."""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QVBoxLayout, QWidget

from epicycles.model.series import Term
from epicycles.view.scene import palette_color

logger = logging.getLogger(__name__)


class SpectrumPlot(QWidget):
    """|amplitude| per harmonic index, one bar per term."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot = pg.PlotWidget(background="w")
        self.plot.showGrid(x=False, y=True, alpha=0.3)
        for axis in ("left", "bottom"):
            self.plot.getAxis(axis).setPen("k")
            self.plot.getAxis(axis).setTextPen("k")
        self.plot.setLabel("left", "|Amp|")
        self.plot.setLabel("bottom", "Frequência (n)")
        self.plot.setMenuEnabled(False)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.setMinimumHeight(140)
        layout.addWidget(self.plot)

        self._bars: pg.BarGraphItem | None = None

    def set_terms(self, terms: Sequence[Term], palette_offset: int = 0) -> None:
        """Replace the bars with the given term list."""
        if self._bars is not None:
            self.plot.removeItem(self._bars)
            self._bars = None

        if not terms:
            return

        x = np.array([t.harmonic_index for t in terms], dtype=np.float64)
        heights = np.abs(np.array([t.amplitude for t in terms], dtype=np.float64))
        brushes = [pg.mkBrush(palette_color(k + palette_offset)) for k in range(len(terms))]

        self._bars = pg.BarGraphItem(x=x, height=heights, width=0.6, brushes=brushes, pen=pg.mkPen("k", width=0.5))
        self.plot.addItem(self._bars)
        self.plot.setXRange(0, float(x.max()) + 1, padding=0.02)
        self.plot.setYRange(0, float(heights.max()) * 1.1, padding=0)

        logger.debug(f"Spectrum updated with {len(terms)} terms")

    def bar_heights(self) -> np.ndarray:
        """Heights currently shown (empty if no bars)."""
        if self._bars is None:
            return np.empty(0)
        return np.asarray(self._bars.opts["height"], dtype=np.float64)
