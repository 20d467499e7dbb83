from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QComboBox, QFormLayout, QGroupBox, QHBoxLayout, QLabel, QPushButton, QSlider, QVBoxLayout, QWidget,
)

from epicycles.config import ORDER_MAX, ORDER_MIN, SPEED_MAX, SPEED_MIN, SPEED_STEP
from epicycles.model.parameters import SeriesParameters, ViewMode
from epicycles.model.series import FunctionFamily, generate_terms, get_family, list_families
from epicycles.view.widgets.spectrum_plot import SpectrumPlot

logger = logging.getLogger(__name__)

# Families offered in the combo box; the quadratic series has its own view mode
WAVE_FAMILIES = [f for f in list_families() if f != FunctionFamily.QUADRATIC_COSINE]


class ControlPanel(QWidget):
    """Order, speed and wave family inputs, the formula and the coefficient spectrum."""
    # Signal: clamped SeriesParameters
    parameters_changed = Signal(object)

    def __init__(self, params: SeriesParameters | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        params = (params or SeriesParameters()).clamped()
        self._mode = ViewMode.EPICYCLES

        layout = QHBoxLayout(self)

        # --- Inputs ---
        grp_inputs = QGroupBox("Parâmetros")
        form = QFormLayout(grp_inputs)

        # Order: slider with -/+ buttons
        hbox_order = QHBoxLayout()
        self.btn_order_down = QPushButton("-")
        self.btn_order_down.setFixedWidth(32)
        self.btn_order_down.setAccessibleName("Diminuir número de termos")
        self.btn_order_down.clicked.connect(lambda: self.slider_order.setValue(self.slider_order.value() - 1))
        hbox_order.addWidget(self.btn_order_down)

        self.slider_order = QSlider(Qt.Orientation.Horizontal)
        self.slider_order.setRange(ORDER_MIN, ORDER_MAX)
        self.slider_order.setSingleStep(1)
        self.slider_order.setTickInterval(5)
        self.slider_order.setTickPosition(QSlider.TickPosition.TicksBelow)
        self.slider_order.setValue(params.order)
        hbox_order.addWidget(self.slider_order)

        self.btn_order_up = QPushButton("+")
        self.btn_order_up.setFixedWidth(32)
        self.btn_order_up.setAccessibleName("Aumentar número de termos")
        self.btn_order_up.clicked.connect(lambda: self.slider_order.setValue(self.slider_order.value() + 1))
        hbox_order.addWidget(self.btn_order_up)

        self.lbl_order = QLabel()
        self.lbl_order.setMinimumWidth(28)
        self.lbl_order.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hbox_order.addWidget(self.lbl_order)
        form.addRow("Número de Termos (N):", hbox_order)

        # Speed: integer slider in tenths
        hbox_speed = QHBoxLayout()
        self.slider_speed = QSlider(Qt.Orientation.Horizontal)
        self.slider_speed.setRange(round(SPEED_MIN / SPEED_STEP), round(SPEED_MAX / SPEED_STEP))
        self.slider_speed.setValue(round(params.speed / SPEED_STEP))
        hbox_speed.addWidget(self.slider_speed)
        self.lbl_speed = QLabel()
        self.lbl_speed.setMinimumWidth(40)
        hbox_speed.addWidget(self.lbl_speed)
        form.addRow("Velocidade da Animação:", hbox_speed)

        self.combo_family = QComboBox()
        for family in WAVE_FAMILIES:
            self.combo_family.addItem(get_family(family).LABEL, family)
        form.addRow("Tipo de Onda:", self.combo_family)
        if params.family in WAVE_FAMILIES:
            self.combo_family.setCurrentIndex(WAVE_FAMILIES.index(params.family))

        layout.addWidget(grp_inputs, 2)

        # --- Formula + spectrum ---
        grp_series = QGroupBox("Série")
        l_series = QVBoxLayout(grp_series)
        self.lbl_formula = QLabel()
        self.lbl_formula.setTextFormat(Qt.TextFormat.RichText)
        self.lbl_formula.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_formula.setStyleSheet("font-size: 15px; font-style: italic;")
        l_series.addWidget(self.lbl_formula)

        self.spectrum = SpectrumPlot()
        l_series.addWidget(self.spectrum)
        layout.addWidget(grp_series, 3)

        # --- Connections ---
        self.slider_order.valueChanged.connect(self._on_inputs_changed)
        self.slider_speed.valueChanged.connect(self._on_inputs_changed)
        self.combo_family.currentIndexChanged.connect(self._on_inputs_changed)

        self._refresh_labels()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def parameters(self) -> SeriesParameters:
        return SeriesParameters(
            order=self.slider_order.value(),
            family=self.combo_family.currentData(),
            speed=round(self.slider_speed.value() * SPEED_STEP, 1),
        ).clamped()

    def set_mode(self, mode: ViewMode) -> None:
        """The generalization view ignores the wave family; grey it out and show its formula."""
        self._mode = ViewMode(mode)
        self.combo_family.setEnabled(self._mode != ViewMode.GENERALIZATION)
        self._refresh_labels()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _displayed_family(self) -> FunctionFamily:
        if self._mode == ViewMode.GENERALIZATION:
            return FunctionFamily.QUADRATIC_COSINE
        return self.combo_family.currentData()

    def _refresh_labels(self) -> None:
        params = self.parameters()
        self.lbl_order.setText(str(params.order))
        self.lbl_speed.setText(f"{params.speed:.1f}x")
        self.btn_order_down.setEnabled(params.order > ORDER_MIN)
        self.btn_order_up.setEnabled(params.order < ORDER_MAX)

        family = get_family(self._displayed_family())
        self.lbl_formula.setText(family.FORMULA)
        self.spectrum.set_terms(generate_terms(family.KEY, params.order), family.PALETTE_OFFSET)

    def _on_inputs_changed(self, *_) -> None:
        self._refresh_labels()
        params = self.parameters()
        logger.debug(f"Parameters changed: {params}")
        self.parameters_changed.emit(params)
