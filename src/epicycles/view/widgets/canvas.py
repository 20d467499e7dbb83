from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QPainter, QPaintEvent, QPen, QPolygonF, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from epicycles.config import BACKGROUND_COLOR
from epicycles.controller.engines import ViewportGeometry
from epicycles.view.scene import Circle, Polyline, Primitive, Text


def _color(hex_color: str, alpha: float = 1.0) -> QColor:
    color = QColor(hex_color)
    color.setAlphaF(max(0.0, min(1.0, alpha)))
    return color


class AnimationCanvas(QWidget):
    """
    Paints the latest scene with QPainter.

    The widget keeps no animation state of its own: it stores the primitive
    list handed to `set_scene()` and reports its size through
    `viewport_changed`.
    """
    viewport_changed = Signal(object)  # ViewportGeometry

    def __init__(self, fixed_height: int | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._scene: list[Primitive] = []

        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.setMinimumWidth(1)
        if fixed_height is not None:
            self.setFixedHeight(fixed_height)
            self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        else:
            self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def viewport(self) -> ViewportGeometry:
        return ViewportGeometry(
            width=float(self.width()),
            height=float(self.height()),
            device_pixel_ratio=float(self.devicePixelRatioF()),
        )

    def scene(self) -> list[Primitive]:
        return list(self._scene)

    def set_scene(self, scene: Sequence[Primitive]) -> None:
        self._scene = list(scene)
        self.update()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.viewport_changed.emit(self.viewport())

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)

            for primitive in self._scene:
                if isinstance(primitive, Circle):
                    self._draw_circle(painter, primitive)
                elif isinstance(primitive, Polyline):
                    self._draw_polyline(painter, primitive)
                elif isinstance(primitive, Text):
                    self._draw_text(painter, primitive)
        finally:
            painter.end()

    # ------------------------------------------------------------------------------
    # Painters
    # ------------------------------------------------------------------------------

    @staticmethod
    def _draw_circle(painter: QPainter, circle: Circle) -> None:
        pen = QPen(_color(circle.color, circle.alpha))
        pen.setWidthF(circle.width)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QPointF(*circle.center), circle.radius, circle.radius)

    @staticmethod
    def _draw_polyline(painter: QPainter, line: Polyline) -> None:
        if len(line.points) < 2:
            return
        pen = QPen(_color(line.color, line.alpha))
        pen.setWidthF(line.width)
        if line.dash is not None:
            # Qt dash lengths are in units of the pen width
            width = max(line.width, 1.0)
            pen.setDashPattern([line.dash[0] / width, line.dash[1] / width])
        painter.setPen(pen)
        painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in line.points]))

    @staticmethod
    def _draw_text(painter: QPainter, text: Text) -> None:
        font = QFont()
        font.setPixelSize(text.size)
        font.setBold(text.bold)
        painter.setFont(font)
        painter.setPen(_color(text.color))

        x, y = text.position
        metrics = painter.fontMetrics()
        width = metrics.horizontalAdvance(text.text)
        painter.drawText(QPointF(x - width / 2, y), text.text)
