"""
Scene Building
==============
Turns engine frames into flat lists of drawing primitives.

Why is this file needed?
------------------------
1. Testability: What gets drawn (which circles, which polylines, which
   labels and colours) is decided here without Qt, so it can be checked
   without a display.
2. Thin painter: The canvas only has to map three primitive types onto
   QPainter calls.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union, TYPE_CHECKING

import numpy as np

from epicycles.config import (
    CENTER_LINE_COLOR, CIRCLE_ALPHA, GUIDE_COLOR, INFO_LABEL_COLOR, LEFT_LABEL_WIDTH, PALETTE,
    RESULT_LABEL_COLOR, RIGHT_LABEL_WIDTH, ROW_LABEL_COLOR, SPOKE_ALPHA, SPOKE_COLOR, WAVE_COLOR,
)

if TYPE_CHECKING:
    from epicycles.controller.engines import DecompositionFrame, EpicycleFrame


# -------------------------------------------------------------------------------
# Primitives
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class Circle:
    center: tuple[float, float]
    radius: float
    color: str
    alpha: float = 1.0
    width: float = 2.0


@dataclass(frozen=True)
class Polyline:
    points: tuple[tuple[float, float], ...]
    color: str
    alpha: float = 1.0
    width: float = 1.0
    dash: tuple[float, float] | None = None


@dataclass(frozen=True)
class Text:
    position: tuple[float, float]  # anchor: horizontal centre, baseline
    text: str
    color: str
    size: int = 14
    bold: bool = False


Primitive = Union[Circle, Polyline, Text]


def palette_color(index: int) -> str:
    """Colour of a harmonic, cycling through the palette."""
    return PALETTE[index % len(PALETTE)]


def _wave_points(x0: float, center_y: float, samples: np.ndarray, scale: float) -> tuple[tuple[float, float], ...]:
    """One point per pixel, starting at x0."""
    xs = x0 + np.arange(samples.shape[0], dtype=np.float64)
    ys = center_y + samples * scale
    return tuple(zip(xs.tolist(), ys.tolist()))


# -------------------------------------------------------------------------------
# Epicycle view
# -------------------------------------------------------------------------------

def build_epicycle_scene(frame: EpicycleFrame) -> list[Primitive]:
    """
    Circles and spokes of the chain, the dashed guide from the tip to the
    wave, and the trailing wave itself.
    """
    scene: list[Primitive] = []

    for k, segment in enumerate(frame.geometry.segments):
        scene.append(Circle(
            center=tuple(segment.center),
            radius=segment.radius,
            color=palette_color(k + frame.palette_offset),
            alpha=CIRCLE_ALPHA,
            width=2.0,
        ))
        scene.append(Polyline(
            points=(tuple(segment.center), tuple(segment.endpoint)),
            color=SPOKE_COLOR,
            alpha=SPOKE_ALPHA,
            width=1.0,
        ))

    tip = frame.geometry.tip
    scene.append(Polyline(
        points=((tip.x, tip.y), (frame.wave_start_x, tip.y)),
        color=GUIDE_COLOR,
        width=1.0,
        dash=(4, 4),
    ))

    if len(frame.trace) > 1:
        trace = np.asarray(frame.trace, dtype=np.float64)
        scene.append(Polyline(
            points=_wave_points(frame.wave_start_x, 0.0, trace, 1.0),
            color=WAVE_COLOR,
            width=3.0,
        ))

    return scene


# -------------------------------------------------------------------------------
# Decomposition view
# -------------------------------------------------------------------------------

def build_components_scene(frame: DecompositionFrame) -> list[Primitive]:
    """One row per harmonic: centre line, scaled wave, index and frequency/amplitude labels."""
    scene: list[Primitive] = []
    width = frame.viewport.width
    wave_end_x = frame.wave_start_x + frame.wave_length
    label_x = width - RIGHT_LABEL_WIDTH / 2

    for k, label in enumerate(frame.labels):
        center_y = k * frame.row_height + frame.row_height / 2

        scene.append(Polyline(
            points=((frame.wave_start_x, center_y), (wave_end_x, center_y)),
            color=CENTER_LINE_COLOR,
            width=1.0,
            dash=(2, 3),
        ))

        if frame.wave_length > 1:
            scene.append(Polyline(
                points=_wave_points(frame.wave_start_x, center_y, frame.window.per_harmonic[k], frame.component_scale),
                color=palette_color(k),
                width=2.0,
            ))

        scene.append(Text((LEFT_LABEL_WIDTH / 2, center_y), f"k = {label.index}", ROW_LABEL_COLOR, bold=True))
        scene.append(Text((label_x, center_y - 10), f"Freq: {label.frequency}", INFO_LABEL_COLOR))
        scene.append(Text((label_x, center_y + 15), f"Amp: {label.amplitude:.3f}", INFO_LABEL_COLOR))

    return scene


def build_result_scene(frame: DecompositionFrame, panel_width: float | None = None) -> list[Primitive]:
    """
    The summed wave, auto-scaled to its panel, with its labels.

    The wave keeps the sample positions of the component rows so it lines up
    with them. The labels are centred in the right column of the result panel
    itself, which is wider than the component canvas once the rows scroll.
    """
    scene: list[Primitive] = []
    center_y = frame.result_height / 2
    width = frame.viewport.width if panel_width is None else panel_width
    label_x = width - RIGHT_LABEL_WIDTH / 2

    if frame.wave_length > 1:
        scene.append(Polyline(
            points=_wave_points(frame.wave_start_x, center_y, frame.window.summed, frame.summed_scale),
            color=WAVE_COLOR,
            width=3.0,
        ))

    scene.append(Text((LEFT_LABEL_WIDTH / 2, center_y), "Resultado", RESULT_LABEL_COLOR, size=16, bold=True))
    scene.append(Text((label_x, center_y - 10), f"Freq: {frame.result.frequency}", INFO_LABEL_COLOR))
    scene.append(Text((label_x, center_y + 15), f"Amp: {frame.result.amplitude:.3f}", INFO_LABEL_COLOR))

    return scene
