"""
Animation Engines
=================
Per-view state machines that turn (terms, time cursor, viewport) into one
immutable frame per tick.

Why is this file needed?
------------------------
1. Decoupling: The engines know nothing about Qt. The scheduler ticks them and
   the views paint whatever frame they return, so every rule about time
   direction, buffers and layout is testable without a display.
2. Single source: Both views share `AnimationEngine`; the opposite time
   directions are a `TimeDirection` value, not two copies of the loop.

Classes:
    ViewportGeometry: Drawable size of the surface.
    EpicycleEngine: Chain + trailing wave, time moving forward.
    GeneralizationEngine: EpicycleEngine for the t² cosine series.
    DecompositionEngine: Per-harmonic rows + summed row, time moving backward.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from epicycles.config import (
    BASE_TIME_STEP, CHAIN_ORIGIN_X_RATIO, DECOMPOSITION_TIME_STEP, LEFT_LABEL_WIDTH, RESULT_AREA_HEIGHT,
    RIGHT_LABEL_WIDTH, ROW_HEIGHT, WAVE_PADDING, WAVE_START_X_RATIO,
)
from epicycles.model.chain import ChainGeometry, Point, evaluate_chain
from epicycles.model.cursor import TimeCursor, TimeDirection
from epicycles.model.decomposition import (
    DecompositionWindow, RowLabel, component_scale, compute_window, result_label, row_labels, summed_scale,
)
from epicycles.model.series import FunctionFamily, SeriesFamily, Term, get_family
from epicycles.model.trace import TraceBuffer

logger = logging.getLogger(__name__)

FrameT = TypeVar("FrameT")


@dataclass(frozen=True)
class ViewportGeometry:
    """Drawable area in device-independent pixels."""
    width: float
    height: float
    device_pixel_ratio: float = 1.0


# ------------------------------------------------------------------------------
# Frames
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class EpicycleFrame:
    time: float
    geometry: ChainGeometry
    trace: tuple[float, ...]
    wave_start_x: float
    viewport: ViewportGeometry
    palette_offset: int = 0


@dataclass(frozen=True)
class DecompositionFrame:
    time: float
    window: DecompositionWindow
    component_scale: float
    summed_scale: float
    labels: tuple[RowLabel, ...]
    result: RowLabel
    wave_start_x: float
    viewport: ViewportGeometry
    row_height: int = ROW_HEIGHT
    result_height: int = RESULT_AREA_HEIGHT

    @property
    def wave_length(self) -> int:
        return self.window.width


# ------------------------------------------------------------------------------
# Engines
# ------------------------------------------------------------------------------

class AnimationEngine(ABC, Generic[FrameT]):
    """
    Shared tick logic.

    A tick applies a pending resize, advances the cursor by its signed step,
    and computes the frame for the new time.
    """
    DIRECTION: TimeDirection = TimeDirection.FORWARD

    def __init__(
        self,
        family: FunctionFamily | str,
        order: int,
        speed: float,
        viewport: ViewportGeometry,
        base_step: float = BASE_TIME_STEP
    ) -> None:
        self.family: SeriesFamily = get_family(family)
        self.terms: tuple[Term, ...] = self.family.terms(order)
        self.cursor = TimeCursor(step=base_step, speed=speed, direction=self.DIRECTION)
        self.viewport = viewport
        self._pending_viewport: ViewportGeometry | None = None
        self._apply_viewport(viewport)

        logger.debug(
            f"{type(self).__name__} created: family={self.family.KEY.value}, order={order}, "
            f"speed={speed}, viewport={viewport.width:g}x{viewport.height:g}"
        )

    @property
    def order(self) -> int:
        return len(self.terms)

    @property
    def time(self) -> float:
        return self.cursor.value

    def resize(self, viewport: ViewportGeometry) -> None:
        """Record a new viewport; it takes effect at the start of the next tick."""
        self._pending_viewport = viewport

    def tick(self) -> FrameT:
        if self._pending_viewport is not None:
            viewport, self._pending_viewport = self._pending_viewport, None
            if viewport != self.viewport:
                self.viewport = viewport
                self._apply_viewport(viewport)
                logger.debug(f"{type(self).__name__} resized to {viewport.width:g}x{viewport.height:g}")

        self.cursor.advance()
        return self._compute()

    @abstractmethod
    def _apply_viewport(self, viewport: ViewportGeometry) -> None:
        """Recompute layout derived from the viewport."""
        pass

    @abstractmethod
    def _compute(self) -> FrameT:
        """Build the frame for the current cursor value."""
        pass


class EpicycleEngine(AnimationEngine[EpicycleFrame]):
    """Chain of epicycles with a trailing wave of the tip's height."""
    DIRECTION = TimeDirection.FORWARD

    def __init__(
        self,
        family: FunctionFamily | str,
        order: int,
        speed: float,
        viewport: ViewportGeometry,
        base_step: float = BASE_TIME_STEP
    ) -> None:
        self.trace = TraceBuffer(0)
        self.origin = Point(0.0, 0.0)
        self.wave_start_x = 0.0
        self.scale = 1.0
        super().__init__(family, order, speed, viewport, base_step)

    def _apply_viewport(self, viewport: ViewportGeometry) -> None:
        self.origin = Point(viewport.width * CHAIN_ORIGIN_X_RATIO, viewport.height / 2)
        self.wave_start_x = viewport.width * WAVE_START_X_RATIO
        self.scale = self.family.pixel_scale(viewport.height)
        # room right of the wave start, whole pixels only
        self.trace.resize(max(0, math.floor(viewport.width - self.wave_start_x + 1e-9)))

    def _compute(self) -> EpicycleFrame:
        geometry = evaluate_chain(
            self.origin,
            self.terms,
            self.cursor.value,
            scale=self.scale,
            dc_offset=self.family.DC_OFFSET,
        )
        self.trace.push(geometry.tip.y)

        return EpicycleFrame(
            time=self.cursor.value,
            geometry=geometry,
            trace=self.trace.values(),
            wave_start_x=self.wave_start_x,
            viewport=self.viewport,
            palette_offset=self.family.PALETTE_OFFSET,
        )


class GeneralizationEngine(EpicycleEngine):
    """Epicycles of the cosine series of t² on [-π, π], DC term included."""

    def __init__(
        self,
        order: int,
        speed: float,
        viewport: ViewportGeometry,
        base_step: float = BASE_TIME_STEP
    ) -> None:
        super().__init__(FunctionFamily.QUADRATIC_COSINE, order, speed, viewport, base_step)


class DecompositionEngine(AnimationEngine[DecompositionFrame]):
    """
    Isolated harmonic rows and their sum, resampled every frame.

    Time runs backward here so that the rows scroll in the same visual
    direction as the trailing wave of the epicycle view.
    """
    DIRECTION = TimeDirection.BACKWARD

    def __init__(
        self,
        family: FunctionFamily | str,
        order: int,
        speed: float,
        viewport: ViewportGeometry,
        base_step: float = BASE_TIME_STEP,
        time_step: float = DECOMPOSITION_TIME_STEP
    ) -> None:
        self.time_step = time_step
        self.wave_start_x = float(LEFT_LABEL_WIDTH + WAVE_PADDING)
        self.wave_length = 0
        super().__init__(family, order, speed, viewport, base_step)
        self._component_scale = component_scale(self.family, ROW_HEIGHT)
        self._labels = tuple(row_labels(self.terms, self.family))

    def _apply_viewport(self, viewport: ViewportGeometry) -> None:
        wave_end_x = viewport.width - RIGHT_LABEL_WIDTH - WAVE_PADDING
        self.wave_length = max(0, int(wave_end_x - self.wave_start_x))

    def _compute(self) -> DecompositionFrame:
        window = compute_window(self.terms, self.cursor.value, self.wave_length, self.time_step)

        return DecompositionFrame(
            time=self.cursor.value,
            window=window,
            component_scale=self._component_scale,
            summed_scale=summed_scale(window.summed, RESULT_AREA_HEIGHT / 2),
            labels=self._labels,
            result=result_label(self.terms, window),
            wave_start_x=self.wave_start_x,
            viewport=self.viewport,
        )
