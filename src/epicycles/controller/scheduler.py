"""
Frame Scheduler
===============
Drives an engine on the Qt event loop, one synchronous tick per frame.

Why is this file needed?
------------------------
1. Responsiveness: Each tick is short and runs on the GUI thread between
   repaints; the timer is re-armed only after the tick finished, so ticks
   never pile up.
2. Teardown: A view that unmounts calls `stop()`, which cancels the timer and
   releases the resize subscription in one place.

Classes:
    FrameSurface: What the scheduler hands frames to.
    FrameScheduler: The start/stop/step loop.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol, TYPE_CHECKING

import shiboken6
from PySide6.QtCore import QObject, QTimer, Qt, Signal, SignalInstance

from epicycles.config import FRAME_INTERVAL_MS

if TYPE_CHECKING:
    from epicycles.controller.engines import AnimationEngine, ViewportGeometry

logger = logging.getLogger(__name__)


class FrameSurface(Protocol):
    def present(self, frame: Any) -> None: ...


class FrameScheduler(QObject):
    """
    Ticks an engine until stopped.

    A missing or already destroyed surface is expected during teardown: the
    tick is skipped and the loop keeps running until `stop()`.
    """
    frame_presented = Signal(int)  # tick count
    tick_failed = Signal(str)

    def __init__(
        self,
        engine: AnimationEngine,
        interval_ms: int = FRAME_INTERVAL_MS,
        parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self.engine = engine
        self.ticks: int = 0
        self.skipped: int = 0

        self._surface: FrameSurface | None = None
        self._resize_signal: SignalInstance | None = None
        self._running: bool = False

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self, surface: FrameSurface | None, resize_signal: SignalInstance | None = None) -> None:
        """
        Attach to a surface and start ticking.

        Args:
            surface: Receives every computed frame through `present(frame)`.
            resize_signal: Optional signal carrying a ViewportGeometry; it is
                connected here and disconnected in `stop()`.
        """
        if self._running:
            self.stop()

        self._surface = surface
        if resize_signal is not None:
            resize_signal.connect(self._on_viewport_changed)
            self._resize_signal = resize_signal

        self._running = True
        logger.debug(f"Scheduler started for {type(self.engine).__name__}")

        # first frame right away, the rest on the timer
        self.step()
        self._schedule_next()

    def stop(self) -> None:
        """Cancel further ticks and release the surface and resize subscription."""
        was_running = self._running
        self._running = False
        self._timer.stop()

        if self._resize_signal is not None:
            try:
                self._resize_signal.disconnect(self._on_viewport_changed)
            except (RuntimeError, TypeError):
                # sender already destroyed together with its view
                logger.debug("Resize signal was already disconnected.")
            self._resize_signal = None

        self._surface = None
        if was_running:
            logger.debug(
                f"Scheduler stopped for {type(self.engine).__name__} "
                f"after {self.ticks} ticks ({self.skipped} skipped)"
            )

    def step(self) -> bool:
        """
        Run one tick now.

        Returns:
            True if a frame was presented, False if the tick was skipped.
        """
        surface = self._surface
        if not self._surface_is_valid(surface):
            self.skipped += 1
            logger.debug("No drawing surface, tick skipped.")
            return False

        try:
            frame = self.engine.tick()
            surface.present(frame)
        except Exception as e:
            logger.exception(f"Frame computation failed: {e}")
            self.tick_failed.emit(str(e))
            return False

        self.ticks += 1
        self.frame_presented.emit(self.ticks)
        return True

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _surface_is_valid(surface: FrameSurface | None) -> bool:
        if surface is None:
            return False
        if isinstance(surface, QObject) and not shiboken6.isValid(surface):
            return False
        return True

    def _schedule_next(self) -> None:
        if self._running:
            self._timer.start()

    def _on_timeout(self) -> None:
        if not self._running:
            return
        self.step()
        self._schedule_next()

    def _on_viewport_changed(self, viewport: ViewportGeometry) -> None:
        self.engine.resize(viewport)
