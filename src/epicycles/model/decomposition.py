"""
Harmonic Decomposition
======================
Sample windows for the decomposition view: one row per harmonic plus the
pointwise sum of all rows.

Why is this file needed?
------------------------
The decomposition view does not accumulate a history like the epicycle trace.
Every frame it resamples the whole visible width from the term list, so the
window always ends at the current time and scrolls as time moves.

Scaling rules:
    - All harmonic rows share one fixed scale, derived from the fundamental's
      theoretical amplitude, so their heights stay comparable.
    - The summed row is normalised to its own visible window every frame,
      so its scale changes as the window content changes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

import numpy as np

from epicycles.config import DECOMPOSITION_TIME_STEP, ROW_FILL_RATIO
from epicycles.model.series import FunctionFamily, SeriesFamily, Term, get_family

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecompositionWindow:
    """
    Samples of one frame.

    Attributes:
        times: (W,) sampled instants, oldest first, the last one is "now".
        per_harmonic: (N, W) isolated component of each harmonic.
        summed: (W,) pointwise sum over harmonics.
    """
    times: npt.NDArray[np.float64]
    per_harmonic: npt.NDArray[np.float64]
    summed: npt.NDArray[np.float64]

    @property
    def width(self) -> int:
        return int(self.times.shape[0])

    @property
    def peak(self) -> float:
        """Observed max |summed| over the window (0.0 for an empty window)."""
        if self.summed.size == 0:
            return 0.0
        return float(np.max(np.abs(self.summed)))


@dataclass(frozen=True)
class RowLabel:
    """Text data shown next to a row."""
    index: int
    frequency: int
    amplitude: float


def compute_window(
    terms: Sequence[Term],
    time: float,
    width: int,
    time_step: float = DECOMPOSITION_TIME_STEP
) -> DecompositionWindow:
    """
    Sample every harmonic over a window ending at `time`.

    Args:
        terms: Term list.
        time: Current cursor value.
        width: Number of samples (one per pixel).
        time_step: Time between neighbouring samples.

    Returns:
        The sampled window. Offset i samples t = time + (i - width) * time_step.
    """
    width = max(0, int(width))
    offsets = np.arange(width, dtype=np.float64)
    times = time + (offsets - width) * time_step

    n = np.array([t.harmonic_index for t in terms], dtype=np.float64).reshape(-1, 1)
    amplitude = np.array([t.amplitude for t in terms], dtype=np.float64).reshape(-1, 1)
    phase = np.array([t.phase for t in terms], dtype=np.float64).reshape(-1, 1)

    per_harmonic = amplitude * np.sin(n * times[np.newaxis, :] + phase)
    summed = per_harmonic.sum(axis=0) if len(terms) else np.zeros(width, dtype=np.float64)

    return DecompositionWindow(times=times, per_harmonic=per_harmonic, summed=summed)


def component_scale(family: FunctionFamily | str | SeriesFamily, row_height: float) -> float:
    """Pixels per unit amplitude, shared by all harmonic rows."""
    if not isinstance(family, SeriesFamily):
        family = get_family(family)
    return (row_height / 2) * ROW_FILL_RATIO / family.fundamental_amplitude()


def summed_scale(summed: npt.NDArray[np.float64], half_height: float) -> float:
    """
    Pixels per unit amplitude for the summed row, normalised to the window.

    Returns 1.0 when the window is empty or flat, so callers never divide
    by zero.
    """
    if summed.size == 0:
        return 1.0
    max_abs = float(np.max(np.abs(summed)))
    if max_abs > 0 and np.isfinite(max_abs):
        scale = half_height * ROW_FILL_RATIO / max_abs
        if np.isfinite(scale):
            return scale

    logger.debug("Degenerate summed window (max |y| = %s), using neutral scale.", max_abs)
    return 1.0


def row_labels(terms: Sequence[Term], family: FunctionFamily | str | SeriesFamily) -> list[RowLabel]:
    """Index, frequency and amplitude shown next to each harmonic row."""
    if not isinstance(family, SeriesFamily):
        family = get_family(family)
    return [
        RowLabel(index=k + family.FIRST_INDEX, frequency=term.harmonic_index, amplitude=term.amplitude)
        for k, term in enumerate(terms)
    ]


def result_label(terms: Sequence[Term], window: DecompositionWindow) -> RowLabel:
    """
    Labels of the summed row.

    The frequency is the fundamental's harmonic index, the amplitude is the
    observed peak of the visible window.
    """
    fundamental = terms[0].harmonic_index if terms else 1
    return RowLabel(index=0, frequency=fundamental, amplitude=window.peak)
