"""
Fourier Series Families
=======================
Closed-form Fourier coefficients for the supported function families.

Why is this file needed?
------------------------
1. Single source: Both the epicycle chain and the decomposition rows are fed
   from the same term list, so the formulas live in exactly one place.
2. Extensibility: A new family is one registered class; the engines, the
   scenes and the control panel pick it up from the registry.

Classes:
    FunctionFamily: Keys of the supported families.
    Term: One harmonic (frequency multiplier, signed amplitude, phase).
    SeriesFamily: Abstract base class for a family's coefficient formula.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class FunctionFamily(str, Enum):
    """The supported function families."""
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGULAR = "triangular"
    QUADRATIC_COSINE = "quadratic-cosine"


@dataclass(frozen=True)
class Term:
    """A single rotating vector of the truncated series."""
    harmonic_index: int
    amplitude: float
    phase: float = 0.0


class SeriesFamily(ABC):
    """
    Abstract base class for a family of Fourier coefficients.

    Subclasses define `term(k)` for the 0-based loop index k and the
    presentation metadata used by the engines and the control panel.
    """
    KEY: FunctionFamily
    LABEL: str = "Series"
    FORMULA: str = ""

    # Pixel radius of a unit amplitude is `height / PIXEL_DIVISOR * PIXEL_GAIN`
    PIXEL_DIVISOR: float = 5.0
    PIXEL_GAIN: float = 1.0

    FIRST_INDEX: int = 0  # index shown on the first decomposition row
    PALETTE_OFFSET: int = 0
    DC_OFFSET: float = 0.0

    @abstractmethod
    def term(self, k: int) -> Term:
        """
        Get the k-th term of the series.

        Args:
            k: 0-based position of the term in the truncated series.

        Returns:
            The harmonic term.
        """
        pass

    def terms(self, order: int) -> tuple[Term, ...]:
        """
        Get the first `order` terms of the series.

        Raises:
            ValueError: If order is smaller than 1.
        """
        if order < 1:
            raise ValueError(f"Truncation order must be at least 1, got {order}.")
        return tuple(self.term(k) for k in range(order))

    def pixel_scale(self, height: float) -> float:
        """Pixels per unit amplitude for a canvas of the given height."""
        return height / self.PIXEL_DIVISOR * self.PIXEL_GAIN

    def fundamental_amplitude(self) -> float:
        """Theoretical peak of the fundamental harmonic."""
        return abs(self.term(0).amplitude)


_REGISTRY: dict[FunctionFamily, type[SeriesFamily]] = {}


def register_family(cls: type[SeriesFamily]) -> type[SeriesFamily]:
    """Class decorator to register a series family by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[FunctionFamily(key)] = cls
    return cls


@register_family
class SquareWave(SeriesFamily):
    """Square wave: odd harmonics with amplitude 4/(nπ)."""
    KEY = FunctionFamily.SQUARE
    LABEL = "Quadrada"
    FORMULA = (
        "<i>f</i><sub>N</sub>(<i>t</i>) = <sup>4</sup>&frasl;<sub>&pi;</sub> "
        "&sum;<sub><i>k</i>=0</sub><sup><i>N</i>-1</sup> "
        "(<sup>1</sup>&frasl;<sub>2<i>k</i>+1</sub>) sin((2<i>k</i>+1)<i>t</i>)"
    )

    def term(self, k: int) -> Term:
        n = 2 * k + 1
        return Term(harmonic_index=n, amplitude=4 / (n * math.pi))


@register_family
class SawtoothWave(SeriesFamily):
    """Sawtooth wave: every harmonic, alternating sign, amplitude 2/(nπ)."""
    KEY = FunctionFamily.SAWTOOTH
    LABEL = "Dente de Serra"
    FORMULA = (
        "<i>f</i><sub>N</sub>(<i>t</i>) = <sup>2</sup>&frasl;<sub>&pi;</sub> "
        "&sum;<sub><i>k</i>=1</sub><sup><i>N</i></sup> "
        "(<sup>(-1)<sup><i>k</i>+1</sup></sup>&frasl;<sub><i>k</i></sub>) sin(<i>kt</i>)"
    )
    PIXEL_GAIN = 1.5
    FIRST_INDEX = 1

    def term(self, k: int) -> Term:
        n = k + 1
        return Term(harmonic_index=n, amplitude=(2 / (n * math.pi)) * (-1) ** (n + 1))


@register_family
class TriangularWave(SeriesFamily):
    """Triangular wave: odd harmonics, alternating sign, amplitude 8/(π²n²)."""
    KEY = FunctionFamily.TRIANGULAR
    LABEL = "Triangular"
    FORMULA = (
        "<i>f</i><sub>N</sub>(<i>t</i>) = <sup>8</sup>&frasl;<sub>&pi;<sup>2</sup></sub> "
        "&sum;<sub><i>k</i>=0</sub><sup><i>N</i>-1</sup> "
        "(<sup>(-1)<sup><i>k</i></sup></sup>&frasl;<sub>(2<i>k</i>+1)<sup>2</sup></sub>) "
        "sin((2<i>k</i>+1)<i>t</i>)"
    )
    PIXEL_GAIN = 3.0

    def term(self, k: int) -> Term:
        n = 2 * k + 1
        return Term(harmonic_index=n, amplitude=(8 / math.pi ** 2) * ((-1) ** k / n ** 2))


@register_family
class QuadraticCosine(SeriesFamily):
    """
    Cosine series of t² on [-π, π].

    The constant a0 = π²/3 is not a rotating vector; it is exposed as
    DC_OFFSET and shifts the chain origin instead.
    """
    KEY = FunctionFamily.QUADRATIC_COSINE
    LABEL = "Quadrática (t²)"
    FORMULA = (
        "<i>t</i><sup>2</sup> &asymp; <sup>&pi;<sup>2</sup></sup>&frasl;<sub>3</sub> + "
        "&sum;<sub><i>n</i>=1</sub><sup><i>N</i></sup> "
        "(<sup>4(-1)<sup><i>n</i></sup></sup>&frasl;<sub><i>n</i><sup>2</sup></sub>) cos(<i>nt</i>)"
    )
    PIXEL_DIVISOR = 15.0
    FIRST_INDEX = 1
    PALETTE_OFFSET = 1
    DC_OFFSET = math.pi ** 2 / 3

    def term(self, k: int) -> Term:
        n = k + 1
        # cos(x) == sin(x + π/2)
        return Term(harmonic_index=n, amplitude=4 * (-1) ** n / n ** 2, phase=math.pi / 2)


# ------------------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------------------

def get_family(key: FunctionFamily | str) -> SeriesFamily:
    """
    Look up a registered family.

    Raises:
        KeyError: If no family is registered for the key.
    """
    try:
        family = FunctionFamily(key)
    except ValueError:
        raise KeyError(f"No series family registered for key '{key}'") from None
    cls = _REGISTRY.get(family)
    if not cls:
        raise KeyError(f"No series family registered for key '{key}'")
    return cls()


def list_families() -> list[FunctionFamily]:
    return list(_REGISTRY.keys())


def generate_terms(family: FunctionFamily | str, order: int) -> tuple[Term, ...]:
    """
    Generate the truncated series of a family.

    Args:
        family: Function family key.
        order: Number of rotating vectors (>= 1).

    Returns:
        Exactly `order` terms, in chain order.
    """
    return get_family(family).terms(order)


def dc_offset(family: FunctionFamily | str) -> float:
    """The constant (non-rotating) term of a family, 0.0 for the periodic waves."""
    return get_family(family).DC_OFFSET


def partial_sum(
    terms: Sequence[Term],
    t: float | npt.NDArray[np.float64],
    dc: float = 0.0
) -> float | npt.NDArray[np.float64]:
    """
    Evaluate dc + Σ a·sin(n·t + φ).

    Args:
        terms: Term list.
        t: Scalar time or array of times.
        dc: Constant term added to the sum.
    """
    t_array = np.atleast_1d(np.asarray(t, dtype=np.float64))
    total = np.full(t_array.shape, dc, dtype=np.float64)
    for term in terms:
        total += term.amplitude * np.sin(term.harmonic_index * t_array + term.phase)

    if np.isscalar(t):
        return float(total[0])
    return total
