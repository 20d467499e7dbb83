"""
Epicycle Chain
==============
Evaluates a term list as vectors chained tip-to-tail.

The chain lives in screen coordinates: x grows to the right, y grows
downwards. A positive amplitude therefore starts pointing right and rotates
clockwise on screen as time increases.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from epicycles.model.series import Term


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class ChainSegment:
    """One epicycle: the circle around `center` and the spoke to `endpoint`."""
    center: Point
    radius: float
    endpoint: Point


@dataclass(frozen=True)
class ChainGeometry:
    tip: Point
    segments: tuple[ChainSegment, ...]

    @property
    def anchor(self) -> Point:
        """Centre of the first circle (the origin shifted by the DC term)."""
        if self.segments:
            return self.segments[0].center
        return self.tip


def evaluate_chain(
    origin: Point | tuple[float, float],
    terms: Sequence[Term],
    time: float,
    *,
    scale: float = 1.0,
    dc_offset: float = 0.0
) -> ChainGeometry:
    """
    Compute the partial-sum positions of the chain at a given time.

    Args:
        origin: Fixed anchor of the chain.
        terms: Terms in chain order.
        time: Animation time.
        scale: Pixels per unit amplitude.
        dc_offset: Constant term in amplitude units. It lifts the origin
            (subtracted from y) and contributes no circle.

    Returns:
        The tip and one segment per term.
    """
    x = float(origin[0])
    y = float(origin[1]) - dc_offset * scale

    segments: list[ChainSegment] = []
    for term in terms:
        prev = Point(x, y)
        radius = term.amplitude * scale
        angle = term.harmonic_index * time + term.phase

        x += radius * math.cos(angle)
        y += radius * math.sin(angle)

        segments.append(ChainSegment(center=prev, radius=abs(radius), endpoint=Point(x, y)))

    return ChainGeometry(tip=Point(x, y), segments=tuple(segments))
