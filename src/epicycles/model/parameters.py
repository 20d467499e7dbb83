"""
Animation Parameters
====================
The three user inputs of a view (order, family, speed) and the view modes.

The engines assume valid inputs. Anything that comes from the user (control
panel, command line) goes through `SeriesParameters.clamped()` first.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from epicycles.config import (
    DEFAULT_ORDER, DEFAULT_SPEED, ORDER_MAX, ORDER_MIN, SPEED_MAX, SPEED_MIN,
)
from epicycles.model.series import FunctionFamily

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    EPICYCLES = "epicycles"
    DECOMPOSITION = "decomposition"
    GENERALIZATION = "generalization"


@dataclass(frozen=True)
class SeriesParameters:
    order: int = DEFAULT_ORDER
    family: FunctionFamily = FunctionFamily.SQUARE
    speed: float = DEFAULT_SPEED

    def clamped(self) -> SeriesParameters:
        """Return a copy with order and speed forced into their ranges."""
        order = min(ORDER_MAX, max(ORDER_MIN, int(self.order)))
        speed = min(SPEED_MAX, max(SPEED_MIN, float(self.speed)))
        if order != self.order or speed != self.speed:
            logger.debug(f"Clamped parameters: order {self.order} -> {order}, speed {self.speed} -> {speed}")
        return replace(self, order=order, speed=speed, family=FunctionFamily(self.family))
