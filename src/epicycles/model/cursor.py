from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from epicycles.config import BASE_TIME_STEP


class TimeDirection(IntEnum):
    """Sign of the per-frame time increment."""
    FORWARD = 1
    BACKWARD = -1


@dataclass
class TimeCursor:
    """Scalar animation time, advanced once per frame."""
    step: float = BASE_TIME_STEP
    speed: float = 1.0
    direction: TimeDirection = TimeDirection.FORWARD
    value: float = 0.0
    ticks: int = 0

    @property
    def increment(self) -> float:
        """Signed time added by one `advance()`."""
        return int(self.direction) * self.step * self.speed

    def advance(self) -> float:
        self.value += self.increment
        self.ticks += 1
        return self.value

    def reset(self) -> None:
        self.value = 0.0
        self.ticks = 0
