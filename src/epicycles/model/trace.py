from __future__ import annotations

from collections import deque
from itertools import islice


class TraceBuffer:
    """
    Bounded history of the chain output, most recent sample first.

    Once `capacity` samples have been pushed, every push evicts the oldest
    one, so the buffer is a trailing window exactly `capacity` samples long.
    """
    def __init__(self, capacity: int) -> None:
        self._samples: deque[float] = deque(maxlen=max(0, int(capacity)))

    @property
    def capacity(self) -> int:
        return self._samples.maxlen

    def push(self, value: float) -> None:
        """Insert at the front; the back falls off when full."""
        self._samples.appendleft(float(value))

    def values(self) -> tuple[float, ...]:
        return tuple(self._samples)

    def resize(self, capacity: int) -> None:
        """Change the capacity, dropping the oldest samples if it shrinks."""
        capacity = max(0, int(capacity))
        if capacity == self.capacity:
            return
        # keep the most recent samples, which sit at the front
        self._samples = deque(islice(self._samples, capacity), maxlen=capacity)

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)
