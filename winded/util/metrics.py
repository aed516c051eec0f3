"""Rolling statistics over recent per-tick stamina amounts."""

import numpy as np


class RecentSamples:
    """Keep the last ``capacity`` samples of a per-tick amount.

    Used for stamina burned and recovered per tick, so a long session reports
    recent exertion rather than an all-time average. Sample order is never
    needed, so the buffer is simply overwritten in place once full.
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._samples = np.zeros(capacity, dtype=np.float64)
        self._recorded = 0

    @property
    def capacity(self) -> int:
        return len(self._samples)

    @property
    def sample_count(self) -> int:
        return min(self._recorded, self.capacity)

    def record(self, value: float) -> None:
        self._samples[self._recorded % self.capacity] = value
        self._recorded += 1

    @property
    def mean(self) -> float:
        """Mean of the kept samples, or ``0.0`` before anything was recorded."""
        if self._recorded == 0:
            return 0.0
        return float(np.mean(self._samples[: self.sample_count]))
