# pranalyzer/policies/strategy.py
from enum import Enum

from pranalyzer.policies.base import FaultTally
from pranalyzer.policies.fifo import simulate_fifo
from pranalyzer.policies.recency import simulate_lru, simulate_mru
from pranalyzer.policies.optimal import simulate_optimal


class Strategy(Enum):
    """The four page replacement strategies, in report column order."""
    FIFO = "FIFO"
    LRU = "LRU"
    MRU = "MRU"
    OPTIMAL = "OPT"

    @property
    def label(self) -> str:
        return self.value

    def simulate(self, reference, capacity: int) -> FaultTally:
        """Run this strategy over `reference` with `capacity` frames on fresh state."""
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        return _SIMULATORS[self](reference, capacity)

    @classmethod
    def from_label(cls, label: str) -> 'Strategy':
        key = label.strip().upper()
        for strategy in cls:
            if key in (strategy.name, strategy.value):
                return strategy
        raise ValueError(f"Unknown strategy: {label}")


_SIMULATORS = {
    Strategy.FIFO: simulate_fifo,
    Strategy.LRU: simulate_lru,
    Strategy.MRU: simulate_mru,
    Strategy.OPTIMAL: simulate_optimal,
}
