from dataclasses import dataclass
from typing import Dict, Iterable

from pranalyzer.policies import FaultTally, NOT_APPLICABLE, Strategy


@dataclass(frozen=True)
class PageConfig:
    """Page count and frame capacity derived from one page size.

    Page size 0 has no meaningful page count, so both counts are -1 and the
    configuration is degenerate.
    """
    page_size: int
    page_count: int
    frame_capacity: int

    @property
    def degenerate(self) -> bool:
        return self.page_count < 0

    @classmethod
    def from_sizes(cls, ram_size: int, process_size: int, page_size: int) -> 'PageConfig':
        if page_size == 0:
            return cls(page_size, -1, -1)
        page_count = -(-process_size // page_size)   # ceiling division
        frame_capacity = ram_size // page_size
        return cls(page_size, page_count, frame_capacity)


def simulate_reference(reference, capacity: int,
                       strategies: Iterable[Strategy] = tuple(Strategy)) -> Dict[Strategy, FaultTally]:
    """Run every strategy over the same reference string and capacity."""
    reference = tuple(reference)
    return {strategy: strategy.simulate(reference, capacity) for strategy in strategies}


class ProcessSimulator:
    """Simulate one process: generate its reference string and run all strategies over it.

    - generator: object with generate(page_count, frame_capacity) -> sequence of page ids
    - strategies: strategies to run, in report order
    """

    def __init__(self, generator, strategies: Iterable[Strategy] = tuple(Strategy)):
        self.generator = generator
        self.strategies = tuple(strategies)

    def run(self, config: PageConfig) -> Dict[Strategy, FaultTally]:
        if config.degenerate:
            return {strategy: NOT_APPLICABLE for strategy in self.strategies}
        reference = self.generator.generate(config.page_count, config.frame_capacity)
        return simulate_reference(reference, config.frame_capacity, self.strategies)
