from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from pranalyzer.policies import Strategy
from pranalyzer.simulation.aggregator import Aggregator
from pranalyzer.simulation.process import PageConfig, ProcessSimulator
from pranalyzer.utils.trace_generator import ReferenceGenerator


@dataclass(frozen=True)
class SweepParameters:
    ram_size: int
    num_processes: int
    process_size: int

    def validate(self):
        if self.ram_size < 0:
            raise ValueError(f"RAM size must be non-negative, got {self.ram_size}")
        if self.process_size < 0:
            raise ValueError(f"Process size must be non-negative, got {self.process_size}")
        if self.num_processes < 1:
            raise ValueError(f"Number of processes must be at least 1, got {self.num_processes}")
        return self


def page_configs(ram_size: int, process_size: int):
    """Yield a PageConfig for every page size from 0 to min(ram_size, process_size)."""
    for page_size in range(min(ram_size, process_size) + 1):
        yield PageConfig.from_sizes(ram_size, process_size, page_size)


class SweepController:
    """Run the full page-size sweep for one set of parameters.

    Each call to run() builds a fresh Aggregator; nothing is shared between
    sweeps except the generator's random state.
    """

    def __init__(self, params: SweepParameters, generator=None,
                 strategies: Iterable[Strategy] = tuple(Strategy)):
        self.params = params.validate()
        self.generator = generator if generator is not None else ReferenceGenerator()
        self.simulator = ProcessSimulator(self.generator, strategies)

    @property
    def strategies(self):
        return self.simulator.strategies

    def run(self, progress: Optional[Callable[[dict], None]] = None) -> Aggregator:
        """Simulate every process at every page size.

        progress, if given, receives a dict after each page size completes:
        page_size, page_count, frame_capacity, row and progress (percent).
        """
        aggregator = Aggregator()
        configs = list(page_configs(self.params.ram_size, self.params.process_size))
        for n, config in enumerate(configs, start=1):
            for _ in range(self.params.num_processes):
                aggregator.merge(config.page_size, self.simulator.run(config))
            if progress is not None:
                progress({
                    'page_size': config.page_size,
                    'page_count': config.page_count,
                    'frame_capacity': config.frame_capacity,
                    'row': aggregator.row(config.page_size),
                    'progress': n / len(configs) * 100,
                })
        return aggregator
