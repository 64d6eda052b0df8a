from pranalyzer.simulation.process import PageConfig, ProcessSimulator, simulate_reference
from pranalyzer.simulation.aggregator import Aggregator
from pranalyzer.simulation.sweep import SweepController, SweepParameters, page_configs
from pranalyzer.simulation.history import SessionHistory

__all__ = [
    'PageConfig', 'ProcessSimulator', 'simulate_reference',
    'Aggregator',
    'SweepController', 'SweepParameters', 'page_configs',
    'SessionHistory',
]
