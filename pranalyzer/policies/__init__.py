from pranalyzer.policies.base import FaultTally, NOT_APPLICABLE
from pranalyzer.policies.strategy import Strategy

__all__ = ['FaultTally', 'NOT_APPLICABLE', 'Strategy']
