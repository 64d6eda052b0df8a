from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FaultTally:
    """Fault count and total accesses for one or more simulated runs.

    A tally of (-1, -1) is the not-applicable sentinel used for degenerate
    page-size configurations.
    """
    faults: int
    total: int

    @property
    def applicable(self) -> bool:
        return self.total >= 0

    @property
    def hits(self) -> int:
        return self.total - self.faults

    @property
    def hit_rate(self) -> Optional[float]:
        if not self.applicable or self.total == 0:
            return None
        return self.hits / self.total

    def merge(self, other: 'FaultTally') -> 'FaultTally':
        if self.applicable != other.applicable:
            raise ValueError("cannot merge a not-applicable tally with a computed one")
        if not self.applicable:
            return NOT_APPLICABLE
        return FaultTally(self.faults + other.faults, self.total + other.total)


NOT_APPLICABLE = FaultTally(-1, -1)
