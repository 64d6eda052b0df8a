from typing import Dict, List, Optional

from pranalyzer.policies import FaultTally, Strategy


class Aggregator:
    """Cumulative per-strategy tallies, one row per page size.

    Rows are indexed by page size. Storage grows on the first merge at a new
    page size; page sizes never merged stay None.
    """

    def __init__(self):
        self._rows: List[Optional[Dict[Strategy, FaultTally]]] = []

    def merge(self, page_size: int, tallies: Dict[Strategy, FaultTally]):
        if page_size < 0:
            raise ValueError(f"Page size must be non-negative, got {page_size}")
        if page_size >= len(self._rows):
            self._rows.extend([None] * (page_size + 1 - len(self._rows)))

        row = self._rows[page_size]
        if row is None:
            self._rows[page_size] = dict(tallies)
            return
        for strategy, tally in tallies.items():
            if strategy in row:
                row[strategy] = row[strategy].merge(tally)
            else:
                row[strategy] = tally

    def row(self, page_size: int) -> Optional[Dict[Strategy, FaultTally]]:
        if page_size >= len(self._rows):
            return None
        row = self._rows[page_size]
        return dict(row) if row is not None else None

    @property
    def rows(self) -> List[Optional[Dict[Strategy, FaultTally]]]:
        return [dict(r) if r is not None else None for r in self._rows]

    @property
    def page_sizes(self) -> List[int]:
        return [i for i, r in enumerate(self._rows) if r is not None]

    def hit_rates(self, strategy: Strategy):
        """(page_size, hit_rate) pairs for rows where the strategy has a computed rate."""
        points = []
        for page_size in self.page_sizes:
            tally = self._rows[page_size].get(strategy)
            if tally is None or tally.hit_rate is None:
                continue
            points.append((page_size, tally.hit_rate))
        return points

    def __len__(self):
        return len(self._rows)
