# pranalyzer/policies/recency.py
from collections import OrderedDict

from pranalyzer.policies.base import FaultTally


def _simulate_recency(reference, capacity: int, evict_newest: bool) -> FaultTally:
    """
    Shared loop for LRU and MRU.
    The OrderedDict keeps resident pages from oldest to newest access, so the
    victim is always at one end: popitem(last=False) for LRU, last=True for MRU.
    """
    total = len(reference)
    if capacity == 0:
        return FaultTally(total, total)

    cache  = OrderedDict()      # page -> None, ordered by last access
    faults = 0
    for page in reference:
        if page in cache:
            cache.move_to_end(page)
            continue
        faults += 1
        if len(cache) == capacity:
            cache.popitem(last=evict_newest)
        cache[page] = None
    return FaultTally(faults, total)


def simulate_lru(reference, capacity: int) -> FaultTally:
    """Least-Recently-Used: evict the page whose last access is oldest."""
    return _simulate_recency(reference, capacity, evict_newest=False)


def simulate_mru(reference, capacity: int) -> FaultTally:
    """Most-Recently-Used: evict the page whose last access is newest."""
    return _simulate_recency(reference, capacity, evict_newest=True)
