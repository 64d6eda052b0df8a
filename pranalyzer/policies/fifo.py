# pranalyzer/policies/fifo.py
from collections import deque

from pranalyzer.policies.base import FaultTally


def simulate_fifo(reference, capacity: int) -> FaultTally:
    """
    First-In-First-Out replacement.
    Evicts the page loaded earliest; hits do not change arrival order.
    """
    total = len(reference)
    if capacity == 0:
        return FaultTally(total, total)

    resident = set()
    order    = deque()          # arrival order, oldest on the left
    faults   = 0
    for page in reference:
        if page in resident:
            continue
        faults += 1
        if len(resident) == capacity:
            resident.discard(order.popleft())
        resident.add(page)
        order.append(page)
    return FaultTally(faults, total)
