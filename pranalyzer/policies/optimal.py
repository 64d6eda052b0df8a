# pranalyzer/policies/optimal.py
import heapq

from pranalyzer.policies.base import FaultTally


def next_occurrences(reference):
    """
    For each position i, the index of the next occurrence of reference[i],
    or len(reference) when the page is never referenced again.
    Built in one right-to-left pass.
    """
    total = len(reference)
    nxt = [total] * total
    seen = {}                   # page -> nearest index to the right
    for i in range(total - 1, -1, -1):
        page = reference[i]
        if page in seen:
            nxt[i] = seen[page]
        seen[page] = i
    return nxt


def simulate_optimal(reference, capacity: int) -> FaultTally:
    """
    Belady's optimal replacement.
    Evicts the resident page whose next use is farthest away (or never).
    Uses a max-heap of (-next_use, page) with lazy deletion: entries whose
    next_use no longer matches the page's current value are skipped, and the
    heap is compacted once it holds more than twice `capacity` entries.
    """
    total = len(reference)
    if capacity == 0:
        return FaultTally(total, total)

    nxt      = next_occurrences(reference)
    resident = {}               # page -> index of its next use
    heap     = []               # (-next_use, page)
    faults   = 0
    for i, page in enumerate(reference):
        if page not in resident:
            faults += 1
            if len(resident) == capacity:
                while True:
                    neg_next, victim = heapq.heappop(heap)
                    # skip stale heap entries
                    if resident.get(victim) == -neg_next:
                        break
                del resident[victim]
        resident[page] = nxt[i]
        heapq.heappush(heap, (-nxt[i], page))
        # keep the heap within 2 * capacity by rebuilding from live entries
        if len(heap) > 2 * capacity:
            heap = [(-n, p) for p, n in resident.items()]
            heapq.heapify(heap)
    return FaultTally(faults, total)
