import numpy as np

from pranalyzer.config import Config


class ReferenceGenerator:
    """Generate uniform random page reference strings for simulated processes."""

    def __init__(self, seed=None, refs_per_page=Config.refs_per_page):
        if refs_per_page < 0:
            raise ValueError(f"refs_per_page must be non-negative, got {refs_per_page}")
        self.seed = seed
        self.refs_per_page = refs_per_page
        self.rng = np.random.RandomState(seed)

    def generate(self, page_count, frame_capacity=None):
        """Return a reference string of refs_per_page * page_count page ids in [1, page_count].

        frame_capacity is accepted for interface parity with other generators
        and does not affect the distribution.
        """
        if page_count < 0:
            raise ValueError(f"page_count must be non-negative, got {page_count}")
        if page_count == 0:
            return ()
        size = self.refs_per_page * page_count
        pages = self.rng.randint(1, page_count + 1, size)
        return tuple(int(p) for p in pages)


def save_reference(reference, filename):
    """Save a reference string to a .npy file"""
    np.save(filename, np.asarray(reference, dtype=np.int64))


def load_reference(filename):
    """Load a reference string from a .npy file"""
    return tuple(int(p) for p in np.load(filename))
