import pytest

BELADY_STRING = (1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5)


class CyclicGenerator:
    """Deterministic generator: pages 1..page_count repeated in order."""

    def __init__(self, refs_per_page=100):
        self.refs_per_page = refs_per_page
        self.calls = []

    def generate(self, page_count, frame_capacity=None):
        self.calls.append((page_count, frame_capacity))
        return tuple(i % page_count + 1 for i in range(self.refs_per_page * page_count))


@pytest.fixture
def belady_string():
    return BELADY_STRING


@pytest.fixture
def cyclic_generator():
    return CyclicGenerator()
