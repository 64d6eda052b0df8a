"""Page replacement algorithm analyzer: FIFO, LRU, MRU and OPT over page-size sweeps."""

__version__ = "0.1"
