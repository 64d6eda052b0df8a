from pranalyzer.simulation.sweep import SweepController


class SessionHistory:
    """Parameters and results of every sweep run in one session.

    Owned by whoever drives the session (the CLI loop or the GUI window).
    """

    def __init__(self):
        self.entries = []        # list of (SweepParameters, Aggregator)

    def record(self, params, aggregator):
        self.entries.append((params, aggregator))

    def last(self):
        if not self.entries:
            raise IndexError("history is empty")
        return self.entries[-1]

    def run(self, params, generator=None, progress=None):
        """Run a sweep for params and record its result."""
        controller = SweepController(params, generator=generator)
        aggregator = controller.run(progress=progress)
        self.record(params, aggregator)
        return aggregator

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
