import pytest

pytest.importorskip("PyQt5.QtWidgets")
pytest.importorskip("pyqtgraph")

from pranalyzer.gui.main_interface import SweepThread
from pranalyzer.simulation import SessionHistory, SweepParameters


class FailingHistory:
    def run(self, params, generator=None, progress=None):
        raise RuntimeError("generator crashed")


def run_thread(history, params):
    thread = SweepThread(history, params, seed=0)
    errors, finished = [], []
    thread.error_signal.connect(errors.append)
    thread.finished_signal.connect(finished.append)
    thread.run()      # synchronously, in the test thread
    return errors, finished


def test_sweep_thread_reports_unexpected_errors():
    errors, finished = run_thread(FailingHistory(),
                                  SweepParameters(ram_size=2, num_processes=1, process_size=2))
    assert errors == ["generator crashed"]
    assert finished == []


def test_sweep_thread_reports_invalid_parameters():
    errors, finished = run_thread(SessionHistory(),
                                  SweepParameters(ram_size=2, num_processes=0, process_size=2))
    assert len(errors) == 1 and "at least 1" in errors[0]
    assert finished == []


def test_sweep_thread_emits_result():
    history = SessionHistory()
    errors, finished = run_thread(history,
                                  SweepParameters(ram_size=2, num_processes=1, process_size=2))
    assert errors == []
    assert len(finished) == 1 and len(finished[0]) == 3
    assert len(history) == 1
