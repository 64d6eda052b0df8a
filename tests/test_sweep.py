import pytest

from pranalyzer.policies import FaultTally, NOT_APPLICABLE, Strategy
from pranalyzer.simulation import (SessionHistory, SweepController,
                                   SweepParameters, page_configs)
from pranalyzer.utils.trace_generator import ReferenceGenerator


def test_page_configs_cover_zero_to_min_size():
    configs = list(page_configs(ram_size=4, process_size=6))
    assert [c.page_size for c in configs] == [0, 1, 2, 3, 4]
    assert configs[0].degenerate
    assert [(c.page_count, c.frame_capacity) for c in configs[1:]] == [(6, 4), (3, 2), (2, 1), (2, 1)]


def test_page_configs_with_zero_size():
    configs = list(page_configs(ram_size=0, process_size=10))
    assert len(configs) == 1 and configs[0].degenerate


@pytest.mark.parametrize("params", [
    SweepParameters(ram_size=-1, num_processes=1, process_size=4),
    SweepParameters(ram_size=4, num_processes=0, process_size=4),
    SweepParameters(ram_size=4, num_processes=1, process_size=-2),
])
def test_invalid_parameters_raise(params):
    with pytest.raises(ValueError):
        SweepController(params)


def test_sweep_totals_per_row():
    params = SweepParameters(ram_size=4, num_processes=3, process_size=6)
    agg = SweepController(params, generator=ReferenceGenerator(seed=11)).run()

    assert len(agg) == 5
    assert agg.row(0) == {s: NOT_APPLICABLE for s in Strategy}
    expected_totals = {1: 1800, 2: 900, 3: 600, 4: 600}
    for page_size, total in expected_totals.items():
        row = agg.row(page_size)
        assert set(row) == set(Strategy)
        for tally in row.values():
            assert tally.total == total
            assert 0 <= tally.faults <= tally.total
        assert row[Strategy.OPTIMAL].faults <= min(t.faults for t in row.values())


def test_sweep_with_capacity_above_page_count(cyclic_generator):
    params = SweepParameters(ram_size=8, num_processes=2, process_size=4)
    agg = SweepController(params, generator=cyclic_generator).run()

    # faults are first-reference misses only: page_count per process
    expected = {1: FaultTally(8, 800), 2: FaultTally(4, 400),
                3: FaultTally(4, 400), 4: FaultTally(2, 200)}
    for page_size, tally in expected.items():
        assert agg.row(page_size) == {s: tally for s in Strategy}


def test_degenerate_row_never_generates(cyclic_generator):
    params = SweepParameters(ram_size=2, num_processes=3, process_size=2)
    SweepController(params, generator=cyclic_generator).run()
    assert cyclic_generator.calls == [(2, 2)] * 3 + [(1, 1)] * 3


def test_progress_callback(cyclic_generator):
    updates = []
    params = SweepParameters(ram_size=3, num_processes=1, process_size=3)
    SweepController(params, generator=cyclic_generator).run(progress=updates.append)

    assert [u['page_size'] for u in updates] == [0, 1, 2, 3]
    assert updates[-1]['progress'] == pytest.approx(100.0)
    assert updates[0]['row'] == {s: NOT_APPLICABLE for s in Strategy}
    assert updates[1]['page_count'] == 3


def test_seeded_sweeps_are_reproducible():
    params = SweepParameters(ram_size=3, num_processes=2, process_size=5)
    first = SweepController(params, generator=ReferenceGenerator(seed=5)).run()
    second = SweepController(params, generator=ReferenceGenerator(seed=5)).run()
    assert first.rows == second.rows


def test_session_history_records_each_run(cyclic_generator):
    history = SessionHistory()
    with pytest.raises(IndexError):
        history.last()

    p1 = SweepParameters(ram_size=2, num_processes=1, process_size=2)
    p2 = SweepParameters(ram_size=3, num_processes=1, process_size=1)
    a1 = history.run(p1, generator=cyclic_generator)
    a2 = history.run(p2, generator=cyclic_generator)

    assert len(history) == 2
    assert history.last() == (p2, a2)
    assert [entry for entry in history] == [(p1, a1), (p2, a2)]
    assert a1 is not a2
