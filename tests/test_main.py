import matplotlib
matplotlib.use("Agg")

import pytest

import compare_demo
import main
from pranalyzer.policies import FaultTally, Strategy


def test_run_with_flags(capsys):
    agg = main.run(["--ram-size", "4", "--processes", "2",
                    "--process-size", "4", "--seed", "1", "--verbose"])
    out = capsys.readouterr().out
    assert "Page size 0: pages=-1, frames=-1" in out
    assert "Results:" in out
    assert "FIFO(Hit Rate)" in out
    assert len(agg) == 5


def test_run_prompts_for_missing_values(monkeypatch, capsys):
    answers = iter(["x", "2", "3", "-1", "3"])
    monkeypatch.setattr("builtins.input", lambda _: next(answers))
    agg = main.run(["--seed", "2"])
    out = capsys.readouterr().out
    assert "Please enter an integer" in out
    assert "Value must be at least 0" in out
    assert len(agg) == 4


def test_run_saves_plot(tmp_path, capsys):
    path = tmp_path / "plot.png"
    main.run(["--ram-size", "2", "--processes", "1", "--process-size", "2",
              "--seed", "0", "--plot-path", str(path)])
    assert path.exists()
    assert f"Plot saved to {path}" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--ram-size", "-1"],
    ["--process-size", "-3"],
    ["--processes", "0"],
])
def test_invalid_flags_exit(argv):
    with pytest.raises(SystemExit):
        main.parse_args(argv)


def test_compare_demo_belady(capsys):
    results = compare_demo.run_demo(compare_demo.BELADY_STRING, 3)
    assert results[Strategy.FIFO] == FaultTally(9, 12)
    assert results[Strategy.OPTIMAL] == FaultTally(7, 12)
    assert "OPT" in capsys.readouterr().out


def test_precision_flag(capsys):
    main.run(["--ram-size", "1", "--processes", "1", "--process-size", "1",
              "--seed", "0", "--precision", "2"])
    lines = capsys.readouterr().out.splitlines()
    row = next(line for line in lines if line.startswith("| 1 "))
    rates = [cell.strip() for cell in row.split("|")[2:-1]]
    assert all(len(rate.split(".")[1]) == 2 for rate in rates)


def test_negative_precision_exits():
    with pytest.raises(SystemExit):
        main.parse_args(["--precision", "-1"])
