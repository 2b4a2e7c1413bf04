import csv

import pytest

from astar_search.domains.sliding_puzzle import SlidingPuzzle, SlidingPuzzleProblem
from astar_search.experiments import analyze, benchmark, plot, runner
from conftest import SCENARIO


@pytest.fixture
def results_csv(tmp_path):
    out = tmp_path / "results" / "run.csv"
    runner.main(["--rows", "2", "--cols", "3", "--depths", "4", "8", "--per_depth", "3",
                 "--algo", "all", "--include_unsolvable", "--out", str(out)])
    return out


def test_generate_instances():
    puzzle = SlidingPuzzle(3, 3)
    insts = runner.generate_instances(puzzle, [2, 6], per_depth=3)
    assert [i.depth for i in insts] == [2, 2, 2, 6, 6, 6]
    assert len({i.seed for i in insts}) == 6
    assert all(puzzle.is_solvable(i.state) for i in insts)
    assert insts[0].state == puzzle.scramble(2, insts[0].seed)


def test_runner_writes_expected_rows(results_csv):
    with results_csv.open(newline="") as f:
        reader = csv.DictReader(f)
        assert reader.fieldnames == runner.HEADER
        rows = list(reader)

    # 6 instances x (A*, IDA*, BFS) solvable + (A*, BFS) unsolvable
    assert len(rows) == 6 * 3 + 6 * 2
    solved = [r for r in rows if r["solvable"] == "1"]
    assert {r["termination"] for r in solved} == {"ok"}
    assert {r["termination"] for r in rows if r["solvable"] == "0"} == {"exhausted"}
    assert {r["algorithm"] for r in rows} == {"A*", "IDA*", "BFS"}

    by_seed = {}
    for r in solved:
        by_seed.setdefault(r["seed"], set()).add(r["g"])
    assert all(len(gs) == 1 for gs in by_seed.values())


def test_analyze_summary(results_csv):
    df = analyze.load_results([results_csv])
    assert set(df["solvable"]) == {1}
    summary = analyze.summarize(df)
    assert set(summary["algorithm"]) == {"A*", "IDA*", "BFS"}
    assert (summary["runs"] == 3).all()

    ratio = analyze.time_ratio(summary)
    assert list(ratio["depth"]) == [4, 8]
    assert analyze.optimal_cost_mismatches(df).empty


def test_analyze_cli(results_csv, tmp_path, capsys):
    out = tmp_path / "summary.csv"
    analyze.main([str(results_csv), "--out", str(out)])
    assert out.exists()
    assert "IDA*/A* time ratio" in capsys.readouterr().out


def test_plots_are_saved(results_csv, tmp_path):
    df = analyze.load_results([results_csv])
    saved = plot.make_plots(df, tmp_path / "plots", "run")
    assert len(saved) == 5
    assert all(p.exists() and p.stat().st_size > 0 for p in saved)


def test_time_solution_runs_at_least_once():
    problem = SlidingPuzzleProblem.from_rows(SCENARIO)
    result, ms, trials = benchmark.time_solution(problem, limited_memory=False, budget_sec=0.0)
    assert result.found
    assert trials == 1
    assert ms >= 0


def test_benchmark_cli(capsys):
    benchmark.main(["0,1;2,3", "1,0;2,3", "--budget_sec", "0"])
    out = capsys.readouterr().out
    assert out.count("with A*") == 2
    assert out.count("with iterative deepening A*") == 2


def test_parse_board():
    assert benchmark.parse_board("1,4,8;6,3,0;5,2,7") == SCENARIO


@pytest.mark.parametrize("tie_break", ["h", "fifo", "lifo"])
def test_runner_accepts_every_tie_break(tmp_path, tie_break):
    out = tmp_path / "tb.csv"
    runner.main(["--rows", "2", "--cols", "2", "--depths", "2", "--per_depth", "1",
                 "--algo", "a", "--tie_break", tie_break, "--out", str(out)])
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["tie_break"] for r in rows] == [tie_break]


def test_runner_rejects_unknown_tie_break(tmp_path):
    with pytest.raises(SystemExit):
        runner.main(["--tie_break", "random", "--out", str(tmp_path / "x.csv")])
