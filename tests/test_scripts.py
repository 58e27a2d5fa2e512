import json
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

SCRIPTS = Path(__file__).resolve().parents[1] / "src" / "scripts"
if str(SCRIPTS) not in sys.path:
    sys.path.insert(0, str(SCRIPTS))

import plot_path  # noqa: E402
import run_batch  # noqa: E402
import solve_jugs  # noqa: E402


def _last_position(line):
    a, b = line.strip("()").split(",")
    return int(a), int(b)


@pytest.mark.parametrize(
    "text,expected",
    [("12", 12), ("12abc", 12), ("abc", 0), (" -3", -3), ("+7", 7), ("", 0)],
)
def test_atoi(text, expected):
    assert solve_jugs.atoi(text) == expected


def test_cli_prints_solution(capsys):
    assert solve_jugs.main(["3", "5", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("---------------- 4 (")
    n = int(lines[0].split("(")[1].split(")")[0])
    assert len(lines) == n + 1
    assert lines[1] == "(0, 0)"
    assert sum(_last_position(lines[-1])) == 4


def test_cli_reports_unreachable(capsys):
    assert solve_jugs.main(["4", "6", "5"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "Cannot get volume 5 from jug of volume 4 and 6."


def test_cli_handles_targets_in_order(capsys):
    assert solve_jugs.main(["2", "3", "1", "9", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "---------------- 1 (4) ----------------"
    assert lines[5] == "Cannot get volume 9 from jug of volume 2 and 3."
    assert lines[6:] == ["---------------- 0 (1) ----------------", "(0, 0)"]


def test_cli_summary(capsys):
    assert solve_jugs.main(["6", "10", "4", "--summary"]) == 0
    out = capsys.readouterr().out
    assert "Lattice size: 16" in out
    assert "gcd 2" in out


@pytest.mark.parametrize("argv", [[], ["3"], ["3", "5"], ["-3", "5", "1"]])
def test_cli_usage_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        solve_jugs.main(argv)
    assert excinfo.value.code != 0


def test_run_batch(tmp_path, capsys):
    params = {
        "jobs": [
            {"capacity_x": 4, "capacity_y": 6, "targets": [5, 10]},
            {"capacity_x": 2, "capacity_y": 3, "targets": "all"},
        ]
    }
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps(params))
    assert run_batch.main(["--params", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Jugs (4, 6), gcd 2" in out
    assert "5: unreachable" in out
    assert "solved=6 unreachable=0" in out


def test_run_job_summary():
    summary = run_batch.run_job(run_batch.JugConfig(3, 5, [0, 4, 9]))
    assert summary["solved"] == 2
    assert summary["unreachable"] == 1
    assert summary["divisor"] == 1
    assert summary["max_moves"] > 0


def test_run_batch_requires_jobs(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("{}")
    with pytest.raises(ValueError):
        run_batch.load_jobs(path)


def test_plot_path_saves_figure(tmp_path):
    out = tmp_path / "plots" / "path.png"
    assert plot_path.main(["3", "5", "4", "--out", str(out)]) == 0
    assert out.exists()


def test_plot_path_unreachable(capsys):
    assert plot_path.main(["4", "6", "5"]) == 1
    assert "cannot get volume 5" in capsys.readouterr().out


def test_cli_zero_capacity(capsys):
    assert solve_jugs.main(["0", "5", "5", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "---------------- 5 (2) ----------------",
        "(0, 0)",
        "(0, 5)",
        "Cannot get volume 3 from jug of volume 0 and 5.",
    ]


def test_cli_non_numeric_capacity_reads_as_zero(capsys):
    assert solve_jugs.main(["abc", "4", "4"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "(0, 4)"
