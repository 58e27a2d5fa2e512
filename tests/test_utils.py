import json

import numpy as np
import pytest

from jug_solver import utils


def test_format_path():
    text = utils.format_path([(0, 0), (0, 3), (2, 1), (0, 1)], 1)
    assert text.splitlines() == [
        "---------------- 1 (4) ----------------",
        "(0, 0)",
        "(0, 3)",
        "(2, 1)",
        "(0, 1)",
    ]


def test_format_path_accepts_arrays():
    path = np.array([[0, 0], [3, 0]], dtype=np.int64)
    assert utils.format_path(path, 3).splitlines()[-1] == "(3, 0)"


def test_format_unreachable():
    assert (
        utils.format_unreachable(5, 4, 6)
        == "Cannot get volume 5 from jug of volume 4 and 6."
    )


def test_format_result():
    found = utils.SolutionResult(target=3, capacities=(3, 5), path=np.array([[0, 0], [3, 0]]))
    missing = utils.SolutionResult(target=9, capacities=(3, 5))
    assert found.found and found.moves == 1
    assert utils.format_result(found).startswith("---------------- 3 (2)")
    assert not missing.found and missing.moves == -1
    assert utils.format_result(missing) == "Cannot get volume 9 from jug of volume 3 and 5."


def test_load_params_json(tmp_path):
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps({"jobs": [{"capacity_x": 3, "capacity_y": 5, "targets": [4]}]}))
    params = utils.load_params(path)
    assert params["jobs"][0]["targets"] == [4]


def test_load_params_toml(tmp_path):
    pytest.importorskip("tomllib")
    path = tmp_path / "jobs.toml"
    path.write_text('[[jobs]]\ncapacity_x = 4\ncapacity_y = 9\ntargets = "all"\n')
    params = utils.load_params(path)
    assert params["jobs"] == [{"capacity_x": 4, "capacity_y": 9, "targets": "all"}]


def test_load_params_rejects_unknown_suffix(tmp_path):
    path = tmp_path / "jobs.yaml"
    path.write_text("jobs: []\n")
    with pytest.raises(ValueError):
        utils.load_params(path)
