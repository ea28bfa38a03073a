from pathlib import Path

import pytest

from schedsim.errors import InvalidInputError
from schedsim.models import Process
from schedsim.workload_io import load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"burst_time":3},'
                 '{"arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].pid == "A"
    assert procs[1].pid == "P2"
    assert procs[1].arrival_time == 1


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\nA,0,3\n,1,2\n")
    procs = load_workload(p)
    assert procs[0] == Process("A", 0, 3)
    assert procs[1] == Process("P2", 1, 2)


def test_load_rejects_unknown_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("")
    with pytest.raises(InvalidInputError):
        load_workload(p)


def test_load_rejects_non_list_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"pid": "A", "arrival_time": 0, "burst_time": 3}')
    with pytest.raises(InvalidInputError):
        load_workload(p)


def test_load_rejects_malformed_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text("[{")
    with pytest.raises(InvalidInputError):
        load_workload(p)


def test_load_rejects_bad_csv_row(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\nA,zero,3\n")
    with pytest.raises(InvalidInputError):
        load_workload(p)


@pytest.mark.parametrize("name", ["w.csv", "w.json"])
def test_load_rejects_non_utf8_file(tmp_path: Path, name):
    p = tmp_path / name
    p.write_bytes(b"pid,arrival_time,burst_time\n\xff\xfe,0,3\n")
    with pytest.raises(InvalidInputError):
        load_workload(p)
