import json
import logging
from pathlib import Path

import pytest

from schedsim.cli import main


@pytest.fixture
def workload(tmp_path: Path) -> Path:
    path = tmp_path / "w.json"
    path.write_text(
        json.dumps(
            [
                {"pid": "P1", "arrival_time": 0, "burst_time": 5},
                {"pid": "P2", "arrival_time": 1, "burst_time": 3},
                {"pid": "P3", "arrival_time": 2, "burst_time": 8},
            ]
        )
    )
    return path


def test_run_fcfs(workload, capsys):
    assert main(["run", "-a", "fcfs", "-w", str(workload)]) == 0
    out = capsys.readouterr().out
    assert "FCFS" in out
    assert "8.67" in out
    assert "3.33" in out


def test_run_rr_prints_quantum(workload, capsys):
    assert main(["run", "-a", "rr", "-w", str(workload), "-q", "3"]) == 0
    out = capsys.readouterr().out
    assert "Round Robin" in out
    assert "Quantum:" in out


def test_compare(workload, capsys):
    assert main(["compare", "-w", str(workload)]) == 0
    out = capsys.readouterr().out
    assert "FCFS" in out
    assert "SJF (non-preemptive)" in out
    assert "Round Robin" in out


def test_run_rejects_bad_quantum(workload, capsys):
    assert main(["run", "-a", "rr", "-w", str(workload), "-q", "0"]) == 2
    assert "quantum" in capsys.readouterr().out


def test_run_missing_workload(tmp_path, capsys):
    assert main(["run", "-a", "sjf", "-w", str(tmp_path / "missing.json")]) == 2
    assert "Error" in capsys.readouterr().out


def test_unknown_algorithm_is_a_usage_error(workload):
    with pytest.raises(SystemExit):
        main(["run", "-a", "mlfq", "-w", str(workload)])


def test_run_non_utf8_workload(tmp_path, capsys):
    path = tmp_path / "w.csv"
    path.write_bytes(b"pid,arrival_time,burst_time\n\xff\xfe,0,3\n")
    assert main(["run", "-a", "fcfs", "-w", str(path)]) == 2
    assert "UTF-8" in capsys.readouterr().out


def test_verbose_logs_dispatches(workload, capsys):
    try:
        assert main(["-v", "run", "-a", "fcfs", "-w", str(workload)]) == 0
        assert "P1 runs to completion" in capsys.readouterr().err
    finally:
        logger = logging.getLogger("schedsim")
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
