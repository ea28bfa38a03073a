import pytest

from schedsim.errors import InvalidInputError, SchedulingInvariantError
from schedsim.metrics import (
    aggregate_metrics,
    compute_system_metrics,
    process_metrics,
)
from schedsim.models import Metrics, Process, ScheduleResult, ScheduledSlice
from schedsim.process_table import build_process_table


def _finished_table():
    table = build_process_table([Process("A", 0, 3), Process("B", 1, 2)])
    table[0].start_time, table[0].completion_time = 0, 3
    table[1].start_time, table[1].completion_time = 3, 5
    return table


def test_process_metrics_derivation():
    a, b = process_metrics(_finished_table())
    assert (a.turnaround_time, a.waiting_time, a.response_time) == (3, 0, 0)
    assert (b.turnaround_time, b.waiting_time, b.response_time) == (4, 2, 2)


def test_aggregate_metrics_means():
    m = aggregate_metrics(_finished_table())
    assert m == Metrics(avg_turnaround=3.5, avg_waiting=1.0, avg_response=1.0)


def test_aggregate_rejects_empty_table():
    with pytest.raises(InvalidInputError):
        aggregate_metrics([])


def test_aggregate_rejects_unfinished_process():
    table = build_process_table([Process("A", 0, 3)])
    with pytest.raises(SchedulingInvariantError):
        aggregate_metrics(table)


def test_system_metrics_counts_idle_and_switches():
    table = _finished_table()
    result = ScheduleResult(
        algorithm="test",
        quantum=None,
        metrics=aggregate_metrics(table),
        processes=process_metrics(table),
        timeline=[
            ScheduledSlice("A", 0, 2),
            ScheduledSlice("A", 2, 3),
            ScheduledSlice("B", 4, 5),
        ],
    )
    system = compute_system_metrics(result)
    assert result.system is system
    assert system.makespan == 5
    assert system.cpu_busy_time == 4
    assert system.idle_time == 1
    assert system.context_switches == 1
    assert system.cpu_utilization == pytest.approx(0.8)
    assert system.throughput == pytest.approx(0.4)
