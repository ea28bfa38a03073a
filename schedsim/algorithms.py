from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Sequence

from .errors import InvalidInputError, SchedulingInvariantError
from .metrics import aggregate_metrics, compute_system_metrics, process_metrics
from .models import Metrics, ScheduleResult, ScheduledSlice, SimProcess
from .process_table import (
    ProcessLike,
    arrival_order,
    build_process_table,
    validate_processes,
    validate_quantum,
)

logger = logging.getLogger(__name__)


def _prepare(processes: Sequence[ProcessLike], n: Optional[int]) -> List[SimProcess]:
    return build_process_table(validate_processes(processes, n))


def _finish(
    algorithm: str,
    quantum: Optional[int],
    table: List[SimProcess],
    timeline: List[ScheduledSlice],
) -> ScheduleResult:
    result = ScheduleResult(
        algorithm=algorithm,
        quantum=quantum,
        metrics=aggregate_metrics(table),
        processes=process_metrics(table),
        timeline=timeline,
    )
    compute_system_metrics(result)
    logger.debug(
        f"{algorithm}: avg turnaround={result.metrics.avg_turnaround:.2f} "
        f"waiting={result.metrics.avg_waiting:.2f} response={result.metrics.avg_response:.2f}"
    )
    return result


def _dispatch_to_completion(p: SimProcess, current_time: int, timeline: List[ScheduledSlice]) -> int:
    p.start_time = current_time
    p.completion_time = current_time + p.burst_time
    p.remaining_time = 0
    timeline.append(ScheduledSlice(pid=p.pid, start_time=p.start_time, end_time=p.completion_time))
    logger.debug(f"t={current_time}: {p.pid} runs to completion at t={p.completion_time}")
    return p.completion_time


def schedule_fcfs(
    processes: Sequence[ProcessLike], n: Optional[int] = None, quantum: Optional[int] = None
) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run in arrival order; equal arrival times keep input order.
    """
    table = _prepare(processes, n)
    timeline: List[ScheduledSlice] = []

    current_time = 0
    for idx in arrival_order(table):
        p = table[idx]
        if current_time < p.arrival_time:
            logger.debug(f"t={current_time}: CPU idle until t={p.arrival_time}")
            current_time = p.arrival_time
        current_time = _dispatch_to_completion(p, current_time, timeline)

    return _finish("FCFS", None, table, timeline)


def schedule_sjf(
    processes: Sequence[ProcessLike], n: Optional[int] = None, quantum: Optional[int] = None
) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    completed, choose the one with the smallest burst time. Equal bursts go to
    the process listed first in the input.
    """
    table = _prepare(processes, n)
    timeline: List[ScheduledSlice] = []

    current_time = 0
    completed = 0
    while completed < len(table):
        selected: Optional[SimProcess] = None
        for p in table:
            if p.completed or p.arrival_time > current_time:
                continue
            # Strictly smaller only, so the earliest listed wins a tie.
            if selected is None or p.burst_time < selected.burst_time:
                selected = p

        if selected is None:
            next_arrival = min(p.arrival_time for p in table if not p.completed)
            logger.debug(f"t={current_time}: CPU idle until t={next_arrival}")
            current_time = next_arrival
            continue

        current_time = _dispatch_to_completion(selected, current_time, timeline)
        completed += 1

    return _finish("SJF (non-preemptive)", None, table, timeline)


def schedule_rr(
    processes: Sequence[ProcessLike], n: Optional[int] = None, quantum: Optional[int] = None
) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive by the end of a slice join the ready queue ahead of
    the process that was just preempted.
    """
    quantum = validate_quantum(quantum)
    table = _prepare(processes, n)
    timeline: List[ScheduledSlice] = []

    order = arrival_order(table)
    ready: Deque[int] = deque()
    next_arrival = 0
    current_time = 0
    completed = 0
    total = len(table)

    while completed < total:
        if not ready and next_arrival < total:
            idx = order[next_arrival]
            if table[idx].arrival_time > current_time:
                logger.debug(f"t={current_time}: CPU idle until t={table[idx].arrival_time}")
                current_time = table[idx].arrival_time
            ready.append(idx)
            next_arrival += 1

        if not ready:
            raise SchedulingInvariantError(
                f"Ready queue empty at t={current_time} with {total - completed} processes unfinished"
            )

        idx = ready.popleft()
        p = table[idx]
        if not p.started:
            p.start_time = current_time

        run_time = min(p.remaining_time, quantum)
        timeline.append(ScheduledSlice(pid=p.pid, start_time=current_time, end_time=current_time + run_time))
        logger.debug(f"t={current_time}: {p.pid} runs for {run_time}")
        p.remaining_time -= run_time
        current_time += run_time

        while next_arrival < total and table[order[next_arrival]].arrival_time <= current_time:
            ready.append(order[next_arrival])
            next_arrival += 1

        if p.remaining_time > 0:
            ready.append(idx)
        else:
            p.completion_time = current_time
            completed += 1
            logger.debug(f"t={current_time}: {p.pid} completed")

    return _finish("Round Robin", quantum, table, timeline)


def simulate_fcfs(processes: Sequence[ProcessLike], n: Optional[int] = None) -> Metrics:
    return schedule_fcfs(processes, n).metrics


def simulate_sjf(processes: Sequence[ProcessLike], n: Optional[int] = None) -> Metrics:
    return schedule_sjf(processes, n).metrics


def simulate_rr(processes: Sequence[ProcessLike], n: Optional[int] = None, quantum: Optional[int] = None) -> Metrics:
    return schedule_rr(processes, n, quantum=quantum).metrics


ALGORITHMS: Dict[str, Callable[..., ScheduleResult]] = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: Sequence[ProcessLike], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. The quantum is only used by
    round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise InvalidInputError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)
