from __future__ import annotations

from typing import List, Sequence

from .errors import InvalidInputError, SchedulingInvariantError
from .models import Metrics, ProcessMetrics, ScheduleResult, SimProcess, SystemMetrics


def process_metrics(table: Sequence[SimProcess]) -> List[ProcessMetrics]:
    """
    Derive turnaround, waiting and response times for every finished process,
    in input order.
    """
    metrics: List[ProcessMetrics] = []
    for p in table:
        if p.start_time is None or p.completion_time is None:
            raise SchedulingInvariantError(f"Process {p.pid} was never run to completion")

        turnaround_time = p.completion_time - p.arrival_time
        metrics.append(
            ProcessMetrics(
                pid=p.pid,
                arrival_time=p.arrival_time,
                burst_time=p.burst_time,
                start_time=p.start_time,
                completion_time=p.completion_time,
                waiting_time=turnaround_time - p.burst_time,
                turnaround_time=turnaround_time,
                response_time=p.start_time - p.arrival_time,
            )
        )
    return metrics


def aggregate_metrics(table: Sequence[SimProcess]) -> Metrics:
    """
    Average turnaround, waiting and response time over the final table.
    """
    if not table:
        raise InvalidInputError("Cannot average metrics over zero processes")

    per_process = process_metrics(table)
    n = len(per_process)
    return Metrics(
        avg_turnaround=sum(p.turnaround_time for p in per_process) / n,
        avg_waiting=sum(p.waiting_time for p in per_process) / n,
        avg_response=sum(p.response_time for p in per_process) / n,
    )


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute busy/idle time, throughput and CPU utilization given populated
    per-process metrics and timeline slices.
    """
    makespan = max(p.completion_time for p in result.processes)
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in result.timeline)

    throughput = len(result.processes) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    context_switches = sum(
        1 for prev, cur in zip(result.timeline, result.timeline[1:]) if prev.pid != cur.pid
    )

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=makespan - cpu_busy_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
        context_switches=context_switches,
    )
    result.system = system
    return system
