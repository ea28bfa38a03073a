from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: str
    arrival_time: int
    burst_time: int


@dataclass
class SimProcess:
    """
    Working copy of a Process owned by a single simulation run.

    ``start_time`` and ``completion_time`` stay ``None`` until the process is
    first dispatched and until it finishes, respectively.
    """

    index: int
    pid: str
    arrival_time: int
    burst_time: int
    remaining_time: int
    start_time: Optional[int] = None
    completion_time: Optional[int] = None

    @property
    def started(self) -> bool:
        return self.start_time is not None

    @property
    def completed(self) -> bool:
        return self.completion_time is not None


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: str
    start_time: int
    end_time: int


@dataclass
class ProcessMetrics:
    pid: str
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int
    waiting_time: int
    turnaround_time: int
    response_time: int


@dataclass(frozen=True)
class Metrics:
    avg_turnaround: float
    avg_waiting: float
    avg_response: float


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float
    context_switches: int = 0


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    metrics: Metrics
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
