"""
CPU scheduling simulator.

Runs First-Come-First-Served, non-preemptive Shortest-Job-First and Round
Robin over a fixed set of processes and reports average turnaround, waiting
and response times.
"""

from .algorithms import (
    ALGORITHMS,
    run_algorithm,
    schedule_fcfs,
    schedule_rr,
    schedule_sjf,
    simulate_fcfs,
    simulate_rr,
    simulate_sjf,
)
from .errors import InvalidInputError, SchedulingInvariantError
from .models import Metrics, Process, ScheduleResult

__all__ = [
    "ALGORITHMS",
    "InvalidInputError",
    "Metrics",
    "Process",
    "ScheduleResult",
    "SchedulingInvariantError",
    "run_algorithm",
    "schedule_fcfs",
    "schedule_rr",
    "schedule_sjf",
    "simulate_fcfs",
    "simulate_rr",
    "simulate_sjf",
]
