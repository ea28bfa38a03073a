from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Union

from .errors import InvalidInputError
from .models import Process, SimProcess

ProcessLike = Union[Process, Mapping[str, Any]]

_ARRIVAL_KEYS = ("arrival_time", "arrivalTime")
_BURST_KEYS = ("burst_time", "burstTime")
_PID_KEYS = ("pid", "id")


def _lookup(mapping: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if key in mapping and mapping[key] not in (None, ""):
            return mapping[key]
    raise KeyError(keys[0])


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not times")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not a whole number")
        return int(value)
    return int(str(value).strip())


def coerce_process(entry: ProcessLike, position: int) -> Process:
    """
    Turn a Process or a mapping into a Process.

    ``position`` is the 0-based place of the entry in the caller's sequence and
    is used to name processes that carry no identifier.
    """
    if isinstance(entry, Process):
        return entry

    if not isinstance(entry, Mapping):
        raise InvalidInputError(f"Invalid process entry: {entry!r}")

    try:
        arrival_time = _to_int(_lookup(entry, _ARRIVAL_KEYS))
        burst_time = _to_int(_lookup(entry, _BURST_KEYS))
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInputError(f"Invalid process entry: {entry!r}") from exc

    try:
        pid = str(_lookup(entry, _PID_KEYS))
    except KeyError:
        pid = f"P{position + 1}"

    return Process(pid=pid, arrival_time=arrival_time, burst_time=burst_time)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: Sequence[ProcessLike], n: Optional[int] = None) -> List[Process]:
    """
    Check a caller-supplied workload and return the first ``n`` processes
    (all of them when ``n`` is None).

    Raises InvalidInputError for an empty workload, a bad ``n``, a negative or
    non-integer arrival time, or a non-positive or non-integer burst time.
    """
    entries = list(processes)

    if n is None:
        n = len(entries)
    if not _is_int(n) or n <= 0:
        raise InvalidInputError(f"Process count must be a positive integer, got {n!r}")
    if n > len(entries):
        raise InvalidInputError(f"Process count {n} exceeds the {len(entries)} processes supplied")

    validated: List[Process] = []
    for position, entry in enumerate(entries[:n]):
        p = coerce_process(entry, position)
        if not _is_int(p.arrival_time) or p.arrival_time < 0:
            raise InvalidInputError(
                f"Process {p.pid}: arrival time must be a non-negative integer, got {p.arrival_time!r}"
            )
        if not _is_int(p.burst_time) or p.burst_time <= 0:
            raise InvalidInputError(
                f"Process {p.pid}: burst time must be a positive integer, got {p.burst_time!r}"
            )
        validated.append(p)

    return validated


def validate_quantum(quantum: Any) -> int:
    if not _is_int(quantum) or quantum <= 0:
        raise InvalidInputError(f"Round Robin requires a positive integer quantum, got {quantum!r}")
    return quantum


def build_process_table(processes: Sequence[Process]) -> List[SimProcess]:
    """
    Fresh working copies with the simulation-local fields reset.
    """
    return [
        SimProcess(
            index=i,
            pid=p.pid,
            arrival_time=p.arrival_time,
            burst_time=p.burst_time,
            remaining_time=p.burst_time,
        )
        for i, p in enumerate(processes)
    ]


def arrival_order(table: Sequence[SimProcess]) -> List[int]:
    """
    Indices into ``table`` ordered by arrival time, ties kept in input order.
    """
    return sorted(range(len(table)), key=lambda i: (table[i].arrival_time, i))
