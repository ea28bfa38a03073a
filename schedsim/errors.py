from __future__ import annotations


class InvalidInputError(ValueError):
    """
    Raised at the caller-facing boundary when a workload, process count or
    quantum cannot be simulated.
    """


class SchedulingInvariantError(RuntimeError):
    """
    Raised when a simulator's own bookkeeping is inconsistent. This is a
    defect, not a recoverable condition, and is never caught.
    """
