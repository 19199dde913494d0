from __future__ import annotations

from typing import Iterable, Set

from .models import Process


class SchedulingError(Exception):
    """Base class for errors raised by the simulator."""


class InvalidWorkloadError(SchedulingError, ValueError):
    """Raised when a process set or quantum is rejected before simulation."""


def _is_int(value) -> bool:
    # bool is an int subclass but never a meaningful time value
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: Iterable[Process]) -> None:
    """
    Check every process before any engine touches it.

    Arrival times must be non-negative integers, burst times positive
    integers and pids unique integers.
    """
    seen: Set[int] = set()
    for p in processes:
        if not _is_int(p.pid):
            raise InvalidWorkloadError(f"pid must be an integer, got {p.pid!r}")
        if p.pid in seen:
            raise InvalidWorkloadError(f"Duplicate pid {p.pid}")
        seen.add(p.pid)

        if not _is_int(p.arrival_time) or p.arrival_time < 0:
            raise InvalidWorkloadError(
                f"Process {p.pid}: arrival_time must be a non-negative integer, got {p.arrival_time!r}"
            )
        if not _is_int(p.burst_time) or p.burst_time <= 0:
            raise InvalidWorkloadError(
                f"Process {p.pid}: burst_time must be a positive integer, got {p.burst_time!r}"
            )


def validate_quantum(quantum) -> int:
    if not _is_int(quantum) or quantum <= 0:
        raise InvalidWorkloadError(f"Round Robin requires a positive integer quantum, got {quantum!r}")
    return quantum
