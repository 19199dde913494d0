from __future__ import annotations

from typing import Iterable, List, Tuple, Union

from .errors import SchedulingError
from .models import Process, ProcessState, ScheduledSlice


def arrival_key(p: Union[Process, ProcessState]) -> Tuple[int, int]:
    """
    Total order shared by every engine: earlier arrival first, lower pid
    first among equal arrivals.
    """
    return (p.arrival_time, p.pid)


def sort_by_arrival(processes: Iterable[Process]) -> List[ProcessState]:
    """
    Return fresh working copies of ``processes`` in arrival order.
    """
    return sorted((ProcessState.from_process(p) for p in processes), key=arrival_key)


class SimulationClock:
    """
    Simulation time for a single engine run.

    Tracks the current time, records every execution slice and accumulates
    idle time whenever the clock has to jump forward to an arrival.
    """

    def __init__(self, start: int = 0) -> None:
        self.now = start
        self.idle_time = 0
        self.slices: List[ScheduledSlice] = []

    @property
    def busy_time(self) -> int:
        return sum(s.end_time - s.start_time for s in self.slices)

    def idle_until(self, t: int) -> None:
        if t > self.now:
            self.idle_time += t - self.now
            self.now = t

    def run(self, state: ProcessState, duration: int) -> None:
        if duration <= 0 or duration > state.remaining_time:
            raise SchedulingError(
                f"Cannot run process {state.pid} for {duration} (remaining {state.remaining_time})"
            )

        if state.start_time is None:
            state.start_time = self.now

        start = self.now
        self.now += duration
        state.remaining_time -= duration
        self._record(state.pid, start, self.now)

        if state.remaining_time == 0:
            state.completion_time = self.now

    def _record(self, pid: int, start: int, end: int) -> None:
        # Back-to-back runs of the same process form one slice on the chart.
        if self.slices and self.slices[-1].pid == pid and self.slices[-1].end_time == start:
            self.slices[-1].end_time = end
        else:
            self.slices.append(ScheduledSlice(pid=pid, start_time=start, end_time=end))
