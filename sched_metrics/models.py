from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int


@dataclass
class ProcessState:
    """
    Working copy of a Process for one simulation run.

    ``start_time`` stays ``None`` until the process is first dispatched, so a
    process that ran at time 0 can be told apart from one that never ran.
    """

    pid: int
    arrival_time: int
    burst_time: int
    remaining_time: int
    start_time: Optional[int] = None
    completion_time: Optional[int] = None

    @classmethod
    def from_process(cls, process: Process) -> "ProcessState":
        return cls(
            pid=process.pid,
            arrival_time=process.arrival_time,
            burst_time=process.burst_time,
            remaining_time=process.burst_time,
        )

    @property
    def finished(self) -> bool:
        return self.remaining_time == 0

    @property
    def turnaround_time(self) -> int:
        return self.completion_time - self.arrival_time

    @property
    def waiting_time(self) -> int:
        return self.turnaround_time - self.burst_time

    @property
    def response_time(self) -> int:
        return self.start_time - self.arrival_time


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class ProcessMetrics:
    pid: int
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int
    waiting_time: int
    turnaround_time: int
    response_time: int

    @classmethod
    def from_state(cls, state: ProcessState) -> "ProcessMetrics":
        return cls(
            pid=state.pid,
            arrival_time=state.arrival_time,
            burst_time=state.burst_time,
            start_time=state.start_time,
            completion_time=state.completion_time,
            waiting_time=state.waiting_time,
            turnaround_time=state.turnaround_time,
            response_time=state.response_time,
        )


@dataclass(frozen=True)
class Metrics:
    avg_turnaround: float = 0.0
    avg_waiting: float = 0.0
    avg_response: float = 0.0


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    metrics: Metrics = field(default_factory=Metrics)
    system: Optional[SystemMetrics] = None
