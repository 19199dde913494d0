from __future__ import annotations

import heapq
import logging
from collections import deque
from typing import Deque, List, Optional, Sequence, Tuple

from .errors import validate_processes, validate_quantum
from .metrics import compute_system_metrics, summarize_process_metrics
from .models import Metrics, Process, ProcessMetrics, ProcessState, ScheduleResult
from .timeline import SimulationClock, sort_by_arrival

logger = logging.getLogger(__name__)


def _finish(algorithm: str, quantum: Optional[int], states: List[ProcessState], clock: SimulationClock) -> ScheduleResult:
    # Rows in completion order, which is also the order the table reads best in.
    done = sorted(states, key=lambda s: (s.completion_time, s.pid))
    rows = [ProcessMetrics.from_state(s) for s in done]

    result = ScheduleResult(
        algorithm=algorithm,
        quantum=quantum,
        processes=rows,
        timeline=list(clock.slices),
        metrics=summarize_process_metrics(rows),
    )
    compute_system_metrics(result, clock)
    logger.info(
        "%s: %d processes, avg turnaround %.2f, avg waiting %.2f, avg response %.2f",
        algorithm,
        len(rows),
        result.metrics.avg_turnaround,
        result.metrics.avg_waiting,
        result.metrics.avg_response,
    )
    return result


def schedule_fcfs(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.
    """
    validate_processes(processes)
    states = sort_by_arrival(processes)
    clock = SimulationClock()

    for p in states:
        clock.idle_until(p.arrival_time)
        logger.debug("FCFS: dispatch P%d at t=%d", p.pid, clock.now)
        clock.run(p, p.burst_time)

    return _finish("FCFS", quantum, states, clock)


def schedule_sjf(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and have not
    run yet, choose the one with the smallest burst time; ties go to the
    earlier arrival, then the lower pid. When nothing has arrived the clock
    jumps to the next arrival.
    """
    validate_processes(processes)
    states = sort_by_arrival(processes)
    pending: Deque[ProcessState] = deque(states)
    ready: List[Tuple[int, int, int, ProcessState]] = []
    clock = SimulationClock()

    while pending or ready:
        while pending and pending[0].arrival_time <= clock.now:
            p = pending.popleft()
            heapq.heappush(ready, (p.burst_time, p.arrival_time, p.pid, p))

        if not ready:
            clock.idle_until(pending[0].arrival_time)
            continue

        _, _, _, p = heapq.heappop(ready)
        logger.debug("SJF: dispatch P%d (burst %d) at t=%d", p.pid, p.burst_time, clock.now)
        clock.run(p, p.burst_time)

    return _finish("SJF (non-preemptive)", quantum, states, clock)


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive while a slice runs join the ready queue before the
    preempted process goes back to its tail.
    """
    quantum = validate_quantum(quantum)
    validate_processes(processes)

    states = sort_by_arrival(processes)
    n = len(states)
    clock = SimulationClock()
    ready: Deque[ProcessState] = deque()
    next_idx = 0
    completed = 0

    def admit_arrivals() -> None:
        nonlocal next_idx
        while next_idx < n and states[next_idx].arrival_time <= clock.now:
            ready.append(states[next_idx])
            next_idx += 1

    if n:
        clock.idle_until(states[0].arrival_time)

    while completed < n:
        admit_arrivals()

        if not ready:
            if next_idx >= n:
                break
            clock.idle_until(states[next_idx].arrival_time)
            continue

        p = ready.popleft()
        run_time = min(p.remaining_time, quantum)
        logger.debug("RR: dispatch P%d for %d at t=%d", p.pid, run_time, clock.now)
        clock.run(p, run_time)

        if p.finished:
            completed += 1
        else:
            admit_arrivals()
            ready.append(p)

    return _finish("Round Robin", quantum, states, clock)


def fcfs_metrics(processes: Sequence[Process]) -> Metrics:
    return schedule_fcfs(processes).metrics


def sjf_metrics(processes: Sequence[Process]) -> Metrics:
    return schedule_sjf(processes).metrics


def rr_metrics(processes: Sequence[Process], time_quantum: int) -> Metrics:
    return schedule_rr(processes, quantum=time_quantum).metrics


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "rr": schedule_rr,
}


def run_algorithm(name: str, processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum is ignored by FCFS and SJF.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)
