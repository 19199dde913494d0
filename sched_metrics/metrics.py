from __future__ import annotations

from typing import List

from .models import Metrics, ProcessMetrics, ScheduleResult, SystemMetrics
from .timeline import SimulationClock


def summarize_process_metrics(processes: List[ProcessMetrics]) -> Metrics:
    """
    Return averages of the key per-process metrics for quick comparison.

    An empty list yields all-zero averages rather than dividing by zero.
    """
    if not processes:
        return Metrics()

    n = len(processes)
    return Metrics(
        avg_turnaround=sum(p.turnaround_time for p in processes) / n,
        avg_waiting=sum(p.waiting_time for p in processes) / n,
        avg_response=sum(p.response_time for p in processes) / n,
    )


def compute_system_metrics(result: ScheduleResult, clock: SimulationClock) -> SystemMetrics:
    """
    Compute throughput and CPU utilization from the finished run's clock.
    """
    if not result.processes:
        system = SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = clock.now
    cpu_busy_time = clock.busy_time

    throughput = len(result.processes) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=clock.idle_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
    )
    result.system = system
    return system
