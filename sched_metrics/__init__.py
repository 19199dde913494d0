"""
CPU scheduling metrics simulator.

Replays FCFS, non-preemptive SJF and Round Robin over a fixed batch of
processes and reports average turnaround, waiting and response times.
"""

from .algorithms import fcfs_metrics, rr_metrics, sjf_metrics
from .errors import InvalidWorkloadError, SchedulingError
from .models import Metrics, Process

__all__ = [
    "InvalidWorkloadError",
    "Metrics",
    "Process",
    "SchedulingError",
    "fcfs_metrics",
    "rr_metrics",
    "sjf_metrics",
]
