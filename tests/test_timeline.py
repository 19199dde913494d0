import pytest

from sched_metrics.errors import InvalidWorkloadError, SchedulingError, validate_processes
from sched_metrics.metrics import summarize_process_metrics
from sched_metrics.models import Metrics, Process, ProcessState
from sched_metrics.timeline import SimulationClock, arrival_key, sort_by_arrival


def test_sort_by_arrival_uses_pid_for_ties():
    procs = [Process(3, 2, 1), Process(2, 0, 4), Process(1, 2, 5)]
    states = sort_by_arrival(procs)
    assert [s.pid for s in states] == [2, 1, 3]
    assert all(s.remaining_time == s.burst_time for s in states)
    assert all(s.start_time is None for s in states)


def test_arrival_key():
    assert arrival_key(Process(7, 3, 1)) == (3, 7)


def test_clock_records_start_once():
    state = ProcessState.from_process(Process(1, 0, 4))
    clock = SimulationClock()
    clock.run(state, 2)
    clock.idle_until(1)  # already past, no-op
    clock.run(state, 2)

    assert state.start_time == 0
    assert state.completion_time == 4
    assert state.finished
    assert clock.idle_time == 0
    assert clock.busy_time == 4
    assert len(clock.slices) == 1


def test_clock_start_at_zero_is_not_unset():
    state = ProcessState.from_process(Process(1, 0, 1))
    SimulationClock().run(state, 1)
    assert state.start_time == 0
    assert state.response_time == 0


def test_clock_idle_jump():
    clock = SimulationClock()
    clock.idle_until(6)
    assert clock.now == 6
    assert clock.idle_time == 6


@pytest.mark.parametrize("duration", [0, -1, 5])
def test_clock_rejects_bad_duration(duration):
    state = ProcessState.from_process(Process(1, 0, 4))
    with pytest.raises(SchedulingError):
        SimulationClock().run(state, duration)


@pytest.mark.parametrize(
    "procs",
    [
        [Process(1, -1, 3)],
        [Process(1, 0, 0)],
        [Process(1, 0, -2)],
        [Process(1, 0, 2), Process(1, 3, 1)],
        [Process("A", 0, 2)],
        [Process(1, 0.5, 2)],
    ],
)
def test_validate_processes_rejects(procs):
    with pytest.raises(InvalidWorkloadError):
        validate_processes(procs)


def test_invalid_workload_is_value_error():
    assert issubclass(InvalidWorkloadError, ValueError)


def test_summarize_empty():
    assert summarize_process_metrics([]) == Metrics(0.0, 0.0, 0.0)
