from pathlib import Path

import pytest

from sched_metrics.errors import InvalidWorkloadError
from sched_metrics.models import Process
from sched_metrics.workload_io import load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":1,"arrival_time":0,"burst_time":3},'
                 '{"pid":2,"arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert procs == [Process(1, 0, 3), Process(2, 1, 2)]


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,note\n1,0,3,x\n2,1,2,\n")
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[1].arrival_time == 1


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("")
    with pytest.raises(ValueError):
        load_workload(p)


def test_malformed_entry(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time\n1,0\n")
    with pytest.raises(InvalidWorkloadError):
        load_workload(p)


def test_duplicate_pid_rejected(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\n1,0,3\n1,2,2\n")
    with pytest.raises(InvalidWorkloadError):
        load_workload(p)


@pytest.mark.parametrize(
    "entry",
    [
        '{"pid":1,"arrival_time":0.9,"burst_time":3}',
        '{"pid":1,"arrival_time":0,"burst_time":2.5}',
        '{"pid":1,"arrival_time":true,"burst_time":3}',
        '{"pid":"1","arrival_time":0,"burst_time":3}',
    ],
)
def test_json_non_integer_fields_rejected(tmp_path: Path, entry):
    p = tmp_path / "w.json"
    p.write_text(f"[{entry}]")
    with pytest.raises(InvalidWorkloadError):
        load_workload(p)
