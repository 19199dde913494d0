from pathlib import Path

from sched_metrics.cli import main
from sched_metrics.gantt import render_gantt
from sched_metrics.models import ScheduledSlice


def _workload(tmp_path: Path) -> Path:
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\n1,0,5\n2,0,3\n")
    return p


def test_run_rr(tmp_path: Path, capsys):
    assert main(["run", "-a", "rr", "-w", str(_workload(tmp_path)), "-q", "2"]) == 0
    out = capsys.readouterr().out
    assert "Round Robin" in out
    assert "3.50" in out


def test_compare(tmp_path: Path, capsys):
    assert main(["compare", "-w", str(_workload(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert "FCFS" in out
    assert "SJF" in out
    assert "Round Robin" in out


def test_bad_quantum_reports_error(tmp_path: Path, capsys):
    assert main(["run", "-a", "rr", "-w", str(_workload(tmp_path)), "-q", "0"]) == 2
    assert "quantum" in capsys.readouterr().err


def test_missing_file_reports_error(tmp_path: Path, capsys):
    assert main(["run", "-a", "fcfs", "-w", str(tmp_path / "nope.json")]) == 2
    assert "Error" in capsys.readouterr().err


def test_render_gantt_marks_idle_time():
    chart = render_gantt([ScheduledSlice(1, 0, 2), ScheduledSlice(2, 4, 6)])
    lines = chart.splitlines()
    assert lines[1] == "|==..==|"
    assert lines[3] == "0 2 4 6"


def test_render_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_run_fcfs_does_not_report_quantum(tmp_path: Path, capsys):
    assert main(["run", "-a", "fcfs", "-w", str(_workload(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert "FCFS" in out
    assert "Quantum" not in out
