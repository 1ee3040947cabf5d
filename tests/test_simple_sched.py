from collections import defaultdict

import pytest

from dsakit.simple_sched import (
    Job,
    Slice,
    TimedProcess,
    fcfs,
    format_times_table,
    main,
    round_robin,
    sjn,
    waiting_and_turnaround,
)

DEMO = [Job(1, 0, 5), Job(2, 1, 3), Job(3, 2, 8), Job(4, 3, 6), Job(5, 4, 4)]


def _time_per_job(run):
    totals = defaultdict(int)
    for piece in run.slices:
        totals[piece.job_id] += piece.end - piece.start
    return dict(totals)


def test_fcfs_runs_in_input_order_back_to_back():
    run = fcfs(DEMO)
    assert [piece.job_id for piece in run.slices] == [job.job_id for job in DEMO]
    for before, after in zip(run.slices, run.slices[1:]):
        assert before.end == after.start
    assert run.average_waiting == pytest.approx(8.2)


def test_fcfs_waits_for_late_arrival():
    run = fcfs([Job(1, 0, 2), Job(2, 5, 1)])
    assert run.slices[1] == Slice(2, 5, 6)
    assert run.average_waiting == 0


def test_sjn_picks_shortest_ready_job():
    run = sjn(DEMO)
    assert [piece.job_id for piece in run.slices] == [1, 2, 5, 4, 3]
    assert _time_per_job(run) == {job.job_id: job.burst for job in DEMO}


def test_sjn_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        sjn([Job(1, 0, 2), Job(1, 1, 3)])


def test_round_robin_respects_quantum():
    run = round_robin(DEMO, 2)
    assert all(piece.end - piece.start <= 2 for piece in run.slices)
    assert _time_per_job(run) == {job.job_id: job.burst for job in DEMO}
    assert run.slices[-1].end == sum(job.burst for job in DEMO)


def test_round_robin_idles_until_arrival():
    run = round_robin([Job(7, 3, 2)], 5)
    assert run.slices == [Slice(7, 3, 5)]
    assert run.average_waiting == 0


def test_round_robin_needs_positive_quantum():
    with pytest.raises(ValueError):
        round_robin(DEMO, 0)


@pytest.mark.parametrize("schedule", [fcfs, sjn, lambda jobs: round_robin(jobs, 2)])
def test_empty_job_list_raises(schedule):
    with pytest.raises(ValueError):
        schedule([])


def test_waiting_and_turnaround_invariants():
    processes = [TimedProcess(1, 0, 10, 10), TimedProcess(2, 6, 4, 14), TimedProcess(3, 8, 2, 16)]
    waiting, turnaround = waiting_and_turnaround(processes)
    assert waiting[0] == 0
    for index in range(1, len(processes)):
        assert waiting[index] - waiting[index - 1] == processes[index - 1].burst
    assert turnaround == [p.completion - p.arrival for p in processes]


def test_format_times_table_header_and_averages():
    processes = [TimedProcess(1, 0, 3, 3), TimedProcess(2, 0, 3, 6)]
    lines = format_times_table(processes).splitlines()
    assert lines[0] == (
        "Process ID\tArrival Time\tBurst Time\tWaiting Time\tTurnaround Time\tCompletion Time"
    )
    waiting, turnaround = waiting_and_turnaround(processes)
    average_wait = float(lines[-2].split(": ")[1])
    average_turn = float(lines[-1].split(": ")[1])
    assert average_wait == pytest.approx(sum(waiting) / len(waiting))
    assert average_turn == pytest.approx(sum(turnaround) / len(turnaround))


def test_format_times_table_empty_raises():
    with pytest.raises(ValueError):
        format_times_table([])


def test_main_prints_all_sections(capsys):
    assert main(["--quantum", "3"]) == 0
    out = capsys.readouterr().out
    assert "FCFS Scheduling:" in out
    assert "SJN Scheduling:" in out
    assert "Round Robin Scheduling (Quantum = 3):" in out
    assert "Average Turnaround Time:" in out