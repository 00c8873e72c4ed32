from core.process import Process
from schedulers import PriorityScheduler, simulate_priority


def _proc(name, arrival, burst, priority):
    return Process(name, arrival_time=arrival, burst_time=burst, priority=priority, name=name)


def _names(processes):
    return [p.name for p in processes]


def test_priority_lower_value_runs_first():
    steps = simulate_priority([_proc("A", 0, 5, 2), _proc("B", 0, 3, 1)])
    assert len(steps) == 2
    b, a = steps[-1].completed_processes
    assert (b.name, b.end_time) == ("B", 3)
    assert (a.name, a.start_time, a.end_time) == ("A", 3, 8)


def test_priority_is_non_preemptive():
    steps = simulate_priority([_proc("A", 0, 4, 5), _proc("B", 1, 2, 1)])
    a, b = steps[-1].completed_processes
    assert (a.name, a.start_time, a.end_time) == ("A", 0, 4)
    assert (b.name, b.start_time, b.end_time) == ("B", 4, 6)
    assert b.waiting_time == 3


def test_priority_ties_keep_queue_order():
    steps = simulate_priority([_proc("A", 0, 2, 1), _proc("B", 0, 1, 1)])
    assert _names(steps[-1].completed_processes) == ["A", "B"]


def test_priority_ready_queue_snapshot_is_in_priority_order():
    steps = simulate_priority([_proc("A", 0, 1, 9), _proc("B", 0, 2, 3), _proc("C", 0, 2, 1)])
    assert steps[0].running_process.name == "C"
    assert _names(steps[0].ready_queue) == ["B", "A"]


def test_priority_idle_gap():
    steps = simulate_priority([_proc("A", 1, 2, 1), _proc("B", 6, 1, 0)])
    assert [s.time for s in steps] == [3, 6, 7]
    assert steps[1].running_process is None


def test_priority_scheduler_name():
    assert PriorityScheduler([]).name == "Priority (Non-preemptive)"
