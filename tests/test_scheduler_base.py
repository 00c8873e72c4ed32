import dataclasses

import pytest

from core.process import Process, InvalidInputError
from core.scheduler_base import StepGranularity, calculate_metrics
from schedulers import ALGORITHM_MAP, create_scheduler, run_algorithm, simulate


def _workload():
    return [
        Process("1", arrival_time=0, burst_time=7, priority=3, name="P1", color="#FF9AA2"),
        Process("2", arrival_time=2, burst_time=4, priority=1, name="P2"),
        Process("3", arrival_time=4, burst_time=1, priority=4, name="P3"),
        Process("4", arrival_time=5, burst_time=4, priority=2, name="P4"),
        Process("5", arrival_time=30, burst_time=3, priority=0, name="P5"),
    ]


ALGORITHMS = list(ALGORITHM_MAP)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
@pytest.mark.parametrize("granularity", [None, "coarse", "fine"])
def test_every_process_completes_exactly_once(algorithm, granularity):
    steps = simulate(algorithm, _workload(), quantum=3, granularity=granularity)
    done = steps[-1].completed_processes
    assert sorted(p.pid for p in done) == ["1", "2", "3", "4", "5"]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_derived_field_invariants(algorithm):
    steps = simulate(algorithm, _workload(), quantum=2)
    for p in steps[-1].completed_processes:
        assert p.turnaround_time == p.end_time - p.arrival_time
        assert p.waiting_time == p.turnaround_time - p.burst_time
        assert p.waiting_time >= 0
        assert p.end_time >= p.start_time >= p.arrival_time


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_trace_time_never_goes_backwards(algorithm):
    steps = simulate(algorithm, _workload(), quantum=2, granularity="fine")
    times = [s.time for s in steps]
    assert times == sorted(times)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_idle_step_emitted_before_late_arrival(algorithm):
    steps = simulate(algorithm, _workload(), quantum=2)
    idle = [s for s in steps if s.running_process is None]
    assert len(idle) == 1
    assert idle[0].time == 30
    assert len(idle[0].completed_processes) == 4


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_repeated_runs_are_identical(algorithm):
    processes = _workload()
    first = [s.to_dict() for s in simulate(algorithm, processes, quantum=2)]
    second = [s.to_dict() for s in simulate(algorithm, processes, quantum=2)]
    assert first == second


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_input_list_is_not_mutated(algorithm):
    processes = _workload()
    simulate(algorithm, processes, quantum=2)
    for p in processes:
        assert p.start_time is None
        assert p.end_time is None
        assert p.remaining_time == p.burst_time


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_color_passes_through(algorithm):
    steps = simulate(algorithm, _workload(), quantum=2)
    p1 = next(p for p in steps[-1].completed_processes if p.pid == "1")
    assert p1.color == "#FF9AA2"


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_invalid_input_rejected_before_running(algorithm):
    with pytest.raises(InvalidInputError):
        create_scheduler(algorithm, [Process("1", arrival_time=0, burst_time=0)])


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_statistics_match_trace(algorithm):
    result = run_algorithm(algorithm, _workload(), quantum=2)
    assert result['statistics'] == calculate_metrics(result['steps'])
    assert [p.pid for p in result['processes']] == \
        [p.pid for p in result['steps'][-1].completed_processes]


def test_steps_are_immutable():
    steps = simulate('FCFS', _workload())
    with pytest.raises(dataclasses.FrozenInstanceError):
        steps[0].time = 99
    assert isinstance(steps[0].ready_queue, tuple)


def test_unknown_algorithm():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        simulate('SRTF', _workload())


def test_unknown_granularity():
    with pytest.raises(ValueError):
        create_scheduler('FCFS', _workload(), granularity="medium")


def test_quantum_only_applies_to_round_robin():
    assert create_scheduler('FCFS', _workload(), quantum=0).name == "FCFS"
    assert create_scheduler('RoundRobin', _workload(), quantum=5).quantum == 5


def test_granularity_accepts_enum_and_string():
    assert create_scheduler('SJF', [], granularity="coarse").granularity == StepGranularity.COARSE
    assert create_scheduler('SJF', [], granularity=StepGranularity.FINE).granularity == StepGranularity.FINE
