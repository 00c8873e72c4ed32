"""
알고리즘 등록 및 함수 호출 인터페이스
프로세스 리스트(+ Round Robin 퀀텀)를 받아 실행 스텝 리스트(Trace)를 반환
"""

from typing import Dict, List, Optional
from core.process import Process
from core.scheduler_base import BaseScheduler, ExecutionStep, DEFAULT_TIME_QUANTUM
from .basic_schedulers import FCFSScheduler, SJFScheduler, RoundRobinScheduler
from .priority_schedulers import PriorityScheduler


# 알고리즘 매핑
ALGORITHM_MAP = {
    'FCFS': {
        'name': 'FCFS (First-Come, First-Served)',
        'class': FCFSScheduler,
        'params': {},
        'preemptive': False
    },
    'SJF': {
        'name': 'SJF (Shortest Job First - Non-preemptive)',
        'class': SJFScheduler,
        'params': {},
        'preemptive': False
    },
    'Priority': {
        'name': 'Priority Scheduling (Non-preemptive)',
        'class': PriorityScheduler,
        'params': {},
        'preemptive': False
    },
    'RoundRobin': {
        'name': 'Round Robin',
        'class': RoundRobinScheduler,
        'params': {'quantum': DEFAULT_TIME_QUANTUM},
        'preemptive': True
    },
}


def create_scheduler(algorithm: str, processes: List[Process],
                     quantum: int = DEFAULT_TIME_QUANTUM, granularity=None) -> BaseScheduler:
    """알고리즘 이름으로 스케줄러 생성 (퀀텀은 Round Robin에만 적용)"""
    if algorithm not in ALGORITHM_MAP:
        raise ValueError(f"Unknown algorithm: {algorithm}")

    algo_info = ALGORITHM_MAP[algorithm]
    params = algo_info['params'].copy()
    if 'quantum' in params:
        params['quantum'] = quantum

    return algo_info['class'](processes, granularity=granularity, **params)


def run_algorithm(algorithm: str, processes: List[Process],
                  quantum: int = DEFAULT_TIME_QUANTUM, granularity=None,
                  verbose: bool = False) -> Dict:
    """스케줄러 실행 후 결과 딕셔너리 반환"""
    return create_scheduler(algorithm, processes, quantum, granularity).run(verbose=verbose)


def simulate(algorithm: str, processes: List[Process],
             quantum: int = DEFAULT_TIME_QUANTUM, granularity=None) -> List[ExecutionStep]:
    """시뮬레이션 실행 후 Trace 반환 (입력이 비어 있으면 빈 리스트)"""
    return run_algorithm(algorithm, processes, quantum, granularity)['steps']


def simulate_fcfs(processes: List[Process], granularity=None) -> List[ExecutionStep]:
    return simulate('FCFS', processes, granularity=granularity)


def simulate_sjf(processes: List[Process], granularity=None) -> List[ExecutionStep]:
    return simulate('SJF', processes, granularity=granularity)


def simulate_priority(processes: List[Process], granularity=None) -> List[ExecutionStep]:
    return simulate('Priority', processes, granularity=granularity)


def simulate_round_robin(processes: List[Process], quantum: int,
                         granularity: Optional[str] = None) -> List[ExecutionStep]:
    return simulate('RoundRobin', processes, quantum, granularity)
