"""
CPU Scheduling Algorithms
"""

from .basic_schedulers import FCFSScheduler, SJFScheduler, RoundRobinScheduler
from .priority_schedulers import PriorityScheduler
from .registry import (ALGORITHM_MAP, create_scheduler, run_algorithm, simulate,
                       simulate_fcfs, simulate_sjf, simulate_priority, simulate_round_robin)

__all__ = [
    'FCFSScheduler',
    'SJFScheduler',
    'RoundRobinScheduler',
    'PriorityScheduler',
    'ALGORITHM_MAP',
    'create_scheduler',
    'run_algorithm',
    'simulate',
    'simulate_fcfs',
    'simulate_sjf',
    'simulate_priority',
    'simulate_round_robin'
]
