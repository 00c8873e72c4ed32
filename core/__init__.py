"""
Core modules for CPU Scheduling Simulator
"""

from .process import Process, ProcessState, InvalidInputError, create_process_copy, validate_processes
from .scheduler_base import (BaseScheduler, SchedulerStats, GanttEntry, ExecutionStep,
                             StepGranularity, DEFAULT_TIME_QUANTUM, calculate_metrics)
from .playback import TracePlayer

__all__ = [
    'Process',
    'ProcessState',
    'InvalidInputError',
    'create_process_copy',
    'validate_processes',
    'BaseScheduler',
    'SchedulerStats',
    'GanttEntry',
    'ExecutionStep',
    'StepGranularity',
    'DEFAULT_TIME_QUANTUM',
    'calculate_metrics',
    'TracePlayer'
]
