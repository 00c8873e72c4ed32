"""
우선순위 스케줄링 알고리즘 구현
- Priority Scheduling (Non-preemptive)
"""

from typing import List
from core.process import Process, create_process_copy
from core.scheduler_base import BaseScheduler


class PriorityScheduler(BaseScheduler):
    """
    우선순위 스케줄러 (비선점형)
    우선순위 값이 낮을수록 먼저 실행, 새로 도착한 프로세스가 실행 중인 프로세스를 선점하지 않음
    """

    def __init__(self, processes: List[Process], granularity=None):
        super().__init__([create_process_copy(p) for p in processes],
                         "Priority (Non-preemptive)", granularity)

    def select_next_process(self) -> int:
        """우선순위가 가장 높은 (값이 가장 낮은) 프로세스 선택 (같으면 큐 순서)"""
        self.ready_queue.sort(key=lambda p: p.priority)
        return 0
