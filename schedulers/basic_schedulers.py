"""
기본 스케줄링 알고리즘 구현
- FCFS (First-Come, First-Served)
- SJF (Shortest Job First - Non-preemptive)
- Round Robin
"""

from typing import List
from core.process import Process, ProcessState, InvalidInputError, create_process_copy
from core.scheduler_base import BaseScheduler, StepGranularity, DEFAULT_TIME_QUANTUM


class FCFSScheduler(BaseScheduler):
    """
    FCFS (First-Come, First-Served) 스케줄러
    비선점형: 먼저 도착한 프로세스를 먼저 처리
    """

    def __init__(self, processes: List[Process], granularity=None):
        super().__init__([create_process_copy(p) for p in processes], "FCFS", granularity)

    def select_next_process(self) -> int:
        """Ready 큐의 첫 번째 프로세스 선택 (FIFO)"""
        return 0


class SJFScheduler(BaseScheduler):
    """
    SJF (Shortest Job First) 스케줄러 - 비선점형
    버스트 시간이 가장 짧은 프로세스를 우선 처리, 실행 중에는 다시 선택하지 않음

    기본 스텝 단위는 FINE (실행 시간 단위마다 스텝 기록)
    """

    default_granularity = StepGranularity.FINE

    def __init__(self, processes: List[Process], granularity=None):
        super().__init__([create_process_copy(p) for p in processes],
                         "SJF (Non-preemptive)", granularity)

    def select_next_process(self) -> int:
        """버스트 시간이 가장 짧은 프로세스 선택 (같으면 큐 순서)"""
        self.ready_queue.sort(key=lambda p: p.burst_time)
        return 0


class RoundRobinScheduler(BaseScheduler):
    """
    Round Robin 스케줄러
    선점형: 타임 퀀텀만큼 실행 후 Ready 큐 맨 뒤로 이동
    """

    def __init__(self, processes: List[Process], quantum: int = DEFAULT_TIME_QUANTUM,
                 granularity=None):
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
            raise InvalidInputError(f"타임 퀀텀은 양의 정수여야 합니다: {quantum!r}")

        super().__init__([create_process_copy(p) for p in processes],
                         f"Round Robin (q={quantum})", granularity)
        self.quantum = quantum

    def select_next_process(self) -> int:
        """Ready 큐의 맨 앞 프로세스 선택"""
        return 0

    def execute_process(self, process: Process):
        """
        min(퀀텀, 남은 시간)만큼 실행

        실행 스텝(FINE 단위 스텝 포함)의 running_process는 이번 슬라이스 길이를
        burst_time으로 보여주고, 완료 목록에는 원래 버스트 시간이 그대로 남음
        """
        executed = min(self.quantum, process.remaining_time)
        self.run_for(process, executed, shown_burst=executed)
        finished = process.execute(executed)

        # 슬라이스 동안 도착한 프로세스가 재삽입되는 프로세스보다 앞에 옴
        self.handle_process_arrival()

        running = process.snapshot()
        running.burst_time = executed

        if finished:
            self.terminate_process(process)
        else:
            process.state = ProcessState.READY
            self.ready_queue.append(process)
            self.running_process = None
            self.log_event(f"P{process.pid} preempted → Ready Queue "
                           f"(remaining={process.remaining_time})")

        self.record_step(self.current_time, running)
