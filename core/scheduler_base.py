"""
스케줄러 기본 프레임워크: 공통 실행 루프, 실행 스텝(Trace) 기록, 통계
"""

from typing import List, Dict, Optional, Tuple, Sequence
from dataclasses import dataclass
from enum import Enum
from .process import Process, ProcessState, validate_processes

# Round Robin 기본 타임 퀀텀 (시간 단위)
DEFAULT_TIME_QUANTUM = 2


class StepGranularity(Enum):
    """실행 스텝 기록 단위"""
    COARSE = "coarse"  # 디스패치(또는 퀀텀)당 한 스텝
    FINE = "fine"  # 실행 시간 단위마다 한 스텝 + 종료 스텝


@dataclass(frozen=True)
class ExecutionStep:
    """시뮬레이션의 한 순간 (모든 프로세스는 기록 시점의 복사본)"""
    time: int
    running_process: Optional[Process]
    ready_queue: Tuple[Process, ...] = ()
    completed_processes: Tuple[Process, ...] = ()

    def to_dict(self) -> Dict:
        return {
            'time': self.time,
            'running_process': self.running_process.to_dict() if self.running_process else None,
            'ready_queue': [p.to_dict() for p in self.ready_queue],
            'completed_processes': [p.to_dict() for p in self.completed_processes],
        }


@dataclass
class GanttEntry:
    """Gantt Chart 엔트리 (pid가 None이면 CPU 유휴)"""
    pid: Optional[object]
    name: str
    color: Optional[str]
    start_time: int
    end_time: int
    state: ProcessState

    def to_dict(self) -> Dict:
        return {
            'pid': self.pid,
            'name': self.name,
            'color': self.color,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'state': self.state.value,
        }


class SchedulerStats:
    """
    스케줄링 통계
    Trace의 마지막 스텝(완료 목록)만으로 계산되는 읽기 전용 집계
    """

    def __init__(self):
        self.total_time = 0
        self.total_waiting_time = 0
        self.total_turnaround_time = 0
        self.process_count = 0

    @classmethod
    def from_trace(cls, steps: Sequence[ExecutionStep]) -> 'SchedulerStats':
        stats = cls()
        if not steps:
            return stats

        last_step = steps[-1]
        stats.total_time = last_step.time
        stats.process_count = len(last_step.completed_processes)
        for process in last_step.completed_processes:
            stats.total_waiting_time += process.waiting_time
            stats.total_turnaround_time += process.turnaround_time
        return stats

    def calculate_averages(self) -> Dict:
        """
        평균 계산

        프로세스가 없거나 경과 시간이 0이면 모든 값(처리율 포함)을 0으로 정의
        """
        if self.process_count == 0 or self.total_time == 0:
            return {
                'total_time': self.total_time,
                'avg_waiting_time': 0,
                'avg_turnaround_time': 0,
                'throughput': 0,
                'process_count': self.process_count
            }

        return {
            'total_time': self.total_time,
            'avg_waiting_time': self.total_waiting_time / self.process_count,
            'avg_turnaround_time': self.total_turnaround_time / self.process_count,
            'throughput': self.process_count / self.total_time,
            'process_count': self.process_count
        }


def calculate_metrics(steps: Sequence[ExecutionStep]) -> Dict:
    """Trace에서 평균 대기/반환 시간과 처리율 계산"""
    return SchedulerStats.from_trace(steps).calculate_averages()


class BaseScheduler:
    """
    기본 스케줄러 클래스
    도착 처리, 유휴 처리, 스텝 기록 루프를 공통으로 제공하고
    하위 클래스는 select_next_process()로 선택 정책만 정의
    """

    default_granularity = StepGranularity.COARSE

    def __init__(self, processes: List[Process], name: str = "Base Scheduler",
                 granularity=None):
        self.processes = validate_processes(processes)
        self.name = name
        self.granularity = StepGranularity(granularity) if granularity is not None \
            else self.default_granularity

        self.current_time = 0
        # 아직 도착하지 않은 프로세스 (도착 시간 순, 같으면 입력 순)
        self.pending: List[Process] = sorted(self.processes, key=lambda p: p.arrival_time)
        self.ready_queue: List[Process] = []
        self.running_process: Optional[Process] = None
        self.terminated_processes: List[Process] = []

        # 실행 스텝 (Trace)
        self.steps: List[ExecutionStep] = []

        # Gantt Chart 데이터
        self.gantt_chart: List[GanttEntry] = []

        # 통계
        self.stats = SchedulerStats()

        # 이벤트 로그
        self.event_log: List[str] = []

    def log_event(self, message: str):
        """이벤트 로그 기록"""
        log_entry = f"[T={self.current_time:3d}] {message}"
        self.event_log.append(log_entry)

    def add_to_gantt_chart(self, process: Optional[Process], start: int, end: int,
                           state: ProcessState):
        """Gantt Chart에 엔트리 추가"""
        if start < end:  # 유효한 시간 구간만 추가
            if process is None:
                self.gantt_chart.append(GanttEntry(None, "Idle", None, start, end, state))
            else:
                self.gantt_chart.append(GanttEntry(process.pid, process.name, process.color,
                                                   start, end, state))

    def record_step(self, time: int, running: Optional[Process]):
        """현재 상태의 복사본으로 실행 스텝 추가"""
        self.steps.append(ExecutionStep(
            time=time,
            running_process=running.snapshot() if running is not None else None,
            ready_queue=tuple(p.snapshot() for p in self.ready_queue),
            completed_processes=tuple(p.snapshot() for p in self.terminated_processes)
        ))

    def handle_process_arrival(self):
        """현재 시간까지 도착한 프로세스를 Ready 큐로 이동"""
        while self.pending and self.pending[0].arrival_time <= self.current_time:
            process = self.pending.pop(0)
            process.state = ProcessState.READY
            self.ready_queue.append(process)
            self.log_event(f"P{process.pid} arrived → Ready Queue")

    def handle_idle(self):
        """Ready 큐가 비었으면 다음 도착 시간까지 CPU 유휴"""
        if not self.pending:
            raise RuntimeError(f"{self.name}: 실행할 프로세스가 없는데 시뮬레이션이 끝나지 않았습니다")

        idle_start = self.current_time
        next_arrival = self.pending[0].arrival_time
        self.log_event(f"CPU idle until T={next_arrival}")
        self.current_time = next_arrival
        self.add_to_gantt_chart(None, idle_start, self.current_time, ProcessState.READY)
        self.record_step(self.current_time, None)

    def dispatch(self, process: Process):
        """선택된 프로세스에 CPU 할당"""
        self.running_process = process
        process.state = ProcessState.RUNNING
        if process.start_time is None:
            process.start_time = self.current_time
        self.log_event(f"P{process.pid} → Running")

    def run_for(self, process: Process, duration: int, shown_burst: Optional[int] = None):
        """
        프로세스를 duration만큼 실행하고 시계를 진행

        FINE 모드에서는 실행 시간 단위마다 스텝을 기록
        shown_burst가 주어지면 단위 스텝의 burst_time을 그 값으로 표시
        """
        start = self.current_time
        if self.granularity == StepGranularity.FINE:
            shown = process
            if shown_burst is not None:
                shown = process.snapshot()
                shown.burst_time = shown_burst
            for t in range(duration):
                self.record_step(start + t, shown)

        self.current_time = start + duration
        self.add_to_gantt_chart(process, start, self.current_time, ProcessState.RUNNING)

    def terminate_process(self, process: Process):
        """프로세스 종료 처리"""
        process.finish(self.current_time)
        self.terminated_processes.append(process)
        self.running_process = None
        self.log_event(f"P{process.pid} → Terminated "
                       f"(WT={process.waiting_time}, TT={process.turnaround_time})")

    def execute_process(self, process: Process):
        """비선점형 실행: 버스트 전체를 한 번에 실행"""
        self.run_for(process, process.burst_time)
        self.terminate_process(process)
        self.record_step(self.current_time, process)

    def select_next_process(self) -> int:
        """
        Ready 큐에서 다음 실행할 프로세스의 인덱스 반환 (하위 클래스에서 구현)
        """
        raise NotImplementedError("Subclasses must implement select_next_process()")

    def is_simulation_complete(self) -> bool:
        """시뮬레이션 완료 여부 확인"""
        return len(self.terminated_processes) >= len(self.processes)

    def run(self, verbose: bool = False) -> Dict:
        """
        스케줄링 시뮬레이션 실행

        Args:
            verbose: 상세 로그 출력 여부

        Returns:
            시뮬레이션 결과 딕셔너리
        """
        self.log_event(f"===== {self.name} Scheduling Started =====")

        # 시간 0에 도착한 프로세스가 없으면 첫 도착 시간으로 이동
        if self.pending and self.pending[0].arrival_time > 0:
            self.current_time = self.pending[0].arrival_time

        while not self.is_simulation_complete():
            self.handle_process_arrival()

            if not self.ready_queue:
                self.handle_idle()
                continue

            index = self.select_next_process()
            process = self.ready_queue.pop(index)
            self.dispatch(process)
            self.execute_process(process)

        self.log_event(f"===== {self.name} Scheduling Completed =====")

        if verbose:
            for log in self.event_log:
                print(log)

        return self.get_results()

    def get_results(self) -> Dict:
        """
        시뮬레이션 결과 반환

        Returns:
            결과 딕셔너리 (Trace, 통계, Gantt Chart, 로그 등)
        """
        self.stats = SchedulerStats.from_trace(self.steps)

        return {
            'algorithm': self.name,
            'steps': self.steps,
            'statistics': self.stats.calculate_averages(),
            'gantt_chart': self.gantt_chart,
            'event_log': self.event_log,
            'processes': self.terminated_processes
        }
