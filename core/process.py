"""
프로세스 및 PCB (Process Control Block) 관리 모듈
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional
from copy import copy, deepcopy


class InvalidInputError(ValueError):
    """시뮬레이션 시작 전에 거부되는 잘못된 입력"""


class ProcessState(Enum):
    """프로세스 상태"""
    READY = "Ready"
    RUNNING = "Running"
    TERMINATED = "Terminated"


class Process:
    """
    프로세스 제어 블록 (PCB)
    입력 필드(도착/버스트/우선순위)와 스케줄링 중 기록되는 필드를 함께 관리
    """

    def __init__(self, pid, arrival_time: int, burst_time: int, priority: int = 0,
                 name: Optional[str] = None, color: Optional[str] = None):
        """
        프로세스 초기화

        Args:
            pid: 프로세스 ID (한 실행 안에서 유일)
            arrival_time: 도착 시간
            burst_time: 총 CPU 버스트 시간
            priority: 우선순위 (낮을수록 높은 우선순위)
            name: 표시 이름 (없으면 P<pid>)
            color: 표시용 색상 (엔진은 그대로 전달만 함)
        """
        self.pid = pid
        self.name = name if name else f"P{pid}"
        self.arrival_time = arrival_time
        self.burst_time = burst_time
        self.priority = priority
        self.color = color

        self.state = ProcessState.READY
        self.remaining_time = burst_time  # Round Robin에서만 감소

        # 통계 정보
        self.start_time: Optional[int] = None  # 첫 실행 시간
        self.end_time: Optional[int] = None  # 완료 시간
        self.waiting_time: Optional[int] = None  # 대기 시간
        self.turnaround_time: Optional[int] = None  # 반환 시간

    def execute(self, time_units: int) -> bool:
        """
        남은 시간 감소 (Round Robin 슬라이스)

        Args:
            time_units: 실행할 시간 단위

        Returns:
            남은 시간이 0이 되었는지 여부
        """
        if time_units <= 0 or time_units > self.remaining_time:
            raise ValueError(f"P{self.pid}: 실행 시간 {time_units}이(가) 남은 시간 "
                             f"{self.remaining_time}과 맞지 않습니다")

        self.remaining_time -= time_units
        return self.remaining_time == 0

    def finish(self, end_time: int):
        """완료 시간 기록 및 반환/대기 시간 계산"""
        self.state = ProcessState.TERMINATED
        self.end_time = end_time
        self.turnaround_time = end_time - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time

    def is_completed(self) -> bool:
        return self.end_time is not None

    def snapshot(self) -> 'Process':
        """현재 시점의 값 복사본 (이후 변경이 기록에 영향을 주지 않음)"""
        return copy(self)

    def to_dict(self) -> Dict:
        return {
            'pid': self.pid,
            'name': self.name,
            'color': self.color,
            'arrival_time': self.arrival_time,
            'burst_time': self.burst_time,
            'priority': self.priority,
            'state': self.state.value,
            'remaining_time': self.remaining_time,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'waiting_time': self.waiting_time,
            'turnaround_time': self.turnaround_time,
        }

    def __repr__(self):
        return f"P{self.pid}[{self.state.value}]"

    def __str__(self):
        return f"Process {self.pid} ({self.name}): State={self.state.value}, " \
               f"Priority={self.priority}, Remaining={self.remaining_time}"


def create_process_copy(process: Process) -> Process:
    """
    프로세스의 깊은 복사본 생성
    각 스케줄링 알고리즘 시뮬레이션을 독립적으로 수행하기 위함
    """
    return deepcopy(process)


def validate_processes(processes: Iterable[Process]) -> List[Process]:
    """
    시뮬레이션 전 입력 검증

    Raises:
        InvalidInputError: 시간/우선순위가 정수가 아니거나, 버스트 시간이 0 이하,
                           도착 시간/우선순위가 음수, 또는 PID가 중복된 경우
    """
    processes = list(processes)
    seen = set()

    for p in processes:
        for field in ('arrival_time', 'burst_time', 'priority'):
            value = getattr(p, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(f"{field}은(는) 정수여야 합니다: P{p.pid} ({field}={value!r})")
        if p.burst_time <= 0:
            raise InvalidInputError(f"버스트 시간은 양수여야 합니다: P{p.pid} (burst={p.burst_time})")
        if p.arrival_time < 0:
            raise InvalidInputError(f"도착 시간은 0 이상이어야 합니다: P{p.pid} (arrival={p.arrival_time})")
        if p.priority < 0:
            raise InvalidInputError(f"우선순위는 0 이상이어야 합니다: P{p.pid} (priority={p.priority})")
        if p.pid in seen:
            raise InvalidInputError(f"중복된 PID: {p.pid}")
        seen.add(p.pid)

    return processes
