"""
완료된 Trace 재생용 커서
"""

from typing import List, Optional, Sequence
from .scheduler_base import ExecutionStep


class TracePlayer:
    """
    Trace 읽기 커서
    앞/뒤 이동과 자동 재생 간격 계산만 담당하며 스텝은 변경하지 않음
    """

    def __init__(self, steps: Sequence[ExecutionStep]):
        self.steps: List[ExecutionStep] = list(steps)
        self.position = 0

    def __len__(self):
        return len(self.steps)

    @property
    def current(self) -> Optional[ExecutionStep]:
        if not self.steps:
            return None
        return self.steps[self.position]

    @property
    def at_start(self) -> bool:
        return self.position == 0

    @property
    def at_end(self) -> bool:
        return not self.steps or self.position >= len(self.steps) - 1

    def seek(self, index: int) -> Optional[ExecutionStep]:
        """index 위치로 이동 (범위를 벗어나면 양 끝으로 고정)"""
        if self.steps:
            self.position = max(0, min(index, len(self.steps) - 1))
        return self.current

    def step_forward(self) -> Optional[ExecutionStep]:
        return self.seek(self.position + 1)

    def step_back(self) -> Optional[ExecutionStep]:
        return self.seek(self.position - 1)

    def rewind(self) -> Optional[ExecutionStep]:
        return self.seek(0)

    def jump_to_end(self) -> Optional[ExecutionStep]:
        return self.seek(len(self.steps) - 1)

    @staticmethod
    def interval(speed: float = 1.0) -> float:
        """자동 재생 시 스텝 간 간격 (초)"""
        if speed <= 0:
            raise ValueError(f"재생 속도는 양수여야 합니다: {speed}")
        return 1.0 / speed
