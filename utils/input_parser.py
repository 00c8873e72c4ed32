"""
입력 데이터 파서 및 프로세스 생성 모듈
"""

import csv
import random
import string
from typing import List, Optional
from core.process import Process

# 글자 대비가 좋은 파스텔 색상
PASTEL_COLORS = [
    "#FF9AA2",  # Light Red
    "#FFB7B2",  # Salmon
    "#FFDAC1",  # Light Orange
    "#E2F0CB",  # Light Green
    "#B5EAD7",  # Mint
    "#C7CEEA",  # Light Blue
    "#F7D8BA",  # Light Peach
    "#DCD3FF",  # Light Purple
    "#CADEFC",  # Sky Blue
    "#F6FDC3",  # Light Yellow
    "#FFCBF2",  # Light Pink
    "#D0F4DE",  # Pale Green
    "#A9DEF9",  # Baby Blue
    "#E4C1F9",  # Lavender
    "#FCF6BD",  # Pale Yellow
]


def random_color(rng: Optional[random.Random] = None) -> str:
    """파스텔 팔레트에서 임의의 색상 선택"""
    return (rng or random).choice(PASTEL_COLORS)


def generate_id(rng: Optional[random.Random] = None, length: int = 7) -> str:
    """영문 소문자/숫자로 된 임의의 ID 생성"""
    return ''.join((rng or random).choice(string.ascii_lowercase + string.digits)
                   for _ in range(length))


class InputParser:
    """입력 파일 파서"""

    @staticmethod
    def parse_file(filename: str) -> List[Process]:
        """
        CSV 파일에서 프로세스 정보 읽기

        파일 형식: ID,이름,도착시간,버스트시간,우선순위[,색상]
        예: 1,P1,0,5,2,#FF9AA2

        Args:
            filename: 입력 파일 경로

        Returns:
            프로세스 리스트

        Raises:
            FileNotFoundError: 파일이 없는 경우
            ValueError: 형식이 잘못된 라인이 있는 경우
        """
        processes = []

        with open(filename, 'r', encoding='utf-8', newline='') as f:
            for line_no, row in enumerate(csv.reader(f), 1):
                # 주석 및 빈 줄 제거
                if not row or not ''.join(row).strip() or row[0].strip().startswith('#'):
                    continue

                try:
                    processes.append(InputParser._create_process_from_parts(row))
                except ValueError as e:
                    raise ValueError(f"{filename}:{line_no}: {e}") from e

        print(f"{filename}에서 {len(processes)}개의 프로세스를 성공적으로 로드했습니다")
        return processes

    @staticmethod
    def _create_process_from_parts(parts: List[str]) -> Process:
        """파싱된 부분에서 프로세스 객체 생성"""
        parts = [part.strip() for part in parts]
        if len(parts) < 5:
            raise ValueError(f"잘못된 형식: 5개 필드가 필요하지만 {len(parts)}개만 있습니다")

        pid = parts[0]
        if not pid:
            raise ValueError("PID가 비어있습니다")
        name = parts[1] or None
        color = parts[5] if len(parts) > 5 and parts[5] else None

        # 입력 검증
        try:
            arrival_time = int(parts[2])
            burst_time = int(parts[3])
            priority = int(parts[4])
        except ValueError as e:
            raise ValueError(f"숫자 필드 변환 오류: {e}")

        if arrival_time < 0:
            raise ValueError(f"도착 시간은 0 이상이어야 합니다: {arrival_time}")
        if burst_time <= 0:
            raise ValueError(f"버스트 시간은 양수여야 합니다: {burst_time}")
        if priority < 0:
            raise ValueError(f"우선순위는 0 이상이어야 합니다: {priority}")

        return Process(pid, arrival_time, burst_time, priority, name=name, color=color)

    @staticmethod
    def generate_random_processes(num_processes: int = 5,
                                  max_arrival: int = 20,
                                  max_burst: int = 20,
                                  max_priority: int = 10,
                                  seed: int = None) -> List[Process]:
        """
        랜덤 프로세스 생성

        Args:
            num_processes: 생성할 프로세스 수
            max_arrival: 최대 도착 시간
            max_burst: 최대 CPU 버스트 시간
            max_priority: 최대 우선순위 값
            seed: 랜덤 시드

        Returns:
            프로세스 리스트
        """
        rng = random.Random(seed)

        processes = []
        used_ids = set()

        for i in range(1, num_processes + 1):
            pid = generate_id(rng)
            while pid in used_ids:
                pid = generate_id(rng)
            used_ids.add(pid)

            processes.append(Process(
                pid,
                arrival_time=rng.randint(0, max_arrival),
                burst_time=rng.randint(1, max_burst),
                priority=rng.randint(1, max_priority),
                name=f"P{i}",
                color=random_color(rng)
            ))

        print(f"{num_processes}개의 랜덤 프로세스를 생성했습니다")
        return processes

    @staticmethod
    def save_processes_to_file(processes: List[Process], filename: str):
        """
        프로세스 리스트를 파일로 저장

        Args:
            processes: 저장할 프로세스 리스트
            filename: 출력 파일 경로
        """
        with open(filename, 'w', encoding='utf-8', newline='') as f:
            f.write("# CPU Scheduling Simulator Input Data\n")
            f.write("# Format: ID,Name,ArrivalTime,BurstTime,Priority,Color\n\n")

            writer = csv.writer(f)
            for process in processes:
                writer.writerow([process.pid, process.name, process.arrival_time,
                                 process.burst_time, process.priority, process.color or ''])

        print(f"{len(processes)}개의 프로세스를 {filename}에 성공적으로 저장했습니다")

    @staticmethod
    def print_process_summary(processes: List[Process]):
        """프로세스 요약 정보 출력"""
        print("\n" + "="*80)
        print("프로세스 요약")
        print("="*80)
        print(f"{'ID':<10} {'이름':<10} {'도착시간':>8} {'버스트':>8} {'우선순위':>10} {'색상':>10}")
        print("-"*80)

        for p in sorted(processes, key=lambda x: x.arrival_time):
            print(f"{str(p.pid):<10} {p.name:<10} {p.arrival_time:>8} {p.burst_time:>8} "
                  f"{p.priority:>10} {p.color or '-':>10}")

        print("="*80 + "\n")

        total_burst = sum(p.burst_time for p in processes)
        print(f"전체 프로세스: {len(processes)}개")
        print(f"  - 총 버스트 시간: {total_burst}")
        print()
