#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CPU 스케줄링 시뮬레이터 - 메인 실행 파일
알고리즘 선택 기능 포함
"""

import sys
import os
import re

from core.process import Process, InvalidInputError
from core.scheduler_base import DEFAULT_TIME_QUANTUM
from utils.input_parser import InputParser, PASTEL_COLORS
from utils.visualization import Visualizer
from schedulers.registry import ALGORITHM_MAP, run_algorithm


# 메뉴 번호 → 알고리즘 ID
MENU = {
    '1': 'FCFS',
    '2': 'SJF',
    '3': 'Priority',
    '4': 'RoundRobin',
}


def sample_processes():
    """기본 샘플 프로세스"""
    return [
        Process(1, arrival_time=0, burst_time=8, priority=3, name="P1", color=PASTEL_COLORS[0]),
        Process(2, arrival_time=1, burst_time=4, priority=1, name="P2", color=PASTEL_COLORS[5]),
        Process(3, arrival_time=2, burst_time=9, priority=4, name="P3", color=PASTEL_COLORS[4]),
        Process(4, arrival_time=3, burst_time=5, priority=2, name="P4", color=PASTEL_COLORS[7]),
    ]


def print_banner():
    """배너 출력"""
    print("\n" + "="*80)
    print(" "*25 + "CPU 스케줄링 시뮬레이터")
    print("="*80 + "\n")


def print_algorithm_menu():
    """알고리즘 선택 메뉴 출력"""
    print("\n" + "="*80)
    print("스케줄링 알고리즘 선택")
    print("="*80)
    print("\n[비선점형]")
    print("  1. FCFS (First-Come, First-Served)")
    print("  2. SJF (Shortest Job First - Non-preemptive)")
    print("  3. Priority Scheduling (Non-preemptive)")
    print("\n[선점형]")
    print("  4. Round Robin")
    print("\n[특수 옵션]")
    print("  all. 모든 알고리즘 실행")
    print("  0. 종료")
    print("="*80)


def get_user_choice():
    """사용자 선택 입력"""
    while True:
        choice = input("\n선택하세요: ").strip()

        if choice == '0':
            print("\n프로그램을 종료합니다...")
            sys.exit(0)

        if choice in MENU or choice == 'all':
            return choice

        print("[오류] 잘못된 선택입니다. 다시 시도하세요.")


def get_quantum():
    """Round Robin 타임 퀀텀 입력 (양의 정수가 될 때까지 재입력)"""
    while True:
        value = input(f"타임 퀀텀 (기본값={DEFAULT_TIME_QUANTUM}): ").strip()
        if not value:
            return DEFAULT_TIME_QUANTUM
        try:
            quantum = int(value)
        except ValueError:
            print("[오류] 숫자를 입력하세요.")
            continue
        if quantum > 0:
            return quantum
        print("[오류] 타임 퀀텀은 1 이상이어야 합니다.")


def run_single_algorithm(algorithm, processes, quantum=DEFAULT_TIME_QUANTUM, verbose=True):
    """단일 알고리즘 실행"""
    algo_name = ALGORITHM_MAP[algorithm]['name']

    print(f"\n{'='*80}")
    print(f"실행 중: {algo_name}")
    print(f"{'='*80}\n")

    try:
        return run_algorithm(algorithm, processes, quantum=quantum, verbose=verbose)
    except InvalidInputError as e:
        print(f"[오류] {algo_name} 실행 실패: {e}")
        return None


def run_all_algorithms(processes, quantum=DEFAULT_TIME_QUANTUM, verbose=True):
    """모든 알고리즘 실행"""
    results = []

    print("\n" + "="*80)
    print("모든 스케줄링 알고리즘 실행")
    print("="*80 + "\n")

    for key, algorithm in MENU.items():
        algo_name = ALGORITHM_MAP[algorithm]['name']
        print(f"[{key}/{len(MENU)}] {algo_name} 실행 중...")

        try:
            results.append(run_algorithm(algorithm, processes, quantum=quantum, verbose=verbose))
            print(f"[완료] {algo_name} 완료\n")
        except InvalidInputError as e:
            print(f"[오류] {algo_name} 실패: {e}\n")

    return results


def safe_file_name(algo_name):
    """알고리즘 이름을 파일명으로 쓸 수 있게 변환"""
    safe_algo = algo_name.replace(' ', '_').replace('/', '-')
    safe_algo = safe_algo.replace('(', '').replace(')', '')
    safe_algo = safe_algo.replace('=', '_').replace(':', '_')
    # 연속된 언더스코어 제거
    safe_algo = re.sub(r'_+', '_', safe_algo)
    return safe_algo.strip('_')


def save_results(results, output_dir="simulation_results"):
    """결과 저장"""
    os.makedirs(output_dir, exist_ok=True)

    visualizer = Visualizer()

    # 통계 테이블 출력
    print("\n" + "="*80)
    print("결과")
    print("="*80 + "\n")
    visualizer.print_statistics_table(results)
    for result in results:
        visualizer.print_process_details(result)

    # Gantt Charts 생성
    print("Gantt 차트 생성 중...")
    for result in results:
        save_path = os.path.join(output_dir, f"gantt_{safe_file_name(result['algorithm'])}.png")
        visualizer.draw_gantt_chart(result['gantt_chart'], result['algorithm'],
                                    save_path=save_path, show=False)
    print(f"[완료] Gantt 차트가 '{output_dir}/' 디렉토리에 저장되었습니다\n")

    # 비교 그래프 (2개 이상일 때만)
    if len(results) > 1:
        print("비교 차트 생성 중...")
        comparison_path = os.path.join(output_dir, "comparison.png")
        visualizer.compare_algorithms(results, save_path=comparison_path, show=False)
        print("[완료] 비교 차트 저장됨\n")

    # 상세 결과 저장
    results_file = os.path.join(output_dir, "results.txt")
    save_results_to_file(results, results_file)

    print(f"\n{'='*80}")
    print("시뮬레이션 완료")
    print(f"{'='*80}")
    print(f"\n결과가 '{output_dir}/' 디렉토리에 저장되었습니다:")
    print(f"  - Gantt 차트: gantt_*.png")
    if len(results) > 1:
        print(f"  - 비교 차트: comparison.png")
    print(f"  - 상세 결과: results.txt")
    print("="*80 + "\n")


def save_results_to_file(results, filename):
    """결과를 텍스트 파일로 저장"""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write("="*100 + "\n")
        f.write("CPU 스케줄링 시뮬레이션 결과\n")
        f.write("="*100 + "\n\n")

        # 통계 비교
        f.write("성능 비교\n")
        f.write("-"*100 + "\n")
        f.write(f"{'알고리즘':<35} {'총 시간':>10} {'평균 대기':>12} {'평균 반환':>12} {'처리율':>12}\n")
        f.write("-"*100 + "\n")

        for result in results:
            algo = result['algorithm']
            stats = result['statistics']
            f.write(f"{algo:<35} "
                    f"{stats['total_time']:>10} "
                    f"{stats['avg_waiting_time']:>12.2f} "
                    f"{stats['avg_turnaround_time']:>12.2f} "
                    f"{stats['throughput']:>12.3f}\n")

        f.write("="*100 + "\n\n")

        # 상세 결과
        for result in results:
            f.write("\n" + "="*100 + "\n")
            f.write(f"알고리즘: {result['algorithm']}\n")
            f.write("="*100 + "\n\n")

            f.write("프로세스 상세 정보 (완료 순서):\n")
            f.write("-"*100 + "\n")
            f.write(f"{'이름':<10} {'도착시간':>8} {'버스트':>8} {'우선순위':>10} {'시작':>8} {'완료':>8} "
                    f"{'대기':>8} {'반환':>8}\n")
            f.write("-"*100 + "\n")

            for process in result['processes']:
                f.write(f"{process.name:<10} "
                        f"{process.arrival_time:>8} "
                        f"{process.burst_time:>8} "
                        f"{process.priority:>10} "
                        f"{process.start_time:>8} "
                        f"{process.end_time:>8} "
                        f"{process.waiting_time:>8} "
                        f"{process.turnaround_time:>8}\n")

            f.write("\n")
            f.write("이벤트 로그:\n")
            for log in result['event_log']:
                f.write(f"  {log}\n")

    print(f"[완료] 결과가 {filename}에 저장되었습니다")


def select_processes():
    """입력 선택 및 프로세스 로드"""
    print("\n" + "="*80)
    print("입력 선택")
    print("="*80)
    print("\n[입력 옵션]")
    print("  0. 샘플 데이터 (4개 프로세스)")
    print("  1. 랜덤 데이터 (자동 생성) - data/generated_input.txt")
    print("  2. 사용자 정의 데이터 (파일 경로 입력)")
    print("="*80)

    while True:
        choice = input("\n입력 옵션 선택 (0-2): ").strip()

        if choice == '0':
            return sample_processes()

        elif choice == '1':
            print("\n[정보] 랜덤 프로세스 생성 중...")
            processes = InputParser.generate_random_processes(num_processes=5)
            script_dir = os.path.dirname(os.path.abspath(__file__))
            generated_file = os.path.join(script_dir, "data", "generated_input.txt")
            os.makedirs(os.path.dirname(generated_file), exist_ok=True)
            InputParser.save_processes_to_file(processes, generated_file)
            return processes

        elif choice == '2':
            path = input("파일 경로: ").strip()
            try:
                processes = InputParser.parse_file(path)
            except FileNotFoundError:
                print(f"[오류] 파일 '{path}'을 찾을 수 없습니다")
                continue
            except ValueError as e:
                print(f"[오류] {e}")
                continue
            if not processes:
                print("[오류] 파일에 프로세스가 없습니다.")
                continue
            return processes

        else:
            print("[오류] 잘못된 선택입니다. 0, 1, 또는 2를 입력하세요.")


def main():
    """메인 함수"""
    print_banner()

    processes = select_processes()

    # 프로세스 요약
    InputParser.print_process_summary(processes)

    # 알고리즘 선택 루프
    while True:
        print_algorithm_menu()
        choice = get_user_choice()

        quantum = DEFAULT_TIME_QUANTUM
        if choice in ('4', 'all'):
            quantum = get_quantum()

        if choice == 'all':
            results = run_all_algorithms(processes, quantum, verbose=True)
            if results:
                save_results(results)
        else:
            result = run_single_algorithm(MENU[choice], processes, quantum, verbose=True)
            if result:
                save_results([result])

        # 계속 여부 확인
        print("\n" + "="*80)
        continue_choice = input("다른 시뮬레이션을 실행하시겠습니까? (y/n): ").strip().lower()
        if continue_choice != 'y':
            print("\nCPU 스케줄링 시뮬레이터를 사용해 주셔서 감사합니다!")
            print("="*80 + "\n")
            break


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\n사용자에 의해 시뮬레이션이 중단되었습니다.")
        print("="*80 + "\n")
        sys.exit(0)
