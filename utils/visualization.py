"""
시각화 모듈: Gantt Chart 및 통계 그래프 생성
"""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from typing import List, Dict
from core.scheduler_base import GanttEntry
from core.process import ProcessState


class Visualizer:
    """스케줄링 결과 시각화"""

    def __init__(self):
        # 색상이 없는 프로세스용 기본 색상
        self.colors = plt.cm.Set3.colors
        self.idle_color = '#CCCCCC'

    def color_for(self, entry: GanttEntry, index: int):
        """프로세스에 지정된 색상, 없으면 팔레트 색상"""
        if entry.color:
            return entry.color
        return self.colors[index % len(self.colors)]

    def draw_gantt_chart(self, gantt_data: List[GanttEntry], algorithm_name: str,
                         save_path: str = None, show: bool = True):
        """
        Gantt Chart 그리기

        Args:
            gantt_data: Gantt Chart 데이터
            algorithm_name: 알고리즘 이름
            save_path: 저장 경로 (None이면 저장 안 함)
            show: 화면에 표시할지 여부
        """
        if not gantt_data:
            print(f"{algorithm_name}에 대한 Gantt 차트 데이터가 없습니다")
            return

        fig, ax = plt.subplots(figsize=(16, 6))

        # 프로세스 행 (처음 실행된 순서)
        rows = []
        for entry in gantt_data:
            if entry.pid is not None and entry.pid not in rows:
                rows.append(entry.pid)
        pid_to_y = {pid: idx for idx, pid in enumerate(rows)}
        names = {entry.pid: entry.name for entry in gantt_data if entry.pid is not None}
        row_colors = {}

        for entry in gantt_data:
            duration = entry.end_time - entry.start_time

            if entry.pid is None:
                # CPU 유휴 시간: 모든 행에 걸쳐 음영 표시
                ax.axvspan(entry.start_time, entry.end_time, color=self.idle_color, alpha=0.3)
                continue

            y_pos = pid_to_y[entry.pid]
            alpha = 1.0 if entry.state == ProcessState.RUNNING else 0.5
            color = self.color_for(entry, y_pos)
            row_colors.setdefault(entry.pid, color)
            ax.barh(y_pos, duration, left=entry.start_time, height=0.8,
                    color=color, alpha=alpha,
                    edgecolor='black', linewidth=0.5)

            # 프로세스 이름 표시
            if duration > 1:  # 충분히 긴 경우만 텍스트 표시
                ax.text(entry.start_time + duration/2, y_pos, entry.name,
                        ha='center', va='center', fontsize=8, fontweight='bold')

        # 축 설정
        ax.set_yticks(range(len(rows)))
        ax.set_yticklabels([names[pid] for pid in rows])
        ax.invert_yaxis()
        ax.set_xlabel('Time', fontsize=12)
        ax.set_ylabel('Process', fontsize=12)
        ax.set_title(f'Gantt Chart - {algorithm_name}', fontsize=14, fontweight='bold')
        ax.grid(axis='x', alpha=0.3)

        ax.legend(handles=self.legend_handles(gantt_data, rows, names, row_colors),
                  loc='upper right')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Gantt 차트가 {save_path}에 저장되었습니다")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def legend_handles(self, gantt_data: List[GanttEntry], rows: List, names: Dict,
                       row_colors: Dict) -> List[mpatches.Patch]:
        """프로세스별 범례 항목, 유휴 구간이 있으면 CPU Idle 추가"""
        handles = [mpatches.Patch(color=row_colors[pid], label=names[pid]) for pid in rows]
        if any(entry.pid is None for entry in gantt_data):
            handles.append(mpatches.Patch(color=self.idle_color, alpha=0.3, label='CPU Idle'))
        return handles

    def _draw_bars(self, ax, algorithms: List[str], values: List[float], color: str,
                   ylabel: str, title: str, fmt: str = '{:.2f}'):
        bars = ax.bar(range(len(algorithms)), values, color=color, edgecolor='black')
        ax.set_xticks(range(len(algorithms)))
        ax.set_xticklabels(algorithms, rotation=45, ha='right', fontsize=9)
        ax.set_ylabel(ylabel, fontsize=11)
        ax.set_title(title, fontsize=12, fontweight='bold')
        ax.grid(axis='y', alpha=0.3)

        # 값 표시
        for bar, value in zip(bars, values):
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width()/2., height,
                    fmt.format(value), ha='center', va='bottom', fontsize=9)

    def compare_algorithms(self, results: List[Dict], save_path: str = None, show: bool = True):
        """
        여러 알고리즘의 성능 비교 그래프

        Args:
            results: 각 알고리즘의 결과 리스트
            save_path: 저장 경로
            show: 화면에 표시할지 여부
        """
        if not results:
            print("비교할 결과가 없습니다")
            return

        algorithms = [r['algorithm'] for r in results]
        stats = [r['statistics'] for r in results]

        fig, axes = plt.subplots(2, 2, figsize=(16, 12))
        fig.suptitle('Scheduling Algorithms Performance Comparison',
                     fontsize=16, fontweight='bold')

        self._draw_bars(axes[0, 0], algorithms, [s['avg_waiting_time'] for s in stats],
                        'skyblue', 'Average Waiting Time', 'Average Waiting Time Comparison')
        self._draw_bars(axes[0, 1], algorithms, [s['avg_turnaround_time'] for s in stats],
                        'lightcoral', 'Average Turnaround Time', 'Average Turnaround Time Comparison')
        self._draw_bars(axes[1, 0], algorithms, [s['throughput'] for s in stats],
                        'lightgreen', 'Processes / Time Unit', 'Throughput Comparison', '{:.3f}')
        self._draw_bars(axes[1, 1], algorithms, [s['total_time'] for s in stats],
                        'plum', 'Time Units', 'Total Execution Time Comparison', '{:.0f}')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"비교 차트가 {save_path}에 저장되었습니다")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def print_statistics_table(self, results: List[Dict]):
        """
        통계를 표 형식으로 출력

        Args:
            results: 각 알고리즘의 결과 리스트
        """
        print("\n" + "="*100)
        print("스케줄링 알고리즘 성능 비교")
        print("="*100)
        print(f"{'알고리즘':<30} {'총 시간':>10} {'평균 대기':>12} {'평균 반환':>12} {'처리율':>12}")
        print("-"*100)

        for result in results:
            algo = result['algorithm']
            stats = result['statistics']
            print(f"{algo:<30} "
                  f"{stats['total_time']:>10} "
                  f"{stats['avg_waiting_time']:>12.2f} "
                  f"{stats['avg_turnaround_time']:>12.2f} "
                  f"{stats['throughput']:>12.3f}")

        print("="*100 + "\n")

    def print_process_details(self, results: Dict):
        """
        개별 프로세스의 상세 정보 출력

        Args:
            results: 알고리즘 실행 결과
        """
        print(f"\n{'='*80}")
        print(f"프로세스 상세 - {results['algorithm']}")
        print(f"{'='*80}")
        print(f"{'이름':<10} {'도착':>6} {'버스트':>8} {'우선순위':>10} {'시작':>6} {'종료':>6} "
              f"{'대기':>6} {'반환':>6}")
        print(f"{'-'*80}")

        for process in results['processes']:
            print(f"{process.name:<10} "
                  f"{process.arrival_time:>6} "
                  f"{process.burst_time:>8} "
                  f"{process.priority:>10} "
                  f"{process.start_time:>6} "
                  f"{process.end_time:>6} "
                  f"{process.waiting_time:>6} "
                  f"{process.turnaround_time:>6}")

        print(f"{'='*80}\n")
