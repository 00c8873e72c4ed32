"""
CPU 스케줄러 시뮬레이터 - FastAPI 백엔드
"""

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional, Dict, Any
import asyncio

from core.process import Process
from core.playback import TracePlayer
from core.scheduler_base import DEFAULT_TIME_QUANTUM
from schedulers.registry import ALGORITHM_MAP, run_algorithm

app = FastAPI(
    title="CPU Scheduler Simulator",
    description="CPU 스케줄링 알고리즘 시뮬레이터 (FCFS, SJF, Priority, Round Robin)",
    version="1.0.0"
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Pydantic 모델
class ProcessInput(BaseModel):
    id: str
    name: Optional[str] = None
    arrival_time: int
    burst_time: int
    priority: int = 0
    color: Optional[str] = None


class SimulationRequest(BaseModel):
    processes: List[ProcessInput]
    algorithms: List[str]
    quantum: int = DEFAULT_TIME_QUANTUM
    granularity: Optional[str] = None


def create_process_objects(process_inputs: List[ProcessInput]) -> List[Process]:
    """ProcessInput을 Process 객체로 변환"""
    return [
        Process(
            pid=p.id,
            arrival_time=p.arrival_time,
            burst_time=p.burst_time,
            priority=p.priority,
            name=p.name,
            color=p.color
        )
        for p in process_inputs
    ]


def run_scheduler(processes: List[Process], algorithm: str,
                  quantum: int = DEFAULT_TIME_QUANTUM,
                  granularity: Optional[str] = None) -> Dict:
    """스케줄러 실행 및 JSON 변환 가능한 결과 반환"""
    result = run_algorithm(algorithm, processes, quantum=quantum, granularity=granularity)

    return {
        'algorithm': result['algorithm'],
        'steps': [step.to_dict() for step in result['steps']],
        'statistics': result['statistics'],
        'gantt_chart': [entry.to_dict() for entry in result['gantt_chart']],
        'processes': [p.to_dict() for p in result['processes']],
        'event_log': result['event_log']
    }


@app.get("/")
async def root():
    return {"message": "CPU Scheduler Simulator API", "version": "1.0.0"}


@app.get("/algorithms")
async def get_algorithms():
    """사용 가능한 알고리즘 목록 반환"""
    return {
        "algorithms": [
            {"id": algo_id, "name": info['name'], "preemptive": info['preemptive']}
            for algo_id, info in ALGORITHM_MAP.items()
        ]
    }


@app.post("/simulate")
async def simulate(request: SimulationRequest):
    """스케줄링 시뮬레이션 실행"""
    try:
        results = []

        for algorithm in request.algorithms:
            processes = create_process_objects(request.processes)
            results.append(run_scheduler(processes, algorithm,
                                         request.quantum, request.granularity))

        return {"success": True, "results": results}

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/simulate/compare")
async def compare_algorithms(request: SimulationRequest):
    """여러 알고리즘 비교 시뮬레이션"""
    try:
        results = []
        comparison = {
            'algorithms': [],
            'total_time': [],
            'avg_waiting_time': [],
            'avg_turnaround_time': [],
            'throughput': []
        }

        for algorithm in request.algorithms:
            processes = create_process_objects(request.processes)
            result = run_scheduler(processes, algorithm,
                                   request.quantum, request.granularity)
            results.append(result)

            # 비교 데이터 수집
            stats = result['statistics']
            comparison['algorithms'].append(algorithm)
            comparison['total_time'].append(stats['total_time'])
            comparison['avg_waiting_time'].append(stats['avg_waiting_time'])
            comparison['avg_turnaround_time'].append(stats['avg_turnaround_time'])
            comparison['throughput'].append(stats['throughput'])

        return {
            "success": True,
            "results": results,
            "comparison": comparison
        }

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


class ReplaySession:
    """
    WebSocket 재생 세션
    Trace는 init 시점에 한 번에 계산하고 이후에는 커서만 이동
    """

    def __init__(self, processes: List[Process], algorithm: str,
                 quantum: int = DEFAULT_TIME_QUANTUM, granularity: Optional[str] = None):
        self.algorithm = algorithm
        self.result = run_algorithm(algorithm, processes, quantum=quantum, granularity=granularity)
        self.player = TracePlayer(self.result['steps'])

    def state(self) -> Dict[str, Any]:
        """현재 커서 위치의 스텝 반환"""
        step = self.player.current
        payload = {
            'position': self.player.position,
            'total_steps': len(self.player),
            'complete': self.player.at_end,
            'step': step.to_dict() if step else None
        }
        if self.player.at_end:
            payload['statistics'] = self.result['statistics']
        return payload


async def handle_replay_message(websocket: WebSocket, session: Optional[ReplaySession],
                                message: Dict[str, Any]) -> Optional[ReplaySession]:
    """재생 메시지 하나 처리, 갱신된 세션 반환"""
    action = message.get('action')

    if action == 'init':
        processes = [
            Process(
                pid=p['id'],
                arrival_time=p['arrival_time'],
                burst_time=p['burst_time'],
                priority=p.get('priority', 0),
                name=p.get('name'),
                color=p.get('color')
            )
            for p in message['processes']
        ]
        session = ReplaySession(processes, message['algorithm'],
                                message.get('quantum', DEFAULT_TIME_QUANTUM),
                                message.get('granularity'))

        await websocket.send_json({
            'type': 'initialized',
            'algorithm': session.result['algorithm'],
            'process_count': len(processes),
            **session.state()
        })

    elif session is None:
        await websocket.send_json({'type': 'error', 'message': 'init 먼저 필요합니다'})

    elif action == 'step':
        session.player.step_forward()
        await websocket.send_json({'type': 'step_result', **session.state()})

    elif action == 'back':
        session.player.step_back()
        await websocket.send_json({'type': 'step_result', **session.state()})

    elif action == 'seek':
        session.player.seek(int(message.get('position', 0)))
        await websocket.send_json({'type': 'step_result', **session.state()})

    elif action == 'run':
        # 자동 재생 (속도 조절 가능)
        delay = TracePlayer.interval(float(message.get('speed', 1.0)))

        while not session.player.at_end:
            session.player.step_forward()
            await websocket.send_json({'type': 'step_result', **session.state()})
            await asyncio.sleep(delay)

    else:
        await websocket.send_json({'type': 'error', 'message': f"Unknown action: {action}"})

    return session


@app.websocket("/ws/replay")
async def websocket_replay(websocket: WebSocket):
    """Trace 재생 WebSocket 엔드포인트"""
    await websocket.accept()
    session = None

    try:
        while True:
            message = await websocket.receive_json()
            try:
                session = await handle_replay_message(websocket, session, message)
            except KeyError as e:
                # 잘못된 메시지는 오류만 알리고 세션은 유지
                await websocket.send_json({'type': 'error', 'message': f"필수 필드 누락: {e}"})
            except (ValueError, TypeError, AttributeError) as e:
                await websocket.send_json({'type': 'error', 'message': str(e)})

    except WebSocketDisconnect:
        pass


@app.get("/sample-processes")
async def get_sample_processes():
    """샘플 프로세스 데이터 반환"""
    return {
        "samples": [
            {
                "name": "기본 테스트 (3개 프로세스)",
                "processes": [
                    {"id": "1", "name": "P1", "arrival_time": 0, "burst_time": 8, "priority": 2, "color": "#FF9AA2"},
                    {"id": "2", "name": "P2", "arrival_time": 1, "burst_time": 4, "priority": 1, "color": "#C7CEEA"},
                    {"id": "3", "name": "P3", "arrival_time": 2, "burst_time": 9, "priority": 3, "color": "#B5EAD7"}
                ]
            },
            {
                "name": "CPU 유휴 구간 포함",
                "processes": [
                    {"id": "1", "name": "P1", "arrival_time": 2, "burst_time": 3, "priority": 1, "color": "#FFDAC1"},
                    {"id": "2", "name": "P2", "arrival_time": 8, "burst_time": 4, "priority": 2, "color": "#DCD3FF"}
                ]
            }
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
