import pytest
from fastapi.testclient import TestClient

from web.backend.app import app


@pytest.fixture
def client():
    return TestClient(app)


def _processes():
    return [
        {"id": "a", "name": "A", "arrival_time": 0, "burst_time": 5, "priority": 2, "color": "#FF9AA2"},
        {"id": "b", "name": "B", "arrival_time": 0, "burst_time": 3, "priority": 1},
    ]


def test_root(client):
    assert client.get("/").json()["message"] == "CPU Scheduler Simulator API"


def test_algorithms(client):
    algorithms = client.get("/algorithms").json()["algorithms"]
    assert [a["id"] for a in algorithms] == ["FCFS", "SJF", "Priority", "RoundRobin"]
    assert [a["preemptive"] for a in algorithms] == [False, False, False, True]


def test_simulate_priority(client):
    response = client.post("/simulate", json={"processes": _processes(), "algorithms": ["Priority"]})
    assert response.status_code == 200

    result = response.json()["results"][0]
    assert result["algorithm"] == "Priority (Non-preemptive)"
    assert [s["time"] for s in result["steps"]] == [3, 8]
    assert [p["name"] for p in result["processes"]] == ["B", "A"]
    assert result["processes"][1]["color"] == "#FF9AA2"
    assert result["statistics"]["total_time"] == 8
    assert [e["name"] for e in result["gantt_chart"]] == ["B", "A"]
    assert result["event_log"][0].endswith("Scheduling Started =====")


def test_simulate_round_robin_uses_quantum(client):
    response = client.post("/simulate", json={
        "processes": _processes(), "algorithms": ["RoundRobin"], "quantum": 2
    })
    steps = response.json()["results"][0]["steps"]
    assert [s["running_process"]["burst_time"] for s in steps] == [2, 2, 2, 1, 1]


def test_simulate_granularity(client):
    response = client.post("/simulate", json={
        "processes": _processes(), "algorithms": ["SJF"], "granularity": "coarse"
    })
    assert len(response.json()["results"][0]["steps"]) == 2


def test_simulate_empty_process_list(client):
    response = client.post("/simulate", json={"processes": [], "algorithms": ["FCFS"]})
    result = response.json()["results"][0]
    assert result["steps"] == []
    assert result["statistics"]["throughput"] == 0


@pytest.mark.parametrize("payload", [
    {"processes": [{"id": "a", "arrival_time": 0, "burst_time": 0}], "algorithms": ["FCFS"]},
    {"processes": [{"id": "a", "arrival_time": 0, "burst_time": 2}], "algorithms": ["RoundRobin"], "quantum": 0},
    {"processes": [{"id": "a", "arrival_time": 0, "burst_time": 2}], "algorithms": ["MLQ"]},
])
def test_simulate_rejects_invalid_requests(client, payload):
    response = client.post("/simulate", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"]


def test_compare(client):
    response = client.post("/simulate/compare", json={
        "processes": _processes(), "algorithms": ["FCFS", "RoundRobin"], "quantum": 2
    })
    comparison = response.json()["comparison"]
    assert comparison["algorithms"] == ["FCFS", "RoundRobin"]
    assert comparison["total_time"] == [8, 8]
    assert comparison["avg_waiting_time"] == [pytest.approx(2.5), pytest.approx(3.5)]


def test_sample_processes(client):
    samples = client.get("/sample-processes").json()["samples"]
    assert samples
    response = client.post("/simulate", json={
        "processes": samples[0]["processes"], "algorithms": ["FCFS"]
    })
    assert response.status_code == 200


def test_replay_websocket(client):
    with client.websocket_connect("/ws/replay") as ws:
        ws.send_json({"action": "step"})
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"action": "init", "algorithm": "RoundRobin", "quantum": 2,
                      "processes": _processes()})
        init = ws.receive_json()
        assert init["type"] == "initialized"
        assert init["total_steps"] == 5
        assert init["position"] == 0
        assert init["step"]["time"] == 2

        ws.send_json({"action": "step"})
        assert ws.receive_json()["position"] == 1

        ws.send_json({"action": "back"})
        assert ws.receive_json()["position"] == 0

        ws.send_json({"action": "seek", "position": 3})
        assert ws.receive_json()["step"]["time"] == 7

        ws.send_json({"action": "run", "speed": 1000})
        last = ws.receive_json()
        assert last["complete"] is True
        assert last["step"]["time"] == 8
        assert last["statistics"]["avg_waiting_time"] == pytest.approx(3.5)


def test_replay_websocket_invalid_init(client):
    with client.websocket_connect("/ws/replay") as ws:
        ws.send_json({"action": "init", "algorithm": "FCFS",
                      "processes": [{"id": "a", "arrival_time": 0, "burst_time": -2}]})
        message = ws.receive_json()
        assert message["type"] == "error"


def test_replay_websocket_init_missing_fields_keeps_connection(client):
    with client.websocket_connect("/ws/replay") as ws:
        ws.send_json({"action": "init", "processes": _processes()})
        error = ws.receive_json()
        assert error["type"] == "error"
        assert "algorithm" in error["message"]

        ws.send_json({"action": "init", "algorithm": "FCFS",
                      "processes": [{"arrival_time": 0, "burst_time": 2}]})
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"action": "init", "algorithm": "FCFS", "processes": _processes()})
        init = ws.receive_json()
        assert init["type"] == "initialized"
        assert init["total_steps"] == 2


def test_replay_websocket_bad_seek_keeps_session(client):
    with client.websocket_connect("/ws/replay") as ws:
        ws.send_json({"action": "init", "algorithm": "RoundRobin", "quantum": 2,
                      "processes": _processes()})
        assert ws.receive_json()["type"] == "initialized"

        ws.send_json({"action": "seek", "position": "end"})
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"action": "run", "speed": "fast"})
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"action": "seek", "position": 2})
        result = ws.receive_json()
        assert result["type"] == "step_result"
        assert result["position"] == 2
        assert result["step"]["time"] == 6
