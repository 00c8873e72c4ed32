import pytest

from utils.input_parser import InputParser, PASTEL_COLORS, random_color, generate_id


def test_parse_file_skips_comments_and_blank_lines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(
        "# ID,Name,ArrivalTime,BurstTime,Priority,Color\n"
        "\n"
        "1,P1,0,5,2,#FF9AA2\n"
        "2,,3,4,1\n",
        encoding="utf-8"
    )

    processes = InputParser.parse_file(str(path))

    assert [p.pid for p in processes] == ["1", "2"]
    first, second = processes
    assert (first.name, first.arrival_time, first.burst_time, first.priority, first.color) == \
        ("P1", 0, 5, 2, "#FF9AA2")
    assert second.name == "P2"
    assert second.color is None


@pytest.mark.parametrize("line", [
    "1,P1,0,5",
    "1,P1,zero,5,1",
    "1,P1,0,0,1",
    "1,P1,-1,3,1",
    "1,P1,0,3,-1",
    ",P1,0,3,1",
])
def test_parse_file_rejects_malformed_lines(tmp_path, line):
    path = tmp_path / "bad.txt"
    path.write_text("# header\n" + line + "\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"bad\.txt:2"):
        InputParser.parse_file(str(path))


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        InputParser.parse_file(str(tmp_path / "missing.txt"))


def test_generate_random_processes_is_seeded_and_bounded():
    first = InputParser.generate_random_processes(8, seed=42)
    second = InputParser.generate_random_processes(8, seed=42)

    assert [p.to_dict() for p in first] == [p.to_dict() for p in second]
    assert len({p.pid for p in first}) == 8
    assert [p.name for p in first] == [f"P{i}" for i in range(1, 9)]
    for p in first:
        assert 0 <= p.arrival_time <= 20
        assert 1 <= p.burst_time <= 20
        assert 1 <= p.priority <= 10
        assert p.color in PASTEL_COLORS


def test_saved_file_can_be_loaded_again(tmp_path):
    path = tmp_path / "generated.txt"
    processes = InputParser.generate_random_processes(3, seed=7)

    InputParser.save_processes_to_file(processes, str(path))
    loaded = InputParser.parse_file(str(path))

    assert [(p.pid, p.name, p.arrival_time, p.burst_time, p.priority, p.color) for p in loaded] == \
        [(p.pid, p.name, p.arrival_time, p.burst_time, p.priority, p.color) for p in processes]


def test_helpers():
    import random
    rng = random.Random(1)
    assert random_color(rng) in PASTEL_COLORS
    pid = generate_id(rng)
    assert len(pid) == 7 and pid.isalnum()


def test_print_process_summary(capsys):
    InputParser.print_process_summary(InputParser.generate_random_processes(2, seed=3))
    out = capsys.readouterr().out
    assert "프로세스 요약" in out
    assert "전체 프로세스: 2개" in out
