import pytest

from l2utils.command import Executor, MakeDirectory, ShowHistory, Touch, run_command


def test_make_directory_creates_and_records(tmp_path):
    executor = Executor()
    target = tmp_path / "new"
    executor.execute(MakeDirectory(), str(target))
    assert target.is_dir()
    assert executor.history == ["mkdir"]


def test_touch_creates_empty_file(tmp_path):
    executor = Executor()
    target = tmp_path / "f.txt"
    executor.execute(Touch(), str(target))
    assert target.is_file()
    assert target.read_bytes() == b""
    assert executor.history == ["touch"]


def test_failure_of_program_is_ignored_but_recorded(tmp_path):
    executor = Executor()
    target = tmp_path / "missing" / "deeper"
    executor.execute(MakeDirectory(), str(target))
    assert not target.exists()
    assert executor.history == ["mkdir"]


def test_missing_operand_raises():
    executor = Executor()
    with pytest.raises(ValueError):
        executor.execute(Touch())
    assert executor.history == []


def test_history_prints_previous_entries_then_records_itself(tmp_path, capsys):
    executor = Executor()
    executor.execute(MakeDirectory(), str(tmp_path / "d"))
    executor.execute(Touch(), str(tmp_path / "f"))
    executor.execute(ShowHistory())
    assert capsys.readouterr().out == "History\nmkdir\ntouch\n"
    assert executor.history == ["mkdir", "touch", "history"]


def test_executors_keep_separate_histories(tmp_path):
    first, second = Executor(), Executor()
    first.execute(Touch(), str(tmp_path / "a"))
    assert second.history == []
    assert first.history == ["touch"]


def test_run_command(tmp_path, capsys):
    executor = run_command(tmp_path)
    assert (tmp_path / "folder").is_dir()
    assert (tmp_path / "file.empty").is_file()
    assert executor.history == ["mkdir", "touch", "history"]
    assert capsys.readouterr().out == "History\nmkdir\ntouch\n"