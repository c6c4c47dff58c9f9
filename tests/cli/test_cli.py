"""
Tests for the loglet command-line interface.
"""

import json

from click.testing import CliRunner

from loglet import __version__, read_records
from loglet.interfaces.cli import main


def run(*args):
    return CliRunner().invoke(main, list(args))


def test_version_option():
    result = run("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_log_prints_closing_line():
    result = run("log", "info", "hello", "--no-spinner")

    assert result.exit_code == 0
    assert " ✓ [INFO] | hello" in result.output


def test_log_with_all_fields_saves_to_file(tmp_path):
    path = tmp_path / "logs" / "cli.json"
    result = run(
        "log", "WARN", "slow step", "--process", "Build", "--user", "ci",
        "--since-ms", "1500", "--file", str(path), "--no-spinner"
    )

    assert result.exit_code == 0
    assert "Log saved!" in result.output
    [record] = read_records(path)
    assert record.level == "WARN"
    assert record.process == "Build"
    assert record.user == "ci"
    assert int(record.duration.split()[0]) >= 1500


def test_log_json_lines_format(tmp_path):
    path = tmp_path / "cli.jsonl"
    for message in ("one", "two"):
        result = run("log", "INFO", message, "--file", str(path), "--format", "lines", "--no-spinner")
        assert result.exit_code == 0

    assert len(path.read_text(encoding="utf-8").splitlines()) == 2


def test_log_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = run("log", "INFO", "default", "--default-file", "--no-spinner")

    assert result.exit_code == 0
    assert [r.message for r in read_records(tmp_path / "log.json")] == ["default"]


def test_file_and_default_file_are_exclusive(tmp_path):
    result = run("log", "INFO", "x", "--file", str(tmp_path / "a.json"), "--default-file")

    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


def test_file_error_keeps_exit_code_zero(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    result = run("log", "INFO", "x", "--file", str(blocker / "log.json"), "--no-spinner")

    assert result.exit_code == 0
    assert " x [INFO] | x | Error: directory creation failed" in result.output


def test_fatal_exits_with_one():
    result = run("log", "FATAL", "bye", "--no-spinner")

    assert result.exit_code == 1
    assert "[FATAL] | bye" in result.output


def test_panic_exits_with_two(tmp_path):
    path = tmp_path / "panic.json"
    result = run("log", "PANIC", "crash", "--file", str(path), "--no-spinner")

    assert result.exit_code == 2
    assert "[PANIC] | crash" in result.output
    assert read_records(path)[0].level == "PANIC"


def test_invalid_level_rejected():
    result = run("log", "DEBUG", "x")
    assert result.exit_code == 2


def test_show_prints_records(tmp_path):
    path = tmp_path / "log.json"
    run("log", "INFO", "first", "--file", str(path), "--no-spinner")
    run("log", "WARN", "second", "--file", str(path), "--no-spinner")

    result = run("show", str(path))

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [item["message"] for item in data] == ["first", "second"]


def test_show_reports_missing_file(tmp_path):
    result = run("show", str(tmp_path / "missing.json"))

    assert result.exit_code == 1
    assert "file read failed" in result.output


def test_demo_writes_expected_files(tmp_path):
    result = run("demo", "--dir", str(tmp_path), "--no-spinner", "--pause-ms", "0")

    assert result.exit_code == 0
    for name in ("custom_default.json", "single_override.json", "full_test.json",
                 "default.json", "process_test.json"):
        assert len(read_records(tmp_path / name)) == 1, name
    assert not (tmp_path / "not_a_directory" / "test.json").exists()
    assert result.output.count("Log saved!") == 5
    assert result.output.count(" x [INFO]") == 1
    assert not (tmp_path / "panic_test.json").exists()
    assert not (tmp_path / "fatal_test.json").exists()


def test_demo_panic_is_recovered(tmp_path):
    result = run("demo", "--dir", str(tmp_path), "--no-spinner", "--pause-ms", "0", "--panic")

    assert result.exit_code == 0
    [panic] = read_records(tmp_path / "panic_test.json")
    assert panic.level == "PANIC"
    assert panic.process == "PanicProcess"
    assert panic.user == "TestUser"
    [recovery] = read_records(tmp_path / "recovery.json")
    assert recovery.level == "INFO"
    assert recovery.process == "PanicRecovery"
    assert "[PANIC] | PanicProcess" in result.output


def test_demo_fatal_exits_with_one(tmp_path):
    result = run("demo", "--dir", str(tmp_path), "--no-spinner", "--pause-ms", "0", "--fatal")

    assert result.exit_code == 1
    [fatal] = read_records(tmp_path / "fatal_test.json")
    assert fatal.level == "FATAL"
    assert fatal.process == "FatalProcess"
    assert "[FATAL] | FatalProcess" in result.output
