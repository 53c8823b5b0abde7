import logging
from datetime import datetime, timezone

import pytest

from guirender import crash_report
from guirender.crash_report import (
    exit_code,
    format_crash_message,
    panic_log_message,
    panic_message,
    resolve_backtraces_path,
    stderr_message,
    write_panic_log,
)


@pytest.mark.parametrize("value", [0, 1, 42, 255])
def test_exit_code_keeps_byte_values(value):
    assert exit_code(value) == value


@pytest.mark.parametrize("value", [-5, 0, 3, 200, 1000])
def test_exit_code_wraps_around(value):
    assert exit_code(value + 256) == exit_code(value)
    assert 0 <= exit_code(value) <= 255


def test_exit_code_negative_one():
    assert exit_code(-1) == 255


def test_format_crash_message_includes_error_and_logs(caplog):
    error = RuntimeError("boom")
    with caplog.at_level(logging.ERROR):
        message = format_crash_message(error)
    assert message.endswith(repr(error))
    assert "just crashed" in message
    assert any(repr(error) in record.getMessage() for record in caplog.records)


def test_panic_message_contains_payload_and_location():
    message = panic_message("it broke", "src/thing.py", 12, 7)
    assert "'it broke'" in message
    assert "File: src/thing.py" in message
    assert "Line: 12" in message
    assert "Column: 7" in message


def test_panic_message_unparsable_payload():
    assert (
        panic_message(object(), "a.py", 1, 1)
        == "Could not parse panic payload to a string. This is a bug."
    )


def test_panic_log_message_layout():
    now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    text = panic_log_message("msg", "trace", now)
    assert text == "2024-01-02 03:04:05 - msg\ntrace\n"


def test_panic_log_message_default_time_has_timestamp():
    text = panic_log_message("msg", "trace")
    timestamp, rest = text.split(" - ", 1)
    datetime.strptime(timestamp, crash_report.TIMESTAMP_FORMAT)
    assert rest == "msg\ntrace\n"


def test_stderr_message_release():
    assert stderr_message("m", "bt", False) == f"m\n{crash_report.REQUEST_MESSAGE}"


@pytest.mark.parametrize("setting", ["1", "full"])
def test_stderr_message_debug_with_backtrace(monkeypatch, setting):
    monkeypatch.setenv(crash_report.BACKTRACE_ENV_VAR, setting)
    assert stderr_message("m", "bt", True) == f"m\n{crash_report.REQUEST_MESSAGE}\nbt"


def test_stderr_message_debug_without_backtrace(monkeypatch):
    monkeypatch.delenv(crash_report.BACKTRACE_ENV_VAR, raising=False)
    result = stderr_message("m", "bt", True)
    assert result.endswith(crash_report.BACKTRACE_NOTE)
    assert "bt" not in result.splitlines()


def test_resolve_backtraces_path_prefers_explicit(tmp_path, monkeypatch):
    monkeypatch.setenv(crash_report.BACKTRACES_FILE_ENV_VAR, str(tmp_path / "env.log"))
    explicit = tmp_path / "explicit.log"
    assert resolve_backtraces_path(explicit, tmp_path) == explicit


def test_resolve_backtraces_path_uses_environment(tmp_path, monkeypatch):
    env_path = tmp_path / "env.log"
    monkeypatch.setenv(crash_report.BACKTRACES_FILE_ENV_VAR, str(env_path))
    assert resolve_backtraces_path(None, tmp_path / "data") == env_path


def test_resolve_backtraces_path_default(tmp_path, monkeypatch):
    monkeypatch.delenv(crash_report.BACKTRACES_FILE_ENV_VAR, raising=False)
    assert (
        resolve_backtraces_path(None, tmp_path)
        == tmp_path / crash_report.DEFAULT_BACKTRACES_FILE
    )


def test_write_panic_log_appends(tmp_path, capsys):
    path = tmp_path / "bt.log"
    assert write_panic_log(path, "first\n") is True
    assert write_panic_log(path, "second\n") is True
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"
    assert "Backtrace saved to" in capsys.readouterr().err


def test_write_panic_log_reports_failure(tmp_path, capsys):
    path = tmp_path / "missing_dir" / "bt.log"
    assert write_panic_log(path, "text") is False
    assert not path.exists()
    assert "Could not create backtraces file." in capsys.readouterr().err