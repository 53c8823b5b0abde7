"""Crash and panic reporting: exit codes, crash messages and the backtrace log."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

APP_NAME = "guirender"
DEFAULT_BACKTRACES_FILE = "guirender_backtraces.log"
BACKTRACES_FILE_ENV_VAR = "GUIRENDER_BACKTRACES"
BACKTRACE_ENV_VAR = "GUIRENDER_BACKTRACE"
REQUEST_MESSAGE = "This is a bug and we would love for it to be reported to the issue tracker."
UNPARSABLE_PAYLOAD_MESSAGE = "Could not parse panic payload to a string. This is a bug."
BACKTRACE_NOTE = (
    f"note: run with `{BACKTRACE_ENV_VAR}=1` environment variable to display a backtrace"
)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

PathLike = Union[str, "os.PathLike[str]"]


def exit_code(value: int) -> int:
    """Wrap an integer exit status into the 0-255 range, as operating systems do."""
    return value & 0xFF


def format_crash_message(error: BaseException) -> str:
    """Build the crash message shown to the user for an error and log it."""
    message = (
        f"{APP_NAME} just crashed :(\n"
        "This is the error that caused the crash. In case you don't know what to do "
        "with this, please feel free to report it to the project's issue tracker!\n"
        "\n"
        f"{error!r}"
    )
    logger.error("%s", message)
    return message


def panic_message(payload: object, file: str, line: int, column: int) -> str:
    """Describe a panic with its message and location."""
    if not isinstance(payload, str):
        return UNPARSABLE_PAYLOAD_MESSAGE
    return (
        f"{APP_NAME} panicked with the message '{payload}'. "
        f"(File: {file}; Line: {line}, Column: {column})"
    )


def panic_log_message(
    message: str, backtrace: str, now: Optional[datetime] = None
) -> str:
    """The entry appended to the backtraces file: timestamp, message and backtrace."""
    if now is None:
        now = datetime.now(timezone.utc)
    timestamp = now.strftime(TIMESTAMP_FORMAT)
    return f"{timestamp} - {message}\n{backtrace}\n"


def stderr_message(message: str, backtrace: str, debug: bool) -> str:
    """The text printed to stderr for a panic.

    Debug builds add either the backtrace, when the backtrace environment
    variable is ``1`` or ``full``, or a note on how to get one.
    """
    if not debug:
        return f"{message}\n{REQUEST_MESSAGE}"
    show_backtrace = os.environ.get(BACKTRACE_ENV_VAR) in ("full", "1")
    backtrace_msg = backtrace if show_backtrace else BACKTRACE_NOTE
    return f"{message}\n{REQUEST_MESSAGE}\n{backtrace_msg}"


def resolve_backtraces_path(path: Optional[PathLike], default_dir: PathLike) -> Path:
    """Choose the backtraces file: the given path, the environment, or the default."""
    if path is not None:
        return Path(path)
    from_env = os.environ.get(BACKTRACES_FILE_ENV_VAR)
    if from_env is not None:
        return Path(from_env)
    return Path(default_dir) / DEFAULT_BACKTRACES_FILE


def write_panic_log(path: PathLike, text: str) -> bool:
    """Append text to the backtraces file, reporting the outcome on stderr."""
    file_path = Path(path)
    try:
        handle = open(file_path, "a", encoding="utf-8")
    except OSError as error:
        print(f"Could not create backtraces file. ({error})", file=sys.stderr)
        return False
    with handle:
        try:
            handle.write(text)
            handle.flush()
        except OSError as error:
            print(f"Failed writing panic to {str(file_path)!r}: {error}", file=sys.stderr)
            return False
    print(f"\nBacktrace saved to {str(file_path)!r}!", file=sys.stderr)
    return True