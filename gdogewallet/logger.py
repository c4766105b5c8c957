"""Wallet log file writer with a timestamped line format."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import IO, Optional, Union

OLD_LOG_FILE_NAME = "GoldenDogewalletgui.log"
LOG_FILE_NAME = "GoldenDoge-gui.log"


def format_record(when: datetime, level: str, message: str) -> str:
    """Render one log line: ``yyyy-MM-dd hh:mm:ss.zzz [level] message``."""
    millis = when.microsecond // 1000
    return f"{when:%Y-%m-%d %H:%M:%S}.{millis:03d} [{level}] {message}"


class WalletLogger:
    """Appends wallet messages to the log file in ``log_dir`` and echoes them to stderr.

    Debug messages are dropped unless the logger was created with ``debug``.
    A log file left under the old name is renamed to the current one.
    """

    def __init__(self, log_dir: Union[str, Path], debug: bool = False) -> None:
        log_dir = Path(log_dir)
        self.path = log_dir / LOG_FILE_NAME
        self._debug = debug
        self._lock = threading.Lock()

        old_path = log_dir / OLD_LOG_FILE_NAME
        if old_path.exists() and not self.path.exists():
            try:
                old_path.rename(self.path)
            except OSError:
                pass

        self._file: Optional[IO[str]]
        try:
            self._file = open(self.path, "a", encoding="utf-8")
        except OSError:
            self._file = None
            print("[Logger] Can't open log file", file=sys.stderr)

    def _log(self, level: str, message: str) -> None:
        if level == "debug" and not self._debug:
            return
        line = format_record(datetime.now(), level, message)
        with self._lock:
            if self._file is not None:
                self._file.write(line + "\n")
                self._file.flush()
            print(line, file=sys.stderr, flush=True)

    def debug(self, message: str) -> None:
        self._log("debug", message)

    def info(self, message: str) -> None:
        self._log("info", message)

    def warning(self, message: str) -> None:
        self._log("warning", message)

    def critical(self, message: str) -> None:
        self._log("critical", message)

    def close(self) -> None:
        """Close the log file; later messages only go to stderr."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> "WalletLogger":
        return self

    def __exit__(self, *args) -> None:
        self.close()