from __future__ import annotations

import datetime as dt
import sys
import time
from typing import Callable, Optional, TextIO

from txgraph.config import settings
from txgraph.core.enums import Phase
from txgraph.ports.status_port import StatusPort


def _ts() -> str:
    return dt.datetime.now().strftime("%H:%M:%S")


class ConsoleStatusAdapter(StatusPort):
    """
    Terminal status sink.

    On a TTY, progress rewrites one line; otherwise every message gets its own line.
    Errors stay on stderr with a countdown, then the sink falls back to IDLE.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        error_display_sec: int = settings.ERROR_DISPLAY_SEC,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._out = out or sys.stdout
        self._err = err or sys.stderr
        self._error_display_sec = error_display_sec
        self._sleep = sleep
        self._is_tty = self._out.isatty()
        self._started = 0.0
        self.phase = Phase.IDLE

    def _print_line(self, message: str) -> None:
        if self._is_tty:
            self._out.write("\r" + message.ljust(88))
            self._out.flush()
        else:
            print(message, file=self._out)

    def _clear_line(self) -> None:
        if self._is_tty:
            self._out.write("\r" + (" " * 88) + "\r")
            self._out.flush()

    def report_phase(self, phase: Phase) -> None:
        self.phase = phase
        if phase is Phase.LOADING:
            self._started = time.time()
            print(f"[{_ts()}] Loading...", file=self._out)
        elif phase is Phase.READY:
            self._clear_line()
            elapsed = time.time() - self._started if self._started else 0.0
            print(f"[{_ts()}] Ready in {elapsed:.1f}s", file=self._out)
        elif phase is Phase.ERROR:
            self._clear_line()

    def report_progress(self, message: str) -> None:
        self._print_line(message)

    def report_error(self, message: str) -> None:
        for remaining in range(self._error_display_sec, -1, -1):
            print(f"[{_ts()}] ({remaining}) Error: {message}", file=self._err)
            if remaining:
                self._sleep(1)
        self.report_phase(Phase.IDLE)
