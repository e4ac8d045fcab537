"""
Terminal Progress - Hien thi "Scanning… done/total files (pct%)" tren stderr.

Throttle: in toi da moi 200ms hoac moi buoc 1%, luon in luc bat dau va ket thuc.
TTY: ghi de cung mot dong bang "\\r". Khong phai TTY: moi update mot dong.
"""

import sys
import threading
import time
from typing import Callable, Optional, TextIO, Tuple

PROGRESS_LABEL = "Scanning…"


class TerminalProgress:
    """Progress callback (processed, total) ghi ra stream."""

    THROTTLE_INTERVAL_MS = 200  # 200ms giua cac progress updates

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        is_tty: Optional[bool] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._stream = stream if stream is not None else sys.stderr
        if is_tty is None:
            isatty = getattr(self._stream, "isatty", None)
            is_tty = bool(isatty and isatty())
        self.is_tty = is_tty
        self._clock = clock
        self._lock = threading.Lock()
        self._last_time = clock()
        self._last_done = 0
        self._last_len = 0
        self._last_printed: Optional[Tuple[int, int]] = None

    @staticmethod
    def format_message(done: int, total: int) -> str:
        pct = round(done * 100 / total) if total > 0 else 100
        return f"{PROGRESS_LABEL} {done}/{total} files ({pct}%)"

    def _is_due(self, done: int, total: int, now: float) -> bool:
        step = max(1, total // 100)
        elapsed_ms = (now - self._last_time) * 1000
        return (
            done == 0
            or done == total
            or done - self._last_done >= step
            or elapsed_ms >= self.THROTTLE_INTERVAL_MS
        )

    def __call__(self, done: int, total: int) -> None:
        with self._lock:
            # finish() bao lai trang thai cuoi; khong in trung
            if (done, total) == self._last_printed:
                return
            now = self._clock()
            if not self._is_due(done, total, now):
                return

            message = self.format_message(done, total)
            if self.is_tty:
                pad = max(0, self._last_len - len(message))
                self._stream.write(f"\r{message}{' ' * pad}")
                self._last_len = len(message)
            else:
                self._stream.write(f"{message}\n")
            self._stream.flush()
            self._last_time = now
            self._last_done = done
            self._last_printed = (done, total)

    def clear(self) -> None:
        """Xoa dong progress (chi TTY) truoc khi in ket qua."""
        with self._lock:
            if self.is_tty and self._last_len > 0:
                self._stream.write(f"\r{' ' * self._last_len}\r")
                self._stream.flush()
                self._last_len = 0
