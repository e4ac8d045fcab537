"""
Scan Progress - Observer tien do scan, truyen tuong minh vao count_tokens_in_path.

Thread-safe: workers goi advance() dong thoi, callback duoc goi ben
trong lock nen (processed, total) luon tang dan theo thu tu.
"""

import threading
from typing import Callable, Optional, Union

from core.logging_config import log_warning

ProgressCallback = Callable[[int, int], None]


class ScanProgress:
    """
    Dem so file da xu ly va bao cho callback.

    - start(total): goi callback(0, total)
    - advance(): tang processed, goi callback(processed, total)
    - finish(): goi callback(processed, total) lan cuoi

    Callback raise exception chi bi log, khong lam dung scan.
    """

    def __init__(self, callback: Optional[ProgressCallback] = None):
        self._callback = callback
        self._lock = threading.Lock()
        self._processed = 0
        self._total = 0

    @property
    def processed(self) -> int:
        with self._lock:
            return self._processed

    @property
    def total(self) -> int:
        with self._lock:
            return self._total

    def start(self, total: int) -> None:
        with self._lock:
            self._total = total
            self._processed = 0
            self._notify(0, total)

    def advance(self) -> int:
        with self._lock:
            self._processed += 1
            processed = self._processed
            self._notify(processed, self._total)
        return processed

    def finish(self) -> None:
        with self._lock:
            self._notify(self._processed, self._total)

    def _notify(self, processed: int, total: int) -> None:
        if self._callback is None:
            return
        try:
            self._callback(processed, total)
        except Exception as e:
            log_warning(f"[ScanProgress] Progress callback failed: {e}")


def as_progress(
    progress: Union[ScanProgress, ProgressCallback, None],
) -> ScanProgress:
    """Boc callable thanh ScanProgress; None -> observer khong callback."""
    if isinstance(progress, ScanProgress):
        return progress
    return ScanProgress(progress)
