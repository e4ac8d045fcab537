"""
Scan Errors - Cac exception cua pipeline dem LOC/TOK.

Chi nhung loi lam hong ca lan scan moi duoc raise (truoc khi traverse).
Loi cua tung file rieng le (khong doc duoc, qua lon, khong phai UTF-8)
chi duoc log va file do bi bo qua.
"""

from pathlib import Path


# ============================================
# Exceptions
# ============================================


class ScanError(Exception):
    """Base error cho scan operations."""

    pass


class UnsupportedEncodingError(ScanError, ValueError):
    """Ten encoding khong nam trong danh sach tiktoken ho tro."""

    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"Unsupported encoding: {encoding}")


class ScanRootError(ScanError):
    """Root path khong ton tai hoac khong phai directory."""

    def __init__(self, root: Path, reason: str = "is not a directory"):
        self.root = root
        super().__init__(f"Scan root {root} {reason}")
