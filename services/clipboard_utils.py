"""
Clipboard Utilities - Copy van ban --copy len clipboard voi fallback.

Thu tu: pyperclip, roi xclip / xsel tren Linux.
"""

import subprocess
import sys
from typing import List, Tuple

import pyperclip

from core.logging_config import log_error, log_warning

# (ten hien thi, command) cho cac fallback tren Linux
_LINUX_FALLBACKS: List[Tuple[str, List[str]]] = [
    ("xclip", ["xclip", "-selection", "clipboard"]),
    ("xsel", ["xsel", "--clipboard", "--input"]),
]


def _copy_with_command(name: str, command: List[str], text: str) -> bool:
    try:
        completed = subprocess.run(
            command,
            input=text.encode("utf-8"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            check=False,
        )
    except FileNotFoundError:
        return False
    except OSError as e:
        log_warning(f"{name} fallback failed: {e}")
        return False
    return completed.returncode == 0


def copy_to_clipboard(text: str) -> Tuple[bool, str]:
    """
    Copy text to clipboard voi error handling.

    Args:
        text: Text can copy

    Returns:
        Tuple (success: bool, message: str)
    """
    try:
        pyperclip.copy(text)
        return True, "Copied to clipboard"
    except pyperclip.PyperclipException as e:
        log_warning(f"pyperclip failed: {e}")

    if sys.platform.startswith("linux"):
        for name, command in _LINUX_FALLBACKS:
            if _copy_with_command(name, command, text):
                return True, f"Copied to clipboard ({name})"

    log_error("All clipboard methods failed")
    return False, "Clipboard not available. Install xclip or xsel on Linux."
