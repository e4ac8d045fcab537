"""
Constants Package - Bang tra cuu va patterns dung chung.
"""

from core.constants.file_patterns import (
    VCS_DIRS,
    DOT_IGNORE_FILE,
    GITIGNORE_FILE,
    EXTENDED_IGNORE_PATTERNS,
)
from core.constants.languages import FALLBACK_LANGUAGE, LANGUAGE_BY_EXTENSION

__all__ = [
    "VCS_DIRS",
    "DOT_IGNORE_FILE",
    "GITIGNORE_FILE",
    "EXTENDED_IGNORE_PATTERNS",
    "FALLBACK_LANGUAGE",
    "LANGUAGE_BY_EXTENSION",
]
