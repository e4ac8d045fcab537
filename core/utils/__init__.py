"""
Core Utilities Package

Chua cac utility modules:
- file_scanner: Enumerate file theo ignore rules, hidden va extension filter
"""

from core.utils.file_scanner import (
    enumerate_filtered_paths,
    extension_of,
    is_hidden_name,
    matches_extension_filter,
)

__all__ = [
    "enumerate_filtered_paths",
    "extension_of",
    "is_hidden_name",
    "matches_extension_filter",
]
