"""
Config Package - Chua cac constants va cau hinh cua ung dung

Bao gom:
- encoding_config: Dinh nghia cac tiktoken encodings duoc ho tro
- app_settings: Typed default options cho CLI
- paths: Duong dan app data (~/.loctok)
"""

from config.encoding_config import (
    EncodingConfig,
    ENCODING_CONFIGS,
    DEFAULT_ENCODING,
    DEFAULT_CLI_ENCODING,
    SUPPORTED_ENCODINGS,
    get_encoding_config,
)

__all__ = [
    "EncodingConfig",
    "ENCODING_CONFIGS",
    "DEFAULT_ENCODING",
    "DEFAULT_CLI_ENCODING",
    "SUPPORTED_ENCODINGS",
    "get_encoding_config",
]
