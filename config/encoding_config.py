"""
Encoding Configuration - Dinh nghia cac BPE encodings duoc ho tro.

Luu tru thong tin moi encoding (kich thuoc vocabulary, cac model dung no)
de hien thi trong JSON output va validate ten encoding truoc khi scan.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class EncodingConfig:
    """
    Cau hinh cho mot tiktoken encoding.

    Attributes:
        id: Ten encoding trong tiktoken (VD: "o200k_base")
        token_number: Kich thuoc vocabulary (xap xi)
        models: Cac model family dung encoding nay
    """

    id: str
    token_number: int
    models: Tuple[str, ...]


ENCODING_CONFIGS: List[EncodingConfig] = [
    EncodingConfig(
        id="o200k_base",
        token_number=200_000,
        models=("GPT-4o", "GPT-4.1", "o1", "o3", "o4"),
    ),
    EncodingConfig(
        id="cl100k_base",
        token_number=100_000,
        models=("ChatGPT", "text-embedding-ada-002"),
    ),
    EncodingConfig(
        id="p50k_base",
        token_number=50_000,
        models=("Code models", "text-davinci-002", "text-davinci-003"),
    ),
    EncodingConfig(
        id="p50k_edit",
        token_number=50_000,
        models=("text-davinci-edit-001", "code-davinci-edit-001"),
    ),
    EncodingConfig(
        id="r50k_base",
        token_number=50_000,
        models=("GPT-3 (davinci)",),
    ),
]

# Default cho core API (giong tiktoken-rs) va cho CLI (model moi nhat)
DEFAULT_ENCODING = "cl100k_base"
DEFAULT_CLI_ENCODING = "o200k_base"

SUPPORTED_ENCODINGS: Tuple[str, ...] = tuple(c.id for c in ENCODING_CONFIGS)


def get_encoding_config(encoding_id: str) -> Optional[EncodingConfig]:
    """
    Tim EncodingConfig theo ten encoding.

    Args:
        encoding_id: Ten encoding can tim

    Returns:
        EncodingConfig neu tim thay, None neu khong ho tro
    """
    for config in ENCODING_CONFIGS:
        if config.id == encoding_id:
            return config
    return None
