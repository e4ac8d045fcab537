"""
Encoders - Quan ly tiktoken encoder va pool cac tokenizer handle.

Module nay:
- Validate ten encoding (chi 5 encoding OpenAI duoc ho tro)
- Boc tiktoken.Encoding trong TokenizerHandle (count / count_batch)
- EncoderPool: stack cac handle da release, tai su dung giua cac file

Functions:
- get_encoder(): Lay tiktoken.Encoding theo ten (raise neu khong ho tro)
- new_handle(): Tao handle moi cho mot encoding

Pool khong phai global singleton: moi lan scan tao mot pool rieng.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, List, Sequence

import tiktoken

from config.encoding_config import SUPPORTED_ENCODINGS
from core.logging_config import log_debug
from core.tokenization.errors import UnsupportedEncodingError


# ============================================================
# Encoder lookup
# ============================================================


def get_encoder(encoding: str) -> tiktoken.Encoding:
    """
    Lay tiktoken encoder theo ten.

    Args:
        encoding: Mot trong cl100k_base, o200k_base, p50k_base,
            p50k_edit, r50k_base

    Returns:
        tiktoken.Encoding

    Raises:
        UnsupportedEncodingError: Ten encoding khong duoc ho tro
    """
    if encoding not in SUPPORTED_ENCODINGS:
        raise UnsupportedEncodingError(encoding)
    return tiktoken.get_encoding(encoding)


class TokenizerHandle:
    """
    Handle tai su dung, gan voi mot encoding.

    Special tokens (vd: <|endoftext|>) trong noi dung file duoc encode
    nhu special tokens, nen moi noi dung deu dem duoc ma khong raise.
    """

    __slots__ = ("encoding", "_encoder")

    def __init__(self, encoding: str):
        self.encoding = encoding
        self._encoder = get_encoder(encoding)

    def count(self, text: str) -> int:
        """Dem so token cua mot doan text."""
        if not text:
            return 0
        return len(self._encoder.encode(text, allowed_special="all"))

    def count_batch(self, texts: Sequence[str]) -> List[int]:
        """
        Dem token cho nhieu doan text trong mot lan goi.

        encode_batch chay song song ben trong tiktoken (Rust).
        """
        if not texts:
            return []
        encoded = self._encoder.encode_batch(list(texts), allowed_special="all")
        return [len(ids) for ids in encoded]

    def __repr__(self) -> str:
        return f"TokenizerHandle({self.encoding!r})"


def new_handle(encoding: str) -> TokenizerHandle:
    """Tao handle moi (validate encoding)."""
    return TokenizerHandle(encoding)


# ============================================================
# Encoder pool
# ============================================================


class EncoderPool:
    """
    Pool cac TokenizerHandle cho mot encoding.

    - acquire(): Lay handle da release neu co, khong thi tao moi
    - release(): Tra handle ve pool
    - borrow(): Context manager, luon release khi thoat

    Lock chi bao ve stack. Viec tao handle nam ngoai lock: khi pool rong
    thi tao moi thay vi doi.
    """

    def __init__(self, encoding: str):
        # Validate ngay de loi xuat hien truoc khi traverse
        get_encoder(encoding)
        self.encoding = encoding
        self._handles: List[TokenizerHandle] = []
        self._lock = threading.Lock()
        self._created = 0

    def acquire(self) -> TokenizerHandle:
        with self._lock:
            if self._handles:
                return self._handles.pop()

        handle = new_handle(self.encoding)
        with self._lock:
            self._created += 1
            created = self._created
        log_debug(f"[EncoderPool] Created handle #{created} for {self.encoding}")
        return handle

    def release(self, handle: TokenizerHandle) -> None:
        if handle.encoding != self.encoding:
            raise ValueError(
                f"Handle for {handle.encoding} cannot be released "
                f"into pool for {self.encoding}"
            )
        with self._lock:
            self._handles.append(handle)

    @contextmanager
    def borrow(self) -> Iterator[TokenizerHandle]:
        """
        Muon mot handle trong khoi with.

        Example:
            with pool.borrow() as handle:
                tokens = handle.count(text)
        """
        handle = self.acquire()
        try:
            yield handle
        finally:
            self.release(handle)

    @property
    def created(self) -> int:
        """So handle da tao tu dau."""
        with self._lock:
            return self._created

    @property
    def available(self) -> int:
        """So handle dang nam trong pool (chua bi muon)."""
        with self._lock:
            return len(self._handles)
