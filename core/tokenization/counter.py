"""
Core counting logic cho tung file.

Functions:
- count_non_empty_lines(): Dem dong khong rong
- read_text_file(): Doc file, tra ve None neu khong phai UTF-8
- count_file(): Dem LOC + TOK cho 1 file (stat, size guard, read, decode)

Encoder pool nam o core.encoders, chunking o core.tokenization.chunking.
"""

from pathlib import Path
from typing import Optional

from core.encoders import EncoderPool
from core.logging_config import log_debug, log_warning
from core.tokenization.chunking import count_tokens_in_text
from core.tokenization.types import FileCount, MAX_FILE_BYTES


def count_non_empty_lines(text: str) -> int:
    """
    Dem so dong co noi dung sau khi strip().

    Dong tach boi "\\n"; "\\r" o cuoi dong duoc coi la whitespace.
    """
    if not text:
        return 0
    return sum(1 for line in text.split("\n") if line.strip())


def read_text_file(file_path: Path) -> Optional[str]:
    """
    Doc file va decode UTF-8 strict.

    Returns:
        Noi dung file, hoac None neu khong phai UTF-8 hop le

    Raises:
        OSError: Khong doc duoc file
    """
    data = file_path.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def count_file(
    file_path: Path,
    pool: EncoderPool,
    max_file_size: int = MAX_FILE_BYTES,
) -> Optional[FileCount]:
    """
    Dem so dong khong rong va so token trong mot file.

    - stat fail -> warning, skip
    - File > max_file_size -> warning, skip (bang nguong van duoc dem)
    - Doc fail -> warning, skip
    - Khong phai UTF-8 -> skip im lang (chi debug log)

    Args:
        file_path: Duong dan file
        pool: EncoderPool de muon tokenizer handle
        max_file_size: Nguong kich thuoc (bytes)

    Returns:
        FileCount, hoac None neu file bi skip
    """
    try:
        size = file_path.stat().st_size
    except OSError as e:
        log_warning(f"Failed to stat {file_path}: {e}")
        return None

    if size > max_file_size:
        log_warning(
            f"Skipping large file {file_path} ({size} bytes > {max_file_size} bytes)"
        )
        return None

    try:
        text = read_text_file(file_path)
    except OSError as e:
        log_warning(f"Failed to read {file_path}: {e}")
        return None

    if text is None:
        log_debug(f"Skipping non-UTF-8 file {file_path}")
        return None

    lines = count_non_empty_lines(text)
    with pool.borrow() as handle:
        tokens = count_tokens_in_text(handle, text)

    return FileCount(path=file_path, tokens=tokens, lines=lines)
