"""
Chunking - Cat text dai thanh cac chunk nho de gioi han chi phi tokenize.

Text ngan (<= 4 * CHUNK_SIZE bytes UTF-8) duoc tokenize nguyen van.
Text dai duoc cat tai ranh gioi ky tu an toan, uu tien cat ngay sau
khoang trang hoac newline, roi dem tung chunk va cong lai.

Ket qua la xap xi co gioi han: BPE merge qua ranh gioi chunk bi mat,
nen tong co the lech vai token moi ranh gioi so voi encode ca text.
"""

from typing import List

from core.encoders import TokenizerHandle

# Kich thuoc chunk toi thieu (bytes)
CHUNK_SIZE = 512

# Ky tu duoc uu tien de cat (split ngay SAU ky tu nay)
_BREAK_BYTES = (0x20, 0x0A)  # " ", "\n"


def _is_char_boundary(data: bytes, index: int) -> bool:
    """True neu index khong nam giua mot ky tu UTF-8 nhieu byte."""
    if index >= len(data):
        return True
    return (data[index] & 0xC0) != 0x80


def split_text_into_chunks(text: str, max_chunk_bytes: int = CHUNK_SIZE) -> List[str]:
    """
    Cat text thanh cac chunk.

    Moi chunk (tru chunk cuoi) dai it nhat max_chunk_bytes bytes, keo dai
    toi ranh gioi ky tu ke tiep. Sau do tim trong max_chunk_bytes bytes tiep
    theo khoang trang/newline dau tien va cat ngay sau no. Phan con lai
    <= max_chunk_bytes bytes tro thanh chunk cuoi.

    Dam bao:
    - Khong bao gio cat giua mot ky tu nhieu byte
    - "".join(chunks) == text

    Args:
        text: Text can cat
        max_chunk_bytes: Kich thuoc chunk toi thieu (bytes)

    Returns:
        List cac chunk (rong neu text rong)
    """
    if max_chunk_bytes <= 0:
        raise ValueError("max_chunk_bytes must be positive")

    data = text.encode("utf-8")
    length = len(data)
    chunks: List[str] = []
    start = 0

    while start < length:
        if length - start <= max_chunk_bytes:
            chunks.append(data[start:].decode("utf-8"))
            break

        # Minimum boundary: ranh gioi ky tu dau tien tu start + size
        base_end = start + max_chunk_bytes
        while not _is_char_boundary(data, base_end):
            base_end += 1

        end = base_end
        lookahead_end = min(base_end + max_chunk_bytes, length)
        for i in range(base_end, lookahead_end):
            if data[i] in _BREAK_BYTES:
                end = i + 1
                break

        chunks.append(data[start:end].decode("utf-8"))
        start = end

    return chunks


def count_tokens_in_text(handle: TokenizerHandle, text: str) -> int:
    """
    Dem token cua text, cat chunk neu text dai.

    Args:
        handle: Tokenizer handle dang muon tu pool
        text: Noi dung can dem

    Returns:
        So tokens (0 neu text rong)
    """
    if not text:
        return 0

    if len(text.encode("utf-8")) <= 4 * CHUNK_SIZE:
        return handle.count(text)

    chunks = split_text_into_chunks(text, CHUNK_SIZE)
    if len(chunks) <= 1:
        return handle.count(text)

    return sum(handle.count_batch(chunks))
