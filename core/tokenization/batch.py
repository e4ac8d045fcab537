"""
Parallel scan: enumerate mot lan, dem song song, reduce.

Functions:
- get_worker_count(): Tinh so workers toi uu
- count_tokens_in_path(): Scan ca directory -> CountResult
- count_tokens_in_text_for_encoding(): Dem token cho 1 string voi handle moi

AN TOAN RACE CONDITION:
- Moi file duoc xu ly doc lap boi 1 worker
- Shared state chi co: stack handle cua EncoderPool va ScanProgress (moi cai 1 lock)
- Ket qua collect o thread goi, sort theo path o cuoi
"""

import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Union

from core.encoders import EncoderPool, new_handle
from core.logging_config import log_debug, log_error
from core.tokenization.chunking import count_tokens_in_text
from core.tokenization.counter import count_file
from core.tokenization.errors import ScanRootError
from core.tokenization.progress import ProgressCallback, ScanProgress, as_progress
from core.tokenization.types import CountResult, FileCount, ScanOptions
from core.utils.file_scanner import enumerate_filtered_paths


def get_worker_count(num_tasks: int) -> int:
    """
    Tinh so luong workers dua tren so luong tasks va CPU cores.

    - Khong vuot qua so CPU cores.
    - Khong vuot qua so tasks.
    - Toi thieu 1 worker.
    """
    cpu_count = os.cpu_count() or 4
    return max(1, min(cpu_count, num_tasks))


def validate_root(root: Path) -> None:
    """Raise ScanRootError neu root khong ton tai hoac khong phai directory."""
    if not root.exists():
        raise ScanRootError(root, "does not exist")
    if not root.is_dir():
        raise ScanRootError(root, "is not a directory")


def count_tokens_in_path(
    root: Union[str, Path],
    options: Optional[ScanOptions] = None,
    progress: Union[ScanProgress, ProgressCallback, None] = None,
    max_workers: Optional[int] = None,
) -> CountResult:
    """
    Dem LOC va TOK cho tat ca file duoi root.

    Pre-flight (truoc khi traverse):
    - Tao EncoderPool -> UnsupportedEncodingError neu encoding sai
    - Kiem tra root -> ScanRootError neu khong ton tai / khong phai directory

    Moi file xong (dem duoc hay bi skip) deu advance progress 1 lan.
    Loi bat ngo trong 1 file chi duoc log, file do bi bo qua.

    Args:
        root: Thu muc can scan
        options: ScanOptions (None -> defaults)
        progress: ScanProgress hoac callback (processed, total)
        max_workers: Override so workers (None -> get_worker_count)

    Returns:
        CountResult voi files sorted theo path
    """
    if options is None:
        options = ScanOptions()
    root = Path(root)

    pool = EncoderPool(options.encoding)
    validate_root(root)

    observer = as_progress(progress)
    started = time.perf_counter()

    paths = enumerate_filtered_paths(root, options)
    total_files = len(paths)
    observer.start(total_files)

    def process(path: Path) -> Optional[FileCount]:
        try:
            return count_file(path, pool, options.max_file_size)
        except Exception as e:
            log_error(f"Unexpected error while counting {path}", e)
            return None
        finally:
            observer.advance()

    files: List[FileCount] = []
    try:
        if paths:
            num_workers = max_workers or get_worker_count(total_files)
            with ThreadPoolExecutor(max_workers=num_workers) as executor:
                futures = [executor.submit(process, p) for p in paths]
                for future in as_completed(futures):
                    file_count = future.result()
                    if file_count is not None:
                        files.append(file_count)
    finally:
        observer.finish()

    files.sort(key=lambda f: f.path)
    result = CountResult(total=sum(f.tokens for f in files), files=files)

    log_debug(
        f"[Scan] {len(files)}/{total_files} files, {result.total} tokens, "
        f"{pool.created} handles, {time.perf_counter() - started:.2f}s"
    )
    return result


def count_tokens_in_text_for_encoding(text: str, encoding: str) -> int:
    """
    Dem token cho mot string voi handle moi (khong qua pool).

    Raises:
        UnsupportedEncodingError: Encoding khong duoc ho tro
    """
    handle = new_handle(encoding)
    return count_tokens_in_text(handle, text)


# Public alias
scan = count_tokens_in_path
