"""
File Scanner - Enumerate cac file can dem trong mot directory tree.

Walk bang os.scandir (khong follow symlinks), loc theo:
- VCS directories (.git, .hg, .svn) luon bi bo qua
- Hidden entries (ten bat dau bang ".") tru khi include_hidden
- Ignore rules nhieu layer (core.ignore_engine.IgnoreMatcher)
- Extension allow-list

Directory bi ignore se bi prune (khong traverse vao).
Directory/entry khong doc duoc -> warning, walk tiep tuc.
"""

import os
from pathlib import Path
from typing import List, Optional

from core.constants import VCS_DIRS
from core.ignore_engine import IgnoreMatcher
from core.logging_config import log_debug, log_warning
from core.tokenization.types import ScanOptions


def is_hidden_name(name: str) -> bool:
    """Dotfile / dotdir."""
    return name.startswith(".")


def extension_of(path: Path) -> str:
    """Extension cuoi cung, lowercase, khong dau cham ("" neu khong co)."""
    return path.suffix.lstrip(".").lower()


def matches_extension_filter(path: Path, include_exts: Optional[frozenset]) -> bool:
    """
    Kiem tra file co qua extension filter khong.

    include_exts None -> moi file deu qua. File khong co extension chi qua
    khi "" nam trong set.
    """
    if include_exts is None:
        return True
    return extension_of(path) in include_exts


def enumerate_filtered_paths(root: Path, options: Optional[ScanOptions] = None) -> List[Path]:
    """
    Liet ke tat ca file duoi root da qua cac bo loc.

    Args:
        root: Thu muc goc (chinh no khong bao gio bi loc)
        options: ScanOptions (None -> defaults)

    Returns:
        List cac file path (bat dau tu root). Thu tu khong xac dinh.
    """
    if options is None:
        options = ScanOptions()

    matcher = IgnoreMatcher(
        root,
        excluded_patterns=options.excluded_patterns,
        use_default_ignores=options.use_default_ignores,
        use_gitignore=options.use_gitignore,
    )

    results: List[Path] = []
    # Stack (display_path, absolute_path)
    pending = [(root, matcher.root)]

    while pending:
        current, current_abs = pending.pop()
        try:
            with os.scandir(current) as entries_iter:
                entries = list(entries_iter)
        except OSError as e:
            log_warning(f"Failed to read directory {current}: {e}")
            continue

        for entry in entries:
            name = entry.name
            entry_path = current / name
            entry_abs = current_abs / name

            try:
                if entry.is_symlink():
                    log_debug(f"Skipping symlink {entry_path}")
                    continue
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError as e:
                log_warning(f"Failed to inspect {entry_path}: {e}")
                continue

            if is_dir and name in VCS_DIRS:
                continue

            if not options.include_hidden and is_hidden_name(name):
                continue

            if is_dir:
                if matcher.is_ignored(entry_abs, is_dir=True):
                    continue
                pending.append((entry_path, entry_abs))
            elif is_file:
                if matcher.is_ignored(entry_abs, is_dir=False):
                    continue
                if not matches_extension_filter(entry_path, options.include_exts):
                    continue
                results.append(entry_path)

    log_debug(f"[FileScanner] {len(results)} files under {root}")
    return results
