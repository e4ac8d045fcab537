"""
Copy Output - Gom noi dung cac file da loc thanh mot van ban de copy.

Format:
- Cay thu muc dung ├── / └── va │ (directories truoc, files sau)
- Mot dong trong
- Moi file: duong ke 80 dau "-", "/<path>:", duong ke, cac dong danh so
  "N | text" ("N |" voi dong rong), roi hai dong trong
"""

from pathlib import Path, PurePath
from typing import Dict, List, Optional, Sequence, Tuple

from core.logging_config import log_warning
from core.tokenization.counter import read_text_file
from core.tokenization.types import ScanOptions
from core.utils.file_scanner import enumerate_filtered_paths

SECTION_RULE = "-" * 80


def collect_filtered_texts(
    root: Path, options: Optional[ScanOptions] = None
) -> List[Tuple[Path, str]]:
    """
    Enumerate va doc noi dung cac file (chi file UTF-8 hop le).

    Returns:
        List (relative path, text) sorted theo relative path
    """
    root = Path(root)
    paths = sorted(enumerate_filtered_paths(root, options))

    results: List[Tuple[Path, str]] = []
    for path in paths:
        try:
            rel = path.relative_to(root)
        except ValueError:
            rel = path
        try:
            text = read_text_file(path)
        except OSError as e:
            log_warning(f"Failed to read {path}: {e}")
            continue
        if text is None:
            continue
        results.append((rel, text))
    return results


def _split_lines(text: str) -> List[str]:
    """Tach dong theo "\\n", bo "\\r" cuoi dong, khong tinh dong rong sau newline cuoi."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class _DirNode:
    __slots__ = ("dirs", "files")

    def __init__(self) -> None:
        self.dirs: Dict[str, "_DirNode"] = {}
        self.files: List[str] = []


def _render_dir(node: _DirNode, prefix: str, out: List[str]) -> None:
    entries = [(name, True) for name in sorted(node.dirs)]
    entries += [(name, False) for name in sorted(node.files)]

    for idx, (name, is_dir) in enumerate(entries):
        last = idx + 1 == len(entries)
        branch = "└── " if last else "├── "
        out.append(f"{prefix}{branch}{name}\n")
        if is_dir:
            _render_dir(node.dirs[name], prefix + ("    " if last else "│   "), out)


def build_copy_output(rel_and_texts: Sequence[Tuple[PurePath, str]]) -> str:
    """
    Tao van ban copy tu list (relative path, text).

    Sections duoc ghi theo thu tu cua input; cay thu muc luon sorted.
    """
    root_node = _DirNode()
    for rel, _ in sorted(rel_and_texts, key=lambda item: item[0]):
        parts = PurePath(rel).parts
        current = root_node
        for name in parts[:-1]:
            current = current.dirs.setdefault(name, _DirNode())
        if parts:
            current.files.append(parts[-1])

    out: List[str] = []
    _render_dir(root_node, "", out)
    if out:
        out.append("\n")

    for rel, text in rel_and_texts:
        out.append(f"{SECTION_RULE}\n")
        out.append(f"/{PurePath(rel).as_posix()}:\n")
        out.append(f"{SECTION_RULE}\n")
        for number, line in enumerate(_split_lines(text), start=1):
            out.append(f"{number} | {line}\n" if line else f"{number} |\n")
        out.append("\n\n")

    return "".join(out)
