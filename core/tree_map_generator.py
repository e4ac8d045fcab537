"""
Tree Map Generator - Cay thu muc kem so LOC/TOK cong don.

Directory node co lines/tokens = tong cua tat ca file ben duoi.
Render theo post-order: children truoc, node sau (root nam o dong cuoi).
Trong moi directory: directories truoc, files sau, moi nhom sort theo ten.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from core.tokenization.types import FileCount

COLUMN_GAP = "    "


@dataclass
class CountNode:
    """
    Mot node trong tree map.

    Attributes:
        name: Ten file/folder
        is_dir: True neu la directory
        lines: So dong khong rong (cong don voi directory)
        tokens: So tokens (cong don voi directory)
        children: Map ten -> node con
    """

    name: str
    is_dir: bool
    lines: int = 0
    tokens: int = 0
    children: Dict[str, "CountNode"] = field(default_factory=dict)

    def ordered_children(self) -> List["CountNode"]:
        """Directories truoc, files sau, moi nhom sort theo ten."""
        dirs = sorted((c for c in self.children.values() if c.is_dir), key=lambda c: c.name)
        files = sorted(
            (c for c in self.children.values() if not c.is_dir), key=lambda c: c.name
        )
        return dirs + files

    @property
    def label(self) -> str:
        return f"{self.name}/" if self.is_dir else self.name


def _relative_to_root(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        pass
    try:
        return path.resolve().relative_to(root.resolve())
    except (ValueError, OSError):
        return Path(path.name)


def _accumulate(node: CountNode) -> None:
    if not node.is_dir:
        return
    node.lines = 0
    node.tokens = 0
    for child in node.children.values():
        _accumulate(child)
        node.lines += child.lines
        node.tokens += child.tokens


def build_count_tree(root: Path, files: Iterable[FileCount]) -> CountNode:
    """
    Tao cay tu danh sach FileCount (paths tuong doi voi root).

    Args:
        root: Thu muc da scan
        files: Ket qua dem tung file

    Returns:
        CountNode goc voi totals da cong don
    """
    root = Path(root)
    root_name = root.name or str(root)
    if root_name == ".":
        root_name = root.resolve().name or "."
    tree = CountNode(name=root_name, is_dir=True)

    for file_count in files:
        parts = _relative_to_root(file_count.path, root).parts
        if not parts:
            continue
        current = tree
        for name in parts[:-1]:
            child = current.children.get(name)
            if child is None:
                child = CountNode(name=name, is_dir=True)
                current.children[name] = child
            current = child
        current.children[parts[-1]] = CountNode(
            name=parts[-1],
            is_dir=False,
            lines=file_count.lines,
            tokens=file_count.tokens,
        )

    _accumulate(tree)
    return tree


def _walk_post_order(
    node: CountNode, line_prefix: str = "", child_prefix: str = ""
) -> Iterator[Tuple[str, CountNode]]:
    for idx, child in enumerate(node.ordered_children()):
        is_first = idx == 0
        branch = "┌── " if is_first else "├── "
        guide = "    " if is_first else "│   "
        yield from _walk_post_order(child, child_prefix + branch, child_prefix + guide)
    yield line_prefix, node


def render_count_tree(node: CountNode) -> List[str]:
    """
    Render tree map thanh cac dong text.

    Dong dau la header "Name / LOC / TOK", dong thu hai la duong ke.
    So co dau phay hang nghin, can phai.
    """
    rows = [
        (prefix + item.label, f"{item.lines:,}", f"{item.tokens:,}")
        for prefix, item in _walk_post_order(node)
    ]

    label_width = max([len("Name")] + [len(label) for label, _, _ in rows])
    loc_width = max([len("LOC")] + [len(loc) for _, loc, _ in rows])
    tok_width = max([len("TOK")] + [len(tok) for _, _, tok in rows])

    lines = [
        f"{'Name':<{label_width}}{COLUMN_GAP}{'LOC':>{loc_width}}{COLUMN_GAP}{'TOK':>{tok_width}}",
        "-" * (label_width + loc_width + tok_width + 2 * len(COLUMN_GAP)),
    ]
    for label, loc, tok in rows:
        lines.append(
            f"{label:<{label_width}}{COLUMN_GAP}{loc:>{loc_width}}{COLUMN_GAP}{tok:>{tok_width}}"
        )
    return lines
