"""
Ignore Engine - Single source of truth cho tat ca logic ignore/gitignore.

Cung cap:
- IgnoreMatcher: Quyet dinh "file/folder nay co bi ignore khong" theo nhieu layer
- read_ignore_file(): Doc mot file ignore thanh list patterns
- find_global_gitignore(): Tim global gitignore (core.excludesFile mac dinh)
- find_git_root(): Tim git root directory tu mot path bat ky

Thu tu uu tien (cao -> thap):
1. .ignore cua tung directory
2. .gitignore cua tung directory
   (directory sau hon thang directory nong hon)
3. excluded_patterns cua user + default ignore list (tinh tu scan root)
4. Global gitignore
5. .git/info/exclude

Trong moi layer, pattern match cuoi cung thang; "!pattern" re-include.
Layer 4-5 chi ap dung khi scan root nam trong mot git work tree.
Scan root luon duoc walk: layer nam tren root khong ignore mot path chi vi
mot directory o tren (hoac chinh la) root match pattern.

SOLID: Single Responsibility - chi lo viec quyet dinh ignore
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

import pathspec

from core.constants import (
    DOT_IGNORE_FILE,
    EXTENDED_IGNORE_PATTERNS,
    GITIGNORE_FILE,
    VCS_DIRS,
)
from core.logging_config import log_debug, log_warning

# Named group pathspec dat vao "/" sau directory duoc match
DIR_MARK_GROUP = "ps_d"


@dataclass(frozen=True)
class IgnoreLayer:
    """
    Mot tap patterns gitignore-style, tinh tuong doi voi base directory.

    Attributes:
        base: Directory chua file ignore (absolute)
        spec: GitIgnoreSpec da compile
        source: Nguon cua patterns (duong dan file hoac ten layer)
        root_prefix: Scan root tuong doi voi base ("" neu base khong nam tren root)
    """

    base: Path
    spec: pathspec.PathSpec
    source: str
    root_prefix: str = ""

    def match(self, abs_path: Path, is_dir: bool) -> Optional[bool]:
        """
        Tra ve True (ignore), False (whitelist qua "!") hoac None (khong match).
        """
        try:
            rel = abs_path.relative_to(self.base).as_posix()
        except ValueError:
            return None
        if is_dir:
            rel += "/"

        result: Optional[bool] = None
        for pattern in self.spec.patterns:
            if pattern.include is None:
                continue
            matched = pattern.match_file(rel)
            if matched is None or self._inherited_from_root(matched):
                continue
            result = pattern.include
        return result

    def _inherited_from_root(self, matched) -> bool:
        """
        True neu pattern chi match vi mot directory tai/tren scan root.

        Directory mark "ps_d" danh dau "/" ngay sau directory da match;
        vi tri <= len(root_prefix) nghia la directory do la root hoac ancestor.
        """
        if not self.root_prefix:
            return False
        match = matched.match
        if DIR_MARK_GROUP not in match.re.groupindex:
            return False
        start = match.start(DIR_MARK_GROUP)
        return start != -1 and start <= len(self.root_prefix)


def build_pathspec(lines: Sequence[str]) -> pathspec.PathSpec:
    """Compile patterns (gitignore format) thanh GitIgnoreSpec."""
    return pathspec.GitIgnoreSpec.from_lines(lines)


def read_ignore_file(path: Path) -> List[str]:
    """
    Doc file ignore thanh list patterns (raw lines).

    File khong ton tai -> list rong. Loi doc -> warning, list rong.
    """
    if not path.is_file():
        return []
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log_warning(f"Failed to read ignore file {path}: {e}")
        return []
    return content.splitlines()


def find_global_gitignore() -> Optional[Path]:
    """
    Tim global gitignore (kiem tra cac vi tri pho bien, lay file dau tien).

    Candidates:
    1. $XDG_CONFIG_HOME/git/ignore
    2. ~/.config/git/ignore
    3. ~/.gitignore_global
    4. ~/.gitignore
    """
    home = Path.home()
    candidates: List[Path] = []
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        candidates.append(Path(xdg) / "git" / "ignore")
    candidates.extend(
        [
            home / ".config" / "git" / "ignore",
            home / ".gitignore_global",
            home / ".gitignore",
        ]
    )
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def find_git_root(start_path: Path) -> Optional[Path]:
    """
    Tim git root directory bang cach traverse len parent directories.

    Args:
        start_path: Thu muc bat dau tim

    Returns:
        Path den git root, hoac None neu khong nam trong git work tree
    """
    current = start_path.resolve()
    while True:
        if (current / ".git").exists():
            return current
        if current.parent == current:
            return None
        current = current.parent


class IgnoreMatcher:
    """
    Danh gia ignore rules cho mot lan enumerate.

    Patterns cua moi directory chi duoc doc mot lan (cache trong instance).
    Khong thread-safe: dung trong mot walk duy nhat.
    """

    def __init__(
        self,
        root: Path,
        *,
        excluded_patterns: Sequence[str] = (),
        use_default_ignores: bool = False,
        use_gitignore: bool = True,
    ):
        self.root = root.resolve()
        self.use_gitignore = use_gitignore
        self.git_root = find_git_root(self.root)
        # Directory cao nhat co ignore files duoc ap dung
        self._top = self.git_root if self.git_root is not None else self.root
        self._dir_layers: Dict[Path, List[IgnoreLayer]] = {}

        root_patterns: List[str] = []
        if use_default_ignores:
            root_patterns.extend(EXTENDED_IGNORE_PATTERNS)
        root_patterns.extend(excluded_patterns)

        self._fallback_layers: List[IgnoreLayer] = []
        if root_patterns:
            self._fallback_layers.append(
                IgnoreLayer(self.root, build_pathspec(root_patterns), "excluded_patterns")
            )

        if use_gitignore and self.git_root is not None:
            global_file = find_global_gitignore()
            if global_file is not None:
                self._add_file_layer(self._fallback_layers, self.git_root, global_file)
            exclude_file = self.git_root / ".git" / "info" / "exclude"
            self._add_file_layer(self._fallback_layers, self.git_root, exclude_file)

        log_debug(
            f"[IgnoreEngine] root={self.root} git_root={self.git_root} "
            f"fallback_layers={len(self._fallback_layers)}"
        )

    def _root_prefix(self, base: Path) -> str:
        if base == self.root:
            return ""
        try:
            return self.root.relative_to(base).as_posix()
        except ValueError:
            return ""

    def _add_file_layer(self, layers: List[IgnoreLayer], base: Path, file_path: Path) -> None:
        lines = read_ignore_file(file_path)
        if lines:
            layers.append(
                IgnoreLayer(
                    base, build_pathspec(lines), str(file_path), self._root_prefix(base)
                )
            )

    def layers_for_directory(self, directory: Path) -> List[IgnoreLayer]:
        """Layers (.ignore roi .gitignore) cua mot directory, co cache."""
        cached = self._dir_layers.get(directory)
        if cached is not None:
            return cached

        layers: List[IgnoreLayer] = []
        self._add_file_layer(layers, directory, directory / DOT_IGNORE_FILE)
        if self.use_gitignore:
            self._add_file_layer(layers, directory, directory / GITIGNORE_FILE)
        self._dir_layers[directory] = layers
        return layers

    def _ancestors(self, abs_path: Path) -> Iterator[Path]:
        """Cac directory tu parent cua abs_path len toi top (sau -> nong)."""
        current = abs_path.parent
        while True:
            yield current
            if current == self._top or current.parent == current:
                return
            current = current.parent

    def is_ignored(self, abs_path: Path, is_dir: bool) -> bool:
        """
        Kiem tra mot path (absolute, nam duoi root) co bi ignore khong.

        Args:
            abs_path: Path can kiem tra
            is_dir: True neu la directory (patterns "dir/" chi match directory)
        """
        if is_dir and abs_path.name in VCS_DIRS:
            return True

        for directory in self._ancestors(abs_path):
            for layer in self.layers_for_directory(directory):
                matched = layer.match(abs_path, is_dir)
                if matched is not None:
                    return matched

        for layer in self._fallback_layers:
            matched = layer.match(abs_path, is_dir)
            if matched is not None:
                return matched

        return False
