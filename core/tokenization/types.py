"""
Scan Types - Cac kieu du lieu dung chung cho pipeline dem LOC/TOK.

Cung cap:
- ScanOptions: Cau hinh bat bien cho mot lan scan
- FileCount: Ket qua dem cua 1 file
- CountResult: Ket qua cua ca lan scan (sorted theo path)
- LanguageSummary: Tong hop theo ngon ngu
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from config.encoding_config import DEFAULT_ENCODING

# File lon hon muc nay bi skip (64 MiB)
MAX_FILE_BYTES = 64 * 1024 * 1024


@dataclass(frozen=True)
class ScanOptions:
    """
    Cau hinh cho mot lan scan. Immutable trong suot qua trinh scan.

    Attributes:
        encoding: Ten tiktoken encoding
        include_hidden: Co scan dotfiles/dotdirs hay khong
        include_exts: Extension allow-list (lowercase, khong co dau cham).
            None = moi extension
        max_file_size: Nguong kich thuoc file (bytes), lon hon se bi skip
        excluded_patterns: Pattern gitignore-style bo sung tu user
        use_gitignore: Co respect .gitignore / global gitignore / exclude
        use_default_ignores: Co ap dung EXTENDED_IGNORE_PATTERNS
    """

    encoding: str = DEFAULT_ENCODING
    include_hidden: bool = False
    include_exts: Optional[FrozenSet[str]] = None
    max_file_size: int = MAX_FILE_BYTES
    excluded_patterns: Tuple[str, ...] = ()
    use_gitignore: bool = True
    use_default_ignores: bool = False

    @staticmethod
    def parse_extensions(text: str) -> Optional[FrozenSet[str]]:
        """
        Parse chuoi extension phan cach boi dau phay (vd: "rs, .PY").

        Trim, bo dau cham o dau, lowercase, bo phan tu rong.
        Ket qua rong -> None (khong loc theo extension).
        """
        exts = frozenset(
            part.strip().lstrip(".").lower()
            for part in text.split(",")
            if part.strip().lstrip(".")
        )
        return exts or None


@dataclass(frozen=True, slots=True)
class FileCount:
    """
    Ket qua dem cho 1 file da xu ly thanh cong.

    Attributes:
        path: Duong dan file (nhu khi enumerate, bat dau tu root)
        tokens: So BPE tokens
        lines: So dong khong rong
    """

    path: Path
    tokens: int
    lines: int


@dataclass
class CountResult:
    """
    Ket qua cua ca lan scan.

    Invariant: total == sum(f.tokens for f in files), files sorted theo path.
    """

    total: int = 0
    files: List[FileCount] = field(default_factory=list)

    @property
    def total_lines(self) -> int:
        return sum(f.lines for f in self.files)


@dataclass(frozen=True, slots=True)
class LanguageSummary:
    """Tong so dong va token cua mot ngon ngu."""

    language: str
    lines: int
    tokens: int
