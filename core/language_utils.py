"""
Language Utilities - Phan loai file theo ngon ngu va tong hop LOC/TOK.

Ngon ngu chi duoc xac dinh bang extension (khong doc noi dung file).
Extension khong co trong bang -> "Others".
Ten ghep nhu "C#/Smalltalk" -> lay ten dau tien ("C#").
"""

from pathlib import Path
from typing import Dict, Iterable, List, Union

from core.constants import FALLBACK_LANGUAGE, LANGUAGE_BY_EXTENSION
from core.tokenization.types import FileCount, LanguageSummary


def classify(extension: str) -> str:
    """
    Tra ten ngon ngu cho mot extension.

    Args:
        extension: Extension, co hoac khong co dau cham, moi kieu chu hoa/thuong

    Returns:
        Ten ngon ngu (ung vien dau tien neu ten ghep), "Others" neu khong biet
    """
    key = extension.lstrip(".").lower()
    name = LANGUAGE_BY_EXTENSION.get(key)
    if not name:
        return FALLBACK_LANGUAGE
    return name.split("/", 1)[0]


def language_from_path(path: Union[str, Path]) -> str:
    """Ngon ngu cua file dua tren extension cuoi cung."""
    return classify(Path(path).suffix)


def aggregate_by_language(files: Iterable[FileCount]) -> List[LanguageSummary]:
    """
    Gom FileCount theo ngon ngu.

    Returns:
        List LanguageSummary sort theo tokens giam dan, hoa thi theo ten tang dan
    """
    totals: Dict[str, List[int]] = {}
    for file_count in files:
        bucket = totals.setdefault(language_from_path(file_count.path), [0, 0])
        bucket[0] += file_count.lines
        bucket[1] += file_count.tokens

    summaries = [
        LanguageSummary(language=language, lines=lines, tokens=tokens)
        for language, (lines, tokens) in totals.items()
    ]
    summaries.sort(key=lambda s: (-s.tokens, s.language))
    return summaries


# Public alias
aggregate = aggregate_by_language
