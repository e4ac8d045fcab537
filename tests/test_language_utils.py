"""
Tests cho core.language_utils - phan loai ngon ngu va tong hop.
"""

from pathlib import Path

import pytest

from core.constants import FALLBACK_LANGUAGE, LANGUAGE_BY_EXTENSION
from core.language_utils import aggregate_by_language, classify, language_from_path
from core.tokenization.types import FileCount, LanguageSummary


class TestClassify:
    """Test suite cho classify / language_from_path."""

    @pytest.mark.parametrize(
        "extension,expected",
        [
            ("rs", "Rust"),
            (".py", "Python"),
            ("PY", "Python"),
            ("md", "Markdown"),
            ("cs", "C#"),
            ("ts", "TypeScript"),
            ("definitely-unknown", FALLBACK_LANGUAGE),
            ("", FALLBACK_LANGUAGE),
        ],
    )
    def test_classify(self, extension, expected):
        assert classify(extension) == expected

    def test_language_from_path(self):
        assert language_from_path("hello.ts") == "TypeScript"
        assert language_from_path(Path("src/hello.rs")) == "Rust"
        assert language_from_path("Dockerfile") == "Others"
        assert language_from_path(".gitignore") == "Others"

    def test_bang_tra_cuu_bat_bien(self):
        with pytest.raises(TypeError):
            LANGUAGE_BY_EXTENSION["rs"] = "Not Rust"  # type: ignore[index]

    def test_keys_lowercase_khong_co_dau_cham(self):
        for key in LANGUAGE_BY_EXTENSION:
            assert key == key.lower()
            assert not key.startswith(".")


class TestAggregateByLanguage:
    """Test suite cho aggregate_by_language."""

    def test_gom_va_sort(self):
        files = [
            FileCount(Path("a.py"), tokens=10, lines=2),
            FileCount(Path("b.py"), tokens=5, lines=1),
            FileCount(Path("c.rs"), tokens=30, lines=4),
            FileCount(Path("README"), tokens=1, lines=1),
        ]

        assert aggregate_by_language(files) == [
            LanguageSummary("Rust", lines=4, tokens=30),
            LanguageSummary("Python", lines=3, tokens=15),
            LanguageSummary("Others", lines=1, tokens=1),
        ]

    def test_hoa_thi_sort_theo_ten(self):
        files = [
            FileCount(Path("z.rs"), tokens=7, lines=1),
            FileCount(Path("a.go"), tokens=7, lines=1),
            FileCount(Path("m.py"), tokens=7, lines=1),
        ]

        languages = [s.language for s in aggregate_by_language(files)]
        assert languages == ["Go", "Python", "Rust"]

    def test_tong_bang_tong_file(self):
        files = [
            FileCount(Path(f"f{i}.{ext}"), tokens=i, lines=i * 2)
            for i, ext in enumerate(["py", "rs", "js", "py", "txt"])
        ]
        summaries = aggregate_by_language(files)

        assert sum(s.tokens for s in summaries) == sum(f.tokens for f in files)
        assert sum(s.lines for s in summaries) == sum(f.lines for f in files)

    def test_rong(self):
        assert aggregate_by_language([]) == []
