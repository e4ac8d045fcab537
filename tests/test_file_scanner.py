"""
Tests cho core.utils.file_scanner - enumerate_filtered_paths.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from core.tokenization.types import ScanOptions
from core.utils.file_scanner import (
    enumerate_filtered_paths,
    extension_of,
    matches_extension_filter,
)


def _rels(root: Path, options: ScanOptions = None) -> list:
    return sorted(p.relative_to(root).as_posix() for p in enumerate_filtered_paths(root, options))


class TestHiddenFilter:
    """Dotfiles / dotdirs."""

    def test_hidden_bi_loai_mac_dinh(self, tmp_path: Path, make_file):
        make_file(tmp_path, "visible.txt")
        make_file(tmp_path, ".hidden.txt")
        make_file(tmp_path, ".config/settings.toml")

        assert _rels(tmp_path) == ["visible.txt"]

    def test_include_hidden(self, tmp_path: Path, make_file):
        make_file(tmp_path, "visible.txt")
        make_file(tmp_path, ".hidden.txt")
        make_file(tmp_path, ".config/settings.toml")

        assert _rels(tmp_path, ScanOptions(include_hidden=True)) == [
            ".config/settings.toml",
            ".hidden.txt",
            "visible.txt",
        ]

    def test_vcs_dir_khong_bao_gio_duoc_scan(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".git/config", "[core]\n")
        make_file(tmp_path, ".hg/store", "x\n")
        make_file(tmp_path, "main.py")

        assert _rels(tmp_path, ScanOptions(include_hidden=True)) == ["main.py"]

    def test_root_hidden_van_duoc_scan(self, tmp_path: Path, make_file):
        root = tmp_path / ".dotroot"
        make_file(root, "a.txt")

        assert _rels(root) == ["a.txt"]


class TestSymlinks:
    """Symlink khong bao gio duoc follow."""

    def test_symlink_file_va_dir_bi_bo_qua(self, tmp_path: Path, make_file):
        target_dir = tmp_path / "outside"
        make_file(target_dir, "linked.txt")
        root = tmp_path / "root"
        make_file(root, "real.txt")
        try:
            os.symlink(target_dir, root / "dir_link", target_is_directory=True)
            os.symlink(root / "real.txt", root / "file_link.txt")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported on this platform")

        assert _rels(root) == ["real.txt"]


class TestIgnoreIntegration:
    """Ignore rules khi walk."""

    def test_gitignore_fixture(self, gitignore_fixture: Path):
        assert _rels(gitignore_fixture) == ["kept.txt", "nested/kept2.txt"]

    def test_use_gitignore_false(self, gitignore_fixture: Path):
        assert _rels(gitignore_fixture, ScanOptions(use_gitignore=False)) == [
            "ignored.txt",
            "ignored_dir/inner.txt",
            "kept.txt",
            "nested/kept2.txt",
        ]

    def test_directory_bi_ignore_duoc_prune(self, tmp_path: Path, make_file):
        """File trong directory bi ignore khong the re-include (directory khong duoc walk)."""
        make_file(tmp_path, ".gitignore", "build/\n!build/keep.txt\n")
        make_file(tmp_path, "build/keep.txt")
        make_file(tmp_path, "src/app.py")

        scanned = []
        real_scandir = os.scandir

        def spy(path):
            scanned.append(Path(path).name)
            return real_scandir(path)

        with patch("core.utils.file_scanner.os.scandir", side_effect=spy):
            rels = _rels(tmp_path)

        assert rels == ["src/app.py"]
        assert "build" not in scanned

    def test_excluded_patterns(self, tmp_path: Path, make_file):
        make_file(tmp_path, "docs/guide.md")
        make_file(tmp_path, "src/lib.rs")

        options = ScanOptions(excluded_patterns=("docs/",))
        assert _rels(tmp_path, options) == ["src/lib.rs"]

    def test_default_ignores(self, tmp_path: Path, make_file):
        make_file(tmp_path, "node_modules/pkg/index.js")
        make_file(tmp_path, "app.js")

        assert _rels(tmp_path, ScanOptions(use_default_ignores=True)) == ["app.js"]
        assert _rels(tmp_path) == ["app.js", "node_modules/pkg/index.js"]

    def test_thu_muc_khong_doc_duoc(self, tmp_path: Path, make_file):
        make_file(tmp_path, "a.txt")
        real_scandir = os.scandir

        def failing(path):
            if Path(path) != tmp_path:
                raise PermissionError("denied")
            return real_scandir(path)

        make_file(tmp_path, "locked/b.txt")
        with patch("core.utils.file_scanner.os.scandir", side_effect=failing), patch(
            "core.utils.file_scanner.log_warning"
        ) as mock_warning:
            rels = _rels(tmp_path)

        assert rels == ["a.txt"]
        mock_warning.assert_called_once()


class TestExtensionFilter:
    """Extension allow-list."""

    def test_extension_of(self):
        assert extension_of(Path("a/b/Main.RS")) == "rs"
        assert extension_of(Path("archive.tar.gz")) == "gz"
        assert extension_of(Path("Makefile")) == ""
        assert extension_of(Path(".bashrc")) == ""

    def test_matches_extension_filter(self):
        assert matches_extension_filter(Path("x.py"), None) is True
        assert matches_extension_filter(Path("x.PY"), frozenset({"py"})) is True
        assert matches_extension_filter(Path("x.rs"), frozenset({"py"})) is False
        assert matches_extension_filter(Path("Makefile"), frozenset({"py"})) is False
        assert matches_extension_filter(Path("Makefile"), frozenset({""})) is True

    def test_walk_voi_ext_filter(self, tmp_path: Path, make_file):
        make_file(tmp_path, "a.py")
        make_file(tmp_path, "b.RS")
        make_file(tmp_path, "c.md")
        make_file(tmp_path, "Makefile")

        options = ScanOptions(include_exts=ScanOptions.parse_extensions("rs, .PY"))
        assert _rels(tmp_path, options) == ["a.py", "b.RS"]


class TestParseExtensions:
    """ScanOptions.parse_extensions."""

    def test_parse(self):
        assert ScanOptions.parse_extensions("rs, .PY ,js") == frozenset({"rs", "py", "js"})

    def test_rong_la_none(self):
        assert ScanOptions.parse_extensions("") is None
        assert ScanOptions.parse_extensions(" , . ,") is None
