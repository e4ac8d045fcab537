"""
Tests cho core.ignore_engine - Layered Ignore Engine.

Kiem tra cac truong hop:
- IgnoreLayer.match: last match wins, negation, pattern chi cho directory
- Thu tu uu tien: thu muc sau > nong, .ignore > .gitignore, user patterns
- Global gitignore va .git/info/exclude chi ap dung trong git repo
- find_git_root / find_global_gitignore / read_ignore_file
"""

import warnings
from pathlib import Path
from unittest.mock import patch

from core.ignore_engine import (
    IgnoreLayer,
    IgnoreMatcher,
    build_pathspec,
    find_git_root,
    find_global_gitignore,
    read_ignore_file,
)
from core.utils.file_scanner import enumerate_filtered_paths


def _rel_files(matcher: IgnoreMatcher, root: Path, *rels: str) -> dict:
    return {rel: matcher.is_ignored(root.resolve() / rel, is_dir=False) for rel in rels}


class TestIgnoreLayer:
    """Test suite cho IgnoreLayer.match."""

    def test_last_match_wins(self, tmp_path: Path):
        layer = IgnoreLayer(tmp_path, build_pathspec(["*.log", "!keep.log"]), "test")
        assert layer.match(tmp_path / "a.log", is_dir=False) is True
        assert layer.match(tmp_path / "keep.log", is_dir=False) is False
        assert layer.match(tmp_path / "a.txt", is_dir=False) is None

    def test_pattern_directory_chi_match_directory(self, tmp_path: Path):
        layer = IgnoreLayer(tmp_path, build_pathspec(["build/"]), "test")
        assert layer.match(tmp_path / "build", is_dir=True) is True
        assert layer.match(tmp_path / "build", is_dir=False) is None

    def test_path_ngoai_base(self, tmp_path: Path):
        layer = IgnoreLayer(tmp_path / "sub", build_pathspec(["*"]), "test")
        assert layer.match(tmp_path / "other.txt", is_dir=False) is None

    def test_comment_va_dong_trong_bi_bo_qua(self, tmp_path: Path):
        layer = IgnoreLayer(tmp_path, build_pathspec(["# comment", "", "*.tmp"]), "test")
        assert layer.match(tmp_path / "x.tmp", is_dir=False) is True
        assert layer.match(tmp_path / "comment", is_dir=False) is None

    def test_build_pathspec_khong_co_deprecation_warning(self, tmp_path: Path):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            layer = IgnoreLayer(tmp_path, build_pathspec(["*.log", "build/", "!keep.log"]), "test")
            assert layer.match(tmp_path / "a.log", is_dir=False) is True


class TestIgnoreMatcherPrecedence:
    """Thu tu uu tien giua cac layer."""

    def test_nested_gitignore_negation_override_parent(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".gitignore", "*.log\n")
        make_file(tmp_path, "sub/.gitignore", "!keep.log\n")

        matcher = IgnoreMatcher(tmp_path)

        assert _rel_files(matcher, tmp_path, "a.log", "sub/keep.log", "sub/other.log") == {
            "a.log": True,
            "sub/keep.log": False,
            "sub/other.log": True,
        }

    def test_dot_ignore_uu_tien_hon_gitignore(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".gitignore", "special.txt\n")
        make_file(tmp_path, ".ignore", "!special.txt\nonly_ignore.txt\n")

        matcher = IgnoreMatcher(tmp_path)

        assert matcher.is_ignored(tmp_path.resolve() / "special.txt", is_dir=False) is False
        assert matcher.is_ignored(tmp_path.resolve() / "only_ignore.txt", is_dir=False) is True

    def test_user_patterns(self, tmp_path: Path):
        matcher = IgnoreMatcher(tmp_path, excluded_patterns=["docs/", "*.md"])
        root = tmp_path.resolve()

        assert matcher.is_ignored(root / "docs", is_dir=True) is True
        assert matcher.is_ignored(root / "sub" / "README.md", is_dir=False) is True
        assert matcher.is_ignored(root / "main.py", is_dir=False) is False

    def test_gitignore_thang_user_patterns(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".gitignore", "!notes.md\n")
        matcher = IgnoreMatcher(tmp_path, excluded_patterns=["*.md"])

        assert matcher.is_ignored(tmp_path.resolve() / "notes.md", is_dir=False) is False
        assert matcher.is_ignored(tmp_path.resolve() / "other.md", is_dir=False) is True

    def test_use_gitignore_false_bo_qua_gitignore(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".gitignore", "*.txt\n")
        make_file(tmp_path, ".ignore", "*.bak\n")
        matcher = IgnoreMatcher(tmp_path, use_gitignore=False)
        root = tmp_path.resolve()

        assert matcher.is_ignored(root / "a.txt", is_dir=False) is False
        # .ignore van duoc ap dung
        assert matcher.is_ignored(root / "a.bak", is_dir=False) is True

    def test_default_ignores(self, tmp_path: Path):
        root = tmp_path.resolve()
        with_defaults = IgnoreMatcher(tmp_path, use_default_ignores=True)
        without_defaults = IgnoreMatcher(tmp_path)

        assert with_defaults.is_ignored(root / "web" / "node_modules", is_dir=True) is True
        assert with_defaults.is_ignored(root / "Cargo.lock", is_dir=False) is True
        assert without_defaults.is_ignored(root / "web" / "node_modules", is_dir=True) is False

    def test_vcs_dirs_luon_bi_ignore(self, tmp_path: Path):
        matcher = IgnoreMatcher(tmp_path)
        root = tmp_path.resolve()
        for name in (".git", ".hg", ".svn"):
            assert matcher.is_ignored(root / name, is_dir=True) is True


class TestGitRepoLayers:
    """Global gitignore va .git/info/exclude."""

    def test_exclude_chi_ap_dung_trong_repo(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".git/info/exclude", "secret.txt\n")
        root = tmp_path.resolve()

        assert IgnoreMatcher(tmp_path).is_ignored(root / "secret.txt", is_dir=False) is True
        assert (
            IgnoreMatcher(tmp_path, use_gitignore=False).is_ignored(
                root / "secret.txt", is_dir=False
            )
            is False
        )

    def test_global_gitignore_chi_trong_repo(self, tmp_path: Path, make_file, isolated_home: Path):
        make_file(isolated_home, ".gitignore_global", "*.secret\n")
        outside = tmp_path / "plain"
        repo = tmp_path / "repo"
        outside.mkdir()
        (repo / ".git").mkdir(parents=True)

        assert IgnoreMatcher(outside).is_ignored(outside.resolve() / "a.secret", is_dir=False) is False
        assert IgnoreMatcher(repo).is_ignored(repo.resolve() / "a.secret", is_dir=False) is True

    def test_gitignore_cua_ancestor_trong_repo(self, tmp_path: Path, make_file):
        (tmp_path / ".git").mkdir()
        make_file(tmp_path, ".gitignore", "*.tmp\n")
        sub = tmp_path / "pkg"
        sub.mkdir()

        matcher = IgnoreMatcher(sub)

        assert matcher.git_root == tmp_path.resolve()
        assert matcher.is_ignored(sub.resolve() / "x.tmp", is_dir=False) is True

    def test_khong_co_repo_khong_doc_ancestor(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".gitignore", "*.tmp\n")
        sub = tmp_path / "pkg"
        sub.mkdir()

        matcher = IgnoreMatcher(sub)

        assert matcher.git_root is None
        assert matcher.is_ignored(sub.resolve() / "x.tmp", is_dir=False) is False


class TestHelpers:
    """find_git_root, find_global_gitignore, read_ignore_file."""

    def test_find_git_root(self, tmp_path: Path):
        (tmp_path / ".git").mkdir()
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_git_root(deep) == tmp_path.resolve()

    def test_find_git_root_khong_co_repo(self, tmp_path: Path):
        assert find_git_root(tmp_path) is None

    def test_find_global_gitignore_xdg_truoc(self, isolated_home: Path, make_file):
        xdg_file = make_file(isolated_home, ".config/git/ignore", "*.a\n")
        make_file(isolated_home, ".gitignore", "*.b\n")
        assert find_global_gitignore() == xdg_file

    def test_find_global_gitignore_fallback(self, isolated_home: Path, make_file):
        fallback = make_file(isolated_home, ".gitignore", "*.b\n")
        assert find_global_gitignore() == fallback

    def test_find_global_gitignore_khong_co(self):
        assert find_global_gitignore() is None

    def test_read_ignore_file(self, tmp_path: Path, make_file):
        path = make_file(tmp_path, ".gitignore", "a\n\n# c\nb\n")
        assert read_ignore_file(path) == ["a", "", "# c", "b"]
        assert read_ignore_file(tmp_path / "missing") == []

    def test_read_ignore_file_loi_doc(self, tmp_path: Path, make_file):
        path = make_file(tmp_path, ".gitignore", "a\n")
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")), patch(
            "core.ignore_engine.log_warning"
        ) as mock_warning:
            assert read_ignore_file(path) == []
        mock_warning.assert_called_once()


class TestScanRootTrongDirectoryBiIgnore:
    """Scan root nam duoi mot directory bi ignore boi ancestor layer."""

    def _repo_with_gen(self, tmp_path: Path, make_file) -> Path:
        (tmp_path / ".git").mkdir()
        make_file(tmp_path, "gen/a.py", "a = 1\n")
        make_file(tmp_path, "gen/b.py", "b = 2\n")
        return tmp_path / "gen"

    def test_ancestor_gitignore_khong_an_root(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".gitignore", "gen/\n")
        root = self._repo_with_gen(tmp_path, make_file)

        assert sorted(p.name for p in enumerate_filtered_paths(root)) == ["a.py", "b.py"]

    def test_exclude_file_khong_an_root(self, tmp_path: Path, make_file):
        root = self._repo_with_gen(tmp_path, make_file)
        make_file(tmp_path, ".git/info/exclude", "gen\n")

        assert len(enumerate_filtered_paths(root)) == 2

    def test_pattern_truc_tiep_cua_ancestor_van_ap_dung(self, tmp_path: Path, make_file):
        make_file(tmp_path, ".gitignore", "gen/\n*.log\ngen/*.tmp\n")
        root = self._repo_with_gen(tmp_path, make_file)
        make_file(root, "debug.log")
        make_file(root, "scratch.tmp")
        make_file(root, "sub/inner.log")

        assert sorted(p.name for p in enumerate_filtered_paths(root)) == ["a.py", "b.py"]

    def test_layer_tai_root_khong_bi_anh_huong(self, tmp_path: Path):
        layer = IgnoreLayer(tmp_path, build_pathspec(["gen/"]), "test")
        assert layer.match(tmp_path / "gen" / "a.py", is_dir=False) is True
