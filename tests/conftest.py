"""
Shared fixtures cho test suite.

LOCTOK_HOME duoc set TRUOC khi import bat ky module nao cua app,
de log file va settings.json khong ghi vao ~/.loctok that.
"""

import os
import tempfile
from pathlib import Path

os.environ.setdefault("LOCTOK_HOME", tempfile.mkdtemp(prefix="loctok-test-"))

import pytest  # noqa: E402


KEPT_TEXT = "hello world\nthis file is kept\n"
KEPT2_TEXT = "another kept file\n\n   \nend of file\n"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """
    HOME / XDG_CONFIG_HOME tro vao thu muc tam.

    Global gitignore cua may dev khong duoc anh huong ket qua test.
    """
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    return home


@pytest.fixture
def gitignore_fixture(tmp_path: Path) -> Path:
    """
    Cay thu muc mau:

        .gitignore          (ignored.txt, ignored_dir/)
        kept.txt
        ignored.txt
        ignored_dir/inner.txt
        nested/kept2.txt
    """
    (tmp_path / ".gitignore").write_text("ignored.txt\nignored_dir/\n", encoding="utf-8")
    (tmp_path / "kept.txt").write_text(KEPT_TEXT, encoding="utf-8")
    (tmp_path / "ignored.txt").write_text("this should never be counted\n", encoding="utf-8")
    (tmp_path / "ignored_dir").mkdir()
    (tmp_path / "ignored_dir" / "inner.txt").write_text("nope\n", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "kept2.txt").write_text(KEPT2_TEXT, encoding="utf-8")
    return tmp_path


def write(root: Path, rel: str, content: str = "x\n") -> Path:
    """Tao file (va cac thu muc cha) voi noi dung cho truoc."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def make_file():
    """Fixture tra ve helper write(root, rel, content)."""
    return write
