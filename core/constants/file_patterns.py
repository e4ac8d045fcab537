"""
File Patterns Constants
Chua cac ignore patterns dung khi enumerate file.
"""

# Thu muc metadata cua VCS, khong bao gio duoc traverse
VCS_DIRS: frozenset[str] = frozenset({".git", ".hg", ".svn"})

# Ten cac file ignore doc theo tung directory (thu tu = do uu tien giam dan)
DOT_IGNORE_FILE = ".ignore"
GITIGNORE_FILE = ".gitignore"

# Default Ignore Patterns - bat bang --default-ignores
# Thu muc dependency/build va lock files cua cac ecosystem pho bien
EXTENDED_IGNORE_PATTERNS = [
    # Dependencies
    "node_modules/",
    "bower_components/",
    "jspm_packages/",
    "/vendor/",
    ".bundle/",
    ".gradle/",
    # Python
    "__pycache__/",
    "*.py[cod]",
    "venv/",
    ".venv/",
    ".tox/",
    ".pytest_cache/",
    ".mypy_cache/",
    ".ruff_cache/",
    ".ipynb_checkpoints/",
    "*.egg-info/",
    # Rust
    "target/",
    "*.rs.bk",
    # JS frameworks / build tool caches
    ".next/",
    ".nuxt/",
    ".parcel-cache/",
    ".turbo/",
    ".eslintcache",
    "*.tgz",
    # Build outputs
    "/dist/",
    "/build/",
    "/out/",
    "coverage/",
    ".nyc_output/",
    # Logs
    "*.log",
    # Editor / OS
    ".idea/",
    ".vscode/",
    "*.swp",
    "*.swo",
    ".DS_Store",
    "Thumbs.db",
    # Lock files
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
    "Cargo.lock",
    "Pipfile.lock",
    "poetry.lock",
    "uv.lock",
    "composer.lock",
    "Gemfile.lock",
    "go.sum",
    "mix.lock",
]
