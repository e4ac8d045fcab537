"""
Application Paths - Centralized path definitions cho loctok

Module nay dinh nghia tat ca cac duong dan su dung trong ung dung.
Tap trung o mot noi de tranh hardcode rai rac va dam bao consistency.

App data duoc luu tai: ~/.loctok/ (override bang bien moi truong LOCTOK_HOME)
- logs/         : Log files
- settings.json : Default options cho CLI
"""

import os
from pathlib import Path


# =============================================================================
# Ten ung dung - Single source of truth cho naming
# =============================================================================
APP_NAME = "loctok"

# =============================================================================
# Environment Variables
# =============================================================================
HOME_ENV_VAR = "LOCTOK_HOME"
DEBUG_ENV_VAR = "LOCTOK_DEBUG"

# =============================================================================
# Thu muc goc cua ung dung
# =============================================================================
APP_DIR = Path(os.environ.get(HOME_ENV_VAR) or Path.home() / f".{APP_NAME}")

# =============================================================================
# Cac thu muc con va file du lieu
# =============================================================================
LOG_DIR = APP_DIR / "logs"
SETTINGS_FILE = APP_DIR / "settings.json"

# Kiem tra debug mode tu environment variable
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


def ensure_app_directories() -> None:
    """
    Tao cac thu muc can thiet neu chua ton tai.
    Goi truoc khi tao log file.
    """
    APP_DIR.mkdir(parents=True, exist_ok=True)
    LOG_DIR.mkdir(parents=True, exist_ok=True)

