"""
Settings Manager - Quan ly load/save default options cua loctok.

File: ~/.loctok/settings.json (override thu muc bang LOCTOK_HOME)

API:
    settings = load_app_settings()  # -> AppSettings
    save_app_settings(settings)
    update_app_setting(encoding="cl100k_base")

File khong ton tai hoac hong -> dung defaults. CLI flags luon override settings.
"""

import json
import threading
from typing import Any

from config.app_settings import AppSettings
from config.paths import SETTINGS_FILE
from core.logging_config import log_warning

# Thread-safe lock de tranh race condition khi save settings
_settings_lock = threading.Lock()


def _read_settings_file() -> dict[str, Any]:
    """
    Doc raw dict tu settings.json.

    Returns:
        Dict (rong neu file khong ton tai, hong hoac khong phai JSON object)
    """
    if not SETTINGS_FILE.exists():
        return {}
    try:
        data = json.loads(SETTINGS_FILE.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        log_warning(f"Ignoring unreadable settings file {SETTINGS_FILE}: {e}")
        return {}
    if not isinstance(data, dict):
        log_warning(f"Ignoring settings file {SETTINGS_FILE}: expected a JSON object")
        return {}
    return data


def _save_app_settings_unlocked(settings: AppSettings) -> bool:
    """
    Save AppSettings ra file KHONG co lock.

    Chi duoc goi tu ben trong code da acquire _settings_lock.
    Merge voi existing data de bao toan extra keys.
    """
    try:
        updated = {**_read_settings_file(), **settings.to_dict()}
        SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
        SETTINGS_FILE.write_text(json.dumps(updated, indent=2), encoding="utf-8")
        return True
    except OSError as e:
        log_warning(f"Failed to save settings to {SETTINGS_FILE}: {e}")
        return False


def load_app_settings() -> AppSettings:
    """
    Load settings tu file va tra ve AppSettings typed instance.

    Read-only operation, khong can lock vi chi doc file.
    Key khong hop le / sai type bi bo qua (xem AppSettings.from_dict).
    """
    return AppSettings.from_dict(_read_settings_file())


def save_app_settings(settings: AppSettings) -> bool:
    """
    Save AppSettings ra file (thread-safe).

    Returns:
        True neu save thanh cong
    """
    with _settings_lock:
        return _save_app_settings_unlocked(settings)


def update_app_setting(**kwargs: Any) -> bool:
    """
    Update mot hoac nhieu settings fields cung luc (thread-safe, atomic).

    Toan bo read-modify-write duoc bao ve boi _settings_lock.

    Args:
        **kwargs: Field names va values can update (vd: encoding="p50k_base")

    Returns:
        True neu save thanh cong

    Raises:
        TypeError: Neu key khong phai la AppSettings field
    """
    valid_fields = set(AppSettings.__dataclass_fields__)
    for key in kwargs:
        if key not in valid_fields:
            raise TypeError(
                f"'{key}' is not a valid AppSettings field. "
                f"Valid fields: {sorted(valid_fields)}"
            )

    with _settings_lock:
        settings = AppSettings.from_dict(_read_settings_file())
        for key, value in kwargs.items():
            setattr(settings, key, value)
        return _save_app_settings_unlocked(settings)
