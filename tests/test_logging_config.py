"""
Tests cho core.logging_config.
"""

import logging
import logging.handlers
from unittest.mock import patch

from config.paths import ensure_app_directories
from core import logging_config
from core.logging_config import get_logger, log_debug, set_debug_mode


class TestLoggingConfig:
    """Logger singleton va debug mode."""

    def test_logger_singleton(self):
        assert get_logger() is get_logger()
        assert get_logger().name == "loctok"

    def test_set_debug_mode_doi_level(self):
        logger = get_logger()
        try:
            set_debug_mode(True)
            assert logger.level == logging.DEBUG
            console = [
                h
                for h in logger.handlers
                if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            ]
            assert all(h.level == logging.DEBUG for h in console)
        finally:
            set_debug_mode(False)

        assert logger.level == logging.INFO
        assert all(h.level == logging.WARNING for h in console)

    def test_log_debug_chi_ghi_khi_debug(self):
        with patch.object(logging_config, "DEBUG_MODE", False), patch.object(
            get_logger(), "debug"
        ) as mock_debug:
            log_debug("hidden")
        mock_debug.assert_not_called()

        with patch.object(logging_config, "DEBUG_MODE", True), patch.object(
            get_logger(), "debug"
        ) as mock_debug:
            log_debug("shown")
        mock_debug.assert_called_once_with("shown")

    def test_debug_mode_ha_level_file_handler(self):
        logger = get_logger()
        memory_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.MemoryHandler)
        ]
        assert memory_handlers
        try:
            set_debug_mode(True)
            assert all(h.target.level == logging.DEBUG for h in memory_handlers)
        finally:
            set_debug_mode(False)
        assert all(h.target.level == logging.INFO for h in memory_handlers)


class TestAppDirectories:
    """ensure_app_directories tao APP_DIR va LOG_DIR."""

    def test_tao_thu_muc(self, tmp_path):
        app_dir = tmp_path / "app"
        with patch("config.paths.APP_DIR", app_dir), patch(
            "config.paths.LOG_DIR", app_dir / "logs"
        ):
            ensure_app_directories()
            ensure_app_directories()

        assert (app_dir / "logs").is_dir()
