"""
Centralized logging configuration for the family tree tool.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Master log file (default: ``logs/family_tree.log``) shared by every module.
* Console logging kept quiet (CRITICAL) unless the debug flag is set, so it
  never interleaves with the tree rendering printed by the CLI.
* Optional log rotation controlled by ``config/family_tree.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from family_tree.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
BASE_LOGGER_NAME = "family_tree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cache so the base handlers are only created once
_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _level_from_name(name: object, default: int) -> int:
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else default


def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    cfg = get_config()

    configured = cfg.paths.get("logs_dir")
    log_dir = Path(configured) if configured else DEFAULT_LOG_DIR
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    debug_enabled = bool(cfg.debug)
    base_level = _level_from_name(cfg.logging.get("level", "INFO"), logging.INFO)
    console_level = _level_from_name(
        cfg.logging.get("console", "CRITICAL"), logging.CRITICAL
    )

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    # Master log handler
    master_path = _ensure_log_dir() / cfg.logging.get("file", "family_tree.log")
    base_logger.addHandler(
        _build_file_handler(
            master_path, _effective_level, bool(cfg.logging.get("rotate", False))
        )
    )

    # Console handler
    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    Names outside the ``family_tree`` namespace are nested under it so every
    logger reaches the master file and console handlers.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(
        BASE_LOGGER_NAME + "."
    ):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = base_logger if logger_name == BASE_LOGGER_NAME else logging.getLogger(logger_name)
    if logger is not base_logger:
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_debug() -> None:
    """Force DEBUG output on the base logger and all of its handlers."""
    base_logger = _configure_base_logger()
    base_logger.setLevel(logging.DEBUG)
    for handler in base_logger.handlers:
        handler.setLevel(logging.DEBUG)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
