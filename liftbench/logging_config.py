# liftbench/logging_config.py
"""Minimal logging helpers for the bench_stats launcher.

The launcher hands stdin/stdout/stderr to the delegated tool, so logging never
writes to the terminal:

* ``setup_logging`` initialises a single file handler on the root logger.
* ``get_log_path`` exposes the resolved log file for diagnostics.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Optional

__all__ = [
    "get_log_path",
    "setup_logging",
]

_configured = False
_log_path: Optional[Path] = None

LOG_FILE_NAME = "launcher.log"


def _platform_data_dir() -> Path:
    """Return a per-user writable application data directory."""
    app = "liftbench"
    if os.name == "nt":
        base = Path(os.getenv("LOCALAPPDATA") or os.getenv("APPDATA") or (Path.home() / "AppData" / "Local"))
        return base / app
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / app
    xdg_home = os.getenv("XDG_DATA_HOME")
    if xdg_home:
        return Path(xdg_home) / app
    return Path.home() / ".local" / "share" / app


def default_log_path(file_env: str = "LIFT_BENCH_STATS_LOG_FILE") -> Path:
    """Where the log file goes when ``setup_logging`` has not run yet."""
    override = os.getenv(file_env)
    if override:
        return Path(override).expanduser()
    return _platform_data_dir() / "logs" / LOG_FILE_NAME


def setup_logging(
    *,
    level_env: str = "LIFT_BENCH_STATS_LOG_LEVEL",
    file_env: str = "LIFT_BENCH_STATS_LOG_FILE",
) -> Path:
    """
    Configure the root logger with a single file handler.

    The level comes from ``LIFT_BENCH_STATS_LOG_LEVEL`` (default ``ERROR``) and
    the destination from ``LIFT_BENCH_STATS_LOG_FILE``. When the destination is
    not writable the handler falls back to the temp directory. Repeated calls
    return the previously configured path without reconfiguring.
    """
    global _configured, _log_path

    if _configured and _log_path is not None:
        return _log_path

    level_name = os.getenv(level_env, "ERROR").upper().strip()
    level = getattr(logging, level_name, logging.ERROR)
    if not isinstance(level, int):
        level = logging.ERROR

    log_path = default_log_path(file_env)
    handler: logging.Handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        log_path = Path(tempfile.gettempdir()) / LOG_FILE_NAME
        try:
            handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError:
            # Nowhere writable; the launcher still has to run.
            handler = logging.NullHandler()

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    _log_path = log_path
    _configured = True
    return log_path


def get_log_path() -> Optional[Path]:
    """Expose the resolved log file path for modules that need it."""
    return _log_path
