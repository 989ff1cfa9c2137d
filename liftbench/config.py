# liftbench/config.py
"""
Launcher configuration, read once from the environment at startup.

The resulting ``LauncherConfig`` is immutable and passed explicitly into the
resolver; nothing downstream reads ``os.environ`` on its own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from liftbench import ROOT

__all__ = [
    "DEFAULT_BINARY",
    "DEFAULT_FORMULA",
    "LauncherConfig",
    "load_config",
]

DEFAULT_FORMULA = "tkersey/tap/lift-bench-stats"
DEFAULT_BINARY = "lift-bench-stats"
DEFAULT_BOOTSTRAP_PLATFORMS: Tuple[str, ...] = ("darwin",)

PACKAGE_DIR = ROOT

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LauncherConfig:
    formula: str = DEFAULT_FORMULA
    binary: str = DEFAULT_BINARY
    home: Path = PACKAGE_DIR
    bootstrap_platforms: Tuple[str, ...] = DEFAULT_BOOTSTRAP_PLATFORMS
    bootstrap_enabled: bool = True

    @property
    def zig_binary(self) -> Path:
        return self.home / "bench_stats_zig"

    @property
    def zig_source(self) -> Path:
        return self.home / "bench_stats.zig"

    @property
    def python_fallback(self) -> Path:
        return self.home / "bench_stats.py"


def _env_str(environ: Mapping[str, str], key: str, default: str) -> str:
    value = environ.get(key, "")
    return value if value != "" else default


def _env_flag(environ: Mapping[str, str], key: str, default: bool) -> bool:
    value = environ.get(key, "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def load_config(environ: Optional[Mapping[str, str]] = None) -> LauncherConfig:
    """Build a ``LauncherConfig`` from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    home_override = _env_str(env, "LIFT_BENCH_STATS_HOME", "")
    home = Path(home_override).expanduser() if home_override else PACKAGE_DIR
    return LauncherConfig(
        formula=_env_str(env, "LIFT_BENCH_STATS_FORMULA", DEFAULT_FORMULA),
        binary=_env_str(env, "LIFT_BENCH_STATS_BIN", DEFAULT_BINARY),
        home=home,
        bootstrap_enabled=_env_flag(env, "LIFT_BENCH_STATS_BOOTSTRAP", True),
    )
