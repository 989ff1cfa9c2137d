# liftbench/__init__.py
"""
Lightweight package init for the bench_stats launcher.

Nothing here spawns processes or touches the environment; the launcher reads
its configuration only once ``main`` runs.

Exports:
    __version__ : best-effort package version (falls back to "0+unknown")
    ROOT        : directory holding the sibling bench_stats artefacts
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path

__all__ = ["__version__", "ROOT"]

ROOT = Path(__file__).resolve().parent


def _detect_version() -> str:
    for dist in ("lift-bench-stats-launcher", "lift_bench_stats_launcher"):
        try:
            return _pkg_version(dist)
        except PackageNotFoundError:
            continue
    return "0+unknown"


__version__ = _detect_version()
