# liftbench/runtime/bootstrap.py
"""
Best-effort Homebrew bootstrap for the preferred bench_stats package.

The install is a routine branch condition rather than a fault: whatever brew
prints or exits with is discarded, and the caller only learns whether the
preferred executable launches afterwards.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from liftbench.config import LauncherConfig
from liftbench.runtime import process

LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())

__all__ = ["bootstrap_allowed", "bootstrap_eligible", "maybe_install_from_brew"]


def bootstrap_allowed(config: LauncherConfig, platform: Optional[str] = None) -> bool:
    """Config and platform half of the eligibility check; runs nothing."""
    if not config.bootstrap_enabled:
        return False
    current = sys.platform if platform is None else platform
    return current in config.bootstrap_platforms


def bootstrap_eligible(config: LauncherConfig, platform: Optional[str] = None) -> bool:
    """Whether this host may attempt the brew install at all."""
    if not bootstrap_allowed(config, platform):
        return False
    return process.command_available("brew", ("--version",))


def maybe_install_from_brew(config: LauncherConfig, platform: Optional[str] = None) -> bool:
    """
    Install ``config.formula`` through brew when eligible.

    Returns True only when ``config.binary`` launches after the install.
    """
    if not bootstrap_eligible(config, platform):
        return False
    result = process.run_quiet(["brew", "install", config.formula])
    LOG.info(
        "install formula=%s status=%s",
        config.formula,
        "unlaunched" if result is None else result.returncode,
    )
    return process.command_available(config.binary, ("--help",))
