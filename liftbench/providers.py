# liftbench/providers.py
"""
Provider descriptors and the ordered fallback chain.

The chain mirrors how the tool is distributed, best option first:

1. ``package``    - the Homebrew package binary already on PATH.
2. ``brew``       - the same binary right after a best-effort ``brew install``.
3. ``zig-binary`` - a locally compiled ``bench_stats_zig`` next to the launcher.
4. ``zig-source`` - ``zig run bench_stats.zig -- ...`` when zig is on PATH.
5. ``python``     - ``uv run python bench_stats.py ...`` when the script exists.

``resolve_provider`` returns the first available entry, or ``None``.
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

from liftbench.config import LauncherConfig
from liftbench.runtime import bootstrap, process

LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())

__all__ = ["CHAIN", "Provider", "chain_report", "resolve_provider"]

CHAIN: Tuple[str, ...] = ("package", "brew", "zig-binary", "zig-source", "python")


class Provider(NamedTuple):
    cmd: str
    args: Tuple[str, ...]
    source: str

    def command(self, argv: Sequence[str]) -> List[str]:
        """Full command line: the fixed prefix followed by *argv* untouched."""
        return [self.cmd, *self.args, *argv]


def package_provider(config: LauncherConfig, source: str = "package") -> Provider:
    return Provider(config.binary, (), source)


def zig_binary_provider(config: LauncherConfig) -> Provider:
    return Provider(str(config.zig_binary), (), "zig-binary")


def zig_source_provider(config: LauncherConfig) -> Provider:
    return Provider("zig", ("run", str(config.zig_source), "--"), "zig-source")


def python_provider(config: LauncherConfig) -> Provider:
    return Provider("uv", ("run", "python", str(config.python_fallback)), "python")


def resolve_provider(
    config: LauncherConfig,
    *,
    allow_install: bool = True,
    platform: Optional[str] = None,
) -> Optional[Provider]:
    """
    Walk the chain and return the first available provider.

    Only probes run (and, with *allow_install*, at most one brew install);
    the chosen provider itself is not executed here.
    """
    provider: Optional[Provider] = None
    if process.command_available(config.binary, ("--help",)):
        provider = package_provider(config)
    elif allow_install and bootstrap.maybe_install_from_brew(config, platform):
        provider = package_provider(config, "brew")
    elif config.zig_binary.exists():
        provider = zig_binary_provider(config)
    elif process.command_available("zig", ("version",)):
        provider = zig_source_provider(config)
    elif config.python_fallback.exists():
        provider = python_provider(config)

    LOG.info("resolve source=%s", provider.source if provider else "missing")
    return provider


def chain_report(config: LauncherConfig, platform: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    Availability of every chain step as ``(source, status)`` pairs.

    *status* is ``ok``, ``missing`` or ``skipped``. Nothing is installed.
    """
    if not bootstrap.bootstrap_allowed(config, platform):
        brew_status = "skipped"
    elif process.command_available("brew", ("--version",)):
        brew_status = "ok"
    else:
        brew_status = "missing"

    def _status(available: bool) -> str:
        return "ok" if available else "missing"

    return [
        ("package", _status(process.command_available(config.binary, ("--help",)))),
        ("brew", brew_status),
        ("zig-binary", _status(config.zig_binary.exists())),
        ("zig-source", _status(process.command_available("zig", ("version",)))),
        ("python", _status(config.python_fallback.exists())),
    ]
