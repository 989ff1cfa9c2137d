# liftbench/launcher.py
"""
``bench-stats`` entry point: resolve the best bench_stats provider and run it.

Arguments are forwarded untouched and the provider's exit status becomes the
launcher's own.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

import typer

from liftbench.config import LauncherConfig, load_config
from liftbench.logging_config import setup_logging
from liftbench.providers import resolve_provider
from liftbench.runtime import process

LOGGER = logging.getLogger(__name__)

FATAL_NO_PROVIDER = "Fatal: no Zig runtime and Python fallback missing."

__all__ = ["FATAL_NO_PROVIDER", "main", "resolve_and_run"]


def resolve_and_run(
    argv: Sequence[str],
    config: Optional[LauncherConfig] = None,
    *,
    platform: Optional[str] = None,
) -> int:
    """Run the first available provider with *argv* and return its exit status."""
    cfg = config if config is not None else load_config()
    provider = resolve_provider(cfg, platform=platform)
    if provider is None:
        LOGGER.error("resolve.exhausted home=%s", cfg.home)
        typer.echo(FATAL_NO_PROVIDER, err=True)
        return 1
    return process.execute(provider.command(argv))


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    return resolve_and_run(args, load_config())


def run() -> None:
    """Console-script wrapper."""
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
