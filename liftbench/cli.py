# liftbench/cli.py
"""
``bench-stats-doctor``: inspect how the launcher would resolve bench_stats.

Both commands only probe; they never install anything and never run the
resolved provider.
"""

from __future__ import annotations

import shlex
import sys

import typer

from liftbench import __version__
from liftbench.config import load_config
from liftbench.launcher import FATAL_NO_PROVIDER
from liftbench.logging_config import default_log_path, get_log_path, setup_logging
from liftbench.providers import chain_report, resolve_provider

_IS_WINDOWS = sys.platform.startswith("win")
_HELP_NAMES = ["-h", "--help"] + (["/?"] if _IS_WINDOWS else [])

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": _HELP_NAMES},
)


@app.callback()
def _root() -> None:
    """Diagnostics for the bench-stats launcher."""
    setup_logging()


@app.command()
def which() -> None:
    """Print the provider bench-stats would run, without installing anything."""
    provider = resolve_provider(load_config(), allow_install=False)
    if provider is None:
        typer.echo(FATAL_NO_PROVIDER, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{provider.source}: {shlex.join(provider.command([]))}")


@app.command()
def doctor() -> None:
    """Report every fallback step and the effective configuration."""
    cfg = load_config()
    report = chain_report(cfg)
    width = max(len(source) for source, _ in report)
    for source, status in report:
        typer.echo(f"{source.ljust(width)}  {status}")
    typer.echo("")
    typer.echo(f"version    {__version__}")
    typer.echo(f"formula    {cfg.formula}")
    typer.echo(f"binary     {cfg.binary}")
    typer.echo(f"home       {cfg.home}")
    typer.echo(f"bootstrap  {'on' if cfg.bootstrap_enabled else 'off'} ({', '.join(cfg.bootstrap_platforms)})")
    typer.echo(f"log        {get_log_path() or default_log_path()}")
    if not any(status == "ok" for _, status in report):
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
