# liftbench/runtime/process.py
"""
Subprocess helpers for probing and delegating to providers.

Two modes exist. Probes capture (and discard) everything the child writes and
only ask whether the launch itself worked. The final execution inherits the
parent's stdin/stdout/stderr so the delegated tool stays interactive.
"""

from __future__ import annotations

import logging
import signal
import subprocess
import threading
from typing import Any, Optional, Sequence

import typer

LOG = logging.getLogger(__name__)
LOG.addHandler(logging.NullHandler())

__all__ = ["command_available", "execute", "run_quiet"]


def run_quiet(cmd: Sequence[str]) -> Optional[subprocess.CompletedProcess[bytes]]:
    """
    Run *cmd* with stdin closed and output captured as raw bytes.

    Returns ``None`` when the process could not be launched at all. A non-zero
    exit status is not a failure here; callers get the completed process.
    Output is never decoded, so whatever the child prints cannot matter.
    """
    try:
        return subprocess.run(
            list(cmd),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except (OSError, ValueError) as exc:
        LOG.debug("probe.launch_failed cmd=%s error=%s", cmd[0] if cmd else "", exc)
        return None


def command_available(cmd: str, args: Sequence[str] = ("--help",)) -> bool:
    """True when ``cmd *args`` launches, whatever it exits with."""
    available = run_quiet([cmd, *args]) is not None
    LOG.debug("probe cmd=%s available=%s", cmd, available)
    return available


def _wait_for_child(child: subprocess.Popen[Any]) -> int:
    """
    Wait for *child* with SIGINT ignored in the launcher.

    Ctrl-C reaches the whole foreground process group; the child decides how
    to react and its exit status is what the launcher reports.
    """
    previous = None
    if threading.current_thread() is threading.main_thread():
        previous = signal.getsignal(signal.SIGINT)
        if previous is not None:
            signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        return child.wait()
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


def execute(cmd: Sequence[str]) -> int:
    """
    Run *cmd* inheriting the standard streams and return its exit status.

    A launch failure prints ``Fatal: <message>`` to stderr and returns 1, as
    does a child terminated by a signal.
    """
    LOG.info("exec cmd=%s argc=%d", cmd[0], len(cmd) - 1)
    try:
        child = subprocess.Popen(list(cmd))
    except OSError as exc:
        message = exc.strerror or str(exc)
        if exc.filename is not None:
            message = f"{message}: {exc.filename}"
        LOG.error("exec.launch_failed cmd=%s error=%s", cmd[0], message)
        typer.echo(f"Fatal: {message}", err=True)
        return 1
    returncode = _wait_for_child(child)
    if returncode < 0:
        LOG.error("exec.signalled cmd=%s signal=%d", cmd[0], -returncode)
        return 1
    return returncode
