# tests/unit-tests/conftest.py
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set

import pytest

import liftbench.runtime.process as proc
from liftbench.config import LauncherConfig


@pytest.fixture(scope="session", autouse=True)
def _log_to_tmp(tmp_path_factory: pytest.TempPathFactory) -> Iterator[None]:
    """Keep the launcher's file log out of the user's data directory."""
    log_file = tmp_path_factory.mktemp("logs") / "launcher.log"
    mp = pytest.MonkeyPatch()
    mp.setenv("LIFT_BENCH_STATS_LOG_FILE", str(log_file))
    mp.setenv("LIFT_BENCH_STATS_LOG_LEVEL", "DEBUG")
    yield
    mp.undo()


class FakeHost:
    """
    Stand-in for the process layer.

    Commands listed in ``available`` launch; ``brew install`` adds everything
    in ``installable`` to ``available``. Every call is recorded.
    """

    def __init__(self) -> None:
        self.available: Set[str] = set()
        self.installable: Set[str] = set()
        self.probes: List[List[str]] = []
        self.installs: List[List[str]] = []
        self.executed: List[List[str]] = []
        self.exit_code = 0

    def command_available(self, cmd: str, args: Sequence[str] = ("--help",)) -> bool:
        self.probes.append([cmd, *args])
        return cmd in self.available

    def run_quiet(self, cmd: Sequence[str]) -> Optional[subprocess.CompletedProcess[bytes]]:
        command = list(cmd)
        if command[0] not in self.available:
            return None
        if command[:2] == ["brew", "install"]:
            self.installs.append(command)
            self.available |= self.installable
            return subprocess.CompletedProcess(command, 1, b"", b"Error: tap unreachable")
        return subprocess.CompletedProcess(command, 0, b"", b"")

    def execute(self, cmd: Sequence[str]) -> int:
        self.executed.append(list(cmd))
        return self.exit_code


@pytest.fixture()
def host(monkeypatch: pytest.MonkeyPatch) -> FakeHost:
    fake = FakeHost()
    monkeypatch.setattr(proc, "command_available", fake.command_available)
    monkeypatch.setattr(proc, "run_quiet", fake.run_quiet)
    monkeypatch.setattr(proc, "execute", fake.execute)
    return fake


@pytest.fixture()
def config(tmp_path: Path) -> LauncherConfig:
    """Config whose sibling artefacts live in an empty temp directory."""
    return LauncherConfig(home=tmp_path)
