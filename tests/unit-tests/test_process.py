# tests/unit-tests/test_process.py
import os
import signal
import sys
import threading
import time
from pathlib import Path

import pytest

from liftbench.runtime import process

MISSING = "liftbench-definitely-not-installed-7f3a"


def test_probe_succeeds_regardless_of_exit_status():
    assert process.command_available(sys.executable, ("-c", "import sys; sys.exit(9)")) is True


def test_probe_fails_when_command_cannot_launch():
    assert process.command_available(MISSING) is False


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permission bits")
def test_probe_fails_for_non_executable_file(tmp_path: Path):
    script = tmp_path / "not-executable"
    script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    script.chmod(0o644)
    assert process.command_available(str(script)) is False


def test_run_quiet_captures_output(capfd: pytest.CaptureFixture[str]):
    result = process.run_quiet([sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr)"])
    assert result is not None
    assert result.returncode == 0
    assert result.stdout.strip() == b"out"
    assert result.stderr.strip() == b"err"
    captured = capfd.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_run_quiet_returns_none_on_launch_failure():
    assert process.run_quiet([MISSING, "--help"]) is None


def test_execute_propagates_child_exit_status():
    assert process.execute([sys.executable, "-c", "import sys; sys.exit(3)"]) == 3


def test_execute_inherits_standard_streams(capfd: pytest.CaptureFixture[str]):
    code = process.execute([sys.executable, "-c", "print('hello from child')"])
    assert code == 0
    assert capfd.readouterr().out.strip() == "hello from child"


def test_execute_reports_launch_failure(capsys: pytest.CaptureFixture[str]):
    assert process.execute([MISSING, "x"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    lines = captured.err.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Fatal: ")
    assert MISSING in lines[0]


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX signals")
def test_execute_maps_signal_termination_to_one():
    cmd = [sys.executable, "-c", "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"]
    assert process.execute(cmd) == 1


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX shell script")
def test_probe_ignores_undecodable_output(tmp_path: Path):
    script = tmp_path / "latin1-help"
    script.write_text("#!/bin/sh\nprintf 'caf\\351\\n'\nprintf '\\377\\376' >&2\nexit 0\n", encoding="utf-8")
    script.chmod(0o755)
    assert process.command_available(str(script), ("--help",)) is True


_TRAPPING_CHILD = (
    "import os, signal, sys, time\n"
    "signal.signal(signal.SIGINT, lambda *_: sys.exit(5))\n"
    "tmp = sys.argv[1] + '.tmp'\n"
    "with open(tmp, 'w') as fh:\n"
    "    fh.write(str(os.getpid()))\n"
    "os.replace(tmp, sys.argv[1])\n"
    "time.sleep(30)\n"
)


def _interrupt_group_when_ready(pid_file: Path) -> None:
    deadline = time.monotonic() + 10
    while not pid_file.exists() and time.monotonic() < deadline:
        time.sleep(0.01)
    time.sleep(0.1)
    # What the terminal does on Ctrl-C: SIGINT to launcher and child alike.
    os.kill(os.getpid(), signal.SIGINT)
    os.kill(int(pid_file.read_text()), signal.SIGINT)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX signals")
def test_ctrl_c_is_left_to_the_child(tmp_path: Path):
    pid_file = tmp_path / "child.pid"
    before = signal.getsignal(signal.SIGINT)
    sender = threading.Thread(target=_interrupt_group_when_ready, args=(pid_file,), daemon=True)
    sender.start()

    code = process.execute([sys.executable, "-c", _TRAPPING_CHILD, str(pid_file)])

    sender.join(timeout=5)
    assert code == 5
    assert signal.getsignal(signal.SIGINT) is before
