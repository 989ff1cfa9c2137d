# liftbench/__main__.py
"""
`python -m liftbench …` behaves exactly like the ``bench-stats`` launcher.
"""

from __future__ import annotations

from liftbench.launcher import run

if __name__ == "__main__":  # pragma: no cover
    run()
