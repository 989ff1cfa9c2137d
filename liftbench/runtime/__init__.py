# liftbench/runtime/__init__.py
"""
Process-level helpers used by the launcher.

Modules in this package avoid side effects at import time so the launcher can
probe and delegate before anything else is configured.
"""

from __future__ import annotations

__all__: list[str] = []
