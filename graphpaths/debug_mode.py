"""
Process-wide switch for self-checking runs.

With the switch on, BellmanFord, Dijkstra and Johnson re-verify what they
computed (every predecessor edge is tight, every re-weighted edge is
non-negative) and raise AlgorithmError on a mismatch. Each constructor
also takes ``verify=``; passing True or False there overrides the switch
for that one call.

The initial value comes from the GRAPHPATHS_DEBUG environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

ENV_VAR = "GRAPHPATHS_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def flag_from_env(environ: Mapping[str, str] = os.environ) -> bool:
    """Return True if ``environ`` turns verification on."""
    return environ.get(ENV_VAR, "").strip().lower() in _TRUTHY


_enabled = flag_from_env()


def is_debug_enabled() -> bool:
    return _enabled


def set_debug_enabled(enabled: bool) -> None:
    global _enabled
    _enabled = bool(enabled)


def resolve_verify(verify: Optional[bool]) -> bool:
    """Return the per-call ``verify`` flag, falling back to the switch."""
    return _enabled if verify is None else bool(verify)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set the switch for the duration of a ``with`` block.

    Example:
        >>> with debug_context():
        ...     Dijkstra(g, 0)  # tree is re-verified
    """
    previous = _enabled
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
