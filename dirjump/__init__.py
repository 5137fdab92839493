"""Public package surface for dirjump.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``dirjump``.
"""

from __future__ import annotations

from loguru import logger

# Silent when used as a library; the CLI re-enables it after configuring sinks.
logger.disable("dirjump")


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
