"""Logging double for in-memory runs."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from greek_numerals import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a silent runtime so ``runtime.bind`` works; ``config`` is ignored.

    Records stay in the ring buffer: no queue thread, nothing below CRITICAL
    on the console, no ``.env`` lookup. A runtime that is already running is
    kept.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
            queue_enabled=False,
        )
    )


__all__ = ["init_logging_in_memory"]
