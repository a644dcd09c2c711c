"""Run the command group and turn every outcome into a process exit code.

Shared by the console script and ``python -m greek_numerals``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from greek_numerals import __init__conf__

if TYPE_CHECKING:
    from greek_numerals.composition import AppServices


def _stop_logging() -> None:
    """Shut the logging runtime down, but only from the main thread."""
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``greek-numerals`` and return its exit code.

    Commands report failures by raising ``SystemExit`` with an
    :class:`~.exit_codes.ExitCode`; usage errors, signals and unexpected
    exceptions are translated by :func:`lib_cli_exit_tools.handle_cli_exception`.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put ``lib_cli_exit_tools.config`` back as it was
            once the run ends. Pass False to keep what ``--traceback`` set.
        services_factory: Usually
            :func:`greek_numerals.composition.build_production`.

    Raises:
        ValueError: If ``services_factory`` is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass greek_numerals.composition.build_production")

    from .root import cli

    args = list(sys.argv[1:] if argv is None else argv)
    guard: AbstractContextManager[object] = lib_cli_exit_tools.config_overrides() if restore_traceback else nullcontext()
    with guard:
        try:
            outcome = cli.main(
                args=args,
                prog_name=__init__conf__.shell_command,
                obj=services_factory,
                standalone_mode=False,
            )
        except BaseException as exc:  # SystemExit and KeyboardInterrupt carry exit codes too
            return lib_cli_exit_tools.handle_cli_exception(exc)
        finally:
            _stop_logging()
    return outcome if isinstance(outcome, int) else 0


__all__ = ["main"]
