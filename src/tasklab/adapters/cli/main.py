"""Process-level wrapper around the root group.

Both ``tasklab`` and ``python -m tasklab`` run through :func:`main`, which
turns every outcome of a Click invocation into an integer exit code and
tidies the process-wide state (traceback flags, logging runtime) afterwards.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from tasklab import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from tasklab.composition import AppServices


def _report_unhandled(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return its exit code.

    The summary is cut short unless ``--traceback`` switched on the verbose
    form.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli has no way to hand Click an ``obj``.
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt get their own codes
        return _report_unhandled(exc)
    return 0


def _shutdown_logging() -> None:
    # Worker threads must leave the process-wide runtime alone.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back the way they were
            once the command finishes.
        services_factory: Builds the :class:`~tasklab.composition.AppServices`
            the commands use, usually ``build_production``.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from tasklab.composition import build_production
        >>> main(["card-id", "A♣"], services_factory=build_production)  # doctest: +SKIP
        0
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    saved = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
