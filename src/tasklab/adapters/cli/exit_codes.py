"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values instead
of a bare ``1``. Signal codes are informational only; ``lib_cli_exit_tools``
translates signals itself.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    * 0–1: generic success / failure
    * 22: EINVAL, rejected user input (bad selector, unknown section)
    * 78: EX_CONFIG (sysexits.h), invalid configuration values
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
