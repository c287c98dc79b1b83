"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values.
Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by strman commands.

    * 0–1: generic success / failure
    * 2: ENOENT, a template file could not be found
    * 22: EINVAL, an argument was rejected by a string function
    * 65: EX_DATAERR, a template is malformed or left unbound in strict mode
    * 78: EX_CONFIG, the ``[strman]`` section failed validation
    * 128+N: signal N (informational only)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.DATA_ERROR)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
