# topmark:header:start
#
#   project      : ByteDent
#   file         : exit_codes.py
#   file_relpath : src/bytedent/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ByteDent CLI.

ByteDent aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. Two values diverge on purpose: `WOULD_CHANGE=2`
signals that ``check`` found inputs that would be dedented, and `TRUNCATED=3` signals
that a fixed ``--capacity`` was too small for at least one result. Tests must assert
`result.exception is None` to tell `WOULD_CHANGE` apart from Click's own usage errors
(which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ByteDent CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: At least one input is not dedented yet (``check``).
        TRUNCATED: At least one result did not fit the requested ``--capacity``.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    TRUNCATED = 3

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
