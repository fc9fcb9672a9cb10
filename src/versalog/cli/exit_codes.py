# topmark:header:start
#
#   project      : Versalog
#   file         : exit_codes.py
#   file_relpath : src/versalog/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Versalog CLI.

Values follow the BSD `sysexits` convention where one applies.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Versalog CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure, e.g. a declined selection.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: The log file could not be opened. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid settings file or environment override. Mirrors
            BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
