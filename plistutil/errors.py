"""Typed exceptions for the conversion pipeline.

WHY: The CLI must turn every failure into one diagnostic line and one exit
status. Giving each failure class its own exception type, with the exit
status attached, keeps that mapping in one place instead of scattering
sys.exit() calls through the pipeline.

HOW: PlistUtilError is the root of everything the CLI reports. Each
subclass sets ``exit_code``. Codec failures have their own branch
(PlistError) because they never reach the CLI: the dispatcher turns them
into stage results.

RULES:
- Pipeline errors (input, output, usage) derive from PlistUtilError
- Codec errors derive from PlistError and carry a numeric ``code``
- UsageError exits 0: a malformed invocation prints usage, not an error
"""

from __future__ import annotations


class PlistUtilError(Exception):
    """Base class for failures reported by the command-line tool."""

    exit_code = 1


class InputError(PlistUtilError):
    """The input payload could not be acquired."""


class InputTooSmallError(InputError):
    """The input is shorter than the smallest possible plist.

    Raised before any parse attempt.
    """

    def __init__(self, size: int) -> None:
        super().__init__("Input file is too small to contain valid plist data.")
        self.size = size


class InputReadError(InputError):
    """Opening or reading the input source failed."""


class OutputWriteError(PlistUtilError):
    """Opening or writing the output destination failed."""


class UsageError(PlistUtilError):
    """The command line could not be parsed.

    The tool answers a malformed invocation the same way it answers
    ``--help``: usage text and a zero exit status.
    """

    exit_code = 0


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class PlistError(Exception):
    """A codec failed for a reason not covered by a subclass."""

    code = -255


class PlistParseError(PlistError):
    """The payload is in a recognized format but is malformed."""

    code = -2


class PlistFormatError(PlistError):
    """The payload or value does not fit the requested format.

    On parse: the bytes are not this encoding at all. On serialize: the
    document holds a value the target encoding cannot express.
    """

    code = -3
