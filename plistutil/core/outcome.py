"""Outcome translator: stage results to exit status and diagnostic.

WHY: The exit status is a public contract (0 ok, 1 failure, 2 format
incompatibility) that scripts depend on. It must follow from the two
stage results alone, never from how output was written.

HOW: translate() walks a small decision table over
(input_result, output_result) and returns the exit code plus the message
to print, or None when there is nothing to report.
"""

from __future__ import annotations

from typing import Optional, Tuple

from plistutil.core.ir import ConversionOutcome, StageResult

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_FORMAT_INCOMPATIBLE = 2


def translate(outcome: ConversionOutcome) -> Tuple[int, Optional[str]]:
    """Map a conversion outcome to ``(exit_code, message)``."""
    if outcome.input_result is not StageResult.SUCCESS:
        return EXIT_FAILURE, "Could not parse plist data ({})".format(
            outcome.input_result.code
        )
    if outcome.output_result is StageResult.SUCCESS:
        return EXIT_SUCCESS, None
    if outcome.output_result is StageResult.FORMAT_MISMATCH:
        return EXIT_FORMAT_INCOMPATIBLE, "Input plist data is not compatible with output format."
    return EXIT_FAILURE, "Failed to convert plist data ({})".format(outcome.output_result.code)
