"""Data model for one conversion run.

WHY: The pipeline hands a handful of values between its stages: the raw
input bytes, the requested output format, the result of each stage, and
the rendered output. Giving each its own type keeps ownership obvious,
in particular the "no output produced" case, which is an explicit None
rather than a buffer someone forgot to fill.

HOW: Plain dataclasses and enums:
  FormatSelector    — AUTO or one of the three output encodings
  StageResult       — outcome of the parse or serialize stage
  RawPayload        — input bytes as acquired
  RenderedPayload   — serialized output bytes
  ConversionOutcome — the (input, output) stage result pair
  ConversionResult  — outcome plus optional rendered payload

RULES:
- Both stage results are always set; a skipped stage is NOT_ATTEMPTED
- RenderedPayload exists only when both stages succeeded
- StageResult.code is for diagnostics only; never branch on it
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class FormatSelector(enum.Enum):
    """Output format requested on the command line."""

    AUTO = "auto"
    BINARY = "bin"
    XML = "xml"
    JSON = "json"

    @classmethod
    def from_argument(cls, value: str) -> "FormatSelector":
        """Match a ``--format`` value by prefix.

        RULES:
        - "bin", "xml" and "json" match when the value starts with them,
          so "binary" selects BINARY
        - Anything else raises ValueError
        """
        for member in (cls.BINARY, cls.XML, cls.JSON):
            if value.startswith(member.value):
                return member
        raise ValueError("Unsupported output format")


class StageResult(enum.Enum):
    """Result of the parse or serialize stage."""

    NOT_ATTEMPTED = "not_attempted"
    SUCCESS = "success"
    PARSE_ERROR = "parse_error"
    FORMAT_MISMATCH = "format_mismatch"
    UNKNOWN_FAILURE = "unknown_failure"

    @property
    def code(self) -> int:
        """Numeric code used by the plist library family, for messages."""
        return _RESULT_CODES[self]


_RESULT_CODES = {
    StageResult.SUCCESS: 0,
    StageResult.PARSE_ERROR: -2,
    StageResult.FORMAT_MISMATCH: -3,
    StageResult.UNKNOWN_FAILURE: -255,
    StageResult.NOT_ATTEMPTED: -255,
}


@dataclass(frozen=True)
class RawPayload:
    """The complete input as read from a file or stdin.

    RULES:
    - source: the path it came from, or "-" for stdin
    - data is never shorter than MIN_PLIST_SIZE once acquired
    """

    data: bytes
    source: str = "-"

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class RenderedPayload:
    """Serialized output, written byte-for-byte by the output writer."""

    data: bytes
    output_format: FormatSelector

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class ConversionOutcome:
    """Independent results of the parse and serialize stages."""

    input_result: StageResult = StageResult.NOT_ATTEMPTED
    output_result: StageResult = StageResult.NOT_ATTEMPTED

    @property
    def succeeded(self) -> bool:
        return (
            self.input_result is StageResult.SUCCESS
            and self.output_result is StageResult.SUCCESS
        )


@dataclass
class ConversionResult:
    """What the dispatcher hands back to the CLI."""

    outcome: ConversionOutcome = field(default_factory=ConversionOutcome)
    rendered: RenderedPayload | None = None
