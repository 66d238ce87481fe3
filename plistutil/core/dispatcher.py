"""Conversion dispatcher: parse with one codec, serialize with another.

WHY: The choice of parser and serializer depends on the requested format
and, in auto mode, on what the input looks like. This module makes that
choice once and records what happened at each stage, so the CLI can map
the result to an exit status without re-deriving anything.

HOW: _select_codecs() picks a (parser, serializer) pair. convert() runs
the parser; only if it succeeds does it run the serializer. Codec
exceptions are caught here and become StageResult values. The parsed
document is released in a ``with`` block before convert() returns.

RULES:
- AUTO: binary input converts to XML, anything else parses as XML and
  converts to binary
- Explicit formats parse with from_memory (binary, XML or JSON input)
- Exactly one serializer runs when parsing succeeds, none when it fails
- PlistFormatError → FORMAT_MISMATCH, PlistParseError → PARSE_ERROR,
  any other exception → UNKNOWN_FAILURE
- A RenderedPayload is returned only when both stages succeed
"""

from __future__ import annotations

import logging
from typing import Callable, Tuple

from plistutil import formats
from plistutil.core.ir import (
    ConversionResult,
    FormatSelector,
    RawPayload,
    RenderedPayload,
    StageResult,
)
from plistutil.errors import PlistError, PlistFormatError, PlistParseError
from plistutil.formats import FORMATS
from plistutil.formats.base import PlistDocument

logger = logging.getLogger(__name__)

Parser = Callable[[bytes], PlistDocument]


def _stage_result(exc: PlistError) -> StageResult:
    if isinstance(exc, PlistFormatError):
        return StageResult.FORMAT_MISMATCH
    if isinstance(exc, PlistParseError):
        return StageResult.PARSE_ERROR
    return StageResult.UNKNOWN_FAILURE


def _select_codecs(payload: RawPayload, selector: FormatSelector) -> Tuple[Parser, FormatSelector]:
    """Choose the parser and the output format for this run."""
    if selector is FormatSelector.AUTO:
        if formats.is_binary(payload.data):
            logger.debug("Auto mode: binary input, converting to XML")
            return FORMATS[FormatSelector.BINARY]().parse, FormatSelector.XML
        logger.debug("Auto mode: non-binary input, parsing as XML and converting to binary")
        return FORMATS[FormatSelector.XML]().parse, FormatSelector.BINARY
    return formats.from_memory, selector


def convert(payload: RawPayload, selector: FormatSelector = FormatSelector.AUTO) -> ConversionResult:
    """Convert one payload to the selected output format.

    Args:
        payload: The complete input document.
        selector: Requested output format, or AUTO.

    Returns:
        A ConversionResult whose outcome is always fully set and whose
        rendered payload is present only on full success.
    """
    result = ConversionResult()
    parse, output_format = _select_codecs(payload, selector)

    try:
        document = parse(payload.data)
    except PlistError as exc:
        result.outcome.input_result = _stage_result(exc)
        logger.debug("Parse failed (%s): %s", result.outcome.input_result.name, exc)
        return result
    except Exception:
        result.outcome.input_result = StageResult.UNKNOWN_FAILURE
        logger.debug("Parser raised an unexpected error", exc_info=True)
        return result

    result.outcome.input_result = StageResult.SUCCESS
    logger.debug("Parsed %s input from %s", document.source_format.value, payload.source)

    with document:
        serializer = FORMATS[output_format]()
        try:
            data = serializer.serialize(document)
        except PlistError as exc:
            result.outcome.output_result = _stage_result(exc)
            logger.debug("%s serialization failed (%s): %s",
                          serializer.name, result.outcome.output_result.name, exc)
            return result
        except Exception:
            result.outcome.output_result = StageResult.UNKNOWN_FAILURE
            logger.debug("%s serializer raised an unexpected error", serializer.name, exc_info=True)
            return result

    result.outcome.output_result = StageResult.SUCCESS
    result.rendered = RenderedPayload(data=data, output_format=output_format)
    logger.debug("Rendered %d bytes of %s", result.rendered.size, serializer.name)
    return result
