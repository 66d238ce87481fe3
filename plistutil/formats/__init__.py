"""Plist codec registry — binary, XML and JSON behind one contract.

WHY: The dispatcher should not care which encoding it is talking to. A
central registry maps each output format selector to its codec class, and
a handful of module-level functions give callers the classic plist
library surface: sniff, parse-from-format, parse-from-memory, serialize.

HOW: FORMATS maps FormatSelector members to codec *classes*. Callers
instantiate as needed: ``codec = FORMATS[FormatSelector.XML]()``.
from_memory() sniffs the leading bytes to choose a parser.

RULES:
- Keys are FormatSelector members; AUTO is never a key
- from_memory() accepts binary, XML and JSON payloads
- Leading whitespace and a UTF-8 byte order mark are skipped when sniffing
- A payload none of the codecs recognizes is a PlistFormatError
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, Optional

from plistutil.core.ir import FormatSelector
from plistutil.errors import PlistFormatError
from plistutil.formats.base import PlistDocument
from plistutil.formats.binary import BinaryCodec, is_binary
from plistutil.formats.json_codec import JSONCodec
from plistutil.formats.xml import XMLCodec

if TYPE_CHECKING:
    from plistutil.formats.base import BaseCodec

FORMATS: dict[FormatSelector, type[BaseCodec]] = {
    FormatSelector.BINARY: BinaryCodec,
    FormatSelector.XML: XMLCodec,
    FormatSelector.JSON: JSONCodec,
}

_WHITESPACE = b" \t\r\n"
_UTF16_BOMS = (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)

__all__ = [
    "FORMATS",
    "PlistDocument",
    "detect_format",
    "from_bin",
    "from_json",
    "from_memory",
    "from_xml",
    "is_binary",
    "to_bin",
    "to_json",
    "to_xml",
]


def detect_format(data: bytes) -> Optional[FormatSelector]:
    """Guess the encoding of a payload from its first bytes.

    Returns:
        BINARY, XML or JSON, or None when nothing matches.
    """
    if is_binary(data):
        return FormatSelector.BINARY
    if data.startswith(_UTF16_BOMS):
        return FormatSelector.XML
    head = data.lstrip(_WHITESPACE)
    if head.startswith(codecs.BOM_UTF8):
        head = head[len(codecs.BOM_UTF8):].lstrip(_WHITESPACE)
    if head[:1] == b"<":
        return FormatSelector.XML
    if head[:1] in (b"{", b"["):
        return FormatSelector.JSON
    return None


def from_bin(data: bytes) -> PlistDocument:
    return BinaryCodec().parse(data)


def from_xml(data: bytes) -> PlistDocument:
    return XMLCodec().parse(data)


def from_json(data: bytes) -> PlistDocument:
    return JSONCodec().parse(data)


def from_memory(data: bytes) -> PlistDocument:
    """Parse a payload in any supported encoding.

    Raises:
        PlistFormatError: the payload is not binary, XML or JSON.
        PlistParseError: the payload is malformed for its encoding.
    """
    selector = detect_format(data)
    if selector is None:
        raise PlistFormatError("Payload is not a binary, XML or JSON plist")
    return FORMATS[selector]().parse(data)


def to_bin(document: PlistDocument) -> bytes:
    return BinaryCodec().serialize(document)


def to_xml(document: PlistDocument) -> bytes:
    return XMLCodec().serialize(document)


def to_json(document: PlistDocument) -> bytes:
    return JSONCodec().serialize(document)
