"""XML property list codec.

WHY: XML is the human-readable plist encoding and the default target when
auto mode converts a binary plist.

HOW: Delegates to plistlib with FMT_XML. Malformed markup surfaces as
expat errors, unknown elements and bad values as ValueError. plistlib
does not validate structure, so a bad <date> or a <key> outside a <dict>
escapes as AttributeError or IndexError; those are parse errors too.

RULES:
- A document with an empty <plist> element is a parse error
- Strings with control characters cannot be written as XML text, so they
  are a format mismatch, like None and out-of-range integers
"""

from __future__ import annotations

import plistlib
from xml.parsers.expat import ExpatError

from plistutil.config import SORT_KEYS
from plistutil.core.ir import FormatSelector
from plistutil.errors import PlistError, PlistFormatError, PlistParseError
from plistutil.formats.base import BaseCodec, PlistDocument


class XMLCodec(BaseCodec):
    """Codec for the XML encoding."""

    selector = FormatSelector.XML

    def __init__(self, sort_keys: bool = SORT_KEYS) -> None:
        self.sort_keys = sort_keys

    @property
    def name(self) -> str:
        return "XML"

    def parse(self, data: bytes) -> PlistDocument:
        try:
            root = plistlib.loads(data, fmt=plistlib.FMT_XML)
        except (ExpatError, ValueError, TypeError, AttributeError, IndexError, KeyError) as exc:
            raise PlistParseError("Malformed XML plist: {}".format(exc)) from exc
        except RecursionError as exc:
            raise PlistError("XML plist nests too deeply") from exc
        if root is None:
            raise PlistParseError("XML plist has no root value")
        return PlistDocument(root, self.selector)

    def serialize(self, document: PlistDocument) -> bytes:
        try:
            return plistlib.dumps(
                document.root, fmt=plistlib.FMT_XML, sort_keys=self.sort_keys,
            )
        except (TypeError, ValueError, OverflowError) as exc:
            raise PlistFormatError(
                "Value cannot be stored in an XML plist: {}".format(exc)
            ) from exc
        except RecursionError as exc:
            raise PlistError("Document nests too deeply") from exc
