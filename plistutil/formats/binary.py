"""Binary (``bplist00``) property list codec.

WHY: The binary encoding is what most Apple tooling writes to disk and
sends over the wire. It is the one format the auto mode can recognize
from its header alone.

HOW: Delegates to plistlib with FMT_BINARY. plistlib reports every kind
of malformed input as a ValueError subclass (InvalidFileException), except
unhashable keys (TypeError). Unserializable values raise TypeError or
OverflowError.

RULES:
- A payload without the 8 byte magic is a format mismatch, not a parse error
- JSON null is stored as the binary null object
- Values plistlib cannot store (integers outside 64 bits, non-string
  keys, unknown types) are a format mismatch
"""

from __future__ import annotations

import plistlib

from plistutil.config import BINARY_MAGIC, MIN_PLIST_SIZE, SORT_KEYS
from plistutil.core.ir import FormatSelector
from plistutil.errors import PlistError, PlistFormatError, PlistParseError
from plistutil.formats.base import BaseCodec, PlistDocument


def is_binary(data: bytes) -> bool:
    """Return True if ``data`` starts with the binary plist header."""
    return len(data) >= MIN_PLIST_SIZE and data[:len(BINARY_MAGIC)] == BINARY_MAGIC


class BinaryCodec(BaseCodec):
    """Codec for the ``bplist00`` encoding."""

    selector = FormatSelector.BINARY

    def __init__(self, sort_keys: bool = SORT_KEYS) -> None:
        self.sort_keys = sort_keys

    @property
    def name(self) -> str:
        return "Binary"

    def parse(self, data: bytes) -> PlistDocument:
        if not is_binary(data):
            raise PlistFormatError("Payload does not start with the binary plist header")
        try:
            root = plistlib.loads(data, fmt=plistlib.FMT_BINARY)
        except (ValueError, TypeError, IndexError, KeyError) as exc:
            raise PlistParseError("Malformed binary plist: {}".format(exc)) from exc
        except RecursionError as exc:
            raise PlistError("Binary plist nests too deeply") from exc
        return PlistDocument(root, self.selector)

    def serialize(self, document: PlistDocument) -> bytes:
        try:
            return plistlib.dumps(
                document.root, fmt=plistlib.FMT_BINARY, sort_keys=self.sort_keys,
            )
        except (TypeError, OverflowError) as exc:
            raise PlistFormatError(
                "Value cannot be stored in a binary plist: {}".format(exc)
            ) from exc
        except RecursionError as exc:
            raise PlistError("Document nests too deeply") from exc
