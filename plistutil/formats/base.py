"""Abstract codec base and the parsed document handle.

WHY: Every encoding (binary, XML, JSON) parses bytes into the same value
tree and serializes that tree back to bytes. A shared base class lets the
dispatcher work with any codec generically, and a document handle gives
the parsed tree an explicit lifetime.

HOW: BaseCodec is an ABC with a ``name`` property plus ``parse()`` and
``serialize()``. PlistDocument wraps the value tree together with the
format it was parsed from; ``release()`` (or leaving its ``with`` block)
drops the tree.

RULES:
- parse() raises PlistFormatError when the bytes are not this encoding
  and PlistParseError when they are this encoding but malformed
- serialize() raises PlistFormatError when the tree holds a value the
  encoding cannot express, PlistError for anything else
- A released document refuses further access to its root

To add a new encoding:
1. Create a new module in formats/
2. Subclass BaseCodec
3. Implement name, parse() and serialize()
4. Register it in FORMATS in formats/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from plistutil.core.ir import FormatSelector
from plistutil.errors import PlistError


class PlistDocument:
    """Opaque handle to a parsed property list.

    The root is the value tree as produced by plistlib or json: dict,
    list, str, int, float, bool, bytes, datetime, plistlib.UID, and None
    for JSON null.
    """

    def __init__(self, root: Any, source_format: FormatSelector) -> None:
        self._root = root
        self._released = False
        self.source_format = source_format

    @property
    def root(self) -> Any:
        if self._released:
            raise PlistError("Document has already been released")
        return self._root

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Drop the value tree. Safe to call more than once."""
        self._root = None
        self._released = True

    def __enter__(self) -> "PlistDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else type(self._root).__name__
        return "PlistDocument({}, {})".format(self.source_format.value, state)


class BaseCodec(ABC):
    """Abstract base for all plist encodings."""

    selector: FormatSelector

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable encoding name, e.g. 'Binary'."""

    @abstractmethod
    def parse(self, data: bytes) -> PlistDocument:
        """Parse a complete payload into a document handle.

        Args:
            data: The full encoded document.

        Returns:
            A PlistDocument owning the parsed value tree.
        """

    @abstractmethod
    def serialize(self, document: PlistDocument) -> bytes:
        """Encode a document's value tree.

        Args:
            document: A document that has not been released.

        Returns:
            The encoded bytes, exactly as they should be written.
        """
