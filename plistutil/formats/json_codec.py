"""JSON property list codec.

WHY: JSON is the lingua franca for everything that is not Apple tooling.
It carries the plist container and scalar types but has no data, date or
UID values, so converting to JSON can fail where binary and XML would not.

HOW: Uses the json module. Output is compact by default
(``{"key":5}``); pretty output is indented. Bytes, datetimes and UIDs
make json.dumps raise TypeError, which is reported as a format mismatch.

RULES:
- Non-ASCII text is written as UTF-8, not \\u escapes
- NaN and Infinity are rejected in both directions
- JSON null parses to None, which XML cannot express
- Dictionary order is preserved unless sort_keys is set
"""

from __future__ import annotations

import json

from plistutil.config import JSON_PRETTY, SORT_KEYS
from plistutil.core.ir import FormatSelector
from plistutil.errors import PlistError, PlistFormatError, PlistParseError
from plistutil.formats.base import BaseCodec, PlistDocument


def _reject_constant(name: str) -> None:
    raise ValueError("{} is not a valid JSON number".format(name))


class JSONCodec(BaseCodec):
    """Codec for the JSON encoding."""

    selector = FormatSelector.JSON

    def __init__(self, pretty: bool = JSON_PRETTY, sort_keys: bool = SORT_KEYS) -> None:
        self.pretty = pretty
        self.sort_keys = sort_keys

    @property
    def name(self) -> str:
        return "JSON"

    def parse(self, data: bytes) -> PlistDocument:
        try:
            root = json.loads(data, parse_constant=_reject_constant)
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise PlistParseError("Malformed JSON plist: {}".format(exc)) from exc
        except RecursionError as exc:
            raise PlistError("JSON plist nests too deeply") from exc
        return PlistDocument(root, self.selector)

    def serialize(self, document: PlistDocument) -> bytes:
        if self.pretty:
            kwargs = {"indent": 2, "separators": (",", ": ")}
        else:
            kwargs = {"separators": (",", ":")}
        try:
            text = json.dumps(
                document.root,
                ensure_ascii=False,
                allow_nan=False,
                sort_keys=self.sort_keys,
                **kwargs,
            )
            if self.pretty:
                text += "\n"
            return text.encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise PlistFormatError(
                "Value cannot be represented in JSON: {}".format(exc)
            ) from exc
        except RecursionError as exc:
            raise PlistError("Document nests too deeply") from exc
