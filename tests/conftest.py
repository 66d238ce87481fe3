"""Shared test fixtures for the plistutil test suite.

WHY: Most test modules need the same sample document in each of its
encodings. Building them here from one dict means every test agrees on
what "the sample" is.

HOW: The sample dict is encoded with plistlib (binary and XML) and json
by the fixtures, independent of the code under test. A second document
carries data and date values, which JSON cannot express.

RULES:
- SAMPLE_DOCUMENT uses only JSON-compatible types
- DATA_DOCUMENT holds bytes and a datetime
- Stdin fixtures are BytesIO-backed TextIOWrappers so .buffer works
"""

import io
import json
import plistlib
import sys
from datetime import datetime

import pytest

SAMPLE_DOCUMENT = {
    "Name": "plistutil",
    "Count": 5,
    "Ratio": 0.5,
    "Enabled": True,
    "Items": ["alpha", "beta"],
    "Nested": {"Key": "Value"},
}

DATA_DOCUMENT = {
    "Blob": b"\x00\x01\x02\x03",
    "When": datetime(2020, 1, 2, 3, 4, 5),
}

MINIMAL_XML = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b'<plist version="1.0"><dict><key>count</key><integer>5</integer></dict></plist>\n'
)


@pytest.fixture
def sample_document():
    return dict(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_binary():
    return plistlib.dumps(SAMPLE_DOCUMENT, fmt=plistlib.FMT_BINARY)


@pytest.fixture
def sample_xml():
    return plistlib.dumps(SAMPLE_DOCUMENT, fmt=plistlib.FMT_XML)


@pytest.fixture
def sample_json():
    return json.dumps(SAMPLE_DOCUMENT).encode("utf-8")


@pytest.fixture
def data_document_binary():
    return plistlib.dumps(DATA_DOCUMENT, fmt=plistlib.FMT_BINARY)


@pytest.fixture
def minimal_xml():
    return MINIMAL_XML


@pytest.fixture
def fake_stdin(monkeypatch):
    """Replace sys.stdin with a stream over the given bytes."""

    def _install(data: bytes):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _install
