"""Unit tests for input acquisition.

WHY: Losing or duplicating a byte while reading would corrupt every
conversion, and accepting an undersized payload would send garbage to the
codecs. These tests pin down both the byte sink and the size checks.

HOW: Streams are io.BytesIO objects; files live under tmp_path.

RULES:
- Undersized input must fail with InputTooSmallError for files and streams
- Growth is checked with a small increment so the test stays fast
"""

import io

import pytest

from plistutil.config import MIN_PLIST_SIZE
from plistutil.core.acquire import ByteSink, is_stdio, read_file, read_input, read_stream
from plistutil.errors import InputReadError, InputTooSmallError


class _FailingStream:
    """Stream that returns a few bytes, then fails."""

    def __init__(self):
        self._reads = 0

    def read(self, size=-1):
        self._reads += 1
        if self._reads > 3:
            raise OSError(5, "Input/output error")
        return b"x"


class _NoGrowBuffer(bytearray):
    """Buffer whose growth always fails."""

    def extend(self, data):
        raise MemoryError


class TestByteSink:
    """ByteSink collects bytes one at a time and grows by a fixed step."""

    def test_starts_at_increment_capacity(self):
        sink = ByteSink(increment=16)
        assert sink.capacity == 16
        assert len(sink) == 0

    def test_grows_by_increment_on_overflow(self):
        sink = ByteSink(increment=4)
        for byte in b"abcdefghi":
            sink.append(byte)
        assert len(sink) == 9
        assert sink.capacity == 12
        assert sink.getvalue() == b"abcdefghi"

    def test_exact_fill_does_not_grow(self):
        sink = ByteSink(increment=4)
        for byte in b"abcd":
            sink.append(byte)
        assert sink.capacity == 4
        assert sink.getvalue() == b"abcd"

    def test_explicit_initial_capacity(self):
        sink = ByteSink(increment=8, initial_capacity=2)
        for byte in b"abc":
            sink.append(byte)
        assert sink.capacity == 10
        assert sink.getvalue() == b"abc"

    def test_rejects_non_positive_increment(self):
        with pytest.raises(ValueError):
            ByteSink(increment=0)

    def test_allocation_failure_is_read_error(self):
        sink = ByteSink(increment=1)
        sink._buffer = _NoGrowBuffer(b"\x01")
        sink._length = 1

        with pytest.raises(InputReadError):
            sink.append(2)


class TestReadStream:
    """read_stream drains a stream of unknown length."""

    def test_reads_every_byte_past_first_growth(self):
        data = bytes(range(256)) * 20  # 5120 bytes, more than one 4096 step
        payload = read_stream(io.BytesIO(data))
        assert payload.data == data
        assert payload.size == len(data)
        assert payload.source == "-"

    def test_too_small_stream(self):
        with pytest.raises(InputTooSmallError) as excinfo:
            read_stream(io.BytesIO(b"ab"))
        assert excinfo.value.size == 2
        assert "too small" in str(excinfo.value)

    def test_empty_stream(self):
        with pytest.raises(InputTooSmallError):
            read_stream(io.BytesIO(b""))

    def test_exactly_minimum_size(self):
        payload = read_stream(io.BytesIO(b"x" * MIN_PLIST_SIZE))
        assert payload.size == MIN_PLIST_SIZE

    def test_read_error(self):
        with pytest.raises(InputReadError) as excinfo:
            read_stream(_FailingStream())
        assert "stdin" in str(excinfo.value)


class TestReadFile:
    """read_file sizes a regular file up front."""

    def test_reads_whole_file(self, tmp_path, sample_binary):
        path = tmp_path / "in.plist"
        path.write_bytes(sample_binary)

        payload = read_file(str(path))
        assert payload.data == sample_binary
        assert payload.source == str(path)

    def test_too_small_file(self, tmp_path):
        path = tmp_path / "tiny.plist"
        path.write_bytes(b"ab")

        with pytest.raises(InputTooSmallError):
            read_file(str(path))

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.plist"

        with pytest.raises(InputReadError) as excinfo:
            read_file(str(path))
        assert "Could not open input file" in str(excinfo.value)
        assert str(path) in str(excinfo.value)

    def test_directory_is_read_error(self, tmp_path):
        with pytest.raises(InputReadError):
            read_file(str(tmp_path))


class TestReadInput:
    """read_input routes None and "-" to stdin, anything else to a file."""

    def test_none_reads_given_stdin(self, sample_xml):
        payload = read_input(None, stdin=io.BytesIO(sample_xml))
        assert payload.data == sample_xml

    def test_dash_reads_given_stdin(self, sample_xml):
        payload = read_input("-", stdin=io.BytesIO(sample_xml))
        assert payload.data == sample_xml

    def test_defaults_to_sys_stdin(self, fake_stdin, sample_binary):
        fake_stdin(sample_binary)
        assert read_input(None).data == sample_binary

    def test_path_reads_file(self, tmp_path, sample_xml):
        path = tmp_path / "in.plist"
        path.write_bytes(sample_xml)
        assert read_input(str(path)).data == sample_xml

    def test_is_stdio(self):
        assert is_stdio(None)
        assert is_stdio("")
        assert is_stdio("-")
        assert not is_stdio("file.plist")
