"""Input acquisition: read the whole payload from a file or stdin.

WHY: Every codec needs the complete document in memory. A regular file
reports its size up front, so it can be read in one call. A pipe does
not, so it has to be drained into a buffer that grows as bytes arrive.

HOW: read_input() decides between the two. Regular files are stat'ed,
size-checked, then read in full. Stdin and other unsized sources (FIFOs,
character devices) are read one byte at a time into a ByteSink, which
grows by a fixed step whenever the next byte would overflow it.

RULES:
- None or "-" means stdin
- Payloads shorter than MIN_PLIST_SIZE raise InputTooSmallError before any
  parse is attempted; a regular file is rejected on its stat size alone
- Open and read failures raise InputReadError naming the source
- Failure to grow the sink raises InputReadError, never truncates
"""

from __future__ import annotations

import logging
import os
import stat
import sys
from typing import BinaryIO, Optional

from plistutil.config import MIN_PLIST_SIZE, STDIN_BUFFER_SIZE, STDIO_SENTINEL
from plistutil.core.ir import RawPayload
from plistutil.errors import InputReadError, InputTooSmallError

logger = logging.getLogger(__name__)


class ByteSink:
    """Append-one, grow-on-demand byte buffer.

    WHY: A stream of unknown length has to be collected without losing a
    byte. Keeping the capacity arithmetic in one class means the stdin path
    and the unsized-file path share it instead of each growing a buffer.

    HOW: A preallocated bytearray plus a fill count. When the next byte
    would not fit, capacity grows by ``increment`` bytes. getvalue()
    returns exactly the bytes written.

    RULES:
    - Initial capacity and growth step are both ``increment`` unless given
    - Capacity never shrinks while writing
    - MemoryError while growing becomes InputReadError
    """

    def __init__(self, increment: int = STDIN_BUFFER_SIZE, initial_capacity: Optional[int] = None) -> None:
        if increment <= 0:
            raise ValueError("increment must be positive")
        self.increment = increment
        capacity = increment if initial_capacity is None else initial_capacity
        self._buffer = bytearray(capacity)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def append(self, byte: int) -> None:
        if self._length >= len(self._buffer):
            self._grow()
        self._buffer[self._length] = byte
        self._length += 1

    def _grow(self) -> None:
        try:
            self._buffer.extend(bytes(self.increment))
        except MemoryError as exc:
            raise InputReadError("Failed to reallocate stdin buffer") from exc
        logger.debug("Grew input buffer to %d bytes", len(self._buffer))

    def getvalue(self) -> bytes:
        return bytes(self._buffer[:self._length])


def is_stdio(path: Optional[str]) -> bool:
    """True when ``path`` selects a standard stream instead of a file."""
    return not path or path == STDIO_SENTINEL


def _check_size(size: int, source: str) -> None:
    if size < MIN_PLIST_SIZE:
        logger.debug("Rejecting %s: %d bytes is below the %d byte minimum", source, size, MIN_PLIST_SIZE)
        raise InputTooSmallError(size)


def read_stream(stream: BinaryIO, source: str = STDIO_SENTINEL) -> RawPayload:
    """Drain a byte stream of unknown length.

    Args:
        stream: Binary stream to read until end of file.
        source: Name used in log messages and on the payload.

    Returns:
        The collected payload.
    """
    sink = ByteSink()
    try:
        while True:
            byte = stream.read(1)
            if not byte:
                break
            sink.append(byte[0])
    except OSError as exc:
        raise InputReadError("Failed reading from {}: {}".format(
            "stdin" if source == STDIO_SENTINEL else source, exc.strerror or exc,
        )) from exc

    _check_size(len(sink), source)
    logger.debug("Read %d bytes from %s", len(sink), source)
    return RawPayload(data=sink.getvalue(), source=source)


def read_file(path: str) -> RawPayload:
    """Read a named file in full.

    WHY: A regular file can be sized with fstat, so undersized input is
    rejected without reading it and the buffer is allocated exactly once.

    HOW: Open, fstat, size check, single read. Files that are not regular
    (FIFOs, devices) report no meaningful size and are drained like stdin.
    """
    try:
        with open(path, "rb") as handle:
            info = os.fstat(handle.fileno())
            if not stat.S_ISREG(info.st_mode):
                logger.debug("%s is not a regular file, reading as a stream", path)
                return read_stream(handle, source=path)

            _check_size(info.st_size, path)
            data = handle.read(info.st_size)
    except OSError as exc:
        raise InputReadError("Could not open input file '{}': {}".format(
            path, exc.strerror or exc,
        )) from exc

    # The file may have shrunk between fstat and read
    _check_size(len(data), path)
    logger.debug("Read %d bytes from %s", len(data), path)
    return RawPayload(data=data, source=path)


def read_input(source: Optional[str], stdin: Optional[BinaryIO] = None) -> RawPayload:
    """Acquire the complete input payload.

    Args:
        source: Input path, or None / "-" for stdin.
        stdin: Stream to use for stdin; defaults to sys.stdin.buffer.

    Returns:
        A RawPayload of at least MIN_PLIST_SIZE bytes.
    """
    if is_stdio(source):
        stream = stdin if stdin is not None else sys.stdin.buffer
        return read_stream(stream)
    return read_file(source)
