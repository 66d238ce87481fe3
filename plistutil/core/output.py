"""Output writer: deliver rendered bytes to a file or stdout.

RULES:
- No rendered payload means no I/O at all, not even creating the file
- None or "-" means stdout; the binary buffer is used so bytes pass untouched
- Files are opened "wb" (truncate or create)
- Open or write failure raises OutputWriteError
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Optional

from plistutil.core.acquire import is_stdio
from plistutil.core.ir import RenderedPayload
from plistutil.errors import OutputWriteError

logger = logging.getLogger(__name__)


def write_output(
    rendered: Optional[RenderedPayload],
    destination: Optional[str],
    stdout: Optional[BinaryIO] = None,
) -> None:
    """Write ``rendered`` to ``destination`` exactly as produced."""
    if rendered is None:
        return

    if is_stdio(destination):
        stream = stdout if stdout is not None else sys.stdout.buffer
        try:
            stream.write(rendered.data)
            stream.flush()
        except OSError as exc:
            raise OutputWriteError("Could not write to stdout: {}".format(
                exc.strerror or exc,
            )) from exc
        logger.debug("Wrote %d bytes to stdout", rendered.size)
        return

    try:
        with open(destination, "wb") as handle:
            handle.write(rendered.data)
    except OSError as exc:
        raise OutputWriteError("Could not open output file '{}': {}".format(
            destination, exc.strerror or exc,
        )) from exc
    logger.debug("Wrote %d bytes to %s", rendered.size, destination)
