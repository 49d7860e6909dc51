"""Gzip decompression of downloaded artifacts."""

from __future__ import annotations

import gzip
import logging
import time
import zlib

from rokit.errors import RokitError

_log = logging.getLogger(__name__)


def decompress_gzip(gz_contents: bytes) -> bytes:
    """Decompress gzip data, raising RokitError if it is not valid gzip."""
    data = bytes(gz_contents)
    start = time.perf_counter()
    try:
        contents = gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as err:
        raise RokitError(f"I/O error: {err}") from err
    _log.debug(
        "decompressed gzip (%d KiB) in %.3fs",
        len(data) // 1024,
        time.perf_counter() - start,
    )
    return contents