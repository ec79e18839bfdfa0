"""
Source file access with a binary-file guard.
"""

import logging
import os

logger = logging.getLogger(__name__)

BINARY_SNIFF_BYTES = 8192


def read_source(file_path: str) -> bytes:
    """Read a source file as raw bytes.

    Raises FileNotFoundError / OSError on I/O problems and ValueError for
    files that look binary (NUL byte near the start).
    """
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")
    with open(file_path, "rb") as f:
        source = f.read()
    if b"\x00" in source[:BINARY_SNIFF_BYTES]:
        raise ValueError(f"Skipping binary file: {file_path}")
    logger.debug("Read %d bytes from %s", len(source), file_path)
    return source


def write_source(file_path: str, data: bytes) -> None:
    with open(file_path, "wb") as f:
        f.write(data)
    logger.info("Wrote %d bytes to %s", len(data), file_path)
