"""
Byte-range source rewriting.

Two ways to remove flagged spans from a source buffer:

  • ``SourceRewriter`` deletes eagerly, as violations are found.  Ranges are
    always given in ORIGINAL offsets; the rewriter tracks the cumulative shift
    of earlier deletions so callers never recompute spans.
  • ``apply_deletions`` takes every range at once and applies them in
    descending start order (bottom-up), so no offset ever moves.

Overlapping ranges are skipped with a warning in both modes.
"""

import bisect
import logging
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)

ByteRange = Tuple[int, int]


def _check_range(start: int, end: int, size: int) -> None:
    if start < 0 or end > size or start > end:
        raise ValueError(f"Invalid byte range [{start}, {end}) for buffer of {size} bytes")


class SourceRewriter:
    """Owns a mutable copy of the source and applies deletions immediately."""

    def __init__(self, original: bytes):
        self.original = bytes(original)
        self._buffer = bytearray(self.original)
        self._deleted: List[ByteRange] = []  # original offsets, sorted by start

    @property
    def source(self) -> bytes:
        return bytes(self._buffer)

    @property
    def deletions(self) -> List[ByteRange]:
        return list(self._deleted)

    @property
    def modified(self) -> bool:
        return bool(self._deleted)

    def map_offset(self, offset: int) -> int:
        """Translate an original offset into the current buffer.

        Offsets inside a deleted range collapse onto its start.
        """
        shift = 0
        for start, end in self._deleted:
            if start >= offset:
                break
            shift += min(end, offset) - start
        return offset - shift

    def _overlaps(self, start: int, end: int) -> bool:
        idx = bisect.bisect_left(self._deleted, (start, end))
        for neighbour in self._deleted[max(0, idx - 1):idx + 1]:
            if neighbour[0] < end and start < neighbour[1]:
                return True
        return False

    def delete(self, start: int, end: int) -> bool:
        """Remove original bytes ``[start, end)``.  Returns True if applied."""
        _check_range(start, end, len(self.original))
        if start == end:
            return False
        if self._overlaps(start, end):
            logger.warning("Overlapping deletion at %d-%d. Skipping.", start, end)
            return False

        new_start = self.map_offset(start)
        new_end = new_start + (end - start)
        del self._buffer[new_start:new_end]
        bisect.insort(self._deleted, (start, end))
        logger.debug("Deleted bytes %d-%d (now at %d)", start, end, new_start)
        return True


def apply_deletions(source: bytes, ranges: Iterable[ByteRange]) -> bytes:
    """Apply all deletions bottom-up and return the new bytes."""
    content = bytearray(source)
    last_start = float("inf")

    for start, end in sorted(set(ranges), key=lambda r: r[0], reverse=True):
        _check_range(start, end, len(source))
        # Going in reverse, each range must end before the one applied last
        if end > last_start:
            logger.warning("Overlap detected at offset %d-%d. Skipping deletion.", start, end)
            continue
        del content[start:end]
        last_start = start

    return bytes(content)
