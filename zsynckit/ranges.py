"""Byte range lists: pairing flat offset lists and merging close ranges."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

log = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 64 * 4096

Range = tuple[int, int]


def optimize_ranges(
    ranges: Iterable[tuple[int, int]], threshold: int = DEFAULT_THRESHOLD
) -> list[Range]:
    """Merge each range into the previous one when the gap is at most *threshold*.

    Ranges are inclusive ``(start, stop)`` pairs in ascending order. A merged
    range takes the stop of the range merged into it. Returns a new list.
    """
    optimized: list[Range] = []
    count = 0
    for start, stop in ranges:
        count += 1
        if optimized and start - optimized[-1][1] <= threshold:
            optimized[-1] = (optimized[-1][0], stop)
        else:
            optimized.append((start, stop))

    if count:
        log.info(
            "optimized ranges, old requests count %d, new requests count %d",
            count,
            len(optimized),
        )
    return optimized


def pair_ranges(offsets: Sequence[int]) -> list[Range]:
    """Turn a flat list ``[start0, stop0, start1, stop1, ...]`` into pairs.

    Raises ValueError if the list holds an odd number of offsets.
    """
    if len(offsets) % 2:
        raise ValueError(f"expected an even number of offsets, got {len(offsets)}")
    it = iter(offsets)
    return list(zip(it, it))