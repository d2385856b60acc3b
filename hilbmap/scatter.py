"""Parallel scatter of source bytes onto a Hilbert ordered canvas.

Every source byte ``i`` is written to ``map_byte_index(i, order)``. That map is
a bijection between ``[0, side*side*3)`` and itself, so chunks of the source
range always write disjoint destination sets, whatever the chunking or the
number of workers. Workers share the buffer without locks on that basis.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np

from hilbmap.buffer import ImageBuffer
from hilbmap.config import Configuration
from hilbmap.errors import MappingInvariantViolation
from hilbmap.hilbert import map_byte_indices
from hilbmap.layout import CHANNELS
from hilbmap.logging import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


def partition(length: int, chunk_size: int) -> list[tuple[int, int]]:
    """Split ``[0, length)`` into contiguous ``(start, stop)`` ranges."""
    if chunk_size < 1:
        raise ValueError(f"chunk size must be positive, got {chunk_size}")
    return [
        (start, min(start + chunk_size, length))
        for start in range(0, length, chunk_size)
    ]


def _scatter_chunk(
    buffer: ImageBuffer, source: np.ndarray, start: int, stop: int, order: int
) -> int:
    side = buffer.side
    indices = np.arange(start, stop, dtype=np.int64)
    # indices are ascending, so the last pixel is the largest
    if (stop - 1) // CHANNELS >= side * side:
        first_bad = max(start, side * side * CHANNELS)
        raise MappingInvariantViolation(
            first_bad, order, side, "source pixel beyond curve length"
        )

    destinations = map_byte_indices(indices, order)
    out_of_range = (destinations < 0) | (destinations >= len(buffer))
    if out_of_range.any():
        raise MappingInvariantViolation(
            int(indices[out_of_range.argmax()]), order, side
        )

    buffer.write_bytes(destinations, source[start:stop])
    return stop - start


def scatter(
    data,
    order: int,
    side: int,
    workers: int | None = None,
    chunk_size: int | None = None,
    progress: ProgressCallback | None = None,
) -> ImageBuffer:
    """Scatter ``data`` onto a fresh canvas of the given order.

    ``data`` is any bytes-like object and is only read. ``chunk_size`` defaults
    to one canvas row (``side * 3`` bytes). ``progress(done, total)`` is called
    on the calling thread as chunks finish.

    Raises :class:`MappingInvariantViolation` if any byte has no destination on
    the canvas; no buffer is returned in that case.
    """
    if order < 0 or side != 1 << order:
        raise MappingInvariantViolation(
            0, order, side, "side must equal 2**order"
        )

    source = np.frombuffer(data, dtype=np.uint8)
    buffer = ImageBuffer.allocate(side)
    total = len(source)
    if chunk_size is None:
        chunk_size = side * CHANNELS
    chunks = partition(total, chunk_size)
    if workers is None:
        workers = Configuration.worker_count()
    if workers < 1:
        raise ValueError(f"worker count must be positive, got {workers}")

    logger.debug(
        "Scattering %d bytes in %d chunks across %d workers (order=%d)",
        total,
        len(chunks),
        workers,
        order,
    )

    done = 0
    with ThreadPoolExecutor(
        max_workers=workers, thread_name_prefix="hilbmap-scatter"
    ) as executor:
        futures = [
            executor.submit(_scatter_chunk, buffer, source, start, stop, order)
            for start, stop in chunks
        ]
        try:
            for future in as_completed(futures):
                done += future.result()
                if progress is not None:
                    progress(done, total)
        except BaseException:
            for future in futures:
                future.cancel()
            raise

    return buffer
