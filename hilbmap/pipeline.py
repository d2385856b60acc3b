from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from hilbmap.layout import CanvasLayout, layout
from hilbmap.logging import get_logger
from hilbmap.scatter import ProgressCallback, scatter
from hilbmap.source import load
from hilbmap.writer import write_ppm

logger = get_logger(__name__)


@dataclass(frozen=True)
class Rendering:
    layout: CanvasLayout
    pixel_bytes: bytes
    output: Path | None = None


def render(
    data: bytes,
    workers: int | None = None,
    chunk_size: int | None = None,
    progress: ProgressCallback | None = None,
) -> Rendering:
    """Lay ``data`` out on a Hilbert ordered canvas in memory."""

    canvas = layout(len(data))
    logger.info(
        "Canvas %dx%d (order %d) for %d bytes",
        canvas.side,
        canvas.side,
        canvas.order,
        canvas.data_length,
    )
    buffer = scatter(
        data,
        canvas.order,
        canvas.side,
        workers=workers,
        chunk_size=chunk_size,
        progress=progress,
    )
    return Rendering(layout=canvas, pixel_bytes=buffer.finalize())


def convert(
    input_path: str | os.PathLike,
    output_path: str | os.PathLike,
    workers: int | None = None,
    chunk_size: int | None = None,
    progress: ProgressCallback | None = None,
) -> Rendering:
    """Read ``input_path``, render it and write a PPM image to ``output_path``."""

    logger.info("Input %s, output %s", input_path, output_path)
    data = load(input_path)
    rendering = render(data, workers=workers, chunk_size=chunk_size, progress=progress)
    logger.info("Writing to file...")
    written = write_ppm(output_path, rendering.layout.side, rendering.pixel_bytes)
    logger.info("Done")
    return Rendering(
        layout=rendering.layout, pixel_bytes=rendering.pixel_bytes, output=written
    )
