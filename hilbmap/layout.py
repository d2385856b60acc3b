"""Canvas sizing.

A canvas is the smallest power-of-two square with one slot per pixel, where a
pixel is three consecutive input bytes. The last pixel of an input whose
length is not a multiple of three is partial; its missing channels keep the
buffer's zero fill. Empty input gets a one pixel canvas.
"""

from dataclasses import dataclass

from hilbmap.errors import DegenerateSizeError
from hilbmap.logging import get_logger

logger = get_logger(__name__)

CHANNELS = 3


@dataclass(frozen=True)
class CanvasLayout:
    data_length: int
    pixel_count: int
    order: int
    side: int
    padded_length: int

    @property
    def capacity(self) -> int:
        """Number of pixel slots on the canvas."""
        return self.side * self.side


def order_for(pixel_count: int) -> int:
    """Smallest order whose canvas holds ``pixel_count`` pixels."""
    if pixel_count <= 1:
        return 0
    # smallest k with 4**k >= n, without float sqrt/log2
    return ((pixel_count - 1).bit_length() + 1) // 2


def layout(data_length: int) -> CanvasLayout:
    if data_length < 0:
        raise DegenerateSizeError(f"data length must be non-negative, got {data_length}")
    if data_length == 0:
        logger.warning("Empty input; using a 1x1 canvas")

    pixel_count = -(-data_length // CHANNELS)
    order = order_for(pixel_count)
    side = 1 << order
    return CanvasLayout(
        data_length=data_length,
        pixel_count=pixel_count,
        order=order,
        side=side,
        padded_length=side * side * CHANNELS,
    )
