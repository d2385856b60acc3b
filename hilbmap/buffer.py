import numpy as np

from hilbmap.layout import CHANNELS

SENTINEL = 0


class ImageBuffer:
    """Destination pixels for one conversion.

    Storage is a flat ``uint8`` array of ``side * side * 3`` bytes in row-major,
    channel-interleaved order (``(y * side + x) * 3 + channel``), filled with
    :data:`SENTINEL` on allocation. It is never resized. Concurrent writers must
    target disjoint byte sets; nothing here locks.
    """

    def __init__(self, side):
        if side < 1 or side & (side - 1):
            raise ValueError("Canvas side must be a power of two, got %s." % side)
        self.side = side
        self.data = np.full(side * side * CHANNELS, SENTINEL, dtype=np.uint8)
        self._final = None

    @classmethod
    def allocate(cls, side):
        return cls(side)

    def __len__(self):
        return len(self.data)

    @property
    def finalized(self):
        return self._final is not None

    def _check_writable(self):
        if self.finalized:
            raise RuntimeError("ImageBuffer was finalized and is read only.")

    def write_pixel(self, coordinate, pixel):
        """Set one pixel. For callers filling a canvas directly; the scatter
        path writes whole chunks through :meth:`write_bytes`."""
        self._check_writable()
        x, y = coordinate
        if not (0 <= x < self.side and 0 <= y < self.side):
            raise IndexError("Pixel (%s, %s) outside %sx%s canvas." % (x, y, self.side, self.side))
        offset = (y * self.side + x) * CHANNELS
        self.data[offset:offset + CHANNELS] = pixel

    def write_bytes(self, destinations, values):
        """Store ``values[i]`` at byte offset ``destinations[i]``."""
        self._check_writable()
        self.data[destinations] = values

    def pixel(self, coordinate):
        x, y = coordinate
        offset = (y * self.side + x) * CHANNELS
        return tuple(int(v) for v in self.data[offset:offset + CHANNELS])

    def finalize(self):
        """Freeze the buffer and return its bytes for the writer."""
        if self._final is None:
            self.data.flags.writeable = False
            self._final = self.data.tobytes()
        return self._final
