import numpy as np

# ---- Two dimensional Hilbert curve ----


def _check_order(order):
    if order < 0:
        raise ValueError("Curve order must be non-negative, got %s." % order)


def hilbert_point(index, order):
    """Map a position along the curve of the given order to its (x, y) cell."""
    _check_order(order)
    if not 0 <= index < 4 ** order:
        raise ValueError(
            "Index %s outside curve of order %s." % (index, order))
    x, y = 0, 0
    t = index
    s = 1
    for _ in range(order):
        rx = (t >> 1) & 1
        ry = (t ^ rx) & 1
        if ry == 0:
            if rx == 1:
                x = s - 1 - x
                y = s - 1 - y
            x, y = y, x
        x += s * rx
        y += s * ry
        t >>= 2
        s <<= 1
    return x, y


def hilbert_index(x, y, order):
    """Inverse of :func:`hilbert_point`."""
    _check_order(order)
    side = 1 << order
    if not (0 <= x < side and 0 <= y < side):
        raise ValueError(
            "Point (%s, %s) outside %sx%s grid." % (x, y, side, side))
    d = 0
    s = side >> 1
    while s > 0:
        rx = 1 if x & s else 0
        ry = 1 if y & s else 0
        d += s * s * ((3 * rx) ^ ry)
        if ry == 0:
            if rx == 1:
                x = side - 1 - x
                y = side - 1 - y
            x, y = y, x
        s >>= 1
    return d


def hilbert_points(indices, order):
    """Vectorised :func:`hilbert_point` over an integer array.

    Returns two int64 arrays ``(x, y)``. Indices are not range checked here;
    callers that need the guarantee check them up front.
    """
    _check_order(order)
    t = np.asarray(indices, dtype=np.int64)
    x = np.zeros(t.shape, dtype=np.int64)
    y = np.zeros(t.shape, dtype=np.int64)
    s = 1
    for _ in range(order):
        rx = (t >> 1) & 1
        ry = (t ^ rx) & 1
        flip = (ry == 0) & (rx == 1)
        x = np.where(flip, s - 1 - x, x)
        y = np.where(flip, s - 1 - y, y)
        swap = ry == 0
        x, y = np.where(swap, y, x), np.where(swap, x, y)
        x += s * rx
        y += s * ry
        t = t >> 2
        s <<= 1
    return x, y


def hilbert_indices(xs, ys, order):
    """Vectorised :func:`hilbert_index`."""
    _check_order(order)
    side = 1 << order
    x = np.asarray(xs, dtype=np.int64)
    y = np.asarray(ys, dtype=np.int64)
    d = np.zeros(np.broadcast(x, y).shape, dtype=np.int64)
    s = side >> 1
    while s > 0:
        rx = ((x & s) > 0).astype(np.int64)
        ry = ((y & s) > 0).astype(np.int64)
        d += s * s * ((3 * rx) ^ ry)
        flip = (ry == 0) & (rx == 1)
        x = np.where(flip, side - 1 - x, x)
        y = np.where(flip, side - 1 - y, y)
        swap = ry == 0
        x, y = np.where(swap, y, x), np.where(swap, x, y)
        s >>= 1
    return d


def map_byte_index(byte_index, order):
    """Destination byte offset of a source byte in a channel-interleaved canvas.

    The three channel bytes of a pixel always land on three contiguous
    destination bytes.
    """
    pixel_index, channel = divmod(byte_index, 3)
    x, y = hilbert_point(pixel_index, order)
    return ((y << order) + x) * 3 + channel


def map_byte_indices(byte_indices, order):
    """Vectorised :func:`map_byte_index`."""
    byte_indices = np.asarray(byte_indices, dtype=np.int64)
    pixel_indices, channels = np.divmod(byte_indices, 3)
    x, y = hilbert_points(pixel_indices, order)
    return ((y << order) + x) * 3 + channels


class Hilbert:
    def __init__(self, order):
        _check_order(order)
        self.order = order

    @classmethod
    def fromSize(cls, size):
        """Build a curve covering ``size`` cells; ``size`` must be a power of 4."""
        if size < 1 or size & (size - 1) or (size.bit_length() - 1) % 2:
            raise ValueError("Size %s does not fit a 2D Hilbert curve." % size)
        return Hilbert((size.bit_length() - 1) // 2)

    @property
    def side(self):
        return 1 << self.order

    def __len__(self):
        return 4 ** self.order

    def __getitem__(self, idx):
        if not 0 <= idx < len(self):
            raise IndexError(idx)
        return self.point(idx)

    def __iter__(self):
        xs, ys = hilbert_points(np.arange(len(self)), self.order)
        for x, y in zip(xs.tolist(), ys.tolist()):
            yield x, y

    def dimensions(self):
        return [self.side, self.side]

    def point(self, idx):
        return hilbert_point(idx, self.order)

    def index(self, p):
        x, y = p
        return hilbert_index(x, y, self.order)

    def __repr__(self):
        return "Hilbert(order=%s)" % self.order
