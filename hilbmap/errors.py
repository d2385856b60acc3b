"""Exceptions raised while converting binaries to Hilbert images."""


class HilbmapError(Exception):
    """Base class for every error raised by :mod:`hilbmap`."""


class InputError(HilbmapError, OSError):
    """The source path is missing or cannot be read."""


class OutputError(HilbmapError, OSError):
    """The image container could not be written."""


class DegenerateSizeError(HilbmapError, ValueError):
    """A data length that cannot be laid out on any canvas."""


class MappingInvariantViolation(HilbmapError, AssertionError):
    """A source byte has no destination inside the canvas.

    This is never a recoverable condition: it means the canvas order or side
    does not match the index range being scattered.
    """

    def __init__(self, index: int, order: int, side: int, detail: str = "") -> None:
        self.index = index
        self.order = order
        self.side = side
        message = (
            f"byte index {index} does not map inside canvas "
            f"(order={order}, side={side}, capacity={side * side * 3})"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
