"""Binary PPM (P6) container output."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from PIL import Image

from hilbmap.errors import OutputError
from hilbmap.layout import CHANNELS
from hilbmap.logging import get_logger

logger = get_logger(__name__)

PPM_MAGIC = "P6"
PPM_MAXVAL = 255


def _read_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# mkstemp creates 0600 files; output gets the mode open() would have given it
_UMASK = _read_umask()


def ppm_header(side: int) -> bytes:
    return f"{PPM_MAGIC}\n{side} {side}\n{PPM_MAXVAL}\n".encode("ascii")


def write_ppm(path: str | os.PathLike, side: int, pixel_bytes: bytes) -> Path:
    """Write a ``side`` x ``side`` RGB image to ``path``.

    The image is written to a temporary file next to ``path`` and renamed into
    place, so a failed write never leaves a partial file behind.
    """

    expected = side * side * CHANNELS
    if len(pixel_bytes) != expected:
        raise ValueError(
            f"expected {expected} pixel bytes for a {side}x{side} image, got {len(pixel_bytes)}"
        )

    destination = Path(path)
    image = Image.frombytes("RGB", (side, side), bytes(pixel_bytes))
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
        )
    except OSError as exc:
        raise OutputError(f"cannot write {destination}: {exc}") from exc

    try:
        with os.fdopen(fd, "wb") as fp:
            os.chmod(tmp_name, 0o666 & ~_UMASK)
            image.save(fp, format="PPM")
        os.replace(tmp_name, destination)
    except OSError as exc:
        os.unlink(tmp_name)
        raise OutputError(f"cannot write {destination}: {exc}") from exc
    except BaseException:
        os.unlink(tmp_name)
        raise

    logger.info("Wrote %dx%d image to %s", side, side, destination)
    return destination


def read_ppm(path: str | os.PathLike) -> tuple[int, bytes]:
    """Read back a square RGB image written by :func:`write_ppm`."""

    with Image.open(path) as image:
        if image.mode != "RGB" or image.width != image.height:
            raise ValueError(f"{path} is not a square RGB image")
        return image.width, image.tobytes()
