"""Reading input bytes from a file or a directory tree."""

from __future__ import annotations

import os
from pathlib import Path

from hilbmap.errors import InputError
from hilbmap.logging import get_logger

logger = get_logger(__name__)


def enumerate_files(directory: str | os.PathLike) -> list[Path]:
    """Return every regular file below ``directory``.

    A directory's own files come first, sorted by name, followed by the
    files of its subdirectories, visited depth first in name order. Symlinks
    to directories are not followed.
    """

    root = Path(directory)
    files: list[Path] = []
    stack: list[tuple[Path, int]] = [(root, 0)]
    while stack:
        current, depth = stack.pop()
        try:
            entries = sorted(current.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            raise InputError(f"cannot list directory {current}: {exc}") from exc
        subdirectories = []
        for entry in entries:
            if entry.is_symlink() and entry.is_dir():
                logger.debug("skipping directory symlink %s", entry)
            elif entry.is_dir():
                subdirectories.append((entry, depth + 1))
            elif entry.is_file():
                logger.debug("depth %d - %s", depth, entry)
                files.append(entry)
        # reversed so the first subdirectory is visited next
        stack.extend(reversed(subdirectories))
    return files


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InputError(f"cannot read {path}: {exc}") from exc


def load(path: str | os.PathLike) -> bytes:
    """Return the bytes at ``path``.

    A directory yields the concatenation of its non-empty files in
    :func:`enumerate_files` order. An empty file is valid input.
    """

    source = Path(path)
    if source.is_dir():
        chunks = [_read(entry) for entry in enumerate_files(source)]
        data = b"".join(chunk for chunk in chunks if chunk)
        logger.info("Loaded %d bytes from %d files under %s", len(data), len(chunks), source)
        return data
    if not source.exists():
        raise InputError(f"input path does not exist: {source}")
    data = _read(source)
    logger.info("Loaded %d bytes from %s", len(data), source)
    return data
