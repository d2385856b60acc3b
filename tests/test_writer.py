"""Tests for :mod:`hilbmap.writer`."""

import stat
from pathlib import Path

import pytest
from PIL import Image

from hilbmap import writer
from hilbmap.errors import OutputError
from hilbmap.writer import ppm_header, read_ppm, write_ppm


def test_writes_binary_ppm(tmp_path: Path) -> None:
    output = tmp_path / "out.ppm"
    pixels = bytes(range(12))
    assert write_ppm(output, 2, pixels) == output
    assert output.read_bytes() == b"P6\n2 2\n255\n" + pixels


def test_single_pixel_header(tmp_path: Path) -> None:
    output = tmp_path / "one.ppm"
    write_ppm(output, 1, bytes([10, 20, 30]))
    assert output.read_bytes() == ppm_header(1) + bytes([10, 20, 30])
    assert ppm_header(1) == b"P6\n1 1\n255\n"


def test_read_back(tmp_path: Path) -> None:
    output = tmp_path / "out.ppm"
    pixels = bytes(range(48))
    write_ppm(output, 4, pixels)
    assert read_ppm(output) == (4, pixels)


def test_rejects_wrong_pixel_count(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_ppm(tmp_path / "out.ppm", 2, bytes(11))
    assert list(tmp_path.iterdir()) == []


def test_failed_write_leaves_nothing_behind(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_save(self, fp, format=None, **params):
        fp.write(b"P6\n")
        raise OSError("disk full")

    monkeypatch.setattr(Image.Image, "save", broken_save)
    with pytest.raises(OutputError):
        write_ppm(tmp_path / "out.ppm", 1, bytes(3))
    assert list(tmp_path.iterdir()) == []


def test_failed_write_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    output = tmp_path / "out.ppm"
    output.write_bytes(b"previous")

    def broken_save(self, fp, format=None, **params):
        raise OSError("disk full")

    monkeypatch.setattr(Image.Image, "save", broken_save)
    with pytest.raises(OutputError):
        write_ppm(output, 1, bytes(3))
    assert output.read_bytes() == b"previous"
    assert list(tmp_path.iterdir()) == [output]


def test_missing_output_directory(tmp_path: Path) -> None:
    with pytest.raises(OutputError):
        write_ppm(tmp_path / "missing" / "out.ppm", 1, bytes(3))


@pytest.mark.parametrize(("umask", "mode"), [(0o022, 0o644), (0o077, 0o600), (0o002, 0o664)])
def test_output_mode_follows_umask(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, umask: int, mode: int
) -> None:
    monkeypatch.setattr(writer, "_UMASK", umask)
    output = tmp_path / "out.ppm"
    write_ppm(output, 1, bytes(3))
    assert stat.S_IMODE(output.stat().st_mode) == mode


def test_overwrite_replaces_mode(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(writer, "_UMASK", 0o022)
    output = tmp_path / "out.ppm"
    output.write_bytes(b"previous")
    output.chmod(0o600)
    write_ppm(output, 1, bytes(3))
    assert stat.S_IMODE(output.stat().st_mode) == 0o644
