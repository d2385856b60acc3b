"""Tests for :mod:`hilbmap.config`."""

import os

import pytest

from hilbmap.config import (CHUNK_SIZE_ENV_VAR, PROGRESS_ENV_VAR,
                            WORKERS_ENV_VAR, Configuration)


def test_worker_count_defaults_to_cpu_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(WORKERS_ENV_VAR, raising=False)
    assert Configuration.worker_count() == (os.cpu_count() or 1)


def test_worker_count_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(WORKERS_ENV_VAR, "3")
    assert Configuration.worker_count() == 3


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_worker_count_rejects_bad_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(WORKERS_ENV_VAR, value)
    with pytest.raises(ValueError, match=WORKERS_ENV_VAR):
        Configuration.worker_count()


def test_chunk_size_optional(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CHUNK_SIZE_ENV_VAR, raising=False)
    assert Configuration.chunk_size() is None
    monkeypatch.setenv(CHUNK_SIZE_ENV_VAR, "4096")
    assert Configuration.chunk_size() == 4096


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("yes", True), ("off", False), ("0", False)])
def test_show_progress(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    monkeypatch.setenv(PROGRESS_ENV_VAR, value)
    assert Configuration.show_progress() is expected


def test_show_progress_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(PROGRESS_ENV_VAR, raising=False)
    assert Configuration.show_progress() is True
