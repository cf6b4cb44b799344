"""Pytest configuration and fixtures for addsubs tests."""

import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from addsubs.domain.pairing import PairSet
from addsubs.services.task_builder import build_tasks


def _touch_all(directory: Path, *names: str) -> Path:
    for name in names:
        (directory / name).touch()
    return directory


@pytest.fixture
def make_files():
    """Create empty files with the given names in a directory."""
    return _touch_all


@pytest.fixture
def completed_process():
    """Build a `subprocess.CompletedProcess` like `subprocess.run` returns it."""

    def _completed(cmd, returncode=0, stdout=b"", stderr=b""):
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    return _completed


@pytest.fixture
def media_dir(tmp_path):
    """A directory holding two video/subtitle pairs and an unrelated file."""
    return _touch_all(tmp_path, "b.mkv", "a.mkv", "b.srt", "a.srt", "notes.txt")


@pytest.fixture
def pair_set(tmp_path):
    return PairSet(
        directory=tmp_path,
        videos=("ep01.mkv", "ep02.mkv", "ep03.mkv"),
        subs=("ep01.srt", "ep02.srt", "ep03.srt"),
    )


@pytest.fixture
def tasks(pair_set):
    return build_tasks(pair_set, "jpn")


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the default loguru sink so handlers added by main() do not leak between tests."""
    yield
    logger.remove()
    logger.add(sys.stderr)
