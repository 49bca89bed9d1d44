"""Shared fixtures for whichx tests."""

import logging

import pytest

from whichx.reporter import Reporter


@pytest.fixture(autouse=True)
def reset_whichx_logger():
    """Drop handlers the CLI attached to the package logger."""
    yield
    logger = logging.getLogger("whichx")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_program(tmp_path):
    """Create a file under tmp_path/<directory>/<name> with the given mode."""

    def _make(directory, name, mode=0o755):
        path = tmp_path / directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\nexit 0\n")
        path.chmod(mode)
        return path

    return _make


@pytest.fixture
def two_dirs(tmp_path):
    """Two empty search directories, in search order."""
    first = tmp_path / "usr_bin"
    second = tmp_path / "bin"
    first.mkdir()
    second.mkdir()
    return first, second


@pytest.fixture
def reporter():
    """Reporter writing to the (captured) process streams."""
    return Reporter("whichx")
