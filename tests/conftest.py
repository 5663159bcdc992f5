"""Shared pytest fixtures for echoshim tests."""

import sys
from pathlib import Path

import pytest

from echoshim.core.responder import Responder


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory.

    Returns:
        Absolute path to tests/fixtures/ directory
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def responders_dir(fixtures_dir: Path) -> Path:
    """Return path to the stand-in responder scripts used by proxy tests.

    Args:
        fixtures_dir: Path to fixtures directory (from fixtures_dir fixture)

    Returns:
        Absolute path to tests/fixtures/responders/ directory
    """
    return fixtures_dir / "responders"


@pytest.fixture
def src_on_pythonpath(monkeypatch) -> Path:
    """Make ``python -m echoshim`` importable in child processes.

    Returns:
        Absolute path to the src/ directory
    """
    src_dir = Path(__file__).parent.parent / "src"
    monkeypatch.setenv("PYTHONPATH", str(src_dir))
    return src_dir


@pytest.fixture
def responder_command(src_on_pythonpath: Path) -> list:
    """Command line that runs the real responder in a child process."""
    return [sys.executable, "-m", "echoshim"]


@pytest.fixture
def responder() -> Responder:
    return Responder()
