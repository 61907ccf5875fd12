"""Pytest configuration and fixtures."""

from typing import Iterator

import pytest
import structlog

from slowrm.rate_limiter import SlowRm
from slowrm.size import Size, Unit


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Start every test from structlog defaults so capture_logs sees events."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path) -> None:
    """Keep settings from leaking in through the environment or a .env file."""
    for name in (
        "SLOWRM_RATE",
        "SLOWRM_CHUNK_REMOVAL_PER_SECOND",
        "LOG_FILE",
        "VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_size() -> Size:
    """4GB + 5TB, displayed as 5.004TB."""
    return Size.from_unit(Unit.GIGABYTE, 4.0) + Size.from_unit(Unit.TERABYTE, 5.0)


@pytest.fixture
def large_slow_rm() -> SlowRm:
    """128GB per second over 1000 rounds."""
    return SlowRm(rate=128 * 1024 * 1024 * 1024, chunk_removal_per_second=1000)


@pytest.fixture
def small_slow_rm() -> SlowRm:
    """Rate lower than the number of rounds."""
    return SlowRm(rate=10, chunk_removal_per_second=1000)
