"""Shared fixtures."""

import logging
from datetime import datetime

import pytest

from coursework.application import sample_data
from coursework.infrastructure.persistence.in_memory_repository import (
    InMemoryStockRepository,
)


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 15, 9, 30)


@pytest.fixture
def electronics():
    return InMemoryStockRepository(sample_data.electronics())


@pytest.fixture
def groceries(now):
    return InMemoryStockRepository(sample_data.groceries(now))


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo handlers the CLI installs so later tests log to pytest only."""
    yield
    package_logger = logging.getLogger("coursework")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
