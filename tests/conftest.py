"""Shared fixtures for the ledger test-suite."""

import itertools
import logging

import pytest

from ledger.logging_config import LOGGER_NAME
from ledger.services import LedgerStore
from ledger.storage import FileStorage, MemoryStorage


@pytest.fixture
def clock():
    """Deterministic millisecond clock advancing by one second per call."""
    ticks = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def store(memory_storage, clock):
    return LedgerStore(memory_storage, clock=clock)


@pytest.fixture
def temp_data_dir(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def file_storage(temp_data_dir):
    return FileStorage(temp_data_dir)


@pytest.fixture(autouse=True)
def reset_ledger_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
