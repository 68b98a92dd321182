# tests/conftest.py
import pytest
from loguru import logger

from datekit.utils.datetime_utils import DateTimeUtils


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def reset_default_timezone():
    """每个测试结束后恢复平台本地时区，避免 CLI / config 测试互相污染"""
    yield
    DateTimeUtils.set_default_timezone(None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DATEKIT_TIMEZONE", raising=False)
    monkeypatch.delenv("DATEKIT_LOG_LEVEL", raising=False)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    return messages
