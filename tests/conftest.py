import pytest
from loguru import logger

from fakes import FakeSession


@pytest.fixture
def anyio_backend():
    return 'asyncio'


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def error_logs():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    yield messages
    logger.remove(handler_id)
