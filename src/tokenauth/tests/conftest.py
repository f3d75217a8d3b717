# ABOUTME: pytest configuration and shared fixtures for tokenauth tests
# ABOUTME: Configures timeouts and provides clocks, managers and loguru capture

import pytest
from loguru import logger

from tokenauth.implementations.jwt.codec import JwtCodec
from tokenauth.implementations.jwt.token_manager import JwtTokenManager
from tokenauth.implementations.memory.clock import ManualClock

SECRET = "asdqwe"
START_MILLIS = 1_700_000_000_000


def pytest_configure(config):
    """Configure pytest for tokenauth tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture
def clock() -> ManualClock:
    """Manual clock frozen at 2023-11-14T22:13:20Z."""
    return ManualClock(START_MILLIS)


@pytest.fixture
def manager(clock) -> JwtTokenManager:
    """Token manager with the default secret, HS256 and a one-hour default timeout."""
    return JwtTokenManager(secret=SECRET, algorithm="HS256", default_timeout=3600, clock=clock)


@pytest.fixture
def codec() -> JwtCodec:
    return JwtCodec(SECRET, "HS256")


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test as (level, message) pairs."""
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)
