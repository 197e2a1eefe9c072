"""Pytest configuration and shared helpers for the email address tests."""

import pytest

from emailaddr.core.config import get_settings
from emailaddr.core.container import get_email_type_handler, get_logger
from emailaddr.domain.value_objects import EmailAddress


def make_address(local: str = "alice", domain: str = "example.com") -> EmailAddress:
    """Helper to create EmailAddress instances for testing."""
    return EmailAddress(local, domain)


@pytest.fixture
def fresh_container():
    """Clear cached settings, logger and handler around a test.

    Lets a test change EMAILADDR_* environment variables and see them picked
    up by the container.
    """
    caches = (get_settings, get_logger, get_email_type_handler)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no external dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests exercising real structlog and settings"
    )
