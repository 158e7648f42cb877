"""
Shared pytest fixtures and configuration for pagedset tests.

The reference source is the eight integers 0..7, used throughout the
scenarios for every builder.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests without external dependencies")


@pytest.fixture
def items() -> list[int]:
    """The eight elements 0..7."""
    return list(range(8))
