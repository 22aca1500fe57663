"""
Pytest configuration and fixtures for evodemos tests.
"""

import pytest

from evodemos.utils.rng_manager import reset_rng_manager


@pytest.fixture(autouse=True)
def fresh_rng_manager():
    """Give every test an unconfigured process-wide generator."""
    reset_rng_manager()
    yield
    reset_rng_manager()
