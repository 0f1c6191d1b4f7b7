"""
Shared fixtures for Locit tests.
"""

import pytest

from locit.special_cases import REGISTRY


@pytest.fixture(autouse=True)
def reset_registry():
    """Undo special cases registered by a test."""
    yield
    REGISTRY.reset()
