"""Shared fixtures for unit tests."""

import pytest

from polyserial.typing.registration.registry import Registry


@pytest.fixture
def registry() -> Registry:
    """Provide an empty Registry for every test so registrations never leak between tests."""
    return Registry()
