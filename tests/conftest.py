"""
Pytest configuration and shared fixtures for DI_COLLECTION tests.

This module provides:
- Fresh collections with default and strict configuration
- Isolation of environment variables and logging context
"""

import pytest

from di_collection.config import RegistrationConfig
from di_collection.constants import ENV_COLLECTION_NAME, ENV_STRICT_SELF_REGISTRATION
from di_collection.di import ServiceCollection
from di_collection.observability.logging import clear_composition_context

# ============================================================================
# ENVIRONMENT ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure configuration never picks up the developer's environment."""
    monkeypatch.delenv(ENV_COLLECTION_NAME, raising=False)
    monkeypatch.delenv(ENV_STRICT_SELF_REGISTRATION, raising=False)
    yield
    clear_composition_context()


# ============================================================================
# COLLECTION FIXTURES
# ============================================================================


@pytest.fixture
def services() -> ServiceCollection:
    """Empty collection with default configuration."""
    return ServiceCollection()


@pytest.fixture
def strict_services() -> ServiceCollection:
    """Empty collection that rejects abstract self-registrations."""
    return ServiceCollection(
        config=RegistrationConfig(collection_name="strict", strict_self_registration=True)
    )
