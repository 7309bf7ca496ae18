"""Pytest configuration and fixtures for neo-authn tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from neo_authn.core.value_objects import TenantId, TokenValidationResult
from neo_authn.infrastructure.adapters import CaseInsensitivePatternBuilder
from neo_authn.infrastructure.repositories import (
    InMemoryTenantLookupProvider,
    InMemoryUserRepository,
)


@pytest.fixture
def pattern_builder():
    """Real case-insensitive pattern builder."""
    return CaseInsensitivePatternBuilder()


@pytest.fixture
def alice_record():
    """Stored administrator record."""
    return {
        "id": "u-alice",
        "object_type": "user",
        "username": "alice",
        "email": "alice@example.com",
        "password": "alice-secret",
        "access_level": 3,
    }


@pytest.fixture
def bob_record():
    """Stored writer record with a low access level."""
    return {
        "id": "u-bob",
        "object_type": "user",
        "username": "bob",
        "email": "bob@example.com",
        "password": "bob-secret",
        "access_level": 1,
    }


@pytest.fixture
def user_repository(alice_record, bob_record):
    """Global in-memory user store holding alice and bob."""
    return InMemoryUserRepository([alice_record, bob_record])


@pytest.fixture
def tenant_id():
    """Sample tenant identifier."""
    return TenantId("acme")


@pytest.fixture
def tenant_lookups(tenant_id):
    """Tenant provider where acme has its own carol."""
    provider = InMemoryTenantLookupProvider()
    provider.repository(tenant_id).add({
        "id": "u-carol",
        "object_type": "user",
        "username": "carol",
        "email": "carol@acme.test",
        "password": "carol-secret",
        "access_level": 2,
    })
    return provider


@pytest.fixture
def mock_lookup():
    """Mock global lookup collaborator."""
    lookup = MagicMock()
    lookup.load_by_predicate = AsyncMock(return_value=None)
    return lookup


@pytest.fixture
def mock_tenant_lookup():
    """Mock tenant-restricted lookup collaborator."""
    lookup = MagicMock()
    lookup.load_by_predicate = AsyncMock(return_value=None)
    return lookup


@pytest.fixture
def mock_tenant_lookups(mock_tenant_lookup):
    """Mock tenant provider always returning mock_tenant_lookup."""
    provider = MagicMock()
    provider.for_tenant = MagicMock(return_value=mock_tenant_lookup)
    return provider


@pytest.fixture
def mock_encryptor():
    """Mock encryptor producing a recognisable stored form."""
    encryptor = MagicMock()
    encryptor.encrypt = MagicMock(side_effect=lambda plaintext: f"enc({plaintext})")
    return encryptor


@pytest.fixture
def mock_token_service():
    """Mock token service reporting every token invalid."""
    service = MagicMock()
    service.validate_user_token = AsyncMock(return_value=TokenValidationResult.invalid())
    return service


@pytest.fixture
def mock_user_resolver():
    """Mock user resolver finding nobody."""
    resolver = MagicMock()
    resolver.get = AsyncMock(return_value=None)
    return resolver
