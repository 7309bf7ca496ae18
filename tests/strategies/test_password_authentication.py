"""Tests for identifier and password authentication."""

import logging

import pytest
from unittest.mock import MagicMock

from neo_authn.core.exceptions import ConfigurationError, InvalidInputError, UserLookupError
from neo_authn.core.value_objects import Credentials, TenantId, UserPredicate
from neo_authn.strategies import AuthenticationStrategy, PasswordAuthentication


class TestPasswordAuthenticationValidation:
    """Proofs rejected before any lookup happens."""

    @pytest.fixture
    def strategy(self, mock_lookup, pattern_builder, mock_tenant_lookups):
        return PasswordAuthentication(mock_lookup, pattern_builder, mock_tenant_lookups)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("proof", [
        {"password": "x"},
        {"identifier": "bob"},
        {"identifier": "", "password": "x"},
        {"identifier": "bob", "password": ""},
        {"identifier": 42, "password": "x"},
        {"identifier": "bob", "password": None},
        {},
    ])
    async def test_missing_or_invalid_fields_rejected(self, strategy, mock_lookup, mock_tenant_lookups, proof):
        """Test missing identifier or password raises without a lookup."""
        with pytest.raises(InvalidInputError) as exc_info:
            await strategy.authenticate(proof)

        assert exc_info.value.field in ("identifier", "password")
        mock_lookup.load_by_predicate.assert_not_called()
        mock_tenant_lookups.for_tenant.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("proof", [None, "bob:x", 42, ["bob", "x"]])
    async def test_non_object_rejected(self, strategy, mock_lookup, proof):
        """Test a proof that is not a credentials object raises."""
        with pytest.raises(InvalidInputError) as exc_info:
            await strategy.authenticate(proof)

        assert exc_info.value.strategy == "PasswordAuthentication"
        mock_lookup.load_by_predicate.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_tenant_rejected(self, strategy, mock_lookup):
        """Test a tenant that is not a string or TenantId raises."""
        with pytest.raises(InvalidInputError):
            await strategy.authenticate({"identifier": "bob", "password": "x", "tenant": 7})

        mock_lookup.load_by_predicate.assert_not_called()

    def test_missing_collaborators_rejected(self, pattern_builder, mock_lookup):
        """Test constructor requires lookup and pattern builder."""
        with pytest.raises(ValueError):
            PasswordAuthentication(None, pattern_builder)
        with pytest.raises(ValueError):
            PasswordAuthentication(mock_lookup, None)

    def test_is_authentication_strategy(self, strategy):
        assert isinstance(strategy, AuthenticationStrategy)


class TestPasswordAuthenticationQuery:
    """Predicate construction and collaborator selection."""

    @pytest.fixture
    def strategy(self, mock_lookup, pattern_builder, mock_tenant_lookups):
        return PasswordAuthentication(mock_lookup, pattern_builder, mock_tenant_lookups)

    @pytest.mark.asyncio
    async def test_predicate_built_from_credentials(self, strategy, mock_lookup):
        """Test the lookup receives the expected predicate and record type."""
        await strategy.authenticate({"identifier": "Bob", "password": "x"})

        mock_lookup.load_by_predicate.assert_awaited_once()
        predicate, record_type = mock_lookup.load_by_predicate.await_args.args
        assert record_type == "user"
        assert isinstance(predicate, UserPredicate)
        assert predicate.object_type == "user"
        assert predicate.password == "x"
        assert predicate.min_access_level is None
        assert predicate.identifier_pattern.fullmatch("bob")
        assert predicate.identifier_pattern.fullmatch("BOB")
        assert not predicate.identifier_pattern.fullmatch("bobby")

    @pytest.mark.asyncio
    async def test_password_passed_verbatim(self, strategy, mock_lookup):
        """Test no hashing happens inside the password strategy."""
        await strategy.authenticate({"identifier": "bob", "password": "already-hashed"})

        predicate, _ = mock_lookup.load_by_predicate.await_args.args
        assert predicate.password == "already-hashed"

    @pytest.mark.asyncio
    async def test_min_access_level_added(self, strategy, mock_lookup):
        await strategy.authenticate({"identifier": "bob", "password": "x", "min_access_level": 2})

        predicate, _ = mock_lookup.load_by_predicate.await_args.args
        assert predicate.min_access_level == 2
        assert predicate.as_filter()["access_level"] == {"$gte": 2}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("level", ["2", None, True, float("nan")])
    async def test_non_numeric_access_level_ignored(self, strategy, mock_lookup, level):
        """Test only numeric levels add a privilege constraint."""
        await strategy.authenticate({"identifier": "bob", "password": "x", "min_access_level": level})

        predicate, _ = mock_lookup.load_by_predicate.await_args.args
        assert predicate.min_access_level is None
        assert "access_level" not in predicate.as_filter()

    @pytest.mark.asyncio
    async def test_legacy_field_names_accepted(self, strategy, mock_lookup, mock_tenant_lookups, mock_tenant_lookup):
        """Test username/access_level/site aliases."""
        await strategy.authenticate({"username": "bob", "password": "x", "access_level": 1, "site": "acme"})

        mock_tenant_lookups.for_tenant.assert_called_once_with(TenantId("acme"))
        predicate, _ = mock_tenant_lookup.load_by_predicate.await_args.args
        assert predicate.min_access_level == 1
        mock_lookup.load_by_predicate.assert_not_called()

    @pytest.mark.asyncio
    async def test_null_preferred_fields_fall_back_to_aliases(
        self, strategy, mock_lookup, mock_tenant_lookups, mock_tenant_lookup
    ):
        await strategy.authenticate({
            "identifier": "bob",
            "password": "x",
            "min_access_level": None,
            "access_level": 2,
            "tenant": None,
            "site": "acme",
        })

        mock_tenant_lookups.for_tenant.assert_called_once_with(TenantId("acme"))
        predicate, _ = mock_tenant_lookup.load_by_predicate.await_args.args
        assert predicate.min_access_level == 2
        mock_lookup.load_by_predicate.assert_not_called()

    @pytest.mark.asyncio
    async def test_tenant_uses_tenant_lookup_exclusively(
        self, strategy, mock_lookup, mock_tenant_lookups, mock_tenant_lookup
    ):
        user = {"id": "u-carol"}
        mock_tenant_lookup.load_by_predicate.return_value = user

        result = await strategy.authenticate({"identifier": "carol", "password": "x", "tenant": "acme"})

        assert result is user
        mock_tenant_lookups.for_tenant.assert_called_once_with(TenantId("acme"))
        mock_tenant_lookup.load_by_predicate.assert_awaited_once()
        mock_lookup.load_by_predicate.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_tenant_uses_global_lookup(self, strategy, mock_lookup, mock_tenant_lookups):
        await strategy.authenticate(Credentials(identifier="bob", password="x"))

        mock_lookup.load_by_predicate.assert_awaited_once()
        mock_tenant_lookups.for_tenant.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_tenant_treated_as_absent(self, strategy, mock_lookup, mock_tenant_lookups):
        await strategy.authenticate({"identifier": "bob", "password": "x", "tenant": ""})

        mock_lookup.load_by_predicate.assert_awaited_once()
        mock_tenant_lookups.for_tenant.assert_not_called()

    @pytest.mark.asyncio
    async def test_tenant_without_provider_is_configuration_error(self, mock_lookup, pattern_builder):
        strategy = PasswordAuthentication(mock_lookup, pattern_builder)

        with pytest.raises(ConfigurationError):
            await strategy.authenticate({"identifier": "bob", "password": "x", "tenant": "acme"})

        mock_lookup.load_by_predicate.assert_not_called()

    @pytest.mark.asyncio
    async def test_lookup_logged_without_secrets(self, strategy, caplog):
        caplog.set_level(logging.DEBUG, logger="neo_authn.strategies.password_authentication")

        await strategy.authenticate(
            {"identifier": "alice@example.com", "password": "top-secret", "min_access_level": 2}
        )

        assert "Looking up user al...om (tenant=None, min_access_level=2)" in caplog.text
        assert "top-secret" not in caplog.text
        assert "alice@example.com" not in caplog.text

    @pytest.mark.asyncio
    async def test_lookup_result_returned_verbatim(self, strategy, mock_lookup):
        user = MagicMock()
        mock_lookup.load_by_predicate.return_value = user

        assert await strategy.authenticate({"identifier": "bob", "password": "x"}) is user

    @pytest.mark.asyncio
    async def test_lookup_error_propagates_unmodified(self, strategy, mock_lookup):
        error = UserLookupError("database down")
        mock_lookup.load_by_predicate.side_effect = error

        with pytest.raises(UserLookupError) as exc_info:
            await strategy.authenticate({"identifier": "bob", "password": "x"})

        assert exc_info.value is error
        assert mock_lookup.load_by_predicate.await_count == 1

    @pytest.mark.asyncio
    async def test_foreign_lookup_error_not_wrapped(self, strategy, mock_lookup):
        mock_lookup.load_by_predicate.side_effect = TimeoutError("slow store")

        with pytest.raises(TimeoutError):
            await strategy.authenticate({"identifier": "bob", "password": "x"})


class TestPasswordAuthenticationMatching:
    """End-to-end matching against the in-memory store."""

    @pytest.fixture
    def strategy(self, user_repository, pattern_builder, tenant_lookups):
        return PasswordAuthentication(user_repository, pattern_builder, tenant_lookups)

    @pytest.mark.asyncio
    async def test_no_matching_record(self, strategy):
        """Test unknown credentials resolve to no user."""
        assert await strategy.authenticate({"identifier": "bob", "password": "x"}) is None

    @pytest.mark.asyncio
    async def test_match_by_username(self, strategy, bob_record):
        assert await strategy.authenticate({"identifier": "bob", "password": "bob-secret"}) is bob_record

    @pytest.mark.asyncio
    async def test_match_by_email_case_insensitive(self, strategy, alice_record):
        result = await strategy.authenticate({"identifier": "Alice@Example.com", "password": "alice-secret"})

        assert result is alice_record

    @pytest.mark.asyncio
    async def test_identifier_is_exact_not_substring(self, strategy):
        assert await strategy.authenticate({"identifier": "ali", "password": "alice-secret"}) is None
        assert await strategy.authenticate({"identifier": "alice.", "password": "alice-secret"}) is None

    @pytest.mark.asyncio
    async def test_password_is_case_sensitive(self, strategy):
        assert await strategy.authenticate({"identifier": "bob", "password": "BOB-SECRET"}) is None

    @pytest.mark.asyncio
    async def test_access_level_below_minimum(self, strategy):
        """Test bob at level 1 does not satisfy a minimum of 2."""
        result = await strategy.authenticate({"identifier": "bob", "password": "bob-secret", "min_access_level": 2})

        assert result is None

    @pytest.mark.asyncio
    async def test_access_level_at_minimum(self, strategy, bob_record):
        result = await strategy.authenticate({"identifier": "bob", "password": "bob-secret", "min_access_level": 1})

        assert result is bob_record

    @pytest.mark.asyncio
    async def test_tenant_does_not_fall_back_to_global(self, strategy):
        """Test global users are invisible to tenant-scoped credentials."""
        result = await strategy.authenticate({"identifier": "bob", "password": "bob-secret", "tenant": "acme"})

        assert result is None

    @pytest.mark.asyncio
    async def test_null_tenant_does_not_hide_site(self, strategy):
        """Test a null tenant key still scopes to the site alias."""
        result = await strategy.authenticate(
            {"identifier": "bob", "password": "bob-secret", "tenant": None, "site": "acme"}
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_null_min_access_level_does_not_hide_alias(self, strategy):
        """Test a null min_access_level still applies the access_level alias."""
        result = await strategy.authenticate(
            {"identifier": "bob", "password": "bob-secret", "min_access_level": None, "access_level": 2}
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_tenant_user_found_in_tenant(self, strategy):
        result = await strategy.authenticate({"identifier": "carol", "password": "carol-secret", "tenant": "acme"})

        assert result["id"] == "u-carol"

    @pytest.mark.asyncio
    async def test_tenant_user_invisible_globally(self, strategy):
        assert await strategy.authenticate({"identifier": "carol", "password": "carol-secret"}) is None

    @pytest.mark.asyncio
    async def test_unknown_tenant_matches_nobody(self, strategy):
        result = await strategy.authenticate({"identifier": "carol", "password": "carol-secret", "tenant": "other"})

        assert result is None
