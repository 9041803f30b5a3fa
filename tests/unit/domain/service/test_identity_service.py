"""Unit tests for IdentityService."""

from uuid import uuid4

import pytest

from adgate.domain.error import NotAuthorizedError, NotFoundError
from adgate.domain.repository import ApiKeyRepository
from adgate.domain.service import IdentityService
from adgate.domain.model.api_key import API_KEY_PREFIX
from adgate.domain.value import IdentityId
from tests.di.config import TEST_LINK_LIMIT
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_uses_configured_limit(self, unit_env):
        """New identities get the configured link limit and no links."""
        identity_service = await unit_env.get(IdentityService)

        identity = await identity_service.register("alice")

        assert identity.name == "alice"
        assert identity.link_limit == TEST_LINK_LIMIT
        assert identity.linked_account_count == 0
        assert not identity.is_shared

    @pytest.mark.asyncio
    async def test_register_with_explicit_limit(self, unit_env):
        """An explicit limit overrides the configured one."""
        identity_service = await unit_env.get(IdentityService)

        identity = await identity_service.register("alice", link_limit=1)

        assert identity.link_limit == 1
        assert (await identity_service.get_by_id(identity.id)) == identity

    @pytest.mark.asyncio
    async def test_get_unknown_identity_raises(self, unit_env):
        """Looking up an unknown identity raises NotFoundError."""
        identity_service = await unit_env.get(IdentityService)

        with pytest.raises(NotFoundError):
            await identity_service.get_by_id(IdentityId(uuid4()))


class TestApiKeys:
    """Tests for API key issuance and revocation."""

    @pytest.mark.asyncio
    async def test_issue_api_key(self, unit_env):
        """Issued keys are active, prefixed and bound to their identity."""
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        api_key_repo = await unit_env.get(ApiKeyRepository)
        identity = await identity_service.register("alice")

        # Act
        api_key = await identity_service.issue_api_key(identity.id)

        # Assert
        assert api_key.active
        assert api_key.key.startswith(API_KEY_PREFIX)
        assert api_key.identity_id == identity.id
        assert await api_key_repo.find_by_key(api_key.key) == api_key

    @pytest.mark.asyncio
    async def test_issued_keys_are_unique(self, unit_env):
        """Each issuance produces a different key."""
        identity_service = await unit_env.get(IdentityService)
        identity = await identity_service.register("alice")

        first = await identity_service.issue_api_key(identity.id)
        second = await identity_service.issue_api_key(identity.id)

        assert first.key != second.key

    @pytest.mark.asyncio
    async def test_issue_for_unknown_identity_raises(self, unit_env):
        """Keys are never bound to identities that do not exist."""
        identity_service = await unit_env.get(IdentityService)

        with pytest.raises(NotFoundError):
            await identity_service.issue_api_key(IdentityId(uuid4()))

    @pytest.mark.asyncio
    async def test_revoke_api_key(self, unit_env):
        """Revocation deactivates the key and stamps the time."""
        identity_service = await unit_env.get(IdentityService)
        identity = await identity_service.register("alice")
        api_key = await identity_service.issue_api_key(identity.id)

        revoked = await identity_service.revoke_api_key(identity.id, api_key.key)

        assert not revoked.active
        assert revoked.revoked_at is not None

    @pytest.mark.asyncio
    async def test_revoke_twice_is_noop(self, unit_env):
        """Revoking an already revoked key keeps the first revocation time."""
        identity_service = await unit_env.get(IdentityService)
        identity = await identity_service.register("alice")
        api_key = await identity_service.issue_api_key(identity.id)

        first = await identity_service.revoke_api_key(identity.id, api_key.key)
        second = await identity_service.revoke_api_key(identity.id, api_key.key)

        assert second.revoked_at == first.revoked_at

    @pytest.mark.asyncio
    async def test_revoke_unknown_key_raises(self, unit_env):
        """Revoking a key that was never issued raises NotFoundError."""
        identity_service = await unit_env.get(IdentityService)
        identity = await identity_service.register("alice")

        with pytest.raises(NotFoundError):
            await identity_service.revoke_api_key(identity.id, "ak_missing")

    @pytest.mark.asyncio
    async def test_revoke_other_identity_key_raises(self, unit_env):
        """An identity cannot revoke another identity's key."""
        identity_service = await unit_env.get(IdentityService)
        alice = await identity_service.register("alice")
        bob = await identity_service.register("bob")
        bobs_key = await identity_service.issue_api_key(bob.id)

        with pytest.raises(NotAuthorizedError):
            await identity_service.revoke_api_key(alice.id, bobs_key.key)
