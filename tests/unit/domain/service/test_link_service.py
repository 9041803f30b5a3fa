"""Unit tests for AccountLinkService."""

import asyncio
from uuid import uuid4

import pytest

from adgate.domain.error import ConsistencyError
from adgate.domain.model import Identity
from adgate.domain.repository import IdentityRepository
from adgate.domain.service import AccountLinkService, IdentityLocks, IdentityService
from adgate.domain.value import (
    SHARED_IDENTITY_ID,
    ExternalAccountId,
    IdentityId,
    LinkOutcome,
)
from adgate.persistence.repository.inmemory import (
    InMemoryAccountLinkRepository,
    InMemoryIdentityRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class YieldingAccountLinkRepository(InMemoryAccountLinkRepository):
    """In-memory repository that yields to the event loop on every call.

    Makes interleaving between concurrent link attempts observable.
    """

    async def exists(self, identity_id, external_account_id):
        await asyncio.sleep(0)
        return await super().exists(identity_id, external_account_id)

    async def save(self, link):
        await asyncio.sleep(0)
        return await super().save(link)


def make_identity(link_limit: int) -> Identity:
    return Identity(id=IdentityId(uuid4()), name="tester", link_limit=link_limit)


class TestEnsureLinked:
    """Tests for ensure_linked."""

    @pytest.mark.asyncio
    async def test_links_new_account(self, unit_env):
        """A new account is linked and counted."""
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        link_service = await unit_env.get(AccountLinkService)
        identity = await identity_service.register("alice", link_limit=2)

        # Act
        result = await link_service.ensure_linked(identity, ExternalAccountId("A"))

        # Assert
        assert result.outcome == LinkOutcome.NEWLY_LINKED
        assert result.linked_account_count == 1
        assert result.limit == 2
        stored = await identity_service.get_by_id(identity.id)
        assert stored.linked_account_count == 1

    @pytest.mark.asyncio
    async def test_linking_twice_is_idempotent(self, unit_env):
        """Linking the same account again changes nothing."""
        identity_service = await unit_env.get(IdentityService)
        link_service = await unit_env.get(AccountLinkService)
        identity = await identity_service.register("alice", link_limit=2)

        await link_service.ensure_linked(identity, ExternalAccountId("A"))
        result = await link_service.ensure_linked(identity, ExternalAccountId("A"))

        assert result.outcome == LinkOutcome.ALREADY_LINKED
        assert result.linked_account_count == 1
        assert len(await link_service.list_links(identity.id)) == 1

    @pytest.mark.asyncio
    async def test_limit_reached_for_new_account(self, unit_env):
        """A new account beyond the quota is refused without state change."""
        # Arrange
        identity_service = await unit_env.get(IdentityService)
        link_service = await unit_env.get(AccountLinkService)
        identity = await identity_service.register("alice", link_limit=1)
        await link_service.ensure_linked(identity, ExternalAccountId("A"))

        # Act
        result = await link_service.ensure_linked(identity, ExternalAccountId("B"))

        # Assert
        assert result.outcome == LinkOutcome.LIMIT_REACHED
        assert not result.succeeded
        assert result.limit == 1
        links = await link_service.list_links(identity.id)
        assert [link.external_account_id.root for link in links] == ["A"]

    @pytest.mark.asyncio
    async def test_already_linked_account_allowed_at_limit(self, unit_env):
        """An identity at its limit can still use accounts it already linked."""
        identity_service = await unit_env.get(IdentityService)
        link_service = await unit_env.get(AccountLinkService)
        identity = await identity_service.register("alice", link_limit=1)
        await link_service.ensure_linked(identity, ExternalAccountId("A"))

        result = await link_service.ensure_linked(identity, ExternalAccountId("A"))

        assert result.outcome == LinkOutcome.ALREADY_LINKED

    @pytest.mark.asyncio
    async def test_links_are_per_identity(self, unit_env):
        """The same account may be linked by several identities."""
        identity_service = await unit_env.get(IdentityService)
        link_service = await unit_env.get(AccountLinkService)
        alice = await identity_service.register("alice", link_limit=1)
        bob = await identity_service.register("bob", link_limit=1)

        first = await link_service.ensure_linked(alice, ExternalAccountId("A"))
        second = await link_service.ensure_linked(bob, ExternalAccountId("A"))

        assert first.outcome == LinkOutcome.NEWLY_LINKED
        assert second.outcome == LinkOutcome.NEWLY_LINKED

    @pytest.mark.asyncio
    async def test_uses_fresh_identity_state(self, unit_env):
        """A stale identity snapshot cannot bypass the stored count."""
        identity_service = await unit_env.get(IdentityService)
        link_service = await unit_env.get(AccountLinkService)
        stale = await identity_service.register("alice", link_limit=1)
        await link_service.ensure_linked(stale, ExternalAccountId("A"))

        result = await link_service.ensure_linked(stale, ExternalAccountId("B"))

        assert result.outcome == LinkOutcome.LIMIT_REACHED

    @pytest.mark.asyncio
    async def test_missing_identity_is_consistency_error(self, unit_env):
        """Linking for an identity absent from the store is corrupt state."""
        link_service = await unit_env.get(AccountLinkService)

        with pytest.raises(ConsistencyError):
            await link_service.ensure_linked(
                make_identity(link_limit=1), ExternalAccountId("A")
            )


class TestConcurrentLinking:
    """Concurrent link attempts for one identity never overrun its quota."""

    @pytest.mark.asyncio
    async def test_distinct_accounts_respect_limit(self):
        """Only `limit` of many concurrent new accounts are linked."""
        # Arrange
        identity = make_identity(link_limit=2)
        identity_repo = InMemoryIdentityRepository(seed=[identity])
        link_repo = YieldingAccountLinkRepository()
        locks = IdentityLocks()
        # One service per simulated request, sharing the lock registry
        services = [
            AccountLinkService(link_repo, identity_repo, locks) for _ in range(5)
        ]

        # Act
        results = await asyncio.gather(
            *(
                service.ensure_linked(identity, ExternalAccountId(f"acct-{i}"))
                for i, service in enumerate(services)
            )
        )

        # Assert
        outcomes = [result.outcome for result in results]
        assert outcomes.count(LinkOutcome.NEWLY_LINKED) == 2
        assert outcomes.count(LinkOutcome.LIMIT_REACHED) == 3
        stored = await identity_repo.find_by_id(identity.id)
        assert stored.linked_account_count == 2
        assert len(await link_repo.find_by_identity(identity.id)) == 2

    @pytest.mark.asyncio
    async def test_same_account_linked_once(self):
        """Concurrent attempts on one account record a single link."""
        identity = make_identity(link_limit=3)
        identity_repo = InMemoryIdentityRepository(seed=[identity])
        link_repo = YieldingAccountLinkRepository()
        service = AccountLinkService(link_repo, identity_repo, IdentityLocks())

        results = await asyncio.gather(
            *(service.ensure_linked(identity, ExternalAccountId("A")) for _ in range(4))
        )

        outcomes = [result.outcome for result in results]
        assert outcomes.count(LinkOutcome.NEWLY_LINKED) == 1
        assert outcomes.count(LinkOutcome.ALREADY_LINKED) == 3
        stored = await identity_repo.find_by_id(identity.id)
        assert stored.linked_account_count == 1


class TestListLinks:
    """Tests for list_links."""

    @pytest.mark.asyncio
    async def test_lists_only_own_links(self, unit_env):
        """Links of other identities are not listed."""
        identity_service = await unit_env.get(IdentityService)
        link_service = await unit_env.get(AccountLinkService)
        alice = await identity_service.register("alice")
        bob = await identity_service.register("bob")
        await link_service.ensure_linked(alice, ExternalAccountId("A"))
        await link_service.ensure_linked(bob, ExternalAccountId("B"))

        links = await link_service.list_links(alice.id)

        assert [link.external_account_id.root for link in links] == ["A"]

    @pytest.mark.asyncio
    async def test_shared_identity_links_are_shared(self, unit_env):
        """All PIN holders see the shared identity's links."""
        identity_repo = await unit_env.get(IdentityRepository)
        link_service = await unit_env.get(AccountLinkService)
        shared = await identity_repo.find_by_id(SHARED_IDENTITY_ID)

        await link_service.ensure_linked(shared, ExternalAccountId("A"))

        assert len(await link_service.list_links(shared.id)) == 1

