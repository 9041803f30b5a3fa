"""Account link domain service."""

import asyncio
from collections import defaultdict

import logfire

from adgate.domain.error import ConsistencyError
from adgate.domain.model import AccountLink, Identity
from adgate.domain.repository import AccountLinkRepository, IdentityRepository
from adgate.domain.value import ExternalAccountId, IdentityId, LinkOutcome, LinkResult

from .base import Service


class IdentityLocks:
    """Process-wide registry of per-identity locks.

    Must be shared by every AccountLinkService instance in the process.
    """

    def __init__(self) -> None:
        self._locks: dict[IdentityId, asyncio.Lock] = defaultdict(asyncio.Lock)

    def lock_for(self, identity_id: IdentityId) -> asyncio.Lock:
        """Get the lock guarding an identity's link state."""
        return self._locks[identity_id]


class AccountLinkService(Service):
    """Domain service enforcing per-identity account link quotas."""

    def __init__(
        self,
        account_link_repository: AccountLinkRepository,
        identity_repository: IdentityRepository,
        identity_locks: IdentityLocks,
    ) -> None:
        """Initialize account link service.

        Args:
            account_link_repository: Account link repository
            identity_repository: Identity repository
            identity_locks: Shared per-identity lock registry
        """
        self.account_link_repository = account_link_repository
        self.identity_repository = identity_repository
        self.identity_locks = identity_locks

    async def ensure_linked(
        self, identity: Identity, external_account_id: ExternalAccountId
    ) -> LinkResult:
        """Link an external account to an identity, idempotently.

        - Pair already recorded: ALREADY_LINKED, nothing changes
        - No quota left: LIMIT_REACHED, nothing changes
        - Otherwise the pair is recorded and the identity's count goes up by one

        The check and the write run under the identity's lock against a fresh
        read of the identity, so concurrent calls cannot overrun the limit.

        Args:
            identity: Authorized identity
            external_account_id: Account to link

        Returns:
            Link result with the outcome and the identity's limit

        Raises:
            ConsistencyError: If the identity disappeared from the store
        """
        with logfire.span(
            "link_service.ensure_linked",
            identity_id=str(identity.id),
            external_account_id=external_account_id.root,
        ):
            async with self.identity_locks.lock_for(identity.id):
                current = await self.identity_repository.find_by_id(identity.id)
                if not current:
                    logfire.error(
                        "Identity missing during link", identity_id=str(identity.id)
                    )
                    raise ConsistencyError(f"Identity {identity.id} is missing")

                if await self.account_link_repository.exists(
                    current.id, external_account_id
                ):
                    logfire.info(
                        "Account already linked",
                        identity_id=str(current.id),
                        external_account_id=external_account_id.root,
                    )
                    return LinkResult(
                        outcome=LinkOutcome.ALREADY_LINKED,
                        limit=current.link_limit,
                        linked_account_count=current.linked_account_count,
                    )

                if not current.has_capacity:
                    logfire.warn(
                        "Account link limit reached",
                        identity_id=str(current.id),
                        external_account_id=external_account_id.root,
                        limit=current.link_limit,
                    )
                    return LinkResult(
                        outcome=LinkOutcome.LIMIT_REACHED,
                        limit=current.link_limit,
                        linked_account_count=current.linked_account_count,
                    )

                await self.account_link_repository.save(
                    AccountLink(
                        identity_id=current.id,
                        external_account_id=external_account_id,
                    )
                )
                updated = await self.identity_repository.save(
                    current.updated(
                        linked_account_count=current.linked_account_count + 1
                    )
                )
                logfire.info(
                    "Account linked",
                    identity_id=str(updated.id),
                    external_account_id=external_account_id.root,
                    linked_account_count=updated.linked_account_count,
                    limit=updated.link_limit,
                )
                return LinkResult(
                    outcome=LinkOutcome.NEWLY_LINKED,
                    limit=updated.link_limit,
                    linked_account_count=updated.linked_account_count,
                )

    async def list_links(self, identity_id: IdentityId) -> list[AccountLink]:
        """List accounts linked to an identity, newest first.

        Args:
            identity_id: Identity ID

        Returns:
            Recorded links
        """
        with logfire.span("link_service.list_links", identity_id=str(identity_id)):
            links = await self.account_link_repository.find_by_identity(identity_id)
            logfire.info(
                "Links listed", identity_id=str(identity_id), count=len(links)
            )
            return links
