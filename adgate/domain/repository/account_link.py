"""Account link repository interface."""

from abc import ABC, abstractmethod

from adgate.domain.model.account_link import AccountLink
from adgate.domain.value import ExternalAccountId, IdentityId


class AccountLinkRepository(ABC):
    """Repository for AccountLink entity.

    Callers serialize writes per identity; implementations need not.
    """

    @abstractmethod
    async def exists(
        self, identity_id: IdentityId, external_account_id: ExternalAccountId
    ) -> bool:
        """Check whether a pair has already been recorded.

        Args:
            identity_id: The identity
            external_account_id: The external account

        Returns:
            True if the pair is recorded, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, link: AccountLink) -> AccountLink:
        """Record a link.

        Args:
            link: The link to record

        Returns:
            The recorded link
        """
        pass

    @abstractmethod
    async def find_by_identity(self, identity_id: IdentityId) -> list[AccountLink]:
        """Find links recorded for an identity.

        Args:
            identity_id: The identity

        Returns:
            List of links, newest first
        """
        pass
