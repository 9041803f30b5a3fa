"""In-memory account link repository."""

from adgate.domain.model.account_link import AccountLink
from adgate.domain.repository.account_link import AccountLinkRepository
from adgate.domain.value import ExternalAccountId, IdentityId


class InMemoryAccountLinkRepository(AccountLinkRepository):
    """In-memory implementation of AccountLinkRepository."""

    def __init__(self) -> None:
        self._links: dict[tuple[IdentityId, ExternalAccountId], AccountLink] = {}

    async def exists(
        self, identity_id: IdentityId, external_account_id: ExternalAccountId
    ) -> bool:
        """Check whether a pair has already been recorded."""
        return (identity_id, external_account_id) in self._links

    async def save(self, link: AccountLink) -> AccountLink:
        """Record a link, keeping the first recording of a pair."""
        key = (link.identity_id, link.external_account_id)
        return self._links.setdefault(key, link)

    async def find_by_identity(self, identity_id: IdentityId) -> list[AccountLink]:
        """Find links recorded for an identity, newest first."""
        matches = [
            link for link in self._links.values() if link.identity_id == identity_id
        ]
        matches.sort(key=lambda link: link.created_at, reverse=True)
        return matches
