"""Identity aggregate root.

An identity is an authorized principal holding a quota of advertiser
account links.
"""

from datetime import datetime

from pydantic import Field, model_validator

from adgate.domain.model.common import DomainModel
from adgate.domain.value import SHARED_IDENTITY_ID, IdentityId


class Identity(DomainModel):
    """Identity aggregate root.

    Business rules:
    - linked_account_count never exceeds link_limit
    - linked_account_count only changes when a new account is linked
    - Identities are never deleted within a process lifetime
    """

    id: IdentityId
    name: str = Field(min_length=1, max_length=100)
    linked_account_count: int = Field(default=0, ge=0)
    link_limit: int = Field(default=10, gt=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_quota(self) -> "Identity":
        """Reject states where more accounts are linked than allowed."""
        if self.linked_account_count > self.link_limit:
            raise ValueError("linked_account_count exceeds link_limit")
        return self

    @property
    def is_shared(self) -> bool:
        """Whether this is the implicit identity behind PIN credentials."""
        return self.id == SHARED_IDENTITY_ID

    @property
    def has_capacity(self) -> bool:
        """Whether another account can still be linked."""
        return self.linked_account_count < self.link_limit

    @classmethod
    def shared(cls, link_limit: int) -> "Identity":
        """Build the implicit identity shared by all PIN holders."""
        return cls(id=SHARED_IDENTITY_ID, name="shared", link_limit=link_limit)
