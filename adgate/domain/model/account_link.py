"""Account link entity.

Associates an identity with an external advertiser account and consumes
one unit of the identity's link quota.
"""

from datetime import datetime

from pydantic import Field

from adgate.domain.model.common import DomainModel
from adgate.domain.value import ExternalAccountId, IdentityId


class AccountLink(DomainModel):
    """Recorded (identity, external account) pair.

    A pair is recorded at most once and lives for the process lifetime.
    There is no unlink.
    """

    identity_id: IdentityId
    external_account_id: ExternalAccountId
    created_at: datetime = Field(default_factory=datetime.now)
