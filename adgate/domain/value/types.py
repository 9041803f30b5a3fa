"""Domain value objects for the gateway.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from adgate.domain.value.common import RootValueObject, ValueObject

_CENT = Decimal("0.01")


class CredentialScheme(str, Enum):
    """Supported credential schemes."""

    PIN = "pin"
    API_KEY = "api_key"
    SESSION = "session"


class PinCredential(ValueObject):
    """Shared secret drawn from the configured PIN set."""

    scheme: Literal[CredentialScheme.PIN] = CredentialScheme.PIN
    pin: str


class ApiKeyCredential(ValueObject):
    """Issued API key bound to exactly one identity."""

    scheme: Literal[CredentialScheme.API_KEY] = CredentialScheme.API_KEY
    key: str


class SessionTokenCredential(ValueObject):
    """Signed, time-bound session token asserting an identity."""

    scheme: Literal[CredentialScheme.SESSION] = CredentialScheme.SESSION
    token: str


Credential = Annotated[
    Union[PinCredential, ApiKeyCredential, SessionTokenCredential],
    Field(discriminator="scheme"),
]


class ExternalAccountId(RootValueObject[str]):
    """Advertiser account identifier on the upstream platform (``aadvid``)."""

    @field_validator("root")
    @classmethod
    def validate_account_id(cls, v: str) -> str:
        """Validate account id is non-empty and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("External account id must be 1-255 characters")
        return v


class LinkOutcome(str, Enum):
    """Outcome of ensuring an account link."""

    NEWLY_LINKED = "newly_linked"
    ALREADY_LINKED = "already_linked"
    LIMIT_REACHED = "limit_reached"


class LinkResult(ValueObject):
    """Result of an ensure-linked operation."""

    outcome: LinkOutcome
    limit: int
    linked_account_count: int

    @property
    def succeeded(self) -> bool:
        """Whether the account is linked after the operation."""
        return self.outcome != LinkOutcome.LIMIT_REACHED


class UpstreamTokens(ValueObject):
    """Caller-supplied tokens authenticating to the upstream payment API.

    Never logged.
    """

    csrftoken: str = Field(min_length=1)
    mstoken: str = Field(min_length=1)
    cookies: str | None = None


class PaymentRequest(ValueObject):
    """Ephemeral request for a single payment initiation."""

    external_account_id: ExternalAccountId
    amount: Decimal
    upstream_tokens: UpstreamTokens

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        """Validate amount is a positive finite decimal of at least one cent."""
        if not v.is_finite():
            raise ValueError("Amount must be finite")
        if v.quantize(_CENT, rounding=ROUND_HALF_UP) <= 0:
            raise ValueError("Amount must be positive")
        return v

    @property
    def formatted_amount(self) -> str:
        """Amount rendered with exactly two decimal places."""
        return str(self.amount.quantize(_CENT, rounding=ROUND_HALF_UP))


class RedirectTarget(ValueObject):
    """Redirect instruction returned by a successful payment initiation."""

    url: str


class RequestStage(str, Enum):
    """Stages of a single gateway request."""

    RECEIVED = "received"
    CREDENTIAL_CHECKED = "credential_checked"
    LINK_ENSURED = "link_ensured"
    PROXY_COMPLETED = "proxy_completed"
    RESPONDED = "responded"
