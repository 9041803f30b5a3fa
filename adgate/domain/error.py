"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MalformedInputError(ValidationError):
    """Raised when request parameters are missing or invalid.

    Client error; the caller must correct the input before retrying.
    """

    def __init__(self, message: str = "Missing or invalid parameters"):
        super().__init__(message)


class InvalidCredentialError(DomainError):
    """Raised when a presented credential does not resolve to an identity.

    Covers missing, unknown, revoked, expired and badly signed credentials
    alike. Never retried.
    """

    def __init__(self, reason: str = "Invalid credential"):
        self.reason = reason
        super().__init__(reason)


class ConsistencyError(DomainError):
    """Raised when stored state violates an internal invariant.

    For example an active API key bound to an identity that does not exist.
    Not a client error and not retryable.
    """

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class LimitReachedError(BusinessRuleViolationError):
    """Raised when an identity has no link quota left for a new account."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Account limit reached ({limit})")


class SharedIdentityError(BusinessRuleViolationError):
    """Raised when the shared PIN identity attempts to manage API keys or tokens."""

    def __init__(self):
        super().__init__("Shared credentials cannot manage API keys")


class NotAuthorizedError(DomainError):
    """Raised when an identity acts on a resource it doesn't own."""

    def __init__(self, resource: str, resource_id: str, identity_id: str):
        super().__init__(
            f"Identity {identity_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
