"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class UpstreamError(ProviderError):
    """Payment API call failed.

    Messages never include upstream credentials.
    """

    pass


class UpstreamUnreachableError(UpstreamError):
    """Transport failure or error status from the payment API.

    Safe to retry with a fresh amount check.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UpstreamRejectedError(UpstreamError):
    """Payment API answered but declined or returned no redirect.

    Definitive upstream decision; not retryable as-is.
    """

    def __init__(self, message: str | None = None):
        self.upstream_message = message
        super().__init__(message or "Upstream rejected the request")
