"""TikTok Ads payment redirect client.

Forwards a payment initiation to TikTok Ads and normalizes the reply into a
redirect target.
"""

import httpx
import logfire

from adgate.adapter.error import UpstreamRejectedError, UpstreamUnreachableError
from adgate.adapter.tiktok.payload import build_headers, build_payload, build_url
from adgate.domain.service.payment_service import PaymentGateway
from adgate.domain.value import PaymentRequest, RedirectTarget


class TikTokPaymentClient(PaymentGateway):
    """Base class for TikTok payment clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealTikTokPaymentClient(TikTokPaymentClient):
    """TikTok Ads payment client over HTTPS.

    Sends exactly one POST per call. Upstream success is ``code == 0`` with a
    ``data.form_html`` redirect URL; ``msg`` carries the upstream's reason
    otherwise.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize TikTok payment client.

        Args:
            base_url: Upstream origin (e.g. https://ads.tiktok.com)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (for tests)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def initiate_payment(self, request: PaymentRequest) -> RedirectTarget:
        """Send the payment redirect request and normalize the reply.

        Args:
            request: Shaped payment request

        Returns:
            Redirect target from ``data.form_html``

        Raises:
            UpstreamUnreachableError: On transport failure or non-2xx status
            UpstreamRejectedError: If the reply lacks the success code or redirect
        """
        ads_id = request.external_account_id.root

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout
            ) as client:
                response = await client.post(
                    build_url(self.base_url, request),
                    json=build_payload(request),
                    headers=build_headers(self.base_url, request),
                )
        except httpx.HTTPError as e:
            # Only the exception type: the request URL carries the msToken
            logfire.error(
                "TikTok payment request failed",
                ads_id=ads_id,
                error_type=type(e).__name__,
            )
            raise UpstreamUnreachableError(f"Transport error: {type(e).__name__}")

        logfire.info(
            "TikTok payment response received",
            ads_id=ads_id,
            status_code=response.status_code,
        )

        if not response.is_success:
            logfire.error(
                "TikTok payment request returned error status",
                ads_id=ads_id,
                status_code=response.status_code,
            )
            raise UpstreamUnreachableError(
                f"Upstream returned status {response.status_code}"
            )

        try:
            body = response.json()
        except ValueError:
            logfire.error("TikTok payment response is not JSON", ads_id=ads_id)
            raise UpstreamRejectedError()

        return self._parse_redirect(body, ads_id)

    @staticmethod
    def _parse_redirect(body: object, ads_id: str) -> RedirectTarget:
        """Extract the redirect URL from an upstream reply.

        Raises:
            UpstreamRejectedError: If the reply is not a success with a redirect
        """
        if not isinstance(body, dict):
            raise UpstreamRejectedError()

        message = body.get("msg") or None
        data = body.get("data")
        redirect_url = data.get("form_html") if isinstance(data, dict) else None

        if body.get("code") != 0 or not redirect_url:
            logfire.warn(
                "TikTok payment rejected",
                ads_id=ads_id,
                code=body.get("code"),
                upstream_message=message,
            )
            raise UpstreamRejectedError(message)

        return RedirectTarget(url=redirect_url)


class MockTikTokPaymentClient(TikTokPaymentClient):
    """Mock TikTok payment client for testing.

    Returns a deterministic redirect without network calls and records every
    request it receives. Set ``fail_with`` to make calls raise instead.
    """

    def __init__(self) -> None:
        """Initialize mock client without real upstream configuration."""
        self.requests: list[PaymentRequest] = []
        self.fail_with: Exception | None = None

    async def initiate_payment(self, request: PaymentRequest) -> RedirectTarget:
        """Record the request and return a mock redirect.

        Args:
            request: Shaped payment request

        Returns:
            Mock redirect target
        """
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        return RedirectTarget(
            url=(
                "https://ads.tiktok.com/payment/mock"
                f"?aadvid={request.external_account_id.root}"
                f"&amount={request.formatted_amount}"
            )
        )
