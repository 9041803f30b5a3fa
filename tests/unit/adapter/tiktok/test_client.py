"""Unit tests for the TikTok payment client."""

import json
from decimal import Decimal

import httpx
import pytest

from adgate.adapter.error import UpstreamRejectedError, UpstreamUnreachableError
from adgate.adapter.tiktok import MockTikTokPaymentClient, RealTikTokPaymentClient
from adgate.adapter.tiktok.payload import REDIRECT_PATH
from adgate.domain.value import ExternalAccountId, PaymentRequest, UpstreamTokens

BASE_URL = "https://upstream.test"
REDIRECT_URL = "https://pay.example.com/checkout?session=abc"


def make_request(amount: str = "10.5", cookies: str | None = None) -> PaymentRequest:
    return PaymentRequest(
        external_account_id=ExternalAccountId("7001"),
        amount=Decimal(amount),
        upstream_tokens=UpstreamTokens(
            csrftoken="csrf-value", mstoken="ms-value", cookies=cookies
        ),
    )


def make_client(handler) -> RealTikTokPaymentClient:
    return RealTikTokPaymentClient(
        base_url=BASE_URL, transport=httpx.MockTransport(handler)
    )


class TestRealTikTokPaymentClient:
    """Tests for RealTikTokPaymentClient."""

    @pytest.mark.asyncio
    async def test_success_returns_redirect(self):
        """A zero code with form_html yields the redirect."""
        # Arrange
        client = make_client(
            lambda request: httpx.Response(
                200, json={"code": 0, "msg": "", "data": {"form_html": REDIRECT_URL}}
            )
        )

        # Act
        target = await client.initiate_payment(make_request())

        # Assert
        assert target.url == REDIRECT_URL

    @pytest.mark.asyncio
    async def test_sends_single_shaped_request(self):
        """The request carries the account, tokens and formatted amount."""
        # Arrange
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200, json={"code": 0, "data": {"form_html": REDIRECT_URL}}
            )

        client = make_client(handler)

        # Act
        await client.initiate_payment(make_request(cookies="sessionid=xyz"))

        # Assert
        assert len(captured) == 1
        sent = captured[0]
        assert sent.method == "POST"
        assert sent.url.host == "upstream.test"
        assert sent.url.path == REDIRECT_PATH
        assert sent.url.params["aadvid"] == "7001"
        assert sent.url.params["msToken"] == "ms-value"
        assert sent.headers["x-csrftoken"] == "csrf-value"
        assert sent.headers["cookie"] == "csrftoken=csrf-value; sessionid=xyz"
        assert sent.headers["trace-log-adv-id"] == "7001"
        body = json.loads(sent.content)
        assert body["amount"] == "10.50"
        assert body["risk_info"]["cookie_enabled"] is True

    @pytest.mark.asyncio
    async def test_cookie_header_without_extra_cookies(self):
        """Only the CSRF cookie is sent when no extra cookies are given."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200, json={"code": 0, "data": {"form_html": REDIRECT_URL}}
            )

        await make_client(handler).initiate_payment(make_request())

        assert captured[0].headers["cookie"] == "csrftoken=csrf-value"

    @pytest.mark.asyncio
    async def test_rejection_carries_upstream_message(self):
        """A non-zero code is a rejection with the upstream's message."""
        client = make_client(
            lambda request: httpx.Response(
                200, json={"code": 40001, "msg": "Insufficient permission"}
            )
        )

        with pytest.raises(UpstreamRejectedError) as exc_info:
            await client.initiate_payment(make_request())

        assert exc_info.value.upstream_message == "Insufficient permission"
        assert str(exc_info.value) == "Insufficient permission"

    @pytest.mark.asyncio
    async def test_success_code_without_redirect_is_rejection(self):
        """A zero code without form_html is still a rejection."""
        client = make_client(
            lambda request: httpx.Response(200, json={"code": 0, "data": {}})
        )

        with pytest.raises(UpstreamRejectedError) as exc_info:
            await client.initiate_payment(make_request())

        assert exc_info.value.upstream_message is None

    @pytest.mark.asyncio
    async def test_non_json_body_is_rejection(self):
        """An unparsable body is treated as a rejection."""
        client = make_client(
            lambda request: httpx.Response(200, text="<html>blocked</html>")
        )

        with pytest.raises(UpstreamRejectedError):
            await client.initiate_payment(make_request())

    @pytest.mark.asyncio
    async def test_error_status_is_unreachable(self):
        """A non-2xx status means the payment API could not process it."""
        client = make_client(lambda request: httpx.Response(502, text="bad gateway"))

        with pytest.raises(UpstreamUnreachableError, match="502"):
            await client.initiate_payment(make_request())

    @pytest.mark.asyncio
    async def test_transport_error_is_unreachable(self):
        """Connection failures surface as UpstreamUnreachableError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamUnreachableError) as exc_info:
            await make_client(handler).initiate_payment(make_request())

        # Transport details that may include tokens are not exposed
        assert "ms-value" not in str(exc_info.value)


class TestMockTikTokPaymentClient:
    """Tests for MockTikTokPaymentClient."""

    @pytest.mark.asyncio
    async def test_records_requests(self):
        """The mock records requests and returns a deterministic redirect."""
        client = MockTikTokPaymentClient()

        target = await client.initiate_payment(make_request("5"))

        assert client.requests == [make_request("5")]
        assert "aadvid=7001" in target.url
        assert "amount=5.00" in target.url

    @pytest.mark.asyncio
    async def test_fail_with(self):
        """Configured failures are raised."""
        client = MockTikTokPaymentClient()
        client.fail_with = UpstreamRejectedError("nope")

        with pytest.raises(UpstreamRejectedError):
            await client.initiate_payment(make_request())
