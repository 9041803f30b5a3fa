"""Unit tests for normalized failure responses."""

import json

import pytest

from adgate.adapter.error import UpstreamRejectedError, UpstreamUnreachableError
from adgate.domain.error import (
    ConsistencyError,
    InvalidCredentialError,
    LimitReachedError,
    MalformedInputError,
    NotAuthorizedError,
    NotFoundError,
    SharedIdentityError,
)
from adgate.interface.error import failure_response


def render(exc: Exception) -> tuple[int, dict]:
    response = failure_response(exc)
    return response.status_code, json.loads(response.body)


class TestFailureResponse:
    """Tests for failure_response."""

    @pytest.mark.parametrize(
        ("exc", "status_code", "body"),
        [
            (
                InvalidCredentialError("Credential scheme disabled"),
                401,
                {"status": False, "error": "Invalid credential"},
            ),
            (
                LimitReachedError(10),
                400,
                {"status": False, "error": "Account limit reached (10)"},
            ),
            (
                MalformedInputError(),
                400,
                {"status": False, "message": "Missing or invalid parameters"},
            ),
            (
                UpstreamUnreachableError("Transport error: ConnectError"),
                500,
                {
                    "status": False,
                    "message": "Failed to process request via payment API.",
                },
            ),
            (
                UpstreamRejectedError("Card declined"),
                400,
                {"status": False, "message": "Card declined"},
            ),
            (
                UpstreamRejectedError(),
                400,
                {"status": False, "message": "Upstream rejected the request"},
            ),
            (
                ConsistencyError("Identity missing"),
                500,
                {"status": False, "error": "Internal error"},
            ),
            (
                SharedIdentityError(),
                403,
                {"status": False, "error": "Shared credentials cannot manage API keys"},
            ),
            (
                NotFoundError("ApiKey", "ak_12345..."),
                404,
                {"status": False, "error": "API key not found"},
            ),
            (
                NotAuthorizedError("ApiKey", "ak_12345...", "someone"),
                404,
                {"status": False, "error": "API key not found"},
            ),
        ],
    )
    def test_maps_errors(self, exc, status_code, body):
        """Each failure kind has a fixed status and body."""
        assert render(exc) == (status_code, body)

    def test_credential_reason_is_not_leaked(self):
        """Internal rejection reasons stay out of the response."""
        _, body = render(InvalidCredentialError("Identity not found"))

        assert "Identity not found" not in json.dumps(body)
