"""Credential extraction from request bodies and headers."""

from typing import Any

from pydantic import BaseModel

from adgate.domain.value import (
    ApiKeyCredential,
    Credential,
    PinCredential,
    SessionTokenCredential,
)

BEARER_PREFIX = "bearer "


class CredentialFields(BaseModel):
    """Credential fields accepted in any request body.

    Values stay untyped so a mistyped credential is refused as an invalid
    credential rather than as malformed input.
    """

    pin: Any = None
    api_key: Any = None
    token: Any = None


def _presented(value: Any) -> bool:
    return value is not None and not (isinstance(value, str) and not value.strip())


def _body_credential(fields: CredentialFields) -> tuple[bool, Credential | None]:
    for scheme in ("pin", "api_key", "token"):
        value = getattr(fields, scheme)
        if not _presented(value):
            continue
        if not isinstance(value, str):
            # Mistyped; never replaced by a lower-precedence credential
            return True, None
        match scheme:
            case "pin":
                return True, PinCredential(pin=value)
            case "api_key":
                return True, ApiKeyCredential(key=value)
            case _:
                return True, SessionTokenCredential(token=value)
    return False, None


def extract_credential(
    fields: CredentialFields | None, authorization: str | None = None
) -> Credential | None:
    """Pick the credential presented with a request.

    Body fields win over the ``Authorization`` header, in the order pin,
    api_key, token. Blank values count as absent. A body credential that is
    not a string yields None, which verification refuses.

    Args:
        fields: Credential fields from the body, if any
        authorization: Raw ``Authorization`` header value

    Returns:
        The credential, or None if no usable one was presented
    """
    if fields is not None:
        presented, credential = _body_credential(fields)
        if presented:
            return credential

    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return SessionTokenCredential(token=token)

    return None
