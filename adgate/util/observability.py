"""Logfire setup for the gateway.

Spans wrap each use case and each outbound payment call. Attributes carry
identity ids, ads ids and request stages; PINs, API keys, session tokens and
upstream tokens are never attached.
"""

import logfire
from fastapi import FastAPI

from adgate.config import Settings

# Per-request attributes logfire would otherwise copy from the parsed body
_BODY_ATTRIBUTES = frozenset({"values", "errors"})


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire from ``settings.observability``.

    Cloud export is on when ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so, or,
    when that is unset, whenever ``OBSERVABILITY__LOGFIRE_TOKEN`` is present.
    """
    send = _should_send(settings)
    token = settings.observability.logfire_token

    logfire.configure(
        service_name="adgate",
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send,
        token=token or None,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire ready for {environment}",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    mapped = {k: v for k, v in attributes.items() if k not in _BODY_ATTRIBUTES}
    mapped["method"] = request.method
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming requests without headers or body values."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_httpx() -> None:
    """Trace outbound calls to the payment API."""
    logfire.instrument_httpx()
