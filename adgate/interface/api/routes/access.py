"""Extension access routes."""

import logging
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from adgate.application.usecase.access import (
    ProcessBalanceRequest,
    ProcessBalanceUseCase,
    VerifyAccessRequest,
    VerifyAccessUseCase,
)
from adgate.interface.api.credentials import CredentialFields, extract_credential

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["access"], route_class=DishkaRoute)


class VerifyBody(CredentialFields):
    """Verify request body."""

    ads_id: Any = None


class VerifyResult(BaseModel):
    """Verify success response."""

    status: bool = True
    valid: bool = True


class ProcessBalanceBody(CredentialFields):
    """Process balance request body.

    ``cookies`` is appended verbatim to the upstream cookie header.
    """

    ads_id: Any = None
    amount: Any = None
    csrftoken: Any = None
    mstoken: Any = None
    cookies: Any = None


class RedirectData(BaseModel):
    """Payment redirect payload."""

    redirect_url: str


class ProcessBalanceResult(BaseModel):
    """Process balance success response."""

    status: int = 200
    message: str = "OK"
    data: RedirectData


@router.post("/verify", response_model=VerifyResult)
async def verify(
    use_case: FromDishka[VerifyAccessUseCase],
    body: VerifyBody | None = None,
    authorization: str | None = Header(default=None),
) -> VerifyResult:
    """Verify a credential, optionally linking an ads account.

    Examples:
        POST /api/verify
        {"pin": "1234", "ads_id": "7012345678901234567"}

        Response:
        {"status": true, "valid": true}
    """
    body = body or VerifyBody()
    result = await use_case.execute(
        VerifyAccessRequest(
            credential=extract_credential(body, authorization),
            ads_id=body.ads_id,
        )
    )
    if result.link_outcome is not None:
        logger.info(
            f"Verified identity {result.identity_id}: {result.link_outcome.value} "
            f"({result.linked_account_count}/{result.link_limit})"
        )
    return VerifyResult()


@router.post("/process-balance", response_model=ProcessBalanceResult)
async def process_balance(
    use_case: FromDishka[ProcessBalanceUseCase],
    body: ProcessBalanceBody | None = None,
    authorization: str | None = Header(default=None),
) -> ProcessBalanceResult:
    """Forward a balance top-up to the payment API.

    Examples:
        POST /api/process-balance
        {
            "pin": "1234",
            "ads_id": "7012345678901234567",
            "amount": "10.5",
            "csrftoken": "...",
            "mstoken": "..."
        }

        Response:
        {"status": 200, "message": "OK", "data": {"redirect_url": "https://..."}}
    """
    body = body or ProcessBalanceBody()
    result = await use_case.execute(
        ProcessBalanceRequest(
            credential=extract_credential(body, authorization),
            ads_id=body.ads_id,
            amount=body.amount,
            csrftoken=body.csrftoken,
            mstoken=body.mstoken,
            cookies=body.cookies,
        )
    )
    logger.info(f"Payment redirect issued ({result.link_outcome.value})")
    return ProcessBalanceResult(data=RedirectData(redirect_url=result.redirect_url))
