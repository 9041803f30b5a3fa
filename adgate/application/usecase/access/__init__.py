"""Access use cases."""

from adgate.application.usecase.access.process_balance import (
    ProcessBalanceRequest,
    ProcessBalanceResponse,
    ProcessBalanceUseCase,
)
from adgate.application.usecase.access.verify_access import (
    VerifyAccessRequest,
    VerifyAccessResponse,
    VerifyAccessUseCase,
)

__all__ = [
    "ProcessBalanceRequest",
    "ProcessBalanceResponse",
    "ProcessBalanceUseCase",
    "VerifyAccessRequest",
    "VerifyAccessResponse",
    "VerifyAccessUseCase",
]
