"""Checks for raw request parameters.

Bodies reach the use cases untyped, so a mistyped field never
short-circuits the credential check. These helpers run afterwards.
"""

from decimal import Decimal
from typing import Any

from adgate.domain.error import MalformedInputError


def text_param(value: Any) -> str | None:
    """Return a string parameter, or None when missing or blank.

    Raises:
        MalformedInputError: If the value is present but not a string
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedInputError()
    return value if value.strip() else None


def account_id_param(value: Any) -> str | None:
    """Like ``text_param``, but JSON integers are accepted too."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return text_param(value)


def amount_param(value: Any) -> Decimal | None:
    """Parse an amount sent as a string or JSON number.

    Raises:
        MalformedInputError: If the value is not a number or numeric string
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise MalformedInputError()
    try:
        return Decimal(str(value).strip())
    except ArithmeticError:
        raise MalformedInputError()
