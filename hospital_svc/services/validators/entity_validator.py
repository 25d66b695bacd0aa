"""
Validation utilities for entity writes and report parameters.

These checks run in the service layer before any statement is submitted,
so a bad value never reaches the store. Each failure raises
EntityValidationError naming the field, the rejected value and the rule.
"""
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from core.exceptions import EntityValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# NUMERIC(10, 2): eight integer digits and two decimal places
MONEY_INTEGER_DIGITS = 8


def _reject(field: str, value: Any, reason: str, **context: Any) -> EntityValidationError:
    logger.warning(
        "Rejected field value",
        extra={"field": field, "value": repr(value), "reason": reason}
    )
    return EntityValidationError(field=field, value=value, reason=reason, **context)


def validate_choice(field: str, value: Any, enum_cls: Type[E]) -> Optional[str]:
    """
    Validate that ``value`` belongs to ``enum_cls``.

    Accepts the enum member or its raw value. None passes through so
    the schema default applies.

    Returns:
        The raw string value to store, or None.

    Raises:
        EntityValidationError: If the value is outside the domain.
    """
    if value is None:
        return None
    allowed = [member.value for member in enum_cls]
    raw = value.value if isinstance(value, enum_cls) else value
    if raw not in allowed:
        raise _reject(field, value, f"must be one of {allowed}", allowed=allowed)
    return raw


def validate_non_negative_int(field: str, value: Any) -> Optional[int]:
    """
    Validate an INTEGER column or parameter that may not go below zero.
    None passes through.

    Raises:
        EntityValidationError: If the value is not an integer or is negative.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise _reject(field, value, "must be an integer")
    if value < 0:
        raise _reject(field, value, "must not be negative")
    return value


def validate_money(field: str, value: Any, required: bool = True) -> Optional[Decimal]:
    """
    Validate a currency value for a NUMERIC(10, 2) column: a number, not
    negative, at most eight integer digits and two decimal places.

    Returns:
        The value as a Decimal, or None when optional and absent.

    Raises:
        EntityValidationError: On any violation.
    """
    if value is None:
        if required:
            raise _reject(field, value, "is required")
        return None
    if isinstance(value, bool):
        raise _reject(field, value, "must be a number")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise _reject(field, value, "must be a number")
    if not amount.is_finite():
        raise _reject(field, value, "must be a finite number")
    if amount < 0:
        raise _reject(field, value, "must not be negative")
    if amount.as_tuple().exponent < -2:
        raise _reject(field, value, "must have at most two decimal places")
    if amount.adjusted() >= MONEY_INTEGER_DIGITS:
        raise _reject(
            field, value, f"must have at most {MONEY_INTEGER_DIGITS} digits before the decimal point"
        )
    return amount


def validate_date(field: str, value: Any) -> date:
    """
    Validate a required date given as ``date`` or ISO ``YYYY-MM-DD`` string.

    Raises:
        EntityValidationError: If the value is missing or not a date.
    """
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise _reject(field, value, "must be an ISO date (YYYY-MM-DD)")


def validate_required_text(field: str, value: Any, max_length: Optional[int] = None) -> str:
    """
    Validate a NOT NULL text column.

    Raises:
        EntityValidationError: If the value is missing, blank or too long.
    """
    if not isinstance(value, str) or not value.strip():
        raise _reject(field, value, "must be a non-empty string")
    if max_length is not None and len(value) > max_length:
        raise _reject(field, value, f"must be at most {max_length} characters")
    return value


def validate_positive_int(field: str, value: Any) -> int:
    """
    Validate a strictly positive integer (row limits).

    Raises:
        EntityValidationError: If the value is not an integer >= 1.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise _reject(field, value, "must be a positive integer")
    return value
