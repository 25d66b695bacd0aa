"""
Validation utilities for services.
"""
from services.validators.entity_validator import (
    validate_choice,
    validate_non_negative_int,
    validate_money,
    validate_date,
    validate_required_text,
    validate_positive_int,
)

__all__ = [
    "validate_choice",
    "validate_non_negative_int",
    "validate_money",
    "validate_date",
    "validate_required_text",
    "validate_positive_int",
]
