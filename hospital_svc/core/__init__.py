"""
Core module for application configuration, logging, and shared utilities.

This module provides:
- Settings: Application configuration via pydantic-settings
- Dependency injection: FastAPI Depends() functions for services and repositories
- Exceptions: Domain-specific exception classes with HTTP status codes
- Date and money helpers for SQLite storage
"""
from core.config import settings, Settings

from core.dependencies import (
    get_database,
    get_report_repository,
    get_records_service,
    get_report_service,
    get_seed_service,
    reset_database,
)

from core.exceptions import (
    HospitalServiceError,
    EntityValidationError,
    EntityNotFoundError,
    DatabaseError,
    IntegrityViolationError,
    DatabaseConnectionError,
    SeedError,
    setup_exception_handlers,
)

from core.datetime_utils import (
    utc_now,
    format_iso,
    to_db_date,
    from_db_date,
    to_money,
    to_db_money,
)

__all__ = [
    # Settings
    "settings",
    "Settings",
    # Dependency injection
    "get_database",
    "get_report_repository",
    "get_records_service",
    "get_report_service",
    "get_seed_service",
    "reset_database",
    # Exceptions
    "HospitalServiceError",
    "EntityValidationError",
    "EntityNotFoundError",
    "DatabaseError",
    "IntegrityViolationError",
    "DatabaseConnectionError",
    "SeedError",
    "setup_exception_handlers",
    # Date and money helpers
    "utc_now",
    "format_iso",
    "to_db_date",
    "from_db_date",
    "to_money",
    "to_db_money",
]
