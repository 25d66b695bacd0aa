"""
Shared exception classes and error handling utilities for the Hospital Records Service.

This module provides:
- Custom exception hierarchy for domain-specific errors
- Consistent error response formatting
- Exception handlers for FastAPI integration

Usage:
    from core.exceptions import EntityValidationError, IntegrityViolationError

    # In the service layer - reject bad values before they reach the store
    raise EntityValidationError(field="gender", value="X", allowed=["M", "F", "O"])

    # In FastAPI - register handlers via setup_exception_handlers(app)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================

class HospitalServiceError(Exception):
    """
    Base exception for all Hospital Records Service domain errors.

    Carries a human-readable detail, an HTTP status code and any keyword
    context (failing constraint, attempted value) for the caller to act on.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs: Any
    ):
        """
        Initialize the exception.

        Args:
            detail: Human-readable error message. Uses class default if not provided.
            status_code: HTTP status code. Uses class default if not provided.
            **kwargs: Additional context to include in error response.
        """
        self.detail = detail or self.__class__.detail
        self.status_code = status_code or self.__class__.status_code
        self.context = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        result = {"detail": self.detail}
        if self.context:
            result["context"] = self.context
        return result


# =============================================================================
# VALIDATION / LOOKUP EXCEPTIONS
# =============================================================================

class EntityValidationError(HospitalServiceError):
    """Raised when a field value falls outside its allowed domain."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid field value"

    def __init__(
        self,
        field: Optional[str] = None,
        value: Any = None,
        reason: Optional[str] = None,
        **kwargs: Any
    ):
        if field:
            detail = f"Invalid value {value!r} for '{field}'"
            if reason:
                detail = f"{detail}: {reason}"
        else:
            detail = self.detail
        super().__init__(detail=detail, field=field, value=value, **kwargs)


class EntityNotFoundError(HospitalServiceError):
    """Raised at the HTTP edge when a lookup-by-id finds no row."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Entity not found"

    def __init__(self, entity: Optional[str] = None, entity_id: Optional[int] = None, **kwargs: Any):
        detail = f"{entity} {entity_id} not found" if entity else self.detail
        super().__init__(detail=detail, entity=entity, entity_id=entity_id, **kwargs)


# =============================================================================
# DATABASE EXCEPTIONS
# =============================================================================

class DatabaseError(HospitalServiceError):
    """Raised when a database operation fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Database operation failed"

    def __init__(self, operation: Optional[str] = None, **kwargs: Any):
        detail = f"Database error during {operation}" if operation else self.detail
        super().__init__(detail=detail, operation=operation, **kwargs)


class IntegrityViolationError(DatabaseError):
    """Raised when the store rejects a write on a foreign-key, unique or check constraint."""

    status_code = status.HTTP_409_CONFLICT
    detail = "Integrity constraint violated"

    def __init__(self, constraint: Optional[str] = None, operation: Optional[str] = None, **kwargs: Any):
        HospitalServiceError.__init__(
            self,
            detail=f"Integrity constraint violated: {constraint}" if constraint else self.detail,
            constraint=constraint,
            operation=operation,
            **kwargs
        )


class DatabaseConnectionError(DatabaseError):
    """Raised when the store cannot be reached."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "Failed to connect to database"

    def __init__(self, db_path: Optional[str] = None, **kwargs: Any):
        HospitalServiceError.__init__(
            self,
            detail=f"Failed to connect to database at {db_path}" if db_path else self.detail,
            db_path=db_path,
            **kwargs
        )


# =============================================================================
# SEED EXCEPTIONS
# =============================================================================

class SeedError(HospitalServiceError):
    """Raised when seed data cannot be applied to the current store."""

    status_code = status.HTTP_409_CONFLICT
    detail = "Seed data already present"


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def hospital_service_exception_handler(
    request: Request,
    exc: HospitalServiceError
) -> JSONResponse:
    """
    Handle HospitalServiceError exceptions and return consistent JSON responses.
    """
    logger.warning(
        f"HospitalServiceError: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "context": exc.context
        }
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_dict())
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(HospitalServiceError, hospital_service_exception_handler)
