"""
FastAPI dependency injection configuration for the Hospital Records Service.

Architecture Flow:
    API Layer (Routers)
         ↓ Depends()
    Service Layer (validation, orchestration)
         ↓ Injected
    Repository Layer (SQL)
         ↓ Injected
    Database (SQLite connection scope)

Usage in Routers:
    from core.dependencies import get_report_service

    @router.get("/unpaid-bills")
    async def unpaid_bills(report_service: ReportService = Depends(get_report_service)):
        return report_service.list_unpaid_bills()

Testing:
    app.dependency_overrides[get_database] = lambda: test_database
"""
import logging
from typing import Optional

from core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# DATABASE DEPENDENCY
# =============================================================================

_database_instance: Optional["Database"] = None


def get_database() -> "Database":
    """
    Get the process-wide Database handle, creating the schema on first use.

    The handle holds configuration only; connections are opened per call.
    """
    global _database_instance

    if _database_instance is None:
        from repositories.base import Database

        settings.ensure_directories()
        logger.info(f"Initializing database: {settings.database_path}")
        _database_instance = Database(
            db_path=settings.database_path,
            busy_timeout=settings.hospital_svc_db_busy_timeout
        )

    return _database_instance


def reset_database() -> None:
    """Reset the database instance (for testing only)."""
    global _database_instance
    _database_instance = None


# =============================================================================
# REPOSITORY DEPENDENCIES
# =============================================================================

def get_repositories(db: Optional["Database"] = None) -> dict:
    """
    Build one repository per entity table, keyed by the service constructor
    argument that receives it.
    """
    from repositories import (
        AppointmentRepository,
        BillRepository,
        DepartmentRepository,
        DoctorRepository,
        MedicineRepository,
        PatientRepository,
        PrescriptionRepository,
        StaffRepository,
    )

    db = db or get_database()
    return {
        "patient_repository": PatientRepository(db=db),
        "department_repository": DepartmentRepository(db=db),
        "doctor_repository": DoctorRepository(db=db),
        "appointment_repository": AppointmentRepository(db=db),
        "bill_repository": BillRepository(db=db),
        "medicine_repository": MedicineRepository(db=db),
        "prescription_repository": PrescriptionRepository(db=db),
        "staff_repository": StaffRepository(db=db),
    }


def get_report_repository() -> "ReportRepository":
    """Get a ReportRepository bound to the shared database."""
    from repositories import ReportRepository

    return ReportRepository(db=get_database())


# =============================================================================
# SERVICE DEPENDENCIES
# =============================================================================

def get_records_service() -> "HospitalRecordsService":
    """Get a HospitalRecordsService with all entity repositories injected."""
    from services import HospitalRecordsService

    return HospitalRecordsService(**get_repositories())


def get_report_service() -> "ReportService":
    """Get a ReportService with the report repository injected."""
    from services import ReportService

    return ReportService(report_repository=get_report_repository())


def get_seed_service(db: Optional["Database"] = None) -> "SeedService":
    """
    Get a SeedService with all entity repositories injected.

    seed_db.py passes the Database for its --db-path; otherwise the shared
    handle is used.
    """
    from services import SeedService

    return SeedService(**get_repositories(db))
