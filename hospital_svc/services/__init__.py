"""
Service layer for business logic.

This module contains validation and orchestration services.
"""
from services.records_service import HospitalRecordsService
from services.report_service import ReportService
from services.seed_service import SeedService

__all__ = [
    "HospitalRecordsService",
    "ReportService",
    "SeedService",
]
