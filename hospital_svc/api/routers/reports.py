"""
Reports router - read-only endpoints for the canned hospital reports.

Architecture:
    HTTP Request → Router (this file) → ReportService → ReportRepository → Database

Every endpoint returns a JSON array of uniformly shaped rows, except
/total-revenue which returns a single object. Query parameters fall back to
the defaults in core.config when omitted.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from core.auth import verify_api_key
from core.config import LOW_STOCK_THRESHOLD, TOP_DOCTORS_LIMIT
from core.dependencies import get_report_service
from schemas import (
    AppointmentStatusRow,
    BillWithPatientRow,
    DepartmentRevenueRow,
    DepartmentStaffCountRow,
    DoctorAppointmentCountRow,
    LowStockMedicineRow,
    PaidBillRow,
    PatientAppointmentCountRow,
    PatientPrescriptionRow,
    TotalRevenue,
    UnpaidBillRow,
)
from services import ReportService
from services.report_service import DEFAULT_PAID_BILL_THRESHOLD

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/reports",
    tags=["Reports"],
    dependencies=[Depends(verify_api_key)],
)

MAX_REPORT_LIMIT = 500


@router.get("/appointments", response_model=List[AppointmentStatusRow],
            summary="Appointments with patient, doctor and status")
async def appointments_with_status(report_service: ReportService = Depends(get_report_service)):
    return report_service.list_appointments_with_status()


@router.get("/unpaid-bills", response_model=List[UnpaidBillRow], summary="Unpaid bills with patient names")
async def unpaid_bills(report_service: ReportService = Depends(get_report_service)):
    return report_service.list_unpaid_bills()


@router.get("/total-revenue", response_model=TotalRevenue, summary="Sum of all paid bills")
async def total_revenue(report_service: ReportService = Depends(get_report_service)):
    return TotalRevenue(total_revenue=report_service.total_revenue())


@router.get("/top-doctors", response_model=List[DoctorAppointmentCountRow],
            summary="Doctors ranked by appointment count")
async def top_doctors(
    limit: Optional[int] = Query(
        None, ge=1, le=MAX_REPORT_LIMIT,
        description=f"Maximum rows to return (defaults to {TOP_DOCTORS_LIMIT})"
    ),
    report_service: ReportService = Depends(get_report_service)
):
    """Ties are ordered by doctor id. Fewer rows than the limit are returned unpadded."""
    return report_service.top_doctors_by_appointments(limit or TOP_DOCTORS_LIMIT)


@router.get("/low-stock-medicines", response_model=List[LowStockMedicineRow],
            summary="Medicines with stock below a threshold")
async def low_stock_medicines(
    threshold: Optional[int] = Query(
        None, ge=0, description=f"Stock level to compare against (defaults to {LOW_STOCK_THRESHOLD})"
    ),
    report_service: ReportService = Depends(get_report_service)
):
    return report_service.low_stock_medicines(
        LOW_STOCK_THRESHOLD if threshold is None else threshold
    )


@router.get("/prescriptions", response_model=List[PatientPrescriptionRow],
            summary="Prescriptions for a patient")
async def prescriptions_for_patient(
    patient_name: str = Query(..., min_length=1, description="Exact patient name"),
    report_service: ReportService = Depends(get_report_service)
):
    return report_service.prescriptions_for_patient(patient_name)


@router.get("/staff-count", response_model=List[DepartmentStaffCountRow],
            summary="Staff headcount per department")
async def staff_count(report_service: ReportService = Depends(get_report_service)):
    """Departments without staff are listed with a count of 0."""
    return report_service.staff_count_by_department()


@router.get("/repeat-patients", response_model=List[PatientAppointmentCountRow],
            summary="Patients with more than one appointment")
async def repeat_patients(report_service: ReportService = Depends(get_report_service)):
    return report_service.patients_with_multiple_appointments()


@router.get("/paid-bills", response_model=List[PaidBillRow], summary="Paid bills above an amount")
async def paid_bills(
    threshold: Decimal = Query(DEFAULT_PAID_BILL_THRESHOLD, ge=0, description="Exclusive lower bound"),
    report_service: ReportService = Depends(get_report_service)
):
    return report_service.paid_bills_above_amount(threshold)


@router.get("/department-revenue", response_model=List[DepartmentRevenueRow],
            summary="Paid-bill revenue per department")
async def department_revenue(
    deduplicate: bool = Query(
        False,
        description="Count each bill at most once per department instead of once per joined appointment"
    ),
    report_service: ReportService = Depends(get_report_service)
):
    return report_service.department_revenue(deduplicate=deduplicate)


@router.get("/bills", response_model=List[BillWithPatientRow], summary="All bills with patient names")
async def bills_with_patients(report_service: ReportService = Depends(get_report_service)):
    return report_service.list_bills_with_patients()
