"""
Pydantic schemas for API request/response validation.

This module contains all Pydantic models used at API boundaries.
"""
from schemas.enums import Gender, AppointmentStatus, BillStatus
from schemas.patient import PatientCreate, PatientResponse
from schemas.department import (
    DepartmentCreate,
    DepartmentResponse,
    DoctorCreate,
    DoctorResponse,
    StaffCreate,
    StaffResponse,
)
from schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    PrescriptionCreate,
    PrescriptionResponse,
)
from schemas.billing import BillCreate, BillResponse, MedicineCreate, MedicineResponse
from schemas.report import (
    AppointmentStatusRow,
    UnpaidBillRow,
    TotalRevenue,
    DoctorAppointmentCountRow,
    LowStockMedicineRow,
    PatientPrescriptionRow,
    DepartmentStaffCountRow,
    PatientAppointmentCountRow,
    PaidBillRow,
    DepartmentRevenueRow,
    BillWithPatientRow,
)

__all__ = [
    # Enums
    "Gender",
    "AppointmentStatus",
    "BillStatus",
    # Entity schemas
    "PatientCreate",
    "PatientResponse",
    "DepartmentCreate",
    "DepartmentResponse",
    "DoctorCreate",
    "DoctorResponse",
    "StaffCreate",
    "StaffResponse",
    "AppointmentCreate",
    "AppointmentResponse",
    "PrescriptionCreate",
    "PrescriptionResponse",
    "BillCreate",
    "BillResponse",
    "MedicineCreate",
    "MedicineResponse",
    # Report rows
    "AppointmentStatusRow",
    "UnpaidBillRow",
    "TotalRevenue",
    "DoctorAppointmentCountRow",
    "LowStockMedicineRow",
    "PatientPrescriptionRow",
    "DepartmentStaffCountRow",
    "PatientAppointmentCountRow",
    "PaidBillRow",
    "DepartmentRevenueRow",
    "BillWithPatientRow",
]
