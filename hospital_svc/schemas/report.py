"""
Row models for the hospital reports.

Every report returns a list of one of these uniformly shaped records, ready
for JSON or tabular output.
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from schemas.enums import AppointmentStatus, BillStatus


class AppointmentStatusRow(BaseModel):
    patient_name: str
    doctor_name: str
    appointment_date: date
    status: AppointmentStatus


class UnpaidBillRow(BaseModel):
    bill_id: int
    patient_name: str
    amount: Decimal
    bill_date: date


class TotalRevenue(BaseModel):
    """Wrapper so the revenue total serializes as an object over HTTP."""
    total_revenue: Decimal


class DoctorAppointmentCountRow(BaseModel):
    doctor_name: str
    total_appointments: int


class LowStockMedicineRow(BaseModel):
    medicine_name: str
    stock: int


class PatientPrescriptionRow(BaseModel):
    patient_name: str
    medicine_name: str
    dosage: Optional[str] = None
    duration: Optional[str] = None


class DepartmentStaffCountRow(BaseModel):
    department_name: str
    staff_count: int


class PatientAppointmentCountRow(BaseModel):
    patient_name: str
    total_appointments: int


class PaidBillRow(BaseModel):
    patient_name: str
    amount: Decimal


class DepartmentRevenueRow(BaseModel):
    department_name: str
    department_revenue: Decimal


class BillWithPatientRow(BaseModel):
    bill_id: int
    patient_name: str
    amount: Decimal
    bill_date: date
    status: BillStatus
