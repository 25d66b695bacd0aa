"""
Repository layer for database access.

This module contains all database access operations, encapsulating SQL and data persistence logic.
"""
from repositories.base import Database
from repositories.entity_repository import EntityRepository
from repositories.patient_repository import PatientRepository
from repositories.department_repository import DepartmentRepository
from repositories.doctor_repository import DoctorRepository
from repositories.appointment_repository import AppointmentRepository
from repositories.bill_repository import BillRepository
from repositories.medicine_repository import MedicineRepository
from repositories.prescription_repository import PrescriptionRepository
from repositories.staff_repository import StaffRepository
from repositories.report_repository import ReportRepository

__all__ = [
    "Database",
    "EntityRepository",
    "PatientRepository",
    "DepartmentRepository",
    "DoctorRepository",
    "AppointmentRepository",
    "BillRepository",
    "MedicineRepository",
    "PrescriptionRepository",
    "StaffRepository",
    "ReportRepository",
]
