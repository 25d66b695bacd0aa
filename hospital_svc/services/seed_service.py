"""
Service that loads the demonstration data set.

Tables are filled in foreign-key order, each with one batched insert, so
every table receives all of its seed rows or none of them. Seeding refuses
to run twice against the same store.
"""
import logging
from typing import Dict, List

from core.exceptions import SeedError
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

logger = logging.getLogger(__name__)


DEPARTMENTS = [
    {"name": "Cardiology"},
    {"name": "Neurology"},
    {"name": "Orthopedics"},
    {"name": "Pediatrics"},
]

PATIENTS = [
    {"name": "Rahul Sharma", "age": 32, "gender": "M", "phone": "9876543210", "address": "Pune, Maharashtra"},
    {"name": "Priya Mehta", "age": 28, "gender": "F", "phone": "9876501234", "address": "Mumbai, Maharashtra"},
    {"name": "Amit Verma", "age": 45, "gender": "M", "phone": "9823456789", "address": "Nagpur, Maharashtra"},
    {"name": "Sara Khan", "age": 12, "gender": "F", "phone": "9812345678", "address": "Delhi"},
]

DOCTORS = [
    {"name": "Dr. Anil Patil", "specialization": "Cardiologist", "department_id": 1},
    {"name": "Dr. Nisha Rao", "specialization": "Neurologist", "department_id": 2},
    {"name": "Dr. Rajesh Kulkarni", "specialization": "Orthopedic Surgeon", "department_id": 3},
    {"name": "Dr. Sneha Joshi", "specialization": "Pediatrician", "department_id": 4},
]

STAFF = [
    {"name": "Sunita Deshmukh", "role": "Nurse", "phone": "9000000001", "department_id": 1},
    {"name": "Arjun Singh", "role": "Receptionist", "phone": "9000000002", "department_id": 2},
    {"name": "Meena Sharma", "role": "Lab Assistant", "phone": "9000000003", "department_id": 3},
]

APPOINTMENTS = [
    {"patient_id": 1, "doctor_id": 1, "appointment_date": "2025-09-15", "status": "Scheduled"},
    {"patient_id": 2, "doctor_id": 2, "appointment_date": "2025-09-12", "status": "Completed"},
    {"patient_id": 3, "doctor_id": 3, "appointment_date": "2025-09-10", "status": "Cancelled"},
    {"patient_id": 4, "doctor_id": 4, "appointment_date": "2025-09-11", "status": "Completed"},
]

BILLS = [
    {"patient_id": 1, "amount": "5000.00", "bill_date": "2025-09-15", "status": "Unpaid"},
    {"patient_id": 2, "amount": "2000.00", "bill_date": "2025-09-12", "status": "Paid"},
    {"patient_id": 4, "amount": "1500.00", "bill_date": "2025-09-11", "status": "Paid"},
]

MEDICINES = [
    {"name": "Paracetamol", "type": "Tablet", "price": "10.00", "stock": 200},
    {"name": "Amoxicillin", "type": "Capsule", "price": "25.00", "stock": 100},
    {"name": "Ibuprofen", "type": "Tablet", "price": "15.00", "stock": 150},
    {"name": "Cough Syrup", "type": "Syrup", "price": "60.00", "stock": 50},
]

PRESCRIPTIONS = [
    {"appointment_id": 2, "medicine_id": 1, "dosage": "500mg", "duration": "5 days"},
    {"appointment_id": 2, "medicine_id": 2, "dosage": "250mg", "duration": "7 days"},
    {"appointment_id": 4, "medicine_id": 4, "dosage": "10ml", "duration": "3 days"},
]


class SeedService:
    """Loads the fixed demonstration rows into an empty store."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        department_repository: DepartmentRepository,
        doctor_repository: DoctorRepository,
        appointment_repository: AppointmentRepository,
        bill_repository: BillRepository,
        medicine_repository: MedicineRepository,
        prescription_repository: PrescriptionRepository,
        staff_repository: StaffRepository,
    ):
        # Insertion order follows the foreign keys
        self._plan: List[tuple] = [
            ("Department", department_repository, DEPARTMENTS),
            ("Patient", patient_repository, PATIENTS),
            ("Doctor", doctor_repository, DOCTORS),
            ("Staff", staff_repository, STAFF),
            ("Appointment", appointment_repository, APPOINTMENTS),
            ("Bill", bill_repository, BILLS),
            ("Medicine", medicine_repository, MEDICINES),
            ("Prescription", prescription_repository, PRESCRIPTIONS),
        ]

    def is_seeded(self) -> bool:
        """True when any seeded table already holds rows."""
        return any(repo.count() > 0 for _, repo, _ in self._plan)

    def seed(self) -> Dict[str, int]:
        """
        Insert the seed rows.

        The foreign keys in the seed data refer to ids 1..n, so the store
        must be empty.

        Returns:
            Dict[str, int]: Rows inserted per table.

        Raises:
            SeedError: If any seeded table already holds rows.
            IntegrityViolationError: If the store rejects a batch.
        """
        if self.is_seeded():
            logger.warning("Seed skipped: store already holds data")
            raise SeedError(detail="Seed data requires an empty store")

        inserted: Dict[str, int] = {}
        for table, repo, rows in self._plan:
            inserted[table] = repo.add_many(rows)

        logger.info("Seed data loaded", extra={"rows": inserted})
        return inserted
