"""
Service layer for creating and reading hospital entities.

Validates enum and numeric fields before anything is submitted, then hands
the row to the entity's repository and returns a typed response model.

Architecture:
    API Layer (routers) → HospitalRecordsService → entity repositories → Database

Dependency Injection:
    Repositories are injected via the constructor.
    Use core.dependencies.get_records_service() in routers with Depends().
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from core.datetime_utils import to_db_date, to_db_money
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
from schemas import (
    AppointmentResponse,
    AppointmentStatus,
    BillResponse,
    BillStatus,
    DepartmentResponse,
    DoctorResponse,
    Gender,
    MedicineResponse,
    PatientResponse,
    PrescriptionResponse,
    StaffResponse,
)
from services.validators import (
    validate_choice,
    validate_date,
    validate_money,
    validate_non_negative_int,
    validate_required_text,
)

logger = logging.getLogger(__name__)


def _present(**values: Any) -> Dict[str, Any]:
    """Drop None values so the column falls back to its schema default or NULL."""
    return {key: value for key, value in values.items() if value is not None}


class HospitalRecordsService:
    """
    Create and lookup-by-id operations for the eight hospital entities.

    Lookups return None when no row exists; callers decide whether that is
    an error. Integrity failures (duplicate phone, missing foreign-key
    target) surface from the store as IntegrityViolationError.
    """

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
        self._patients = patient_repository
        self._departments = department_repository
        self._doctors = doctor_repository
        self._appointments = appointment_repository
        self._bills = bill_repository
        self._medicines = medicine_repository
        self._prescriptions = prescription_repository
        self._staff = staff_repository

    # =========================================================================
    # PATIENTS
    # =========================================================================

    def create_patient(
        self,
        name: str,
        age: Optional[int] = None,
        gender: Optional[Union[Gender, str]] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> PatientResponse:
        """
        Register a patient.

        Raises:
            EntityValidationError: If gender is outside M/F/O or age is not
                a non-negative integer.
            IntegrityViolationError: If the phone number is already registered.
        """
        validate_required_text("name", name, max_length=100)
        validate_non_negative_int("age", age)
        gender_value = validate_choice("gender", gender, Gender)

        row = self._patients.add(_present(
            name=name, age=age, gender=gender_value, phone=phone, address=address
        ))
        logger.info(f"Patient created: {row['name']} (patient_id={row['patient_id']})")
        return PatientResponse(**row)

    def get_patient(self, patient_id: int) -> Optional[PatientResponse]:
        row = self._patients.get_by_id(patient_id)
        return PatientResponse(**row) if row else None

    def list_patients(self) -> List[PatientResponse]:
        return [PatientResponse(**row) for row in self._patients.get_all()]

    # =========================================================================
    # DEPARTMENTS
    # =========================================================================

    def create_department(self, name: str) -> DepartmentResponse:
        validate_required_text("name", name, max_length=100)
        row = self._departments.add({"name": name})
        logger.info(f"Department created: {name} (department_id={row['department_id']})")
        return DepartmentResponse(**row)

    def get_department(self, department_id: int) -> Optional[DepartmentResponse]:
        row = self._departments.get_by_id(department_id)
        return DepartmentResponse(**row) if row else None

    def list_departments(self) -> List[DepartmentResponse]:
        return [DepartmentResponse(**row) for row in self._departments.get_all()]

    # =========================================================================
    # DOCTORS
    # =========================================================================

    def create_doctor(
        self,
        name: str,
        specialization: Optional[str] = None,
        department_id: Optional[int] = None,
    ) -> DoctorResponse:
        """
        Add a doctor, optionally attached to a department.

        Raises:
            IntegrityViolationError: If the department does not exist.
        """
        validate_required_text("name", name, max_length=100)
        row = self._doctors.add(_present(
            name=name, specialization=specialization, department_id=department_id
        ))
        logger.info(f"Doctor created: {name} (doctor_id={row['doctor_id']})")
        return DoctorResponse(**row)

    def get_doctor(self, doctor_id: int) -> Optional[DoctorResponse]:
        row = self._doctors.get_by_id(doctor_id)
        return DoctorResponse(**row) if row else None

    def list_doctors(self) -> List[DoctorResponse]:
        return [DoctorResponse(**row) for row in self._doctors.get_all()]

    # =========================================================================
    # APPOINTMENTS
    # =========================================================================

    def create_appointment(
        self,
        patient_id: int,
        doctor_id: int,
        appointment_date: Union[date, str],
        status: Optional[Union[AppointmentStatus, str]] = None,
    ) -> AppointmentResponse:
        """
        Book an appointment. Status defaults to Scheduled.

        Raises:
            EntityValidationError: If the status or date is invalid.
            IntegrityViolationError: If the patient or doctor does not exist.
        """
        when = validate_date("appointment_date", appointment_date)
        status_value = validate_choice("status", status, AppointmentStatus)

        row = self._appointments.add(_present(
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_date=to_db_date(when),
            status=status_value,
        ))
        logger.info(
            f"Appointment created (appointment_id={row['appointment_id']})",
            extra={"patient_id": patient_id, "doctor_id": doctor_id, "status": row["status"]}
        )
        return AppointmentResponse(**row)

    def get_appointment(self, appointment_id: int) -> Optional[AppointmentResponse]:
        row = self._appointments.get_by_id(appointment_id)
        return AppointmentResponse(**row) if row else None

    def list_appointments(self) -> List[AppointmentResponse]:
        return [AppointmentResponse(**row) for row in self._appointments.get_all()]

    # =========================================================================
    # BILLS
    # =========================================================================

    def create_bill(
        self,
        patient_id: int,
        amount: Union[Decimal, int, float, str],
        bill_date: Union[date, str],
        status: Optional[Union[BillStatus, str]] = None,
    ) -> BillResponse:
        """
        Raise a bill against a patient. Status defaults to Unpaid.

        Raises:
            EntityValidationError: If the amount is negative or has more than
                two decimal places, or the status is not Paid/Unpaid.
            IntegrityViolationError: If the patient does not exist.
        """
        money = validate_money("amount", amount)
        when = validate_date("bill_date", bill_date)
        status_value = validate_choice("status", status, BillStatus)

        row = self._bills.add(_present(
            patient_id=patient_id,
            amount=to_db_money(money),
            bill_date=to_db_date(when),
            status=status_value,
        ))
        logger.info(
            f"Bill created (bill_id={row['bill_id']})",
            extra={"patient_id": patient_id, "amount": str(row["amount"]), "status": row["status"]}
        )
        return BillResponse(**row)

    def get_bill(self, bill_id: int) -> Optional[BillResponse]:
        row = self._bills.get_by_id(bill_id)
        return BillResponse(**row) if row else None

    def list_bills(self) -> List[BillResponse]:
        return [BillResponse(**row) for row in self._bills.get_all()]

    # =========================================================================
    # MEDICINES
    # =========================================================================

    def create_medicine(
        self,
        name: str,
        medicine_type: Optional[str] = None,
        price: Optional[Union[Decimal, int, float, str]] = None,
        stock: Optional[int] = None,
    ) -> MedicineResponse:
        """
        Add a medicine. Stock defaults to 0; ``medicine_type`` is stored in
        the ``type`` column.

        Raises:
            EntityValidationError: If stock is not a non-negative integer or
                price is not a valid amount.
        """
        validate_required_text("name", name, max_length=100)
        money = validate_money("price", price, required=False)
        validate_non_negative_int("stock", stock)

        row = self._medicines.add(_present(
            name=name, type=medicine_type, price=to_db_money(money), stock=stock
        ))
        logger.info(f"Medicine created: {name} (medicine_id={row['medicine_id']})")
        return MedicineResponse(**row)

    def get_medicine(self, medicine_id: int) -> Optional[MedicineResponse]:
        row = self._medicines.get_by_id(medicine_id)
        return MedicineResponse(**row) if row else None

    def list_medicines(self) -> List[MedicineResponse]:
        return [MedicineResponse(**row) for row in self._medicines.get_all()]

    # =========================================================================
    # PRESCRIPTIONS
    # =========================================================================

    def create_prescription(
        self,
        appointment_id: int,
        medicine_id: int,
        dosage: Optional[str] = None,
        duration: Optional[str] = None,
    ) -> PrescriptionResponse:
        """
        Prescribe a medicine during an appointment.

        Raises:
            IntegrityViolationError: If the appointment or medicine does not exist.
        """
        row = self._prescriptions.add(_present(
            appointment_id=appointment_id,
            medicine_id=medicine_id,
            dosage=dosage,
            duration=duration,
        ))
        logger.info(f"Prescription created (prescription_id={row['prescription_id']})")
        return PrescriptionResponse(**row)

    def get_prescription(self, prescription_id: int) -> Optional[PrescriptionResponse]:
        row = self._prescriptions.get_by_id(prescription_id)
        return PrescriptionResponse(**row) if row else None

    def list_prescriptions(self) -> List[PrescriptionResponse]:
        return [PrescriptionResponse(**row) for row in self._prescriptions.get_all()]

    # =========================================================================
    # STAFF
    # =========================================================================

    def create_staff(
        self,
        name: str,
        role: Optional[str] = None,
        phone: Optional[str] = None,
        department_id: Optional[int] = None,
    ) -> StaffResponse:
        """
        Add a staff member.

        Raises:
            IntegrityViolationError: If the phone is taken or the department does not exist.
        """
        validate_required_text("name", name, max_length=100)
        row = self._staff.add(_present(
            name=name, role=role, phone=phone, department_id=department_id
        ))
        logger.info(f"Staff member created: {name} (staff_id={row['staff_id']})")
        return StaffResponse(**row)

    def get_staff(self, staff_id: int) -> Optional[StaffResponse]:
        row = self._staff.get_by_id(staff_id)
        return StaffResponse(**row) if row else None

    def list_staff(self) -> List[StaffResponse]:
        return [StaffResponse(**row) for row in self._staff.get_all()]
