"""
Entity router - create, list and lookup-by-id endpoints for the eight hospital tables.

Architecture:
    HTTP Request → Router (this file) → HospitalRecordsService → repositories → Database

Error mapping (via setup_exception_handlers):
    - EntityValidationError → 400
    - EntityNotFoundError → 404 (service lookups return None, raised here)
    - IntegrityViolationError → 409 (duplicate phone, missing foreign-key target)

All endpoints require API key authentication.
"""
import logging
from typing import Annotated, List, Optional, TypeVar

from fastapi import APIRouter, Depends, Path

from core.auth import verify_api_key
from core.dependencies import get_records_service
from core.exceptions import EntityNotFoundError
from schemas import (
    AppointmentCreate,
    AppointmentResponse,
    BillCreate,
    BillResponse,
    DepartmentCreate,
    DepartmentResponse,
    DoctorCreate,
    DoctorResponse,
    MedicineCreate,
    MedicineResponse,
    PatientCreate,
    PatientResponse,
    PrescriptionCreate,
    PrescriptionResponse,
    StaffCreate,
    StaffResponse,
)
from services import HospitalRecordsService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1",
    dependencies=[Depends(verify_api_key)],
)

T = TypeVar("T")

EntityId = Annotated[int, Path(ge=1, description="Store-assigned identifier")]


def _found(entity: str, entity_id: int, value: Optional[T]) -> T:
    if value is None:
        raise EntityNotFoundError(entity=entity, entity_id=entity_id)
    return value


# =============================================================================
# PATIENTS
# =============================================================================

@router.post("/patients", response_model=PatientResponse, status_code=201, tags=["Patients"],
             summary="Register a patient")
async def create_patient(
    patient: PatientCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    """Register a patient. Returns 409 if the phone number is already registered."""
    return service.create_patient(**patient.model_dump())


@router.get("/patients", response_model=List[PatientResponse], tags=["Patients"])
async def list_patients(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_patients()


@router.get("/patients/{patient_id}", response_model=PatientResponse, tags=["Patients"])
async def get_patient(
    patient_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Patient", patient_id, service.get_patient(patient_id))


# =============================================================================
# DEPARTMENTS
# =============================================================================

@router.post("/departments", response_model=DepartmentResponse, status_code=201, tags=["Departments"])
async def create_department(
    department: DepartmentCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return service.create_department(**department.model_dump())


@router.get("/departments", response_model=List[DepartmentResponse], tags=["Departments"])
async def list_departments(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_departments()


@router.get("/departments/{department_id}", response_model=DepartmentResponse, tags=["Departments"])
async def get_department(
    department_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Department", department_id, service.get_department(department_id))


# =============================================================================
# DOCTORS
# =============================================================================

@router.post("/doctors", response_model=DoctorResponse, status_code=201, tags=["Doctors"])
async def create_doctor(
    doctor: DoctorCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    """Add a doctor. Returns 409 if the department does not exist."""
    return service.create_doctor(**doctor.model_dump())


@router.get("/doctors", response_model=List[DoctorResponse], tags=["Doctors"])
async def list_doctors(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_doctors()


@router.get("/doctors/{doctor_id}", response_model=DoctorResponse, tags=["Doctors"])
async def get_doctor(
    doctor_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Doctor", doctor_id, service.get_doctor(doctor_id))


# =============================================================================
# APPOINTMENTS
# =============================================================================

@router.post("/appointments", response_model=AppointmentResponse, status_code=201, tags=["Appointments"])
async def create_appointment(
    appointment: AppointmentCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    """Book an appointment. Status defaults to Scheduled."""
    return service.create_appointment(**appointment.model_dump())


@router.get("/appointments", response_model=List[AppointmentResponse], tags=["Appointments"])
async def list_appointments(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_appointments()


@router.get("/appointments/{appointment_id}", response_model=AppointmentResponse, tags=["Appointments"])
async def get_appointment(
    appointment_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Appointment", appointment_id, service.get_appointment(appointment_id))


# =============================================================================
# BILLS
# =============================================================================

@router.post("/bills", response_model=BillResponse, status_code=201, tags=["Bills"])
async def create_bill(
    bill: BillCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    """Raise a bill. Status defaults to Unpaid."""
    return service.create_bill(**bill.model_dump())


@router.get("/bills", response_model=List[BillResponse], tags=["Bills"])
async def list_bills(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_bills()


@router.get("/bills/{bill_id}", response_model=BillResponse, tags=["Bills"])
async def get_bill(
    bill_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Bill", bill_id, service.get_bill(bill_id))


# =============================================================================
# MEDICINES
# =============================================================================

@router.post("/medicines", response_model=MedicineResponse, status_code=201, tags=["Medicines"])
async def create_medicine(
    medicine: MedicineCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return service.create_medicine(
        name=medicine.name,
        medicine_type=medicine.type,
        price=medicine.price,
        stock=medicine.stock,
    )


@router.get("/medicines", response_model=List[MedicineResponse], tags=["Medicines"])
async def list_medicines(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_medicines()


@router.get("/medicines/{medicine_id}", response_model=MedicineResponse, tags=["Medicines"])
async def get_medicine(
    medicine_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Medicine", medicine_id, service.get_medicine(medicine_id))


# =============================================================================
# PRESCRIPTIONS
# =============================================================================

@router.post("/prescriptions", response_model=PrescriptionResponse, status_code=201, tags=["Prescriptions"])
async def create_prescription(
    prescription: PrescriptionCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return service.create_prescription(**prescription.model_dump())


@router.get("/prescriptions", response_model=List[PrescriptionResponse], tags=["Prescriptions"])
async def list_prescriptions(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_prescriptions()


@router.get("/prescriptions/{prescription_id}", response_model=PrescriptionResponse, tags=["Prescriptions"])
async def get_prescription(
    prescription_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Prescription", prescription_id, service.get_prescription(prescription_id))


# =============================================================================
# STAFF
# =============================================================================

@router.post("/staff", response_model=StaffResponse, status_code=201, tags=["Staff"])
async def create_staff(
    staff: StaffCreate,
    service: HospitalRecordsService = Depends(get_records_service)
):
    """Add a staff member. Returns 409 if the phone number is taken."""
    return service.create_staff(**staff.model_dump())


@router.get("/staff", response_model=List[StaffResponse], tags=["Staff"])
async def list_staff(service: HospitalRecordsService = Depends(get_records_service)):
    return service.list_staff()


@router.get("/staff/{staff_id}", response_model=StaffResponse, tags=["Staff"])
async def get_staff(
    staff_id: EntityId,
    service: HospitalRecordsService = Depends(get_records_service)
):
    return _found("Staff", staff_id, service.get_staff(staff_id))
