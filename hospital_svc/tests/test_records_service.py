"""
Tests for HospitalRecordsService: validated creates and id lookups.
"""
from datetime import date
from decimal import Decimal

import pytest

from core.exceptions import EntityValidationError, IntegrityViolationError
from schemas import AppointmentStatus, BillStatus, Gender


@pytest.fixture
def clinic(records_service):
    """One department, doctor and patient to hang appointments and bills on."""
    records_service.create_department(name="Cardiology")
    records_service.create_doctor(name="Dr. Anil Patil", specialization="Cardiologist", department_id=1)
    records_service.create_patient(name="Rahul Sharma", age=32, gender="M", phone="9876543210")
    return records_service


# =============================================================================
# CREATE
# =============================================================================

def test_create_patient(records_service):
    patient = records_service.create_patient(
        name="Priya Mehta", age=28, gender=Gender.FEMALE,
        phone="9876501234", address="Mumbai, Maharashtra"
    )

    assert patient.patient_id == 1
    assert patient.gender == Gender.FEMALE
    assert patient.address == "Mumbai, Maharashtra"


def test_create_patient_optional_fields_absent(records_service):
    patient = records_service.create_patient(name="Walk-in")
    assert patient.age is None
    assert patient.gender is None
    assert patient.phone is None


def test_create_doctor_and_staff(clinic):
    staff = clinic.create_staff(name="Sunita Deshmukh", role="Nurse", phone="9000000001", department_id=1)
    doctor = clinic.get_doctor(1)

    assert staff.staff_id == 1
    assert staff.department_id == 1
    assert doctor.name == "Dr. Anil Patil"
    assert doctor.department_id == 1


def test_appointment_status_defaults_to_scheduled(clinic):
    appointment = clinic.create_appointment(patient_id=1, doctor_id=1, appointment_date="2025-09-15")

    assert appointment.status == AppointmentStatus.SCHEDULED
    assert appointment.appointment_date == date(2025, 9, 15)


def test_appointment_accepts_date_object(clinic):
    appointment = clinic.create_appointment(
        patient_id=1, doctor_id=1, appointment_date=date(2025, 9, 12), status="Completed"
    )
    assert appointment.status == AppointmentStatus.COMPLETED


def test_bill_status_defaults_to_unpaid(clinic):
    bill = clinic.create_bill(patient_id=1, amount="5000.00", bill_date="2025-09-15")

    assert bill.status == BillStatus.UNPAID
    assert bill.amount == Decimal("5000.00")


def test_bill_amount_keeps_cents(clinic):
    bill = clinic.create_bill(patient_id=1, amount=Decimal("1234.56"), bill_date="2025-09-15", status="Paid")
    assert bill.amount == Decimal("1234.56")
    assert clinic.get_bill(bill.bill_id).amount == Decimal("1234.56")


def test_medicine_stock_defaults_to_zero(records_service):
    medicine = records_service.create_medicine(name="Ibuprofen", medicine_type="Tablet", price="15.00")

    assert medicine.stock == 0
    assert medicine.price == Decimal("15.00")


def test_create_prescription(clinic):
    clinic.create_appointment(patient_id=1, doctor_id=1, appointment_date="2025-09-15")
    clinic.create_medicine(name="Paracetamol", medicine_type="Tablet", price="10.00", stock=200)

    prescription = clinic.create_prescription(
        appointment_id=1, medicine_id=1, dosage="500mg", duration="5 days"
    )
    assert prescription.prescription_id == 1
    assert prescription.dosage == "500mg"


# =============================================================================
# VALIDATION
# =============================================================================

@pytest.mark.parametrize("gender", ["X", "male", ""])
def test_invalid_gender_rejected(records_service, gender):
    with pytest.raises(EntityValidationError) as exc_info:
        records_service.create_patient(name="Rahul Sharma", gender=gender)

    assert exc_info.value.status_code == 400
    assert exc_info.value.context["field"] == "gender"
    assert records_service.list_patients() == []


def test_negative_age_rejected(records_service):
    with pytest.raises(EntityValidationError):
        records_service.create_patient(name="Rahul Sharma", age=-1)


def test_blank_name_rejected(records_service):
    with pytest.raises(EntityValidationError):
        records_service.create_department(name="   ")


def test_invalid_appointment_status_rejected(clinic):
    with pytest.raises(EntityValidationError) as exc_info:
        clinic.create_appointment(patient_id=1, doctor_id=1, appointment_date="2025-09-15", status="Pending")

    assert "Pending" in exc_info.value.detail
    assert clinic.list_appointments() == []


def test_invalid_appointment_date_rejected(clinic):
    with pytest.raises(EntityValidationError):
        clinic.create_appointment(patient_id=1, doctor_id=1, appointment_date="15/09/2025")


def test_invalid_bill_status_rejected(clinic):
    with pytest.raises(EntityValidationError):
        clinic.create_bill(patient_id=1, amount="100.00", bill_date="2025-09-15", status="Partial")


@pytest.mark.parametrize("amount", ["-1.00", "10.005", "abc", None])
def test_invalid_bill_amount_rejected(clinic, amount):
    with pytest.raises(EntityValidationError):
        clinic.create_bill(patient_id=1, amount=amount, bill_date="2025-09-15")
    assert clinic.list_bills() == []


def test_negative_medicine_values_rejected(records_service):
    with pytest.raises(EntityValidationError):
        records_service.create_medicine(name="Paracetamol", stock=-5)
    with pytest.raises(EntityValidationError):
        records_service.create_medicine(name="Paracetamol", price="-10.00")
    assert records_service.list_medicines() == []


@pytest.mark.parametrize("stock", [1.5, Decimal("3"), "10", True])
def test_non_integer_stock_rejected_before_insert(records_service, stock):
    with pytest.raises(EntityValidationError) as exc_info:
        records_service.create_medicine(name="Paracetamol", stock=stock)

    assert exc_info.value.context["field"] == "stock"
    assert records_service.list_medicines() == []
    assert records_service.get_medicine(1) is None


@pytest.mark.parametrize("age", [30.5, Decimal("30"), "30"])
def test_non_integer_age_rejected_before_insert(records_service, age):
    with pytest.raises(EntityValidationError) as exc_info:
        records_service.create_patient(name="Rahul Sharma", age=age)

    assert exc_info.value.context["field"] == "age"
    assert records_service.list_patients() == []


@pytest.mark.parametrize("amount", ["12345678901234567.89", "100000000.00", Decimal("1E+9")])
def test_bill_amount_beyond_column_precision_rejected(clinic, amount):
    with pytest.raises(EntityValidationError) as exc_info:
        clinic.create_bill(patient_id=1, amount=amount, bill_date="2025-09-15")

    assert "digits" in exc_info.value.detail
    assert clinic.list_bills() == []


def test_largest_storable_amount_round_trips(clinic):
    bill = clinic.create_bill(patient_id=1, amount="99999999.99", bill_date="2025-09-15")

    assert bill.amount == Decimal("99999999.99")
    assert clinic.get_bill(bill.bill_id).amount == Decimal("99999999.99")


def test_medicine_price_beyond_column_precision_rejected(records_service):
    with pytest.raises(EntityValidationError):
        records_service.create_medicine(name="Paracetamol", price="123456789.00")
    assert records_service.list_medicines() == []


def test_medicine_type_stored_in_type_column(records_service):
    medicine = records_service.create_medicine(name="Cough Syrup", medicine_type="Syrup", stock=50)

    assert medicine.type == "Syrup"
    assert records_service.get_medicine(medicine.medicine_id).type == "Syrup"


# =============================================================================
# INTEGRITY
# =============================================================================

def test_duplicate_patient_phone(clinic):
    with pytest.raises(IntegrityViolationError):
        clinic.create_patient(name="Another Rahul", phone="9876543210")
    assert len(clinic.list_patients()) == 1


def test_duplicate_staff_phone(clinic):
    clinic.create_staff(name="Sunita Deshmukh", phone="9000000001", department_id=1)
    with pytest.raises(IntegrityViolationError):
        clinic.create_staff(name="Arjun Singh", phone="9000000001", department_id=1)


def test_appointment_for_missing_patient(clinic):
    with pytest.raises(IntegrityViolationError):
        clinic.create_appointment(patient_id=99, doctor_id=1, appointment_date="2025-09-15")


def test_bill_for_missing_patient(records_service):
    with pytest.raises(IntegrityViolationError):
        records_service.create_bill(patient_id=1, amount="10.00", bill_date="2025-09-15")


def test_prescription_for_missing_medicine(clinic):
    clinic.create_appointment(patient_id=1, doctor_id=1, appointment_date="2025-09-15")
    with pytest.raises(IntegrityViolationError):
        clinic.create_prescription(appointment_id=1, medicine_id=7)


# =============================================================================
# LOOKUPS
# =============================================================================

@pytest.mark.parametrize("getter", [
    "get_patient", "get_department", "get_doctor", "get_appointment",
    "get_bill", "get_medicine", "get_prescription", "get_staff",
])
def test_absent_lookup_returns_none(records_service, getter):
    assert getattr(records_service, getter)(1) is None


def test_list_returns_rows_in_id_order(records_service):
    records_service.create_department(name="Neurology")
    records_service.create_department(name="Cardiology")

    names = [d.name for d in records_service.list_departments()]
    assert names == ["Neurology", "Cardiology"]
