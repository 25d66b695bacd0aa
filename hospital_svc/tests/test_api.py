"""
Tests for the entity and report HTTP endpoints.
"""
from decimal import Decimal

import pytest


# =============================================================================
# ENTITY ENDPOINTS
# =============================================================================

def test_create_patient_success(client):
    response = client.post(
        "/api/v1/patients",
        json={"name": "Rahul Sharma", "age": 32, "gender": "M", "phone": "9876543210"}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["patient_id"] == 1
    assert data["name"] == "Rahul Sharma"
    assert data["gender"] == "M"


def test_create_patient_duplicate_phone(client):
    client.post("/api/v1/patients", json={"name": "Rahul Sharma", "phone": "9876543210"})

    response = client.post("/api/v1/patients", json={"name": "Someone", "phone": "9876543210"})
    assert response.status_code == 409
    assert "integrity constraint" in response.json()["detail"].lower()


@pytest.mark.parametrize("payload", [
    {},
    {"name": ""},
    {"name": "Rahul Sharma", "gender": "X"},
    {"name": "Rahul Sharma", "age": -3},
])
def test_create_patient_validation(client, payload):
    response = client.post("/api/v1/patients", json=payload)
    assert response.status_code == 422


def test_get_patient_not_found(client):
    response = client.get("/api/v1/patients/7")
    assert response.status_code == 404
    assert response.json()["detail"] == "Patient 7 not found"


def test_get_patient_rejects_non_positive_id(client):
    assert client.get("/api/v1/patients/0").status_code == 422


def test_list_patients_empty(client):
    response = client.get("/api/v1/patients")
    assert response.status_code == 200
    assert response.json() == []


def test_create_doctor_missing_department(client):
    response = client.post("/api/v1/doctors", json={"name": "Dr. Anil Patil", "department_id": 5})
    assert response.status_code == 409


def test_appointment_and_bill_defaults(client):
    client.post("/api/v1/departments", json={"name": "Cardiology"})
    client.post("/api/v1/doctors", json={"name": "Dr. Anil Patil", "department_id": 1})
    client.post("/api/v1/patients", json={"name": "Rahul Sharma"})

    appointment = client.post(
        "/api/v1/appointments",
        json={"patient_id": 1, "doctor_id": 1, "appointment_date": "2025-09-15"}
    )
    assert appointment.status_code == 201
    assert appointment.json()["status"] == "Scheduled"
    assert appointment.json()["appointment_date"] == "2025-09-15"

    bill = client.post(
        "/api/v1/bills",
        json={"patient_id": 1, "amount": "5000.00", "bill_date": "2025-09-15"}
    )
    assert bill.status_code == 201
    assert bill.json()["status"] == "Unpaid"
    assert Decimal(bill.json()["amount"]) == Decimal("5000.00")

    fetched = client.get(f"/api/v1/bills/{bill.json()['bill_id']}")
    assert fetched.status_code == 200
    assert fetched.json() == bill.json()


def test_invalid_appointment_status(client):
    response = client.post(
        "/api/v1/appointments",
        json={"patient_id": 1, "doctor_id": 1, "appointment_date": "2025-09-15", "status": "Pending"}
    )
    assert response.status_code == 422


def test_bill_amount_with_three_decimals_rejected(client):
    client.post("/api/v1/patients", json={"name": "Rahul Sharma"})
    response = client.post(
        "/api/v1/bills",
        json={"patient_id": 1, "amount": "10.005", "bill_date": "2025-09-15"}
    )
    assert response.status_code == 422


def test_medicine_stock_defaults_to_zero(client):
    response = client.post("/api/v1/medicines", json={"name": "Ibuprofen", "type": "Tablet", "price": "15.00"})
    assert response.status_code == 201
    assert response.json()["stock"] == 0
    assert response.json()["type"] == "Tablet"


def test_medicine_fractional_stock_rejected(client):
    response = client.post("/api/v1/medicines", json={"name": "Ibuprofen", "stock": 1.5})
    assert response.status_code == 422
    assert client.get("/api/v1/medicines").json() == []


def test_staff_and_prescription_round_trip(seeded_client):
    staff = seeded_client.get("/api/v1/staff")
    assert [s["name"] for s in staff.json()] == ["Sunita Deshmukh", "Arjun Singh", "Meena Sharma"]

    prescription = seeded_client.get("/api/v1/prescriptions/3")
    assert prescription.status_code == 200
    assert prescription.json()["dosage"] == "10ml"
    assert seeded_client.get("/api/v1/prescriptions/4").status_code == 404


# =============================================================================
# REPORT ENDPOINTS
# =============================================================================

def test_report_appointments(seeded_client):
    response = seeded_client.get("/api/v1/reports/appointments")
    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 4
    assert rows[0] == {
        "patient_name": "Rahul Sharma",
        "doctor_name": "Dr. Anil Patil",
        "appointment_date": "2025-09-15",
        "status": "Scheduled",
    }


def test_report_unpaid_bills(seeded_client):
    rows = seeded_client.get("/api/v1/reports/unpaid-bills").json()
    assert len(rows) == 1
    assert rows[0]["patient_name"] == "Rahul Sharma"
    assert Decimal(rows[0]["amount"]) == Decimal("5000.00")


def test_report_total_revenue(seeded_client):
    response = seeded_client.get("/api/v1/reports/total-revenue")
    assert response.status_code == 200
    assert Decimal(response.json()["total_revenue"]) == Decimal("3500.00")


def test_report_total_revenue_empty(client):
    response = client.get("/api/v1/reports/total-revenue")
    assert Decimal(response.json()["total_revenue"]) == Decimal("0")


def test_report_top_doctors_default_limit(seeded_client):
    rows = seeded_client.get("/api/v1/reports/top-doctors").json()
    assert [r["doctor_name"] for r in rows] == ["Dr. Anil Patil", "Dr. Nisha Rao", "Dr. Rajesh Kulkarni"]


def test_report_top_doctors_limit(seeded_client):
    assert len(seeded_client.get("/api/v1/reports/top-doctors?limit=10").json()) == 4
    assert seeded_client.get("/api/v1/reports/top-doctors?limit=0").status_code == 422


def test_report_low_stock(seeded_client):
    rows = seeded_client.get("/api/v1/reports/low-stock-medicines").json()
    assert rows == [{"medicine_name": "Cough Syrup", "stock": 50}]

    rows = seeded_client.get("/api/v1/reports/low-stock-medicines?threshold=120").json()
    assert [r["medicine_name"] for r in rows] == ["Amoxicillin", "Cough Syrup"]


def test_report_prescriptions(seeded_client):
    rows = seeded_client.get("/api/v1/reports/prescriptions", params={"patient_name": "Priya Mehta"}).json()
    assert [r["medicine_name"] for r in rows] == ["Paracetamol", "Amoxicillin"]


def test_report_prescriptions_requires_name(seeded_client):
    assert seeded_client.get("/api/v1/reports/prescriptions").status_code == 422


def test_report_staff_count(seeded_client):
    rows = seeded_client.get("/api/v1/reports/staff-count").json()
    assert rows[-1] == {"department_name": "Pediatrics", "staff_count": 0}


def test_report_repeat_patients(seeded_client):
    assert seeded_client.get("/api/v1/reports/repeat-patients").json() == []


def test_report_paid_bills(seeded_client):
    assert seeded_client.get("/api/v1/reports/paid-bills").json() == []

    rows = seeded_client.get("/api/v1/reports/paid-bills?threshold=1000").json()
    assert [(r["patient_name"], Decimal(r["amount"])) for r in rows] == [
        ("Priya Mehta", Decimal("2000.00")),
        ("Sara Khan", Decimal("1500.00")),
    ]


def test_report_paid_bills_rejects_sub_cent_threshold(seeded_client):
    response = seeded_client.get("/api/v1/reports/paid-bills?threshold=2000.005")
    assert response.status_code == 400
    assert response.json()["context"]["field"] == "threshold"


def test_report_department_revenue(seeded_client):
    rows = seeded_client.get("/api/v1/reports/department-revenue").json()
    assert [(r["department_name"], Decimal(r["department_revenue"])) for r in rows] == [
        ("Neurology", Decimal("2000.00")),
        ("Pediatrics", Decimal("1500.00")),
    ]

    deduplicated = seeded_client.get("/api/v1/reports/department-revenue?deduplicate=true")
    assert deduplicated.status_code == 200
    assert len(deduplicated.json()) == 2


def test_report_bills(seeded_client):
    rows = seeded_client.get("/api/v1/reports/bills").json()
    assert [(r["bill_id"], r["status"]) for r in rows] == [(1, "Unpaid"), (2, "Paid"), (3, "Paid")]
