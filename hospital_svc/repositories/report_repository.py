"""
Repository for the canned hospital reports.

Each method issues exactly one parameterized SELECT and returns plain dicts
in a deterministic order, so repeated calls over unchanged data return
identical results. Empty tables yield empty lists.

Architecture:
    ReportService → ReportRepository → Database
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List

from repositories.base import Database
from core.datetime_utils import from_db_date, to_money

logger = logging.getLogger(__name__)


APPOINTMENTS_WITH_STATUS_SQL = """
    SELECT p.name AS patient_name,
           d.name AS doctor_name,
           a.appointment_date,
           a.status
    FROM Appointment a
    JOIN Patient p ON a.patient_id = p.patient_id
    JOIN Doctor d ON a.doctor_id = d.doctor_id
    ORDER BY a.appointment_id
"""

UNPAID_BILLS_SQL = """
    SELECT b.bill_id,
           p.name AS patient_name,
           b.amount,
           b.bill_date
    FROM Bill b
    JOIN Patient p ON b.patient_id = p.patient_id
    WHERE b.status = 'Unpaid'
    ORDER BY b.bill_id
"""

TOTAL_REVENUE_SQL = """
    SELECT COALESCE(SUM(amount), 0) AS total_revenue
    FROM Bill
    WHERE status = 'Paid'
"""

TOP_DOCTORS_SQL = """
    SELECT d.name AS doctor_name,
           COUNT(a.appointment_id) AS total_appointments
    FROM Doctor d
    JOIN Appointment a ON d.doctor_id = a.doctor_id
    GROUP BY d.doctor_id
    ORDER BY total_appointments DESC, d.doctor_id ASC
    LIMIT ?
"""

LOW_STOCK_SQL = """
    SELECT name AS medicine_name,
           stock
    FROM Medicine
    WHERE stock < ?
    ORDER BY medicine_id
"""

PRESCRIPTIONS_FOR_PATIENT_SQL = """
    SELECT p.name AS patient_name,
           m.name AS medicine_name,
           pr.dosage,
           pr.duration
    FROM Prescription pr
    JOIN Appointment a ON pr.appointment_id = a.appointment_id
    JOIN Patient p ON a.patient_id = p.patient_id
    JOIN Medicine m ON pr.medicine_id = m.medicine_id
    WHERE p.name = ?
    ORDER BY pr.prescription_id
"""

STAFF_COUNT_SQL = """
    SELECT d.name AS department_name,
           COUNT(s.staff_id) AS staff_count
    FROM Department d
    LEFT JOIN Staff s ON d.department_id = s.department_id
    GROUP BY d.department_id
    ORDER BY d.department_id
"""

REPEAT_PATIENTS_SQL = """
    SELECT p.name AS patient_name,
           COUNT(a.appointment_id) AS total_appointments
    FROM Patient p
    JOIN Appointment a ON p.patient_id = a.patient_id
    GROUP BY p.patient_id
    HAVING COUNT(a.appointment_id) > 1
    ORDER BY p.patient_id
"""

PAID_BILLS_ABOVE_SQL = """
    SELECT p.name AS patient_name,
           b.amount
    FROM Bill b
    JOIN Patient p ON b.patient_id = p.patient_id
    WHERE b.status = 'Paid' AND b.amount > ?
    ORDER BY b.bill_id
"""

# One row per joined appointment: a bill is summed once for every
# appointment its patient has with a doctor in the department.
DEPARTMENT_REVENUE_SQL = """
    SELECT d.name AS department_name,
           SUM(b.amount) AS department_revenue
    FROM Bill b
    JOIN Patient p ON b.patient_id = p.patient_id
    JOIN Appointment a ON p.patient_id = a.patient_id
    JOIN Doctor doc ON a.doctor_id = doc.doctor_id
    JOIN Department d ON doc.department_id = d.department_id
    WHERE b.status = 'Paid'
    GROUP BY d.department_id
    ORDER BY d.department_id
"""

# Each paid bill counted at most once per department.
DEPARTMENT_REVENUE_DISTINCT_SQL = """
    SELECT d.name AS department_name,
           SUM(pairs.amount) AS department_revenue
    FROM (
        SELECT DISTINCT doc.department_id, b.bill_id, b.amount
        FROM Bill b
        JOIN Appointment a ON b.patient_id = a.patient_id
        JOIN Doctor doc ON a.doctor_id = doc.doctor_id
        WHERE b.status = 'Paid'
    ) AS pairs
    JOIN Department d ON pairs.department_id = d.department_id
    GROUP BY d.department_id
    ORDER BY d.department_id
"""

BILLS_WITH_PATIENTS_SQL = """
    SELECT b.bill_id,
           p.name AS patient_name,
           b.amount,
           b.bill_date,
           b.status
    FROM Bill b
    JOIN Patient p ON b.patient_id = p.patient_id
    ORDER BY b.bill_id
"""


class ReportRepository:
    """
    Read-only access for the hospital reports.

    Parameters are assumed validated by the service layer.
    """

    def __init__(self, db: Database):
        """
        Args:
            db: Database instance for data access.
                Injected via core.dependencies.get_report_repository().
        """
        self._db = db

    def _fetch(self, name: str, sql: str, params: tuple = ()) -> List[Dict[str, Any]]:
        with self._db.connection(f"report {name}") as conn:
            rows = conn.execute(sql, params).fetchall()
        logger.debug(f"Report {name} returned {len(rows)} rows")
        return [dict(row) for row in rows]

    def appointments_with_status(self) -> List[Dict[str, Any]]:
        rows = self._fetch("appointments_with_status", APPOINTMENTS_WITH_STATUS_SQL)
        for row in rows:
            row["appointment_date"] = from_db_date(row["appointment_date"])
        return rows

    def unpaid_bills(self) -> List[Dict[str, Any]]:
        rows = self._fetch("unpaid_bills", UNPAID_BILLS_SQL)
        for row in rows:
            row["amount"] = to_money(row["amount"])
            row["bill_date"] = from_db_date(row["bill_date"])
        return rows

    def total_revenue(self) -> Decimal:
        rows = self._fetch("total_revenue", TOTAL_REVENUE_SQL)
        return to_money(rows[0]["total_revenue"])

    def top_doctors(self, limit: int) -> List[Dict[str, Any]]:
        return self._fetch("top_doctors", TOP_DOCTORS_SQL, (limit,))

    def low_stock_medicines(self, threshold: int) -> List[Dict[str, Any]]:
        return self._fetch("low_stock_medicines", LOW_STOCK_SQL, (threshold,))

    def prescriptions_for_patient(self, patient_name: str) -> List[Dict[str, Any]]:
        return self._fetch("prescriptions_for_patient", PRESCRIPTIONS_FOR_PATIENT_SQL, (patient_name,))

    def staff_count_by_department(self) -> List[Dict[str, Any]]:
        return self._fetch("staff_count_by_department", STAFF_COUNT_SQL)

    def patients_with_multiple_appointments(self) -> List[Dict[str, Any]]:
        return self._fetch("patients_with_multiple_appointments", REPEAT_PATIENTS_SQL)

    def paid_bills_above(self, threshold: Decimal) -> List[Dict[str, Any]]:
        # sqlite3 cannot bind Decimal; the NUMERIC column compares numerically with a float
        rows = self._fetch("paid_bills_above", PAID_BILLS_ABOVE_SQL, (float(threshold),))
        for row in rows:
            row["amount"] = to_money(row["amount"])
        return rows

    def department_revenue(self, deduplicate: bool = False) -> List[Dict[str, Any]]:
        sql = DEPARTMENT_REVENUE_DISTINCT_SQL if deduplicate else DEPARTMENT_REVENUE_SQL
        rows = self._fetch("department_revenue", sql)
        for row in rows:
            row["department_revenue"] = to_money(row["department_revenue"])
        return rows

    def bills_with_patients(self) -> List[Dict[str, Any]]:
        rows = self._fetch("bills_with_patients", BILLS_WITH_PATIENTS_SQL)
        for row in rows:
            row["amount"] = to_money(row["amount"])
            row["bill_date"] = from_db_date(row["bill_date"])
        return rows
