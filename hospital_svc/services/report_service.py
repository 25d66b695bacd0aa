"""
Service layer for the hospital reports.

Validates report parameters, runs the matching ReportRepository query and
maps the rows to typed records. Reports are read-only and keep no state
between calls.

Architecture:
    API Layer (routers) → ReportService → ReportRepository → Database
"""
import logging
from decimal import Decimal
from typing import List, Union

from repositories import ReportRepository
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
    UnpaidBillRow,
)
from services.validators import (
    validate_money,
    validate_non_negative_int,
    validate_positive_int,
    validate_required_text,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_DOCTORS_LIMIT = 3
DEFAULT_LOW_STOCK_THRESHOLD = 60
DEFAULT_PAID_BILL_THRESHOLD = Decimal("2000")


class ReportService:
    """
    The canned hospital reports.

    Every method returns a list (possibly empty) of row models, except
    total_revenue which returns a single Decimal.
    """

    def __init__(self, report_repository: ReportRepository):
        """
        Args:
            report_repository: ReportRepository instance for data access.
                Injected via core.dependencies.get_report_service().
        """
        self._repo = report_repository

    def list_appointments_with_status(self) -> List[AppointmentStatusRow]:
        """Every appointment with its patient, doctor, date and status."""
        return [AppointmentStatusRow(**row) for row in self._repo.appointments_with_status()]

    def list_unpaid_bills(self) -> List[UnpaidBillRow]:
        """Bills still marked Unpaid, with the patient's name."""
        return [UnpaidBillRow(**row) for row in self._repo.unpaid_bills()]

    def total_revenue(self) -> Decimal:
        """Sum of all paid bills; Decimal('0.00') when nothing has been paid."""
        return self._repo.total_revenue()

    def top_doctors_by_appointments(
        self, limit: int = DEFAULT_TOP_DOCTORS_LIMIT
    ) -> List[DoctorAppointmentCountRow]:
        """
        Doctors ranked by number of appointments, at most ``limit`` rows.

        Ties are broken by doctor_id ascending. Fewer rows than ``limit`` are
        returned as-is.
        """
        validate_positive_int("limit", limit)
        return [DoctorAppointmentCountRow(**row) for row in self._repo.top_doctors(limit)]

    def low_stock_medicines(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> List[LowStockMedicineRow]:
        """Medicines whose stock is strictly below ``threshold``."""
        validate_non_negative_int("threshold", threshold)
        return [LowStockMedicineRow(**row) for row in self._repo.low_stock_medicines(threshold)]

    def prescriptions_for_patient(self, name: str) -> List[PatientPrescriptionRow]:
        """
        Prescriptions written for the patient with exactly this name.

        Case sensitivity follows the store's collation.
        """
        validate_required_text("name", name)
        return [PatientPrescriptionRow(**row) for row in self._repo.prescriptions_for_patient(name)]

    def staff_count_by_department(self) -> List[DepartmentStaffCountRow]:
        """Staff headcount per department; departments without staff report 0."""
        return [DepartmentStaffCountRow(**row) for row in self._repo.staff_count_by_department()]

    def patients_with_multiple_appointments(self) -> List[PatientAppointmentCountRow]:
        """Patients with more than one appointment."""
        return [
            PatientAppointmentCountRow(**row)
            for row in self._repo.patients_with_multiple_appointments()
        ]

    def paid_bills_above_amount(
        self, threshold: Union[Decimal, int, float, str] = DEFAULT_PAID_BILL_THRESHOLD
    ) -> List[PaidBillRow]:
        """Paid bills with an amount strictly greater than ``threshold``."""
        amount = validate_money("threshold", threshold)
        return [PaidBillRow(**row) for row in self._repo.paid_bills_above(amount)]

    def department_revenue(self, deduplicate: bool = False) -> List[DepartmentRevenueRow]:
        """
        Paid-bill revenue per department, attributed through the patient's
        appointments and their doctors' departments.

        By default a bill is summed once per joined appointment, so a patient
        with several appointments inflates the total. With ``deduplicate``
        each bill counts at most once per department; a patient seen in two
        departments still contributes to both.
        """
        logger.debug("Running department revenue report", extra={"deduplicate": deduplicate})
        return [
            DepartmentRevenueRow(**row)
            for row in self._repo.department_revenue(deduplicate=deduplicate)
        ]

    def list_bills_with_patients(self) -> List[BillWithPatientRow]:
        """Every bill with its patient's name and payment status."""
        return [BillWithPatientRow(**row) for row in self._repo.bills_with_patients()]
