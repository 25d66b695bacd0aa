"""
Repository for appointment database operations.
"""
import sqlite3
from typing import Any, Dict

from repositories.entity_repository import EntityRepository
from core.datetime_utils import from_db_date


class AppointmentRepository(EntityRepository):
    """Create/read access to the Appointment table. Status defaults to Scheduled."""

    table = "Appointment"
    id_column = "appointment_id"
    columns = ("patient_id", "doctor_id", "appointment_date", "status")

    def _from_row(self, row: sqlite3.Row) -> Dict[str, Any]:
        data = dict(row)
        data["appointment_date"] = from_db_date(data["appointment_date"])
        return data
