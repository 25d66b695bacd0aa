"""
Repository for bill database operations.
"""
import sqlite3
from typing import Any, Dict

from repositories.entity_repository import EntityRepository
from core.datetime_utils import from_db_date, to_money


class BillRepository(EntityRepository):
    """Create/read access to the Bill table. Status defaults to Unpaid."""

    table = "Bill"
    id_column = "bill_id"
    columns = ("patient_id", "amount", "bill_date", "status")

    def _from_row(self, row: sqlite3.Row) -> Dict[str, Any]:
        data = dict(row)
        data["amount"] = to_money(data["amount"])
        data["bill_date"] = from_db_date(data["bill_date"])
        return data
