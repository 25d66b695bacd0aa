"""
Repository for medicine database operations.
"""
import sqlite3
from typing import Any, Dict

from repositories.entity_repository import EntityRepository
from core.datetime_utils import to_money


class MedicineRepository(EntityRepository):
    """Create/read access to the Medicine table. Stock defaults to 0."""

    table = "Medicine"
    id_column = "medicine_id"
    columns = ("name", "type", "price", "stock")

    def _from_row(self, row: sqlite3.Row) -> Dict[str, Any]:
        data = dict(row)
        data["price"] = to_money(data["price"])
        return data
