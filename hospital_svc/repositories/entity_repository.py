"""
Shared create/read repository for the hospital tables.

Each entity repository declares its table, key column and insertable
columns; this class supplies the parameterized INSERT and SELECT
statements. Identifiers are class constants, values are always bound
parameters.

All SQL is encapsulated in repositories - no SQL in service or API layers.
"""
import logging
import sqlite3
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple

from repositories.base import Database

logger = logging.getLogger(__name__)


class EntityRepository:
    """
    Create and read operations for one table.

    Subclasses set ``table``, ``id_column`` and ``columns`` and may override
    ``_from_row`` to convert stored values (dates, currency) on the way out.
    """

    table: ClassVar[str]
    id_column: ClassVar[str]
    columns: ClassVar[Tuple[str, ...]]

    def __init__(self, db: Database):
        """
        Args:
            db: Database instance for data access.
                Injected via core.dependencies.
        """
        self._db = db

    def _from_row(self, row: sqlite3.Row) -> Dict[str, Any]:
        return dict(row)

    def _insert_sql(self, keys: Sequence[str]) -> str:
        unknown = set(keys) - set(self.columns)
        if unknown:
            raise KeyError(f"Unknown {self.table} columns: {sorted(unknown)}")
        placeholders = ", ".join("?" for _ in keys)
        return f"INSERT INTO {self.table} ({', '.join(keys)}) VALUES ({placeholders})"

    def add(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Insert one row and return it as stored.

        Columns missing from ``values`` take their schema default. The row is
        re-read on the same connection so store-assigned values come back.

        Raises:
            IntegrityViolationError: If the store rejects the row.
        """
        keys = list(values)
        with self._db.connection(f"insert into {self.table}") as conn:
            cursor = conn.execute(self._insert_sql(keys), [values[k] for k in keys])
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE {self.id_column} = ?",
                (cursor.lastrowid,)
            ).fetchone()
        return self._from_row(row)

    def add_many(self, rows: Sequence[Mapping[str, Any]]) -> int:
        """
        Insert several rows as one batch: all of them or none.

        Every row must carry the same keys as the first.

        Returns:
            int: Number of rows inserted.
        """
        if not rows:
            return 0
        keys = list(rows[0])
        params = []
        for row in rows:
            if list(row) != keys:
                raise KeyError(f"Batch rows for {self.table} must share the same columns")
            params.append([row[k] for k in keys])

        with self._db.connection(f"batch insert into {self.table}") as conn:
            conn.executemany(self._insert_sql(keys), params)

        logger.debug(f"Inserted {len(params)} rows into {self.table}")
        return len(params)

    def get_by_id(self, entity_id: int) -> Optional[Dict[str, Any]]:
        """Get one row by primary key, or None if it does not exist."""
        with self._db.connection(f"select from {self.table}") as conn:
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE {self.id_column} = ?",
                (entity_id,)
            ).fetchone()
        return self._from_row(row) if row else None

    def get_all(self) -> List[Dict[str, Any]]:
        """Get every row ordered by primary key."""
        with self._db.connection(f"select from {self.table}") as conn:
            rows = conn.execute(
                f"SELECT * FROM {self.table} ORDER BY {self.id_column}"
            ).fetchall()
        return [self._from_row(row) for row in rows]

    def count(self) -> int:
        """Count the rows in the table."""
        with self._db.connection(f"count {self.table}") as conn:
            return conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()[0]
