"""
Base database connection and schema initialization.

This module handles connection management and creates the eight hospital
tables. Every connection enables foreign keys and a busy timeout, and
``Database.connection()`` scopes one unit of work: commit on success,
rollback on error, close on every exit path.

IMPORTANT: Database instantiation should be done through the DI layer.
Use core.dependencies.get_database() instead of instantiating directly.
"""
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from core.config import DATABASE_PATH, DATABASE_BUSY_TIMEOUT
from core.exceptions import DatabaseConnectionError, DatabaseError, IntegrityViolationError

logger = logging.getLogger(__name__)


# CHECK constraints hold the enum domains and non-negative numerics.
SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS Patient (
        patient_id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(100) NOT NULL,
        age INTEGER CHECK (age IS NULL OR age >= 0),
        gender TEXT CHECK (gender IN ('M', 'F', 'O')),
        phone VARCHAR(15) UNIQUE,
        address TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Department (
        department_id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(100) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Doctor (
        doctor_id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(100) NOT NULL,
        specialization VARCHAR(100),
        department_id INTEGER,
        FOREIGN KEY (department_id) REFERENCES Department(department_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Appointment (
        appointment_id INTEGER PRIMARY KEY AUTOINCREMENT,
        patient_id INTEGER,
        doctor_id INTEGER,
        appointment_date TEXT NOT NULL,
        status TEXT NOT NULL DEFAULT 'Scheduled'
            CHECK (status IN ('Scheduled', 'Completed', 'Cancelled')),
        FOREIGN KEY (patient_id) REFERENCES Patient(patient_id),
        FOREIGN KEY (doctor_id) REFERENCES Doctor(doctor_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Bill (
        bill_id INTEGER PRIMARY KEY AUTOINCREMENT,
        patient_id INTEGER,
        amount NUMERIC(10, 2) NOT NULL CHECK (amount >= 0),
        bill_date TEXT NOT NULL,
        status TEXT NOT NULL DEFAULT 'Unpaid' CHECK (status IN ('Paid', 'Unpaid')),
        FOREIGN KEY (patient_id) REFERENCES Patient(patient_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Medicine (
        medicine_id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(100) NOT NULL,
        type VARCHAR(50),
        price NUMERIC(10, 2) CHECK (price IS NULL OR price >= 0),
        stock INTEGER NOT NULL DEFAULT 0 CHECK (stock >= 0)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Prescription (
        prescription_id INTEGER PRIMARY KEY AUTOINCREMENT,
        appointment_id INTEGER,
        medicine_id INTEGER,
        dosage VARCHAR(50),
        duration VARCHAR(50),
        FOREIGN KEY (appointment_id) REFERENCES Appointment(appointment_id),
        FOREIGN KEY (medicine_id) REFERENCES Medicine(medicine_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS Staff (
        staff_id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(100) NOT NULL,
        role VARCHAR(50),
        phone VARCHAR(15) UNIQUE,
        department_id INTEGER,
        FOREIGN KEY (department_id) REFERENCES Department(department_id)
    )
    """,
)


class Database:
    """
    SQLite database handle for the hospital schema.

    Holds configuration only; every unit of work opens its own connection.

    Usage:
        # Via dependency injection (recommended):
        from core.dependencies import get_database
        db = get_database()

        # Direct instantiation (for testing):
        db = Database(db_path="/tmp/test.db")

        with db.connection("list bills") as conn:
            rows = conn.execute("SELECT * FROM Bill").fetchall()
    """

    def __init__(self, db_path: Optional[str] = None, busy_timeout: Optional[int] = None):
        """
        Initialize the database handle and create the schema.

        Args:
            db_path: Path to SQLite database file. Defaults to config DATABASE_PATH.
            busy_timeout: SQLite busy timeout in milliseconds. Defaults to config value.
        """
        self.db_path = db_path or DATABASE_PATH
        self.busy_timeout = busy_timeout if busy_timeout is not None else DATABASE_BUSY_TIMEOUT

        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._init_db()

    def _configure_connection(self, conn: sqlite3.Connection) -> None:
        """Apply per-connection pragmas and the row factory."""
        conn.execute(f"PRAGMA busy_timeout = {int(self.busy_timeout)}")
        # Foreign keys are off by default in SQLite and must be enabled per connection
        conn.execute("PRAGMA foreign_keys = ON")
        conn.row_factory = sqlite3.Row

    def get_connection(self) -> sqlite3.Connection:
        """
        Open a new configured connection.

        Raises:
            DatabaseConnectionError: If the database file cannot be opened.
        """
        conn = None
        try:
            conn = sqlite3.connect(self.db_path)
            self._configure_connection(conn)
        except sqlite3.Error as e:
            if conn is not None:
                conn.close()
            logger.error(
                "Database connection failed",
                extra={"db_path": self.db_path, "error": str(e)}
            )
            raise DatabaseConnectionError(db_path=self.db_path, error=str(e)) from e
        return conn

    @contextmanager
    def connection(self, operation: str = "query") -> Iterator[sqlite3.Connection]:
        """
        Scope one unit of work to a single connection.

        Commits when the block exits normally and rolls back otherwise.
        sqlite3 errors are translated into the service exception hierarchy.

        Args:
            operation: Short description used in error context and logs.

        Raises:
            IntegrityViolationError: On foreign-key, unique, NOT NULL or CHECK failures.
            DatabaseError: On any other sqlite3 error.
        """
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            logger.warning(
                "Integrity constraint violated",
                extra={"operation": operation, "constraint": str(e)}
            )
            raise IntegrityViolationError(constraint=str(e), operation=operation) from e
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(
                "Database operation failed",
                extra={"operation": operation, "error": str(e)}
            )
            raise DatabaseError(operation=operation, error=str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_db(self) -> None:
        """Create the schema if it does not exist."""
        with self.connection("schema initialization") as conn:
            for statement in SCHEMA:
                conn.execute(statement)

        logger.info(
            f"Database initialized: {self.db_path} "
            f"(busy_timeout={self.busy_timeout}ms)"
        )
