"""
Repository for patient database operations.

Architecture:
    PatientRepository is the data access layer for patients.
    It should be injected via core.dependencies.get_repositories().
"""
from repositories.entity_repository import EntityRepository


class PatientRepository(EntityRepository):
    """Create/read access to the Patient table. Phone numbers are unique."""

    table = "Patient"
    id_column = "patient_id"
    columns = ("name", "age", "gender", "phone", "address")
