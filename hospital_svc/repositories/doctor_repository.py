"""
Repository for doctor database operations.
"""
from repositories.entity_repository import EntityRepository


class DoctorRepository(EntityRepository):
    """Create/read access to the Doctor table. The department reference is optional."""

    table = "Doctor"
    id_column = "doctor_id"
    columns = ("name", "specialization", "department_id")
