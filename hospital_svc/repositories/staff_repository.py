"""
Repository for staff database operations.
"""
from repositories.entity_repository import EntityRepository


class StaffRepository(EntityRepository):
    """Create/read access to the Staff table. Phone numbers are unique."""

    table = "Staff"
    id_column = "staff_id"
    columns = ("name", "role", "phone", "department_id")
