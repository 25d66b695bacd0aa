"""
Repository for department database operations.
"""
from repositories.entity_repository import EntityRepository


class DepartmentRepository(EntityRepository):
    """Create/read access to the Department table."""

    table = "Department"
    id_column = "department_id"
    columns = ("name",)
