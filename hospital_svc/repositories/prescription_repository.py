"""
Repository for prescription database operations.
"""
from repositories.entity_repository import EntityRepository


class PrescriptionRepository(EntityRepository):
    """Create/read access to the Prescription table (Appointment to Medicine link)."""

    table = "Prescription"
    id_column = "prescription_id"
    columns = ("appointment_id", "medicine_id", "dosage", "duration")
