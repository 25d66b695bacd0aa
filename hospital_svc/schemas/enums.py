"""
Closed value domains shared by schemas, validators and the schema CHECKs.
"""
from enum import Enum


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    OTHER = "O"


class AppointmentStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class BillStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"
