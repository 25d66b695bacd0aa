"""
Pydantic schemas for patient-related API operations.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import Gender


class PatientCreate(BaseModel):
    """Schema for registering a new patient.

    Phone numbers are unique across patients when present.
    """
    name: str = Field(..., min_length=1, max_length=100, description="Patient full name")
    age: Optional[int] = Field(None, ge=0, description="Age in years")
    gender: Optional[Gender] = Field(None, description="M, F or O")
    phone: Optional[str] = Field(None, min_length=1, max_length=15, description="Contact number (unique)")
    address: Optional[str] = Field(None, description="Postal address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Rahul Sharma",
                "age": 32,
                "gender": "M",
                "phone": "9876543210",
                "address": "Pune, Maharashtra"
            }
        }
    )


class PatientResponse(BaseModel):
    """Schema for a stored patient."""
    patient_id: int = Field(..., description="Unique patient identifier")
    name: str
    age: Optional[int] = None
    gender: Optional[Gender] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
