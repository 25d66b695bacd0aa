"""
Pydantic schemas for appointments and the prescriptions written during them.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import AppointmentStatus


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment. Status defaults to Scheduled."""
    patient_id: int = Field(..., ge=1)
    doctor_id: int = Field(..., ge=1)
    appointment_date: date = Field(..., examples=["2025-09-15"])
    status: Optional[AppointmentStatus] = Field(None, description="Scheduled, Completed or Cancelled")


class AppointmentResponse(BaseModel):
    appointment_id: int
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    appointment_date: date
    status: AppointmentStatus

    model_config = ConfigDict(from_attributes=True)


class PrescriptionCreate(BaseModel):
    """Schema for prescribing a medicine during an appointment."""
    appointment_id: int = Field(..., ge=1)
    medicine_id: int = Field(..., ge=1)
    dosage: Optional[str] = Field(None, max_length=50, examples=["500mg"])
    duration: Optional[str] = Field(None, max_length=50, examples=["5 days"])


class PrescriptionResponse(BaseModel):
    prescription_id: int
    appointment_id: Optional[int] = None
    medicine_id: Optional[int] = None
    dosage: Optional[str] = None
    duration: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
