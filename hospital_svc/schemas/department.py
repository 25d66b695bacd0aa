"""
Pydantic schemas for departments and the people attached to them (doctors, staff).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DepartmentCreate(BaseModel):
    """Schema for creating a department."""
    name: str = Field(..., min_length=1, max_length=100, description="Department name", examples=["Cardiology"])


class DepartmentResponse(BaseModel):
    department_id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class DoctorCreate(BaseModel):
    """Schema for creating a doctor. The department is optional."""
    name: str = Field(..., min_length=1, max_length=100, examples=["Dr. Anil Patil"])
    specialization: Optional[str] = Field(None, max_length=100, examples=["Cardiologist"])
    department_id: Optional[int] = Field(None, ge=1, description="Department the doctor belongs to")


class DoctorResponse(BaseModel):
    doctor_id: int
    name: str
    specialization: Optional[str] = None
    department_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class StaffCreate(BaseModel):
    """Schema for creating a staff member (nurse, receptionist, lab assistant, ...)."""
    name: str = Field(..., min_length=1, max_length=100, examples=["Sunita Deshmukh"])
    role: Optional[str] = Field(None, max_length=50, examples=["Nurse"])
    phone: Optional[str] = Field(None, min_length=1, max_length=15, description="Contact number (unique)")
    department_id: Optional[int] = Field(None, ge=1)


class StaffResponse(BaseModel):
    staff_id: int
    name: str
    role: Optional[str] = None
    phone: Optional[str] = None
    department_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
