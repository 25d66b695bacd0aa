"""
Pydantic schemas for bills and medicines.

Currency fields are Decimal with two places; negative amounts, prices and
stock levels are rejected.
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import BillStatus


class BillCreate(BaseModel):
    """Schema for raising a bill. Status defaults to Unpaid."""
    patient_id: int = Field(..., ge=1)
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, examples=["5000.00"])
    bill_date: date = Field(..., examples=["2025-09-15"])
    status: Optional[BillStatus] = Field(None, description="Paid or Unpaid")


class BillResponse(BaseModel):
    bill_id: int
    patient_id: Optional[int] = None
    amount: Decimal
    bill_date: date
    status: BillStatus

    model_config = ConfigDict(from_attributes=True)


class MedicineCreate(BaseModel):
    """Schema for adding a medicine to the pharmacy. Stock defaults to 0."""
    name: str = Field(..., min_length=1, max_length=100, examples=["Paracetamol"])
    type: Optional[str] = Field(None, max_length=50, examples=["Tablet"])
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2, examples=["10.00"])
    stock: Optional[int] = Field(None, ge=0, examples=[200])


class MedicineResponse(BaseModel):
    medicine_id: int
    name: str
    type: Optional[str] = None
    price: Optional[Decimal] = None
    stock: int

    model_config = ConfigDict(from_attributes=True)
