from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, EmailStr, field_validator, model_validator


CENT = Decimal("0.01")
# Numeric(10, 2) holds at most 99999999.99
MAX_AMOUNT = Decimal("100000000")


def quantize_amount(value: Optional[Decimal]) -> Optional[Decimal]:
    """Round an amount to cents; amounts that round down to zero are rejected."""
    if value is None:
        return None
    try:
        value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError("Amount due is out of range")
    if value <= 0:
        raise ValueError("Amount due must be positive")
    if value >= MAX_AMOUNT:
        raise ValueError(f"Amount due must be less than {MAX_AMOUNT}")
    return value


class InvoiceBase(BaseModel):
    invoice_number: str = Field(..., min_length=1, max_length=100, examples=["INV-001"])
    client_name: str = Field(..., min_length=1, max_length=255)
    client_email: EmailStr = Field(..., description="Billing contact email")
    issue_date: date
    due_date: date
    services_rendered: str = Field(..., min_length=1, description="Free text description of services")
    paid: bool = Field(default=False)

    model_config = ConfigDict(from_attributes=True)


class InvoiceCreate(InvoiceBase):
    """Schema for creating a new invoice"""
    amount_due: Decimal = Field(..., gt=0, lt=MAX_AMOUNT, examples=[150.75])

    @field_validator("amount_due")
    @classmethod
    def round_amount(cls, value):
        return quantize_amount(value)


class InvoiceUpdate(BaseModel):
    """Partial update: only fields present in the payload are applied (exclude_unset)"""
    invoice_number: Optional[str] = Field(None, min_length=1, max_length=100)
    client_name: Optional[str] = Field(None, min_length=1, max_length=255)
    client_email: Optional[EmailStr] = None
    amount_due: Optional[Decimal] = Field(None, gt=0, lt=MAX_AMOUNT)
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    services_rendered: Optional[str] = Field(None, min_length=1)
    paid: Optional[bool] = None

    @field_validator("amount_due")
    @classmethod
    def round_amount(cls, value):
        return quantize_amount(value)

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        # Every column is NOT NULL: "absent" means keep, null is never a value
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class InvoiceResponse(InvoiceBase):
    """Schema returned to API clients"""
    id: int
    amount_due: float
    created_at: datetime
    updated_at: datetime

    @field_validator("amount_due", mode="before")
    @classmethod
    def amount_as_float(cls, value):
        return float(value)


class InvoiceDeleteResponse(BaseModel):
    success: bool


class InvoiceSummary(BaseModel):
    total_invoices: int
    paid_count: int
    unpaid_count: int
    overdue_count: int
    outstanding_total: float
