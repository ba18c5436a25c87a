"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Payslip schemas
# ============================================================================


class LineItemResponse(CamelModel):
    """Schema for an earning or deduction line."""

    component: str
    amount: float


class PayslipCreatedResponse(CamelModel):
    """Schema for a successful payslip submission."""

    message: str
    payslip_id: int


class PayslipResponse(CamelModel):
    """Schema for a stored payslip with its line items."""

    employee_id: str
    employee_name: str
    employee_type: str
    designation: str
    month: str
    month_name: str
    year: str
    month_year_formatted: str
    date_joining: str
    location: str
    days_in_month: float
    working_days: float
    arrear_days: float
    lop: float
    bank_name: str
    account_no: str
    pan: str
    provident_fund: str
    esic: str
    uan: str
    gross_pay: float
    total_deductions: float
    net_pay: float
    duration: str
    earnings: list[LineItemResponse]
    deductions: list[LineItemResponse]


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    error: str
    details: str | None = None
