"""Payslip validation and arithmetic."""

from payslip_service.calculators.duration import calculate_duration
from payslip_service.calculators.types import (
    EmployeeType,
    LineItem,
    LineType,
    PayslipSubmission,
    PayslipTotals,
)
from payslip_service.calculators.validation import validate_payslip, validate_period_key

__all__ = [
    "calculate_duration",
    "EmployeeType",
    "LineItem",
    "LineType",
    "PayslipSubmission",
    "PayslipTotals",
    "validate_payslip",
    "validate_period_key",
]
