"""Type definitions for payslip submissions and totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any


class LineType(str, Enum):
    """Payslip line item types."""

    EARNING = "EARNING"
    DEDUCTION = "DEDUCTION"


class EmployeeType(str, Enum):
    """Accepted employment types."""

    PERMANENT = "Permanent"
    CONTRACT = "Contract"
    TEMPORARY = "Temporary"


@dataclass(frozen=True)
class LineItem:
    """A validated earning or deduction."""

    line_type: LineType
    component: str
    amount: Decimal


@dataclass(frozen=True)
class PayslipTotals:
    """Gross, deductions and net derived from line items."""

    gross_pay: Decimal
    total_deductions: Decimal
    net_pay: Decimal

    @classmethod
    def from_lines(
        cls, earnings: list[LineItem], deductions: list[LineItem]
    ) -> PayslipTotals:
        """Sum line items. Net pay is allowed to go negative."""
        gross = sum((line.amount for line in earnings), Decimal("0"))
        total_deductions = sum((line.amount for line in deductions), Decimal("0"))
        return cls(
            gross_pay=gross,
            total_deductions=total_deductions,
            net_pay=gross - total_deductions,
        )


@dataclass
class PayslipSubmission:
    """A payslip submission that passed validation."""

    employee_id: str
    employee_name: str
    employee_type: EmployeeType
    designation: str
    month: str
    month_name: str
    year: str
    date_joining: str
    location: str
    days_in_month: Decimal
    working_days: Decimal
    arrear_days: Decimal
    lop: Decimal
    bank_name: str
    account_no: str
    pan: str
    provident_fund: str
    esic: str
    uan: str
    earnings: list[LineItem] = field(default_factory=list)
    deductions: list[LineItem] = field(default_factory=list)

    @property
    def totals(self) -> PayslipTotals:
        return PayslipTotals.from_lines(self.earnings, self.deductions)

    def header_values(self) -> dict[str, Any]:
        """Column values for the payslip header, excluding derived fields."""
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "employee_type": self.employee_type.value,
            "designation": self.designation,
            "month": self.month,
            "month_name": self.month_name,
            "year": self.year,
            "date_joining": self.date_joining,
            "location": self.location,
            "days_in_month": self.days_in_month,
            "working_days": self.working_days,
            "arrear_days": self.arrear_days,
            "lop": self.lop,
            "bank_name": self.bank_name,
            "account_no": self.account_no,
            "pan": self.pan,
            "provident_fund": self.provident_fund,
            "esic": self.esic,
            "uan": self.uan,
        }
