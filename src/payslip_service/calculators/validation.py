"""Input rules for payslip submissions.

Rules run in a fixed order and the first failure wins; the error message
names the rule that failed. Nothing here touches the database.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from payslip_service.calculators.types import (
    EmployeeType,
    LineItem,
    LineType,
    PayslipSubmission,
)
from payslip_service.errors import PayslipValidationError

REQUIRED_FIELDS = (
    "employeeName",
    "employeeType",
    "employeeId",
    "designation",
    "month",
    "monthName",
    "year",
    "dateJoining",
    "location",
    "daysInMonth",
    "workingDays",
    "arrearDays",
    "lop",
    "bankName",
    "accountNo",
    "pan",
    "providentFund",
    "esic",
    "uan",
    "earnings",
    "deductions",
)

EMPLOYEE_ID_PATTERN = re.compile(r"ATS0(?!000)[0-9]{3}")
MONTH_PATTERN = re.compile(r"0[1-9]|1[0-2]")
YEAR_PATTERN = re.compile(r"20[0-9]{2}")
PAN_PATTERN = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")
ACCOUNT_NO_PATTERN = re.compile(r"[0-9]{8,18}")
PROVIDENT_FUND_PATTERN = re.compile(r"[A-Z]{5}[0-9]{8,18}")
ESIC_PATTERN = re.compile(r"[0-9]{10}")
UAN_PATTERN = re.compile(r"1[0-9]{10}")

# (field, pattern, message), checked after employeeId and employeeType
FORMAT_RULES: tuple[tuple[str, re.Pattern[str], str], ...] = (
    ("month", MONTH_PATTERN, "Invalid month (must be 01-12)"),
    ("year", YEAR_PATTERN, "Invalid year (must be 20XX)"),
    ("pan", PAN_PATTERN, "Invalid PAN format"),
    ("accountNo", ACCOUNT_NO_PATTERN, "Invalid account number (8-18 digits)"),
    ("providentFund", PROVIDENT_FUND_PATTERN, "Invalid provident fund number format"),
    ("esic", ESIC_PATTERN, "Invalid ESIC number (10 digits)"),
    ("uan", UAN_PATTERN, "Invalid UAN number (starts with 1, 11 digits)"),
)

COUNTER_FIELDS = ("daysInMonth", "workingDays", "arrearDays", "lop")

EMPLOYEE_ID_MESSAGE = "Invalid employeeId format (must be ATS0XXX, XXX from 001-999)"
EMPLOYEE_TYPE_MESSAGE = (
    "Invalid employeeType (must be Permanent, Contract, or Temporary)"
)


def matches(pattern: re.Pattern[str], value: Any) -> bool:
    """Full-string match; non-string values never match."""
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def to_decimal(value: Any) -> Decimal | None:
    """Parse an int, float or numeric string; None if not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        text = str(value)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
    else:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _parse_line(entry: Any, line_type: LineType) -> LineItem | None:
    if not isinstance(entry, Mapping):
        return None
    component = entry.get("component")
    if not isinstance(component, str) or not component:
        return None
    amount = to_decimal(entry.get("amount"))
    if amount is None:
        return None
    if line_type == LineType.EARNING and amount <= 0:
        return None
    if line_type == LineType.DEDUCTION and amount < 0:
        return None
    return LineItem(line_type=line_type, component=component, amount=amount)


def validate_payslip(data: Mapping[str, Any]) -> PayslipSubmission:
    """Validate a raw submission and return it normalized.

    Raises:
        PayslipValidationError: with the message of the first failing rule
    """
    for name in REQUIRED_FIELDS:
        if data.get(name) is None:
            raise PayslipValidationError(f"Missing required field: {name}")

    if not matches(EMPLOYEE_ID_PATTERN, data["employeeId"]):
        raise PayslipValidationError(EMPLOYEE_ID_MESSAGE)
    if data["employeeType"] not in [t.value for t in EmployeeType]:
        raise PayslipValidationError(EMPLOYEE_TYPE_MESSAGE)

    for name, pattern, message in FORMAT_RULES:
        if not matches(pattern, data[name]):
            raise PayslipValidationError(message)

    earnings_raw = data["earnings"]
    deductions_raw = data["deductions"]
    if not _is_sequence(earnings_raw) or len(earnings_raw) == 0:
        raise PayslipValidationError("Earnings must be a non-empty array")
    if not _is_sequence(deductions_raw) or len(deductions_raw) == 0:
        raise PayslipValidationError("Deductions must be a non-empty array")

    counters: dict[str, Decimal] = {}
    for name in COUNTER_FIELDS:
        value = to_decimal(data[name])
        if value is None or value < 0:
            raise PayslipValidationError(
                f"Invalid {name} (must be a non-negative number)"
            )
        counters[name] = value

    if not 28 <= counters["daysInMonth"] <= 31:
        raise PayslipValidationError("Days in month must be between 28 and 31")
    if counters["workingDays"] > counters["daysInMonth"]:
        raise PayslipValidationError("Working days cannot exceed days in month")

    earnings: list[LineItem] = []
    for entry in earnings_raw:
        line = _parse_line(entry, LineType.EARNING)
        if line is None:
            raise PayslipValidationError(
                "Invalid earning entry (must have component and positive amount)"
            )
        earnings.append(line)

    deductions: list[LineItem] = []
    for entry in deductions_raw:
        line = _parse_line(entry, LineType.DEDUCTION)
        if line is None:
            raise PayslipValidationError(
                "Invalid deduction entry (must have component and non-negative amount)"
            )
        deductions.append(line)

    return PayslipSubmission(
        employee_id=data["employeeId"],
        employee_name=str(data["employeeName"]),
        employee_type=EmployeeType(data["employeeType"]),
        designation=str(data["designation"]),
        month=data["month"],
        month_name=str(data["monthName"]),
        year=data["year"],
        date_joining=str(data["dateJoining"]),
        location=str(data["location"]),
        days_in_month=counters["daysInMonth"],
        working_days=counters["workingDays"],
        arrear_days=counters["arrearDays"],
        lop=counters["lop"],
        bank_name=str(data["bankName"]),
        account_no=data["accountNo"],
        pan=data["pan"],
        provident_fund=data["providentFund"],
        esic=data["esic"],
        uan=data["uan"],
        earnings=earnings,
        deductions=deductions,
    )


def validate_period_key(employee_id: str, month: str, year: str) -> None:
    """Check the lookup key of a stored payslip.

    Raises:
        PayslipValidationError: if any part of the key is malformed
    """
    if not matches(EMPLOYEE_ID_PATTERN, employee_id):
        raise PayslipValidationError("Invalid employeeId format")
    if not matches(MONTH_PATTERN, month):
        raise PayslipValidationError("Invalid month (must be 01-12)")
    if not matches(YEAR_PATTERN, year):
        raise PayslipValidationError("Invalid year (must be 20XX)")
