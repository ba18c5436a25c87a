"""Exception types raised by payslip operations."""

from __future__ import annotations

from enum import Enum
from typing import Any


class PayslipError(Exception):
    """Base class for payslip failures that map to an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_response(self) -> dict[str, Any]:
        """JSON body returned to the caller."""
        return {"error": self.message}


class PayslipValidationError(PayslipError):
    """Raised when a submission or lookup key fails an input rule."""

    status_code = 400


class PayslipNotFoundError(PayslipError):
    """Raised when no payslip exists for an employee and period."""

    status_code = 404

    def __init__(self, employee_id: str, month: str, year: str):
        self.employee_id = employee_id
        self.month = month
        self.year = year
        super().__init__("Payslip not found")


class ConstraintType(str, Enum):
    """Database constraint categories surfaced to callers."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"


CONSTRAINT_MESSAGES = {
    ConstraintType.UNIQUE: "Duplicate payslip for employee, month, and year",
    ConstraintType.FOREIGN_KEY: "Foreign key constraint violation",
    ConstraintType.CHECK: "Check constraint violation (e.g., invalid format or value)",
}


class ConstraintViolationError(PayslipError):
    """Raised when the store rejects a write on an integrity constraint."""

    status_code = 400

    def __init__(self, constraint_type: ConstraintType):
        self.constraint_type = constraint_type
        super().__init__(CONSTRAINT_MESSAGES[constraint_type])


class PayslipStoreError(PayslipError):
    """Raised for unexpected database failures."""

    status_code = 500

    def __init__(self, details: str):
        self.details = details
        super().__init__("Internal server error")

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}
