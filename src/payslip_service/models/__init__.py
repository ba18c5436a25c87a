"""SQLAlchemy ORM models for payslips."""

from payslip_service.models.base import Base, TimestampMixin
from payslip_service.models.payslip import Deduction, Earning, Payslip

__all__ = [
    "Base",
    "TimestampMixin",
    "Payslip",
    "Earning",
    "Deduction",
]
