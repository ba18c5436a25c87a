"""Payslip services."""

from payslip_service.services.payslip_reader import PayslipReader, PayslipRecord
from payslip_service.services.payslip_store import PayslipStore

__all__ = [
    "PayslipReader",
    "PayslipRecord",
    "PayslipStore",
]
