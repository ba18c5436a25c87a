"""Read path for payslips."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payslip_service.calculators.validation import validate_period_key
from payslip_service.errors import PayslipNotFoundError, PayslipStoreError
from payslip_service.models import Deduction, Earning, Payslip

logger = logging.getLogger(__name__)


@dataclass
class PayslipRecord:
    """A payslip header with its line items in insertion order."""

    payslip: Payslip
    earnings: list[Earning]
    deductions: list[Deduction]

    @property
    def month_year_formatted(self) -> str:
        return self.payslip.month_year_formatted


class PayslipReader:
    """Loads stored payslips by employee and period."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_header(self, employee_id: str, month: str, year: str) -> Payslip | None:
        """Load the payslip header for a period, if any."""
        result = await self.session.execute(
            select(Payslip)
            .where(
                Payslip.employee_id == employee_id,
                Payslip.month == month,
                Payslip.year == year,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def fetch(self, employee_id: str, month: str, year: str) -> PayslipRecord:
        """Fetch a payslip with its earnings and deductions.

        Raises:
            PayslipValidationError: If the key is malformed
            PayslipNotFoundError: If no payslip exists for the period
            PayslipStoreError: If the database lookup fails
        """
        validate_period_key(employee_id, month, year)

        try:
            payslip = await self.get_header(employee_id, month, year)
            if payslip is None:
                raise PayslipNotFoundError(employee_id, month, year)

            earnings = await self.session.scalars(
                select(Earning).where(Earning.payslip_id == payslip.id).order_by(Earning.id)
            )
            deductions = await self.session.scalars(
                select(Deduction)
                .where(Deduction.payslip_id == payslip.id)
                .order_by(Deduction.id)
            )
        except SQLAlchemyError as e:
            logger.exception("Error fetching payslip %s %s/%s", employee_id, month, year)
            raise PayslipStoreError(str(e)) from e

        return PayslipRecord(
            payslip=payslip,
            earnings=list(earnings.all()),
            deductions=list(deductions.all()),
        )
