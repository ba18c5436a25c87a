"""Transactional write path for payslips."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payslip_service.calculators.duration import calculate_duration
from payslip_service.calculators.types import LineItem, PayslipSubmission
from payslip_service.errors import (
    ConstraintType,
    ConstraintViolationError,
    PayslipStoreError,
)
from payslip_service.models import Deduction, Earning, Payslip

logger = logging.getLogger(__name__)

PERIOD_KEY = ["employee_id", "month", "year"]

# SQLSTATE codes for integrity violations
SQLSTATE_CONSTRAINTS = {
    "23505": ConstraintType.UNIQUE,
    "23503": ConstraintType.FOREIGN_KEY,
    "23514": ConstraintType.CHECK,
}

# Fallback for drivers without SQLSTATE (SQLite)
MESSAGE_CONSTRAINTS = {
    "unique constraint": ConstraintType.UNIQUE,
    "foreign key constraint": ConstraintType.FOREIGN_KEY,
    "check constraint": ConstraintType.CHECK,
}


def classify_integrity_error(exc: IntegrityError) -> ConstraintType | None:
    """Map a driver integrity error to a constraint category."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in SQLSTATE_CONSTRAINTS:
        return SQLSTATE_CONSTRAINTS[sqlstate]

    message = str(orig).lower()
    for needle, constraint_type in MESSAGE_CONSTRAINTS.items():
        if needle in message:
            return constraint_type
    return None


class PayslipStore:
    """Persists payslips with idempotent overwrite semantics.

    Key invariants:
    1. One payslip per (employee_id, month, year), enforced by a unique constraint
    2. The header is written with a single INSERT ... ON CONFLICT DO UPDATE, so
       concurrent submissions for the same period cannot both insert
    3. Resubmission keeps the header id and fully replaces its line items
    4. Header and line items commit together or not at all
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _insert(self):
        dialect = self.session.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite_insert(Payslip)
        return pg_insert(Payslip)

    async def submit(self, submission: PayslipSubmission) -> int:
        """Create or overwrite the payslip for the submission's period.

        Returns the payslip id.

        Raises:
            ConstraintViolationError: If the database rejects the write
            PayslipStoreError: For any other database failure
        """
        totals = submission.totals
        values: dict[str, Any] = submission.header_values()
        values.update(
            gross_pay=totals.gross_pay,
            total_deductions=totals.total_deductions,
            net_pay=totals.net_pay,
            duration=calculate_duration(
                submission.date_joining, submission.year, submission.month
            ),
        )

        try:
            payslip_id = await self._upsert_header(values)
            await self._replace_line_items(
                payslip_id, submission.earnings, submission.deductions
            )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.exception(
                "Error generating payslip for %s %s/%s",
                submission.employee_id,
                submission.month,
                submission.year,
            )
            constraint_type = classify_integrity_error(e)
            if constraint_type is None:
                raise PayslipStoreError(str(e.orig)) from e
            raise ConstraintViolationError(constraint_type) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(
                "Error generating payslip for %s %s/%s",
                submission.employee_id,
                submission.month,
                submission.year,
            )
            raise PayslipStoreError(str(e)) from e

        logger.info(
            "Stored payslip %s for %s %s/%s (net %s)",
            payslip_id,
            submission.employee_id,
            submission.month,
            submission.year,
            totals.net_pay,
        )
        return payslip_id

    async def _upsert_header(self, values: dict[str, Any]) -> int:
        """Insert the header or overwrite the existing row for the period."""
        stmt = self._insert().values(**values)
        overwrite = {
            name: stmt.excluded[name] for name in values if name not in PERIOD_KEY
        }
        overwrite["updated_at"] = func.now()
        stmt = stmt.on_conflict_do_update(
            index_elements=PERIOD_KEY,
            set_=overwrite,
        ).returning(Payslip.id)

        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _replace_line_items(
        self,
        payslip_id: int,
        earnings: list[LineItem],
        deductions: list[LineItem],
    ) -> None:
        """Delete the payslip's line items and insert the submitted ones in order."""
        await self.session.execute(delete(Earning).where(Earning.payslip_id == payslip_id))
        await self.session.execute(
            delete(Deduction).where(Deduction.payslip_id == payslip_id)
        )

        self.session.add_all(
            [
                Earning(payslip_id=payslip_id, component=line.component, amount=line.amount)
                for line in earnings
            ]
        )
        self.session.add_all(
            [
                Deduction(payslip_id=payslip_id, component=line.component, amount=line.amount)
                for line in deductions
            ]
        )
        await self.session.flush()
