"""Payslip header and line item models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from payslip_service.models.base import Base, TimestampMixin


class Payslip(Base, TimestampMixin):
    """Monthly payslip header, unique per employee and period."""

    __tablename__ = "payslips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[str] = mapped_column(String(7), nullable=False)
    employee_name: Mapped[str] = mapped_column(String, nullable=False)
    employee_type: Mapped[str] = mapped_column(String, nullable=False)
    designation: Mapped[str] = mapped_column(String, nullable=False)
    month: Mapped[str] = mapped_column(String(2), nullable=False)
    month_name: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[str] = mapped_column(String(4), nullable=False)
    date_joining: Mapped[str] = mapped_column(String, nullable=False)
    location: Mapped[str] = mapped_column(String, nullable=False)

    # Attendance
    days_in_month: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    working_days: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    arrear_days: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    lop: Mapped[Decimal] = mapped_column(Numeric, nullable=False)

    # Banking and statutory identifiers
    bank_name: Mapped[str] = mapped_column(String, nullable=False)
    account_no: Mapped[str] = mapped_column(String(18), nullable=False)
    pan: Mapped[str] = mapped_column(String(10), nullable=False)
    provident_fund: Mapped[str] = mapped_column(String(23), nullable=False)
    esic: Mapped[str] = mapped_column(String(10), nullable=False)
    uan: Mapped[str] = mapped_column(String(11), nullable=False)

    # Derived
    gross_pay: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    total_deductions: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    net_pay: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    duration: Mapped[str] = mapped_column(String, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint(
            "employee_id",
            "month",
            "year",
            name="payslips_employee_period_unique",
        ),
        CheckConstraint(
            "employee_type IN ('Permanent', 'Contract', 'Temporary')",
            name="payslips_employee_type_check",
        ),
        CheckConstraint(
            "days_in_month BETWEEN 28 AND 31",
            name="payslips_days_in_month_check",
        ),
        CheckConstraint(
            "working_days >= 0 AND working_days <= days_in_month",
            name="payslips_working_days_check",
        ),
        CheckConstraint(
            "arrear_days >= 0 AND lop >= 0",
            name="payslips_counters_check",
        ),
        {"sqlite_autoincrement": True},
    )

    # Relationships
    earnings: Mapped[list[Earning]] = relationship(
        back_populates="payslip",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Earning.id",
    )
    deductions: Mapped[list[Deduction]] = relationship(
        back_populates="payslip",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Deduction.id",
    )

    @property
    def month_year_formatted(self) -> str:
        """Display label such as 'April 2024'."""
        return f"{self.month_name} {self.year}"


class Earning(Base):
    """Earning line item owned by a payslip."""

    __tablename__ = "earnings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    payslip_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("payslips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    component: Mapped[str] = mapped_column(String, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric, nullable=False)

    __table_args__ = (
        CheckConstraint("amount > 0", name="earnings_amount_positive"),
        CheckConstraint("component <> ''", name="earnings_component_not_empty"),
        {"sqlite_autoincrement": True},
    )

    payslip: Mapped[Payslip] = relationship(back_populates="earnings")


class Deduction(Base):
    """Deduction line item owned by a payslip."""

    __tablename__ = "deductions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    payslip_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("payslips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    component: Mapped[str] = mapped_column(String, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric, nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="deductions_amount_non_negative"),
        CheckConstraint("component <> ''", name="deductions_component_not_empty"),
        {"sqlite_autoincrement": True},
    )

    payslip: Mapped[Payslip] = relationship(back_populates="deductions")
