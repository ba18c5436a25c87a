"""Tests for payslip totals."""

from decimal import Decimal

from payslip_service.calculators.types import (
    LineItem,
    LineType,
    PayslipTotals,
)


def earning(amount: str) -> LineItem:
    return LineItem(line_type=LineType.EARNING, component="Basic", amount=Decimal(amount))


def deduction(amount: str) -> LineItem:
    return LineItem(line_type=LineType.DEDUCTION, component="TDS", amount=Decimal(amount))


class TestPayslipTotals:
    """Test gross, deduction and net arithmetic."""

    def test_net_is_gross_minus_deductions(self):
        totals = PayslipTotals.from_lines([earning("30000")], [deduction("2000")])

        assert totals.gross_pay == Decimal("30000.00")
        assert totals.total_deductions == Decimal("2000.00")
        assert totals.net_pay == Decimal("28000.00")

    def test_sums_every_line(self):
        totals = PayslipTotals.from_lines(
            [earning("25000"), earning("10000.50"), earning("1200.25")],
            [deduction("1800"), deduction("200"), deduction("0")],
        )

        assert totals.gross_pay == Decimal("36200.75")
        assert totals.total_deductions == Decimal("2000.00")
        assert totals.net_pay == Decimal("34200.75")

    def test_negative_net_allowed(self):
        """Deductions larger than earnings are kept as a negative net."""
        totals = PayslipTotals.from_lines([earning("1000")], [deduction("1500")])
        assert totals.net_pay == Decimal("-500.00")

    def test_decimal_arithmetic_is_exact(self):
        totals = PayslipTotals.from_lines([earning("0.1"), earning("0.2")], [deduction("0")])
        assert totals.gross_pay == Decimal("0.30")

    def test_sub_cent_amounts_are_not_rounded(self):
        """Totals stay exact sums of the submitted amounts."""
        totals = PayslipTotals.from_lines([earning("0.001")], [deduction("0.0005")])

        assert totals.gross_pay == Decimal("0.001")
        assert totals.net_pay == Decimal("0.0005")

