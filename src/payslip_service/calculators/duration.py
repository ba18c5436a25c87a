"""Tenure calculation between a joining date and a payslip period."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"

# Calendar-agnostic spans: no leap years, fixed-length months.
YEAR_SPAN = timedelta(days=365)
MONTH_SPAN = timedelta(days=30)


def _parse_iso(value: str) -> datetime:
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def calculate_duration(joining_date: str, year: str | int, month: str | int) -> str:
    """Return elapsed tenure such as '3 Years 1 Month'.

    The span is measured between the joining date and the first day of the
    target month, in either direction. Years count 365 days and months count
    30 days of the remainder. A joining date that cannot be parsed yields
    'N/A' instead of an error.
    """
    try:
        joined = _parse_iso(str(joining_date))
        period_start = datetime(int(year), int(month), 1)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(
            "Error calculating duration for joining date %r: %s", joining_date, e
        )
        return NOT_AVAILABLE

    elapsed = abs(period_start - joined)
    years = elapsed // YEAR_SPAN
    months = (elapsed % YEAR_SPAN) // MONTH_SPAN
    return f"{_plural(years, 'Year')} {_plural(months, 'Month')}"
