from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, time, timezone
from typing import List, Optional

from mandataire_crm.core.errors import BadRequestError
from mandataire_crm.models.dashboard import DashboardView, ReportingPeriod


MIN_REPORTING_YEAR = 1900
MAX_REPORTING_YEAR = 2999


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    # Naive timestamps from the record store are stored in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1)


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def resolve_period(
    view: DashboardView,
    year: Optional[int] = None,
    month: Optional[int] = None,
    today: Optional[date] = None,
) -> ReportingPeriod:
    """Turn a dashboard view request into a half-open UTC range and its buckets.

    ``year`` and ``month`` default to the current calendar year/month. ``month``
    is ignored for the yearly view.
    """
    today = today or utc_now().date()
    resolved_year = today.year if year is None else year
    if not MIN_REPORTING_YEAR <= resolved_year <= MAX_REPORTING_YEAR:
        raise BadRequestError(
            f"year must be between {MIN_REPORTING_YEAR} and {MAX_REPORTING_YEAR}"
        )

    if view == "yearly":
        first_day = date(resolved_year, 1, 1)
        labels = [f"{resolved_year}-{m:02d}" for m in range(1, 13)]
        return ReportingPeriod(
            view=view,
            year=resolved_year,
            month=None,
            start=start_of_day(first_day),
            end=start_of_day(_add_months(first_day, 12)),
            bucket_labels=labels,
        )

    if view != "monthly":
        raise BadRequestError("view must be 'monthly' or 'yearly'")

    resolved_month = today.month if month is None else month
    if not 1 <= resolved_month <= 12:
        raise BadRequestError("month must be between 1 and 12")

    first_day = date(resolved_year, resolved_month, 1)
    labels: List[str] = [
        f"{resolved_year}-{resolved_month:02d}-{d:02d}"
        for d in range(1, days_in_month(resolved_year, resolved_month) + 1)
    ]
    return ReportingPeriod(
        view=view,
        year=resolved_year,
        month=resolved_month,
        start=start_of_day(first_day),
        end=start_of_day(_add_months(first_day, 1)),
        bucket_labels=labels,
    )


def bucket_label(view: DashboardView, occurred_at: datetime) -> str:
    occurred_at = ensure_utc(occurred_at)
    if view == "yearly":
        return f"{occurred_at.year}-{occurred_at.month:02d}"
    return f"{occurred_at.year}-{occurred_at.month:02d}-{occurred_at.day:02d}"
