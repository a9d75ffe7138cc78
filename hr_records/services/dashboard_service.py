"""
Dashboard summary: who is away today, what needs approval, what is coming up.
"""
from datetime import date, timedelta
from typing import Dict, List

from dateutil.relativedelta import relativedelta

from hr_records.models.period import PeriodKind, PeriodStatus
from hr_records.repositories import HRRepository
from hr_records.services.employee_service import hours_balances
from hr_records.services.time_balance import format_minutes

UPCOMING_MONTHS = 3
DAYS_OFF_WINDOW = 7

# Pending requests count as "away" too; only rejected/completed ones do not
_ACTIVE_STATUSES = {PeriodStatus.PENDING.value, PeriodStatus.APPROVED.value}


def _period_row(period, kind: PeriodKind, names: Dict[str, str]) -> dict:
    return {
        "id": period.id,
        "kind": kind,
        "employee_id": period.employee_id,
        "full_name": names.get(period.employee_id, "Unknown"),
        "start_date": period.start_date,
        "end_date": period.end_date,
        "status": period.status,
    }


def _day_off_row(day_off, names: Dict[str, str]) -> dict:
    return {
        "id": day_off.id,
        "employee_id": day_off.employee_id,
        "full_name": names[day_off.employee_id],
        "date": day_off.date,
        "minutes": day_off.minutes,
        "hours": format_minutes(day_off.minutes),
    }


def build_summary(repository: HRRepository, today: date) -> dict:
    employees = repository.list_employees()
    names = {e.id: e.full_name for e in employees}
    periods = {kind: repository.list_periods(kind) for kind in PeriodKind}
    balances = hours_balances(repository)

    away: Dict[str, List[dict]] = {}
    for kind, kind_periods in periods.items():
        for period in kind_periods:
            if period.status in _ACTIVE_STATUSES and period.covers(today) and period.employee_id in names:
                away.setdefault(period.employee_id, []).append(_period_row(period, kind, names))

    horizon = today + relativedelta(months=UPCOMING_MONTHS)

    def upcoming(kind: PeriodKind) -> List[dict]:
        rows = [p for p in periods[kind] if today <= p.start_date <= horizon]
        return [_period_row(p, kind, names) for p in sorted(rows, key=lambda p: p.start_date)]

    days_off = [d for d in repository.list_paid_days_off() if d.employee_id in names]
    window_end = today + timedelta(days=DAYS_OFF_WINDOW)
    days_off_today = sorted((d for d in days_off if d.date == today), key=lambda d: names[d.employee_id])
    days_off_next = sorted(
        (d for d in days_off if today < d.date <= window_end),
        key=lambda d: (d.date, names[d.employee_id]),
    )

    return {
        "today": today,
        "total_employees": len(employees),
        "pending_vacations": sum(1 for p in periods[PeriodKind.VACATION] if p.status == PeriodStatus.PENDING.value),
        "pending_leaves": sum(1 for p in periods[PeriodKind.LEAVE] if p.status == PeriodStatus.PENDING.value),
        "employees_with_negative_balance": sum(1 for e in employees if balances.get(e.id, 0) < 0),
        "employees_away": [
            {"employee_id": employee_id, "full_name": names[employee_id], "periods": rows}
            for employee_id, rows in sorted(away.items(), key=lambda item: names[item[0]])
        ],
        "upcoming_vacations": upcoming(PeriodKind.VACATION),
        "upcoming_leaves": upcoming(PeriodKind.LEAVE),
        "paid_days_off_today": [_day_off_row(d, names) for d in days_off_today],
        "paid_days_off_next_7_days": [_day_off_row(d, names) for d in days_off_next],
    }
