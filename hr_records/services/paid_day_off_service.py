"""
Paid days off.

Each record may carry the allowance seed (`initial_minutes`) for its year.
The yearly balance is the seed minus every paid day off of that year.
"""
from typing import Any, Dict, List, Optional

from hr_records.core.exceptions import NotFoundError, ValidationError
from hr_records.repositories import HRRepository
from hr_records.services.employee_service import require_employee
from hr_records.services.hours_bank_service import minutes_from_input
from hr_records.services.time_balance import compute_paid_day_off_balance, format_minutes


def create_day_off(repository: HRRepository, data: Dict[str, Any]):
    require_employee(repository, data["employee_id"])

    minutes = minutes_from_input(data.get("minutes"), data.get("hours_text"), allow_negative=False)
    if minutes <= 0:
        raise ValidationError("A paid day off must grant a positive amount of time", details={"minutes": minutes})

    initial_minutes = data.get("initial_minutes")
    if data.get("initial_hours_text") is not None:
        initial_minutes = minutes_from_input(None, data["initial_hours_text"], allow_negative=False)

    return repository.create_paid_day_off({
        "employee_id": data["employee_id"],
        "date": data["date"],
        "minutes": minutes,
        "year": data.get("year") or data["date"].year,
        "initial_minutes": initial_minutes,
    })


def list_days_off(repository: HRRepository, employee_id: Optional[str] = None) -> List:
    return repository.list_paid_days_off(employee_id)


def seeded_initial_minutes(days_off: List) -> Optional[int]:
    """Allowance seed of a year: the latest-dated record that carries one."""
    for day_off in sorted(days_off, key=lambda d: d.date, reverse=True):
        if day_off.initial_minutes is not None:
            return day_off.initial_minutes
    return None


def yearly_balance(
    repository: HRRepository,
    employee_id: str,
    year: int,
    initial_minutes: Optional[int] = None,
) -> Dict[str, Any]:
    """`initial_minutes` overrides the seed stored on the year's records."""
    require_employee(repository, employee_id)
    days_off = [d for d in repository.list_paid_days_off(employee_id) if d.year == year]
    if initial_minutes is None:
        initial_minutes = seeded_initial_minutes(days_off) or 0

    used = sum(d.minutes for d in days_off)
    balance = compute_paid_day_off_balance(initial_minutes, days_off)
    return {
        "employee_id": employee_id,
        "year": year,
        "initial_minutes": initial_minutes,
        "used_minutes": used,
        "balance_minutes": balance,
        "balance": format_minutes(balance),
    }


def delete_day_off(repository: HRRepository, day_off_id: str) -> None:
    if not repository.delete_paid_day_off(day_off_id):
        raise NotFoundError("Paid day off", day_off_id)
