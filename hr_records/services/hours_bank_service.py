from typing import Any, Dict, List, Optional

from hr_records.core.exceptions import NotFoundError, ValidationError
from hr_records.repositories import HRRepository
from hr_records.services.employee_service import require_employee
from hr_records.services.time_balance import (
    compute_hours_balance,
    format_minutes,
    is_valid_time_text,
    parse_time_text,
)


def minutes_from_input(minutes: Optional[int], hours_text: Optional[str], allow_negative: bool) -> int:
    """Resolve a form amount: raw minutes, or "HH:MM" text gated by the strict validator."""
    if hours_text is None:
        return minutes
    if not is_valid_time_text(hours_text, allow_negative=allow_negative):
        example = "HH:MM or -HH:MM (e.g. 08:30 or -02:15)" if allow_negative else "HH:MM (e.g. 08:00)"
        raise ValidationError(f"Invalid time format, use {example}", details={"hours_text": hours_text})
    return parse_time_text(hours_text)


def create_entry(repository: HRRepository, data: Dict[str, Any]):
    require_employee(repository, data["employee_id"])
    minutes = minutes_from_input(data.get("minutes"), data.get("hours_text"), allow_negative=True)
    return repository.create_hours_bank({
        "employee_id": data["employee_id"],
        "month": data["month"],
        "year": data["year"],
        "minutes": minutes,
        "description": data.get("description") or None,
    })


def list_entries(repository: HRRepository, employee_id: Optional[str] = None) -> List:
    return repository.list_hours_bank(employee_id)


def employee_balance(repository: HRRepository, employee_id: str) -> Dict[str, Any]:
    require_employee(repository, employee_id)
    entries = repository.list_hours_bank(employee_id)
    balance = compute_hours_balance(entries)
    return {
        "employee_id": employee_id,
        "entries": len(entries),
        "balance_minutes": balance,
        "balance": format_minutes(balance),
    }


def delete_entry(repository: HRRepository, entry_id: str) -> None:
    if not repository.delete_hours_bank(entry_id):
        raise NotFoundError("Hours bank entry", entry_id)
