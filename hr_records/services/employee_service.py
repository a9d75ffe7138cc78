"""
Employee Service Layer

Roster operations on top of an HRRepository. Registration numbers are
stored sanitized and must be unique after sanitization.
"""
import logging
from typing import Any, Dict, List, Optional

from hr_records.core.exceptions import ConflictError, NotFoundError, ValidationError
from hr_records.models import Employee
from hr_records.repositories import HRRepository
from hr_records.services.registration import sanitize_registration
from hr_records.services.time_balance import format_minutes

logger = logging.getLogger(__name__)

BALANCE_FILTERS = ("all", "positive", "negative", "zero")


def require_employee(repository: HRRepository, employee_id: str) -> Employee:
    employee = repository.get_employee(employee_id)
    if not employee:
        raise NotFoundError("Employee", employee_id)
    return employee


def _ensure_registration_free(repository: HRRepository, key: str, current_id: Optional[str] = None) -> None:
    if not key:
        raise ValidationError("Registration number is empty once spaces, dots and hyphens are removed")
    owner = repository.get_employee_by_registration(key)
    if owner and owner.id != current_id:
        raise ConflictError(details={"registration_number": key})


def create_employee(repository: HRRepository, data: Dict[str, Any]) -> Employee:
    key = sanitize_registration(data["registration_number"])
    _ensure_registration_free(repository, key)
    employee = repository.create_employee({**data, "registration_number": key})
    logger.info(f"Employee {employee.id} created ({key})")
    return employee


def update_employee(repository: HRRepository, employee_id: str, changes: Dict[str, Any]) -> Employee:
    employee = require_employee(repository, employee_id)
    changes = {k: v for k, v in changes.items() if v is not None or k == "observations"}

    if changes.get("registration_number") is not None:
        key = sanitize_registration(changes["registration_number"])
        if key != employee.registration_number:
            _ensure_registration_free(repository, key, current_id=employee_id)
        changes = {**changes, "registration_number": key}

    return repository.update_employee(employee_id, changes)


def delete_employee(repository: HRRepository, employee_id: str) -> None:
    if not repository.delete_employee(employee_id):
        raise NotFoundError("Employee", employee_id)
    logger.info(f"Employee {employee_id} deleted with dependent records")


def hours_balances(repository: HRRepository) -> Dict[str, int]:
    """Hours-bank balance in minutes per employee id (employees without entries are absent)."""
    balances: Dict[str, int] = {}
    for entry in repository.list_hours_bank():
        balances[entry.employee_id] = balances.get(entry.employee_id, 0) + entry.minutes
    return balances


def _matches(employee: Employee, search: str) -> bool:
    needle = search.lower()
    return (
        needle in employee.full_name.lower()
        or needle in employee.registration_number.lower()
        or needle in employee.position.lower()
    )


def _balance_matches(balance: int, balance_filter: str) -> bool:
    if balance_filter == "positive":
        return balance > 0
    if balance_filter == "negative":
        return balance < 0
    if balance_filter == "zero":
        return balance == 0
    return True


def list_employees(
    repository: HRRepository,
    search: Optional[str] = None,
    balance_filter: str = "all",
) -> List[Dict[str, Any]]:
    """Roster rows (name order) with hours balance, filtered by text and balance sign."""
    balances = hours_balances(repository)
    rows = []
    for employee in repository.list_employees():
        balance = balances.get(employee.id, 0)
        if search and not _matches(employee, search):
            continue
        if not _balance_matches(balance, balance_filter):
            continue
        rows.append({
            "id": employee.id,
            "full_name": employee.full_name,
            "registration_number": employee.registration_number,
            "position": employee.position,
            "observations": employee.observations,
            "hours_balance_minutes": balance,
            "hours_balance": format_minutes(balance),
        })
    return rows
