"""
Vacation and leave period rules.

A period whose start date is today or earlier is recorded as approved at
creation; a future one keeps the requested status. The rule is applied only
when the period is created. Later status changes go through
`update_period` and are not restricted.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from hr_records.core.clock import Clock
from hr_records.core.exceptions import NotFoundError, ValidationError
from hr_records.models.period import PeriodKind, PeriodStatus
from hr_records.repositories import HRRepository
from hr_records.services.employee_service import require_employee

logger = logging.getLogger(__name__)

_LABELS = {PeriodKind.VACATION: "Vacation period", PeriodKind.LEAVE: "Leave period"}


def resolve_initial_status(start_date: date, requested_status: PeriodStatus, today: date) -> PeriodStatus:
    if start_date <= today:
        return PeriodStatus.APPROVED
    return requested_status


def create_period(
    repository: HRRepository,
    clock: Clock,
    kind: PeriodKind,
    employee_id: str,
    start_date: date,
    end_date: date,
    requested_status: PeriodStatus = PeriodStatus.PENDING,
    notes: Optional[str] = None,
):
    require_employee(repository, employee_id)
    if end_date < start_date:
        raise ValidationError("end_date must be on or after start_date")

    status = resolve_initial_status(start_date, PeriodStatus(requested_status), clock.today())
    if status != requested_status:
        logger.info(f"{_LABELS[kind]} starting {start_date} auto-approved for employee {employee_id}")

    return repository.create_period(kind, {
        "employee_id": employee_id,
        "start_date": start_date,
        "end_date": end_date,
        "status": status.value,
        "notes": notes,
    })


def list_periods(repository: HRRepository, kind: PeriodKind, employee_id: Optional[str] = None) -> List:
    return repository.list_periods(kind, employee_id)


def update_period(repository: HRRepository, kind: PeriodKind, period_id: str, changes: Dict[str, Any]):
    # notes may be cleared, the other columns are NOT NULL
    changes = {k: v for k, v in changes.items() if v is not None or k == "notes"}
    period = repository.get_period(kind, period_id)
    if not period:
        raise NotFoundError(_LABELS[kind], period_id)

    start_date = changes.get("start_date", period.start_date)
    end_date = changes.get("end_date", period.end_date)
    if end_date < start_date:
        raise ValidationError("end_date must be on or after start_date")

    if "status" in changes:
        changes["status"] = PeriodStatus(changes["status"]).value
        if changes["status"] != period.status:
            logger.info(f"{_LABELS[kind]} {period_id} status {period.status} -> {changes['status']}")

    return repository.update_period(kind, period_id, changes)


def delete_period(repository: HRRepository, kind: PeriodKind, period_id: str) -> None:
    if not repository.delete_period(kind, period_id):
        raise NotFoundError(_LABELS[kind], period_id)
