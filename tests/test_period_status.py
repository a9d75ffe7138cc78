import pytest
from datetime import date, timedelta

from hr_records.core.clock import FixedClock
from hr_records.core.exceptions import NotFoundError, ValidationError
from hr_records.models.period import PeriodKind, PeriodStatus
from hr_records.services.period_service import create_period, resolve_initial_status, update_period

TODAY = date(2026, 10, 19)


@pytest.mark.parametrize("offset, requested, expected", [
    (0, PeriodStatus.PENDING, PeriodStatus.APPROVED),
    (-10, PeriodStatus.PENDING, PeriodStatus.APPROVED),
    (-1, PeriodStatus.REJECTED, PeriodStatus.APPROVED),
    (1, PeriodStatus.PENDING, PeriodStatus.PENDING),
    (30, PeriodStatus.REJECTED, PeriodStatus.REJECTED),
])
def test_resolve_initial_status(offset, requested, expected):
    assert resolve_initial_status(TODAY + timedelta(days=offset), requested, TODAY) == expected


def _employee(repository):
    return repository.create_employee({"full_name": "Bruno", "registration_number": "42", "position": "Dev"})


@pytest.mark.parametrize("kind", list(PeriodKind))
def test_create_period_applies_rule_once(repository, kind):
    employee = _employee(repository)
    clock = FixedClock(TODAY)

    today_period = create_period(repository, clock, kind, employee.id, TODAY, TODAY + timedelta(days=14))
    future_period = create_period(repository, clock, kind, employee.id, TODAY + timedelta(days=1), TODAY + timedelta(days=15))
    assert today_period.status == "approved"
    assert future_period.status == "pending"

    # The clock moving past the start date does not re-evaluate the status
    later = FixedClock(TODAY + timedelta(days=5))
    updated = update_period(repository, kind, future_period.id, {"notes": "moved"})
    assert updated.status == "pending"
    late_request = create_period(repository, later, kind, employee.id, TODAY + timedelta(days=3), TODAY + timedelta(days=4))
    assert late_request.status == "approved"


def test_any_status_transition_is_allowed(memory_repository):
    employee = _employee(memory_repository)
    period = create_period(memory_repository, FixedClock(TODAY), PeriodKind.VACATION, employee.id, TODAY, TODAY)
    assert period.status == "approved"

    for status in (PeriodStatus.COMPLETED, PeriodStatus.PENDING, PeriodStatus.REJECTED):
        period = update_period(memory_repository, PeriodKind.VACATION, period.id, {"status": status})
        assert period.status == status.value


def test_create_period_rejects_inverted_range(memory_repository):
    employee = _employee(memory_repository)
    with pytest.raises(ValidationError):
        create_period(memory_repository, FixedClock(TODAY), PeriodKind.LEAVE, employee.id, TODAY, TODAY - timedelta(days=1))


def test_create_period_requires_employee(memory_repository):
    with pytest.raises(NotFoundError):
        create_period(memory_repository, FixedClock(TODAY), PeriodKind.LEAVE, "missing", TODAY, TODAY)
