from datetime import date

from hr_records.models.period import PeriodKind


def _seed(repository):
    employee = repository.create_employee({"full_name": "Ana", "registration_number": "1", "position": "Dev"})
    other = repository.create_employee({"full_name": "Bia", "registration_number": "2", "position": "QA"})
    ids = {
        "hours": repository.create_hours_bank({"employee_id": employee.id, "month": 1, "year": 2026, "minutes": 60}).id,
        "vacation": repository.create_period(PeriodKind.VACATION, {
            "employee_id": employee.id, "start_date": date(2026, 1, 1), "end_date": date(2026, 1, 15), "status": "pending",
        }).id,
        "leave": repository.create_period(PeriodKind.LEAVE, {
            "employee_id": employee.id, "start_date": date(2026, 2, 1), "end_date": date(2026, 3, 2), "status": "pending",
        }).id,
        "day_off": repository.create_paid_day_off({
            "employee_id": employee.id, "date": date(2026, 4, 1), "minutes": 480, "year": 2026,
        }).id,
    }
    repository.create_hours_bank({"employee_id": other.id, "month": 1, "year": 2026, "minutes": -30})
    return employee, other, ids


def test_delete_employee_cascades(repository):
    employee, other, ids = _seed(repository)

    assert repository.delete_employee(employee.id) is True

    assert repository.get_employee(employee.id) is None
    assert repository.get_hours_bank(ids["hours"]) is None
    assert repository.get_period(PeriodKind.VACATION, ids["vacation"]) is None
    assert repository.get_period(PeriodKind.LEAVE, ids["leave"]) is None
    assert repository.get_paid_day_off(ids["day_off"]) is None
    # Other employees keep their records
    assert [h.minutes for h in repository.list_hours_bank(other.id)] == [-30]


def test_delete_unknown_ids_return_false(repository):
    assert repository.delete_employee("missing") is False
    assert repository.delete_hours_bank("missing") is False
    assert repository.delete_period(PeriodKind.LEAVE, "missing") is False
    assert repository.delete_paid_day_off("missing") is False
    assert repository.update_employee("missing", {"position": "X"}) is None
    assert repository.update_period(PeriodKind.VACATION, "missing", {"status": "approved"}) is None


def test_orderings(repository):
    repository.create_employee({"full_name": "Zeca", "registration_number": "3", "position": "Dev"})
    employee, _, _ = _seed(repository)
    repository.create_hours_bank({"employee_id": employee.id, "month": 12, "year": 2025, "minutes": 5})
    repository.create_hours_bank({"employee_id": employee.id, "month": 3, "year": 2026, "minutes": 7})

    assert [e.full_name for e in repository.list_employees()] == ["Ana", "Bia", "Zeca"]
    assert [(h.year, h.month) for h in repository.list_hours_bank(employee.id)] == [(2026, 3), (2026, 1), (2025, 12)]


def test_vacations_and_leaves_are_separate(repository):
    employee, _, ids = _seed(repository)

    assert [p.id for p in repository.list_periods(PeriodKind.VACATION, employee.id)] == [ids["vacation"]]
    assert [p.id for p in repository.list_periods(PeriodKind.LEAVE, employee.id)] == [ids["leave"]]
    assert repository.get_period(PeriodKind.LEAVE, ids["vacation"]) is None


def test_update_employee(repository):
    employee, _, _ = _seed(repository)
    updated = repository.update_employee(employee.id, {"observations": "part-time"})
    assert updated.observations == "part-time"
    assert repository.get_employee_by_registration("1").observations == "part-time"
