"""
SQLAlchemy-backed repository.

One instance wraps one request-scoped Session. Every mutation commits
immediately and rolls back on failure so the session stays usable for the
next call (bulk import relies on this).
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from hr_records.models import Employee, HoursBankEntry, PaidDayOff, PeriodKind
from hr_records.models.period import PERIOD_MODELS, PeriodMixin


class SqlRepository:
    def __init__(self, db: Session):
        self.db = db

    def _commit(self, instance=None):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        if instance is not None:
            self.db.refresh(instance)
        return instance

    def _add(self, instance):
        self.db.add(instance)
        return self._commit(instance)

    def _delete(self, instance) -> bool:
        if instance is None:
            return False
        self.db.delete(instance)
        self._commit()
        return True

    # --- Employees ---
    def list_employees(self) -> List[Employee]:
        return self.db.query(Employee).order_by(Employee.full_name.asc()).all()

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def get_employee_by_registration(self, registration_number: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(
            Employee.registration_number == registration_number
        ).first()

    def create_employee(self, data: Dict[str, Any]) -> Employee:
        return self._add(Employee(**data))

    def update_employee(self, employee_id: str, data: Dict[str, Any]) -> Optional[Employee]:
        employee = self.get_employee(employee_id)
        if not employee:
            return None
        for field, value in data.items():
            setattr(employee, field, value)
        return self._commit(employee)

    def delete_employee(self, employee_id: str) -> bool:
        return self._delete(self.get_employee(employee_id))

    # --- Hours bank ---
    def list_hours_bank(self, employee_id: Optional[str] = None) -> List[HoursBankEntry]:
        query = self.db.query(HoursBankEntry)
        if employee_id:
            query = query.filter(HoursBankEntry.employee_id == employee_id)
        return query.order_by(HoursBankEntry.year.desc(), HoursBankEntry.month.desc()).all()

    def get_hours_bank(self, entry_id: str) -> Optional[HoursBankEntry]:
        return self.db.get(HoursBankEntry, entry_id)

    def create_hours_bank(self, data: Dict[str, Any]) -> HoursBankEntry:
        return self._add(HoursBankEntry(**data))

    def delete_hours_bank(self, entry_id: str) -> bool:
        return self._delete(self.get_hours_bank(entry_id))

    # --- Periods ---
    def list_periods(self, kind: PeriodKind, employee_id: Optional[str] = None) -> List[PeriodMixin]:
        model = PERIOD_MODELS[kind]
        query = self.db.query(model)
        if employee_id:
            query = query.filter(model.employee_id == employee_id)
        return query.order_by(model.start_date.desc()).all()

    def get_period(self, kind: PeriodKind, period_id: str) -> Optional[PeriodMixin]:
        return self.db.get(PERIOD_MODELS[kind], period_id)

    def create_period(self, kind: PeriodKind, data: Dict[str, Any]) -> PeriodMixin:
        return self._add(PERIOD_MODELS[kind](**data))

    def update_period(self, kind: PeriodKind, period_id: str, data: Dict[str, Any]) -> Optional[PeriodMixin]:
        period = self.get_period(kind, period_id)
        if not period:
            return None
        for field, value in data.items():
            setattr(period, field, value)
        return self._commit(period)

    def delete_period(self, kind: PeriodKind, period_id: str) -> bool:
        return self._delete(self.get_period(kind, period_id))

    # --- Paid days off ---
    def list_paid_days_off(self, employee_id: Optional[str] = None) -> List[PaidDayOff]:
        query = self.db.query(PaidDayOff)
        if employee_id:
            query = query.filter(PaidDayOff.employee_id == employee_id)
        return query.order_by(PaidDayOff.date.desc()).all()

    def get_paid_day_off(self, day_off_id: str) -> Optional[PaidDayOff]:
        return self.db.get(PaidDayOff, day_off_id)

    def create_paid_day_off(self, data: Dict[str, Any]) -> PaidDayOff:
        return self._add(PaidDayOff(**data))

    def delete_paid_day_off(self, day_off_id: str) -> bool:
        return self._delete(self.get_paid_day_off(day_off_id))
