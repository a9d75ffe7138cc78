"""
Process-wide in-memory repository.

Records are transient instances of the ORM classes that are never attached
to a Session. Built once in the application lifespan when
STORAGE_BACKEND=memory, and used directly by tests.
"""
from typing import Any, Dict, List, Optional

from hr_records.models import Employee, HoursBankEntry, PaidDayOff, PeriodKind
from hr_records.models.base import new_id
from hr_records.models.period import PERIOD_MODELS, PeriodMixin


class InMemoryRepository:
    def __init__(self):
        self.employees: Dict[str, Employee] = {}
        self.hours_bank: Dict[str, HoursBankEntry] = {}
        self.periods: Dict[PeriodKind, Dict[str, PeriodMixin]] = {kind: {} for kind in PeriodKind}
        self.paid_days_off: Dict[str, PaidDayOff] = {}

    @staticmethod
    def _owned_by(records, employee_id: Optional[str]):
        if employee_id is None:
            return list(records)
        return [r for r in records if r.employee_id == employee_id]

    # --- Employees ---
    def list_employees(self) -> List[Employee]:
        return sorted(self.employees.values(), key=lambda e: e.full_name)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def get_employee_by_registration(self, registration_number: str) -> Optional[Employee]:
        for employee in self.employees.values():
            if employee.registration_number == registration_number:
                return employee
        return None

    def create_employee(self, data: Dict[str, Any]) -> Employee:
        # Mirrors the UNIQUE constraint of the SQL schema
        if self.get_employee_by_registration(data["registration_number"]):
            raise ValueError(f"registration_number '{data['registration_number']}' already stored")
        employee = Employee(id=new_id(), **data)
        self.employees[employee.id] = employee
        return employee

    def update_employee(self, employee_id: str, data: Dict[str, Any]) -> Optional[Employee]:
        employee = self.employees.get(employee_id)
        if not employee:
            return None
        for field, value in data.items():
            setattr(employee, field, value)
        return employee

    def delete_employee(self, employee_id: str) -> bool:
        if self.employees.pop(employee_id, None) is None:
            return False
        # Cascade to dependents
        for table in (self.hours_bank, self.paid_days_off, *self.periods.values()):
            for record_id in [k for k, v in table.items() if v.employee_id == employee_id]:
                del table[record_id]
        return True

    # --- Hours bank ---
    def list_hours_bank(self, employee_id: Optional[str] = None) -> List[HoursBankEntry]:
        entries = self._owned_by(self.hours_bank.values(), employee_id)
        return sorted(entries, key=lambda h: (h.year, h.month), reverse=True)

    def get_hours_bank(self, entry_id: str) -> Optional[HoursBankEntry]:
        return self.hours_bank.get(entry_id)

    def create_hours_bank(self, data: Dict[str, Any]) -> HoursBankEntry:
        entry = HoursBankEntry(id=new_id(), **data)
        self.hours_bank[entry.id] = entry
        return entry

    def delete_hours_bank(self, entry_id: str) -> bool:
        return self.hours_bank.pop(entry_id, None) is not None

    # --- Periods ---
    def list_periods(self, kind: PeriodKind, employee_id: Optional[str] = None) -> List[PeriodMixin]:
        periods = self._owned_by(self.periods[kind].values(), employee_id)
        return sorted(periods, key=lambda p: p.start_date, reverse=True)

    def get_period(self, kind: PeriodKind, period_id: str) -> Optional[PeriodMixin]:
        return self.periods[kind].get(period_id)

    def create_period(self, kind: PeriodKind, data: Dict[str, Any]) -> PeriodMixin:
        period = PERIOD_MODELS[kind](id=new_id(), **data)
        self.periods[kind][period.id] = period
        return period

    def update_period(self, kind: PeriodKind, period_id: str, data: Dict[str, Any]) -> Optional[PeriodMixin]:
        period = self.periods[kind].get(period_id)
        if not period:
            return None
        for field, value in data.items():
            setattr(period, field, value)
        return period

    def delete_period(self, kind: PeriodKind, period_id: str) -> bool:
        return self.periods[kind].pop(period_id, None) is not None

    # --- Paid days off ---
    def list_paid_days_off(self, employee_id: Optional[str] = None) -> List[PaidDayOff]:
        days_off = self._owned_by(self.paid_days_off.values(), employee_id)
        return sorted(days_off, key=lambda d: d.date, reverse=True)

    def get_paid_day_off(self, day_off_id: str) -> Optional[PaidDayOff]:
        return self.paid_days_off.get(day_off_id)

    def create_paid_day_off(self, data: Dict[str, Any]) -> PaidDayOff:
        day_off = PaidDayOff(id=new_id(), **data)
        self.paid_days_off[day_off.id] = day_off
        return day_off

    def delete_paid_day_off(self, day_off_id: str) -> bool:
        return self.paid_days_off.pop(day_off_id, None) is not None
