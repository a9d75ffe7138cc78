from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from hr_records.models import Employee, HoursBankEntry, PaidDayOff, PeriodKind
from hr_records.models.period import PeriodMixin


class HRRepository(Protocol):
    """
    CRUD contract shared by the SQL and in-memory backends.

    `create_*` methods receive plain field dicts and return the stored record.
    `update_*` return None and `delete_*` return False when the id is unknown.
    Deleting an employee removes its hours-bank entries, periods and paid days off.
    """

    # Employees
    def list_employees(self) -> List[Employee]: ...

    def get_employee(self, employee_id: str) -> Optional[Employee]: ...

    def get_employee_by_registration(self, registration_number: str) -> Optional[Employee]: ...

    def create_employee(self, data: Dict[str, Any]) -> Employee: ...

    def update_employee(self, employee_id: str, data: Dict[str, Any]) -> Optional[Employee]: ...

    def delete_employee(self, employee_id: str) -> bool: ...

    # Hours bank
    def list_hours_bank(self, employee_id: Optional[str] = None) -> List[HoursBankEntry]: ...

    def get_hours_bank(self, entry_id: str) -> Optional[HoursBankEntry]: ...

    def create_hours_bank(self, data: Dict[str, Any]) -> HoursBankEntry: ...

    def delete_hours_bank(self, entry_id: str) -> bool: ...

    # Vacation / leave periods
    def list_periods(self, kind: PeriodKind, employee_id: Optional[str] = None) -> List[PeriodMixin]: ...

    def get_period(self, kind: PeriodKind, period_id: str) -> Optional[PeriodMixin]: ...

    def create_period(self, kind: PeriodKind, data: Dict[str, Any]) -> PeriodMixin: ...

    def update_period(self, kind: PeriodKind, period_id: str, data: Dict[str, Any]) -> Optional[PeriodMixin]: ...

    def delete_period(self, kind: PeriodKind, period_id: str) -> bool: ...

    # Paid days off
    def list_paid_days_off(self, employee_id: Optional[str] = None) -> List[PaidDayOff]: ...

    def get_paid_day_off(self, day_off_id: str) -> Optional[PaidDayOff]: ...

    def create_paid_day_off(self, data: Dict[str, Any]) -> PaidDayOff: ...

    def delete_paid_day_off(self, day_off_id: str) -> bool: ...
