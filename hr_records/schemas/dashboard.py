from pydantic import BaseModel
from datetime import date
from typing import List

from hr_records.models.period import PeriodKind, PeriodStatus


class DashboardPeriod(BaseModel):
    id: str
    kind: PeriodKind
    employee_id: str
    full_name: str
    start_date: date
    end_date: date
    status: PeriodStatus


class EmployeeAway(BaseModel):
    employee_id: str
    full_name: str
    periods: List[DashboardPeriod]


class DashboardDayOff(BaseModel):
    id: str
    employee_id: str
    full_name: str
    date: date
    minutes: int
    hours: str


class DashboardSummary(BaseModel):
    today: date
    total_employees: int
    pending_vacations: int
    pending_leaves: int
    employees_with_negative_balance: int
    employees_away: List[EmployeeAway]
    upcoming_vacations: List[DashboardPeriod]
    upcoming_leaves: List[DashboardPeriod]
    paid_days_off_today: List[DashboardDayOff]
    paid_days_off_next_7_days: List[DashboardDayOff]
