# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import employee, hours_bank, period, paid_day_off

# Explicit class exports for cleaner imports
from .employee import Employee
from .hours_bank import HoursBankEntry
from .period import LeavePeriod, PeriodKind, PeriodStatus, VacationPeriod
from .paid_day_off import PaidDayOff

__all__ = [
    "Employee",
    "HoursBankEntry",
    "VacationPeriod",
    "LeavePeriod",
    "PeriodKind",
    "PeriodStatus",
    "PaidDayOff",
]
