"""
Vacation and leave periods.

Both tables share one shape; they are kept apart because they are requested,
counted and approved independently.
"""
from sqlalchemy import Column, String, Date, ForeignKey, Text
from sqlalchemy.orm import declared_attr, relationship
from hr_records.database import Base
from hr_records.models.base import new_id
import enum

class PeriodStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"

class PeriodKind(str, enum.Enum):
    VACATION = "vacation"
    LEAVE = "leave"


class PeriodMixin:
    id = Column(String(36), primary_key=True, default=new_id)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default=PeriodStatus.PENDING.value)  # Enum value as string for SQLite
    notes = Column(Text, nullable=True)

    @declared_attr
    def employee_id(cls):
        return Column(String(36), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)

    def covers(self, day) -> bool:
        return self.start_date <= day <= self.end_date


class VacationPeriod(PeriodMixin, Base):
    __tablename__ = "vacation_periods"

    kind = PeriodKind.VACATION
    employee = relationship("Employee", back_populates="vacation_periods")


class LeavePeriod(PeriodMixin, Base):
    __tablename__ = "leave_periods"

    kind = PeriodKind.LEAVE
    employee = relationship("Employee", back_populates="leave_periods")


PERIOD_MODELS = {
    PeriodKind.VACATION: VacationPeriod,
    PeriodKind.LEAVE: LeavePeriod,
}
