"""
Employee Model.
Owns every dependent record; deleting an employee removes them all.
"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from hr_records.database import Base
from hr_records.models.base import new_id


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=new_id)
    full_name = Column(String, nullable=False, index=True)
    # Stored sanitized (no spaces, dots or hyphens)
    registration_number = Column(String, unique=True, index=True, nullable=False)
    position = Column(String, nullable=False)
    observations = Column(Text, nullable=True)

    # Relationships
    hours_bank_entries = relationship("HoursBankEntry", back_populates="employee", cascade="all, delete-orphan")
    vacation_periods = relationship("VacationPeriod", back_populates="employee", cascade="all, delete-orphan")
    leave_periods = relationship("LeavePeriod", back_populates="employee", cascade="all, delete-orphan")
    paid_days_off = relationship("PaidDayOff", back_populates="employee", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Employee {self.registration_number}: {self.full_name}>"
