from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship
from hr_records.database import Base
from hr_records.models.base import new_id

class PaidDayOff(Base):
    __tablename__ = "paid_days_off"

    id = Column(String(36), primary_key=True, default=new_id)
    employee_id = Column(String(36), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    minutes = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False, index=True)  # calendar year the minutes count against
    initial_minutes = Column(Integer, nullable=True)  # yearly allowance seed

    employee = relationship("Employee", back_populates="paid_days_off")
