from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from hr_records.database import Base
from hr_records.models.base import new_id

class HoursBankEntry(Base):
    __tablename__ = "hours_bank"

    id = Column(String(36), primary_key=True, default=new_id)
    employee_id = Column(String(36), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    minutes = Column(Integer, nullable=False)  # positive = credit, negative = debit
    description = Column(String, nullable=True)

    employee = relationship("Employee", back_populates="hours_bank_entries")
