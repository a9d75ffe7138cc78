from pydantic import BaseModel, ConfigDict, model_validator
from datetime import date
from typing import Optional

from hr_records.models.period import PeriodStatus


class PeriodCreate(BaseModel):
    employee_id: str
    start_date: date
    end_date: date
    status: PeriodStatus = PeriodStatus.PENDING
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class PeriodUpdate(BaseModel):
    """Any status may be set directly; no transition is enforced."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[PeriodStatus] = None
    notes: Optional[str] = None


class PeriodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    start_date: date
    end_date: date
    status: PeriodStatus
    notes: Optional[str] = None
