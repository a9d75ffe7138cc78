from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from typing import Optional

from hr_records.services.time_balance import format_minutes


class HoursBankCreate(BaseModel):
    """
    A ledger entry. Send either `minutes` or `hours_text` ("HH:MM" / "-HH:MM").
    """
    employee_id: str
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=1900, le=9999)
    minutes: Optional[int] = None
    hours_text: Optional[str] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_amount(self):
        if (self.minutes is None) == (self.hours_text is None):
            raise ValueError("Provide exactly one of 'minutes' or 'hours_text'")
        return self


class HoursBankResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    month: int
    year: int
    minutes: int
    description: Optional[str] = None

    @computed_field
    @property
    def hours(self) -> str:
        return format_minutes(self.minutes)


class HoursBalanceResponse(BaseModel):
    employee_id: str
    entries: int
    balance_minutes: int
    balance: str
