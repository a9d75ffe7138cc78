from pydantic import BaseModel, ConfigDict, computed_field, model_validator
from datetime import date as date_type
from typing import Optional

from hr_records.services.time_balance import format_minutes


class PaidDayOffCreate(BaseModel):
    """
    A paid day off. Send either `minutes` or `hours_text` ("HH:MM", non-negative).
    `year` defaults to the year of `date`.
    """
    employee_id: str
    date: date_type
    minutes: Optional[int] = None
    hours_text: Optional[str] = None
    year: Optional[int] = None
    initial_minutes: Optional[int] = None
    initial_hours_text: Optional[str] = None

    @model_validator(mode="after")
    def check_amount(self):
        if (self.minutes is None) == (self.hours_text is None):
            raise ValueError("Provide exactly one of 'minutes' or 'hours_text'")
        if self.initial_minutes is not None and self.initial_hours_text is not None:
            raise ValueError("Provide at most one of 'initial_minutes' or 'initial_hours_text'")
        return self


class PaidDayOffResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    date: date_type
    minutes: int
    year: int
    initial_minutes: Optional[int] = None

    @computed_field
    @property
    def hours(self) -> str:
        return format_minutes(self.minutes)


class PaidDayOffBalance(BaseModel):
    employee_id: str
    year: int
    initial_minutes: int
    used_minutes: int
    balance_minutes: int
    balance: str
