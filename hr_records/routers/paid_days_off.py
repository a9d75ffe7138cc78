from typing import List, Optional

from fastapi import APIRouter, Depends, status

from hr_records.core.clock import Clock
from hr_records.dependencies import get_clock, get_repository
from hr_records.repositories import HRRepository
from hr_records.schemas.paid_day_off import PaidDayOffBalance, PaidDayOffCreate, PaidDayOffResponse
from hr_records.services import paid_day_off_service
from hr_records.services.hours_bank_service import minutes_from_input

router = APIRouter(prefix="/paid-days-off", tags=["Paid Days Off"])


@router.get("", response_model=List[PaidDayOffResponse])
def list_days_off(repository: HRRepository = Depends(get_repository)):
    return paid_day_off_service.list_days_off(repository)


@router.get("/employee/{employee_id}", response_model=List[PaidDayOffResponse])
def list_employee_days_off(employee_id: str, repository: HRRepository = Depends(get_repository)):
    return paid_day_off_service.list_days_off(repository, employee_id)


@router.get("/employee/{employee_id}/balance", response_model=PaidDayOffBalance)
def get_yearly_balance(
    employee_id: str,
    year: Optional[int] = None,
    initial_hours: Optional[str] = None,
    repository: HRRepository = Depends(get_repository),
    clock: Clock = Depends(get_clock),
):
    """
    Yearly allowance balance. `year` defaults to the current year and
    `initial_hours` ("HH:MM") overrides the allowance stored on the records.
    """
    initial_minutes = None
    if initial_hours is not None:
        initial_minutes = minutes_from_input(None, initial_hours, allow_negative=False)
    return paid_day_off_service.yearly_balance(
        repository, employee_id, year or clock.today().year, initial_minutes
    )


@router.post("", response_model=PaidDayOffResponse, status_code=status.HTTP_201_CREATED)
def create_day_off(payload: PaidDayOffCreate, repository: HRRepository = Depends(get_repository)):
    return paid_day_off_service.create_day_off(repository, payload.model_dump())


@router.delete("/{day_off_id}")
def delete_day_off(day_off_id: str, repository: HRRepository = Depends(get_repository)):
    paid_day_off_service.delete_day_off(repository, day_off_id)
    return {"success": True, "message": "Paid day off removed"}
