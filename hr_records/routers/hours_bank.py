from typing import List

from fastapi import APIRouter, Depends, status

from hr_records.dependencies import get_repository
from hr_records.repositories import HRRepository
from hr_records.schemas.hours_bank import HoursBalanceResponse, HoursBankCreate, HoursBankResponse
from hr_records.services import hours_bank_service

router = APIRouter(prefix="/hours-bank", tags=["Hours Bank"])


@router.get("", response_model=List[HoursBankResponse])
def list_entries(repository: HRRepository = Depends(get_repository)):
    return hours_bank_service.list_entries(repository)


@router.get("/employee/{employee_id}", response_model=List[HoursBankResponse])
def list_employee_entries(employee_id: str, repository: HRRepository = Depends(get_repository)):
    return hours_bank_service.list_entries(repository, employee_id)


@router.get("/employee/{employee_id}/balance", response_model=HoursBalanceResponse)
def get_employee_balance(employee_id: str, repository: HRRepository = Depends(get_repository)):
    return hours_bank_service.employee_balance(repository, employee_id)


@router.post("", response_model=HoursBankResponse, status_code=status.HTTP_201_CREATED)
def create_entry(payload: HoursBankCreate, repository: HRRepository = Depends(get_repository)):
    return hours_bank_service.create_entry(repository, payload.model_dump())


@router.delete("/{entry_id}")
def delete_entry(entry_id: str, repository: HRRepository = Depends(get_repository)):
    hours_bank_service.delete_entry(repository, entry_id)
    return {"success": True, "message": "Hours bank entry removed"}
