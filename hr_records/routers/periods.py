"""
Vacation and leave routers.

Both expose the same endpoints over their own table, so one builder creates
a router per PeriodKind.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from hr_records.core.clock import Clock
from hr_records.dependencies import get_clock, get_repository
from hr_records.models.period import PeriodKind
from hr_records.repositories import HRRepository
from hr_records.schemas.period import PeriodCreate, PeriodResponse, PeriodUpdate
from hr_records.services import period_service


def build_period_router(kind: PeriodKind, prefix: str, label: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[f"{label}s"])

    @router.get("", response_model=List[PeriodResponse])
    def list_periods(repository: HRRepository = Depends(get_repository)):
        return period_service.list_periods(repository, kind)

    @router.get("/employee/{employee_id}", response_model=List[PeriodResponse])
    def list_employee_periods(employee_id: str, repository: HRRepository = Depends(get_repository)):
        return period_service.list_periods(repository, kind, employee_id)

    @router.post("", response_model=PeriodResponse, status_code=status.HTTP_201_CREATED)
    def create_period(
        payload: PeriodCreate,
        repository: HRRepository = Depends(get_repository),
        clock: Clock = Depends(get_clock),
    ):
        """Periods starting today or earlier are recorded as approved."""
        return period_service.create_period(
            repository,
            clock,
            kind,
            employee_id=payload.employee_id,
            start_date=payload.start_date,
            end_date=payload.end_date,
            requested_status=payload.status,
            notes=payload.notes,
        )

    @router.patch("/{period_id}", response_model=PeriodResponse)
    def update_period(period_id: str, payload: PeriodUpdate, repository: HRRepository = Depends(get_repository)):
        return period_service.update_period(repository, kind, period_id, payload.model_dump(exclude_unset=True))

    @router.delete("/{period_id}")
    def delete_period(period_id: str, repository: HRRepository = Depends(get_repository)):
        period_service.delete_period(repository, kind, period_id)
        return {"success": True, "message": f"{label} period removed"}

    return router


vacations_router = build_period_router(PeriodKind.VACATION, "/vacations", "Vacation")
leaves_router = build_period_router(PeriodKind.LEAVE, "/leaves", "Leave")
