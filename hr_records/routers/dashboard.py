from fastapi import APIRouter, Depends

from hr_records.core.clock import Clock
from hr_records.dependencies import get_clock, get_repository
from hr_records.repositories import HRRepository
from hr_records.schemas.dashboard import DashboardSummary
from hr_records.services.dashboard_service import build_summary

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardSummary)
def get_dashboard(repository: HRRepository = Depends(get_repository), clock: Clock = Depends(get_clock)):
    return build_summary(repository, clock.today())
