from fastapi import APIRouter
from hr_records.routers import dashboard, employees, hours_bank, paid_days_off
from hr_records.routers.periods import leaves_router, vacations_router

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(employees.router)
api_router.include_router(hours_bank.router)
api_router.include_router(vacations_router)
api_router.include_router(leaves_router)
api_router.include_router(paid_days_off.router)
api_router.include_router(dashboard.router)
