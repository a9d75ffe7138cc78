from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status

from hr_records.core.config import settings
from hr_records.core.exceptions import ValidationError
from hr_records.core.limiter import limiter
from hr_records.dependencies import get_repository
from hr_records.repositories import HRRepository
from hr_records.schemas.employee import (
    BulkImportRequest,
    BulkImportResult,
    EmployeeCreate,
    EmployeeListItem,
    EmployeeResponse,
    EmployeeUpdate,
)
from hr_records.services import employee_service
from hr_records.services.bulk_import import import_bulk, parse_import_text
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=List[EmployeeListItem])
def list_employees(
    search: Optional[str] = None,
    balance: str = Query("all", pattern="^(all|positive|negative|zero)$"),
    repository: HRRepository = Depends(get_repository),
):
    """Roster ordered by name, with each employee's hours-bank balance."""
    return employee_service.list_employees(repository, search=search, balance_filter=balance)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: str, repository: HRRepository = Depends(get_repository)):
    return employee_service.require_employee(repository, employee_id)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, repository: HRRepository = Depends(get_repository)):
    return employee_service.create_employee(repository, payload.model_dump())


@router.post("/bulk", response_model=BulkImportResult)
@limiter.limit(settings.import_rate_limit)
def bulk_import(request: Request, payload: BulkImportRequest, repository: HRRepository = Depends(get_repository)):
    """
    Import employees from parsed rows.
    Problem rows are reported in `duplicates`; they never abort the batch.
    """
    return import_bulk(repository, payload.rows)


@router.post("/bulk/file", response_model=BulkImportResult)
@limiter.limit(settings.import_rate_limit)
async def bulk_import_file(
    request: Request,
    file: UploadFile = File(...),
    repository: HRRepository = Depends(get_repository),
):
    """Import a "full name, registration, position" CSV file."""
    raw = await file.read()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ValidationError("File must be UTF-8 encoded text", details={"filename": file.filename})

    rows = parse_import_text(text)
    logger.info(f"Bulk import file {file.filename}: {len(rows)} parsable rows")
    return import_bulk(repository, rows)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
def update_employee(employee_id: str, payload: EmployeeUpdate, repository: HRRepository = Depends(get_repository)):
    return employee_service.update_employee(repository, employee_id, payload.model_dump(exclude_unset=True))


@router.delete("/{employee_id}")
def delete_employee(employee_id: str, repository: HRRepository = Depends(get_repository)):
    employee_service.delete_employee(repository, employee_id)
    return {"success": True, "message": "Employee removed"}
