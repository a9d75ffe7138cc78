from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class EmployeeBase(BaseModel):
    """Base schema for employee data."""
    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: str = Field(..., min_length=1, max_length=200)
    registration_number: str = Field(..., min_length=1, max_length=50)
    position: str = Field(..., min_length=1, max_length=100)
    observations: Optional[str] = None


class EmployeeCreate(EmployeeBase):
    """Schema for creating a new employee."""
    pass


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee. Omitted fields are left untouched."""
    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    registration_number: Optional[str] = Field(None, min_length=1, max_length=50)
    position: Optional[str] = Field(None, min_length=1, max_length=100)
    observations: Optional[str] = None


class EmployeeResponse(EmployeeBase):
    model_config = ConfigDict(from_attributes=True)

    id: str


class EmployeeListItem(EmployeeResponse):
    """Roster row with the current hours-bank balance."""
    hours_balance_minutes: int = 0
    hours_balance: str = "00:00"


# --- Bulk import ---
class ImportRow(BaseModel):
    full_name: Optional[str] = None
    registration_number: Optional[str] = None
    position: Optional[str] = None


class BulkImportRequest(BaseModel):
    rows: List[ImportRow]


class ImportIssue(BaseModel):
    row: int
    full_name: str
    registration_number: str
    reason: str


class BulkImportResult(BaseModel):
    total_rows: int
    created: int
    duplicates: List[ImportIssue]
