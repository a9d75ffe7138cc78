"""
Bulk employee import.

Rows are reconciled strictly in order: every accepted registration joins the
known-key set before the next row is checked, so a file that repeats a
registration (in any punctuation) reports the later copies as duplicates.
A failure on one row never aborts the batch.
"""
import csv
import logging
from typing import List

from hr_records.core.exceptions import ValidationError
from hr_records.repositories import HRRepository
from hr_records.schemas.employee import BulkImportResult, ImportIssue, ImportRow
from hr_records.services.registration import canonical_keys, sanitize_registration

logger = logging.getLogger(__name__)

REASON_INCOMPLETE = "incomplete data"
REASON_DUPLICATE = "registration already exists"
REASON_CREATE_FAILED = "creation error"


def parse_import_text(text: str) -> List[ImportRow]:
    """
    Parse "full name, registration, position" lines.

    Fields may be double-quoted to contain commas. Blank lines and lines
    without three non-empty fields are dropped here and never reach the
    report. Extra fields are ignored.
    """
    rows = []
    for fields in csv.reader(text.splitlines(), skipinitialspace=True):
        parts = [p.strip() for p in fields]
        if len(parts) >= 3 and parts[0] and parts[1] and parts[2]:
            rows.append(ImportRow(full_name=parts[0], registration_number=parts[1], position=parts[2]))
    return rows


def import_bulk(repository: HRRepository, rows: List[ImportRow]) -> BulkImportResult:
    if not rows:
        raise ValidationError("No valid rows to import")

    known_keys = canonical_keys(repository.list_employees())
    duplicates: List[ImportIssue] = []
    created = 0

    for index, row in enumerate(rows, start=1):
        full_name = (row.full_name or "").strip()
        registration = (row.registration_number or "").strip()
        position = (row.position or "").strip()

        if not full_name or not registration or not position:
            duplicates.append(ImportIssue(
                row=index, full_name=row.full_name or "", registration_number=row.registration_number or "",
                reason=REASON_INCOMPLETE,
            ))
            continue

        key = sanitize_registration(registration)
        if not key or key in known_keys:
            duplicates.append(ImportIssue(
                row=index, full_name=row.full_name or "", registration_number=row.registration_number or "",
                reason=REASON_INCOMPLETE if not key else REASON_DUPLICATE,
            ))
            continue

        try:
            repository.create_employee({
                "full_name": full_name,
                "registration_number": key,
                "position": position,
            })
        except Exception as e:
            logger.warning(f"Bulk import row {index} failed: {e}", exc_info=True)
            duplicates.append(ImportIssue(
                row=index, full_name=row.full_name or "", registration_number=row.registration_number or "",
                reason=REASON_CREATE_FAILED,
            ))
            continue

        known_keys.add(key)
        created += 1

    logger.info(
        f"Bulk import finished: {created}/{len(rows)} created, {len(duplicates)} reported",
        extra={"created_count": created, "total_rows": len(rows), "reported_count": len(duplicates)},
    )
    return BulkImportResult(total_rows=len(rows), created=created, duplicates=duplicates)
