"""
Import employees from a "full name, registration, position" CSV file.

Usage: python -m scripts.import_employees employees.csv
"""
import argparse
import logging
import sys
from pathlib import Path

from hr_records.core.logging import setup_logging
from hr_records.core.exceptions import AppException
from hr_records.database import SessionLocal, init_db
from hr_records.repositories import SqlRepository
from hr_records.services.bulk_import import import_bulk, parse_import_text

logger = logging.getLogger("import_employees")


def run(path: Path) -> int:
    rows = parse_import_text(path.read_text(encoding="utf-8-sig"))
    init_db()
    db = SessionLocal()
    try:
        result = import_bulk(SqlRepository(db), rows)
    except AppException as e:
        print(f"Import failed: {e.message}")
        return 1
    finally:
        db.close()

    print(f"{result.created} of {result.total_rows} employees created")
    for issue in result.duplicates:
        print(f"  row {issue.row}: {issue.full_name} ({issue.registration_number}) - {issue.reason}")
    return 0


if __name__ == "__main__":
    setup_logging(logging.WARNING)
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("csv_file", type=Path)
    args = parser.parse_args()
    sys.exit(run(args.csv_file))
