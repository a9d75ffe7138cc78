"""
Print every table of the configured database with its columns and row count.

Usage: python -m scripts.check_db
"""
from sqlalchemy import inspect, text

from hr_records.database import engine


def check_db():
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    if not tables:
        print(f"No tables found in {engine.url}")
        return

    print(f"Tables in {engine.url}:")
    with engine.connect() as conn:
        for table in tables:
            count = conn.execute(text(f'SELECT COUNT(*) FROM "{table}"')).scalar()
            print(f" - {table} ({count} rows)")
            for col in inspector.get_columns(table):
                print(f"   * {col['name']} ({col['type']})")


if __name__ == "__main__":
    check_db()
