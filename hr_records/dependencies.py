"""
Request-scoped dependencies.

The repository and the clock are built once in the application lifespan and
kept on `app.state`. With the SQL backend each request gets a repository
wrapping its own session from `get_db`.
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from hr_records.core.clock import Clock
from hr_records.database import get_db
from hr_records.repositories import HRRepository, SqlRepository


def get_repository(request: Request, db: Session = Depends(get_db)) -> HRRepository:
    memory_repository = getattr(request.app.state, "memory_repository", None)
    if memory_repository is not None:
        return memory_repository
    return SqlRepository(db)


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


__all__ = ["get_repository", "get_clock", "get_db"]
