from .base import HRRepository
from .memory import InMemoryRepository
from .sql import SqlRepository

__all__ = ["HRRepository", "InMemoryRepository", "SqlRepository"]
