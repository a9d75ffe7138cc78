"""
Source of "today" for date-based business rules.

The period auto-approval rule and the dashboard both compare dates against
the current day. Routers receive a Clock through the `get_clock` dependency
so tests can pin the date.
"""
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo


class Clock(ABC):
    @abstractmethod
    def today(self) -> date:
        ...


class SystemClock(Clock):
    """Current date in the configured timezone, or server local time."""

    def __init__(self, timezone: Optional[str] = None):
        self.tz = ZoneInfo(timezone) if timezone else None

    def today(self) -> date:
        if self.tz is None:
            return date.today()
        return datetime.now(self.tz).date()


class FixedClock(Clock):
    def __init__(self, current: date):
        self.current = current

    def today(self) -> date:
        return self.current
