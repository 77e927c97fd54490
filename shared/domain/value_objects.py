"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: A stay period between two instants (start to end)
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Union

Instant = Union[date, datetime]


def to_instant(value: Instant) -> datetime:
    """
    Normalize a date or datetime to an aware datetime

    Plain dates become midnight UTC, naive datetimes are read as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


@dataclass(frozen=True)
class DateRange:
    """
    Date range value object

    Represents a stay from start (check-in instant) to end (check-out instant).
    Both ends are normalized with ``to_instant``; an empty or reversed range
    is rejected.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        object.__setattr__(self, 'start', to_instant(self.start))
        object.__setattr__(self, 'end', to_instant(self.end))
        if self.start >= self.end:
            raise ValueError(f"Start ({self.start}) must be before end ({self.end})")

    @property
    def nights(self) -> int:
        """Number of whole days between start and end"""
        return (self.end - self.start).days

    def __str__(self):
        return f"{self.start.strftime('%d.%m.%Y')} - {self.end.strftime('%d.%m.%Y')}"

    def __repr__(self):
        return f"DateRange({self.start.isoformat()}, {self.end.isoformat()})"
