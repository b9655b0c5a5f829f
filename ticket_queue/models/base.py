from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def localnow(tz_name: str = "") -> datetime:
    """Naive wall-clock time in ``tz_name``, or server-local time if blank."""
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
    return datetime.now()


class Base(DeclarativeBase):
    pass
