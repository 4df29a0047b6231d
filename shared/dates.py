"""DD/MM/YYYY date encoding, validation and the "today" provider."""

import re
from datetime import date, datetime, timedelta, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo
from shared.domain.consts import DateFormat

_DATE_RE = re.compile(DateFormat.PATTERN, re.ASCII)


def format_date(value: date) -> str:
    """Encode a date as DD/MM/YYYY."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_date(value: str) -> Optional[date]:
    """
    Decode a DD/MM/YYYY string.

    Returns:
        The calendar date, or None if the string is malformed, outside the
        supported year range, or not a real day (e.g. 31/02/2024).
    """
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return None

    day, month, year = (int(part) for part in value.split(DateFormat.SEPARATOR))
    if not DateFormat.MIN_YEAR <= year <= DateFormat.MAX_YEAR:
        return None

    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_valid_date(value: str) -> bool:
    """True iff value is DD/MM/YYYY and names a real calendar day."""
    return parse_date(value) is not None


class DateProvider:
    """
    Supplies today's and yesterday's date in display format.

    The clock returns "now"; it may be naive (host local time) or aware.
    When a time zone is configured, "now" is converted into it before the
    calendar date is taken. The zone name is resolved on first use, so a
    bad name surfaces from today()/yesterday() rather than at construction.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        timezone: Optional[str] = None,
    ) -> None:
        self.timezone = timezone
        self._tz: Optional[tzinfo] = None
        self._clock = clock or self._system_now

    def zone(self) -> Optional[tzinfo]:
        """
        Configured time zone, or None for host local time.

        Raises:
            ZoneInfoNotFoundError: if the name is not in the zone database.
        """
        if self.timezone and self._tz is None:
            self._tz = ZoneInfo(self.timezone)
        return self._tz

    def _system_now(self) -> datetime:
        return datetime.now(self.zone())

    def current_date(self) -> date:
        """Calendar date of "now" in the configured zone."""
        now = self._clock()
        tz = self.zone()
        if tz is not None:
            now = now.astimezone(tz)
        return now.date()

    def today(self) -> str:
        return format_date(self.current_date())

    def yesterday(self) -> str:
        return format_date(self.current_date() - timedelta(days=1))
