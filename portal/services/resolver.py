"""Date-to-password resolution over parsed records."""

from datetime import date
from typing import List, Optional, Sequence
from shared.dates import is_valid_date, parse_date
from shared.domain.models import PasswordRecord


def find_password_for_date(
    records: Sequence[PasswordRecord], target_date: str
) -> Optional[str]:
    """
    Find the password for a DD/MM/YYYY date.

    Matching is exact string equality. When the table lists a date more than
    once, the row that appears last wins.

    Returns:
        The password, or None if target_date is invalid or has no row.
    """
    if not is_valid_date(target_date):
        return None

    passwords = {record.date: record.password for record in records}
    return passwords.get(target_date)


def has_password_for_date(records: Sequence[PasswordRecord], target_date: str) -> bool:
    """Check whether the table has a password for target_date."""
    return find_password_for_date(records, target_date) is not None


def get_available_dates(records: Sequence[PasswordRecord]) -> List[str]:
    """Return the distinct dates in the table, earliest first."""
    unique_dates = {record.date for record in records}
    return sorted(unique_dates, key=lambda value: parse_date(value) or date.min)
