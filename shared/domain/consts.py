"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class CsvColumns:
    """Required column names in the password table header."""
    DATE = "Date"
    PASSWORD = "Password"


class DateFormat:
    """Display format shared by the date encoder and validator."""
    PATTERN = r"\d{2}/\d{2}/\d{4}"
    DISPLAY = "DD/MM/YYYY"
    SEPARATOR = "/"

    # Sanity bounds applied by the validator (inclusive)
    MIN_YEAR = 1900
    MAX_YEAR = 2100


class WifiSecurity(str, Enum):
    """Values accepted by phones in the T: field of a WiFi QR payload."""
    WPA = "WPA"
    WEP = "WEP"
    NOPASS = "nopass"


class ErrorAction:
    """Action labels shown next to an error."""
    CONTACT_STAFF = "Contact Staff"
    TRY_AGAIN = "Try Again"


class LogDisplay:
    """Constants for log output."""
    SAMPLE_DATES = 5  # Number of available dates to log when today is missing
