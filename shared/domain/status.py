"""Error state enum for password lookups."""

from enum import Enum


class ErrorState(str, Enum):
    """Why a lookup could not produce a password."""
    FILE_NOT_FOUND = "file-not-found"
    INVALID_CSV_FORMAT = "invalid-csv-format"
    PARSING_ERROR = "parsing-error"
    CONFIGURATION_ERROR = "configuration-error"
    NO_PASSWORD_FOR_DATE = "no-password-for-date"
