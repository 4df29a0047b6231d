"""Domain models and entities."""

from shared.domain.models import PasswordRecord, ParseError, ParseResult, CacheEntry, LookupResult
from shared.domain.status import ErrorState
from shared.domain.consts import (
    CsvColumns,
    DateFormat,
    WifiSecurity,
    ErrorAction,
    LogDisplay,
)
from shared.domain.errors import (
    ERROR_MESSAGES,
    get_error_message,
    is_recoverable_error,
    get_error_action_text,
)

__all__ = [
    "PasswordRecord",
    "ParseError",
    "ParseResult",
    "CacheEntry",
    "LookupResult",
    "ErrorState",
    "CsvColumns",
    "DateFormat",
    "WifiSecurity",
    "ErrorAction",
    "LogDisplay",
    "ERROR_MESSAGES",
    "get_error_message",
    "is_recoverable_error",
    "get_error_action_text",
]
