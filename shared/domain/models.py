"""Domain models for password records, parse results and lookup payloads."""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict
from shared.domain.status import ErrorState


@dataclass(frozen=True)
class PasswordRecord:
    """One row of the password table."""
    date: str  # DD/MM/YYYY
    password: str


@dataclass(frozen=True)
class ParseError:
    """Typed failure from loading or parsing the password table."""
    state: ErrorState
    message: str


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of loading the password table.

    Either a non-empty tuple of records with no error, or an error with no
    records. Row-level warnings are kept for logging only.
    """
    records: Tuple[PasswordRecord, ...] = ()
    error: Optional[ParseError] = None
    warnings: Tuple[str, ...] = ()

    @classmethod
    def success(
        cls, records: Tuple[PasswordRecord, ...], warnings: Tuple[str, ...] = ()
    ) -> "ParseResult":
        """Build a successful result; an empty record set is not a success."""
        if not records:
            raise ValueError("A successful parse result needs at least one record")
        return cls(records=tuple(records), warnings=tuple(warnings))

    @classmethod
    def failure(
        cls, state: ErrorState, message: str, warnings: Tuple[str, ...] = ()
    ) -> "ParseResult":
        """Build a failed result carrying no records."""
        return cls(error=ParseError(state=state, message=message), warnings=tuple(warnings))

    @property
    def ok(self) -> bool:
        """True when records were parsed successfully."""
        return self.error is None


@dataclass
class CacheEntry:
    """Memoized records for one source file at one modification time."""
    records: Tuple[PasswordRecord, ...]
    source_modified_at: float
    source_path: str
    warnings: Tuple[str, ...] = field(default_factory=tuple)


class LookupResult(BaseModel):
    """Password lookup payload handed to the presentation layer."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "password": "Sunf10wer!",
                "network_name": "Bloom Guest",
                "date": "01/06/2024",
                "error": None,
                "error_state": None,
                "yesterday_password": None,
            }
        }
    )

    password: Optional[str] = Field(None, description="Password for the date, null if unavailable")
    network_name: str = Field(..., description="WiFi network name")
    date: Optional[str] = Field(None, description="Date looked up (DD/MM/YYYY)")
    error: Optional[str] = Field(None, description="Guest-facing error message")
    error_state: Optional[ErrorState] = Field(None, description="Machine-readable error state")
    yesterday_password: Optional[str] = Field(
        None, description="Previous day's password, when requested"
    )
