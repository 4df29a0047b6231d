"""Service answering "what is today's WiFi password?"."""

import logging
from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfoNotFoundError
from shared.config.config import Config, config
from shared.dates import DateProvider
from shared.domain.consts import LogDisplay
from shared.domain.errors import get_error_message
from shared.domain.models import LookupResult
from shared.domain.status import ErrorState
from shared.interfaces.source_filesystem import SourceFileSystem
from portal.infrastructure.filesystem import LocalFileSystem
from portal.infrastructure.record_cache import RecordCache
from portal.services.resolver import find_password_for_date, get_available_dates

logger = logging.getLogger(__name__)

UNEXPECTED_LOOKUP_ERROR = (
    "An unexpected error occurred while loading the password. "
    "Please contact staff for assistance."
)


def no_password_message(date_value: str) -> str:
    """Guest-facing message when the table has no row for date_value."""
    return (
        f"No password available for today ({date_value}). "
        f"Please check with staff for the current password."
    )


class PasswordLookupService:
    """
    Resolves today's password from the cached password table.

    Thread-safety: holds no per-request state. Each call reads through the
    cache and resolves against an immutable record tuple, so concurrent
    requests are safe.
    """

    def __init__(
        self,
        cache: RecordCache,
        date_provider: DateProvider,
        network_name: str,
        source_path: Optional[str] = None,
    ) -> None:
        self.cache = cache
        self.date_provider = date_provider
        self.network_name = network_name
        self.source_path = source_path

    def get_current_password(self, include_yesterday: bool = False) -> LookupResult:
        """
        Look up today's password.

        Never raises: every failure becomes a LookupResult with password None
        and an error message for display.

        Returns:
            LookupResult for today's date, with yesterday_password filled in
            when include_yesterday is set and the table has that day.
        """
        current_date: Optional[str] = None
        try:
            parse_result = self.cache.get_records(self.source_path)
            if not parse_result.ok:
                logger.error(f"Password table error: {parse_result.error.state.value}")
                return LookupResult(
                    password=None,
                    network_name=self.network_name,
                    error=parse_result.error.message,
                    error_state=parse_result.error.state,
                )

            current_date = self.date_provider.today()
            logger.info(
                f"Looking up password for {current_date} "
                f"({len(parse_result.records)} entries available)"
            )

            password = find_password_for_date(parse_result.records, current_date)
            yesterday_password = None
            if include_yesterday:
                yesterday_password = find_password_for_date(
                    parse_result.records, self.date_provider.yesterday()
                )

            if password is None:
                logger.error(f"No password found for date: {current_date}")
                logger.info(
                    f"Available dates: "
                    f"{get_available_dates(parse_result.records)[:LogDisplay.SAMPLE_DATES]}"
                )
                return LookupResult(
                    password=None,
                    network_name=self.network_name,
                    date=current_date,
                    error=no_password_message(current_date),
                    error_state=ErrorState.NO_PASSWORD_FOR_DATE,
                    yesterday_password=yesterday_password,
                )

            logger.info(f"Found password for {current_date}")
            return LookupResult(
                password=password,
                network_name=self.network_name,
                date=current_date,
                yesterday_password=yesterday_password,
            )
        except ZoneInfoNotFoundError as e:
            logger.error(f"Unknown time zone {self.date_provider.timezone!r}: {e}")
            return LookupResult(
                password=None,
                network_name=self.network_name,
                error=get_error_message(ErrorState.CONFIGURATION_ERROR),
                error_state=ErrorState.CONFIGURATION_ERROR,
            )
        except Exception as e:
            logger.error(f"Unexpected error looking up current password: {e}", exc_info=True)
            return LookupResult(
                password=None,
                network_name=self.network_name,
                date=current_date,
                error=UNEXPECTED_LOOKUP_ERROR,
                error_state=ErrorState.CONFIGURATION_ERROR,
            )


def create_lookup_service(
    cfg: Optional[Config] = None,
    filesystem: Optional[SourceFileSystem] = None,
    clock: Optional[Callable[[], datetime]] = None,
    source_path: Optional[str] = None,
) -> PasswordLookupService:
    """
    Wire a lookup service from configuration.

    Args:
        cfg: Config instance (defaults to the process-wide config)
        filesystem: SourceFileSystem (defaults to local disk)
        clock: Callable returning "now" (defaults to the system clock)
        source_path: Table path tried before the configured locations
    """
    cfg = cfg or config
    cache = RecordCache(
        filesystem=filesystem or LocalFileSystem(),
        search_paths=cfg.source_candidates(),
    )
    return PasswordLookupService(
        cache=cache,
        date_provider=DateProvider(clock=clock, timezone=cfg.TIMEZONE),
        network_name=cfg.NETWORK_NAME,
        source_path=source_path,
    )
