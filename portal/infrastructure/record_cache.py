"""Cache for parsed password records, keyed by source path and mtime."""

import logging
import threading
from typing import List, Optional, Sequence
from shared.domain.errors import ERROR_MESSAGES
from shared.domain.models import CacheEntry, ParseResult
from shared.domain.status import ErrorState
from shared.interfaces.source_filesystem import SourceFileSystem
from portal.services.record_parser import RecordParser

logger = logging.getLogger(__name__)


class CacheMessages:
    """Guest-facing messages for failures while locating the table."""
    NOT_FOUND = ERROR_MESSAGES[ErrorState.FILE_NOT_FOUND]
    UNEXPECTED = ERROR_MESSAGES[ErrorState.CONFIGURATION_ERROR]


class RecordCache:
    """
    Single-slot cache of the parsed password table.

    Holds the records of exactly one source file. A call returns the cached
    records when the resolved path and its modification time both match the
    cached entry; otherwise the file is parsed again. A failed parse never
    evicts the previous good entry.

    Reading more than one source path through the same cache replaces the
    slot on every switch, so each switch costs a re-parse.

    Thread-safety: the slot is swapped under a lock. Concurrent cold calls
    may each parse the file once; the last successful parse wins.
    """

    def __init__(
        self,
        filesystem: SourceFileSystem,
        search_paths: Sequence[str] = (),
        parser: Optional[RecordParser] = None,
    ) -> None:
        self.filesystem = filesystem
        self.search_paths: List[str] = list(search_paths)
        self.parser = parser or RecordParser(filesystem)
        self._entry: Optional[CacheEntry] = None
        self._lock = threading.Lock()

    @property
    def entry(self) -> Optional[CacheEntry]:
        """Current cache entry, if any."""
        return self._entry

    def resolve_source(self, source_path: Optional[str] = None) -> Optional[str]:
        """
        Pick the first existing candidate: source_path, then the search paths.

        Returns:
            Path of the password table, or None if no candidate exists.
        """
        candidates = [source_path] if source_path else []
        candidates.extend(self.search_paths)

        for candidate in candidates:
            if self.filesystem.exists(candidate):
                return candidate

        logger.error(f"Password file not found in any of these paths: {candidates}")
        return None

    def get_records(self, source_path: Optional[str] = None) -> ParseResult:
        """
        Return the parsed records, re-parsing only when the source changed.

        Returns:
            ParseResult; FILE_NOT_FOUND when no candidate exists,
            CONFIGURATION_ERROR when the file cannot be inspected, or
            whatever the parser reports.
        """
        try:
            resolved = self.resolve_source(source_path)
            if resolved is None:
                return ParseResult.failure(ErrorState.FILE_NOT_FOUND, CacheMessages.NOT_FOUND)

            logger.debug(f"Using password file at: {resolved}")

            try:
                modified_at = self.filesystem.modified_at(resolved)
            except OSError as e:
                logger.error(f"Unable to inspect password file {resolved}: {e}")
                return ParseResult.failure(
                    ErrorState.CONFIGURATION_ERROR, CacheMessages.UNEXPECTED
                )

            entry = self._entry
            if (
                entry is not None
                and entry.source_path == resolved
                and entry.source_modified_at == modified_at
            ):
                logger.debug(f"Cache hit for {resolved}")
                return ParseResult.success(entry.records, entry.warnings)

            logger.info(f"Parsing password file {resolved} (modified at {modified_at})")
            result = self.parser.load(resolved)
            if not result.ok:
                logger.error(
                    f"Failed to parse {resolved}: {result.error.state.value} "
                    f"(keeping previous cache entry)"
                )
                return result

            with self._lock:
                self._entry = CacheEntry(
                    records=result.records,
                    source_modified_at=modified_at,
                    source_path=resolved,
                    warnings=result.warnings,
                )
            logger.info(f"Cached {len(result.records)} password records from {resolved}")
            return result
        except Exception as e:
            logger.error(f"Unexpected error loading password records: {e}", exc_info=True)
            return ParseResult.failure(ErrorState.CONFIGURATION_ERROR, CacheMessages.UNEXPECTED)

    def clear(self) -> None:
        """Drop the cached entry so the next call re-parses."""
        with self._lock:
            self._entry = None
