"""Parsing of the date-keyed password table."""

import csv
import io
import logging
from typing import List
from shared.dates import is_valid_date
from shared.domain.consts import CsvColumns, DateFormat
from shared.domain.errors import ERROR_MESSAGES
from shared.domain.models import PasswordRecord, ParseResult
from shared.domain.status import ErrorState
from shared.interfaces.source_filesystem import SourceFileSystem

logger = logging.getLogger(__name__)


class ParserMessages:
    """Guest-facing messages for table loading failures."""
    EMPTY = "Password file is empty. Please contact staff for assistance."
    MISSING_COLUMNS = (
        "Password file is missing required columns. Please contact staff for assistance."
    )
    NO_VALID_ENTRIES = (
        "No valid password entries found in file. Please contact staff for assistance."
    )
    MALFORMED = ERROR_MESSAGES[ErrorState.PARSING_ERROR]
    UNREADABLE = ERROR_MESSAGES[ErrorState.CONFIGURATION_ERROR]


def parse_password_table(text: str) -> ParseResult:
    """
    Parse CSV text with a Date,Password header into password records.

    Blank lines are ignored. Rows with a missing value (including rows made
    only of separators) or a malformed date are skipped and reported as
    warnings. A row whose field count differs from the header's, or CSV that
    the reader rejects, fails the whole parse.

    Returns:
        ParseResult with at least one record, or with an error state of
        INVALID_CSV_FORMAT (empty input, missing columns, no valid rows) or
        PARSING_ERROR (malformed structure).
    """
    if not text or not text.strip():
        return ParseResult.failure(ErrorState.INVALID_CSV_FORMAT, ParserMessages.EMPTY)

    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")), strict=True)
    header: List[str] = []
    records: List[PasswordRecord] = []
    warnings: List[str] = []

    try:
        for row in reader:
            cells = [cell.strip() for cell in row]
            # Lines without a separator and only whitespace are blank lines;
            # rows of empty cells fall through to the missing-value warning
            if len(cells) <= 1 and not any(cells):
                continue

            if not header:
                header = cells
                if CsvColumns.DATE not in header or CsvColumns.PASSWORD not in header:
                    logger.error(f"Password table header is missing required columns: {header}")
                    return ParseResult.failure(
                        ErrorState.INVALID_CSV_FORMAT, ParserMessages.MISSING_COLUMNS
                    )
                date_index = header.index(CsvColumns.DATE)
                password_index = header.index(CsvColumns.PASSWORD)
                continue

            if len(cells) != len(header):
                logger.error(
                    f"Row {reader.line_num}: expected {len(header)} fields, found {len(cells)}"
                )
                return ParseResult.failure(ErrorState.PARSING_ERROR, ParserMessages.MALFORMED)

            date_value = cells[date_index]
            password = cells[password_index]

            if not date_value or not password:
                warnings.append(f"Row {reader.line_num}: Missing date or password")
                continue

            if not is_valid_date(date_value):
                warnings.append(
                    f'Row {reader.line_num}: Invalid date format "{date_value}" '
                    f"(expected {DateFormat.DISPLAY})"
                )
                continue

            records.append(PasswordRecord(date=date_value, password=password))
    except csv.Error as e:
        logger.error(f"CSV parsing error at line {reader.line_num}: {e}")
        return ParseResult.failure(ErrorState.PARSING_ERROR, ParserMessages.MALFORMED)

    if warnings:
        logger.warning(f"CSV parsing warnings: {', '.join(warnings)}")

    if not records:
        return ParseResult.failure(
            ErrorState.INVALID_CSV_FORMAT, ParserMessages.NO_VALID_ENTRIES, tuple(warnings)
        )

    return ParseResult.success(tuple(records), tuple(warnings))


class RecordParser:
    """Loads the password table through a filesystem and parses it."""

    def __init__(self, filesystem: SourceFileSystem) -> None:
        self.filesystem = filesystem

    def load(self, path: str) -> ParseResult:
        """
        Read and parse the table at path.

        Returns:
            ParseResult; read or decode failures yield CONFIGURATION_ERROR.
        """
        try:
            text = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unable to read password file {path}: {e}")
            return ParseResult.failure(ErrorState.CONFIGURATION_ERROR, ParserMessages.UNREADABLE)

        return parse_password_table(text)
