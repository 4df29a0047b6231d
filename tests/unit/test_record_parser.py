"""Tests for password table parsing."""

import logging
import pytest
from shared.domain.models import PasswordRecord
from shared.domain.status import ErrorState
from portal.infrastructure.filesystem import LocalFileSystem
from portal.services.record_parser import RecordParser, parse_password_table


class TestParsePasswordTable:
    """Tests for parse_password_table()."""

    def test_parse_valid_table(self):
        """Test parsing a well-formed table."""
        result = parse_password_table(
            "Date,Password\n01/06/2024,Sunf10wer!\n02/06/2024,Ra1nyDay$\n"
        )

        assert result.ok is True
        assert result.error is None
        assert result.records == (
            PasswordRecord(date="01/06/2024", password="Sunf10wer!"),
            PasswordRecord(date="02/06/2024", password="Ra1nyDay$"),
        )
        assert result.warnings == ()

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t \n "])
    def test_blank_input_is_invalid_format(self, text):
        """Test that blank input is an error, not an empty success."""
        result = parse_password_table(text)

        assert result.ok is False
        assert result.error.state == ErrorState.INVALID_CSV_FORMAT
        assert "empty" in result.error.message
        assert result.records == ()

    @pytest.mark.parametrize("header", [
        "Day,Password",
        "Date,Pass",
        "date,password",
        "Password",
    ])
    def test_missing_required_column(self, header):
        """Test that the header needs exact, case-sensitive Date and Password."""
        result = parse_password_table(f"{header}\n01/06/2024,Secret1\n")

        assert result.error.state == ErrorState.INVALID_CSV_FORMAT
        assert "missing required columns" in result.error.message

    def test_header_and_values_are_trimmed(self):
        """Test that whitespace around headers and cells is ignored."""
        result = parse_password_table(" Date , Password \n 01/06/2024 ,  Secret1 \n")

        assert result.records == (PasswordRecord(date="01/06/2024", password="Secret1"),)

    def test_extra_columns_and_order(self):
        """Test that column order is free and extra columns are ignored."""
        result = parse_password_table("Note,Password,Date\nhi,Secret1,01/06/2024\n")

        assert result.records == (PasswordRecord(date="01/06/2024", password="Secret1"),)

    def test_quoted_password_with_comma(self):
        """Test that quoted fields keep embedded commas."""
        result = parse_password_table('Date,Password\n01/06/2024,"a,b"\n')

        assert result.records[0].password == "a,b"

    def test_leading_bom_is_ignored(self):
        """Test that a UTF-8 byte order mark does not break the header."""
        result = parse_password_table("\ufeffDate,Password\n01/06/2024,Secret1\n")

        assert result.ok is True

    def test_blank_lines_skipped(self):
        """Test that empty lines between rows are skipped silently."""
        result = parse_password_table("Date,Password\n\n01/06/2024,Secret1\n\n\n")

        assert len(result.records) == 1
        assert result.warnings == ()

    @pytest.mark.parametrize("row", [",", " , "])
    def test_separator_only_row_is_missing_value(self, row):
        """Test that a row of empty cells is reported, not skipped silently."""
        result = parse_password_table(f"Date,Password\n{row}\n01/06/2024,Secret1\n")

        assert result.records == (PasswordRecord(date="01/06/2024", password="Secret1"),)
        assert result.warnings == ("Row 2: Missing date or password",)

    def test_whitespace_only_line_is_blank(self):
        """Test that a line holding only spaces counts as a blank line."""
        result = parse_password_table("Date,Password\n   \n01/06/2024,Secret1\n")

        assert result.ok is True
        assert result.warnings == ()

    def test_invalid_rows_become_warnings(self, caplog):
        """Test that bad rows are skipped, reported, and logged once."""
        text = (
            "Date,Password\n"
            "01/06/2024,Secret1\n"
            "31/02/2024,Bad1\n"
            ",NoDate\n"
            "02/06/2024,\n"
            "2024-06-03,Bad2\n"
        )
        with caplog.at_level(logging.WARNING):
            result = parse_password_table(text)

        assert result.records == (PasswordRecord(date="01/06/2024", password="Secret1"),)
        assert result.warnings == (
            'Row 3: Invalid date format "31/02/2024" (expected DD/MM/YYYY)',
            "Row 4: Missing date or password",
            "Row 5: Missing date or password",
            'Row 6: Invalid date format "2024-06-03" (expected DD/MM/YYYY)',
        )
        warning_records = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warning_records) == 1
        assert "CSV parsing warnings" in warning_records[0].getMessage()

    def test_all_rows_invalid_is_error(self):
        """Test that a valid header with only bad rows is an error."""
        result = parse_password_table("Date,Password\n31/02/2024,A\n1/6/2024,B\n")

        assert result.ok is False
        assert result.error.state == ErrorState.INVALID_CSV_FORMAT
        assert "No valid password entries" in result.error.message
        assert len(result.warnings) == 2

    def test_header_only_is_error(self):
        """Test that a header with no rows is an error."""
        result = parse_password_table("Date,Password\n")

        assert result.error.state == ErrorState.INVALID_CSV_FORMAT

    @pytest.mark.parametrize("row", [
        "01/06/2024",
        "01/06/2024,Secret1,extra",
    ])
    def test_field_count_mismatch_is_parsing_error(self, row):
        """Test that ragged rows fail the parse."""
        result = parse_password_table(f"Date,Password\n01/06/2024,ok\n{row}\n")

        assert result.error.state == ErrorState.PARSING_ERROR
        assert result.records == ()

    def test_bad_quoting_is_parsing_error(self):
        """Test that the CSV reader's structural errors are parsing errors."""
        result = parse_password_table('Date,Password\n01/06/2024,"Sec"ret\n')

        assert result.error.state == ErrorState.PARSING_ERROR

    def test_duplicate_dates_are_kept(self):
        """Test that the parser does not deduplicate dates."""
        result = parse_password_table("Date,Password\n01/06/2024,A\n01/06/2024,B\n")

        assert [r.password for r in result.records] == ["A", "B"]


class TestRecordParser:
    """Tests for RecordParser.load()."""

    def test_load_reads_through_filesystem(self, filesystem):
        """Test loading the table from the injected filesystem."""
        parser = RecordParser(filesystem)

        result = parser.load("passwords.csv")

        assert result.ok is True
        assert len(result.records) == 2
        assert filesystem.read_count == 1

    def test_read_failure_is_configuration_error(self, filesystem):
        """Test that an I/O error while reading maps to CONFIGURATION_ERROR."""
        filesystem.fail_reads = True
        parser = RecordParser(filesystem)

        result = parser.load("passwords.csv")

        assert result.error.state == ErrorState.CONFIGURATION_ERROR
        assert "System configuration error" in result.error.message

    def test_decode_failure_is_configuration_error(self, tmp_path):
        """Test that non-UTF-8 content maps to CONFIGURATION_ERROR."""
        path = tmp_path / "passwords.csv"
        path.write_bytes(b"Date,Password\n01/06/2024,\xff\xfe\xfa\n")

        result = RecordParser(LocalFileSystem()).load(str(path))

        assert result.error.state == ErrorState.CONFIGURATION_ERROR
