"""Pytest configuration and fixtures."""

import pytest
from datetime import datetime
from typing import Callable, Dict, Tuple
from shared.dates import DateProvider
from shared.interfaces.source_filesystem import SourceFileSystem
from portal.infrastructure.record_cache import RecordCache
from portal.services.lookup_service import PasswordLookupService

SAMPLE_TABLE = (
    "Date,Password\n"
    "01/06/2024,Sunf10wer!\n"
    "02/06/2024,Ra1nyDay$\n"
)


class InMemoryFileSystem(SourceFileSystem):
    """
    Dict-backed filesystem for tests.

    Modification times are set explicitly, so tests can simulate a file
    changing without touching the disk. `read_count` counts read_text calls.
    """

    def __init__(self) -> None:
        self.files: Dict[str, Tuple[str, float]] = {}
        self.read_count: int = 0
        self.fail_reads: bool = False
        self.fail_stat: bool = False

    def write(self, path: str, content: str, modified_at: float = 1.0) -> None:
        self.files[path] = (content, modified_at)

    def touch(self, path: str, modified_at: float) -> None:
        content, _ = self.files[path]
        self.files[path] = (content, modified_at)

    def remove(self, path: str) -> None:
        del self.files[path]

    def exists(self, path: str) -> bool:
        return path in self.files

    def modified_at(self, path: str) -> float:
        if self.fail_stat:
            raise PermissionError(f"Permission denied: {path}")
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path][1]

    def read_text(self, path: str) -> str:
        self.read_count += 1
        if self.fail_reads:
            raise PermissionError(f"Permission denied: {path}")
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path][0]


def make_fixed_clock(year: int, month: int, day: int, hour: int = 12) -> Callable[[], datetime]:
    """Clock that always returns the same naive local time."""
    moment = datetime(year, month, day, hour, 0, 0)
    return lambda: moment


@pytest.fixture
def fixed_clock():
    """Factory for clocks frozen at a given local time."""
    return make_fixed_clock


@pytest.fixture
def empty_filesystem():
    """In-memory filesystem with no files."""
    return InMemoryFileSystem()


@pytest.fixture
def sample_table():
    """Well-formed two-row password table."""
    return SAMPLE_TABLE


@pytest.fixture
def filesystem():
    """In-memory filesystem holding the sample table at passwords.csv."""
    fs = InMemoryFileSystem()
    fs.write("passwords.csv", SAMPLE_TABLE)
    return fs


@pytest.fixture
def cache(filesystem):
    """Record cache searching only passwords.csv."""
    return RecordCache(filesystem=filesystem, search_paths=["passwords.csv"])


@pytest.fixture
def make_service(cache):
    """Factory for lookup services pinned to a given calendar day."""
    def _make(year: int = 2024, month: int = 6, day: int = 1) -> PasswordLookupService:
        return PasswordLookupService(
            cache=cache,
            date_provider=DateProvider(clock=make_fixed_clock(year, month, day)),
            network_name="Bloom Guest",
        )
    return _make
