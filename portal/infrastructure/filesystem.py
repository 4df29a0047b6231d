"""Local disk implementation of the source filesystem."""

import logging
import os
import threading
from typing import Optional
from pathlib import Path
from shared.interfaces.source_filesystem import SourceFileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(SourceFileSystem):
    """
    Reads the password table from local disk.

    Counts file reads in `read_count` so callers can observe whether the
    cache avoided a re-read.
    """

    def __init__(self, base_dir: Optional[str] = None) -> None:
        self.base_dir = Path(base_dir) if base_dir else None
        self.read_count: int = 0
        self._lock = threading.Lock()

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if self.base_dir is not None and not candidate.is_absolute():
            return self.base_dir / candidate
        return candidate

    def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).is_file()
        except OSError as e:
            logger.warning(f"Could not check path {path}: {e}")
            return False

    def modified_at(self, path: str) -> float:
        return os.stat(self._resolve(path)).st_mtime

    def read_text(self, path: str) -> str:
        with self._lock:
            self.read_count += 1
        # utf-8-sig tolerates a BOM written by spreadsheet exports
        return self._resolve(path).read_text(encoding="utf-8-sig")
