"""Abstract filesystem interface for reading the password table."""

from abc import ABC, abstractmethod


class SourceFileSystem(ABC):
    """Read-only view of the files the password table may live in.

    All filesystems must implement:
    - exists: Whether a candidate path points at a file
    - modified_at: The file's last-modified timestamp
    - read_text: The file's content decoded as text
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether path names an existing file.

        Args:
            path: Candidate file path

        Returns:
            True if a file exists at path, False otherwise (never raises)
        """
        pass

    @abstractmethod
    def modified_at(self, path: str) -> float:
        """Return the last-modified timestamp of path.

        Raises:
            OSError: If the file cannot be inspected
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read the whole file as text.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid text
        """
        pass
