"""Configuration loaded from environment variables."""

import os
from typing import List, Optional


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_bool(key: str, default: str) -> bool:
    """Get boolean environment variable with validation."""
    value = os.getenv(key, default).strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean value for {key}")


def _get_env_list(key: str, default: str) -> List[str]:
    """Get comma-separated environment variable as a list of non-empty items."""
    return [
        item.strip()
        for item in os.getenv(key, default).split(",")
        if item.strip()
    ]


def _get_env_optional(key: str) -> Optional[str]:
    """Get environment variable, treating blank values as unset."""
    value = os.getenv(key, "").strip()
    return value or None


class Config:
    """Centralized configuration from environment variables."""

    # Network shown to guests and encoded in the QR payload
    NETWORK_NAME: str = os.getenv("NETWORK_NAME", "Bloom Guest")
    WIFI_SECURITY: str = os.getenv("WIFI_SECURITY", "WPA")  # WPA, WEP or nopass
    WIFI_HIDDEN: bool = _get_env_bool("WIFI_HIDDEN", "false")

    # Password table location: explicit file first, then the search paths in order
    PASSWORD_FILE: Optional[str] = _get_env_optional("PASSWORD_FILE")
    PASSWORD_SEARCH_PATHS: List[str] = _get_env_list(
        "PASSWORD_SEARCH_PATHS",
        "public/wifi-passwords.csv,wifi-passwords.csv",
    )

    # IANA zone name used to decide what "today" is (unset = host local time)
    TIMEZONE: Optional[str] = _get_env_optional("TIMEZONE")

    # HTTP server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_env_int("PORT", "8000")

    def source_candidates(self) -> List[str]:
        """Default password table locations in priority order."""
        candidates = [self.PASSWORD_FILE] if self.PASSWORD_FILE else []
        candidates.extend(self.PASSWORD_SEARCH_PATHS)
        return candidates


config = Config()
