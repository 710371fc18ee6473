"""
Application configuration read from the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for the catalog service.

    The API key has no default: when LIBRARY_API_KEY is unset the
    authentication gate is not wired and mutation routes are open.
    """

    db_path: str = "data/library.db"
    """SQLite database file, or a 'file:' URI"""

    api_key: Optional[str] = None
    """Shared secret expected verbatim in the Authorization header"""

    cors_allow_origins: Tuple[str, ...] = field(default_factory=lambda: ("*",))
    """Origins allowed to call the read routes"""

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            db_path=os.getenv("DB_PATH", "data/library.db"),
            api_key=os.getenv("LIBRARY_API_KEY") or None,
            cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
