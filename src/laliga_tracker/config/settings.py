import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.engine import make_url

DEFAULT_DATABASE_URL = "sqlite:///./database/matches.db"


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration for the tracker service"""
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    # None disables the log file
    logs_dir: Optional[str] = "logs"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    echo_sql: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Build a config from LALIGA_* environment variables, falling back to
        the defaults above for anything unset.
        """
        defaults = cls()
        logs_dir = os.getenv("LALIGA_LOGS_DIR", defaults.logs_dir)
        origins = os.getenv("LALIGA_CORS_ORIGINS")
        return cls(
            database_url=os.getenv("LALIGA_DATABASE_URL", defaults.database_url),
            log_level=os.getenv("LALIGA_LOG_LEVEL", defaults.log_level).upper(),
            logs_dir=logs_dir or None,
            host=os.getenv("LALIGA_HOST", defaults.host),
            # int() raises ValueError on garbage, which is what we want at startup
            port=int(os.getenv("LALIGA_PORT", str(defaults.port))),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins else defaults.cors_origins
            ),
            echo_sql=_env_flag(os.getenv("LALIGA_ECHO_SQL", "false")),
        )

    @property
    def sqlite_path(self) -> Optional[Path]:
        """Path of the SQLite file, or None for in-memory / non-SQLite URLs."""
        url = make_url(self.database_url)
        if not url.drivername.startswith("sqlite"):
            return None
        if not url.database or url.database == ":memory:":
            return None
        return Path(url.database)

    def ensure_directories_exist(self) -> None:
        """Create the SQLite parent directory and the logs directory if needed."""
        directories = []
        if self.sqlite_path is not None:
            directories.append(self.sqlite_path.parent)
        if self.logs_dir:
            directories.append(Path(self.logs_dir))

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)
