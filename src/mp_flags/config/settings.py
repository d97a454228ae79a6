"""Config settings – Settings base class and FlagServiceSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from mp_flags.config.errors import InvalidSettingValueError

LOG_LEVELS: frozenset[str] = frozenset({"debug", "info", "warn", "warning", "error"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FlagServiceSettings(Settings):
    """Process settings for the flag service.

    Read from ``POSTGRES_DSN``, ``HTTP_ADDR``, ``REDIS_ADDR``, ``LOG_LEVEL``
    and ``REQUEST_TIMEOUT_SECONDS``; only the DSN is required.
    """

    postgres_dsn: str
    http_addr: str = ":8080"
    redis_addr: str = "localhost:6379"
    log_level: str = "info"
    request_timeout_seconds: float = 5.0

    def _validate(self) -> None:
        if not self.postgres_dsn:
            raise InvalidSettingValueError("postgres_dsn", self.postgres_dsn, "must not be empty")
        if self.log_level.lower() not in LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(LOG_LEVELS)}"
            )
        if self.request_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "request_timeout_seconds", self.request_timeout_seconds, "must be positive"
            )

    @property
    def redis_url(self) -> str:
        if "://" in self.redis_addr:
            return self.redis_addr
        return f"redis://{self.redis_addr}/0"

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for :attr:`postgres_dsn` (asyncpg driver).

        asyncpg rejects libpq's ``sslmode`` keyword, so it is renamed to
        ``ssl``, which accepts the same mode values.
        """
        dsn = self.postgres_dsn
        for scheme in ("postgresql://", "postgres://"):
            if dsn.startswith(scheme):
                return _asyncpg_query("postgresql+asyncpg://" + dsn[len(scheme):])
        return dsn


def _asyncpg_query(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url
    params = [
        ("ssl" if key == "sslmode" else key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(params)))


__all__ = ["LOG_LEVELS", "FlagServiceSettings", "Settings"]
