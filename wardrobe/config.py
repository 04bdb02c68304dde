"""
Configuration Layer
===================

Typed, environment-driven settings for the wardrobe service.

Usage:
    from wardrobe.config import config

    limit = config.search.default_page_size
    DATABASES = {"default": config.database.to_django()}
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import logging

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_list(name: str, default: str) -> List[str]:
    return [part.strip() for part in os.getenv(name, default).split(",") if part.strip()]


# =============================================================================
# Sections
# =============================================================================

@dataclass(frozen=True)
class DatabaseConfig:
    """Wardrobe database; SQLite file locally, PostgreSQL when DB_ENGINE=postgresql."""
    engine: str = field(default_factory=lambda: os.getenv("DB_ENGINE", "sqlite3"))
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "db.sqlite3"))
    host: str = field(default_factory=lambda: os.getenv("DB_HOST", ""))
    port: int = field(default_factory=lambda: _env_int("DB_PORT", 5432))
    user: str = field(default_factory=lambda: os.getenv("DB_USER", ""))
    password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", ""))

    @property
    def is_sqlite(self) -> bool:
        return self.engine == "sqlite3"

    def to_django(self) -> dict:
        """Entry for ``DATABASES["default"]``."""
        entry = {"ENGINE": f"django.db.backends.{self.engine}", "NAME": self.name}
        if not self.is_sqlite:
            entry.update(HOST=self.host, PORT=self.port, USER=self.user, PASSWORD=self.password)
        return entry


@dataclass(frozen=True)
class SecurityConfig:
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-wardrobe-dev"))
    allowed_hosts: List[str] = field(default_factory=lambda: _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1"))
    csrf_trusted_origins: List[str] = field(
        default_factory=lambda: _env_list("CSRF_TRUSTED_ORIGINS", "http://localhost:8000")
    )

    @property
    def is_secure_key(self) -> bool:
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class SearchConfig:
    """Wardrobe search limits."""
    max_query_length: int = field(default_factory=lambda: _env_int("SEARCH_MAX_QUERY_LENGTH", 200))
    default_page_size: int = field(default_factory=lambda: _env_int("SEARCH_DEFAULT_PAGE_SIZE", 50))
    max_page_size: int = field(default_factory=lambda: _env_int("SEARCH_MAX_PAGE_SIZE", 200))


@dataclass(frozen=True)
class AppConfig:
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> List[str]:
        """
        Return configuration problems, each prefixed CRITICAL or WARNING.
        Production-only checks cover the secret key, DEBUG and SQLite.
        """
        issues = []

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")
            if self.database.is_sqlite:
                issues.append("WARNING: SQLite database in production")

        search = self.search
        if search.max_page_size < 1 or search.default_page_size < 1:
            issues.append("CRITICAL: Search page sizes must be positive")
        elif search.default_page_size > search.max_page_size:
            issues.append("WARNING: SEARCH_DEFAULT_PAGE_SIZE exceeds SEARCH_MAX_PAGE_SIZE")

        if search.max_query_length < 1:
            issues.append("CRITICAL: SEARCH_MAX_QUERY_LENGTH must be positive")

        return issues

    def log_status(self) -> None:
        logger.info(
            f"Wardrobe config: env={self.environment} debug={self.debug} "
            f"db={self.database.engine} page_size={self.search.default_page_size}/{self.search.max_page_size}"
        )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return AppConfig()


config = get_config()
