"""
Configuration management using Pydantic Settings.

Settings are loaded from environment variables prefixed with ``TESTKIT_``.
Defaults reproduce the fixed values the helpers were built around (local
host, port 2426, ``fixtures`` directory), so no environment is required.

Usage:
    from fixture_testkit.core.config import get_settings

    settings = get_settings()
    settings.port  # 2426 unless TESTKIT_PORT is set

Settings are handed to ``create_testkit`` at construction time; nothing reads
a module-level mutable port.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixture_testkit.core.constants import (
    DEFAULT_FIXTURES_DIR,
    DEFAULT_HOST,
    DEFAULT_PORT,
)
from fixture_testkit.core.enums import Environment


class TestKitSettings(BaseSettings):
    """
    Testkit settings (flat structure).

    Configuration precedence:
        1. Explicit arguments to ``create_testkit``
        2. Environment variables (``TESTKIT_*``)
        3. Default values
    """

    # pytest would otherwise try to collect this class
    __test__ = False

    environment: Environment = Field(
        default=Environment.TESTING,
        description="Runtime environment (development, testing, ci)",
    )
    host: str = Field(
        default=DEFAULT_HOST,
        description="Host the application under test is addressed by",
    )
    port: int = Field(
        default=DEFAULT_PORT,
        description="Port the application under test is bound to",
    )
    fixtures_dir: Path = Field(
        default=Path(DEFAULT_FIXTURES_DIR),
        description="Directory fixture files are loaded from",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    database_url: str | None = Field(
        default=None,
        description="Isolated test database URL (e.g., sqlite+aiosqlite:///test.db)",
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL statements",
    )

    model_config = SettingsConfigDict(
        env_prefix="TESTKIT_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """
        Validate port is a usable TCP port.

        Args:
            v: Port number.

        Returns:
            int: Validated port.

        Raises:
            ValueError: If port is outside 1-65535.
        """
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name so ``debug`` and ``DEBUG`` both work."""
        return v.upper()

    @property
    def use_json_logs(self) -> bool:
        """JSON log output outside development."""
        return self.environment in (Environment.TESTING, Environment.CI)


@lru_cache
def get_settings() -> TestKitSettings:
    """
    Get cached settings instance.

    Returns:
        TestKitSettings: Settings loaded once per process.
    """
    return TestKitSettings()
