"""Runtime configuration.

Values come from, in order of precedence: keyword arguments, ``NOTESMATE_*``
environment variables (``__`` separates nested keys), a ``.env`` file, and the
YAML file named by ``NOTESMATE_CONFIG_FILE``.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
from typing_extensions import Self

from notesmate.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)

DEV_TOKEN_SECRET = "notesmate-dev-secret-change-in-production"
"""Signing secret used outside production when none is configured. Never valid in production."""

# Third-party loggers held at a fixed level regardless of the configured one
LIBRARY_LOG_LEVELS = {
    "asyncio": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "alembic": logging.INFO,
}


class Server(BaseModel):
    name: str = "NotesMate"
    version: str = "0.1.0"
    description: str = "Clinical documentation platform"
    environment: Literal["development", "test", "production"] = "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///~/.local/share/notesmate/notesmate.db"
    echo: bool = False
    auto_migrate: bool = True


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file: str | None = None
    """Write to this file instead of stderr. Also settable as NOTESMATE_LOG_FILE."""

    @property
    def target_file(self) -> Path | None:
        path = self.file or os.environ.get("NOTESMATE_LOG_FILE")
        return Path(path).expanduser() if path else None


class TokenConfig(BaseModel):
    """Session token signing."""

    secret: str = ""
    validity_hours: float = 24

    @property
    def validity_ms(self) -> int:
        return int(self.validity_hours * 3600 * 1000)

    @property
    def validity_seconds(self) -> int:
        return int(self.validity_hours * 3600)


class BootstrapAdminConfig(BaseModel):
    """Platform administrator created at startup if no employee has that username yet."""

    username: str = ""
    password: str = ""
    first_name: str = "Platform"
    last_name: str = "Administrator"


class AuthConfig(BaseModel):
    token: TokenConfig = TokenConfig()
    bootstrap_admin: BootstrapAdminConfig = BootstrapAdminConfig()


class Config(BaseSettings):
    server: Server = Server()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    auth: AuthConfig = AuthConfig()

    model_config = SettingsConfigDict(
        env_prefix="NOTESMATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    @model_validator(mode="after")
    def resolve_token_secret(self) -> Self:
        """Refuse to start in production without an explicit signing secret.

        Elsewhere, fall back to a well-known development secret and say so loudly.
        """
        token = self.auth.token
        if token.secret:
            return self
        if self.server.is_production:
            raise ConfigurationError(
                "NOTESMATE_AUTH__TOKEN__SECRET must be set in production",
                code="missing_token_secret",
            )
        logger.warning(
            "No token secret configured; using the development placeholder (environment=%s)",
            self.server.environment,
        )
        self.auth = self.auth.model_copy(
            update={"token": token.model_copy(update={"secret": DEV_TOKEN_SECRET})}
        )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_settings = YamlConfigSettingsSource(
            settings_cls, yaml_file=os.environ.get("NOTESMATE_CONFIG_FILE")
        )
        return init_settings, env_settings, dotenv_settings, yaml_settings, file_secret_settings


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler. Call once, before anything logs."""
    target = config.target_file
    if target is not None:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.level)

    for name, level in LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    logger.debug("Logging configured: level=%s, file=%s", config.level, target)
