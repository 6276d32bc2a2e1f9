"""
Configuration management utilities.

This module provides environment variable handling with type conversion,
database URL validation, logging configuration utilities and the
application settings read at startup.
"""

import logging
import logging.config
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from ..exceptions import ConfigurationException


class ConfigError(ConfigurationException):
    """Exception raised for configuration-related errors."""

    pass


class LogLevel(Enum):
    """Enumeration for log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvironmentConfig:
    """Utility class for handling environment variables with type conversion."""

    @staticmethod
    def get_str(
        key: str, default: Optional[str] = None, required: bool = False
    ) -> Optional[str]:
        """
        Get a string environment variable.

        Raises:
            ConfigError: If required variable is missing
        """
        value = os.getenv(key, default)

        if required and value is None:
            raise ConfigError(
                f"Required environment variable '{key}' is not set", config_key=key
            )

        return value

    @staticmethod
    def get_int(
        key: str, default: Optional[int] = None, required: bool = False
    ) -> Optional[int]:
        """
        Get an integer environment variable.

        Raises:
            ConfigError: If required variable is missing or invalid
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigError(
                    f"Required environment variable '{key}' is not set", config_key=key
                )
            return default

        try:
            return int(value)
        except ValueError:
            raise ConfigError(
                f"Environment variable '{key}' must be an integer, got: {value}",
                config_key=key,
            )

    @staticmethod
    def get_bool(
        key: str, default: Optional[bool] = None, required: bool = False
    ) -> Optional[bool]:
        """
        Get a boolean environment variable.

        Raises:
            ConfigError: If required variable is missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigError(
                    f"Required environment variable '{key}' is not set", config_key=key
                )
            return default

        return value.lower() in ("true", "1", "yes", "on", "enabled")


class DatabaseURLValidator:
    """Utility class for validating database URLs."""

    SUPPORTED_DRIVERS = {
        "postgresql": ["postgresql", "postgresql+asyncpg"],
        "sqlite": ["sqlite", "sqlite+aiosqlite"],
    }

    @classmethod
    def validate_url(cls, url: str) -> Dict[str, Any]:
        """
        Validate a database URL and return parsed components.

        Args:
            url: Database URL to validate

        Returns:
            Dictionary with validation results and parsed components

        Raises:
            ConfigError: If URL is invalid
        """
        if not url:
            raise ConfigError("Database URL cannot be empty")

        try:
            parsed = make_url(url)
        except ArgumentError as e:
            raise ConfigError(f"Invalid URL format: {e}")

        supported = [d for drivers in cls.SUPPORTED_DRIVERS.values() for d in drivers]
        if parsed.drivername not in supported:
            raise ConfigError(
                f"Unsupported database driver '{parsed.drivername}'. "
                f"Supported: {', '.join(supported)}"
            )

        backend = parsed.get_backend_name()
        if backend != "sqlite":
            if not parsed.host:
                raise ConfigError("Database URL must include a hostname")
            if not parsed.database:
                raise ConfigError("Database URL must include a database name")

        return {
            "valid": True,
            "scheme": parsed.drivername,
            "backend": backend,
            "hostname": parsed.host,
            "port": parsed.port,
            "database": parsed.database or "",
            "username": parsed.username,
        }


class LoggingConfigurator:
    """Utility class for configuring logging."""

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @staticmethod
    def configure_basic_logging(
        level: Union[str, LogLevel] = LogLevel.INFO,
        format_string: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> None:
        """
        Configure basic logging for the application.

        Args:
            level: Logging level
            format_string: Custom format string
            log_file: Optional log file path
        """
        if isinstance(level, LogLevel):
            level = level.value

        basic_config_args: Dict[str, Any] = {
            "level": level,
            "format": format_string or LoggingConfigurator.DEFAULT_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
        if log_file:
            basic_config_args["filename"] = log_file
            basic_config_args["filemode"] = "a"

        logging.basicConfig(**basic_config_args)

    @staticmethod
    def build_config(
        level: Union[str, LogLevel] = LogLevel.INFO,
        log_file: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Build the default dictConfig for the ``petclinic`` logger tree.

        Uvicorn's own loggers are left alone; the application loggers write to
        stdout, or to ``log_file`` when given.
        """
        if isinstance(level, LogLevel):
            level = level.value

        handler: Dict[str, Any]
        if log_file:
            handler = {
                "class": "logging.FileHandler",
                "level": level,
                "formatter": "standard",
                "filename": log_file,
                "mode": "a",
            }
        else:
            handler = {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            }

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": LoggingConfigurator.DEFAULT_FORMAT},
                "detailed": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s"
                },
            },
            "handlers": {"default": handler},
            "loggers": {
                "petclinic": {
                    "level": level,
                    "handlers": ["default"],
                    "propagate": False,
                }
            },
            "root": {"level": "WARNING", "handlers": ["default"]},
        }

    @staticmethod
    def configure_structured_logging(
        config_dict: Optional[Dict[str, Any]] = None, config_file: Optional[str] = None
    ) -> None:
        """
        Configure structured logging using a dictionary or file.

        Args:
            config_dict: Logging configuration dictionary
            config_file: Path to logging configuration file
        """
        if config_file and Path(config_file).exists():
            logging.config.fileConfig(config_file)
        elif config_dict:
            logging.config.dictConfig(config_dict)
        else:
            logging.config.dictConfig(LoggingConfigurator.build_config())


DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./petclinic.db"


@dataclass
class AppSettings:
    """Settings the application reads at startup."""

    database_url: str = DEFAULT_DATABASE_URL
    pool_size: int = 5
    max_overflow: int = 10
    echo: bool = False
    create_schema: bool = True
    load_sample_data: bool = True
    log_level: str = LogLevel.INFO.value
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        DatabaseURLValidator.validate_url(self.database_url)
        try:
            LogLevel(self.log_level.upper())
        except ValueError:
            raise ConfigError(
                f"Invalid log level '{self.log_level}'. "
                f"Expected one of: {', '.join(level.value for level in LogLevel)}"
            )
        self.log_level = self.log_level.upper()
        if self.pool_size < 1:
            raise ConfigError("Pool size must be at least 1")
        if self.max_overflow < 0:
            raise ConfigError("Max overflow cannot be negative")

    @classmethod
    def from_environment(cls) -> "AppSettings":
        """
        Read settings from ``PETCLINIC_*`` environment variables.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        return cls(
            database_url=EnvironmentConfig.get_str(
                "PETCLINIC_DATABASE_URL", DEFAULT_DATABASE_URL
            ),
            pool_size=EnvironmentConfig.get_int("PETCLINIC_DB_POOL_SIZE", 5),
            max_overflow=EnvironmentConfig.get_int("PETCLINIC_DB_MAX_OVERFLOW", 10),
            echo=EnvironmentConfig.get_bool("PETCLINIC_DB_ECHO", False),
            create_schema=EnvironmentConfig.get_bool("PETCLINIC_CREATE_SCHEMA", True),
            load_sample_data=EnvironmentConfig.get_bool(
                "PETCLINIC_LOAD_SAMPLE_DATA", True
            ),
            log_level=EnvironmentConfig.get_str(
                "PETCLINIC_LOG_LEVEL", LogLevel.INFO.value
            ),
            log_file=EnvironmentConfig.get_str("PETCLINIC_LOG_FILE"),
        )

    def configure_logging(self) -> None:
        """Apply the logging configuration for these settings."""
        LoggingConfigurator.configure_structured_logging(
            LoggingConfigurator.build_config(self.log_level, self.log_file)
        )
