"""Logging configuration for the persistence adapter."""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "ask_persistence"


class LogSettings(BaseSettings):
    """Logging configuration with environment variable support."""

    LOG_LEVEL: str = "INFO"

    # Third-party loggers to silence (set to WARNING level)
    # Can be overridden via NOISY_LOGGERS env var (comma-separated)
    NOISY_LOGGERS: str = "botocore,boto3,aioboto3,aiobotocore,urllib3"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def setup_logging(settings: LogSettings = None) -> logging.Logger:
    """
    Set the package log level and quiet the AWS client libraries.

    Handlers are left to the host application.

    Args:
        settings: Log settings (defaults to environment).

    Returns:
        The package logger.
    """
    settings = settings or LogSettings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.LOG_LEVEL.upper())

    for name in settings.NOISY_LOGGERS.split(","):
        name = name.strip()
        if name:
            logging.getLogger(name).setLevel(logging.WARNING)

    return logger
