"""Centralized configuration for tagjson."""

import os
from typing import Optional


class Config:
    """
    tagjson configuration with environment variable overrides.

    Only logging is configurable. The encoder itself takes no options.
    """

    # ========================================================================
    # Logging Configuration
    # ========================================================================
    LOG_LEVEL: str = os.getenv("TAGJSON_LOG_LEVEL", "WARNING").upper()
    LOG_FILE: Optional[str] = os.getenv("TAGJSON_LOG_FILE") or None
    LOG_ROTATION: str = os.getenv("TAGJSON_LOG_ROTATION", "10 MB")
    LOG_RETENTION: str = os.getenv("TAGJSON_LOG_RETENTION", "7 days")

    LOG_FORMAT: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> | <level>{message}</level>"
    )

    VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if cls.LOG_LEVEL not in cls.VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(cls.VALID_LOG_LEVELS)}, got {cls.LOG_LEVEL!r}"
            )

        if cls.LOG_FILE is not None:
            if not cls.LOG_ROTATION.strip():
                errors.append("LOG_ROTATION must not be empty when LOG_FILE is set")
            if not cls.LOG_RETENTION.strip():
                errors.append("LOG_RETENTION must not be empty when LOG_FILE is set")

        if errors:
            raise ValueError("Configuration validation failed:\n" + "\n".join(errors))

        return True
