"""Configuration management for the ATM."""
import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for the ATM.

    Business rules (menu codes, cancel sentinel, seed accounts) live in code;
    only the process plumbing is configurable.
    """

    # Logging Configuration
    log_file: str = 'atm.log'
    log_level: str = 'INFO'

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If a variable holds an unsupported value.
        """
        log_file = os.getenv('ATM_LOG_FILE', cls.log_file)
        log_level = os.getenv('ATM_LOG_LEVEL', cls.log_level).upper()

        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"ATM_LOG_LEVEL must be a logging level name, got {log_level!r}")

        return cls(
            log_file=log_file,
            log_level=log_level,
        )
