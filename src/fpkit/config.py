import logging
import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "FPKIT_LOG_LEVEL"


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, letting FPKIT_LOG_LEVEL override the default level."""
        settings = cls()
        level_name = os.getenv(LOG_LEVEL_ENV)
        if level_name and isinstance(getattr(logging, level_name.upper(), None), int):
            settings.log_level = level_name.upper()
        return settings
