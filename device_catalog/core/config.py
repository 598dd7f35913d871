# Standard library imports
import os
from pathlib import Path
from typing import Final, List, Optional

# External package imports
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE = PROJECT_ROOT / ".env"


def _env_flag(name: str, default: str) -> bool:
    """Read a boolean environment variable ("1", "true", "yes", "on" are truthy)"""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Application Configuration
        self.app_title: Final[str] = os.getenv("APP_TITLE", "Device Catalog API")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.docs_directory: Final[str] = os.getenv("CATALOG_DOCS_DIR", "")
        self.cors_allowed_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Catalog Behaviour
        self.seed_defaults: Final[bool] = _env_flag("CATALOG_SEED_DEFAULTS", "true")
        self.enforce_unique_keys: Final[bool] = _env_flag("CATALOG_ENFORCE_UNIQUE_KEYS", "false")
        self.protect_referenced: Final[bool] = _env_flag("CATALOG_PROTECT_REFERENCED", "false")

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    The .env file is loaded before the first Settings instance is built, so
    values from it apply to every caller (the uvicorn launcher included).
    Variables already present in the environment take precedence.

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        load_dotenv(ENV_FILE)
        _settings = Settings()
    return _settings
