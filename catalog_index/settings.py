"""
Environment-driven configuration for the catalog index.
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Configuration loaded from environment variables."""

    @classmethod
    def _get_default_catalog_name(cls) -> str:
        return os.getenv("CATALOG_DEFAULT_NAME", "catalog")

    @classmethod
    def _get_warn_duplicates(cls) -> bool:
        return os.getenv("CATALOG_WARN_DUPLICATES", "true").lower() in ("true", "1", "yes")

    @classmethod
    def _get_log_level(cls) -> str:
        return os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()

    @classmethod
    def _get_store_max_catalogs(cls) -> int:
        return int(os.getenv("CATALOG_STORE_MAX_CATALOGS", "16"))

    # Properties that read from environment each time
    @property
    def DEFAULT_CATALOG_NAME(self) -> str:
        return self._get_default_catalog_name()

    @property
    def WARN_DUPLICATES(self) -> bool:
        return self._get_warn_duplicates()

    @property
    def LOG_LEVEL(self) -> str:
        return self._get_log_level()

    @property
    def STORE_MAX_CATALOGS(self) -> int:
        return self._get_store_max_catalogs()

    def validate(self) -> None:
        """Validate settings before wiring the store into an application."""
        if self.STORE_MAX_CATALOGS < 1:
            raise ValueError("CATALOG_STORE_MAX_CATALOGS must be at least 1")
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"CATALOG_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")


settings = Settings()


def configure_logging() -> None:
    """Configure root logging for scripts that embed the catalog index."""
    level = settings.LOG_LEVEL if settings.LOG_LEVEL in LOG_LEVELS else "INFO"
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
