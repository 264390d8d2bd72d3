import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

STORE_BACKENDS = ("sqlalchemy", "memory")
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./car_rental.db")
    database_echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # Store backend: "sqlalchemy" (default) or "memory"
    store_backend: str = os.getenv("CAR_RENTAL_STORE", "sqlalchemy").lower()

    # Listing
    default_page_size: int = int(os.getenv("CAR_RENTAL_DEFAULT_PAGE_SIZE", "10"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "json").lower()

    @property
    def uses_memory_store(self) -> bool:
        """Check if the app should run against the in-memory store.

        Returns:
            True if CAR_RENTAL_STORE is "memory", False otherwise
        """
        return self.store_backend == "memory"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"CAR_RENTAL_STORE must be one of {list(STORE_BACKENDS)}, "
                f"got {self.store_backend!r}"
            )

        if self.default_page_size < 1:
            raise ValueError("CAR_RENTAL_DEFAULT_PAGE_SIZE must be at least 1")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {list(LOG_FORMATS)}, got {self.log_format!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
