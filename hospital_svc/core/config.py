"""
Configuration module for the Hospital Records Service.
Settings are read once at import through pydantic-settings.
"""
import logging
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings read from the environment and an optional .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database Configuration
    hospital_svc_db_dir: str = Field(default="data", description="Database directory")
    hospital_svc_db_file: str = Field(default="hospital.db", description="Database filename")
    hospital_svc_db_busy_timeout: int = Field(default=5000, ge=0, description="SQLite busy timeout in milliseconds")

    # API Configuration
    hospital_svc_host: str = Field(default="0.0.0.0", description="API host")
    hospital_svc_port: int = Field(default=8000, description="API port")
    hospital_svc_reload: bool = Field(default=False, description="Enable hot reload")

    # API Authentication Configuration
    hospital_svc_api_key: str = Field(
        default="",
        description="API key for authenticating requests to the Hospital Records API",
    )

    # Report defaults used by the HTTP layer
    hospital_svc_low_stock_threshold: int = Field(
        default=60, ge=0, description="Default stock threshold for the low-stock report"
    )
    hospital_svc_top_doctors_limit: int = Field(
        default=3, ge=1, description="Default row cap for the top-doctors report"
    )

    @model_validator(mode="after")
    def validate_secrets(self) -> "Settings":
        """Warn about settings that leave parts of the service unusable."""
        if not self.hospital_svc_api_key:
            logger.warning(
                "HOSPITAL_SVC_API_KEY not set - authenticated API endpoints will answer 503"
            )
        elif len(self.hospital_svc_api_key) < 32:
            logger.warning("HOSPITAL_SVC_API_KEY is shorter than 32 characters")
        return self

    @property
    def database_path(self) -> str:
        """Get the full database path."""
        return str(Path(self.hospital_svc_db_dir) / self.hospital_svc_db_file)

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        Path(self.hospital_svc_db_dir).mkdir(parents=True, exist_ok=True)


settings = Settings()

DATABASE_PATH = settings.database_path
DATABASE_BUSY_TIMEOUT = settings.hospital_svc_db_busy_timeout

API_HOST = settings.hospital_svc_host
API_PORT = settings.hospital_svc_port
API_RELOAD = settings.hospital_svc_reload

API_KEY = settings.hospital_svc_api_key

LOW_STOCK_THRESHOLD = settings.hospital_svc_low_stock_threshold
TOP_DOCTORS_LIMIT = settings.hospital_svc_top_doctors_limit
