"""
Configuration management for the nightlife rewards backend.

Secrets and environment specific values come from environment variables
(or a local ``.env`` file); everything else has a development default.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "dev-secret-change-in-production"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    # Database Configuration
    database_url: str = "sqlite:///./nightlife.db"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    log_sql_queries: bool = False
    slow_query_threshold_seconds: float = 1.0

    # JWT Authentication - MUST be overridden in production
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24

    cors_origins: List[str] = ["http://localhost:3000"]

    # Environment Settings
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Booking rules
    booking_code_length: int = 8
    booking_code_max_attempts: int = 5
    redemption_code_suffix: str = "001"
    max_party_size: int = 10

    # Referral codes
    referral_code_length: int = 10
    referral_code_max_attempts: int = 5

    # QR rendering
    qr_box_size: int = 10
    qr_border: int = 4

    # Object storage
    storage_endpoint_url: Optional[str] = None
    storage_public_base_url: Optional[str] = None
    aws_region: str = "us-east-1"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    receipts_bucket: str = "receipts"
    alcohol_balance_bucket: str = "alcoholbalance"
    max_upload_size_mb: int = 10
    allowed_upload_extensions: List[str] = ["jpg", "jpeg", "png", "gif", "pdf"]

    @field_validator("cors_origins", "allowed_upload_extensions", mode="before")
    @classmethod
    def parse_comma_separated(cls, v):
        """Accept comma separated strings as well as lists."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("redemption_code_suffix")
    @classmethod
    def validate_suffix(cls, v):
        if not v:
            raise ValueError("redemption_code_suffix must not be empty")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Returns:
        Settings instance with environment variables loaded
    """
    return Settings()


settings = get_settings()


def validate_production_config():
    """Validate configuration for production deployment."""
    if not settings.is_production:
        return

    security_issues = []

    if settings.jwt_secret_key == DEFAULT_JWT_SECRET:
        security_issues.append("JWT_SECRET_KEY is using default value")

    if settings.debug:
        security_issues.append("DEBUG is enabled in production")

    if settings.database_url.startswith("sqlite"):
        security_issues.append("Database URL points at SQLite")

    if security_issues:
        raise ValueError(
            f"Production security issues detected: {', '.join(security_issues)}"
        )


validate_production_config()
