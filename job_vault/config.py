"""
Configuration management for Job Vault.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Persistence
    database_url: str = ""

    # Identity (bearer tokens issued by the auth provider)
    jwt_secret: str = ""
    jwt_audience: str = "authenticated"

    # Error responses include developer detail when enabled
    show_detailed_errors: bool = False

    # HTTP
    cors_origins: str = "http://localhost:3000"
    frontend_dir: str = ""
    log_level: str = "INFO"

    # Rate limiting
    rate_limit_enabled: bool = True
    export_rate_limit: str = "10/minute"
    seed_rate_limit: str = "5/minute"

    # PDF export
    pdf_timeout_ms: int = 30000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
