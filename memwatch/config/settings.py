"""
Centralized settings configuration for the memwatch service.
Using Pydantic for validation and environment variable support.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.
    Every field can be overridden with a MEMWATCH_<FIELD> variable.
    """
    model_config = SettingsConfigDict(
        env_prefix="MEMWATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8080)
    debug: bool = Field(default=False)

    # Initial service configuration
    default_max_memory_mb: int = Field(default=100)
    default_debug_mode: bool = Field(default=False)

    # Background reporter
    stats_interval_seconds: float = Field(default=5.0, gt=0)

    # Monitoring bridge
    monitoring_enabled: bool = Field(default=True)

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="logs")


# Global settings instance
settings = Settings()
