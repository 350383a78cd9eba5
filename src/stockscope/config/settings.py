"""Application settings and configuration management using Pydantic."""

from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

DATA_MODES = ["synthetic", "live"]
ENVIRONMENTS = ["development", "testing", "production"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMATS = ["structured", "plain"]


def _one_of(value: str, allowed: List[str], label: str) -> str:
    if value not in allowed:
        raise ValueError(f"{label} must be one of: {allowed}")
    return value


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    # Environment and deployment
    environment: str = "development"
    debug: bool = False

    # Market data settings
    data_mode: str = "synthetic"
    alpha_vantage_api_key: Optional[str] = None
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    alpha_vantage_fetch_fundamentals: bool = False
    simulate_latency: bool = False

    # Analytics settings
    history_days: int = 30
    analysis_window: int = 7
    confidence_profile: Optional[str] = None  # defaults to data_mode
    confidence_base: Optional[float] = None
    confidence_volatility_weight: Optional[float] = None
    confidence_floor: Optional[float] = None

    # API settings
    endpoint_host: str = "0.0.0.0"
    endpoint_port: int = 8000
    api_reload: bool = False
    api_log_level: str = "INFO"

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "structured"  # 'structured' or 'plain'
    log_file_enabled: bool = False
    log_file_path: str = "data/stockscope.log"
    log_max_file_size: str = "10MB"
    log_backup_count: int = 5

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        return _one_of(v.lower(), ENVIRONMENTS, "Environment")

    @field_validator("data_mode")
    @classmethod
    def validate_data_mode(cls, v):
        return _one_of(v.lower(), DATA_MODES, "Data mode")

    @field_validator("confidence_profile")
    @classmethod
    def validate_confidence_profile(cls, v):
        """Unset means: follow data_mode."""
        if v is None:
            return v
        return _one_of(v.lower(), DATA_MODES, "Confidence profile")

    @field_validator("confidence_base", "confidence_floor")
    @classmethod
    def validate_confidence_bound(cls, v):
        """Confidence overrides are percentages."""
        if v is not None and not 0 <= v <= 100:
            raise ValueError("Confidence base and floor must be between 0 and 100")
        return v

    @field_validator("confidence_volatility_weight")
    @classmethod
    def validate_volatility_weight(cls, v):
        if v is not None and v < 0:
            raise ValueError("Confidence volatility weight cannot be negative")
        return v

    @field_validator("history_days", "analysis_window")
    @classmethod
    def validate_window(cls, v):
        if v < 1:
            raise ValueError("History sizes must be at least 1")
        return v

    @field_validator("endpoint_port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("log_level", "api_log_level")
    @classmethod
    def validate_log_level(cls, v):
        return _one_of(v.upper(), LOG_LEVELS, "Log level")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        return _one_of(v.lower(), LOG_FORMATS, "Log format")

    def is_live(self) -> bool:
        """Check if quotes come from the live provider."""
        return self.data_mode == "live"

    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
