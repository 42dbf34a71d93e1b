"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

from app.shared.constants import Tier, UnitSystem


APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Normalization defaults ===
    default_tier: Tier = Field(
        default=Tier.HALF,
        description="Target standard when the caller does not choose one"
    )
    default_unit_system: UnitSystem = Field(
        default=UnitSystem.METRIC,
        description="Unit system when the caller does not choose one"
    )

    @field_validator('log_level')
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... as well as 'DEBUG'."""
        return v.upper()

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
