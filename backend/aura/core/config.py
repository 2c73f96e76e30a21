"""
Application Configuration

All settings loaded from environment variables.
"""

from dataclasses import dataclass, fields
from functools import lru_cache
from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class SynthesisConfig:
    """
    Knobs of the market synthesis engine.

    The defaults are the engine's canonical constants; the pure functions
    take this value explicitly and never read the environment themselves.
    """

    padding_hours: int = 48
    default_lookback_days: int = 30
    hourly_volatility: float = 0.4
    liquidation_threshold: float = 15.0
    event_model: str = "linear"
    # Longest padded range the hourly walk will cover; older hours are cut
    max_span_hours: int = 24 * 366 * 3


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "Aura Market Engine"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Synthesis engine (defaults come from SynthesisConfig)
    padding_hours: int = SynthesisConfig.padding_hours
    default_lookback_days: int = SynthesisConfig.default_lookback_days
    hourly_volatility: float = SynthesisConfig.hourly_volatility
    liquidation_threshold: float = SynthesisConfig.liquidation_threshold
    event_model: str = SynthesisConfig.event_model  # Options: linear, necm
    max_span_hours: int = SynthesisConfig.max_span_hours

    # Session store
    max_sessions: int = 1000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "AURA_"
        case_sensitive = False

    @property
    def synthesis(self) -> SynthesisConfig:
        return SynthesisConfig(
            **{f.name: getattr(self, f.name) for f in fields(SynthesisConfig)}
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
