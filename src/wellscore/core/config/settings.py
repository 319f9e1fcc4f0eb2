"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Wellscore server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; there is no auth layer in front of the tools.
    wellscore_host: str = "127.0.0.1"
    wellscore_port: int = 8003
    wellscore_log_level: str = "info"
    wellscore_allow_insecure_bind: bool = False

    # Category weights (must sum to 1.0)
    weight_metabolic: float = 0.40
    weight_vo2_max: float = 0.24
    weight_grip_strength: float = 0.12
    weight_body_composition: float = 0.24

    # Storage (saved assessments). Persistence is off without an encryption key.
    db_path: str = "~/.wellscore/assessments.db"
    encryption_key: str = ""


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
