"""Configuration management using Pydantic Settings"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .calculators.amortization import PERIOD_CAP
from .calculators.tvm import MAX_ITERATIONS, TOLERANCE


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="FREEDOM_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    app_title: str = "Financial FREED-om Calculators"
    log_level: str = "INFO"

    # Persistence
    storage_dir: Path = Path.home() / ".freedom_calculators"

    # Engines
    period_cap: int = PERIOD_CAP
    newton_tolerance: float = TOLERANCE
    newton_max_iterations: int = MAX_ITERATIONS

    # Embedded RPN calculator
    rpn_calculator_url: str = "https://mscottsewell.github.io/HP12c/"


settings = Settings()
