"""Configuration management using Pydantic Settings"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from LOAN_ESTIMATOR_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="LOAN_ESTIMATOR_",
        extra="ignore",
    )

    # Service
    service_name: str = "loan-estimator"
    log_level: str = "WARNING"  # INFO and below would interleave with the prompts

    # Schedule export
    output_dir: Path = Path(".")
    amortization_filename: str = "amortization_schedule.csv"
    bullet_filename: str = "bullet_schedule.csv"

    # Prompt loop (None = re-prompt forever)
    max_input_attempts: Optional[int] = Field(default=None, gt=0)


settings = Settings()
