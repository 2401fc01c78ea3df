"""Configuration management."""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class WeightPolicy(str, Enum):
    """How unweighted searches treat a grid that carries cell weights."""

    IGNORE = "ignore"
    REJECT = "reject"


class Settings(BaseSettings):
    """Library settings pulled from environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Grid Configuration
    min_grid_dimension: int = Field(default=5, description="Minimum rows and columns of a grid")
    max_grid_rows: int = Field(default=500, description="Max allowed grid rows")
    max_grid_cols: int = Field(default=500, description="Max allowed grid columns")
    default_rows: int = Field(default=20, description="Default grid rows")
    default_cols: int = Field(default=30, description="Default grid columns")

    # Generation Configuration
    default_seed: str = Field(default="gridnav", description="Seed used when none is given")

    # Search Configuration
    weight_policy: WeightPolicy = Field(
        default=WeightPolicy.IGNORE,
        description="Whether unweighted searches ignore or reject weighted grids",
    )

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        return value.upper()

    class Config:
        env_prefix = "GRIDNAV_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
