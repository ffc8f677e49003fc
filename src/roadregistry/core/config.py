"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class StorageConfig(BaseSettings):
    """Dataset location configuration."""

    model_config = {"env_prefix": "ROADREGISTRY_STORAGE_"}

    backend: Literal["local", "s3", "memory"] = "local"
    data_dir: str = "."
    people_file: str = "persons.txt"
    offenses_file: str = "demerits.txt"


class S3Config(BaseSettings):
    """S3 dataset storage configuration."""

    model_config = {"env_prefix": "ROADREGISTRY_S3_"}

    bucket: str = "roadregistry-datasets"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class RulesConfig(BaseSettings):
    """Demerit and update-eligibility thresholds."""

    model_config = {"env_prefix": "ROADREGISTRY_RULES_"}

    min_points: int = 1
    max_points: int = 6
    window_years: int = 2
    address_change_min_age: int = 18
    probationary_age: int = 21  # drivers under this age use the lower threshold
    probationary_threshold: int = 6
    full_threshold: int = 12


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ROADREGISTRY_"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"

    storage: StorageConfig = StorageConfig()
    s3: S3Config = S3Config()
    rules: RulesConfig = RulesConfig()
