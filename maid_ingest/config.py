"""
Ingestion settings.

Settings are resolved in this order, later sources winning:
built-in defaults, an optional YAML file (``ingest:`` section),
then ``MAID_INGEST_*`` environment variables (optionally loaded
from a .env file).

Example YAML:
```yaml
ingest:
  max_batch_size: 50
  min_age: 21
  strict_reporting: true
```
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

ENV_PREFIX = "MAID_INGEST_"


class IngestSettings(BaseModel):
    """
    Tunables for bulk profile ingestion.

    Attributes:
        max_batch_size: Maximum rows accepted in one batch
        min_age / max_age: Inclusive calendar-age bounds for date of birth
        default_nationality: Nationality assigned when a row omits it
        default_currency: Salary currency assigned when a row omits it
        strict_reporting: Raise when the audit sink fails instead of logging
        log_level: DEBUG, INFO, WARNING, ERROR, CRITICAL
        log_format: "json" or "text"
    """

    max_batch_size: int = Field(100, ge=1)
    min_age: int = Field(18, ge=0)
    max_age: int = Field(65, ge=0)
    default_nationality: str = "ET"
    default_currency: str = "USD"
    strict_reporting: bool = False
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @model_validator(mode="after")
    def check_age_bounds(self):
        if self.min_age > self.max_age:
            raise ValueError(f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})")
        return self


def _env_overrides() -> dict[str, Any]:
    """Collect MAID_INGEST_* variables that name a known setting."""
    overrides = {}
    for name in IngestSettings.model_fields:
        value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_settings(
    config_path: str | Path | None = None,
    env_file: str | Path | None = None,
) -> IngestSettings:
    """
    Load settings from defaults, YAML and environment.

    Args:
        config_path: Optional YAML file with an ``ingest:`` section
        env_file: Optional .env file loaded before reading the environment

    Returns:
        Validated IngestSettings

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the YAML file is malformed
    """
    if env_file is not None:
        load_dotenv(env_file, override=True)

    values: dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")

        with open(path) as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError("Settings file must contain a mapping")

        section = config.get("ingest", {})
        if not isinstance(section, dict):
            raise ValueError("'ingest' section must be a mapping")
        values.update(section)

    values.update(_env_overrides())
    return IngestSettings(**values)
