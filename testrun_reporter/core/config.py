"""Configuration management for the test-run reporter."""

import json
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore
from pydantic import BaseModel, Field, field_validator  # type: ignore


class ReporterConfig(BaseModel):
    """Configuration for a report run."""

    # Parsing
    skip_header: bool = Field(default=False, description="Discard the first non-blank line as a header")
    delimiter: str = Field(default=",", min_length=1, max_length=1, description="CSV field separator")

    # Output
    summary_filename: str = Field(default="summary.txt", description="Human-readable summary file")
    records_filename: str = Field(default="summary.csv", description="Per-record CSV table")
    errors_filename: str = Field(default="errors.log", description="Line validation diagnostics")

    # Behaviour
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    open_menu: bool = Field(default=False, description="Show the interactive summary menu after reporting")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_file(cls, config_path: str) -> "ReporterConfig":
        """Load configuration from a YAML or JSON file."""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        return cls(**data)

    def save(self, config_path: str) -> None:
        """Save configuration to file."""
        path = Path(config_path)
        data = self.model_dump()

        with open(path, "w", encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(data, f, default_flow_style=False, indent=2)
            else:
                json.dump(data, f, indent=2)

    def merged(self, **overrides: Any) -> "ReporterConfig":
        """Return a copy with the non-None overrides applied."""
        updates: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        return self.model_copy(update=updates)
