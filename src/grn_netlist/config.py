from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


ClassifierName = Literal["two_pass", "single_pass"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    output_dir: str = "."
    # None -> <output_dir>/<input stem>_outputNetlist.json
    netlist_file: Optional[str] = None
    write_dot: bool = False
    json_indent: Optional[int] = Field(2, ge=0)


class ConverterConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    classifier: ClassifierName = "two_pass"
    log_level: str = "WARNING"
    output: OutputConfig = OutputConfig()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {v!r}")
        return level

    def with_updates(self, **kwargs) -> "ConverterConfig":
        """Return a validated copy with the non-None ``kwargs`` applied."""
        data = self.model_dump()
        data.update({k: v for k, v in kwargs.items() if v is not None})
        return ConverterConfig(**data)

    def from_environment(self) -> "ConverterConfig":
        """Apply ``GRN_NETLIST_CLASSIFIER`` / ``GRN_NETLIST_LOG_LEVEL`` overrides."""
        env_mapping = {
            "GRN_NETLIST_CLASSIFIER": "classifier",
            "GRN_NETLIST_LOG_LEVEL": "log_level",
        }
        updates = {}
        for env_var, key in env_mapping.items():
            value = os.getenv(env_var)
            if value:
                updates[key] = value
        return self.with_updates(**updates)


def load_config(config_path: Union[str, Path, None]) -> ConverterConfig:
    """Load a config from YAML (``.yaml``/``.yml``) or JSON; defaults when no path is given."""
    if not config_path:
        return ConverterConfig()
    path = Path(config_path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    return ConverterConfig(**data)
