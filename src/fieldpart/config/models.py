"""Pydantic models describing fieldpart configuration."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_MISSING_PLACEHOLDER = "null"


class PartitionerConfig(BaseModel):
    """Field partitioner settings."""

    model_config = ConfigDict(extra="allow")

    partition_field_name: List[str] = Field(min_length=1)
    directory_delim: str = "/"
    missing_placeholder: Optional[str] = DEFAULT_MISSING_PLACEHOLDER
    topics_dir: str = "topics"

    @model_validator(mode="after")
    def _validate_field_names(self) -> "PartitionerConfig":
        """Reject blank, malformed dotted or repeated partition field names."""

        seen: set[str] = set()
        for name in self.partition_field_name:
            if not name.strip():
                raise ValueError("partition_field_name entries must not be blank.")
            if any(not part for part in name.split(".")):
                raise ValueError(f"partition_field_name '{name}' has an empty dotted component.")
            if name in seen:
                raise ValueError(f"partition_field_name lists '{name}' more than once.")
            seen.add(name)
        if not self.directory_delim:
            raise ValueError("directory_delim must not be empty.")
        return self


class RuntimeConfig(BaseModel):
    """Process-level settings such as logging."""

    model_config = ConfigDict(extra="allow")

    log_level: str = "INFO"
    log_path: Optional[Path] = None


class FieldpartConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    partitioner: PartitionerConfig
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


__all__ = [
    "DEFAULT_MISSING_PLACEHOLDER",
    "FieldpartConfig",
    "PartitionerConfig",
    "RuntimeConfig",
]
