from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

import yaml
from expandvars import ExpandvarsException, expand
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProbeType(str, Enum):
    WINDOWS = "windows"
    SNAPSHOT = "snapshot"


class Thresholds(BaseModel):
    """Minimum values a host must meet for each facet to PASS."""

    model_config = ConfigDict(extra="forbid")
    min_clock_ghz: float = 1.0
    min_logical_cores: int = 2
    min_memory_gb: float = 4
    min_free_storage_gb: float = 64
    tpm_version_pattern: str = r"2\.0"
    min_os_version: str = "10.0.19041"
    min_os_build: int = 19041

    @field_validator("tpm_version_pattern")
    @classmethod
    def pattern_must_compile(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid tpm_version_pattern {v!r}: {e}") from e
        return v

    @field_validator("min_logical_cores", "min_os_build")
    @classmethod
    def must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must not be negative")
        return v


class CheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    probe: ProbeType = ProbeType.WINDOWS
    snapshot: str | None = None
    system_drive: str = Field(default="${SystemDrive:-C:}", validate_default=True)
    powershell: str = Field(default="powershell.exe", validate_default=True)
    query_timeout: int = Field(default=30, gt=0)
    thresholds: Thresholds = Thresholds()

    @field_validator("snapshot", "system_drive", "powershell", mode="before")
    @classmethod
    def expand_env(cls, v: str | None) -> str | None:
        """Expand ``${VAR}`` / ``${VAR:-default}`` references from the environment.

        Backslashes are path separators here (``C:\\``), never escapes.
        """
        if v is None:
            return None
        try:
            return expand(str(v), escape_char="")
        except ExpandvarsException as e:
            raise ValueError(str(e)) from e

    @field_validator("system_drive")
    @classmethod
    def system_drive_must_not_be_empty(cls, v: str) -> str:
        v = v.rstrip("\\/")
        if not v:
            raise ValueError("system_drive must not be empty")
        return v


def load_config(path: Path) -> CheckConfig:
    """Load and validate a check config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    config = CheckConfig(**raw)

    # Resolve a relative snapshot path relative to the config file location
    if config.snapshot:
        snapshot_path = Path(config.snapshot)
        if not snapshot_path.is_absolute():
            config.snapshot = str((config_dir / snapshot_path).resolve())

    return config
