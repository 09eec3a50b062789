"""Probe that replays host facts recorded in a YAML or JSON file."""

from __future__ import annotations

from pathlib import Path

import yaml

from win11ready.probes.base import BaseProbe, HostFacts, OsInfo, ProcessorInfo


def load_snapshot(path: Path) -> HostFacts:
    """Load and validate a facts snapshot. JSON files parse as YAML."""
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: snapshot must be a mapping of facts")
    return HostFacts(**raw)


def dump_snapshot(facts: HostFacts) -> str:
    """Serialize facts in the format :func:`load_snapshot` accepts."""
    return yaml.safe_dump(
        facts.model_dump(mode="json"), default_flow_style=False, sort_keys=False
    )


class SnapshotProbe(BaseProbe):
    def __init__(self, path: Path):
        self.path = path
        self.facts = load_snapshot(path)

    def name(self) -> str:
        return "snapshot"

    def processor(self) -> ProcessorInfo | None:
        return self.facts.processor

    def total_memory_bytes(self) -> int | None:
        return self.facts.total_memory_bytes

    def free_storage_bytes(self) -> int | None:
        return self.facts.free_storage_bytes

    def display_adapters(self) -> list[str] | None:
        return self.facts.display_adapters

    def secure_boot_enabled(self) -> bool | None:
        return self.facts.secure_boot_enabled

    def tpm_version(self) -> str | None:
        return self.facts.tpm_version

    def os_info(self) -> OsInfo | None:
        return self.facts.os
