from __future__ import annotations

from pathlib import Path

from win11ready.config import CheckConfig, ProbeType
from win11ready.probes.base import (
    BaseProbe,
    HostFacts,
    OsInfo,
    ProbeError,
    ProcessorInfo,
)
from win11ready.probes.snapshot import SnapshotProbe, dump_snapshot, load_snapshot
from win11ready.probes.windows import WindowsProbe


def get_probe(probe_name: str, config: CheckConfig) -> BaseProbe:
    if probe_name == ProbeType.WINDOWS:
        return WindowsProbe(
            powershell=config.powershell,
            system_drive=config.system_drive,
            timeout=config.query_timeout,
        )
    if probe_name == ProbeType.SNAPSHOT:
        if not config.snapshot:
            raise ValueError("The snapshot probe needs a facts file (--facts)")
        return SnapshotProbe(Path(config.snapshot))
    raise ValueError(
        f"Unknown probe: {probe_name!r}. "
        f"Available: {', '.join(sorted(p.value for p in ProbeType))}"
    )


__all__ = [
    "BaseProbe",
    "HostFacts",
    "OsInfo",
    "ProbeError",
    "ProcessorInfo",
    "SnapshotProbe",
    "WindowsProbe",
    "dump_snapshot",
    "get_probe",
    "load_snapshot",
]
