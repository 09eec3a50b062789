"""Live Windows host probe: PowerShell CIM queries plus psutil."""

from __future__ import annotations

import json
import subprocess
from typing import Any

import psutil

from win11ready.probes.base import BaseProbe, OsInfo, ProbeError, ProcessorInfo

TPM_NAMESPACE = "root/cimv2/Security/MicrosoftTpm"


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class WindowsProbe(BaseProbe):
    def __init__(
        self,
        powershell: str = "powershell.exe",
        system_drive: str = "C:",
        timeout: int = 30,
    ):
        self.powershell = powershell
        self.system_drive = system_drive
        self.timeout = timeout

    def name(self) -> str:
        return "windows"

    def _build_command(self, script: str) -> list[str]:
        return [self.powershell, "-NoProfile", "-NonInteractive", "-Command", script]

    def _run_powershell(self, script: str) -> str:
        result = subprocess.run(
            self._build_command(script),
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )
        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise ProbeError(f"{script!r} failed: {detail}")
        return result.stdout.strip()

    def _cim_instances(
        self, class_name: str, properties: list[str], namespace: str | None = None
    ) -> list[dict[str, Any]]:
        """Return the selected properties of every instance of a CIM class."""
        script = "Get-CimInstance"
        if namespace:
            script += f" -Namespace {namespace}"
        script += (
            f" -ClassName {class_name}"
            f" | Select-Object {','.join(properties)}"
            " | ConvertTo-Json -Compress"
        )
        stdout = self._run_powershell(script)
        if not stdout:
            return []
        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as e:
            raise ProbeError(f"unparseable {class_name} output: {e}") from e
        # ConvertTo-Json emits a bare object for a single instance
        if isinstance(data, dict):
            return [data]
        return [item for item in data if isinstance(item, dict)]

    def processor(self) -> ProcessorInfo | None:
        instances = self._cim_instances(
            "Win32_Processor",
            [
                "MaxClockSpeed",
                "NumberOfLogicalProcessors",
                "Manufacturer",
                "Caption",
                "AddressWidth",
            ],
        )
        if not instances:
            return None
        cpu = instances[0]
        return ProcessorInfo(
            max_clock_speed_mhz=cpu.get("MaxClockSpeed"),
            logical_cores=cpu.get("NumberOfLogicalProcessors"),
            manufacturer=_text(cpu.get("Manufacturer")),
            caption=_text(cpu.get("Caption")),
            address_width=cpu.get("AddressWidth"),
        )

    def total_memory_bytes(self) -> int | None:
        return int(psutil.virtual_memory().total)

    def free_storage_bytes(self) -> int | None:
        return int(psutil.disk_usage(f"{self.system_drive}\\").free)

    def display_adapters(self) -> list[str] | None:
        instances = self._cim_instances("Win32_VideoController", ["Name"])
        return [_text(item.get("Name")) or "Unknown" for item in instances]

    def secure_boot_enabled(self) -> bool | None:
        # Confirm-SecureBootUEFI errors out on legacy BIOS firmware
        stdout = self._run_powershell("Confirm-SecureBootUEFI")
        if stdout == "True":
            return True
        if stdout == "False":
            return False
        raise ProbeError(f"unexpected Confirm-SecureBootUEFI output: {stdout!r}")

    def tpm_version(self) -> str | None:
        instances = self._cim_instances(
            "Win32_Tpm", ["SpecVersion"], namespace=TPM_NAMESPACE
        )
        if not instances:
            return None
        return _text(instances[0].get("SpecVersion"))

    def os_info(self) -> OsInfo | None:
        instances = self._cim_instances(
            "Win32_OperatingSystem", ["Version", "BuildNumber"]
        )
        if not instances:
            return None
        os_ = instances[0]
        build = _text(os_.get("BuildNumber"))
        return OsInfo(
            version=_text(os_.get("Version")),
            build=int(build) if build is not None else None,
        )
