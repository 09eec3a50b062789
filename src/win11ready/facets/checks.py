"""Per-facet predicates. Each is a pure function of one raw fact."""

from __future__ import annotations

import re

from win11ready.config import Thresholds
from win11ready.facets.base import (
    UNKNOWN,
    Facet,
    FacetResult,
    Verdict,
    bytes_to_gb,
    format_number,
    mhz_to_ghz,
)
from win11ready.probes.base import HostFacts, OsInfo, ProcessorInfo

TPM_MISSING_DETAIL = "Not Found or Not 2.0"
TPM_MISSING_LOG = "NotFoundOrNot2.0"
SECURE_BOOT_OFF_DETAIL = "UEFI/Secure Boot not enabled"


def _text(value: str | int | None) -> str:
    return UNKNOWN if value is None else str(value)


def check_processor(cpu: ProcessorInfo | None, thresholds: Thresholds) -> FacetResult:
    """Clock speed and logical core count against the minimums."""
    cpu = cpu or ProcessorInfo()
    ghz = mhz_to_ghz(cpu.max_clock_speed_mhz)
    cores = cpu.logical_cores

    passed = (
        ghz is not None
        and cores is not None
        and ghz >= thresholds.min_clock_ghz
        and cores >= thresholds.min_logical_cores
    )
    log_value = (
        "{"
        f"AddressWidth={_text(cpu.address_width)}; "
        f"MaxClockSpeed={format_number(cpu.max_clock_speed_mhz)}; "
        f"NumberOfLogicalCores={_text(cores)}; "
        f"Manufacturer={_text(cpu.manufacturer)}; "
        f"Caption={_text(cpu.caption)}; "
        "}"
    )
    return FacetResult(
        facet=Facet.PROCESSOR,
        verdict=Verdict.of(passed),
        detail=f"{format_number(ghz)} GHz, {_text(cores)} Cores",
        log_value=log_value,
    )


def check_memory(total_bytes: int | None, thresholds: Thresholds) -> FacetResult:
    gb = bytes_to_gb(total_bytes)
    passed = gb is not None and gb >= thresholds.min_memory_gb
    return FacetResult(
        facet=Facet.MEMORY,
        verdict=Verdict.of(passed),
        detail=f"{format_number(gb)} GB" if gb is not None else UNKNOWN,
        log_value=f"{format_number(gb)}GB" if gb is not None else UNKNOWN,
    )


def check_storage(free_bytes: int | None, thresholds: Thresholds) -> FacetResult:
    gb = bytes_to_gb(free_bytes)
    passed = gb is not None and gb >= thresholds.min_free_storage_gb
    return FacetResult(
        facet=Facet.STORAGE,
        verdict=Verdict.of(passed),
        detail=f"{format_number(gb)} GB free" if gb is not None else UNKNOWN,
        log_value=f"FreeSpace={format_number(gb)}GB"
        if gb is not None
        else f"FreeSpace={UNKNOWN}",
    )


def check_graphics(adapters: list[str] | None) -> FacetResult:
    """Existence only; driver model and DirectX level are not inspected."""
    name = adapters[0] if adapters else UNKNOWN
    return FacetResult(
        facet=Facet.GRAPHICS,
        verdict=Verdict.of(bool(adapters)),
        detail=name,
        log_value=name,
    )


def check_secure_boot(enabled: bool | None) -> FacetResult:
    passed = enabled is True
    return FacetResult(
        facet=Facet.SECURE_BOOT,
        verdict=Verdict.of(passed),
        detail="Enabled" if passed else SECURE_BOOT_OFF_DETAIL,
        log_value="Enabled" if passed else "NotEnabled",
    )


def check_tpm(version: str | None, thresholds: Thresholds) -> FacetResult:
    """A TPM must be present and its spec version must match the pattern."""
    passed = (
        version is not None
        and re.search(thresholds.tpm_version_pattern, version) is not None
    )
    return FacetResult(
        facet=Facet.TPM,
        verdict=Verdict.of(passed),
        detail=version if version is not None else TPM_MISSING_DETAIL,
        log_value=version if version is not None else TPM_MISSING_LOG,
    )


def check_os_version(os_info: OsInfo | None, thresholds: Thresholds) -> FacetResult:
    """Version string compared as a string, build number compared as an integer."""
    os_info = os_info or OsInfo()
    version, build = os_info.version, os_info.build
    passed = (
        version is not None
        and build is not None
        and version >= thresholds.min_os_version
        and build >= thresholds.min_os_build
    )
    return FacetResult(
        facet=Facet.OS_VERSION,
        verdict=Verdict.of(passed),
        detail=f"Windows {_text(version)} Build {_text(build)}",
        log_value=f"Windows {_text(version)} {_text(build)}",
    )


def evaluate_facets(facts: HostFacts, thresholds: Thresholds) -> tuple[FacetResult, ...]:
    """Check all seven facets in evaluation order."""
    return (
        check_processor(facts.processor, thresholds),
        check_memory(facts.total_memory_bytes, thresholds),
        check_storage(facts.free_storage_bytes, thresholds),
        check_graphics(facts.display_adapters),
        check_secure_boot(facts.secure_boot_enabled),
        check_tpm(facts.tpm_version, thresholds),
        check_os_version(facts.os, thresholds),
    )
