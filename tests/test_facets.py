"""Tests for the per-facet predicates."""

import pytest

from win11ready.config import Thresholds
from win11ready.facets.base import (
    Facet,
    Verdict,
    bytes_to_gb,
    format_number,
    mhz_to_ghz,
)
from win11ready.facets.checks import (
    check_graphics,
    check_memory,
    check_os_version,
    check_processor,
    check_secure_boot,
    check_storage,
    check_tpm,
    evaluate_facets,
)
from win11ready.probes.base import HostFacts, OsInfo, ProcessorInfo

GB = 2**30
DEFAULTS = Thresholds()


# ── conversions ───────────────────────────────────────────────────────────────


def test_bytes_to_gb_uses_power_of_two_divisor():
    assert bytes_to_gb(4 * GB) == 4.0
    assert bytes_to_gb(1_000_000_000) == 0.93


def test_mhz_to_ghz_rounds_to_two_decimals():
    assert mhz_to_ghz(3600) == 3.6
    assert mhz_to_ghz(2904) == 2.9


@pytest.mark.parametrize(
    "value, expected",
    [(120.0, "120"), (23.94, "23.94"), (3.6, "3.6"), (1.65, "1.65"), (4, "4")],
)
def test_format_number_drops_trailing_zeros(value, expected):
    assert format_number(value) == expected


def test_format_number_unknown():
    assert format_number(None) == "Unknown"


# ── processor ─────────────────────────────────────────────────────────────────


def test_processor_pass():
    cpu = ProcessorInfo(
        max_clock_speed_mhz=3600,
        logical_cores=4,
        manufacturer="GenuineIntel",
        caption="Intel64 Family 6 Model 158 Stepping 10",
        address_width=64,
    )
    result = check_processor(cpu, DEFAULTS)
    assert result.verdict is Verdict.PASS
    assert result.detail == "3.6 GHz, 4 Cores"
    assert result.log_value == (
        "{AddressWidth=64; MaxClockSpeed=3600; NumberOfLogicalCores=4; "
        "Manufacturer=GenuineIntel; Caption=Intel64 Family 6 Model 158 Stepping 10; }"
    )


def test_processor_clock_boundary_is_inclusive():
    assert check_processor(
        ProcessorInfo(max_clock_speed_mhz=1000, logical_cores=2), DEFAULTS
    ).passed
    assert not check_processor(
        ProcessorInfo(max_clock_speed_mhz=990, logical_cores=2), DEFAULTS
    ).passed


def test_processor_single_core_fails():
    result = check_processor(
        ProcessorInfo(max_clock_speed_mhz=3000, logical_cores=1), DEFAULTS
    )
    assert result.verdict is Verdict.FAIL
    assert result.detail == "3 GHz, 1 Cores"


def test_processor_absent_fails():
    result = check_processor(None, DEFAULTS)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "Unknown GHz, Unknown Cores"
    assert "MaxClockSpeed=Unknown" in result.log_value


# ── memory / storage ──────────────────────────────────────────────────────────


def test_memory_exactly_four_gb_passes():
    result = check_memory(4 * GB, DEFAULTS)
    assert result.passed
    assert result.detail == "4 GB"
    assert result.log_value == "4GB"


def test_memory_just_under_four_gb_fails():
    result = check_memory(int(3.99 * GB), DEFAULTS)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "3.99 GB"


def test_memory_absent_fails():
    result = check_memory(None, DEFAULTS)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "Unknown"


def test_storage_detail_and_log():
    result = check_storage(120 * GB, DEFAULTS)
    assert result.passed
    assert result.detail == "120 GB free"
    assert result.log_value == "FreeSpace=120GB"


def test_storage_low_space_fails():
    result = check_storage(int(1.65 * GB), DEFAULTS)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "1.65 GB free"


def test_storage_absent_fails():
    result = check_storage(None, DEFAULTS)
    assert not result.passed
    assert result.log_value == "FreeSpace=Unknown"


# ── graphics / secure boot ────────────────────────────────────────────────────


def test_graphics_uses_first_adapter():
    result = check_graphics(["Intel UHD Graphics 630", "NVIDIA T1000"])
    assert result.passed
    assert result.detail == "Intel UHD Graphics 630"


@pytest.mark.parametrize("adapters", [[], None])
def test_graphics_none_found_fails(adapters):
    result = check_graphics(adapters)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "Unknown"


def test_secure_boot_enabled():
    result = check_secure_boot(True)
    assert result.passed
    assert result.detail == "Enabled"
    assert result.log_value == "Enabled"


@pytest.mark.parametrize("state", [False, None])
def test_secure_boot_disabled_or_unknown_fails(state):
    result = check_secure_boot(state)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "UEFI/Secure Boot not enabled"
    assert result.log_value == "NotEnabled"


# ── tpm ───────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("version", ["2.0", "2.0.1.3", "2.0, 0, 1.59"])
def test_tpm_version_containing_2_0_passes(version):
    result = check_tpm(version, DEFAULTS)
    assert result.passed
    assert result.detail == version


def test_tpm_1_2_fails_with_raw_version():
    result = check_tpm("1.2", DEFAULTS)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "1.2"


def test_tpm_absent_fails():
    result = check_tpm(None, DEFAULTS)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "Not Found or Not 2.0"
    assert result.log_value == "NotFoundOrNot2.0"


def test_tpm_pattern_does_not_treat_dot_as_wildcard():
    assert not check_tpm("210", DEFAULTS).passed


# ── os version ────────────────────────────────────────────────────────────────


def test_os_version_boundary_passes():
    result = check_os_version(OsInfo(version="10.0.19041", build=19041), DEFAULTS)
    assert result.passed
    assert result.detail == "Windows 10.0.19041 Build 19041"
    assert result.log_value == "Windows 10.0.19041 19041"


def test_os_build_below_minimum_fails():
    result = check_os_version(OsInfo(version="10.0.19040", build=19040), DEFAULTS)
    assert result.verdict is Verdict.FAIL


def test_os_build_compared_numerically():
    # "10.0.19041" >= "10.0.19041" lexically, but the build gate is numeric
    result = check_os_version(OsInfo(version="10.0.19041", build=9999), DEFAULTS)
    assert result.verdict is Verdict.FAIL


def test_os_absent_fails():
    result = check_os_version(None, DEFAULTS)
    assert result.verdict is Verdict.FAIL
    assert result.detail == "Windows Unknown Build Unknown"


# ── thresholds / ordering ─────────────────────────────────────────────────────


def test_custom_thresholds_apply():
    strict = Thresholds(min_memory_gb=8, min_free_storage_gb=128)
    assert not check_memory(6 * GB, strict).passed
    assert not check_storage(120 * GB, strict).passed


def test_evaluate_facets_keeps_fixed_order():
    results = evaluate_facets(HostFacts(), DEFAULTS)
    assert [r.facet for r in results] == list(Facet)
    assert all(r.verdict is Verdict.FAIL for r in results)


def test_display_names():
    assert Facet.SECURE_BOOT.display_name == "Secure Boot"
    assert Facet.OS_VERSION.display_name == "OS Version"
    assert Facet.TPM.display_name == "TPM"
