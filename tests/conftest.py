"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

from win11ready.probes.base import BaseProbe, HostFacts, OsInfo, ProcessorInfo

GB = 2**30


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up win11ready loggers after each test so handlers do not leak."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("win11ready")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


class FakeProbe(BaseProbe):
    """Serves fixed facts; names listed in ``broken`` raise instead."""

    def __init__(self, facts: HostFacts, broken: tuple[str, ...] = ()):
        self.facts = facts
        self.broken = set(broken)

    def _get(self, fact: str):
        if fact in self.broken:
            raise PermissionError(f"access denied reading {fact}")
        return getattr(self.facts, fact)

    def name(self) -> str:
        return "fake"

    def processor(self):
        return self._get("processor")

    def total_memory_bytes(self):
        return self._get("total_memory_bytes")

    def free_storage_bytes(self):
        return self._get("free_storage_bytes")

    def display_adapters(self):
        return self._get("display_adapters")

    def secure_boot_enabled(self):
        return self._get("secure_boot_enabled")

    def tpm_version(self):
        return self._get("tpm_version")

    def os_info(self):
        return self._get("os")


@pytest.fixture
def passing_facts() -> HostFacts:
    """A desktop that meets every minimum."""
    return HostFacts(
        processor=ProcessorInfo(
            max_clock_speed_mhz=3600,
            logical_cores=4,
            manufacturer="GenuineIntel",
            caption="Intel64 Family 6 Model 158 Stepping 10",
            address_width=64,
        ),
        total_memory_bytes=int(23.94 * GB),
        free_storage_bytes=120 * GB,
        display_adapters=["NVIDIA GeForce GTX 1660"],
        secure_boot_enabled=True,
        tpm_version="2.0",
        os=OsInfo(version="10.0.22631", build=22631),
    )


@pytest.fixture
def logger() -> logging.Logger:
    test_logger = logging.getLogger("win11ready_test")
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest.fixture
def make_probe():
    """Factory for FakeProbe instances."""
    return FakeProbe
