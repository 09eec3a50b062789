"""Base data structures for facet evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BYTES_PER_GB = 2**30
UNKNOWN = "Unknown"


class Facet(str, Enum):
    """The seven checked dimensions, in evaluation order."""

    PROCESSOR = "Processor"
    MEMORY = "Memory"
    STORAGE = "Storage"
    GRAPHICS = "Graphics"
    SECURE_BOOT = "SecureBoot"
    TPM = "TPM"
    OS_VERSION = "OSVersion"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self, self.value)


_DISPLAY_NAMES = {
    Facet.SECURE_BOOT: "Secure Boot",
    Facet.OS_VERSION: "OS Version",
}


class Verdict(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"

    @classmethod
    def of(cls, passed: bool) -> Verdict:
        return cls.PASS if passed else cls.FAIL


@dataclass(frozen=True)
class FacetResult:
    """Outcome of checking one facet.

    Attributes:
        facet: Which dimension was checked.
        verdict: PASS or FAIL.
        detail: Human-readable value shown on the console
            (e.g. "3.6 GHz, 4 Cores").
        log_value: Raw value as it appears in the compact logging string
            (e.g. "FreeSpace=120GB").
    """

    facet: Facet
    verdict: Verdict
    detail: str
    log_value: str

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASS

    @property
    def log_clause(self) -> str:
        return f"{self.facet.value}: {self.log_value}. {self.verdict.value};"


def format_number(value: float | int | None) -> str:
    """Render with at most two decimals and no trailing zeros (120, 23.94, 3.6)."""
    if value is None:
        return UNKNOWN
    if isinstance(value, int):
        return str(value)
    return f"{round(value, 2):.2f}".rstrip("0").rstrip(".")


def bytes_to_gb(value: int | None) -> float | None:
    if value is None:
        return None
    return round(value / BYTES_PER_GB, 2)


def mhz_to_ghz(value: float | None) -> float | None:
    if value is None:
        return None
    return round(value / 1000, 2)
