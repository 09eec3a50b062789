"""Capability interface for reading host hardware and firmware facts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    import logging


class ProbeError(RuntimeError):
    """A platform query failed or returned output that could not be parsed."""


class ProcessorInfo(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    max_clock_speed_mhz: float | None = None
    logical_cores: int | None = None
    manufacturer: str | None = None
    caption: str | None = None
    address_width: int | None = None


class OsInfo(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    version: str | None = None
    build: int | None = None


class HostFacts(BaseModel):
    """The seven raw facts an evaluation works from.

    ``None`` means the fact could not be collected. ``display_adapters`` is
    ``[]`` when the query worked but found no adapter.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
    processor: ProcessorInfo | None = None
    total_memory_bytes: int | None = None
    free_storage_bytes: int | None = None
    display_adapters: list[str] | None = None
    secure_boot_enabled: bool | None = None
    tpm_version: str | None = None
    os: OsInfo | None = None

    @field_validator("tpm_version", mode="before")
    @classmethod
    def tpm_version_as_text(cls, v: Any) -> Any:
        """Accept an unquoted YAML number such as ``2.0``."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class BaseProbe(ABC):
    """One method per fact.

    Implementations are free to raise; :meth:`collect` is the only entry point
    the evaluator uses and it turns every failure into an absent value.
    """

    @abstractmethod
    def name(self) -> str:
        """Identifier for this probe type."""
        ...

    @abstractmethod
    def processor(self) -> ProcessorInfo | None:
        """Descriptor of the first CPU."""
        ...

    @abstractmethod
    def total_memory_bytes(self) -> int | None:
        """Total physical memory in bytes."""
        ...

    @abstractmethod
    def free_storage_bytes(self) -> int | None:
        """Free space on the system volume in bytes."""
        ...

    @abstractmethod
    def display_adapters(self) -> list[str] | None:
        """Names of the enumerable display adapters."""
        ...

    @abstractmethod
    def secure_boot_enabled(self) -> bool | None:
        """UEFI Secure Boot state."""
        ...

    @abstractmethod
    def tpm_version(self) -> str | None:
        """TPM specification version string, or None when no TPM is present."""
        ...

    @abstractmethod
    def os_info(self) -> OsInfo | None:
        """Running OS version string and build number."""
        ...

    def _queries(self) -> list[tuple[str, Callable[[], Any]]]:
        return [
            ("processor", self.processor),
            ("total_memory_bytes", self.total_memory_bytes),
            ("free_storage_bytes", self.free_storage_bytes),
            ("display_adapters", self.display_adapters),
            ("secure_boot_enabled", self.secure_boot_enabled),
            ("tpm_version", self.tpm_version),
            ("os", self.os_info),
        ]

    def collect(self, logger: logging.Logger) -> HostFacts:
        """Query every fact in facet order. Never raises.

        A query that fails or answers with a value of the wrong shape leaves
        only its own fact absent.
        """
        values: dict[str, Any] = {}
        for fact, query in self._queries():
            try:
                value = getattr(HostFacts.model_validate({fact: query()}), fact)
            except Exception as e:
                logger.warning(
                    "[%s] could not collect %s: %s: %s",
                    self.name(),
                    fact,
                    type(e).__name__,
                    e,
                )
                value = None
            else:
                logger.debug("[%s] %s=%r", self.name(), fact, value)
            values[fact] = value
        return HostFacts(**values)
