from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from win11ready.config import Thresholds
from win11ready.facets import Facet, FacetResult, Verdict, evaluate_facets
from win11ready.probes.base import BaseProbe, HostFacts

# Clause order of the compact logging string consumed by fleet tooling
LOG_ORDER = (
    Facet.STORAGE,
    Facet.MEMORY,
    Facet.TPM,
    Facet.PROCESSOR,
    Facet.SECURE_BOOT,
    Facet.OS_VERSION,
    Facet.GRAPHICS,
)


class OverallVerdict(str, Enum):
    COMPATIBLE = "COMPATIBLE"
    NOT_COMPATIBLE = "NOT_COMPATIBLE"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class EvaluationResult:
    """Immutable aggregate of the seven facet results, in evaluation order."""

    facets: tuple[FacetResult, ...]

    @property
    def verdicts(self) -> dict[Facet, Verdict]:
        return {r.facet: r.verdict for r in self.facets}

    @property
    def failing(self) -> list[str]:
        """Display names of failing facets, in evaluation order."""
        return [r.facet.display_name for r in self.facets if not r.passed]

    @property
    def overall(self) -> OverallVerdict:
        if self.failing:
            return OverallVerdict.NOT_COMPATIBLE
        return OverallVerdict.COMPATIBLE

    @property
    def return_code(self) -> int:
        return 0 if self.overall is OverallVerdict.COMPATIBLE else 1

    @property
    def return_result(self) -> str:
        return "CAPABLE" if self.return_code == 0 else "NOT CAPABLE"

    @property
    def return_reason(self) -> str:
        # Every name carries its separator, the last one included
        return "".join(f"{name}, " for name in self.failing)

    @property
    def logging(self) -> str:
        by_facet = {r.facet: r for r in self.facets}
        return " ".join(by_facet[facet].log_clause for facet in LOG_ORDER)

    def result(self, facet: Facet) -> FacetResult:
        return next(r for r in self.facets if r.facet is facet)

    def to_document(self) -> dict[str, Any]:
        return {
            "returnCode": self.return_code,
            "returnReason": self.return_reason,
            "logging": self.logging,
            "returnResult": self.return_result,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_document(), separators=(",", ":"))


def evaluate(facts: HostFacts, thresholds: Thresholds | None = None) -> EvaluationResult:
    """Evaluate collected facts. Pure: no I/O, no logging."""
    return EvaluationResult(facets=evaluate_facets(facts, thresholds or Thresholds()))


class Evaluator:
    """Collects facts from a probe, then evaluates them."""

    def __init__(
        self,
        probe: BaseProbe,
        thresholds: Thresholds | None = None,
        logger: logging.Logger | None = None,
    ):
        self.probe = probe
        self.thresholds = thresholds or Thresholds()
        self.logger = logger or logging.getLogger("win11ready")
        self.facts: HostFacts | None = None

    def execute(self) -> EvaluationResult:
        self.logger.debug(f"Collecting host facts with the {self.probe.name()} probe")
        self.facts = self.probe.collect(self.logger)

        result = evaluate(self.facts, self.thresholds)
        for r in result.facets:
            self.logger.debug(f"{r.facet.value}: {r.verdict.value} ({r.detail})")
        self.logger.info(
            f"Overall: {result.overall.label}, returnCode={result.return_code}, "
            f"failing={result.failing}"
        )
        return result
