"""Facet checks for the upgrade compatibility evaluation."""

from win11ready.facets.base import Facet, FacetResult, Verdict
from win11ready.facets.checks import evaluate_facets

__all__ = ["Facet", "FacetResult", "Verdict", "evaluate_facets"]
