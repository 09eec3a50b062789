from __future__ import annotations

from pathlib import Path

from win11ready.evaluator import EvaluationResult


def write_document(path: Path, result: EvaluationResult) -> Path:
    """Write the compact JSON result document, return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.to_json() + "\n", encoding="utf-8")
    return path
