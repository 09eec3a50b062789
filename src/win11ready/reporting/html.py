from __future__ import annotations

import platform
from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from win11ready.evaluator import EvaluationResult


def generate_report(path: Path, result: EvaluationResult) -> Path:
    """Render the evaluation into report.html using the Jinja2 template, return path."""
    tmpl_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
    template = env.get_template("report.html.j2")

    html = template.render(
        result=result,
        facets=result.facets,
        hostname=platform.node(),
        generated_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path
