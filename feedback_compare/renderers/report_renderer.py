from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from feedback_compare.domain.models import ComparisonReport

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
REPORT_TEMPLATE = "report.html"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


class ReportRenderer:
    """
    Pure projection of a ComparisonReport into HTML.
    No Flask context needed, so it can be used and tested on its own.
    """

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["percent"] = format_percent

    def render(self, report: ComparisonReport) -> Markup:
        template = self._env.get_template(REPORT_TEMPLATE)
        return Markup(template.render(report=report))
