from pathlib import Path
from typing import Literal

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import AnalysisReport

ReportFormat = Literal["text", "html"]

_TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'
_TEMPLATES = {"text": "report.txt.j2", "html": "report.html.j2"}


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml', 'html.j2']),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_report(report: AnalysisReport, fmt: ReportFormat = "text") -> str:
    if fmt not in _TEMPLATES:
        raise ValueError(f"Unknown report format: {fmt!r}")
    tpl = _environment().get_template(_TEMPLATES[fmt])
    rendered = tpl.render(
        route=report.route,
        matched=report.matched,
        skipped=report.skipped,
        minimums=sorted(report.carrier_minimums.values(), key=lambda m: m.carrier),
        prices=report.prices,
    )
    if fmt == "html":
        soup = BeautifulSoup(rendered, 'lxml')
        return soup.prettify()
    return rendered
