from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config.settings import settings
from schemas.reports import RemunerationReport
from services.errors import EmptyReport

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class PDFService:
    """Print view of the remuneration report: HTML via Jinja2, PDF via WeasyPrint."""

    def __init__(self, template_dir: Optional[str] = None):
        # template environment
        template_path = Path(template_dir or settings.TEMPLATE_DIR)
        if not template_path.is_absolute():
            template_path = PROJECT_ROOT / template_path
        self.env = Environment(
            loader=FileSystemLoader(template_path),
            autoescape=select_autoescape(["html"]),
        )

    def _render_template(self, template_name: str, data: Dict[str, Any]) -> str:
        """Render a template to HTML"""
        template = self.env.get_template(template_name)
        return template.render(**data)

    def _html_to_pdf(self, html_content: str) -> bytes:
        """HTML -> PDF"""
        import weasyprint  # needs pango/cairo at import time, only load when a PDF is requested

        return weasyprint.HTML(string=html_content).write_pdf()

    def render_report_html(self, report: RemunerationReport, generated_at: Optional[datetime] = None) -> str:
        """Printable remuneration summary"""
        if report.is_empty:
            raise EmptyReport("No examiner data available to print")
        return self._render_template("remuneration_report.html", {
            "report": report,
            "currency": settings.CURRENCY_SYMBOL,
            "generated_at": (generated_at or datetime.now()).strftime("%d %B %Y, %I:%M %p"),
        })

    def generate_report_pdf(self, report: RemunerationReport, generated_at: Optional[datetime] = None) -> bytes:
        html = self.render_report_html(report, generated_at)
        return self._html_to_pdf(html)
