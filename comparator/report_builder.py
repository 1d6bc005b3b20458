"""
Report Builder Module
Writes the diff report as JSON and, optionally, as an HTML page rendered with Jinja2.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.exceptions import FileWriteFailure
from core.models import DiffReport
from utils.file_utils import write_json

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / 'templates'


class ReportBuilder:
    def __init__(self, template_dir: Union[str, Path] = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html']),
        )
        self.template = self.env.get_template('report.html')
        self.metrics: Dict[str, int] = {}

    def collect_metrics(self, template_classes: int, css_classes: int,
                        template_files: int = 0, css_files: int = 0, skipped_files: int = 0) -> Dict[str, int]:
        """Counts shown alongside the report."""
        self.metrics = {
            'template_files': template_files,
            'css_files': css_files,
            'skipped_files': skipped_files,
            'template_classes': template_classes,
            'css_classes': css_classes,
        }
        return self.metrics

    def render_html(self, report: DiffReport, title: Optional[str] = None) -> str:
        return self.template.render(
            title=title or 'Unused CSS classes',
            generated_at=datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            report=report,
            metrics=self.metrics,
        )

    def generate_json_report(self, report: DiffReport, output_path: Union[str, Path]) -> None:
        write_json(output_path, report.to_dict())
        logger.debug(f"Diff report written to: {output_path}")

    def generate_html_report(self, report: DiffReport, output_path: Union[str, Path]) -> None:
        html = self.render_html(report)
        try:
            Path(output_path).write_text(html, encoding='utf-8')
        except OSError as e:
            raise FileWriteFailure(output_path, str(e)) from e
        logger.debug(f"HTML report written to: {output_path}")
