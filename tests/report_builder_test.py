import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from comparator.report_builder import ReportBuilder
from core.exceptions import FileWriteFailure
from core.models import DiffReport

REPORT = DiffReport(
    css_classes_not_found_in_templates=['unused', 'legacy-banner'],
    template_classes_not_found_in_css=['<script>'],
)


def test_json_report_shape(tmp_path):
    builder = ReportBuilder()
    path = tmp_path / 'report.json'
    builder.generate_json_report(REPORT, path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    assert data == {
        'cssClassesNotFoundInTemplates': ['unused', 'legacy-banner'],
        'templateClassesNotFoundInCss': ['<script>'],
    }
    assert DiffReport.from_dict(data) == REPORT


def test_html_report(tmp_path):
    builder = ReportBuilder()
    builder.collect_metrics(template_classes=10, css_classes=12, template_files=3, css_files=2)
    path = tmp_path / 'report.html'
    builder.generate_html_report(REPORT, path)
    html = path.read_text(encoding='utf-8')
    assert '<code>legacy-banner</code>' in html
    assert 'Stylesheet classes not found in templates (2)' in html
    assert '&lt;script&gt;' in html
    assert '<td>12</td>' in html


def test_html_report_empty_lists():
    html = ReportBuilder().render_html(DiffReport(), title='Nothing to see')
    assert 'Nothing to see' in html
    assert html.count('None</p>') == 2


def test_html_report_write_failure(tmp_path):
    with pytest.raises(FileWriteFailure):
        ReportBuilder().generate_html_report(REPORT, tmp_path / 'missing' / 'report.html')
