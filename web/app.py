"""
Web Interface for Unused CSS Analysis
Upload templates and stylesheets, get the diff report back as JSON or HTML.
"""

import sys
import logging
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, jsonify, render_template, request

from comparator.class_matcher import ClassMatcher
from comparator.report_builder import ReportBuilder
from core.config import DEFAULT_IGNORED_CLASS_PATTERNS, FinderConfig
from core.css_extractor import MODE_CLASSES
from core.exceptions import InvalidConfiguration
from core.file_processor import FileProcessor

logger = logging.getLogger(__name__)

app = Flask(__name__)
matcher = ClassMatcher()


def read_upload(upload) -> str:
    return upload.read().decode('utf-8')


def parse_ignore_field(value):
    if value is None:
        return list(DEFAULT_IGNORED_CLASS_PATTERNS)
    return [line.strip() for line in value.splitlines() if line.strip()]


def analyze_uploads(template_uploads, css_uploads, config: FinderConfig):
    """Run extraction and reconciliation over uploaded files, in memory."""
    processor = FileProcessor(config.css_extract_mode)
    template_records, css_records, skipped = [], [], []

    for upload in template_uploads:
        try:
            content = read_upload(upload)
        except UnicodeDecodeError as e:
            skipped.append({'path': upload.filename, 'reason': str(e)})
            continue
        template_records.append(processor.template_record(upload.filename, content))
        if config.scan_vue_styles and upload.filename.endswith('.vue'):
            css_records.append(processor.vue_style_record(upload.filename, content))

    for upload in css_uploads:
        try:
            content = read_upload(upload)
        except UnicodeDecodeError as e:
            skipped.append({'path': upload.filename, 'reason': str(e)})
            continue
        css_records.append(processor.css_record(upload.filename, content))

    template_classes = matcher.flatten(template_records)
    css_classes = matcher.flatten(css_records)
    report = matcher.diff(template_classes, css_classes, config.compiled_ignore_patterns())
    counts = {
        'template_files': len(template_uploads),
        'css_files': len(css_uploads),
        'skipped_files': len(skipped),
        'template_classes': len(template_classes),
        'css_classes': len(css_classes),
    }
    return report, skipped, counts


@app.route('/')
def index():
    """Render the upload form."""
    return render_template('index.html', default_ignore='\n'.join(DEFAULT_IGNORED_CLASS_PATTERNS))


@app.route('/analyze', methods=['POST'])
def analyze():
    """Handle file upload and analysis."""
    template_uploads = [f for f in request.files.getlist('template_files') if f.filename]
    css_uploads = [f for f in request.files.getlist('css_files') if f.filename]
    if not template_uploads or not css_uploads:
        return jsonify({'error': 'At least one template file and one CSS file are required'}), 400

    try:
        config = FinderConfig(
            ignored_class_patterns=parse_ignore_field(request.form.get('ignore')),
            css_extract_mode=request.form.get('mode', MODE_CLASSES),
            scan_vue_styles=request.form.get('scan_vue_styles') in ('1', 'true', 'on'),
        ).validate()
    except InvalidConfiguration as e:
        return jsonify({'error': str(e)}), 400

    report, skipped, counts = analyze_uploads(template_uploads, css_uploads, config)
    logger.info(f"Analyzed {counts['template_files']} template(s) and {counts['css_files']} stylesheet(s)")

    if request.form.get('format') == 'html':
        builder = ReportBuilder()
        builder.collect_metrics(**counts)
        return builder.render_html(report)

    return jsonify({
        'report': report.to_dict(),
        'skipped': skipped,
        'counts': counts,
    })


if __name__ == '__main__':
    app.run(debug=True)
