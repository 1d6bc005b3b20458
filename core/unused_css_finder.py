"""
Unused CSS Finder
Coordinates discovery, extraction, persistence, flattening and reconciliation.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from comparator.class_matcher import ClassMatcher
from comparator.report_builder import ReportBuilder
from core.config import FinderConfig
from core.file_processor import FileProcessor, collect_records, write_records
from core.models import DiffReport, ExtractionRecord, FileResult
from utils.file_utils import clear_or_create_dir, find_files, read_json, write_json

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    report: DiffReport
    template_records: List[ExtractionRecord] = field(default_factory=list)
    css_records: List[ExtractionRecord] = field(default_factory=list)
    skipped: List[FileResult] = field(default_factory=list)
    artifacts: Dict[str, Path] = field(default_factory=dict)
    template_class_count: int = 0
    css_class_count: int = 0


class UnusedCssFinder:
    def __init__(self, config: Optional[FinderConfig] = None):
        self.config = (config or FinderConfig()).validate()
        self.processor = FileProcessor(self.config.css_extract_mode)
        self.matcher = ClassMatcher()
        self.last_result: Optional[RunSummary] = None

    def run(self) -> RunSummary:
        config = self.config
        logger.info('------------ START CheckUnusedCssClasses ------------')

        logger.debug('[TASK] Clearing or creating temp directory')
        clear_or_create_dir(config.temp_dir)

        logger.debug('[TASK] Reading template files')
        twig_files = find_files(config.twig_dir, config.compiled_pattern('twig_pattern'))
        vue_files = find_files(config.vue_dir, config.compiled_pattern('vue_pattern'))

        logger.debug('[TASK] Processing template files and extracting CSS classes')
        template_results = self.processor.process_template_files(twig_files + vue_files)

        logger.debug('[TASK] Reading CSS files')
        css_files = find_files(config.css_dir, config.compiled_pattern('css_pattern'))

        logger.debug('[TASK] Processing CSS files')
        css_results = self.processor.process_css_files(css_files)
        if config.scan_vue_styles:
            logger.debug('[TASK] Processing Vue <style> blocks')
            css_results += self.processor.process_vue_style_files(vue_files)

        template_records = collect_records(template_results)
        css_records = collect_records(css_results)
        skipped = [result for result in template_results + css_results if not result.ok]
        if skipped:
            logger.warning(f"{len(skipped)} file(s) skipped; the report covers the remaining files only")

        artifacts = {
            'template_records': config.output_path(config.classes_from_templates_file_name),
            'css_records': config.output_path(config.classes_from_css_file_name),
            'template_flattened': config.output_path(config.classes_from_templates_flattened_file_name),
            'css_flattened': config.output_path(config.classes_from_css_flattened_file_name),
            'report': config.output_path(config.output_file),
        }

        logger.debug('[TASK] Writing extracted CSS classes to file')
        write_records(template_records, artifacts['template_records'])
        logger.debug('[TASK] Writing extracted CSS selectors to file')
        write_records(css_records, artifacts['css_records'])

        logger.debug('[TASK] Creating flattened version of template classes')
        template_classes = self.flatten_file(artifacts['template_records'], artifacts['template_flattened'])
        logger.debug('[TASK] Creating flattened version of CSS classes')
        css_classes = self.flatten_file(artifacts['css_records'], artifacts['css_flattened'])

        logger.debug('[TASK] Comparing flattened classes')
        report = self.matcher.diff(template_classes, css_classes, config.compiled_ignore_patterns())

        builder = ReportBuilder()
        builder.collect_metrics(
            template_classes=len(template_classes),
            css_classes=len(css_classes),
            template_files=len(template_results),
            css_files=len(css_files),
            skipped_files=len(skipped),
        )
        builder.generate_json_report(report, artifacts['report'])
        if config.html_report_file:
            artifacts['html_report'] = config.output_path(config.html_report_file)
            builder.generate_html_report(report, artifacts['html_report'])

        logger.info(
            f"{len(report.css_classes_not_found_in_templates)} CSS class(es) not found in templates, "
            f"{len(report.template_classes_not_found_in_css)} template class(es) not found in CSS"
        )
        logger.info('------------ END CheckUnusedCssClasses ------------')

        self.last_result = RunSummary(
            report=report,
            template_records=template_records,
            css_records=css_records,
            skipped=skipped,
            artifacts=artifacts,
            template_class_count=len(template_classes),
            css_class_count=len(css_classes),
        )
        return self.last_result

    def flatten_file(self, input_path: Path, output_path: Path) -> List[str]:
        """Flatten a persisted record list into a deduplicated class list and persist it."""
        flattened = self.matcher.flatten(read_json(input_path))
        write_json(output_path, flattened)
        logger.debug(f"Flattened classes written to: {output_path}")
        return flattened
