#!/usr/bin/env python3
"""
Unused CSS Finder
Command-line entry point: compares classes used in Twig/Vue templates with classes declared in CSS.
"""

import sys
import argparse
import logging
from typing import List, Optional

from core.config import FinderConfig
from core.exceptions import FileWriteFailure, InvalidConfiguration
from core.unused_css_finder import UnusedCssFinder

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WRITE_FAILURE = 1
EXIT_INVALID_CONFIGURATION = 2


def build_parser() -> argparse.ArgumentParser:
    defaults = FinderConfig()
    p = argparse.ArgumentParser(
        description="Find CSS classes never used in templates, and template classes missing from CSS."
    )
    p.add_argument('--config', help='JSON file with configuration overrides')
    p.add_argument('--temp-dir', help=f'Output directory (default: {defaults.temp_dir})')
    p.add_argument('--twig-dir', help=f'Twig templates root (default: {defaults.twig_dir})')
    p.add_argument('--twig-pattern', help=f'Twig file name regex (default: {defaults.twig_pattern})')
    p.add_argument('--vue-dir', help=f'Vue components root (default: {defaults.vue_dir})')
    p.add_argument('--vue-pattern', help=f'Vue file name regex (default: {defaults.vue_pattern})')
    p.add_argument('--css-dir', help=f'Stylesheets root (default: {defaults.css_dir})')
    p.add_argument('--css-pattern', help=f'Stylesheet file name regex (default: {defaults.css_pattern})')
    p.add_argument('--ignore', action='append', metavar='REGEX',
                   help='Class name pattern excluded from the report (repeatable)')
    p.add_argument('--no-default-ignore', action='store_true',
                   help='Drop the built-in ignore patterns before applying --ignore')
    p.add_argument('--mode', dest='css_extract_mode',
                   help=f'Stylesheet extraction: classes or selectors (default: {defaults.css_extract_mode})')
    p.add_argument('--output-file', help=f'Report file name (default: {defaults.output_file})')
    p.add_argument('--html-report', dest='html_report_file', metavar='FILE_NAME',
                   help='Also render an HTML report with this file name')
    p.add_argument('--scan-vue-styles', action='store_true', default=None,
                   help='Count classes declared in Vue <style> blocks as stylesheet classes')
    p.add_argument('--debug', dest='is_debug', action='store_true', default=None,
                   help='Verbose logging')
    return p


def config_from_args(args: argparse.Namespace) -> FinderConfig:
    config = FinderConfig.from_json_file(args.config) if args.config else FinderConfig()
    config = config.with_overrides(
        temp_dir=args.temp_dir,
        twig_dir=args.twig_dir,
        twig_pattern=args.twig_pattern,
        vue_dir=args.vue_dir,
        vue_pattern=args.vue_pattern,
        css_dir=args.css_dir,
        css_pattern=args.css_pattern,
        css_extract_mode=args.css_extract_mode,
        output_file=args.output_file,
        html_report_file=args.html_report_file,
        scan_vue_styles=args.scan_vue_styles,
        is_debug=args.is_debug,
    )
    ignored = [] if args.no_default_ignore else list(config.ignored_class_patterns)
    ignored.extend(args.ignore or [])
    return config.with_overrides(ignored_class_patterns=ignored)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = build_parser().parse_args(argv)
    try:
        config = config_from_args(args)
        logging.basicConfig(
            level=logging.DEBUG if config.is_debug else logging.INFO,
            format='%(levelname)s %(name)s: %(message)s',
        )
        finder = UnusedCssFinder(config)
    except InvalidConfiguration as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIGURATION

    try:
        summary = finder.run()
    except FileWriteFailure as e:
        logger.error(str(e))
        return EXIT_WRITE_FAILURE

    report = summary.report
    print(f"CSS classes not found in templates: {len(report.css_classes_not_found_in_templates)}")
    print(f"Template classes not found in CSS: {len(report.template_classes_not_found_in_css)}")
    if summary.skipped:
        print(f"Skipped files: {len(summary.skipped)}")
    print(f"Report: {summary.artifacts['report']}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
