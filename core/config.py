"""
Finder Configuration
Every option of the unused CSS finder, with its default.
"""

import re
import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from re import Pattern
from typing import Any, Dict, List, Optional, Union

from core.css_extractor import EXTRACT_MODES, MODE_CLASSES
from core.exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)

DEFAULT_IGNORED_CLASS_PATTERNS = [r'^js-']


@dataclass
class FinderConfig:
    temp_dir: str = './uncss-stats'
    twig_dir: str = './templates'
    twig_pattern: str = r'\.twig$'
    vue_dir: str = './assets/js'
    vue_pattern: str = r'\.vue$'
    css_dir: str = './public/assets'
    css_pattern: str = r'\.css$'
    ignored_class_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_CLASS_PATTERNS))
    css_extract_mode: str = MODE_CLASSES
    classes_from_css_file_name: str = 'all_classes_from_css.json'
    classes_from_css_flattened_file_name: str = 'all_classes_from_css_flattened.json'
    classes_from_templates_file_name: str = 'all_classes_from_vue_and_twig.json'
    classes_from_templates_flattened_file_name: str = 'all_classes_from_vue_and_twig_flattened.json'
    output_file: str = 'unused_css_classes_report.json'
    html_report_file: Optional[str] = None
    scan_vue_styles: bool = False
    is_debug: bool = False

    def validate(self) -> 'FinderConfig':
        """Fail fast on anything that would make the run meaningless."""
        if self.css_extract_mode not in EXTRACT_MODES:
            raise InvalidConfiguration(
                f"Invalid css_extract_mode {self.css_extract_mode!r}; expected one of {', '.join(EXTRACT_MODES)}"
            )
        if isinstance(self.ignored_class_patterns, str):
            raise InvalidConfiguration("ignored_class_patterns must be a list of regular expressions")
        for name in ('twig_pattern', 'vue_pattern', 'css_pattern'):
            self.compiled_pattern(name)
        self.compiled_ignore_patterns()
        return self

    def compiled_pattern(self, name: str) -> Pattern:
        """Compile one of the file-name pattern options, e.g. ``'twig_pattern'``."""
        return _compile(getattr(self, name), name)

    def compiled_ignore_patterns(self) -> List[Pattern]:
        return [_compile(pattern, 'ignored_class_patterns') for pattern in self.ignored_class_patterns]

    def output_path(self, file_name: str) -> Path:
        return Path(self.temp_dir) / file_name

    def with_overrides(self, **overrides) -> 'FinderConfig':
        """Copy with the given fields replaced; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FinderConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfiguration(f"Unknown configuration option(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'FinderConfig':
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidConfiguration(f"Could not load configuration from {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidConfiguration(f"Configuration in {path} must be a JSON object")
        logger.debug(f"Loaded configuration from {path}: {data}")
        return cls.from_dict(data)


def _compile(pattern: str, option: str) -> Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidConfiguration(f"Invalid regular expression for {option}: {pattern!r} ({e})") from e
