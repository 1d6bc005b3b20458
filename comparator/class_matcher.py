"""
Class Matcher Module
Flattens per-file extraction records and reconciles template classes against stylesheet classes.
"""

import re
import logging
from re import Pattern
from typing import Dict, Iterable, List, Sequence, Set, Union

from core.models import DiffReport, ExtractionRecord

logger = logging.getLogger(__name__)

RecordLike = Union[ExtractionRecord, Dict]


class ClassMatcher:
    def flatten(self, records: Iterable[RecordLike]) -> List[str]:
        """
        Union of the classes in every record, deduplicated and sorted.

        Accepts ExtractionRecord objects or their persisted dict form. Template
        records hold a space-joined string, stylesheet records a list.
        """
        flattened: Set[str] = set()
        for record in records:
            data = record.data if isinstance(record, ExtractionRecord) else record.get('data', [])
            items = data.split(' ') if isinstance(data, str) else data
            flattened.update(item for item in items if item)
        return sorted(flattened)

    @staticmethod
    def is_ignored(class_name: str, ignored_patterns: Sequence[Pattern]) -> bool:
        return any(pattern.search(class_name) for pattern in ignored_patterns)

    def diff(self,
             template_classes: Iterable[str],
             css_classes: Iterable[str],
             ignored_patterns: Sequence[Union[str, Pattern]] = ()) -> DiffReport:
        """Classes on one side that the other side never mentions, minus ignored ones."""
        patterns = [re.compile(p) if isinstance(p, str) else p for p in ignored_patterns]
        template_list = list(template_classes)
        css_list = list(css_classes)
        template_set = set(template_list)
        css_set = set(css_list)

        css_not_in_templates = [
            cls for cls in _unique(css_list)
            if cls not in template_set and not self.is_ignored(cls, patterns)
        ]
        templates_not_in_css = [
            cls for cls in _unique(template_list)
            if cls not in css_set and not self.is_ignored(cls, patterns)
        ]
        logger.debug(
            f"{len(css_not_in_templates)} stylesheet class(es) unused, "
            f"{len(templates_not_in_css)} template class(es) undefined"
        )
        return DiffReport(
            css_classes_not_found_in_templates=css_not_in_templates,
            template_classes_not_found_in_css=templates_not_in_css,
        )


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))
