"""
Data Model
Records passed between the extraction, flattening and reconciliation stages.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass(frozen=True)
class FileInfo:
    name: str
    path: str


@dataclass(frozen=True)
class ExtractionRecord:
    """Classes found in one file.

    Template records carry a space-joined string, stylesheet records a list of
    distinct classes or selectors.
    """
    path: str
    data: Union[str, List[str]]

    def is_empty(self) -> bool:
        return len(self.data) == 0

    def to_dict(self) -> Dict:
        data = self.data if isinstance(self.data, str) else list(self.data)
        return {'data': data, 'path': self.path}


@dataclass(frozen=True)
class FileResult:
    """Outcome of processing a single file: a record or a skip reason."""
    path: str
    record: Optional[ExtractionRecord] = None
    skipped_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.skipped_reason is None

    @classmethod
    def success(cls, record: ExtractionRecord) -> 'FileResult':
        return cls(path=record.path, record=record)

    @classmethod
    def skipped(cls, path: str, reason: str) -> 'FileResult':
        return cls(path=path, skipped_reason=reason)


@dataclass
class DiffReport:
    css_classes_not_found_in_templates: List[str] = field(default_factory=list)
    template_classes_not_found_in_css: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to the persisted report shape."""
        return {
            'cssClassesNotFoundInTemplates': list(self.css_classes_not_found_in_templates),
            'templateClassesNotFoundInCss': list(self.template_classes_not_found_in_css),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'DiffReport':
        return cls(
            css_classes_not_found_in_templates=list(data.get('cssClassesNotFoundInTemplates', [])),
            template_classes_not_found_in_css=list(data.get('templateClassesNotFoundInCss', [])),
        )
