"""
File Processor Module
Runs the extractors over lists of files and persists the per-file records.

Every file yields a FileResult; read or extraction failures become skipped
results instead of exceptions, so one bad file never aborts the run.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Union

from core.css_extractor import CSSClassExtractor, MODE_CLASSES
from core.exceptions import FileReadFailure, InvalidOption
from core.models import ExtractionRecord, FileInfo, FileResult
from core.template_extractor import TemplateClassExtractor
from core.vue_parser import VueStyleParser
from utils.file_utils import read_file_content, write_json

logger = logging.getLogger(__name__)

VUE_STYLE_SUFFIX = '#style'


def _read(file: FileInfo) -> str:
    try:
        return read_file_content(file.path)
    except OSError as e:
        raise FileReadFailure(file.path, str(e)) from e


class FileProcessor:
    def __init__(self, css_extract_mode: str = MODE_CLASSES):
        self.css_extract_mode = css_extract_mode
        self.template_extractor = TemplateClassExtractor()
        self.css_extractor = CSSClassExtractor()
        self.vue_parser = VueStyleParser()

    def _process(self, file: FileInfo, extract: Callable[[str, str], ExtractionRecord]) -> FileResult:
        try:
            content = _read(file)
            return FileResult.success(extract(file.path, content))
        except FileReadFailure as e:
            logger.warning(f"Skipping {file.path}: {e.reason}")
            return FileResult.skipped(file.path, e.reason)
        except InvalidOption as e:
            logger.error(f"Error processing file {file.path}: {str(e)}")
            return FileResult.skipped(file.path, str(e))
        except Exception as e:
            logger.error(f"Error processing file {file.path}: {str(e)}", exc_info=True)
            return FileResult.skipped(file.path, str(e))

    def template_record(self, path: str, content: str) -> ExtractionRecord:
        classes = self.template_extractor.extract_classes(content)
        return ExtractionRecord(path=path, data=' '.join(sorted(classes)))

    def css_record(self, path: str, content: str) -> ExtractionRecord:
        items = self.css_extractor.extract(content, self.css_extract_mode)
        return ExtractionRecord(path=path, data=sorted(items))

    def vue_style_record(self, path: str, content: str) -> ExtractionRecord:
        """Stylesheet record for the ``<style>`` blocks of a Vue component."""
        styles = self.vue_parser.extract_styles(content)
        items = self.css_extractor.extract(styles, self.css_extract_mode) if styles else set()
        return ExtractionRecord(path=path + VUE_STYLE_SUFFIX, data=sorted(items))

    def process_template_file(self, file: FileInfo) -> FileResult:
        return self._process(file, self.template_record)

    def process_css_file(self, file: FileInfo) -> FileResult:
        return self._process(file, self.css_record)

    def process_vue_styles(self, file: FileInfo) -> FileResult:
        return self._process(file, self.vue_style_record)

    def process_template_files(self, files: Iterable[FileInfo]) -> List[FileResult]:
        return [self.process_template_file(file) for file in files]

    def process_css_files(self, files: Iterable[FileInfo]) -> List[FileResult]:
        return [self.process_css_file(file) for file in files]

    def process_vue_style_files(self, files: Iterable[FileInfo]) -> List[FileResult]:
        return [self.process_vue_styles(file) for file in files]


def collect_records(results: Iterable[FileResult]) -> List[ExtractionRecord]:
    """Successful, non-empty records in input order."""
    return [result.record for result in results if result.ok and not result.record.is_empty()]


def write_records(records: Iterable[ExtractionRecord], output_path: Union[str, Path]) -> None:
    write_json(output_path, [record.to_dict() for record in records])
    logger.debug(f"Extraction records written to: {output_path}")
