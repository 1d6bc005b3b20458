"""
Stylesheet Class/Selector Extractor
Collects class names (or raw selectors) declared in CSS source text.
"""

import re
import logging
from typing import Set

import tinycss2

from core.exceptions import InvalidOption
from utils.class_utils import is_valid_class_name

logger = logging.getLogger(__name__)

MODE_CLASSES = 'classes'
MODE_SELECTORS = 'selectors'
EXTRACT_MODES = (MODE_CLASSES, MODE_SELECTORS)

BACKGROUND_URL_PATTERN = re.compile(r'background(?:-image)?\s*:[^;{}]*?url\s*\([^)]*\)[^;{}]*;?')
URL_FUNCTION_PATTERN = re.compile(r'url\s*\([^)]*\)')
CLASS_SELECTOR_PATTERN = re.compile(r'\.(-?[_a-zA-Z]+[_a-zA-Z0-9-]*)')
SELECTOR_PATTERN = re.compile(r'([^{}]+)(?=\s*\{)')


def validate_extract_mode(mode: str) -> None:
    if mode not in EXTRACT_MODES:
        raise InvalidOption(
            f"Invalid extract mode {mode!r}. Must be either '{MODE_CLASSES}' or '{MODE_SELECTORS}'."
        )


def strip_comments(content: str) -> str:
    """Drop ``/* */`` comments using the tinycss2 tokenizer."""
    tokens = tinycss2.parse_component_value_list(content, skip_comments=True)
    return tinycss2.serialize(tokens)


def remove_background_images(content: str) -> str:
    """Remove background declarations that reference a ``url()``, semicolon included."""
    return BACKGROUND_URL_PATTERN.sub('', content)


def remove_url_functions(content: str) -> str:
    return URL_FUNCTION_PATTERN.sub('', content)


class CSSClassExtractor:
    """Extracts ``.class`` names or raw selectors from a stylesheet."""

    def extract(self, content: str, mode: str = MODE_CLASSES) -> Set[str]:
        validate_extract_mode(mode)
        if mode == MODE_SELECTORS:
            logger.warning(
                "Selector extraction is best-effort: nested at-rules, multi-line selectors "
                "and pseudo-selector edge cases are not fully resolved."
            )

        content = strip_comments(content)
        content = remove_background_images(content)
        content = remove_url_functions(content)

        if mode == MODE_CLASSES:
            return self.extract_class_names(content)
        return self.extract_selectors(content)

    def extract_class_names(self, content: str) -> Set[str]:
        classes = set()
        for match in CLASS_SELECTOR_PATTERN.finditer(content):
            class_name = match.group(1)
            if is_valid_class_name(class_name):
                classes.add(class_name)
        return classes

    def extract_selectors(self, content: str) -> Set[str]:
        """Every comma-separated part of each run of text that precedes a ``{``.

        Results may include at-rule preludes and partial selectors.
        """
        selectors = set()
        for match in SELECTOR_PATTERN.finditer(content):
            for selector in match.group(1).split(','):
                selector = selector.strip()
                if selector:
                    selectors.add(selector)
        return selectors


_default_extractor = CSSClassExtractor()


def extract_classes_from_css(content: str, mode: str = MODE_CLASSES) -> Set[str]:
    """Extract class names (``mode='classes'``) or selectors (``mode='selectors'``)."""
    return _default_extractor.extract(content, mode)
