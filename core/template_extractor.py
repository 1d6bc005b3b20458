"""
Template Class Extractor
Finds CSS class names referenced in Twig templates and Vue single-file components.

Extraction is pattern based, not a parse: static ``class="..."`` attributes
(including Twig statements and interpolations embedded in them) and Vue
``:class`` bindings in object, array and expression form are scanned with
regular expressions. Malformed markup degrades to best-effort matches.
"""

import re
import logging
from typing import List, Set

logger = logging.getLogger(__name__)

# Attribute name must start the text or follow whitespace; the value ends at the matching quote
STATIC_CLASS_PATTERN = re.compile(r'(?:^|(?<=\s))class\s*=\s*(["\'])((?:(?!\1).)*)\1', re.S)
DYNAMIC_CLASS_PATTERN = re.compile(r'(?:^|(?<=\s))(?:v-bind)?:class\s*=\s*(["\'])((?:(?!\1).)*)\1', re.S)

TWIG_STATEMENT_PATTERN = re.compile(r'{%.*?%}', re.S)
INTERPOLATION_PATTERN = re.compile(r'{{.*?}}', re.S)
TERNARY_PATTERN = re.compile(r'\?[^:]+:')
SUBSCRIPT_PATTERN = re.compile(r'\[.*?\]', re.S)
QUOTED_LITERAL_PATTERN = re.compile(r'(["\'])(.*?)\1', re.S)
SINGLE_QUOTED_LITERAL_PATTERN = re.compile(r"'([^']+)'")
SINGLE_LITERAL_PATTERN = re.compile(r'(["\'])([^"\']*)\1', re.S)
# Comma not followed by a closing brace before the next opening one
ARRAY_SEPARATOR_PATTERN = re.compile(r',(?![^{]*})')

OPENING_BRACKETS = {'(': ')', '[': ']', '{': '}'}


def quoted_literals(text: str) -> List[str]:
    """Return the contents of every quoted string literal in ``text``."""
    return [match.group(2) for match in QUOTED_LITERAL_PATTERN.finditer(text)]


def split_top_level(text: str, separator: str = ',') -> List[str]:
    """Split on ``separator`` where it is not nested in brackets or quotes.

    Unbalanced input never raises: stray closing brackets are ignored and an
    unterminated quote swallows the rest of the text into the last part.
    """
    parts = []
    current = []
    stack = []
    quote = None
    for char in text:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
            continue
        if char in ('"', "'", '`'):
            quote = char
        elif char in OPENING_BRACKETS:
            stack.append(OPENING_BRACKETS[char])
        elif stack and char == stack[-1]:
            stack.pop()
        elif char == separator and not stack:
            parts.append(''.join(current))
            current = []
            continue
        current.append(char)
    parts.append(''.join(current))
    return parts


class TemplateClassExtractor:
    """Extracts class names from template source text."""

    def extract_classes(self, content: str) -> Set[str]:
        classes: Set[str] = set()
        self._extract_static_classes(content, classes)
        self._extract_dynamic_classes(content, classes)
        logger.debug(f"Extracted {len(classes)} class(es) from template content of length {len(content)}")
        return classes

    def _extract_static_classes(self, content: str, classes: Set[str]) -> None:
        for match in STATIC_CLASS_PATTERN.finditer(content):
            class_string = match.group(2)
            class_string = self._process_twig_statements(class_string, classes)
            class_string = self._process_interpolations(class_string)
            class_string = SUBSCRIPT_PATTERN.sub(' ', class_string)
            self._add_tokens(class_string, classes)

    def _extract_dynamic_classes(self, content: str, classes: Set[str]) -> None:
        for match in DYNAMIC_CLASS_PATTERN.finditer(content):
            binding = match.group(2).strip()
            if binding.startswith('{') and binding.endswith('}'):
                self._process_object_syntax(binding, classes)
            elif binding.startswith('[') and binding.endswith(']'):
                self._process_array_syntax(binding, classes)
            else:
                self._process_expression(binding, classes)

    def _process_twig_statements(self, class_string: str, classes: Set[str]) -> str:
        """Blank out ``{% %}`` statements, keeping the literals written inside them."""
        def replace(match):
            for literal in quoted_literals(match.group(0)):
                self._add_tokens(literal, classes)
            return ' '
        return TWIG_STATEMENT_PATTERN.sub(replace, class_string)

    def _process_interpolations(self, class_string: str) -> str:
        """Replace ``{{ }}`` expressions with the literals they may print."""
        def replace(match):
            interpolation = match.group(0)
            if TERNARY_PATTERN.search(interpolation):
                # Both branches are kept; the condition is never evaluated
                sides = interpolation.split(':')[:2]
                truthy, falsy = (' '.join(quoted_literals(side)) for side in sides)
                return f"{truthy} {falsy}"
            return ' '.join(quoted_literals(interpolation))
        return INTERPOLATION_PATTERN.sub(replace, class_string)

    def _process_object_syntax(self, binding: str, classes: Set[str]) -> None:
        """``{ active: isActive, 'has-error': hasError }``"""
        for pair in split_top_level(binding[1:-1].strip()):
            key = pair.split(':', 1)[0].strip()
            if not key or key.startswith('['):
                # Computed keys cannot be resolved statically
                continue
            self._add_tokens(re.sub(r'["\':]', '', key), classes)

    def _process_array_syntax(self, binding: str, classes: Set[str]) -> None:
        """``['base', { 'is-open': open }, cond ? 'a' : 'b']``"""
        for item in ARRAY_SEPARATOR_PATTERN.split(binding[1:-1]):
            item = item.strip()
            literal = SINGLE_LITERAL_PATTERN.fullmatch(item)
            if literal:
                self._add_tokens(literal.group(2), classes)
            elif item.startswith('{'):
                for name in SINGLE_QUOTED_LITERAL_PATTERN.findall(item):
                    self._add_tokens(name, classes)
            else:
                self._process_expression(item, classes)

    def _process_expression(self, expression: str, classes: Set[str]) -> None:
        for literal in quoted_literals(expression):
            self._add_tokens(literal, classes)

    @staticmethod
    def _add_tokens(class_string: str, classes: Set[str]) -> None:
        for token in class_string.split():
            token = token.strip()
            if token:
                classes.add(token)


_default_extractor = TemplateClassExtractor()


def extract_template_classes(content: str) -> Set[str]:
    """Extract every class name a template references, static and dynamic."""
    return _default_extractor.extract_classes(content)
