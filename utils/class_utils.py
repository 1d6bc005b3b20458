"""
Class Name Utilities
Validation helpers shared by the extractors.
"""

import re

# Optional leading hyphen, then a letter or underscore, then letters, digits, underscores or hyphens
CLASS_NAME_REGEX = re.compile(r'-?[_a-zA-Z]+[_a-zA-Z0-9-]*')


def is_valid_class_name(class_name: str) -> bool:
    """Check whether a token is a usable CSS class name."""
    return CLASS_NAME_REGEX.fullmatch(class_name) is not None
