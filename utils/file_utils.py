"""
File Utilities Module
File discovery, reading and JSON persistence used by the pipeline.
"""

import os
import json
import logging
from pathlib import Path
from re import Pattern
from typing import Any, List, Union

from core.exceptions import FileWriteFailure
from core.models import FileInfo

logger = logging.getLogger(__name__)


def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden."""
    return path.name.startswith('.')


def find_files(root_dir: Union[str, Path], name_pattern: Pattern) -> List[FileInfo]:
    """
    Recursively collect files whose name matches a pattern.

    Args:
        root_dir: Directory to walk
        name_pattern: Compiled regex searched against each file name

    Returns:
        List of FileInfo for matching files. A missing root yields an empty list.
    """
    root = Path(root_dir)
    if not root.is_dir():
        logger.warning(f"Directory not found, skipping: {root}")
        return []

    matching_files = []
    for current, dirs, files in os.walk(root):
        # Skip hidden directories
        dirs[:] = sorted(d for d in dirs if not is_hidden(Path(current) / d))
        for file in sorted(files):
            if name_pattern.search(file):
                matching_files.append(FileInfo(name=file, path=str(Path(current) / file)))

    logger.debug(f"Found {len(matching_files)} file(s) in {root} matching {name_pattern.pattern}")
    return matching_files


def read_file_content(file_path: Union[str, Path]) -> str:
    """
    Read file content, trying UTF-8 first.

    Raises:
        OSError: If the file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()


def write_json(path: Union[str, Path], value: Any) -> None:
    """Write pretty-printed JSON, raising FileWriteFailure on I/O errors."""
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(value, f, indent=2)
    except OSError as e:
        raise FileWriteFailure(path, str(e)) from e
    logger.debug(f"Wrote {path}")


def read_json(path: Union[str, Path]) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def clear_or_create_dir(directory: Union[str, Path]) -> None:
    """Empty an existing output directory of files, or create it."""
    directory = Path(directory)
    try:
        if directory.exists():
            for entry in directory.iterdir():
                if entry.is_file():
                    entry.unlink()
            logger.debug(f"Cleared contents of {directory}")
        else:
            directory.mkdir(parents=True)
            logger.debug(f"Created directory {directory}")
    except OSError as e:
        raise FileWriteFailure(directory, str(e)) from e
