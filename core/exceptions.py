"""
Error kinds raised by the unused CSS finder.
"""


class UncssError(Exception):
    """Base class for all finder errors."""


class InvalidConfiguration(UncssError):
    """Configuration cannot be used; raised before any file is processed."""


class InvalidOption(InvalidConfiguration, ValueError):
    """Unsupported extraction mode."""


class FileReadFailure(UncssError):
    """A single input file could not be read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path}: {reason}")


class FileWriteFailure(UncssError):
    """An output artifact could not be written."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not write {self.path}: {reason}")
