"""Exception hierarchy for deocr"""

from pathlib import Path
from typing import Optional


class DeOCRError(Exception):
    """Base class for all deocr errors"""


class TargetError(DeOCRError):
    """The batch target itself cannot be processed"""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class TargetNotFoundError(TargetError):
    def __init__(self, path: Path):
        super().__init__(path, f"Path {path} does not exist")


class UnsupportedTargetError(TargetError):
    def __init__(self, path: Path):
        super().__init__(path, f"Path {path} is not a file or directory")


class ProcessingError(DeOCRError):
    """A single file could not be processed. Never aborts a batch."""


class PathStructureError(ProcessingError):
    """Input path lacks a parent directory or file name component"""


class OutputDirectoryError(ProcessingError):
    """The removed-ocr output directory could not be created"""


class EngineError(ProcessingError):
    """The external stripping engine failed"""


class EngineNotFoundError(EngineError):
    """The engine executable could not be launched"""


class EngineTimeoutError(EngineError):
    """The engine did not finish within the configured timeout"""


class EngineFailedError(EngineError):
    """The engine ran but exited with a non-zero status"""

    def __init__(self, message: str, returncode: int, stderr: Optional[str] = None):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr or ""
