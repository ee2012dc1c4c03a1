"""Transient data model for a single deocr run"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class TargetStatus(str, Enum):
    """What the batch target turned out to be"""
    FILE = "file"
    DIRECTORY = "directory"
    NOT_FOUND = "not_found"
    UNSUPPORTED = "unsupported"


class DeletionStatus(str, Enum):
    """Fate of the original file after processing"""
    NOT_REQUESTED = "not_requested"
    NOT_ATTEMPTED = "not_attempted"
    DELETED = "deleted"
    FAILED = "failed"


@dataclass(frozen=True)
class TargetSpec:
    """Path to process plus the delete-originals flag"""
    path: Path
    delete: bool = False


@dataclass
class FileOutcome:
    """Result of processing one confirmed PDF"""
    path: Path
    processed: bool
    output_path: Optional[Path] = None
    error: Optional[str] = None
    deletion: DeletionStatus = DeletionStatus.NOT_REQUESTED
    delete_error: Optional[str] = None

    @property
    def deleted(self) -> bool:
        return self.deletion is DeletionStatus.DELETED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'path': str(self.path),
            'output_path': str(self.output_path) if self.output_path else None,
            'processed': self.processed,
            'error': self.error,
            'deletion': self.deletion.value,
            'delete_error': self.delete_error,
        }


@dataclass
class BatchReport:
    """Aggregated outcomes for one invocation"""
    target: TargetSpec
    status: TargetStatus
    outcomes: List[FileOutcome] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.processed)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.processed)

    @property
    def deleted_count(self) -> int:
        return sum(1 for o in self.outcomes if o.deleted)

    @property
    def delete_failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.deletion is DeletionStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        """True if any file failed to process or to delete"""
        return self.failed_count > 0 or self.delete_failed_count > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'target': str(self.target.path),
            'delete': self.target.delete,
            'status': self.status.value,
            'processed': self.processed_count,
            'failed': self.failed_count,
            'deleted': self.deleted_count,
            'delete_failed': self.delete_failed_count,
            'skipped': [str(p) for p in self.skipped],
            'outcomes': [o.to_dict() for o in self.outcomes],
        }
