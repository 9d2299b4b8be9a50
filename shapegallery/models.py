"""
Data models for Shape Gallery.

Contains dataclasses for representing stored shape images, the outcome
of a delete, and per-label/per-quality counts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .config import DEFAULT_QUALITY, LABELS, QUALITIES


def normalize_quality(quality: Optional[str]) -> str:
    """Return the quality, or the default quality if it is missing/empty."""
    return quality or DEFAULT_QUALITY


@dataclass
class ImageRecord:
    """
    Metadata about one stored shape image.

    Attributes:
        filename: File name on disk (label_<ms>.png for submitted images)
        label: Shape label (circle, square, triangle)
        quality: Quality grade (perfect, medium, irregular)
        image: Base64 data URL as submitted; empty for records loaded from disk
        timestamp: Milliseconds since epoch
        file_path: Web-relative path, e.g. /shapes/circles/perfect/circle_1.png
    """
    filename: str
    label: str
    quality: str = DEFAULT_QUALITY
    image: str = ""
    timestamp: int = 0
    file_path: str = ""

    @property
    def key(self) -> tuple:
        """Identity triple: (filename, label, normalized quality)."""
        return (self.filename, self.label, normalize_quality(self.quality))

    def matches(self, filename: str, label: str, quality: Optional[str]) -> bool:
        """Check whether this record has the given identity triple."""
        return self.key == (filename, label, normalize_quality(quality))

    def to_dict(self, include_image: bool = True) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            'filename': self.filename,
            'label': self.label,
            'quality': normalize_quality(self.quality),
            'timestamp': self.timestamp,
            'path': self.file_path,
        }
        if include_image:
            data['image'] = self.image
        return data


class DeleteOutcome(Enum):
    """What a delete actually did."""
    REMOVED = 'removed'
    RECORD_ONLY = 'record_only'
    FILESYSTEM_ERROR = 'filesystem_error'
    NOT_FOUND = 'not_found'
    ERROR = 'error'


@dataclass
class DeleteResult:
    """
    Result of ImageStore.delete().

    Truthy when a file was unlinked or at least one record was removed,
    falsy when there was nothing to delete or an unexpected error occurred.
    """
    outcome: DeleteOutcome
    file_removed: bool = False
    record_removed: bool = False
    deleted_path: Optional[str] = None
    tried_paths: list = field(default_factory=list)
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.file_removed or self.record_removed

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'outcome': self.outcome.value,
            'file_removed': self.file_removed,
            'record_removed': self.record_removed,
            'deleted_path': self.deleted_path,
            'tried_paths': list(self.tried_paths),
            'error': self.error,
        }


@dataclass
class StoreStats:
    """Record counts per label and per quality."""
    total: int = 0
    by_label: dict = field(default_factory=lambda: {label: 0 for label in LABELS})
    by_quality: dict = field(default_factory=lambda: {quality: 0 for quality in QUALITIES})

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'total': self.total,
            'by_label': dict(self.by_label),
            'by_quality': dict(self.by_quality),
        }
