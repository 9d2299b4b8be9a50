"""
ImageStore: in-memory index of shape images mirrored on disk.

The store keeps one ImageRecord per stored file and treats the directory
tree under <root>/shapes as the source of truth. The first access runs a
reconciliation scan; add and delete then keep list and disk in step.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from typing import Optional

from ..config import default_public_dir
from ..models import (
    DeleteOutcome,
    DeleteResult,
    ImageRecord,
    StoreStats,
    normalize_quality,
)
from ..utils.validators import validate_label, validate_path_in_directory, validate_quality
from .encoding import decode_image_payload
from .errors import InvalidLabelError, InvalidQualityError
from .paths import canonical_path, legacy_path, quality_dir, shapes_root, web_path, web_to_fs_path
from .scanner import scan_shapes_directory

logger = logging.getLogger(__name__)


def current_millis() -> int:
    """Current time in milliseconds since epoch."""
    return int(time.time() * 1000)


class ImageStore:
    """
    Reconciling cache of shape images over a directory tree.

    Thread-safe: every change to the record list happens under a lock.
    File writes in add() happen outside the lock.

    Usage:
        store = ImageStore('/srv/app/public')

        record = store.add('circle', 'perfect', data_url)
        images = store.get_all()
        store.delete(record.filename, record.label, record.quality)
    """

    def __init__(self, root: Optional[str] = None):
        """
        Initialize the store.

        Args:
            root: Public directory that holds the shapes folder.
                  Uses <cwd>/public if None.
        """
        self.root = os.path.abspath(root or default_public_dir())
        self._records: list[ImageRecord] = []
        self._lock = threading.Lock()
        self._loaded = False

    @property
    def shapes_dir(self) -> str:
        return shapes_root(self.root)

    @property
    def loaded(self) -> bool:
        """True once the reconciliation scan has run."""
        return self._loaded

    def load(self, force: bool = False) -> int:
        """
        Run the reconciliation scan.

        Runs at most once unless force is True. Repeating the scan never
        duplicates records already in the store.

        Returns:
            Number of records added by this call
        """
        with self._lock:
            if self._loaded and not force:
                return 0
            added = scan_shapes_directory(self.root, self._records)
            self._loaded = True
            return added

    def _ensure_loaded(self):
        if not self._loaded:
            self.load()

    # -------------------------------------------------------------------------
    # Add
    # -------------------------------------------------------------------------

    def add(self, label: str, quality: str, image: str) -> ImageRecord:
        """
        Persist a new drawing and register it.

        Args:
            label: Shape label (circle, square, triangle)
            quality: Quality grade (perfect, medium, irregular)
            image: Base64 data URL of the PNG

        Returns:
            The created ImageRecord

        Raises:
            InvalidLabelError: Unknown label
            InvalidQualityError: Unknown quality
            PayloadDecodeError: Payload is not valid base64
            OSError: Directory creation or file write failed
        """
        self._ensure_loaded()

        is_valid, error = validate_label(label)
        if not is_valid:
            raise InvalidLabelError(error)
        is_valid, error = validate_quality(quality)
        if not is_valid:
            raise InvalidQualityError(error)

        data = decode_image_payload(image)

        timestamp = current_millis()
        filename = f"{label}_{timestamp}.png"

        os.makedirs(quality_dir(self.root, label, quality), exist_ok=True)
        filepath = canonical_path(self.root, label, quality, filename)
        # Same label within the same millisecond overwrites the earlier file
        with open(filepath, 'wb') as f:
            f.write(data)

        record = ImageRecord(
            filename=filename,
            label=label,
            quality=quality,
            image=image,
            timestamp=timestamp,
            file_path=web_path(label, quality, filename),
        )

        with self._lock:
            for i, existing in enumerate(self._records):
                if existing.key == record.key:
                    self._records[i] = record
                    break
            else:
                self._records.append(record)
            total = len(self._records)

        logger.info(f"Image saved to filesystem: {filepath}")
        logger.debug(f"Total images in store: {total}")
        return record

    # -------------------------------------------------------------------------
    # Query
    # -------------------------------------------------------------------------

    def _snapshot(self) -> list[ImageRecord]:
        self._ensure_loaded()
        with self._lock:
            return list(self._records)

    def get_all(self) -> list[ImageRecord]:
        """Return all records, newest first."""
        records = self._snapshot()
        logger.debug(f"Getting all images. Total: {len(records)}")
        return sorted(records, key=lambda r: r.timestamp, reverse=True)

    def get_by_label(self, label: str) -> list[ImageRecord]:
        """Return records with the given label, in insertion order."""
        return [r for r in self._snapshot() if r.label == label]

    def get_by_quality(self, quality: str) -> list[ImageRecord]:
        """Return records with the given quality, in insertion order."""
        return [r for r in self._snapshot() if normalize_quality(r.quality) == quality]

    def get_by_label_and_quality(self, label: str, quality: str) -> list[ImageRecord]:
        """Return records with the given label and quality, in insertion order."""
        return [
            r for r in self._snapshot()
            if r.label == label and normalize_quality(r.quality) == quality
        ]

    def find(self, filename: str, label: str, quality: Optional[str] = None) -> Optional[ImageRecord]:
        """Return the record with the given identity triple, if any."""
        for record in self._snapshot():
            if record.matches(filename, label, quality):
                return record
        return None

    def stats(self) -> StoreStats:
        """Count records per label and per quality."""
        stats = StoreStats()
        for record in self._snapshot():
            stats.total += 1
            stats.by_label[record.label] = stats.by_label.get(record.label, 0) + 1
            quality = normalize_quality(record.quality)
            stats.by_quality[quality] = stats.by_quality.get(quality, 0) + 1
        return stats

    def __len__(self) -> int:
        return len(self._snapshot())

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    def _candidate_paths(self, record: Optional[ImageRecord], filename: str,
                         label: str, quality: str) -> list[str]:
        candidates = []
        if record is not None and record.file_path:
            candidates.append(web_to_fs_path(self.root, record.file_path))
        candidates.append(canonical_path(self.root, label, quality, filename))
        candidates.append(legacy_path(self.root, label, filename))

        unique = []
        for path in candidates:
            path = os.path.normpath(path)
            if path in unique:
                continue
            if not validate_path_in_directory(path, self.shapes_dir, follow_symlinks=False):
                logger.warning(f"Refusing to delete path outside shapes directory: {path}")
                continue
            unique.append(path)
        return unique

    def delete(self, filename: str, label: str, quality: Optional[str] = None) -> DeleteResult:
        """
        Remove an image file and its record.

        The file is looked for at the record's own path, then the canonical
        quality path, then the legacy flat path. Matching records are removed
        whether or not a file was found.

        Returns:
            DeleteResult; truthy if a file or a record was removed
        """
        quality = normalize_quality(quality)
        result = DeleteResult(outcome=DeleteOutcome.NOT_FOUND)

        try:
            record = self.find(filename, label, quality)
            result.tried_paths = self._candidate_paths(record, filename, label, quality)

            unlink_failed = False
            for path in result.tried_paths:
                if not os.path.isfile(path):
                    continue
                try:
                    os.remove(path)
                except OSError as e:
                    unlink_failed = True
                    logger.warning(f"Error deleting file at {path}: {e}")
                    continue
                result.file_removed = True
                result.deleted_path = path
                logger.info(f"Deleted image from filesystem: {path}")
                break

            if not result.file_removed:
                logger.warning(
                    f"Image file not found for {filename} ({label}, {quality}). "
                    f"Tried paths: {result.tried_paths}"
                )

            with self._lock:
                before = len(self._records)
                self._records = [
                    r for r in self._records if not r.matches(filename, label, quality)
                ]
                result.record_removed = len(self._records) < before
                total = len(self._records)

            logger.info(f"Image removed from store: {result.record_removed}. Total images: {total}")

            if result.file_removed:
                result.outcome = DeleteOutcome.REMOVED
            elif unlink_failed:
                result.outcome = DeleteOutcome.FILESYSTEM_ERROR
            elif result.record_removed:
                result.outcome = DeleteOutcome.RECORD_ONLY
            else:
                result.outcome = DeleteOutcome.NOT_FOUND

        except Exception as e:
            logger.exception(f"Error deleting image {filename}: {e}")
            return DeleteResult(
                outcome=DeleteOutcome.ERROR,
                tried_paths=result.tried_paths,
                error=str(e),
            )

        return result


__all__ = ['ImageStore', 'current_millis']
