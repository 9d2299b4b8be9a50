"""
Reconciliation scan for the image store.

Rebuilds image records from files already present under <root>/shapes so
that previously submitted drawings survive a server restart. Both the
canonical quality-subdirectory layout and the legacy flat layout are read.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..config import DEFAULT_QUALITY, FILENAME_PATTERN, IMAGE_EXTENSIONS, LABELS, QUALITIES
from ..models import ImageRecord
from .paths import folder_for_label, legacy_web_path, shapes_root, web_path

logger = logging.getLogger(__name__)


def is_image_filename(name: str) -> bool:
    """Check if a filename has a PNG/JPEG extension (case-insensitive)."""
    return os.path.splitext(name)[1].lower() in IMAGE_EXTENSIONS


def parse_timestamp(filename: str, filepath: Optional[str] = None) -> int:
    """
    Derive a record timestamp in milliseconds.

    Uses the digits of a <name>_<digits>.<ext> filename, falling back to the
    file's modification time.

    Examples:
        >>> parse_timestamp('circle_1712345678901.png')
        1712345678901
    """
    match = FILENAME_PATTERN.match(filename)
    if match:
        return int(match.group(2))
    if filepath is None:
        return 0
    return int(os.stat(filepath).st_mtime * 1000)


def _append_unique(records: list[ImageRecord], record: ImageRecord) -> bool:
    if any(existing.key == record.key for existing in records):
        return False
    records.append(record)
    return True


def _scan_quality_dirs(label_dir: str, label: str, records: list[ImageRecord]) -> int:
    added = 0
    for quality in QUALITIES:
        qdir = os.path.join(label_dir, quality)
        if not os.path.isdir(qdir):
            continue

        for name in sorted(os.listdir(qdir)):
            if not is_image_filename(name):
                continue
            filepath = os.path.join(qdir, name)
            record = ImageRecord(
                filename=name,
                label=label,
                quality=quality,
                image="",
                timestamp=parse_timestamp(name, filepath),
                file_path=web_path(label, quality, name),
            )
            if _append_unique(records, record):
                added += 1
    return added


def _scan_legacy_files(label_dir: str, label: str, records: list[ImageRecord]) -> int:
    added = 0
    for name in sorted(os.listdir(label_dir)):
        filepath = os.path.join(label_dir, name)
        if not os.path.isfile(filepath) or not is_image_filename(name):
            continue
        record = ImageRecord(
            filename=name,
            label=label,
            quality=DEFAULT_QUALITY,
            image="",
            timestamp=parse_timestamp(name, filepath),
            file_path=legacy_web_path(label, name),
        )
        if _append_unique(records, record):
            added += 1
    return added


def scan_shapes_directory(root: str, records: list[ImageRecord]) -> int:
    """
    Append records for every image found under <root>/shapes.

    Records whose (filename, label, quality) triple is already present in
    ``records`` are skipped, so the scan can be repeated safely. Errors are
    logged and end the scan early; records appended so far are kept.

    Args:
        root: Public directory containing the shapes folder
        records: List to extend in place

    Returns:
        Number of records appended
    """
    shapes_dir = shapes_root(root)
    if not os.path.exists(shapes_dir):
        logger.info(f"Shapes directory does not exist yet: {shapes_dir}")
        return 0

    added = 0
    try:
        for label in LABELS:
            label_dir = os.path.join(shapes_dir, folder_for_label(label))
            if not os.path.isdir(label_dir):
                continue
            added += _scan_quality_dirs(label_dir, label, records)
            added += _scan_legacy_files(label_dir, label, records)
    except Exception as e:
        logger.exception(f"Error loading images from {shapes_dir}: {e}")

    logger.info(f"Loaded {added} images from filesystem ({len(records)} total)")
    return added


__all__ = ['is_image_filename', 'parse_timestamp', 'scan_shapes_directory']
