"""
Input validation and security checks for Shape Gallery.

Provides validators for path traversal prevention, shape label and quality
checks, and request payload validation.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from ..config import LABELS, QUALITIES


def validate_path_in_directory(filepath: str, base_directory: str,
                               follow_symlinks: bool = True) -> bool:
    """
    Validate that a file path is within the expected base directory.

    Prevents path traversal where a filename taken from a request could
    point outside the shapes directory.

    Args:
        filepath: Path to validate
        base_directory: Expected base directory
        follow_symlinks: Resolve symlinks before comparing. When False the
            comparison is lexical, so a symlinked subfolder still counts
            as inside while '..' components are still rejected.

    Returns:
        True if path is within base_directory, False otherwise

    Examples:
        >>> validate_path_in_directory('/srv/public/shapes/circles/a.png', '/srv/public/shapes')
        True
        >>> validate_path_in_directory('/etc/passwd', '/srv/public/shapes')
        False
    """
    try:
        if follow_symlinks:
            file_resolved = str(Path(filepath).resolve())
            base_resolved = str(Path(base_directory).resolve())
        else:
            file_resolved = os.path.normpath(os.path.abspath(filepath))
            base_resolved = os.path.normpath(os.path.abspath(base_directory))
        return file_resolved.startswith(base_resolved + os.sep) or \
               file_resolved == base_resolved
    except Exception:
        return False


def validate_label(label: Any) -> tuple[bool, str]:
    """
    Validate that a label is one of the known shapes.

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_label('circle')
        (True, '')
        >>> validate_label('hexagon')
        (False, 'Invalid label: hexagon. Must be one of: circle, square, triangle')
    """
    if label not in LABELS:
        return False, f"Invalid label: {label}. Must be one of: {', '.join(LABELS)}"
    return True, ""


def validate_quality(quality: Any) -> tuple[bool, str]:
    """
    Validate that a quality grade is one of the known grades.

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_quality('medium')
        (True, '')
        >>> validate_quality('great')
        (False, 'Invalid quality: great. Must be one of: perfect, medium, irregular')
    """
    if quality not in QUALITIES:
        return False, f"Invalid quality: {quality}. Must be one of: {', '.join(QUALITIES)}"
    return True, ""


def validate_submission(data: Optional[dict]) -> tuple[bool, str]:
    """
    Validate the presence of required submission fields.

    Label and quality values are checked by the store itself.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not data or not isinstance(data, dict):
        return False, "Request body required"
    if not data.get('image') or not data.get('label'):
        return False, "Missing image or label"
    return True, ""


def validate_deletion(data: Optional[dict]) -> tuple[bool, str]:
    """
    Validate the presence of required deletion fields.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not data or not isinstance(data, dict):
        return False, "Request body required"
    if not data.get('filename') or not data.get('label'):
        return False, "Missing filename or label"
    return True, ""


__all__ = [
    'validate_path_in_directory',
    'validate_label',
    'validate_quality',
    'validate_submission',
    'validate_deletion',
]
