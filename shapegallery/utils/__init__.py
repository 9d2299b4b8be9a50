"""
Utilities package for Shape Gallery.

Provides:
- validators: Input validation and security checks
"""

from __future__ import annotations

from . import validators

from .validators import (
    validate_path_in_directory,
    validate_label,
    validate_quality,
    validate_submission,
    validate_deletion,
)

__all__ = [
    # Submodules
    'validators',
    # Validators
    'validate_path_in_directory',
    'validate_label',
    'validate_quality',
    'validate_submission',
    'validate_deletion',
]
