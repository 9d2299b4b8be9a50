"""
Exceptions raised by the image store.
"""

from __future__ import annotations


class ImageStoreError(Exception):
    """Base class for image store errors."""


class InvalidLabelError(ImageStoreError, ValueError):
    """Raised when a submission carries an unknown shape label."""


class InvalidQualityError(ImageStoreError, ValueError):
    """Raised when a submission carries an unknown quality grade."""


class PayloadDecodeError(ImageStoreError, ValueError):
    """Raised when an image payload is not valid base64."""


__all__ = [
    'ImageStoreError',
    'InvalidLabelError',
    'InvalidQualityError',
    'PayloadDecodeError',
]
