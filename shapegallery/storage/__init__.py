"""
Image storage for Shape Gallery.

Keeps an in-memory index of submitted shape drawings, reconciled on first
use against the folder-per-label/per-quality tree under <root>/shapes.

Public API:
- ImageStore: Main store class
- get_store(): Get the application store instance
- reset_store(): Reset the application instance (testing)
"""

from __future__ import annotations

import threading
from typing import Optional

from .core import ImageStore
from .errors import ImageStoreError, InvalidLabelError, InvalidQualityError, PayloadDecodeError


_store_instance: Optional[ImageStore] = None
_store_lock = threading.Lock()


def get_store(root: Optional[str] = None) -> ImageStore:
    """
    Get or create the application store instance (thread-safe).

    Args:
        root: Public directory used when the instance is first created

    Example:
        store = get_store('/srv/app/public')
        store.load()
    """
    global _store_instance
    if _store_instance is None:
        with _store_lock:
            # Double-check after acquiring lock
            if _store_instance is None:
                _store_instance = ImageStore(root)
    return _store_instance


def reset_store():
    """
    Reset the application store instance (mainly for testing).
    """
    global _store_instance
    with _store_lock:
        _store_instance = None


__all__ = [
    'ImageStore',
    'ImageStoreError',
    'InvalidLabelError',
    'InvalidQualityError',
    'PayloadDecodeError',
    'get_store',
    'reset_store',
]
