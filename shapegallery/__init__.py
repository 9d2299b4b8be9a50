"""
Shape Gallery
=============
Draw geometric shapes, label and grade them, and browse the saved drawings.

Features:
- 256x256 drawing canvas with shape label and quality grade
- Drawings stored as PNG files under shapes/<label>/<quality>/
- Existing files picked up again on restart
- Gallery with filtering and deletion
"""

__version__ = "1.0.0"

from .models import ImageRecord, DeleteOutcome, DeleteResult, StoreStats, normalize_quality
from .config import LABELS, QUALITIES, DEFAULT_QUALITY, LABEL_FOLDERS
from .storage import (
    ImageStore,
    ImageStoreError,
    InvalidLabelError,
    InvalidQualityError,
    PayloadDecodeError,
    get_store,
    reset_store,
)

__all__ = [
    "ImageRecord",
    "DeleteOutcome",
    "DeleteResult",
    "StoreStats",
    "normalize_quality",
    "LABELS",
    "QUALITIES",
    "DEFAULT_QUALITY",
    "LABEL_FOLDERS",
    "ImageStore",
    "ImageStoreError",
    "InvalidLabelError",
    "InvalidQualityError",
    "PayloadDecodeError",
    "get_store",
    "reset_store",
]
