"""
Decoding of canvas data URLs into raw image bytes.
"""

from __future__ import annotations

import base64
import binascii
import re

from ..config import DATA_URL_PATTERN
from .errors import PayloadDecodeError


def strip_data_url_prefix(payload: str) -> str:
    """
    Remove a leading data:image/<type>;base64, prefix if present.

    Examples:
        >>> strip_data_url_prefix('data:image/png;base64,iVBORw0K')
        'iVBORw0K'
        >>> strip_data_url_prefix('iVBORw0K')
        'iVBORw0K'
    """
    return DATA_URL_PATTERN.sub('', payload, count=1)


def decode_image_payload(payload: str) -> bytes:
    """
    Decode a base64 data URL (or bare base64 string) into bytes.

    Raises:
        PayloadDecodeError: If the payload is not a string or not valid base64
    """
    if not isinstance(payload, str):
        raise PayloadDecodeError("Image payload must be a base64 string")

    # Line-wrapped base64 is still base64
    data = re.sub(r"\s+", "", strip_data_url_prefix(payload))
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise PayloadDecodeError(f"Invalid base64 image payload: {e}") from e


__all__ = ['strip_data_url_prefix', 'decode_image_payload']
