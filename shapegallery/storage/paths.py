"""
Path helpers for the shapes directory layout.

Canonical layout:  <root>/shapes/<folder>/<quality>/<filename>
Legacy layout:     <root>/shapes/<folder>/<filename>   (quality = perfect)

Web paths mirror the layout below <root>, e.g. /shapes/circles/perfect/x.png
"""

from __future__ import annotations

import os

from ..config import LABEL_FOLDERS, SHAPES_DIRNAME


def folder_for_label(label: str) -> str:
    """
    Map a label to its folder name.

    Examples:
        >>> folder_for_label('circle')
        'circles'
        >>> folder_for_label('hexagon')
        'hexagon'
    """
    return LABEL_FOLDERS.get(label, label)


def shapes_root(root: str) -> str:
    """Return <root>/shapes."""
    return os.path.join(root, SHAPES_DIRNAME)


def quality_dir(root: str, label: str, quality: str) -> str:
    return os.path.join(shapes_root(root), folder_for_label(label), quality)


def canonical_path(root: str, label: str, quality: str, filename: str) -> str:
    return os.path.join(quality_dir(root, label, quality), filename)


def legacy_path(root: str, label: str, filename: str) -> str:
    return os.path.join(shapes_root(root), folder_for_label(label), filename)


def web_path(label: str, quality: str, filename: str) -> str:
    """Web-relative path of a file in the canonical layout."""
    return f"/{SHAPES_DIRNAME}/{folder_for_label(label)}/{quality}/{filename}"


def legacy_web_path(label: str, filename: str) -> str:
    """Web-relative path of a file in the legacy flat layout."""
    return f"/{SHAPES_DIRNAME}/{folder_for_label(label)}/{filename}"


def web_to_fs_path(root: str, path: str) -> str:
    """
    Convert a web-relative path to a filesystem path under root.

    Examples:
        >>> web_to_fs_path('/srv/public', '/shapes/circles/perfect/a.png')
        '/srv/public/shapes/circles/perfect/a.png'
    """
    relative = path[1:] if path.startswith('/') else path
    return os.path.join(root, *relative.split('/'))


__all__ = [
    'folder_for_label',
    'shapes_root',
    'quality_dir',
    'canonical_path',
    'legacy_path',
    'web_path',
    'legacy_web_path',
    'web_to_fs_path',
]
