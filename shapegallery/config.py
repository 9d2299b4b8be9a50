"""
Configuration constants for Shape Gallery.

This module contains all fixed settings including:
- The valid shape labels and quality grades
- The label to folder name mapping used on disk
- Filename and data URL patterns recognized by the image store
"""

import os
import re

# Shape labels a submitter can choose from
LABELS = ('circle', 'square', 'triangle')

# Quality grades, in display order
QUALITIES = ('perfect', 'medium', 'irregular')

# Quality assumed wherever a record or request does not carry one
DEFAULT_QUALITY = 'perfect'

# Label -> folder name (singular to plural)
LABEL_FOLDERS = {
    'circle': 'circles',
    'square': 'squares',
    'triangle': 'triangles',
}

# Extensions picked up by the reconciliation scan (compared lowercase)
IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg'}

# Filenames written by the store look like circle_1712345678901.png
FILENAME_PATTERN = re.compile(r'^(.+)_(\d+)\.(png|jpg|jpeg)$', re.IGNORECASE)

# Prefix of a canvas data URL: data:image/png;base64,
DATA_URL_PATTERN = re.compile(r'^data:image/\w+;base64,')

# Name of the directory under the public root that holds all shapes
SHAPES_DIRNAME = 'shapes'

# Drawing canvas is a fixed square
CANVAS_SIZE = 256

# Web server defaults
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 5000


def default_public_dir() -> str:
    """Return the default public directory (<cwd>/public)."""
    return os.path.join(os.getcwd(), 'public')
