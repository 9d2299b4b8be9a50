"""
Flask routes for Shape Gallery.

Contains the drawing and gallery pages, the JSON API used by them, and
static serving of stored shape images.
"""

from __future__ import annotations

import logging
from datetime import datetime

from flask import Blueprint, current_app, jsonify, render_template, request, send_from_directory

from ..config import CANVAS_SIZE, LABELS, QUALITIES, DEFAULT_QUALITY, SHAPES_DIRNAME
from ..models import DeleteOutcome
from ..storage import ImageStore, ImageStoreError
from ..utils import validators

# Create blueprint for routes
api = Blueprint('api', __name__)

# Module logger
_logger = logging.getLogger(__name__)


def _store() -> ImageStore:
    """The ImageStore the running app was created with."""
    return current_app.extensions['shapegallery.store']


# =============================================================================
# Pages
# =============================================================================

@api.route('/')
def index():
    """Serve the drawing page."""
    return render_template(
        'index.html',
        labels=LABELS,
        qualities=QUALITIES,
        canvas_size=CANVAS_SIZE,
    )


@api.route('/gallery')
def gallery():
    """Serve the gallery page."""
    return render_template('gallery.html', labels=LABELS, qualities=QUALITIES)


@api.route(f'/{SHAPES_DIRNAME}/<path:subpath>')
def shape_file(subpath):
    """Serve a stored image from the shapes directory."""
    return send_from_directory(_store().shapes_dir, subpath)


# =============================================================================
# API
# =============================================================================

@api.route('/api/ping')
def api_ping():
    """Simple endpoint for connection monitoring."""
    return jsonify({'status': 'ok', 'time': datetime.now().isoformat()})


@api.route('/api/submit', methods=['POST'])
def api_submit():
    """Save a drawn shape."""
    data = request.get_json(silent=True)

    is_valid, error = validators.validate_submission(data)
    if not is_valid:
        _logger.info(f"Rejected submission: {error}")
        return jsonify({'error': error}), 400

    label = data['label']
    quality = data.get('quality') or DEFAULT_QUALITY
    _logger.debug(f"Received submission: label={label}, quality={quality}, "
                  f"image_length={len(str(data['image']))}")

    try:
        record = _store().add(label, quality, data['image'])
    except ImageStoreError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        _logger.exception(f"Error saving image: {e}")
        return jsonify({'error': 'Failed to save image', 'details': str(e)}), 500

    return jsonify({
        'success': True,
        'filename': record.filename,
        'path': record.file_path,
        'label': record.label,
        'quality': record.quality,
        'timestamp': record.timestamp,
    })


@api.route('/api/gallery')
def api_gallery():
    """Return stored images, newest first, optionally filtered."""
    label = request.args.get('label', '').strip()
    quality = request.args.get('quality', '').strip()
    include_image = request.args.get('include_image', '') in ('1', 'true')

    try:
        store = _store()
        if label and quality:
            images = store.get_by_label_and_quality(label, quality)
        elif label:
            images = store.get_by_label(label)
        elif quality:
            images = store.get_by_quality(quality)
        else:
            images = store.get_all()
        images = sorted(images, key=lambda r: r.timestamp, reverse=True)
    except Exception as e:
        _logger.exception(f"Error reading gallery: {e}")
        return jsonify({'error': 'Failed to load gallery', 'details': str(e)}), 500

    _logger.debug(f"Total images found: {len(images)}")
    return jsonify({'images': [img.to_dict(include_image=include_image) for img in images]})


@api.route('/api/stats')
def api_stats():
    """Return image counts per label and quality."""
    return jsonify(_store().stats().to_dict())


@api.route('/api/delete', methods=['DELETE', 'POST'])
def api_delete():
    """Delete a stored image."""
    data = request.get_json(silent=True)

    is_valid, error = validators.validate_deletion(data)
    if not is_valid:
        return jsonify({'error': error}), 400

    filename = data['filename']
    label = data['label']
    quality = data.get('quality') or DEFAULT_QUALITY

    result = _store().delete(filename, label, quality)

    if result.outcome is DeleteOutcome.ERROR:
        return jsonify({'error': 'Failed to delete image', 'details': result.error}), 500

    if result:
        response = {
            'success': True,
            'message': 'Image deleted successfully',
            'outcome': result.outcome.value,
            'result': result.to_dict(),
        }
        if result.outcome is DeleteOutcome.FILESYSTEM_ERROR:
            response['warning'] = True
            response['message'] = 'Image removed from store, but its file could not be deleted'
        return jsonify(response)

    # Nothing to delete; the caller may already have removed it
    _logger.info(f"Image not found or could not be deleted: {filename}")
    if result.outcome is DeleteOutcome.FILESYSTEM_ERROR:
        message = 'Image file could not be deleted'
    else:
        message = 'Image file not found on filesystem, but removed from store'
    return jsonify({
        'error': message,
        'warning': True,
        'outcome': result.outcome.value,
        'result': result.to_dict(),
    }), 200
