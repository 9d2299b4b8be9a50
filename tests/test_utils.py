"""
Unit tests for path helpers, payload decoding and validators.
"""

import base64
import os

import pytest
from shapegallery.storage import paths
from shapegallery.storage.encoding import decode_image_payload, strip_data_url_prefix
from shapegallery.storage.errors import PayloadDecodeError
from shapegallery.utils import validators


class TestPaths:
    """Test layout path helpers."""

    def test_folder_for_known_labels(self):
        assert paths.folder_for_label("circle") == "circles"
        assert paths.folder_for_label("square") == "squares"
        assert paths.folder_for_label("triangle") == "triangles"

    def test_folder_for_unknown_label(self):
        assert paths.folder_for_label("hexagon") == "hexagon"

    def test_canonical_path(self, temp_dir):
        result = paths.canonical_path(str(temp_dir), "square", "medium", "square_1.png")
        assert result == os.path.join(str(temp_dir), "shapes", "squares", "medium", "square_1.png")

    def test_legacy_path(self, temp_dir):
        result = paths.legacy_path(str(temp_dir), "triangle", "t.png")
        assert result == os.path.join(str(temp_dir), "shapes", "triangles", "t.png")

    def test_web_paths(self):
        assert paths.web_path("circle", "irregular", "c.png") == "/shapes/circles/irregular/c.png"
        assert paths.legacy_web_path("circle", "c.png") == "/shapes/circles/c.png"

    def test_web_to_fs_path(self, temp_dir):
        result = paths.web_to_fs_path(str(temp_dir), "/shapes/circles/perfect/c.png")
        assert result == os.path.join(str(temp_dir), "shapes", "circles", "perfect", "c.png")

    def test_web_to_fs_path_without_leading_slash(self, temp_dir):
        result = paths.web_to_fs_path(str(temp_dir), "shapes/circles/c.png")
        assert result == os.path.join(str(temp_dir), "shapes", "circles", "c.png")


class TestEncoding:
    """Test data URL handling."""

    def test_strip_png_prefix(self):
        assert strip_data_url_prefix("data:image/png;base64,QUJD") == "QUJD"

    def test_strip_jpeg_prefix(self):
        assert strip_data_url_prefix("data:image/jpeg;base64,QUJD") == "QUJD"

    def test_bare_base64_untouched(self):
        assert strip_data_url_prefix("QUJD") == "QUJD"

    def test_decode(self, png_bytes, png_data_url):
        assert decode_image_payload(png_data_url) == png_bytes

    def test_decode_line_wrapped(self, png_bytes):
        wrapped = base64.encodebytes(png_bytes).decode('ascii')
        assert "\n" in wrapped
        assert decode_image_payload("data:image/png;base64," + wrapped) == png_bytes

    def test_decode_invalid(self):
        with pytest.raises(PayloadDecodeError):
            decode_image_payload("data:image/png;base64,not*base64!")

    def test_decode_non_string(self):
        with pytest.raises(PayloadDecodeError):
            decode_image_payload(12345)

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_image_payload("%%%")


class TestValidators:
    """Test input validators."""

    def test_valid_label(self):
        assert validators.validate_label("circle") == (True, "")

    def test_invalid_label_names_allowed_set(self):
        is_valid, error = validators.validate_label("hexagon")
        assert not is_valid
        assert "hexagon" in error
        assert "circle, square, triangle" in error

    def test_valid_quality(self):
        assert validators.validate_quality("irregular") == (True, "")

    def test_invalid_quality_names_allowed_set(self):
        is_valid, error = validators.validate_quality("great")
        assert not is_valid
        assert "great" in error
        assert "perfect, medium, irregular" in error

    def test_submission_requires_body(self):
        assert validators.validate_submission(None) == (False, "Request body required")

    def test_submission_requires_image_and_label(self):
        assert not validators.validate_submission({'label': 'circle'})[0]
        assert not validators.validate_submission({'image': 'x'})[0]
        assert validators.validate_submission({'image': 'x', 'label': 'circle'})[0]

    def test_deletion_requires_filename_and_label(self):
        assert not validators.validate_deletion({'filename': 'a.png'})[0]
        assert not validators.validate_deletion({'label': 'circle'})[0]
        assert validators.validate_deletion({'filename': 'a.png', 'label': 'circle'})[0]

    def test_path_in_directory(self, temp_dir):
        inside = temp_dir / "shapes" / "circles" / "a.png"
        assert validators.validate_path_in_directory(str(inside), str(temp_dir / "shapes"))

    def test_non_object_body_rejected(self):
        assert validators.validate_submission(["x"]) == (False, "Request body required")
        assert validators.validate_deletion(["x"]) == (False, "Request body required")

    def test_lexical_check_keeps_symlinked_subfolder(self, temp_dir):
        base = temp_dir / "shapes"
        base.mkdir()
        (temp_dir / "elsewhere").mkdir()
        os.symlink(str(temp_dir / "elsewhere"), str(base / "circles"))
        inside = str(base / "circles" / "a.png")

        assert not validators.validate_path_in_directory(inside, str(base))
        assert validators.validate_path_in_directory(inside, str(base), follow_symlinks=False)

    def test_lexical_check_rejects_traversal(self, temp_dir):
        outside = temp_dir / "shapes" / "circles" / ".." / ".." / "secret.png"
        assert not validators.validate_path_in_directory(
            str(outside), str(temp_dir / "shapes"), follow_symlinks=False)

    def test_path_traversal_rejected(self, temp_dir):
        outside = temp_dir / "shapes" / ".." / "secret.txt"
        assert not validators.validate_path_in_directory(str(outside), str(temp_dir / "shapes"))
