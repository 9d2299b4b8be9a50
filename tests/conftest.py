"""
Pytest configuration and shared fixtures for test suite.
"""

import base64
import io
import itertools
import shutil
import tempfile
from pathlib import Path

import pytest
from PIL import Image, ImageDraw


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def public_dir(temp_dir):
    """Public directory for a store (shapes/ not created yet)."""
    path = temp_dir / "public"
    path.mkdir()
    return path


@pytest.fixture
def png_bytes():
    """A 256x256 white PNG with a black circle outline."""
    img = Image.new('RGB', (256, 256), color='white')
    ImageDraw.Draw(img).ellipse((40, 40, 216, 216), outline='black', width=4)
    buffer = io.BytesIO()
    img.save(buffer, 'PNG')
    return buffer.getvalue()


@pytest.fixture
def png_data_url(png_bytes):
    """The sample PNG as a canvas-style data URL."""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode('ascii')


@pytest.fixture
def fake_clock(monkeypatch):
    """
    Make ImageStore timestamps strictly increasing.

    Returns the list of timestamps handed out so far.
    """
    counter = itertools.count(1_700_000_000_000)
    issued = []

    def next_millis():
        value = next(counter)
        issued.append(value)
        return value

    monkeypatch.setattr('shapegallery.storage.core.current_millis', next_millis)
    return issued


@pytest.fixture
def store(public_dir, fake_clock):
    """A fresh ImageStore rooted at a temporary public directory."""
    from shapegallery.storage import ImageStore

    return ImageStore(str(public_dir))


@pytest.fixture
def make_shape_file(public_dir, png_bytes):
    """Factory writing an image file under public/shapes/<parts...>."""
    def _make(*parts, data=None):
        path = public_dir.joinpath("shapes", *parts)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png_bytes if data is None else data)
        return path
    return _make


@pytest.fixture
def app(store):
    """Flask app wired to the temporary store."""
    from shapegallery.app import create_app

    app = create_app(store)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
