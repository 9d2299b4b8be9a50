"""
Unit tests for user configuration.
"""

import json
import os

import pytest
from shapegallery.user_config import get_user_config


@pytest.fixture
def user_config(temp_dir, monkeypatch):
    """UserConfig pointed at an empty temporary config directory."""
    monkeypatch.setenv('SHAPEGALLERY_CONFIG_DIR', str(temp_dir / 'config'))
    for var in ('SHAPEGALLERY_PUBLIC_DIR', 'SHAPEGALLERY_HOST',
                'SHAPEGALLERY_PORT', 'SHAPEGALLERY_LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)
    config = get_user_config()
    config.reload()
    yield config
    config.reload()


class TestUserConfig:
    """Test UserConfig priority rules."""

    def test_defaults(self, user_config):
        assert user_config.public_dir == os.path.join(os.getcwd(), 'public')
        assert user_config.host == '127.0.0.1'
        assert user_config.port == 5000
        assert user_config.log_level == 'INFO'

    def test_config_file(self, user_config):
        user_config.config_dir.mkdir(parents=True)
        user_config.config_file_path.write_text(json.dumps({'port': 8080, 'host': '0.0.0.0'}))
        user_config.reload()

        assert user_config.port == 8080
        assert user_config.host == '0.0.0.0'

    def test_env_overrides_file(self, user_config, monkeypatch):
        user_config.config_dir.mkdir(parents=True)
        user_config.config_file_path.write_text(json.dumps({'port': 8080}))
        user_config.reload()
        monkeypatch.setenv('SHAPEGALLERY_PORT', '9090')

        assert user_config.port == 9090

    def test_env_public_dir(self, user_config, monkeypatch, temp_dir):
        monkeypatch.setenv('SHAPEGALLERY_PUBLIC_DIR', str(temp_dir))
        assert user_config.public_dir == str(temp_dir)

    def test_null_in_file_falls_back_to_default(self, user_config):
        user_config.config_dir.mkdir(parents=True)
        user_config.config_file_path.write_text(json.dumps({'public_dir': None}))
        user_config.reload()

        assert user_config.public_dir == os.path.join(os.getcwd(), 'public')

    def test_broken_file_ignored(self, user_config):
        user_config.config_dir.mkdir(parents=True)
        user_config.config_file_path.write_text('{not json')
        user_config.reload()

        assert user_config.port == 5000

    def test_create_example_config(self, user_config):
        assert user_config.create_example_config() is True
        data = json.loads(user_config.config_file_path.read_text())
        assert data['port'] == 5000
        assert data['public_dir'] is None
