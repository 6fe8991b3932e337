"""
Tests for environment configuration and logging setup.
"""
import logging

from constants import DEFAULT_ASSET_TABLE, DEFAULT_PUBLIC_ORIGIN, DEFAULT_REQUEST_TIMEOUT
from utils.app_config import AppConfig
from utils.logger import LOG_FORMAT


class TestAppConfig:

    def test_defaults_without_backend(self):
        config = AppConfig.from_env(environ={})
        assert not config.has_backend
        assert config.asset_table == DEFAULT_ASSET_TABLE
        assert config.public_origin == DEFAULT_PUBLIC_ORIGIN
        assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT

    def test_reads_environment(self):
        config = AppConfig.from_env(environ={
            'SUPABASE_URL': 'https://proj.supabase.co',
            'SUPABASE_ANON_KEY': 'anon',
            'AR_ASSET_TABLE': 'projects',
            'AR_STORAGE_BUCKET': 'files',
            'AR_PUBLIC_ORIGIN': 'https://ar.example.test',
            'AR_REQUEST_TIMEOUT': '2.5',
        })
        assert config.has_backend
        assert config.supabase_key == 'anon'
        assert config.asset_table == 'projects'
        assert config.storage_bucket == 'files'
        assert config.public_origin == 'https://ar.example.test'
        assert config.request_timeout == 2.5

    def test_bad_timeout_falls_back(self):
        config = AppConfig.from_env(environ={'AR_REQUEST_TIMEOUT': 'soon'})
        assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT

    def test_env_file_loaded(self, tmp_path, monkeypatch):
        (tmp_path / '.env').write_text("SUPABASE_URL=https://from-file.supabase.co\n")
        monkeypatch.chdir(tmp_path)
        # Restored in reverse order: the value loaded from the file is removed again
        monkeypatch.setenv('SUPABASE_URL', 'unset')
        monkeypatch.delenv('SUPABASE_URL')
        config = AppConfig.from_env()
        assert config.supabase_url == 'https://from-file.supabase.co'


class TestLogging:

    def test_format_includes_logger_name(self):
        assert '%(name)s' in LOG_FORMAT
        assert '%(levelname)s' in LOG_FORMAT

    def test_session_errors_logged(self, caplog, failing_client, image_asset):
        from models.editor_session import EditorSession
        from services.persistence import PersistenceBridge
        session = EditorSession(persistence=PersistenceBridge(failing_client))
        session.select_asset(image_asset)
        with caplog.at_level(logging.ERROR, logger='Session'):
            session.save()
        assert any("Failed to save" in record.message for record in caplog.records)
