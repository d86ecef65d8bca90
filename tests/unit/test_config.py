"""
Unit tests for Settings and logging setup.
"""
import logging
import os
from unittest.mock import patch

from devconnect.core.config import Settings
from devconnect.core.logging_config import _parse_level, configure_logging


class TestSettings:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.mongo_database_name == "devconnect"
        assert settings.mongo_use_transactions is True
        assert settings.jwt_algorithm == "HS256"
        assert settings.access_token_expire_minutes == 60 * 24 * 7
        assert "http://localhost:3000" in settings.cors_origins

    def test_reads_environment(self, mock_env):
        with patch.dict(os.environ, {
            "MONGO_USE_TRANSACTIONS": "false",
            "CORS_ORIGINS": "https://a.example.com, https://b.example.com,",
            "ACCESS_TOKEN_EXPIRE_MINUTES": "15",
        }):
            settings = Settings()
        assert settings.mongo_database_name == "test_devconnect_db"
        assert settings.jwt_secret_key == "test_secret_key_for_testing_only"
        assert settings.mongo_use_transactions is False
        assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]
        assert settings.access_token_expire_minutes == 15
        assert settings.log_level == "DEBUG"


class TestLoggingConfig:
    def test_parse_level(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level(" WARNING ") == logging.WARNING
        assert _parse_level("nonsense") == logging.INFO
        assert _parse_level(None) == logging.INFO

    def test_configure_logging_sets_service_level(self):
        logger = configure_logging("WARNING", force=True)
        assert logger.name == "devconnect"
        assert logger.level == logging.WARNING
