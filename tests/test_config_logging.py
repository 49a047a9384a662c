"""
Unit tests for client configuration and logging setup.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from blockchain_api.models.config import ClientConfig


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BLOCKCHAIN_API_CODE", raising=False)

        config = ClientConfig(_env_file=None)

        assert config.api_code is None
        assert config.base_url == "https://blockchain.info"
        assert config.statistics_url == "https://api.blockchain.info"
        assert config.receive_url == "https://api.blockchain.info/v2"
        assert config.service_url is None
        assert config.log_format == "json"

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("BLOCKCHAIN_API_CODE", "env-code")
        monkeypatch.setenv("BLOCKCHAIN_SERVICE_URL", "http://127.0.0.1:3000")

        config = ClientConfig(_env_file=None)

        assert config.api_code == "env-code"
        assert config.service_url == "http://127.0.0.1:3000"

    def test_blank_values_are_none(self, monkeypatch):
        monkeypatch.setenv("BLOCKCHAIN_API_CODE", "  ")

        assert ClientConfig(_env_file=None).api_code is None

    def test_log_format_validated(self):
        assert ClientConfig(_env_file=None, log_format="TEXT").log_format == "text"

        with pytest.raises(ValidationError):
            ClientConfig(_env_file=None, log_format="xml")


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        levels = {name: logging.getLogger(name).level for name in ("", "urllib3", "requests")}
        yield
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)
        for handler in root.handlers:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        structlog.reset_defaults()

    def test_rotating_file_handler(self, tmp_path):
        from logging.handlers import RotatingFileHandler
        from blockchain_api.utils.logging import setup_logging

        log_file = tmp_path / "logs" / "client.log"
        setup_logging(ClientConfig(_env_file=None, log_file=str(log_file), log_level="DEBUG"))

        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert log_file.parent.exists()

    def test_repeated_setup_keeps_one_file_handler(self, tmp_path):
        from logging.handlers import RotatingFileHandler
        from blockchain_api.utils.logging import setup_logging

        config = ClientConfig(_env_file=None, log_file=str(tmp_path / "client.log"))
        setup_logging(config)
        setup_logging(config)

        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1

    def test_transport_loggers_quietened(self):
        from blockchain_api.utils.logging import setup_logging

        setup_logging(ClientConfig(_env_file=None, log_format="text", log_level="DEBUG"))

        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger().level == logging.DEBUG
