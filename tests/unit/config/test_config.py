"""Tests for Config settings loading and logging setup."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from norikra_client.config import Config, LoggingConfig, configure_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert config.host == "localhost"
        assert config.port == 26578
        assert config.timeout == 30.0
        assert config.logging.level == "WARNING"

    def test_env_vars_use_norikra_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NORIKRA_HOST", "norikra.example.com")
        monkeypatch.setenv("NORIKRA_PORT", "26571")
        config = Config()
        assert config.host == "norikra.example.com"
        assert config.port == 26571

    def test_nested_logging_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NORIKRA_LOGGING__LEVEL", "INFO")
        assert Config().logging.level == "INFO"

    def test_init_values_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Command-line flags are passed as init values and win over env."""
        monkeypatch.setenv("NORIKRA_HOST", "from-env")
        assert Config(host="from-flag").host == "from-flag"

    def test_yaml_config_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "norikra.yaml"
        config_file.write_text("host: yaml-host\nport: 9999\n")
        monkeypatch.setenv("NORIKRA_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.host == "yaml-host"
        assert config.port == 9999

    def test_env_overrides_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "norikra.yaml"
        config_file.write_text("host: yaml-host\n")
        monkeypatch.setenv("NORIKRA_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("NORIKRA_HOST", "env-host")

        assert Config().host == "env-host"


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_uses_configured_level(self) -> None:
        configure_logging(LoggingConfig(level="info"))
        assert logging.getLogger().level == logging.INFO

    def test_verbose_forces_debug(self) -> None:
        configure_logging(LoggingConfig(), verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_quiets_httpx(self) -> None:
        configure_logging(LoggingConfig(), verbose=True)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_log_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "client.log"
        monkeypatch.setenv("NORIKRA_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig(level="INFO"))
        logging.getLogger("norikra_client.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello" in log_file.read_text()
