"""Unit tests for configuration loading."""

import logging

from faqrender.core.config import load_config
from faqrender.core.models import ContentFormat
from faqrender.utils.log import LOGGER_NAME, configure_logging


class TestLoadConfig:
    """Test load_config."""

    def test_defaults_without_yaml(self, isolated_env):
        cfg = load_config(str(isolated_env / "missing.yaml"))
        assert cfg.debug is False
        assert cfg.default_format is ContentFormat.HTML
        assert cfg.server.host == "127.0.0.1"
        assert cfg.server.port == 8000

    def test_reads_yaml(self, isolated_env):
        path = isolated_env / "settings.yaml"
        path.write_text("debug: true\ndefault_format: markdown\nserver:\n  port: 9000\n")

        cfg = load_config(str(path))

        assert cfg.debug is True
        assert cfg.default_format is ContentFormat.MARKDOWN
        assert cfg.server.port == 9000

    def test_default_yaml_under_project_root(self, isolated_env):
        (isolated_env / "pyproject.toml").write_text("")
        (isolated_env / "config").mkdir()
        (isolated_env / "config" / "default.yaml").write_text("default_format: text\n")

        assert load_config().default_format is ContentFormat.TEXT

    def test_env_overrides_yaml(self, isolated_env, monkeypatch):
        path = isolated_env / "settings.yaml"
        path.write_text("debug: false\ndefault_format: text\nserver:\n  host: 0.0.0.0\n")
        monkeypatch.setenv("FAQRENDER_DEBUG", "yes")
        monkeypatch.setenv("FAQRENDER_DEFAULT_FORMAT", "markdown")
        monkeypatch.setenv("FAQRENDER_PORT", "9100")

        cfg = load_config(str(path))

        assert cfg.debug is True
        assert cfg.default_format is ContentFormat.MARKDOWN
        assert cfg.server.host == "0.0.0.0"
        assert cfg.server.port == 9100

    def test_invalid_default_format_falls_back_to_html(self, isolated_env, monkeypatch):
        monkeypatch.setenv("FAQRENDER_DEFAULT_FORMAT", "bogus")
        cfg = load_config(str(isolated_env / "missing.yaml"))
        assert cfg.default_format is ContentFormat.HTML


class TestConfigureLogging:
    """Test configure_logging."""

    def test_levels_and_single_handler(self):
        logger = configure_logging(debug=True)
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG

        handlers = len(logger.handlers)
        configure_logging(debug=False)
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == handlers
