"""Tests for configuration and logging setup."""

import logging

import pytest

from formtree.config import FormTreeConfig, get_config, update_config
from formtree.constants import REQUIRED_MESSAGE
from formtree.logging_setup import LOGGER_NAME, disable_logging, enable_logging, setup_logging


@pytest.fixture
def restore_config():
    config = get_config()
    saved = (config.strict_values, config.required_message)
    yield
    update_config(strict_values=saved[0], required_message=saved[1])


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, disabled = list(logger.handlers), logger.level, logger.disabled
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.disabled = disabled


class TestFormTreeConfig:
    """Tests for FormTreeConfig."""

    def test_defaults(self):
        """Test class defaults."""
        config = FormTreeConfig()
        assert config.strict_values is False
        assert config.required_message == REQUIRED_MESSAGE
        assert config.indent_json_output == 2

    def test_from_env(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("FORMTREE_STRICT_VALUES", "true")
        monkeypatch.setenv("FORMTREE_REQUIRED_MESSAGE", "Required!")
        monkeypatch.setenv("FORMTREE_LOG_LEVEL", "debug")
        monkeypatch.setenv("FORMTREE_INDENT_JSON", "4")
        config = FormTreeConfig.from_env()
        assert config.strict_values is True
        assert config.required_message == "Required!"
        assert config.log_level == "DEBUG"
        assert config.indent_json_output == 4

    def test_from_env_defaults(self, monkeypatch):
        """Test unset variables fall back to defaults."""
        monkeypatch.delenv("FORMTREE_STRICT_VALUES", raising=False)
        monkeypatch.delenv("FORMTREE_FORM_NAME", raising=False)
        config = FormTreeConfig.from_env()
        assert config.strict_values is False
        assert config.default_form_name == "form"

    def test_update_config(self, restore_config):
        """Test updating known keys and ignoring unknown ones."""
        config = update_config(strict_values=True, not_a_setting=1)
        assert config is get_config()
        assert config.strict_values is True
        assert not hasattr(config, "not_a_setting")


class TestLoggingSetup:
    """Tests for setup_logging."""

    def test_console_handler(self, restore_logger):
        """Test console logging adds one stream handler."""
        logger = setup_logging(console=True)
        assert logger is restore_logger
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_verbose_sets_debug(self, restore_logger):
        """Test verbose logging enables debug records."""
        logger = setup_logging(console=True, verbose=True)
        assert logger.level == logging.DEBUG

    def test_repeated_setup_does_not_stack_handlers(self, restore_logger):
        """Test handlers are replaced, not added."""
        setup_logging(console=True)
        logger = setup_logging(console=True)
        assert len(logger.handlers) == 1

    def test_file_handler(self, restore_logger, tmp_path):
        """Test file logging writes records."""
        log_file = tmp_path / "formtree.log"
        logger = setup_logging(console=False, verbose=True, file_path=str(log_file))
        logging.getLogger("formtree.fields.object").debug("hello from the tree")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the tree" in log_file.read_text(encoding="utf-8")

    def test_disable_and_enable(self, restore_logger):
        """Test toggling the logger."""
        setup_logging(console=True)
        disable_logging()
        assert restore_logger.disabled
        enable_logging()
        assert not restore_logger.disabled

    def test_setup_disabled(self, restore_logger):
        """Test enabled=False disables the logger."""
        logger = setup_logging(enabled=False)
        assert logger.disabled
        assert logger.handlers == []
