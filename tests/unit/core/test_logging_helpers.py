"""Unit tests for logging helpers."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from visiontac.core.logging_config import configure_logging
from visiontac.core.logging_utils import StructuredLogger, get_module_logger


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    # Drop the handlers configure_logging installed
    configure_logging(level, console=False)
    root.setLevel(level)


class TestModuleLogger:
    def test_namespaced(self):
        logger = get_module_logger("TrackLogParser")
        assert isinstance(logger, StructuredLogger)
        assert logger.name == "visiontac.TrackLogParser"
        assert logger.component == "TrackLogParser"

    def test_already_namespaced(self):
        logger = get_module_logger("visiontac.cli")
        assert logger.name == "visiontac.cli"
        assert logger.component == "cli"
        assert get_module_logger().name == "visiontac"

    def test_messages_prefixed_with_component(self, caplog):
        logger = get_module_logger("Summary")
        with caplog.at_level(logging.INFO, logger="visiontac"):
            logger.info("%d records", 2)
        assert caplog.messages == ["[Summary] 2 records"]

    def test_component_attached_to_record(self, caplog):
        logger = get_module_logger("Summary")
        with caplog.at_level(logging.INFO, logger="visiontac"):
            logger.warning("odd file")
        assert caplog.records[0].component == "Summary"


class TestConfigureLogging:
    def test_writes_log_file(self, tmp_path, root_logger):
        log_file = tmp_path / "logs" / "visiontac.log"
        configure_logging("debug", console=False, log_file=log_file)

        get_module_logger("Test").debug("hello %s", "file")
        for handler in root_logger.handlers:
            handler.flush()

        assert root_logger.level == logging.DEBUG
        assert "[Test] hello file" in log_file.read_text()

    def test_unknown_level(self, root_logger):
        handlers = list(root_logger.handlers)
        with pytest.raises(ValueError, match="chatty"):
            configure_logging("chatty", console=False)
        assert root_logger.handlers == handlers

    def test_repeated_calls_replace_own_handlers(self, tmp_path, root_logger):
        foreign = logging.NullHandler()
        root_logger.addHandler(foreign)
        try:
            configure_logging("info", console=True, log_file=tmp_path / "a.log")
            configure_logging("warning", console=True, log_file=tmp_path / "b.log")

            file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
            assert len(file_handlers) == 1
            assert file_handlers[0].baseFilename.endswith("b.log")
            assert foreign in root_logger.handlers
            assert root_logger.level == logging.WARNING
        finally:
            root_logger.removeHandler(foreign)
