import logging

from tfidf_pipeline.utils.logger import setup_logger, set_level


def test_setup_logger_adds_one_handler():
    logger = setup_logger("test_logger_once", level="debug")
    setup_logger("test_logger_once")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_set_level_updates_handlers():
    logger = setup_logger("test_logger_level")
    set_level("WARNING", names=["test_logger_level"])
    assert logger.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in logger.handlers)
