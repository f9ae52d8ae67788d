# tfidf_pipeline/utils/logger.py
"""
Logger Module
Logging utilities
"""
import logging
import sys


def setup_logger(name: str = "tfidf_pipeline", level: str = "INFO"):
    """
    Setup logger for the project.

    Args:
        name: Logger name
        level: Logging level

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    return logger


def set_level(level: str, names=None):
    """
    Change the level of already created project loggers.

    Args:
        level: Logging level name
        names: Logger names to update (default: every logger with a handler from setup_logger)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    if names is None:
        names = [n for n, existing in logging.root.manager.loggerDict.items()
                 if isinstance(existing, logging.Logger) and existing.handlers]
    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        for handler in logger.handlers:
            handler.setLevel(log_level)


if __name__ == "__main__":
    log = setup_logger(level="DEBUG")
    log.info("This is an info message")
    log.warning("This is a warning message")
    log.error("This is an error message")
