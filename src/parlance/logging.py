import logging
import os

PACKAGE_LOGGER = "parlance"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Silent as a library until the host application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _level_from_env(default: int) -> int:
    level_name = os.getenv('PARLANCE_LOG_LEVEL', logging.getLevelName(default))
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        return default
    return level


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a parlance module.

    Module loggers carry no handlers of their own; records propagate to the
    ``parlance`` logger. Library modules default to WARNING and the CLI to
    INFO. PARLANCE_LOG_LEVEL overrides both.
    """
    logger = logging.getLogger(name)
    default_level = logging.INFO if name.endswith('.cli') else logging.WARNING
    logger.setLevel(_level_from_env(default_level))
    return logger


def enable_console_logging() -> logging.Handler:
    """Attach a stderr handler to the ``parlance`` logger once and return it."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers:
        if type(handler) is logging.StreamHandler:
            return handler

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return handler
