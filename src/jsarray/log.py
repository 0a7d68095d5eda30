import logging

LIBRARY_LOGGER_NAME = "jsarray"

current_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
current_logger.addHandler(logging.NullHandler())


def set_logger(logger: logging.Logger) -> None:
    """Routes the library's diagnostics to an application-owned logger."""
    global current_logger
    current_logger = logger


def logger() -> logging.Logger:
    return current_logger
