import logging
import os

LOGGER_NAME = "heap"


def get_logger(name: str) -> logging.Logger:
    level_str = os.getenv("HEAP_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_str, logging.INFO)

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def print_(message, level=logging.DEBUG):
    get_logger(LOGGER_NAME).log(level, message)
