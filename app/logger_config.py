import logging

from uvicorn.logging import DefaultFormatter

FORMAT = "%(levelprefix)s %(asctime)s [%(name)s] %(message)s"

_level = logging.INFO
_loggers = set()


def configure_logging(level: str = "INFO") -> None:
    """Set the level of every logger created through get_logger, before or after this call."""
    global _level
    _level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(_level, int):
        _level = logging.INFO
    for name in _loggers:
        logging.getLogger(name).setLevel(_level)


def get_logger(name: str = __name__) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(_level)
    _loggers.add(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        formatter = DefaultFormatter(
            FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
