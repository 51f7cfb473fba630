import logging

from .config import Settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    settings = Settings.from_env()

    handler = logging.StreamHandler()
    formatter = logging.Formatter(settings.log_format)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Library code only logs at DEBUG, so the WARNING default keeps it silent.
    # Override with the FPKIT_LOG_LEVEL environment variable.
    logger.setLevel(getattr(logging, settings.log_level))
    return logger
