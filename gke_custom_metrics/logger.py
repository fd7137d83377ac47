"""Logging setup for the exporter: plain text lines on stderr."""
import logging

from .config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(cfg: Config) -> logging.Logger:
    logger = logging.getLogger("gke_custom_metrics")
    logger.setLevel(getattr(logging, cfg.LOG_LEVEL, logging.INFO))

    # one handler, however often this is called
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)

    return logger
