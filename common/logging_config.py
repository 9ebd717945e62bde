"""
Logging Configuration.

Every module logs below one package logger, ``fast_lcc``. The stdout
handler is attached to that package logger only, so records from all
modules share one format and are written once, while still propagating
to the root logger for applications (and test harnesses) that capture it.
"""

import logging
import sys

PACKAGE_LOGGER = "fast_lcc"
LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger for one module of the projection package.
    
    Parameters
    ----------
    name : str
        Logger name (typically __name__). It is placed under the
        ``fast_lcc`` package logger unless it already is.
    level : int
        Logging level of the returned logger.
    
    Returns
    -------
    logging.Logger
        Logger named ``fast_lcc.<name>``.
    """
    package = _package_logger()
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        logger = logging.getLogger(name)
    else:
        logger = package.getChild(name)

    logger.setLevel(level)
    return logger
