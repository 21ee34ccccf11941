"""
Logging Configuration.

All toolkit modules obtain their logger through `get_logger` so that the
handler and format are configured in one place. Library code logs at DEBUG
for routine dispatch and at WARNING just before raising a computation
failure; nothing is printed at the default INFO level during normal use.
"""

import logging
import sys
from typing import Tuple


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the geometry toolkit.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


TOOLKIT_PACKAGES = ("common", "geometry", "geospatial", "interchange", "features")


def set_level(level: int, packages: Tuple[str, ...] = TOOLKIT_PACKAGES) -> None:
    """Change the level of every toolkit logger created so far.

    Parameters
    ----------
    level : int
        New logging level (e.g. ``logging.DEBUG``).
    packages : tuple of str
        Top-level package names whose loggers are changed.
    """
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.split(".")[0] in packages:
            logger.setLevel(level)
