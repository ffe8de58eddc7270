"""Logger factory for civo-cluster."""

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {extra[name]} - <level>{message}</level>"

PACKAGE = "civo_cluster"


def get_logger(name: str):
    """
    Get a loguru logger bound to a module name.

    Args:
    ----
        name: Dotted module name shown in every record (e.g. "civo_cluster.runtime.docker")

    Returns:
    -------
        Bound loguru logger

    """
    return logger.bind(name=name)


def configure_logging(level: str = "WARNING") -> None:
    """
    Enable package logging and route it to stderr at the given level.

    stdout is reserved for the wrapped tool's output. As a library the
    package stays silent until this is called.
    """
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level=level.upper(), format=LOG_FORMAT)
    logger.enable(PACKAGE)
