"""
Package-wide numeric defaults and logging setup.

The library itself only attaches a NullHandler to the ``picograd`` logger;
applications (the XOR driver, notebooks) call :func:`configure_logging`.
"""

import logging

import numpy as np

# Scalar type used for every Node.data / Node.grad
DTYPE = np.float64

# Seed shared by the random distributions and the training drivers
DEFAULT_SEED = 42

# Offset added before taking log() of a probability that may be exactly 0
LOG_EPSILON = 1.0e-15

DEFAULT_LEARNING_RATE = 0.1
DEFAULT_EPOCHS = 10

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("picograd")
logger.addHandler(logging.NullHandler())


def configure_logging(level=logging.INFO, filename=None):
    """
    Install a root handler using the shared format.

    Args:
        level: logging level for the root logger
        filename: optional log file; stderr when None
    """
    logging.basicConfig(
        level=level,
        filename=filename,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    logger.debug("logging configured (level=%s)", logging.getLevelName(level))
