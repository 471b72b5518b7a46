"""Package loggers.

Everything logs under the ``datepicker`` namespace. The package installs a
``NullHandler`` only; applications attach their own handlers.
"""

import logging

PACKAGE_LOGGER = "datepicker"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return ``name`` as a logger, nested under the package namespace."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
