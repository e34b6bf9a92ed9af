##############################################################################
# Copyright (c) Paradox Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Paradox.
##############################################################################

"""
Console logging for the `paradox` command.

The library itself only creates loggers under the `paradox` namespace and never
installs handlers; applications decide where the records go. The CLI calls
`setup_logging` once to send them to stdout, colored by coloredlogs.
"""

import logging
import sys
from typing import Optional

import coloredlogs


FORMATS = {
    "DEFAULT": "[%(asctime)s: %(levelname)s] %(message)s",
    "DEBUG": "[%(asctime)s: %(levelname)s] [%(name)s: %(lineno)d] %(message)s",
}

# Marks the stdout handler installed by setup_logging so a second call replaces it
HANDLER_NAME = "paradox-console"


def pick_format(log_level: str) -> str:
    """
    Choose the format key for a log level. Debug output names the emitting
    logger and line, so request traces from `paradox.debug` stand apart from
    the component logs.

    Args:
        log_level: The level name, e.g. `INFO`.

    Returns:
        A key of `FORMATS`.
    """
    return "DEBUG" if str(log_level).upper() == "DEBUG" else "DEFAULT"


def setup_logging(logger: logging.Logger, log_level: str = "INFO", colors: bool = True, fmt: Optional[str] = None):
    """
    Send the records of `logger` and its children to stdout.

    Args:
        logger: The logger to configure, normally the `paradox` logger.
        log_level: The level name to log at.
        colors: Whether coloredlogs styles the output.
        fmt: A key of `FORMATS`. Picked from `log_level` when not given.
    """
    log_format = FORMATS[fmt or pick_format(log_level)]

    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)

    logger.setLevel(log_level)
    logger.propagate = False

    if colors is True:
        coloredlogs.install(level=log_level, logger=logger, fmt=log_format)
