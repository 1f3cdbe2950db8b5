"""Utility module for application-wide logging configuration.

This centralises logging setup so the command line and anything embedding the
sorter get the same message format.

How it works
============
1. ``setup_logging`` configures the *root* logger with a sane format.
   The log level is DEBUG when the environment variable
   ``SORT_CONTIGS_DEBUG=1`` is present, otherwise INFO (you can customise
   this by passing ``debug=True/False`` explicitly).

2. If the host application already installed handlers on the root logger
   they are left alone and only the level is adjusted, so the sorter can be
   driven from inside a larger pipeline without duplicating output.
"""
from __future__ import annotations

import logging
import os

DEBUG_ENV_VAR = "SORT_CONTIGS_DEBUG"

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def setup_logging(debug: bool | None = None, *, app_name: str = "sort_contigs") -> logging.Logger:
    """Initialise global logging.

    Parameters
    ----------
    debug: bool | None
        When *True*, force DEBUG level output.  When *False*, use INFO.
        When *None* (default), the level is decided by the environment
        variable ``SORT_CONTIGS_DEBUG`` ("1" == debug on).
    app_name: str
        Name of the top-level application logger.

    Returns
    -------
    logging.Logger
        The application logger instance (useful for immediate logging).
    """
    if debug is None:
        debug = os.getenv(DEBUG_ENV_VAR, "0") == "1"

    level = logging.DEBUG if debug else logging.INFO

    # Root logger configuration (only if the user hasn't configured it yet)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        # Even if handlers exist, still honour the requested level
        logging.getLogger().setLevel(level)

    return logging.getLogger(app_name)
