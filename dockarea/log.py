"""Logging configuration for dockarea.

Only the layout config ("dockarea.config") logs: fallbacks for entries that
do not parse at WARNING, loads and saves at DEBUG. AllowedSplits stays silent.
"""

import logging
import os

LOG_LEVEL = os.environ.get("DOCKAREA_LOG_LEVEL", "WARNING").upper()

logging.basicConfig(
    format="%(asctime)s.%(msecs)03d %(name)-15s %(levelname)-7s %(message)s",
    datefmt="%H:%M:%S",
    level=getattr(logging, LOG_LEVEL, logging.WARNING),
)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the 'dockarea.' namespace, e.g. 'dockarea.config'.

    Level controlled by DOCKAREA_LOG_LEVEL env var (default WARNING).
    """
    return logging.getLogger(f"dockarea.{name}")
