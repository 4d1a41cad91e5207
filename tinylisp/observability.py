"""Logging setup for the command-line driver.

setup_logging is called at start-up; library modules only ever call
logging.getLogger(__name__) and never configure handlers themselves.
"""

import logging
import sys

HANDLER_NAME = "tinylisp"


def setup_logging(level: str = "WARNING") -> None:
    """Attach a human-readable stderr handler to the root logger and set its level.

    Repeated calls only adjust the level; the handler is installed once.
    """
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
