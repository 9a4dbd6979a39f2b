"""Logging setup shared by the command line front ends."""

import logging
import sys

_CONFIGURED = False


def setup_logging(level: str = "WARNING") -> None:
    """Attach a single stderr handler to the ``sumire`` logger."""
    global _CONFIGURED
    logger = logging.getLogger("sumire")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
    _CONFIGURED = True
