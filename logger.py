"""Logging configuration for the temperature dashboard."""

import logging
import sys

logger = logging.getLogger("tempdash")


def setup_logger(level: int = logging.INFO) -> None:
    """Attach a stdout handler to the dashboard logger.

    Args:
        level: Logging level (default: INFO)
    """
    if logger.handlers:
        # Streamlit reruns the script; configure only once per process
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s", datefmt="%H:%M:%S")
    )

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
