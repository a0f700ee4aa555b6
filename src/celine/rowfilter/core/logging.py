# rowfilter/core/logging.py
import logging
import sys

from celine.rowfilter.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the command line:
    - logs go to stderr, stdout carries the filtered rows
    - root logger = WARNING
    - row filter logs (celine.*) = LOG_LEVEL, DEBUG when verbose
    """

    app_level = (
        logging.DEBUG
        if verbose
        else getattr(logging, settings.log_level.upper(), logging.INFO)
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    root.addHandler(handler)

    logging.getLogger("celine").setLevel(app_level)
