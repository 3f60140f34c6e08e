"""
Logging configuration for the API process
"""
import logging
import sys


def setup_logging(level: str = "info") -> None:
    """
    Send application logs to stderr with timestamps.

    Safe to call more than once; earlier handlers on the root logger are
    replaced so records are never printed twice.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
