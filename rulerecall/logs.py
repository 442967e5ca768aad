# logs.py
from __future__ import annotations
import sys
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Console logging for a host app, plus a UTF-8 log file when asked."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.getLogger("rulerecall").critical(
            "Unhandled exception", exc_info=(exctype, value, tb)
        )
        sys.__excepthook__(exctype, value, tb)

    sys.excepthook = excepthook
