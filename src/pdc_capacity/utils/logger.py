# src/pdc_capacity/utils/logger.py
"""
Loggers for the application, snapshot, renderer, report and CLI layers.

LOG_LEVEL and LOG_FILE come from the environment or .env. The log file
(and its directory) is only created when the first logger is requested,
so importing the package has no filesystem side effects.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = Path(os.getenv("LOG_FILE", "logs/pdc_capacity.log"))

formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

_file_handler: logging.Handler | None = None

# Console shows INFO+ regardless of LOG_LEVEL
console_handler = logging.StreamHandler()
console_handler.setLevel("INFO")
console_handler.setFormatter(formatter)


def _get_file_handler() -> logging.Handler:
    global _file_handler
    if _file_handler is None:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        _file_handler.setLevel(LOG_LEVEL)
        _file_handler.setFormatter(formatter)
    return _file_handler


def get_logger(name: str = "pdc_capacity") -> logging.Logger:
    """Logger writing to LOG_FILE and the console; handlers attached once per name."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    if not logger.handlers:
        logger.addHandler(_get_file_handler())
        logger.addHandler(console_handler)
    return logger
