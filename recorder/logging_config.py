"""
Logging setup for recorder processes.

Records go to stderr so `--json` command output on stdout stays parseable.
Every record carries a `recording` field naming the recording file being
written or replayed; RECORDER_LOG_LEVEL and RECORDER_LOG_FORMAT (json or text)
choose verbosity and layout.
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging() -> None:
    """Replace the root handlers with one stderr handler configured from the environment."""
    log_level = os.getenv("RECORDER_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("RECORDER_LOG_FORMAT", "json").lower()

    level = getattr(logging, log_level, None)
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RecordingFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(recording)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [recording=%(recording)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, recording: Optional[str] = None) -> logging.LoggerAdapter:
    """Logger whose records name the recording they belong to ("N/A" if none)."""
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"recording": recording or "N/A"})


class RecordingFilter(logging.Filter):
    """Defaults `recording` for records logged without get_logger."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "recording"):
            record.recording = "N/A"  # type: ignore
        return True
