"""Writes one structured JSON log entry per known log code."""

import json
import logging
import os
import sys
from datetime import datetime
from typing import Iterable

from logcodes.models import LogCode

logger = logging.getLogger(__name__)

ENTRY_LOGGER_NAME = "logcodes.entries"
ENTRY_MESSAGE = "Log entry"

DEFAULT_LOG_CODES = (
    LogCode(100, "ERROR", "Unexpected null pointer encountered.", "ERROR_NULL_POINTER"),
    LogCode(200, "WARN", "Data format mismatch, falling back to default.", "WARN_DATA_FORMAT_MISMATCH"),
    LogCode(300, "INFO", "Database connection successfully established.", "INFO_DB_CONNECTION_ESTABLISHED"),
    LogCode(400, "DEBUG", "Starting API endpoint health check.", "DEBUG_HEALTH_CHECK"),
    LogCode(500, "TRACE", "Beginning detailed transaction trace.", "TRACE_TRANSACTION"),
)


class JsonLogFormatter(logging.Formatter):
    """Render a record as a single JSON object.

    Structured fields passed as ``extra={"fields": {...}}`` are merged in
    alongside ``level``, ``msg`` and ``time``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = dict(getattr(record, "fields", None) or {})
        entry["level"] = record.levelname.lower()
        entry["msg"] = record.getMessage()
        entry["time"] = datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="seconds")
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _open_handler(output_file: str) -> logging.Handler:
    try:
        dir_path = os.path.dirname(output_file)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        return logging.FileHandler(output_file, mode="a", encoding="utf-8")
    except OSError as e:
        logger.warning("Failed to log to file, using default stderr: %s", e)
        return logging.StreamHandler(sys.stderr)


def build_emitter_logger(output_file: str) -> logging.Logger:
    """Return the entry logger, writing JSON lines to ``output_file``."""
    entry_logger = logging.getLogger(ENTRY_LOGGER_NAME)
    close_emitter_logger(entry_logger)
    entry_logger.setLevel(logging.INFO)
    entry_logger.propagate = False

    handler = _open_handler(output_file)
    handler.setFormatter(JsonLogFormatter())
    entry_logger.addHandler(handler)
    return entry_logger


def close_emitter_logger(entry_logger: logging.Logger):
    for handler in list(entry_logger.handlers):
        entry_logger.removeHandler(handler)
        handler.close()


def emit_log_codes(entry_logger: logging.Logger, log_codes: Iterable[LogCode] = DEFAULT_LOG_CODES) -> int:
    """Write one INFO entry per log code and return how many were written."""
    count = 0
    for lc in log_codes:
        entry_logger.info(ENTRY_MESSAGE, extra={"fields": {
            "Code": lc.code,
            "Level": lc.level,
            "Description": lc.description,
            "HumanReadableCode": lc.human_readable_code,
        }})
        count += 1
    return count
