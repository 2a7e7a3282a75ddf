"""Configuration: a frozen dataclass loaded from environment variables."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _parse_port(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        port = int(value.strip())
    except ValueError:
        logger.warning("Invalid WEBHOOK_PORT '%s', falling back to %d", value, default)
        return default
    if not 0 < port < 65536:
        logger.warning("WEBHOOK_PORT %d out of range, falling back to %d", port, default)
        return default
    return port


@dataclass(frozen=True)
class Config:
    app_log_file: str = "app.log"
    webhook_output_file: str = "log.txt"
    webhook_host: str = "0.0.0.0"
    webhook_port: int = 8080
    webhook_debug: bool = False
    log_level: str = "INFO"


def load_config() -> Config:
    """Build Config from environment variables with sensible defaults."""
    log_level = os.environ.get("LOG_LEVEL", Config.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = Config.log_level

    return Config(
        app_log_file=os.environ.get("APP_LOG_FILE", Config.app_log_file),
        webhook_output_file=os.environ.get("WEBHOOK_OUTPUT_FILE", Config.webhook_output_file),
        webhook_host=os.environ.get("WEBHOOK_HOST", Config.webhook_host),
        webhook_port=_parse_port(os.environ.get("WEBHOOK_PORT"), Config.webhook_port),
        webhook_debug=_parse_bool(os.environ.get("WEBHOOK_DEBUG", "false")),
        log_level=log_level,
    )
