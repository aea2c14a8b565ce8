from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVEL_ALIASES: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": logging.DEBUG,
}


def parse_log_level(value: str | None, default: int) -> int:
    """Parse a log level string ("warn", "DEBUG", "10") into a numeric level."""
    if not value:
        return default
    raw = value.strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    return _LEVEL_ALIASES.get(raw.upper(), default)


def resolve_log_level(cli_value: str | None, config_value: str | None, default: int = logging.INFO) -> int:
    """Pick the effective level: command line, then RRDECODER_LOG_LEVEL, then config."""
    for candidate in (cli_value, os.environ.get("RRDECODER_LOG_LEVEL"), config_value):
        if candidate and candidate.strip():
            return parse_log_level(candidate, default)
    return default


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)
