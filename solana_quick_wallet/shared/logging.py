"""Logging helpers for Solana Quick Wallet.

Library modules only ever call ``get_logger(__name__)``. Nothing is printed
until the host application calls ``setup_logging()``, which attaches a single
stream handler to the ``solana_quick_wallet`` logger. Every line that handler
emits passes through ``sanitize_message`` so labelled secrets never reach the
output.
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timezone

PACKAGE_LOGGER = "solana_quick_wallet"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_STREAMS = ("stdout", "stderr")

# A base58 secret key is the same length as a transaction signature, so only
# values behind a label are redacted.
SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (
        re.compile(
            r"((?:private|secret)[_-]?key['\"]?\s*[:=]\s*['\"]?)[^\s'\",]+",
            re.IGNORECASE,
        ),
        r"\1[REDACTED]",
    ),
    (
        re.compile(r"(seed(?:[_-]?phrase)?['\"]?\s*[:=]\s*['\"]?)[^'\"\n]+", re.IGNORECASE),
        r"\1[REDACTED]",
    ),
]


@dataclass
class LoggingConfig:
    level: str = "INFO"
    stream: str = "stdout"
    json_format: bool = False

    @classmethod
    def from_environment(cls) -> "LoggingConfig":
        """Read ``SOLANA_WALLET_LOG_LEVEL``, ``_STREAM`` and ``_FORMAT``.

        Unknown values fall back to the defaults.
        """
        level = os.getenv("SOLANA_WALLET_LOG_LEVEL", "INFO").upper()
        stream = os.getenv("SOLANA_WALLET_LOG_STREAM", "stdout").lower()
        log_format = os.getenv("SOLANA_WALLET_LOG_FORMAT", "human").lower()
        return cls(
            level=level if level in LOG_LEVELS else "INFO",
            stream=stream if stream in LOG_STREAMS else "stdout",
            json_format=log_format == "json",
        )


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


class SanitizingFormatter(logging.Formatter):
    """Render records as text or one JSON object per line, secrets redacted."""

    def __init__(self, json_format: bool = False):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        if not self.json_format:
            return sanitize_message(super().format(record))

        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_message(record.getMessage()),
        }
        if record.exc_info:
            payload["exception"] = sanitize_message(self.formatException(record.exc_info))
        return json.dumps(payload, default=str)


def setup_logging(config: LoggingConfig | None = None) -> logging.Handler:
    """Attach a sanitizing stream handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    The root logger is never touched.
    """
    if config is None:
        config = LoggingConfig.from_environment()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        if isinstance(handler.formatter, SanitizingFormatter):
            package_logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(
        sys.stderr if config.stream == "stderr" else sys.stdout
    )
    handler.setFormatter(SanitizingFormatter(json_format=config.json_format))
    package_logger.addHandler(handler)
    package_logger.setLevel(config.level)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = [
    "LoggingConfig",
    "SanitizingFormatter",
    "get_logger",
    "sanitize_message",
    "setup_logging",
]
