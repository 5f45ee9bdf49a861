from __future__ import annotations

import json
import logging
import logging.config
import re
from datetime import datetime, timezone
from typing import Any

from charge_gateway.core.config import settings

_STANDARD_ATTRS = set(logging.makeLogRecord({}).__dict__.keys())

# Stripe secret and restricted keys
_SECRET_KEY_PATTERN = re.compile(r"\b([sr]k_(?:test|live)_)([A-Za-z0-9]+)")


def mask_secrets(value: Any) -> Any:
    """Replace Stripe keys in strings (nested in dicts/lists too) with a masked form."""
    if isinstance(value, str):
        return _SECRET_KEY_PATTERN.sub(lambda m: f"{m.group(1)}****{m.group(2)[-4:]}", value)
    if isinstance(value, dict):
        return {key: mask_secrets(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(mask_secrets(item) for item in value)
    return value


class SecretMaskingFilter(logging.Filter):
    """Masks Stripe keys in the rendered message and in ``extra`` fields."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = mask_secrets(record.getMessage())
        record.args = None
        for key, value in list(record.__dict__.items()):
            if key not in _STANDARD_ATTRS:
                setattr(record, key, mask_secrets(value))
        return True


class JsonFormatter(logging.Formatter):
    """Basic JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        message = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            message["exc_info"] = self.formatException(record.exc_info)

        extra = {key: value for key, value in record.__dict__.items() if key not in _STANDARD_ATTRS}
        if extra:
            message["extra"] = extra

        return json.dumps(message, default=str)


def setup_logging(level_name: str | None = None) -> None:
    """Apply centralized logging configuration."""
    level = getattr(logging, (level_name or settings.LOG_LEVEL).upper(), logging.INFO)
    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "mask_secrets": {
                "()": SecretMaskingFilter,
            }
        },
        "formatters": {
            "json": {
                "()": JsonFormatter,
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "filters": ["mask_secrets"],
            }
        },
        "root": {
            "handlers": ["default"],
            "level": level,
        },
        "loggers": {
            # httpx logs every request line at INFO
            "httpx": {"level": max(level, logging.WARNING)},
        },
    }

    logging.config.dictConfig(logging_config)
