"""
Structured Logging Configuration Module

Ledger modules log through logging.getLogger(__name__) under the
"bank_ledger" namespace. setup_logging() attaches a handler to that
namespace using the level and format from LedgerConfig; log_action()
emits records carrying the account id and action as structured fields.
"""

import logging
import json
from datetime import datetime
from typing import Optional

from .config import LedgerConfig, get_config


ROOT_LOGGER = "bank_ledger"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(account_id)s] %(message)s"

# Attributes log_action may attach to a record
STRUCTURED_FIELDS = ("account_id", "action", "resource", "correlation_id", "extra")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with ledger fields at the top level"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in STRUCTURED_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_entry[field] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain-text formatter; records without an account show '-'"""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record):
        if getattr(record, "account_id", None) is None:
            record.account_id = "-"
        return super().format(record)


def setup_logging(config: Optional[LedgerConfig] = None,
                  logger_name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Configure the ledger's logger from settings.

    Args:
        config: Settings supplying log_level and log_format (global config if omitted)
        logger_name: Logger to configure; defaults to the package namespace

    Returns:
        Configured logger instance
    """
    config = config or get_config()
    logger = logging.getLogger(logger_name)

    # Calling twice must not double every line
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if config.log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.log_level.upper()))
    logger.propagate = False

    return logger


def log_action(logger: logging.Logger, level: str, message: str,
               account_id: Optional[str] = None, action: Optional[str] = None,
               resource: Optional[str] = None, correlation_id: Optional[str] = None,
               extra: Optional[dict] = None):
    """
    Log a ledger event with structured fields.

    Args:
        logger: Logger instance
        level: Log level name (debug, info, warning, ...)
        message: Log message
        account_id: Account the event concerns
        action: Operation name, e.g. "withdraw" or "transfer_min_funds"
        resource: Resource being acted upon
        correlation_id: Correlation ID for tracing
        extra: Amounts and other event data
    """
    levelno = getattr(logging, level.upper())
    if not logger.isEnabledFor(levelno):
        return

    fields = {
        "account_id": account_id,
        "action": action,
        "resource": resource,
        "correlation_id": correlation_id,
        "extra": extra,
    }
    logger.log(levelno, message, extra={k: v for k, v in fields.items() if v is not None})
