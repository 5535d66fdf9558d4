"""Logging setup: human-readable status lines or structured JSON"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from solid_payments.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure root logger to write to stdout in "text" or "json" format"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s"
        )
    else:
        formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_payment_pass(
    amount: float,
    gateway_count: int,
    success_count: int,
    duration_ms: float,
) -> None:
    """Log summary of one processing pass"""
    logging.getLogger(__name__).debug(
        "Payment pass completed",
        extra={
            "step": "payment_pass_complete",
            "amount": amount,
            "gateway_count": gateway_count,
            "success_count": success_count,
            "duration_ms": duration_ms,
        },
    )
