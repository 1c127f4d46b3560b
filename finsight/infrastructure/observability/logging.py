"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from finsight.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: Optional[str] = None) -> None:
    """Configure structured JSON logging at `level`, or the configured log level"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_report(
    request_id: str,
    total_score: int,
    status: str,
    leak_count: int,
    duration_ms: float,
) -> None:
    """Log structured growth report outcome for analysis"""
    logging.info(
        "Growth report completed",
        extra={
            "request_id": request_id,
            "step": "growth_report_complete",
            "finsight_score": total_score,
            "finsight_status": status,
            "leak_count": leak_count,
            "duration_ms": duration_ms,
        },
    )


def log_simulation(request_id: str, scenario: str, annual_impact: float, duration_ms: float) -> None:
    logging.info(
        "Simulation completed",
        extra={
            "request_id": request_id,
            "step": "simulation_complete",
            "scenario": scenario,
            "annual_impact": annual_impact,
            "duration_ms": duration_ms,
        },
    )


def log_settlement(
    request_id: str,
    people: int,
    settlement_count: int,
    total_settled: float,
    duration_ms: float,
) -> None:
    logging.info(
        "Settlement completed",
        extra={
            "request_id": request_id,
            "step": "settlement_complete",
            "people": people,
            "settlement_count": settlement_count,
            "total_settled": total_settled,
            "duration_ms": duration_ms,
        },
    )
