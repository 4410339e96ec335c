"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from credit_analyzer.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


logger = logging.getLogger("credit_analyzer")


def log_score_estimate(score: int, score_range: str, composite: float, duration_ms: float) -> None:
    """Log structured score estimate outcome"""
    logger.info(
        "Score estimate completed",
        extra={
            "step": "score_estimate",
            "score": score,
            "score_range": score_range,
            "composite": composite,
            "duration_ms": duration_ms,
        },
    )


def log_payoff_plan(
    strategy: str,
    debt_count: int,
    months_to_debt_free: int,
    total_interest: float,
    duration_ms: float,
) -> None:
    """Log structured payoff plan outcome"""
    logger.info(
        "Payoff plan completed",
        extra={
            "step": "payoff_plan",
            "strategy": strategy,
            "debt_count": debt_count,
            "months_to_debt_free": months_to_debt_free,
            "total_interest": round(total_interest, 2),
            "duration_ms": duration_ms,
        },
    )


def log_simulation(simulation_type: str, current_score: int, projected_score: int, duration_ms: float) -> None:
    """Log structured what-if simulation outcome"""
    logger.info(
        "Credit simulation completed",
        extra={
            "step": "credit_simulation",
            "simulation_type": simulation_type,
            "current_score": current_score,
            "projected_score": projected_score,
            "score_change": projected_score - current_score,
            "duration_ms": duration_ms,
        },
    )
