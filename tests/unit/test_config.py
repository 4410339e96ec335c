"""Unit tests for settings and logging setup"""

import json
import logging
import pytest
from pydantic import ValidationError
from credit_analyzer.config import Settings
from credit_analyzer.infrastructure.observability.logging import log_payoff_plan, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back after a test reconfigures it"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_settings_defaults():
    """Test defaults without environment overrides"""
    settings = Settings()

    assert settings.service_name == "credit-analyzer"
    assert settings.max_payoff_months == 1200


def test_settings_from_environment(monkeypatch):
    """Test environment variables override defaults"""
    monkeypatch.setenv("MAX_PAYOFF_MONTHS", "240")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.max_payoff_months == 240
    assert settings.log_level == "DEBUG"


def test_settings_validation():
    """Test invalid values are rejected"""
    with pytest.raises(ValidationError):
        Settings(log_level="VERBOSE")
    with pytest.raises(ValidationError):
        Settings(max_payoff_months=0)


def test_setup_logging_emits_json(capsys, restore_root_logger):
    """Test structured logs carry service metadata and extra fields"""
    setup_logging("INFO")

    log_payoff_plan("snowball", debt_count=2, months_to_debt_free=10, total_interest=0.0, duration_ms=1.5)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "Payoff plan completed"
    assert payload["level"] == "INFO"
    assert payload["service"] == "credit-analyzer"
    assert payload["strategy"] == "snowball"
    assert payload["months_to_debt_free"] == 10
