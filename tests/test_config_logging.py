import json
import logging

import pytest

from babyweather_app.config import AdvisorConfig
from babyweather_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    correlation_context,
    log_event,
    operation_context,
    redact_for_log,
)


def _clear_env(monkeypatch):
    for key in (
        "APP_ENV",
        "APP_CONFIG_PATH",
        "ADVISOR_CONFIG_DIR",
        "LOG_LEVEL",
        "TIP_SEED",
        "DEFAULT_MODE",
        "DEFAULT_AGE_MONTHS",
        "DEFAULT_WEIGHT_PERCENTILE",
    ):
        monkeypatch.delenv(key, raising=False)


def test_config_defaults(monkeypatch):
    _clear_env(monkeypatch)
    config = AdvisorConfig.from_env()
    assert config.log_level == "INFO"
    assert config.tip_seed is None
    assert config.default_mode == "stroller"
    assert config.default_age_months == 6
    assert config.default_weight_percentile == 50.0


def test_config_reads_environment_yaml(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    env_dir = tmp_path / "environments"
    env_dir.mkdir()
    (env_dir / "dev.yaml").write_text(
        "# local testing\nlog_level: debug\ntip_seed: '42'\ndefault_mode: \"carrier\"\ndefault_age_months: 3\n"
    )
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("ADVISOR_CONFIG_DIR", str(env_dir))

    config = AdvisorConfig.from_env()
    assert config.environment == "dev"
    assert config.log_level == "DEBUG"
    assert config.tip_seed == 42
    assert config.default_mode == "carrier"
    assert config.default_age_months == 3
    assert config.source == str(env_dir / "dev.yaml")


def test_environment_variables_win_over_yaml(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    config_file = tmp_path / "advisor.yaml"
    config_file.write_text("tip_seed: 1\ndefault_weight_percentile: 30\n")
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("TIP_SEED", "9")

    config = AdvisorConfig.from_env()
    assert config.tip_seed == 9
    assert config.default_weight_percentile == 30.0


def test_redaction_masks_location_and_email():
    payload = {
        "city": "Berlin",
        "latitude": 52.5,
        "notes": ["mail parent@example.org", "https://example.org/forecast"],
        "band": "cold",
    }
    scrubbed = redact_for_log(payload)
    assert scrubbed["city"] == "[redacted]"
    assert scrubbed["latitude"] == "[redacted]"
    assert scrubbed["notes"] == ["mail [redacted-email]", "[redacted-url]"]
    assert scrubbed["band"] == "cold"


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("advisor", logging.INFO, __file__, 1, "recommendation_computed", None, None)
    record.event = "recommendation_computed"
    record.band = "kühl"
    record.location = "Küche"

    with correlation_context("abc123"):
        payload = json.loads(JsonFormatter().format(record))

    assert payload["event"] == "recommendation_computed"
    assert payload["correlation_id"] == "abc123"
    assert payload["band"] == "kühl"
    assert payload["location"] == "[redacted]"


def test_log_event_attaches_correlation_id(caplog):
    logger = logging.getLogger("tests.logging")
    caplog.set_level(logging.INFO)
    with correlation_context("corr-1"):
        log_event(logger, logging.INFO, "alternative_swapped", slot="outer", city="Köln")

    record = caplog.records[-1]
    assert record.event == "alternative_swapped"
    assert record.correlation_id == "corr-1"
    assert record.slot == "outer"
    assert record.city == "[redacted]"


def test_unknown_default_mode_rejected(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("DEFAULT_MODE", "bicycle")
    with pytest.raises(ValueError):
        AdvisorConfig.from_env()


def test_operation_context_restores_previous_id():
    with correlation_context("outer-id"):
        with operation_context("recommend") as scoped:
            assert scoped == "outer-id"
        with operation_context("recommend", correlation_id="inner-id") as scoped:
            assert scoped == "inner-id"
        assert CORRELATION_ID.get() == "outer-id"


def test_log_event_outside_a_scope_does_not_pin_an_id(caplog):
    logger = logging.getLogger("tests.logging")
    caplog.set_level(logging.INFO)
    token = CORRELATION_ID.set(None)
    try:
        log_event(logger, logging.INFO, "alternative_swapped", slot="bottom")
        log_event(logger, logging.INFO, "alternative_swapped", slot="outer")
        assert CORRELATION_ID.get() is None
    finally:
        CORRELATION_ID.reset(token)

    first, second = caplog.records[-2:]
    assert first.correlation_id and second.correlation_id
    assert first.correlation_id != second.correlation_id
