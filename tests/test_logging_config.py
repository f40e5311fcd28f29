"""Tests for logging configuration helpers."""

import logging

import pytest

from job_planner.logging_config import (
    format_company_name,
    format_display_value,
    format_job_title,
    get_structured_logger,
    setup_logging,
)


class TestFormatDisplayValue:
    """Test display truncation for console logs."""

    def test_short_value_unchanged(self):
        assert format_display_value("Acme", 20) == ("Acme", "Acme")

    def test_long_value_truncated(self):
        full, display = format_display_value("Very Long Company Name That Exceeds Limit", 20)
        assert full == "Very Long Company Name That Exceeds Limit"
        assert display == "Very Long Company..."
        assert len(display) == 20

    def test_no_truncation_when_disabled(self):
        value = "x" * 200
        assert format_display_value(value, 0) == (value, value)

    def test_tiny_limit(self):
        assert format_display_value("abcdef", 2) == ("abcdef", "ab")

    def test_empty(self):
        assert format_display_value(None, 10) == ("", "")


class TestConfiguredLimits:
    """Test limits read from config/logging.yaml."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        _, display = format_job_title("t" * 100)
        assert len(display) == 60
        _, display = format_company_name("c" * 100)
        assert len(display) == 80

    def test_yaml_override(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "logging.yaml").write_text(
            "console:\n  max_job_title_length: 10\n"
        )
        _, display = format_job_title("Principal Software Engineer")
        assert display == "Princip..."
        # Unset keys keep their defaults
        _, display = format_company_name("c" * 100)
        assert len(display) == 80

    def test_explicit_limit_wins(self):
        assert format_company_name("Northwind Technology", max_length=8)[1] == "North..."


class TestStructuredLogger:
    """Test structured log messages."""

    @pytest.fixture
    def slogger(self):
        return get_structured_logger("job_planner.test")

    def test_filter_activity(self, slogger, caplog):
        with caplog.at_level(logging.INFO):
            slogger.filter_activity(10, 3, {"country": "US"})
        assert "[FILTER] 3/10 jobs matched | country=US" in caplog.text

    def test_export_failed_logs_error(self, slogger, caplog):
        with caplog.at_level(logging.INFO):
            slogger.export_activity("csv", "out.csv", 0, status="failed")
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert "[EXPORT:CSV] FAILED - out.csv | records=0" in record.getMessage()

    def test_catalog_activity(self, slogger, caplog):
        with caplog.at_level(logging.INFO):
            slogger.catalog_activity("load", "data/jobpostings.json", {"records": 3})
        assert "[CATALOG] LOAD - data/jobpostings.json | records=3" in caplog.text

    def test_job_activity_truncates(self, slogger, caplog, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with caplog.at_level(logging.INFO):
            slogger.job_activity("T" * 100, "Acme", "saved")
        assert f"[JOB] SAVED - {'T' * 57}... @ Acme" in caplog.text


class TestSetupLogging:
    """Test root logger configuration."""

    def test_env_overrides(self, tmp_path, monkeypatch):
        log_file = tmp_path / "logs" / "custom.log"
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FILE", str(log_file))

        setup_logging()

        assert logging.getLogger().level == logging.DEBUG
        assert log_file.exists()

    def test_invalid_level_falls_back_to_info(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        setup_logging(log_file=str(tmp_path / "app.log"))
        assert logging.getLogger().level == logging.INFO
