"""
Configuration and Logging Tests
===============================

Author: Tikun13 Team
Version: 1.0.0
"""

import logging

import pytest
import structlog


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        from tikun13.config import Settings

        config = Settings()

        assert config.ocsf_version == "1.6.0"
        assert config.uid_prefix == "tikun13"
        assert config.product == {
            "name": "Tikun13 Compliance Checker",
            "vendor_name": "Amendment 13 Assessment Tool",
            "version": "1.0.0",
        }

    def test_environment_override(self, monkeypatch):
        from tikun13.config import Settings

        monkeypatch.setenv("PRODUCT_VERSION", "2.1.0")
        monkeypatch.setenv("REDACTED_ANSWER_FIELDS", '["dpo_name"]')

        config = Settings()

        assert config.product_version == "2.1.0"
        assert config.redacted_answer_fields == ["dpo_name"]

    def test_exporter_uses_configured_product(self, fixed_clock):
        from tikun13.config import Settings
        from tikun13.ocsf.exporter import OCSFExporter

        exporter = OCSFExporter(
            clock=fixed_clock,
            config=Settings(product_version="9.9.9", uid_prefix="acme"),
        )
        finding = exporter.export_compliance_findings(
            {"violations": [{"category": "dpo", "severity": "high"}]}, {}
        ).findings[0]

        assert finding.metadata.product.version == "9.9.9"
        assert finding.finding_info.uid.startswith("acme-")


class TestLogging:
    """Tests for structured logging setup."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        structlog.reset_defaults()

    def test_setup_configures_root_logger(self):
        from tikun13.logging import setup_logging

        setup_logging(level="DEBUG", json_output=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_output_includes_correlation_id(self, capsys):
        from tikun13.logging import get_logger, set_correlation_id, setup_logging

        setup_logging(level="INFO", json_output=True)
        cid = set_correlation_id("export-42")
        get_logger("tikun13.test").info("report_exported", findings=3)

        out = capsys.readouterr().out
        assert cid == "export-42"
        assert '"correlation_id": "export-42"' in out
        assert '"findings": 3' in out
        assert '"service": "tikun13"' in out

    def test_invalid_level_falls_back_to_info(self):
        from tikun13.logging import setup_logging

        setup_logging(level="chatty", json_output=False)

        assert logging.getLogger().level == logging.INFO

    def test_defaults_come_from_settings(self, monkeypatch, capsys):
        from tikun13.config import get_settings
        from tikun13.logging import get_logger, setup_logging

        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_JSON", "false")
        get_settings.cache_clear()
        try:
            setup_logging()
            get_logger("tikun13.test").warning("plain_output")
        finally:
            get_settings.cache_clear()

        assert logging.getLogger().level == logging.WARNING
        out = capsys.readouterr().out
        assert "plain_output" in out
        assert not out.lstrip().startswith("{")

    def test_explicit_arguments_override_settings(self, monkeypatch):
        from tikun13.config import get_settings
        from tikun13.logging import setup_logging

        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        get_settings.cache_clear()
        try:
            setup_logging(level="DEBUG")
        finally:
            get_settings.cache_clear()

        assert logging.getLogger().level == logging.DEBUG
