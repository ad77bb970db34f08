"""Tests for telemetry models."""

import json

import pydantic
import pytest

from wifi_stats.models import (
    DiagnosticReport,
    DnsLookupResult,
    InternetSection,
    PingResult,
    ReportMeta,
    SpeedTestResult,
    WifiStats,
)


class TestProbeOutcome:
    """Tests for the failed/partial semantics shared by probe results."""

    def test_complete_result_is_not_failed(self):
        result = PingResult(target="1.1.1.1", samples=4, avg_ms=10.0, jitter_ms=1.0, loss_pct=0.0)
        assert not result.failed

    def test_error_marks_failure_even_with_metrics(self):
        result = PingResult(target="1.1.1.1", samples=4, avg_ms=10.0, error="ping: sendto failed")
        assert result.failed
        assert result.avg_ms == 10.0

    def test_all_metrics_missing_is_failure(self):
        assert PingResult(target="1.1.1.1", samples=4).failed
        assert DnsLookupResult(host="example.com").failed
        assert SpeedTestResult().failed

    def test_partial_metrics_are_not_failure(self):
        result = PingResult(target="1.1.1.1", samples=4, loss_pct=0.0)
        assert not result.failed

    def test_zero_is_a_measurement(self):
        assert not DnsLookupResult(host="example.com", lookup_ms=0).failed


class TestImmutability:
    def test_records_are_frozen(self):
        wifi = WifiStats(ssid="MyHome")
        with pytest.raises(pydantic.ValidationError):
            wifi.ssid = "Other"


class TestDiagnosticReport:
    def test_empty_report_serializes_every_field(self):
        """A report with nothing collected still carries explicit nulls."""
        report = DiagnosticReport(
            internet=InternetSection(target="1.1.1.1"),
            meta=ReportMeta(samples=12, internet_host="1.1.1.1", dns_host="cloudflare.com"),
        )

        data = json.loads(report.model_dump_json())

        assert data["wifi"] is None
        assert data["router"] == {"gateway": None, "ping": None}
        assert data["internet"] == {"target": "1.1.1.1", "ping": None}
        assert data["dns"] == {"server": None, "source": "system", "lookup": None}
        assert data["speedtest"] is None
        assert data["meta"]["samples"] == 12
        assert data["timestamp"]
