"""Pydantic models for collected network telemetry."""

from datetime import datetime, timezone
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field


class TelemetryModel(BaseModel):
    """Immutable base for every record produced during a run."""

    model_config = ConfigDict(frozen=True)


class WifiStats(TelemetryModel):
    """Wi-Fi radio state parsed from the adapter tools."""

    ssid: str | None = None
    bssid: str | None = None
    signal_dbm: int | None = None
    noise_dbm: int | None = None
    channel: int | None = None
    band: str | None = Field(
        default=None,
        description="Frequency band derived from the channel, e.g. '5 GHz'",
    )
    link_rate_mbps: int | None = None


class PingStats(TelemetryModel):
    """Statistics from one ping run."""

    avg_ms: float | None = None
    jitter_ms: float | None = Field(
        default=None,
        description="Round-trip standard deviation, used as a jitter proxy",
    )
    loss_pct: float | None = Field(default=None, description="Packet loss, 0-100")


class ProbeOutcome(TelemetryModel):
    """Result of a probe that reports against a target.

    ``error`` and the metric values are not mutually exclusive: a probe may
    return usable metrics together with an advisory error from the process.
    """

    metric_fields: ClassVar[tuple[str, ...]] = ()

    error: str | None = None

    @property
    def failed(self) -> bool:
        """True if an error is attached or no metric could be determined."""
        if self.error is not None:
            return True
        if not self.metric_fields:
            return False
        return all(getattr(self, name) is None for name in self.metric_fields)


class PingResult(ProbeOutcome, PingStats):
    """Ping statistics for a single target."""

    metric_fields: ClassVar[tuple[str, ...]] = ("avg_ms", "jitter_ms", "loss_pct")

    target: str
    samples: int


class DnsLookupResult(ProbeOutcome):
    """Timing of one DNS query."""

    metric_fields: ClassVar[tuple[str, ...]] = ("lookup_ms",)

    host: str
    server: str | None = None
    lookup_ms: int | None = None


class SpeedTestMetadata(TelemetryModel):
    """Metadata echoed verbatim from the throughput tool."""

    start_date: str | None = None
    end_date: str | None = None
    os_version: str | None = None


class SpeedTestResult(ProbeOutcome):
    """Throughput test measurements."""

    metric_fields: ClassVar[tuple[str, ...]] = (
        "download_mbps",
        "upload_mbps",
        "base_rtt_ms",
        "responsiveness_ms",
    )

    download_mbps: int | None = None
    upload_mbps: int | None = None
    base_rtt_ms: float | None = None
    responsiveness_ms: float | None = None
    interface_name: str | None = None
    endpoint: str | None = None
    raw: SpeedTestMetadata | None = None


class RouterSection(TelemetryModel):
    gateway: str | None = None
    ping: PingResult | None = None


class InternetSection(TelemetryModel):
    target: str
    ping: PingResult | None = None


DnsSource = Literal["router", "system", "override"]


class DnsSection(TelemetryModel):
    server: str | None = None
    source: DnsSource = "system"
    lookup: DnsLookupResult | None = None


class ReportMeta(TelemetryModel):
    """How the collection was parameterized."""

    samples: int
    internet_host: str
    dns_host: str
    speedtest: bool = False
    platform: str = "unknown"


class DiagnosticReport(TelemetryModel):
    """Everything collected in one run.

    Each section is independently nullable or error-carrying; a report can
    always be built, even when every probe failed.
    """

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    wifi: WifiStats | None = None
    router: RouterSection = Field(default_factory=RouterSection)
    internet: InternetSection
    dns: DnsSection = Field(default_factory=DnsSection)
    speedtest: SpeedTestResult | None = None
    meta: ReportMeta
