"""Concurrent collection of every probe into one report."""

import asyncio
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .config import Settings, get_settings
from .diagnostics.connectivity import GatewayProbe, PingProbe
from .diagnostics.dns import DnsLookupProbe, DnsServerProbe
from .diagnostics.platform import CommandExecutor, get_executor, get_platform
from .diagnostics.speedtest import SpeedTestProbe
from .diagnostics.wifi import WifiProbe
from .exceptions import UsageError
from .logging_config import EventSink, NullSink, get_logger
from .models import (
    DiagnosticReport,
    DnsLookupResult,
    DnsSection,
    DnsSource,
    InternetSection,
    PingResult,
    ReportMeta,
    RouterSection,
    SpeedTestResult,
)

logger = get_logger("wifi_stats.collector")


class CollectionOptions(BaseModel):
    """Parameters for one collection run.

    Unset targets fall back to the configured defaults. Invalid values raise
    UsageError at construction, before any probe can run.
    """

    samples: int = Field(default_factory=lambda: get_settings().samples)
    internet_host: str = Field(default_factory=lambda: get_settings().internet_host)
    router_host: str | None = None
    dns_host: str = Field(default_factory=lambda: get_settings().dns_host)
    dns_server: str | None = None
    speedtest: bool = False

    @field_validator("samples")
    @classmethod
    def _positive_samples(cls, value: int) -> int:
        if value < 1:
            raise UsageError("--samples must be a positive integer.")
        return value

    @field_validator("internet_host", "dns_host")
    @classmethod
    def _non_empty_host(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise UsageError(f"--{info.field_name.replace('_', '-')} must not be empty.")
        return value

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "CollectionOptions":
        """Options populated from ``settings``; ``None`` overrides are ignored."""
        values = {
            "samples": settings.samples,
            "internet_host": settings.internet_host,
            "dns_host": settings.dns_host,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


def classify_dns_source(
    server: str | None,
    gateway: str | None,
    overridden: bool = False,
) -> DnsSource:
    """Describe where the DNS server address came from."""
    if overridden:
        return "override"
    if server and gateway and server == gateway:
        return "router"
    return "system"


class DiagnosticCollector:
    """Run all probes concurrently and fold them into a DiagnosticReport.

    Wi-Fi, gateway and DNS-server discovery start together with the
    internet ping and the speed test. The router ping waits only for the
    gateway and the DNS lookup only for the DNS server. Every probe is
    joined before the report is built.
    """

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        sink: EventSink | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.executor = executor or get_executor(self.settings.command_timeout)
        self.sink = sink or NullSink()

        probe_kwargs = {"executor": self.executor, "sink": self.sink, "settings": self.settings}
        self.wifi = WifiProbe(**probe_kwargs)
        self.gateway = GatewayProbe(**probe_kwargs)
        self.ping = PingProbe(**probe_kwargs)
        self.dns_server = DnsServerProbe(**probe_kwargs)
        self.dns_lookup = DnsLookupProbe(**probe_kwargs)
        self.speedtest = SpeedTestProbe(**probe_kwargs)

    async def collect(self, options: CollectionOptions) -> DiagnosticReport:
        """
        Collect a full report.

        Args:
            options: Targets, sample count and optional probes

        Returns:
            DiagnosticReport; probe failures are recorded in it, not raised
        """
        self.sink.emit("info", "wifi-stats.start", {"options": options.model_dump()})

        gateway_task = asyncio.create_task(self._resolve_gateway(options))
        dns_server_task = asyncio.create_task(self._resolve_dns_server(options))

        async def ping_router() -> PingResult | None:
            gateway = await gateway_task
            if not gateway:
                return None
            return await self.ping.run(gateway, options.samples)

        async def lookup() -> DnsLookupResult:
            server = await dns_server_task
            return await self.dns_lookup.run(options.dns_host, server)

        async def run_speedtest() -> SpeedTestResult | None:
            if not options.speedtest:
                return None
            return await self.speedtest.run()

        (
            wifi,
            gateway,
            dns_server,
            router_ping,
            internet_ping,
            dns_result,
            speedtest_result,
        ) = await asyncio.gather(
            self.wifi.run(),
            gateway_task,
            dns_server_task,
            ping_router(),
            self.ping.run(options.internet_host, options.samples),
            lookup(),
            run_speedtest(),
        )

        report = DiagnosticReport(
            wifi=wifi,
            router=RouterSection(gateway=gateway, ping=router_ping),
            internet=InternetSection(target=options.internet_host, ping=internet_ping),
            dns=DnsSection(
                server=dns_server,
                source=classify_dns_source(
                    dns_server, gateway, overridden=options.dns_server is not None
                ),
                lookup=dns_result,
            ),
            speedtest=speedtest_result,
            meta=ReportMeta(
                samples=options.samples,
                internet_host=options.internet_host,
                dns_host=options.dns_host,
                speedtest=options.speedtest,
                platform=get_platform().value,
            ),
        )

        logger.debug(f"Collected report at {report.timestamp.isoformat()}")
        return report

    async def _resolve_gateway(self, options: CollectionOptions) -> str | None:
        if options.router_host:
            return options.router_host
        return await self.gateway.run()

    async def _resolve_dns_server(self, options: CollectionOptions) -> str | None:
        if options.dns_server:
            return options.dns_server
        return await self.dns_server.run()


def has_errors(report: DiagnosticReport) -> bool:
    """
    Whether any mandatory probe is missing or failed.

    The speed test only counts when it was requested.
    """
    if report.wifi is None or report.router.gateway is None or report.dns.server is None:
        return True

    for outcome in (report.router.ping, report.internet.ping, report.dns.lookup):
        if outcome is None or outcome.failed:
            return True

    if report.meta.speedtest and (report.speedtest is None or report.speedtest.failed):
        return True

    return False


async def collect_report(
    options: CollectionOptions,
    executor: CommandExecutor | None = None,
    sink: EventSink | None = None,
    settings: Settings | None = None,
) -> tuple[DiagnosticReport, bool]:
    """Collect a report and its overall error flag."""
    collector = DiagnosticCollector(executor=executor, sink=sink, settings=settings)
    report = await collector.collect(options)
    had_error = has_errors(report)
    collector.sink.emit("success", "wifi-stats.complete", {"had_error": had_error})
    return report, had_error
